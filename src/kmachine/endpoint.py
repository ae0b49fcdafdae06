"""Cluster control-plane endpoint derivation."""

import re
from dataclasses import dataclass

from kmachine.utils.errors import MalformedURLError

CLUSTER_API_SCHEME = "https"
CLUSTER_API_PORT = 6443

_HOST_PATTERN = re.compile(r"[A-Za-z0-9._\-]+")


@dataclass(frozen=True)
class ClusterEndpoint:
    """Management API endpoint of a cluster."""

    host: str
    scheme: str = CLUSTER_API_SCHEME
    port: int = CLUSTER_API_PORT

    @property
    def url(self) -> str:
        return f"{self.scheme}://{self.host}:{self.port}"

    def __str__(self) -> str:
        return self.url


def derive_cluster_endpoint(connection_url: str) -> ClusterEndpoint:
    """Derive the cluster API endpoint from a host connection URL.

    The scheme and port of the connection URL are discarded; only the
    host is kept. For ``tcp://192.168.99.100:2376`` the result is
    ``https://192.168.99.100:6443``. When the URL lists several
    ``host:port`` pairs separated by commas, the first host is used.

    Args:
        connection_url: Host connection URL of the form scheme://host:port

    Returns:
        ClusterEndpoint for the host

    Raises:
        MalformedURLError: If the URL does not have the scheme://host:port shape
    """
    url = (connection_url or "").strip()

    if "://" not in url:
        raise MalformedURLError(connection_url, "missing '://' scheme separator")

    _, remainder = url.split("://", 1)

    if ":" not in remainder:
        raise MalformedURLError(connection_url, "missing ':' between host and port")

    host = remainder.split(":", 1)[0].split(",", 1)[0]

    if not host:
        raise MalformedURLError(connection_url, "empty host")

    if not _HOST_PATTERN.fullmatch(host):
        raise MalformedURLError(connection_url, f"invalid host '{host}'")

    return ClusterEndpoint(host=host)
