"""Manifest registry mapping manifest kinds to their payloads."""

import logging
import threading
from enum import Enum
from pathlib import Path

from kmachine.utils.errors import UnknownManifestKindError

logger = logging.getLogger(__name__)

# Template directory containing the built-in manifests
_TEMPLATE_DIR = Path(__file__).parent / "templates"

# Lock for thread-safe payload caching
_payload_lock = threading.Lock()

_payloads: dict["ManifestKind", bytes] = {}


class ManifestKind(str, Enum):
    """Supported cluster add-on manifests."""

    DNS = "dns"
    HELM = "helm"
    DASHBOARD = "dashboard"

    def __str__(self) -> str:
        return self.value


MANIFEST_DESCRIPTIONS: dict[ManifestKind, str] = {
    ManifestKind.DNS: "Cluster DNS service (kube-dns with skydns and kube2sky)",
    ManifestKind.HELM: "Helm package manager control plane (expandybird, resourcifier, manager)",
    ManifestKind.DASHBOARD: "Kubernetes dashboard web UI",
}


def available_kinds() -> list[str]:
    """Return the supported manifest kind identifiers in declaration order."""
    return [kind.value for kind in ManifestKind]


def parse_kind(kind: "str | ManifestKind") -> ManifestKind:
    """Convert a manifest kind identifier into a ManifestKind.

    Matching is case-sensitive and exact: ``"DNS"`` and ``" dns"`` are not
    recognized.

    Args:
        kind: Manifest kind identifier

    Returns:
        Matching ManifestKind

    Raises:
        UnknownManifestKindError: If the identifier is not a supported kind
    """
    if isinstance(kind, ManifestKind):
        return kind
    try:
        return ManifestKind(kind)
    except ValueError as e:
        raise UnknownManifestKindError(kind, available_kinds()) from e


def _load_payload(kind: ManifestKind) -> bytes:
    """Read a built-in manifest from the templates directory.

    Raises:
        FileNotFoundError: If the manifest file is missing from the package
    """
    template_path = _TEMPLATE_DIR / f"{kind.value}.yaml"

    if not template_path.exists():
        raise FileNotFoundError(f"Built-in manifest not found: {template_path}")

    payload = template_path.read_bytes()
    logger.debug(f"Loaded manifest '{kind.value}' ({len(payload)} bytes)")
    return payload


def lookup(kind: "str | ManifestKind") -> bytes:
    """Look up the payload for a manifest kind.

    Thread-safe lazy loading with caching, so every caller in the process
    sees the same immutable bytes.

    Args:
        kind: Manifest kind identifier or ManifestKind

    Returns:
        Manifest payload bytes

    Raises:
        UnknownManifestKindError: If the kind is not supported
    """
    manifest_kind = parse_kind(kind)

    payload = _payloads.get(manifest_kind)
    if payload is not None:
        return payload

    with _payload_lock:
        # Double-check after acquiring lock
        payload = _payloads.get(manifest_kind)
        if payload is None:
            payload = _load_payload(manifest_kind)
            _payloads[manifest_kind] = payload
    return payload
