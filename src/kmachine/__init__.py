"""Deploy cluster add-ons onto hosts provisioned with docker-machine.

Derives a host's Kubernetes API endpoint from its connection URL and
submits one of the built-in add-on manifests (dns, helm, dashboard) to it.
"""

from importlib.metadata import PackageNotFoundError, version

from kmachine.deploy import DeployResult, deploy
from kmachine.endpoint import ClusterEndpoint, derive_cluster_endpoint

# Read version from package metadata with fallback
try:
    __version__ = version("kmachine-deploy")
except PackageNotFoundError:
    # Fallback for development/testing environments
    __version__ = "0.1.0"

__all__ = [
    "ClusterEndpoint",
    "DeployResult",
    "__version__",
    "deploy",
    "derive_cluster_endpoint",
]
