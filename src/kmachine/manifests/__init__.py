"""Built-in cluster add-on manifests.

Each supported manifest kind maps to one static payload shipped as a YAML
file under ``templates/``. Payloads are opaque to kmachine: they are read
once, cached as bytes and forwarded to the cluster unchanged.
"""

from kmachine.manifests.registry import (
    MANIFEST_DESCRIPTIONS,
    ManifestKind,
    available_kinds,
    lookup,
    parse_kind,
)

__all__ = [
    "MANIFEST_DESCRIPTIONS",
    "ManifestKind",
    "available_kinds",
    "lookup",
    "parse_kind",
]
