"""Display helpers for the kmachine CLI."""

from kmachine.display.tables import create_manifest_table

__all__ = ["create_manifest_table"]
