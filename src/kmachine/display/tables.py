"""Table rendering utilities for kmachine."""

from typing import Any

from rich.table import Table


def create_manifest_table(data: list[dict[str, Any]]) -> Table:
    """Create a table of available manifests.

    Args:
        data: List of manifest dictionaries with kind, description and size

    Returns:
        Rich Table with manifest data
    """
    table = Table(title="Manifests")

    table.add_column("Kind", style="cyan")
    table.add_column("Description", style="white")
    table.add_column("Size", style="white", justify="right")

    for manifest in data:
        table.add_row(
            manifest.get("kind", "unknown"),
            manifest.get("description", ""),
            f"{manifest.get('size', 0)} B",
        )

    return table
