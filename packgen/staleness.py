"""Decide whether generated packs are out of date."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from packgen.catalog.models import ComponentCatalog, ComponentFile
from packgen.store import GeneratedArtifactStore


def most_recent_source_mtime(components: list[ComponentFile]) -> int:
    """Newest ``modified_at`` among *components*, in whole seconds."""
    return int(max((c.modified_at for c in components), default=0.0))


def is_stale(
    catalog: ComponentCatalog,
    output_path_fn: Callable[[ComponentFile], Path],
    store: GeneratedArtifactStore,
) -> bool:
    """True if any Common or Client pack is missing or older than the sources.

    Times are compared at whole-second resolution.  Server-only files are not
    considered; each of them has a Client counterpart that is.
    """
    components = catalog.packable()
    newest = most_recent_source_mtime(components)

    for component in components:
        output_path = output_path_fn(component)
        if not store.exists(output_path):
            return True
        if int(store.mtime(output_path)) < newest:
            return True
    return False
