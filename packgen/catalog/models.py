"""Data model for discovered component files.

Components live in folders named after the configured components
subdirectory.  Each file is Common (shared by client and server bundles),
Client-only (``*.client.*``) or Server-only (``*.server.*``).
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

CONTAINS_CLIENT_OR_SERVER_REGEX = re.compile(r"\.(server|client)($|\.)")


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class Category(str, Enum):
    """Which bundle(s) a component file is meant for."""
    COMMON = "common"
    CLIENT = "client"
    SERVER = "server"


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def component_name(path: str | Path) -> str:
    """Derive the registered component name from a file path.

    ``Foo.jsx`` -> ``Foo``, ``Foo.client.jsx`` -> ``Foo``,
    ``Foo.server.tsx`` -> ``Foo``.
    """
    stem = Path(path).stem
    return CONTAINS_CLIENT_OR_SERVER_REGEX.sub("", stem, count=1)


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ComponentFile:
    """A component source file found during one generation pass."""

    path: Path
    name: str
    category: Category
    modified_at: float = 0.0

    @classmethod
    def from_path(
        cls,
        path: str | Path,
        category: Category,
        modified_at: float = 0.0,
    ) -> "ComponentFile":
        return cls(
            path=Path(path),
            name=component_name(path),
            category=category,
            modified_at=modified_at,
        )


@dataclass
class ComponentCatalog:
    """Components keyed by name, one insertion-ordered map per category.

    Adding a second file with an existing name replaces the first one but
    keeps its position.
    """

    common: dict[str, ComponentFile] = field(default_factory=dict)
    client: dict[str, ComponentFile] = field(default_factory=dict)
    server: dict[str, ComponentFile] = field(default_factory=dict)

    def mapping_for(self, category: Category) -> dict[str, ComponentFile]:
        return {
            Category.COMMON: self.common,
            Category.CLIENT: self.client,
            Category.SERVER: self.server,
        }[category]

    def add(self, component: ComponentFile) -> ComponentFile | None:
        """Insert *component*; return the file it replaced, if any."""
        mapping = self.mapping_for(component.category)
        previous = mapping.get(component.name)
        mapping[component.name] = component
        return previous

    def packable(self) -> list[ComponentFile]:
        """Components that get their own generated pack: Common, then Client."""
        return [*self.common.values(), *self.client.values()]

    def merged_for_server(self) -> dict[str, ComponentFile]:
        """Common components not overridden by Server ones, then Server ones."""
        merged = {
            name: component
            for name, component in self.common.items()
            if name not in self.server
        }
        merged.update(self.server)
        return merged

    def __len__(self) -> int:
        return len(self.common) + len(self.client) + len(self.server)
