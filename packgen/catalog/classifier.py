"""Component discovery, classification and validation.

Builds a ``ComponentCatalog`` from the files under every components folder
of the source tree and checks that the Common / Client / Server split is
consistent.  Validation does not raise; it returns a ``CatalogResult`` that
the caller inspects before writing anything.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import Enum
from fnmatch import fnmatchcase
from pathlib import Path

from packgen.catalog.models import (
    CONTAINS_CLIENT_OR_SERVER_REGEX,
    Category,
    ComponentCatalog,
    ComponentFile,
)
from packgen.utils import print_warning

MtimeReader = Callable[[Path], float]


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class PackGenError(Exception):
    """Base class for configuration problems detected by packgen."""


class OverrideKind(str, Enum):
    CLIENT_OVERRIDES_COMMON = "client-overrides-common"
    SERVER_OVERRIDES_COMMON = "server-overrides-common"


class OverrideError(PackGenError):
    """A client- or server-specific file shadows a common definition."""

    def __init__(self, kind: OverrideKind, name: str) -> None:
        self.kind = OverrideKind(kind)
        self.name = name
        side = "client" if self.kind is OverrideKind.CLIENT_OVERRIDES_COMMON else "server"
        super().__init__(
            f"**ERROR** packgen: {side} specific definition for Component '{name}' "
            "overrides the common definition. Please delete the common definition "
            "and have separate server and client files."
        )


class MissingCounterpartError(PackGenError):
    """A server-specific component has no client-specific file."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(
            f"**ERROR** packgen: Component '{name}' is missing a client specific file."
        )


# ---------------------------------------------------------------------------
# Result
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class CatalogResult:
    """Either a validated catalog or the first validation error found."""

    catalog: ComponentCatalog | None = None
    error: PackGenError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> ComponentCatalog:
        """Return the catalog, raising the stored error if validation failed."""
        if self.error is not None:
            raise self.error
        assert self.catalog is not None
        return self.catalog


# ---------------------------------------------------------------------------
# Discovery
# ---------------------------------------------------------------------------


def components_search_glob(subdirectory: str) -> str:
    """Glob matching files directly inside any ``<subdirectory>`` folder."""
    return f"**/{subdirectory}/*"


def discover(source_path: str | Path, subdirectory: str) -> list[Path]:
    """Return the sorted component files under *source_path*.

    Only regular files sitting directly in a components folder are returned;
    nested directories, dotfiles and anything under a hidden directory are
    ignored.
    """
    root = Path(source_path)
    if not root.is_dir():
        return []
    return sorted(
        p
        for p in root.glob(components_search_glob(subdirectory))
        if p.is_file() and not _is_hidden(p.relative_to(root))
    )


def _is_hidden(relative: Path) -> bool:
    return any(part.startswith(".") for part in relative.parts)


# ---------------------------------------------------------------------------
# Classification
# ---------------------------------------------------------------------------


def category_for(path: str | Path) -> Category | None:
    """Classify a file by name, or ``None`` if it fits no category.

    ``Foo.client`` (a bare token with no extension after it) is neither a
    client file nor a common one and is skipped.
    """
    filename = Path(path).name
    if fnmatchcase(filename, "*.client.*"):
        return Category.CLIENT
    if fnmatchcase(filename, "*.server.*"):
        return Category.SERVER
    if CONTAINS_CLIENT_OR_SERVER_REGEX.search(filename):
        return None
    return Category.COMMON


def _stat_mtime(path: Path) -> float:
    return path.stat().st_mtime


def classify(
    paths: Iterable[str | Path],
    mtime_of: MtimeReader = _stat_mtime,
) -> ComponentCatalog:
    """Partition *paths* into a ``ComponentCatalog``.

    Args:
        paths: Component files in discovery order.
        mtime_of: Returns a file's modification time.  Tests inject a fake.
    """
    catalog = ComponentCatalog()
    for raw in paths:
        path = Path(raw)
        category = category_for(path)
        if category is None:
            continue
        component = ComponentFile.from_path(path, category, mtime_of(path))
        replaced = catalog.add(component)
        # Same name twice in one category: the later file wins.
        if replaced is not None:
            print_warning(
                f"Duplicate {category.value} component '{component.name}': "
                f"{replaced.path} is shadowed by {component.path}"
            )
    return catalog


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


def validate(catalog: ComponentCatalog) -> CatalogResult:
    """Check the Common / Client / Server split.

    Order: client-vs-common, server-vs-common, then the missing client
    counterpart check.  The first violation is returned.
    """
    for name in catalog.client:
        if name in catalog.common:
            return CatalogResult(
                error=OverrideError(OverrideKind.CLIENT_OVERRIDES_COMMON, name)
            )

    for name in catalog.server:
        if name in catalog.common:
            return CatalogResult(
                error=OverrideError(OverrideKind.SERVER_OVERRIDES_COMMON, name)
            )

    for name in catalog.server:
        if name not in catalog.client:
            return CatalogResult(error=MissingCounterpartError(name))

    return CatalogResult(catalog=catalog)


def build_catalog(
    source_path: str | Path,
    subdirectory: str,
    mtime_of: MtimeReader = _stat_mtime,
) -> CatalogResult:
    """Discover, classify and validate the components under *source_path*."""
    return validate(classify(discover(source_path, subdirectory), mtime_of))
