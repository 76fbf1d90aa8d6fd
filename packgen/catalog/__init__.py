"""Component catalog: discovery, classification and validation.

Quick usage::

    from packgen.catalog import build_catalog

    catalog = build_catalog("app/javascript", "ror_components").unwrap()
    for component in catalog.packable():
        print(component.name, component.path)
"""

from packgen.catalog.classifier import (
    CatalogResult,
    MissingCounterpartError,
    OverrideError,
    OverrideKind,
    PackGenError,
    build_catalog,
    category_for,
    classify,
    components_search_glob,
    discover,
    validate,
)
from packgen.catalog.models import Category, ComponentCatalog, ComponentFile, component_name

__all__ = [
    "CatalogResult",
    "Category",
    "ComponentCatalog",
    "ComponentFile",
    "MissingCounterpartError",
    "OverrideError",
    "OverrideKind",
    "PackGenError",
    "build_catalog",
    "category_for",
    "classify",
    "component_name",
    "components_search_glob",
    "discover",
    "validate",
]
