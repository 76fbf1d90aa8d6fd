"""packgen orchestrator.

Regenerates the per-component packs and the server bundle when component
sources are newer than the generated output:

1. DISCOVER -- find component files and validate the Common/Client/Server split.
2. WIRE     -- make sure the server entry file imports the generated bundle.
3. CHECK    -- compare source and output modification times.
4. GENERATE -- wipe the generated packs directory, emit every pack and the
               server bundle.

Usage::

    packgen --root . --enable
    python -m packgen.pipeline --config packgen.json --force
"""

from __future__ import annotations

import sys
import time
from dataclasses import dataclass, field
from pathlib import Path

from packgen.catalog import CatalogResult, ComponentCatalog, PackGenError, build_catalog
from packgen.config import Config
from packgen.scaffolder import PackEmitter, ServerBundleComposer, TemplateRenderer
from packgen.staleness import is_stale
from packgen.store import FileSystemArtifactStore, GeneratedArtifactStore
from packgen.utils import (
    console,
    format_duration,
    print_error,
    print_success,
    print_summary_table,
)


# ---------------------------------------------------------------------------
# Result
# ---------------------------------------------------------------------------


@dataclass
class GenerationResult:
    """What a single ``generate_packs_if_stale`` call did."""

    skipped: bool = False
    regenerated: bool = False
    entrypoint_updated: bool = False
    packs: list[Path] = field(default_factory=list)
    server_bundle: Path | None = None
    duration_seconds: float = 0.0

    def summary(self) -> dict[str, str]:
        if self.skipped:
            status = "disabled"
        elif self.regenerated:
            status = "regenerated"
        else:
            status = "up to date"
        return {
            "Status": status,
            "Packs written": str(len(self.packs)),
            "Server bundle": str(self.server_bundle) if self.server_bundle else "-",
            "Entry file updated": "yes" if self.entrypoint_updated else "no",
            "Duration": format_duration(self.duration_seconds),
        }


# ---------------------------------------------------------------------------
# Orchestrator
# ---------------------------------------------------------------------------


class PackGenerator:
    """Drives discovery, the staleness check and regeneration.

    Attributes:
        config: Generation settings.
        store: Where generated packs and the server bundle are written.
        packs: Emitter for per-component packs.
        server_bundle: Composer for the merged server bundle.
    """

    def __init__(
        self,
        config: Config,
        store: GeneratedArtifactStore | None = None,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.config = config
        self.store = store or FileSystemArtifactStore()
        renderer = renderer or TemplateRenderer()
        self.packs = PackEmitter(
            config.generated_packs_path,
            self.store,
            renderer,
            server_components=config.rsc_support_enabled,
        )
        self.server_bundle = ServerBundleComposer(config, self.store, renderer)

    def load_catalog(self) -> CatalogResult:
        return build_catalog(self.config.source_root, self.config.components_subdirectory)

    def is_up_to_date(self, catalog: ComponentCatalog) -> bool:
        """True when every generated file exists and none is older than its sources."""
        if not self.store.is_dir(self.config.generated_packs_path):
            return False
        if self.config.has_server_bundle and not self.store.exists(self.server_bundle.output_path):
            return False
        return not is_stale(catalog, self.packs.output_path, self.store)

    def generate_packs_if_stale(self, force: bool = False) -> GenerationResult:
        """Regenerate packs when sources changed (or always, with *force*).

        Raises:
            PackGenError: The component layout is invalid.  Nothing has been
                written when this is raised.
        """
        started = time.monotonic()
        result = GenerationResult()

        if not self.config.auto_load_bundle:
            result.skipped = True
            return result

        catalog_result = self.load_catalog()
        if not catalog_result.ok:
            raise catalog_result.error
        catalog = catalog_result.catalog

        if self.config.has_server_bundle:
            result.entrypoint_updated = self.server_bundle.ensure_entrypoint_import()

        if force or not self.is_up_to_date(catalog):
            self.store.clear(self.config.generated_packs_path)
            result.packs = [self.packs.emit(c) for c in catalog.packable()]
            if self.config.has_server_bundle:
                result.server_bundle = self.server_bundle.emit(catalog)
            result.regenerated = True

        result.duration_seconds = time.monotonic() - started
        return result


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``packgen`` / ``python -m packgen.pipeline``."""
    import argparse

    parser = argparse.ArgumentParser(
        description="packgen -- generate component registration packs",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  packgen --root . --enable\n"
            "  packgen --config packgen.json --force\n"
            "  packgen --enable --server-bundle server-bundle.js --server-components\n"
        ),
    )
    parser.add_argument(
        "--root",
        default=None,
        help="Project root (default: $PACKGEN_ROOT or the current directory)",
    )
    parser.add_argument(
        "--config", "-c",
        default=None,
        help="JSON configuration file (default: read PACKGEN_* environment variables)",
    )
    parser.add_argument(
        "--enable",
        action="store_true",
        help="Force auto_load_bundle on for this run",
    )
    parser.add_argument(
        "--server-bundle",
        default=None,
        help="Server bundle entry file name inside the entry directory",
    )
    parser.add_argument(
        "--server-components",
        action="store_true",
        help="Split components by their 'use client' directive",
    )
    parser.add_argument(
        "--force", "-f",
        action="store_true",
        help="Regenerate even if the generated files are up to date",
    )

    args = parser.parse_args(argv)

    overrides: dict[str, object] = {}
    if args.root:
        overrides["root"] = Path(args.root)
    if args.enable:
        overrides["auto_load_bundle"] = True
    if args.server_bundle:
        overrides["server_bundle_js_file"] = args.server_bundle
    if args.server_components:
        overrides["rsc_support_enabled"] = True

    if args.config:
        config_path = Path(args.config)
        if not config_path.exists():
            console.print(f"[bold red]Error:[/bold red] Config file not found: {config_path}")
            sys.exit(1)
        config = Config.load(config_path).model_copy(update=overrides)
    else:
        config = Config.from_env(**overrides)

    try:
        result = PackGenerator(config).generate_packs_if_stale(force=args.force)
    except PackGenError as exc:
        print_error(str(exc))
        sys.exit(1)

    print_summary_table(result.summary(), title="packgen")
    if result.skipped:
        console.print("auto_load_bundle is off; nothing to do.")
    elif result.regenerated:
        print_success(f"Regenerated {len(result.packs)} pack(s).")
    else:
        print_success("Generated packs already up to date; nothing to do.")


if __name__ == "__main__":
    main()
