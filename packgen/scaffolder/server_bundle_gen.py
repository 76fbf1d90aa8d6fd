"""Server bundle composition.

Merges Common and Server-specific components into one generated module that
imports each of them and registers them with the server renderer.  Unless
the generated module *is* the server entry point, the entry file gets a
one-line side-effect import of it.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path

from packgen.catalog.models import ComponentCatalog, ComponentFile
from packgen.config import Config
from packgen.parser.directives import is_client_entrypoint
from packgen.store import GeneratedArtifactStore
from packgen.utils import prepend_to_file_if_text_not_present, print_generated

from .pack_gen import SourceCheck, relative_path
from .templates import TemplateRenderer


@dataclass(frozen=True)
class ComposedServerBundle:
    """Content of the generated server bundle, ready to render."""

    imports: list[str] = field(default_factory=list)
    server_names: list[str] = field(default_factory=list)
    client_names: list[str] = field(default_factory=list)

    template = "server_bundle.js.j2"


def render_server_bundle(bundle: ComposedServerBundle, renderer: TemplateRenderer) -> str:
    return renderer.render(
        bundle.template,
        {
            "imports": bundle.imports,
            "server_names": bundle.server_names,
            "client_names": bundle.client_names,
        },
    )


class ServerBundleComposer:
    """Composes, writes and wires up the generated server bundle."""

    def __init__(
        self,
        config: Config,
        store: GeneratedArtifactStore,
        renderer: TemplateRenderer | None = None,
        *,
        is_client_source: SourceCheck = is_client_entrypoint,
    ) -> None:
        self.config = config
        self.store = store
        self.renderer = renderer or TemplateRenderer()
        self.is_client_source = is_client_source

    @property
    def output_path(self) -> Path:
        return self.config.generated_server_bundle_path

    # -- Composition -------------------------------------------------------

    def compose(self, catalog: ComponentCatalog) -> ComposedServerBundle:
        """Build the bundle model for *catalog*.

        Server files take precedence over Common files of the same name.
        Import order follows the merged catalog.
        """
        merged: dict[str, ComponentFile] = catalog.merged_for_server()

        imports = [
            f"import {name} from '{relative_path(self.output_path, component.path)}';"
            for name, component in merged.items()
        ]

        if self.config.rsc_support_enabled:
            server_names = [
                name
                for name, component in merged.items()
                if not self.is_client_source(component.path)
            ]
        else:
            server_names = []
        client_names = [name for name in merged if name not in server_names]

        return ComposedServerBundle(
            imports=imports, server_names=server_names, client_names=client_names
        )

    def render(self, catalog: ComponentCatalog) -> str:
        return render_server_bundle(self.compose(catalog), self.renderer)

    def emit(self, catalog: ComponentCatalog) -> Path:
        """Write the server bundle and make sure the entry file imports it."""
        self.store.write(self.output_path, self.render(catalog))
        self.ensure_entrypoint_import()
        print_generated("Generated Server Bundle", self.output_path, color="orange1")
        return self.output_path

    # -- Entry point wiring ------------------------------------------------

    def entrypoint_import_path(self) -> str:
        """Path of the generated bundle relative to the server entry file."""
        return relative_path(self.config.server_bundle_entrypoint, self.output_path)

    def ensure_entrypoint_import(self) -> bool:
        """Prepend ``import "./<bundle>"`` to the server entry file once.

        Returns ``True`` only when the entry file was modified.  Does nothing
        when the generated bundle is itself the entry point.
        """
        if self.config.make_generated_server_bundle_the_entrypoint:
            return False

        rel = self.entrypoint_import_path()
        text = self.renderer.render("entrypoint_import.js.j2", {"relative_path": rel}) + "\n"
        return prepend_to_file_if_text_not_present(
            file=self.config.server_bundle_entrypoint,
            text_to_prepend=text,
            regex=re.compile(rf"""import ['"]\./{re.escape(rel)}['"]"""),
        )
