"""Per-component pack generation.

Every Common and Client component gets a small generated module under the
generated packs directory.  The module either registers the component with
the client runtime (importing it) or, for server components, registers it
by name only.
"""

from __future__ import annotations

import os
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from packgen.catalog.models import ComponentFile
from packgen.parser.directives import is_client_entrypoint
from packgen.store import GeneratedArtifactStore
from packgen.utils import print_generated

from .templates import TemplateRenderer

SourceCheck = Callable[[Path], bool]


# ---------------------------------------------------------------------------
# Pack variants
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ClientRegistrationPack:
    """Imports the component and registers it with the client runtime."""

    name: str
    import_path: str

    template = "client_pack.js.j2"


@dataclass(frozen=True)
class ServerRegistrationPack:
    """Registers a server component by name; the module is resolved elsewhere."""

    name: str

    template = "server_pack.js.j2"


Pack = ClientRegistrationPack | ServerRegistrationPack


def render_pack(pack: Pack, renderer: TemplateRenderer) -> str:
    """Render a pack variant to JavaScript source."""
    if isinstance(pack, ServerRegistrationPack):
        return renderer.render(pack.template, {"name": pack.name})
    return renderer.render(
        pack.template, {"name": pack.name, "import_path": pack.import_path}
    )


# ---------------------------------------------------------------------------
# Path helpers
# ---------------------------------------------------------------------------


def relative_path(from_file: str | Path, to_file: str | Path) -> str:
    """Import path from the file *from_file* to *to_file*.

    ``os.path.relpath`` measures from a directory, so the first ``../`` is
    dropped to measure from the file's own folder instead.
    """
    rel = Path(os.path.relpath(to_file, from_file)).as_posix()
    return rel.replace("../", "", 1)


# ---------------------------------------------------------------------------
# PackEmitter
# ---------------------------------------------------------------------------


class PackEmitter:
    """Builds, renders and writes one generated pack per component."""

    def __init__(
        self,
        generated_packs_path: Path,
        store: GeneratedArtifactStore,
        renderer: TemplateRenderer | None = None,
        *,
        server_components: bool = False,
        is_client_source: SourceCheck = is_client_entrypoint,
    ) -> None:
        self.generated_packs_path = Path(generated_packs_path)
        self.store = store
        self.renderer = renderer or TemplateRenderer()
        self.server_components = server_components
        self.is_client_source = is_client_source

    def output_path(self, component: ComponentFile) -> Path:
        """``<generated packs dir>/<name>.js``."""
        return self.generated_packs_path / f"{component.name}.js"

    def build_pack(self, component: ComponentFile) -> Pack:
        if self.server_components and not self.is_client_source(component.path):
            return ServerRegistrationPack(name=component.name)
        return ClientRegistrationPack(
            name=component.name,
            import_path=relative_path(self.output_path(component), component.path),
        )

    def render(self, component: ComponentFile) -> str:
        return render_pack(self.build_pack(component), self.renderer)

    def emit(self, component: ComponentFile) -> Path:
        """Render *component*'s pack and write it; return the output path."""
        output_path = self.output_path(component)
        self.store.write(output_path, self.render(component))
        print_generated("Generated Packs", output_path)
        return output_path
