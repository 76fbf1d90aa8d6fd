"""packgen scaffolder -- renders generated packs and the server bundle.

Quick usage::

    from packgen.scaffolder import PackEmitter
    from packgen.store import FileSystemArtifactStore

    emitter = PackEmitter(config.generated_packs_path, FileSystemArtifactStore())
    for component in catalog.packable():
        emitter.emit(component)
"""

from packgen.scaffolder.pack_gen import (
    ClientRegistrationPack,
    PackEmitter,
    ServerRegistrationPack,
    relative_path,
    render_pack,
)
from packgen.scaffolder.server_bundle_gen import (
    ComposedServerBundle,
    ServerBundleComposer,
    render_server_bundle,
)
from packgen.scaffolder.templates import TemplateRenderer

__all__ = [
    "ClientRegistrationPack",
    "ComposedServerBundle",
    "PackEmitter",
    "ServerBundleComposer",
    "ServerRegistrationPack",
    "TemplateRenderer",
    "relative_path",
    "render_pack",
    "render_server_bundle",
]
