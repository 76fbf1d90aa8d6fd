"""packgen -- generated registration packs for file-system based components.

Quick usage::

    from packgen.config import Config
    from packgen.pipeline import PackGenerator

    config = Config(root=Path("."), auto_load_bundle=True,
                    server_bundle_js_file="server-bundle.js")
    result = PackGenerator(config).generate_packs_if_stale()
"""

__version__ = "0.1.0"
