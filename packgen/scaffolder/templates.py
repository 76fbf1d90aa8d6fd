"""Jinja2 template rendering for generated packs.

Provides the TemplateRenderer class which loads Jinja2 templates from the
``packgen/scaffolder/templates/`` directory and renders them with the data
carried by a pack variant.  Generated files must match the runtime's
expected shape byte-for-byte, so rendered output is never reformatted
beyond trimming surrounding blank lines.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders Jinja2 templates for generated JavaScript modules.

    Templates are ``.j2`` files under a configurable template directory.
    Missing context variables raise instead of rendering as empty strings.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([]),
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters["object_literal"] = _object_literal_filter

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"client_pack.js.j2"``).
            context: Dictionary of variables available inside the template.

        Returns:
            The rendered content with leading and trailing newlines removed.
        """
        template = self.env.get_template(template_path)
        return template.render(**context).strip("\n")


# ---------------------------------------------------------------------------
# Jinja2 custom filters
# ---------------------------------------------------------------------------

def _object_literal_filter(names: Iterable[str]) -> str:
    """Render names as a shorthand JS object literal: ``{A,\\nB}``."""
    return "{" + ",\n".join(names) + "}"
