"""packgen configuration.

Centralised, typed configuration for pack generation.  All settings use a
Pydantic v2 model so they are validated at construction time and can be
serialised to/from JSON or environment variables without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator

from packgen.catalog.models import component_name


def _env_flag(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


class Config(BaseModel):
    """Global packgen configuration.

    Relative paths are resolved against ``root``.  Instances are typically
    created once by the CLI entry point and then passed to ``PackGenerator``.
    """

    root: Path = Field(default=Path("."), description="Project root directory")
    source_path: Path = Field(
        default=Path("app/javascript"),
        description="Bundler source root searched for component folders",
    )
    source_entry_path: Path = Field(
        default=Path("app/javascript/packs"),
        description="Bundler entry directory; generated packs go under <entry>/generated",
    )
    auto_load_bundle: bool = Field(
        default=False, description="Master switch for pack generation"
    )
    components_subdirectory: str = Field(
        default="ror_components",
        description="Folder name that marks a directory of auto-registered components",
    )
    server_bundle_js_file: str = Field(
        default="",
        description="Server bundle entry file name; empty disables the server bundle step",
    )
    make_generated_server_bundle_the_entrypoint: bool = Field(
        default=False,
        description="Write the composed server bundle over the entry file itself",
    )
    rsc_support_enabled: bool = Field(
        default=False,
        description="Partition components into server/client by their 'use client' directive",
    )

    @field_validator("components_subdirectory")
    @classmethod
    def _single_segment(cls, value: str) -> str:
        value = value.strip().strip("/")
        if not value or "/" in value or value in (".", ".."):
            raise ValueError(
                "components_subdirectory must be a single, non-empty folder name"
            )
        return value

    # ------------------------------------------------------------------
    # Derived paths (read-only properties)
    # ------------------------------------------------------------------

    @property
    def source_root(self) -> Path:
        """Absolute-or-root-relative bundler source directory."""
        return self.root / self.source_path

    @property
    def entry_root(self) -> Path:
        """Bundler entry directory."""
        return self.root / self.source_entry_path

    @property
    def generated_packs_path(self) -> Path:
        """Directory holding one generated pack per component."""
        return self.entry_root / "generated"

    @property
    def server_bundle_entrypoint(self) -> Path:
        """The host's designated server bundle entry file."""
        return self.entry_root / self.server_bundle_js_file

    @property
    def generated_server_bundle_path(self) -> Path:
        """Where the composed server bundle is written.

        Either the entry file itself, or
        ``<parent of entry dir>/generated/<entry stem>-generated.js``.
        """
        if self.make_generated_server_bundle_the_entrypoint:
            return self.server_bundle_entrypoint

        interim_name = self.server_bundle_entrypoint.name.replace(".js", "-generated.js", 1)
        bundle_name = component_name(interim_name)
        return self.entry_root.parent / "generated" / f"{bundle_name}.js"

    @property
    def has_server_bundle(self) -> bool:
        """True when a server bundle entry file is configured."""
        return bool(self.server_bundle_js_file.strip())

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file.

        Returns:
            The path where the file was written.
        """
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "Config":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls, **overrides: Any) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            PACKGEN_ROOT, PACKGEN_SOURCE_PATH, PACKGEN_SOURCE_ENTRY_PATH,
            PACKGEN_AUTO_LOAD_BUNDLE, PACKGEN_COMPONENTS_SUBDIRECTORY,
            PACKGEN_SERVER_BUNDLE_JS_FILE,
            PACKGEN_MAKE_GENERATED_SERVER_BUNDLE_THE_ENTRYPOINT,
            PACKGEN_RSC_SUPPORT_ENABLED.

        Keyword *overrides* take precedence over the environment.
        """
        kwargs: dict[str, Any] = {}
        for field_name in ("root", "source_path", "source_entry_path"):
            value = os.environ.get(f"PACKGEN_{field_name.upper()}")
            if value:
                kwargs[field_name] = Path(value)
        for field_name in ("components_subdirectory", "server_bundle_js_file"):
            value = os.environ.get(f"PACKGEN_{field_name.upper()}")
            if value:
                kwargs[field_name] = value
        for field_name in (
            "auto_load_bundle",
            "make_generated_server_bundle_the_entrypoint",
            "rsc_support_enabled",
        ):
            value = os.environ.get(f"PACKGEN_{field_name.upper()}")
            if value:
                kwargs[field_name] = _env_flag(value)

        kwargs.update(overrides)
        return cls(**kwargs)
