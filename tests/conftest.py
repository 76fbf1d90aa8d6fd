"""Shared pytest fixtures for the packgen test suite.

Provides reusable fixtures for:
- A temporary host project with a components folder and server entry file
- A controllable clock and an in-memory artifact store
- Ready-made configurations pointing at the temporary project
"""

from __future__ import annotations

import os
import textwrap
from pathlib import Path

import pytest

from packgen.config import Config
from packgen.store import InMemoryArtifactStore


# ---------------------------------------------------------------------------
# Host project tree
# ---------------------------------------------------------------------------


class ProjectTree:
    """Writes component files into a throwaway host project."""

    def __init__(self, root: Path) -> None:
        self.root = root
        self.source = root / "app" / "javascript"
        self.entry = self.source / "packs"
        self.components = self.source / "bundles" / "ror_components"
        self.components.mkdir(parents=True)
        self.entry.mkdir(parents=True)

    def component(self, filename: str, body: str = "", mtime: float | None = None) -> Path:
        """Create ``ror_components/<filename>``; optionally pin its mtime."""
        path = self.components / filename
        path.write_text(
            body or textwrap.dedent(
                f"""\
                const {filename.split('.')[0]} = () => null;
                export default {filename.split('.')[0]};
                """
            ),
            encoding="utf-8",
        )
        if mtime is not None:
            os.utime(path, (mtime, mtime))
        return path

    def server_entry(self, body: str = "// server bundle\n") -> Path:
        path = self.entry / "server-bundle.js"
        path.write_text(body, encoding="utf-8")
        return path


@pytest.fixture
def project(tmp_path: Path) -> ProjectTree:
    """Empty host project under ``tmp_path`` (auto-cleanup)."""
    return ProjectTree(tmp_path / "host-app")


@pytest.fixture
def config(project: ProjectTree) -> Config:
    """Enabled configuration with a server bundle, pointing at ``project``."""
    return Config(
        root=project.root,
        auto_load_bundle=True,
        server_bundle_js_file="server-bundle.js",
    )


# ---------------------------------------------------------------------------
# Clock & in-memory store
# ---------------------------------------------------------------------------


class FakeClock:
    """Manually advanced clock returning epoch seconds."""

    def __init__(self, now: float = 1_700_000_000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def memory_store(clock: FakeClock) -> InMemoryArtifactStore:
    return InMemoryArtifactStore(clock=clock)
