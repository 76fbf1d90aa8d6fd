"""Unit tests for utility functions (packgen.utils).

Tests cover:
- prepend_to_file_if_text_not_present
- format_duration
- Rich output helpers (smoke tests)
"""

from __future__ import annotations

import re
from pathlib import Path

import pytest

from packgen.utils import (
    format_duration,
    prepend_to_file_if_text_not_present,
    print_error,
    print_generated,
    print_success,
    print_summary_table,
    print_warning,
)


class TestPrependToFile:
    @pytest.mark.unit
    def test_prepends_when_absent(self, tmp_path: Path):
        target = tmp_path / "entry.js"
        target.write_text("body\n", encoding="utf-8")

        changed = prepend_to_file_if_text_not_present(target, "header\n", r"header")

        assert changed is True
        assert target.read_text(encoding="utf-8") == "header\nbody\n"

    @pytest.mark.unit
    def test_skips_when_present(self, tmp_path: Path):
        target = tmp_path / "entry.js"
        target.write_text("body\nheader\n", encoding="utf-8")

        changed = prepend_to_file_if_text_not_present(target, "header\n", re.compile("header"))

        assert changed is False
        assert target.read_text(encoding="utf-8") == "body\nheader\n"

    @pytest.mark.unit
    def test_missing_file(self, tmp_path: Path):
        assert prepend_to_file_if_text_not_present(tmp_path / "nope.js", "x", "x") is False
        assert not (tmp_path / "nope.js").exists()


class TestFormatDuration:
    @pytest.mark.unit
    @pytest.mark.parametrize(
        "seconds, expected",
        [(-1, "0ms"), (0.0421, "42ms"), (3.7, "3.7s"), (65.2, "1m 5s")],
    )
    def test_formats(self, seconds, expected):
        assert format_duration(seconds) == expected


class TestRichOutput:
    @pytest.mark.unit
    def test_print_helpers(self):
        print_success("done")
        print_warning("careful")
        print_error("failed")
        print_generated("Generated Packs", "/tmp/[odd]/A.js")
        print_summary_table({"Packs written": "3"}, title="packgen")
