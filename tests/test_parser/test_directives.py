"""Tests for leading-directive detection (packgen.parser.directives).

Covers:
- first_statement: whitespace, line comments, block comments, unterminated
  comments, empty and None input
- is_client_directive: accepted quoting styles and near misses
- is_client_entrypoint reading from disk
"""

from __future__ import annotations

from pathlib import Path

import pytest

from packgen.parser.directives import (
    first_statement,
    is_client_directive,
    is_client_entrypoint,
)

pytestmark = pytest.mark.unit


class TestFirstStatement:
    def test_empty_and_none(self):
        assert first_statement("") == ""
        assert first_statement(None) == ""
        assert first_statement("   \n\t  ") == ""

    def test_plain_first_line(self):
        assert first_statement("'use client';\nexport default X;") == "'use client';"

    def test_strips_surrounding_whitespace(self):
        assert first_statement("\n\n   import React from 'react';   \nfoo") == (
            "import React from 'react';"
        )

    def test_last_line_without_newline(self):
        assert first_statement("  const a = 1;  ") == "const a = 1;"

    def test_skips_line_comments(self):
        source = "// first\n// second\n\"use client\";\n"
        assert first_statement(source) == '"use client";'

    def test_skips_block_comments(self):
        source = "/* license\n * text\n */\n'use client'\nconst x = 1;"
        assert first_statement(source) == "'use client'"

    def test_interleaved_comment_styles(self):
        source = (
            "  // a\n"
            "/* b */  /* c\n d */\n"
            "\t// e\n"
            "   /** f */ import X from 'x';\n"
            "next();"
        )
        assert first_statement(source) == "import X from 'x';"

    def test_line_comment_without_newline_is_empty(self):
        assert first_statement("// only a comment") == ""

    def test_unterminated_block_comment_is_empty(self):
        assert first_statement("/* never closed\n'use client';") == ""

    def test_code_after_block_comment_on_same_line(self):
        assert first_statement("/* x */ 'use client';") == "'use client';"


class TestIsClientDirective:
    @pytest.mark.parametrize(
        "source",
        [
            '"use client"',
            "'use client'",
            '"use client";',
            "'use client';",
            "'use client'   \nexport default Foo;",
            "// header\n\"use client\";\nexport default Foo;",
            "/* doc */\n'use client'\n",
        ],
    )
    def test_accepts_directive(self, source):
        assert is_client_directive(source) is True

    @pytest.mark.parametrize(
        "source",
        [
            "",
            "use client",
            "'use clients';",
            "'use server';",
            "\"use  client\"",
            "import React from 'react';\n'use client';",
            "// 'use client'",
            "/* 'use client' */",
            "x = 'use client';",
        ],
    )
    def test_rejects_non_directive(self, source):
        assert is_client_directive(source) is False

    @pytest.mark.parametrize("prefix", ["\u00a0", "\u2028", "\u3000"])
    def test_unicode_whitespace_is_not_skipped(self, prefix):
        assert first_statement(prefix + "'use client';") == prefix + "'use client';"
        assert is_client_directive(prefix + "'use client';") is False

    def test_unicode_space_after_directive_does_not_terminate_it(self):
        assert is_client_directive("'use client'\u00a0") is False
        assert is_client_directive("'use client'\t") is True

    def test_mixed_quotes_are_accepted(self):
        # Quote characters are matched independently.
        assert is_client_directive("'use client\"") is True


class TestIsClientEntrypoint:
    def test_reads_file(self, tmp_path: Path):
        client = tmp_path / "A.jsx"
        client.write_text("'use client';\nexport default A;\n", encoding="utf-8")
        server = tmp_path / "B.jsx"
        server.write_text("export default async function B() {}\n", encoding="utf-8")

        assert is_client_entrypoint(client) is True
        assert is_client_entrypoint(server) is False

    def test_non_utf8_bytes_after_directive(self, tmp_path: Path):
        source = tmp_path / "Foo.jsx"
        source.write_bytes(b"'use client';\n// caf\xe9\nexport default Foo;\n")

        assert is_client_entrypoint(source) is True

    def test_non_utf8_bytes_without_directive(self, tmp_path: Path):
        source = tmp_path / "Foo.jsx"
        source.write_bytes(b"// caf\xe9\nexport default Foo;\n")

        assert is_client_entrypoint(source) is False

    def test_missing_file_raises(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            is_client_entrypoint(tmp_path / "missing.jsx")
