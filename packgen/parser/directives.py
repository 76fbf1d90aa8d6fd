"""Leading-directive detection for JavaScript component sources.

A component opts into client-side rendering with a ``"use client"``
directive as its first statement.  Only comments and whitespace may precede
it, so a full parse is unnecessary: the scanner walks past comments and
returns the first real line.
"""

from __future__ import annotations

import re
from pathlib import Path

ASCII_WHITESPACE = " \t\r\n\f\v"
CLIENT_DIRECTIVE_REGEX = re.compile(r"""^["']use client["'](?:;|\s|$)""", re.ASCII)


def first_statement(content: str | None) -> str:
    """Return the first non-comment line of *content*, stripped.

    ``//`` comments run to the next newline and ``/* */`` comments to their
    closing marker.  A comment that never ends swallows the rest of the
    input, so the result is ``""``.
    """
    if not content:
        return ""

    index = 0
    length = len(content)

    while index < length:
        while index < length and content[index] in ASCII_WHITESPACE:
            index += 1
        if index >= length:
            break

        head = content[index:index + 2]
        if head == "//":
            newline = content.find("\n", index)
            if newline == -1:
                return ""
            index = newline + 1
        elif head == "/*":
            comment_end = content.find("*/", index)
            if comment_end == -1:
                return ""
            index = comment_end + 2
        else:
            newline = content.find("\n", index)
            if newline == -1:
                return content[index:].strip(ASCII_WHITESPACE)
            return content[index:newline].strip(ASCII_WHITESPACE)

    return ""


def is_client_directive(content: str | None) -> bool:
    """True if the first statement is a ``'use client'`` directive."""
    return CLIENT_DIRECTIVE_REGEX.search(first_statement(content)) is not None


def is_client_entrypoint(path: str | Path) -> bool:
    """Read *path* and report whether it starts with ``'use client'``."""
    return is_client_directive(Path(path).read_text(encoding="utf-8", errors="replace"))
