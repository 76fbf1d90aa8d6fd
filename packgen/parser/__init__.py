"""Lightweight static analysis of component source files.

Usage::

    from packgen.parser import is_client_directive

    is_client_directive("'use client';\\nexport default Foo;")  # True
"""

from packgen.parser.directives import (
    first_statement,
    is_client_directive,
    is_client_entrypoint,
)

__all__ = [
    "first_statement",
    "is_client_directive",
    "is_client_entrypoint",
]
