# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Frontmatter parsing and markdown rendering."""

from promptshelf.parsers.frontmatter import Frontmatter, Header, extract_header, parse_frontmatter
from promptshelf.parsers.markdown_renderer import escape_html, render_markdown

__all__ = [
    "Frontmatter",
    "Header",
    "escape_html",
    "extract_header",
    "parse_frontmatter",
    "render_markdown",
]
