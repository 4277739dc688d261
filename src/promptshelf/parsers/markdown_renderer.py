# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Minimal markdown-to-HTML renderer for skill pages.

Covers headings, paragraphs, fenced code, ordered/unordered/checkbox lists,
pipe tables, horizontal rules and inline bold/italic/code/links. It is a
single forward pass over the lines; anything outside that set is rendered
as a paragraph.
"""

from __future__ import annotations

import re
from enum import StrEnum

_FENCE = "```"

_HEADING_RE = re.compile(r"^(#{1,6})\s+(.+)$")
_HR_RE = re.compile(r"^---+$")
_CHECKBOX_RE = re.compile(r"^\s*[-*]\s+\[([ xX])\]\s+(.+)$")
_UL_RE = re.compile(r"^\s*[-*]\s+(.+)$")
_OL_RE = re.compile(r"^\s*\d+\.\s+(.+)$")

# Inline patterns run on already-escaped text.
_BOLD_RE = re.compile(r"\*\*(.+?)\*\*")
_ITALIC_RE = re.compile(r"\*(.+?)\*")
_CODE_RE = re.compile(r"`([^`]+)`")
_LINK_RE = re.compile(r"\[([^\]]+)\]\(([^)]+)\)")

_TABLE_STYLE = "width:100%;border-collapse:collapse;margin:1rem 0"
_TH_STYLE = "padding:0.5rem;text-align:left;border-bottom:2px solid var(--border)"
_TD_STYLE = "padding:0.5rem;border-bottom:1px solid var(--border)"
_CHECKLIST_STYLE = "list-style:none;padding-left:0"


class ListKind(StrEnum):
    UL = "ul"
    OL = "ol"
    CHECKLIST = "checklist"


def escape_html(text: str) -> str:
    """Escape ``&``, ``<`` and ``>`` (in that order)."""
    return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


def _format_span(text: str) -> str:
    text = _BOLD_RE.sub(r"<strong>\1</strong>", text)
    text = _ITALIC_RE.sub(r"<em>\1</em>", text)
    return _LINK_RE.sub(_link, text)


def render_inline(text: str) -> str:
    # split() with one group alternates plain text and code span contents
    pieces = _CODE_RE.split(escape_html(text))
    return "".join(
        f"<code>{piece}</code>" if idx % 2 else _format_span(piece)
        for idx, piece in enumerate(pieces)
    )


def _link(match: re.Match[str]) -> str:
    href = match.group(2).replace('"', "&quot;")
    return f'<a href="{href}">{match.group(1)}</a>'


def _split_row(row: str) -> list[str]:
    return [cell.strip() for cell in row.split("|")[1:-1]]


class _Renderer:
    def __init__(self) -> None:
        self.html: list[str] = []
        self.in_code = False
        self.code_lang = ""
        self.code_lines: list[str] = []
        self.list_kind: ListKind | None = None
        self.table_rows: list[str] = []

    # -- flushing -----------------------------------------------------------

    def flush_list(self) -> None:
        if self.list_kind is not None:
            tag = "ol" if self.list_kind is ListKind.OL else "ul"
            self.html.append(f"</{tag}>")
            self.list_kind = None

    def flush_table(self) -> None:
        if not self.table_rows:
            return
        header, body = self.table_rows[0], self.table_rows[2:]
        parts = [f'<table style="{_TABLE_STYLE}"><thead><tr>']
        parts.extend(
            f'<th style="{_TH_STYLE}">{render_inline(c)}</th>' for c in _split_row(header)
        )
        parts.append("</tr></thead><tbody>")
        for row in body:
            cells = "".join(
                f'<td style="{_TD_STYLE}">{render_inline(c)}</td>' for c in _split_row(row)
            )
            parts.append(f"<tr>{cells}</tr>")
        parts.append("</tbody></table>")
        self.html.append("".join(parts))
        self.table_rows = []

    def flush_all(self) -> None:
        self.flush_list()
        self.flush_table()

    # -- emitting -----------------------------------------------------------

    def open_list(self, kind: ListKind) -> None:
        if self.list_kind is kind:
            return
        self.flush_list()
        if kind is ListKind.CHECKLIST:
            self.html.append(f'<ul style="{_CHECKLIST_STYLE}">')
        else:
            self.html.append(f"<{kind.value}>")
        self.list_kind = kind

    def close_code(self) -> None:
        code = escape_html("\n".join(self.code_lines))
        lang_attr = f' data-language="{escape_html(self.code_lang)}"' if self.code_lang else ""
        self.html.append(f"<pre{lang_attr}><code>{code}</code></pre>")
        self.in_code = False
        self.code_lines = []
        self.code_lang = ""

    def feed(self, line: str) -> None:
        stripped = line.strip()

        if line.lstrip().startswith(_FENCE):
            if self.in_code:
                self.close_code()
            else:
                self.flush_all()
                self.in_code = True
                self.code_lang = line.lstrip()[len(_FENCE):].strip()
            return

        if self.in_code:
            self.code_lines.append(line)
            return

        if stripped.startswith("|") and stripped.endswith("|") and len(stripped) > 1:
            self.flush_list()
            self.table_rows.append(stripped)
            return
        self.flush_table()

        heading = _HEADING_RE.match(line)
        if heading:
            self.flush_list()
            level = len(heading.group(1))
            self.html.append(f"<h{level}>{render_inline(heading.group(2))}</h{level}>")
            return

        if _HR_RE.match(stripped):
            self.flush_list()
            self.html.append("<hr />")
            return

        checkbox = _CHECKBOX_RE.match(line)
        if checkbox:
            self.open_list(ListKind.CHECKLIST)
            state = " checked disabled" if checkbox.group(1) in "xX" else " disabled"
            self.html.append(
                f'<li><input type="checkbox"{state} /> {render_inline(checkbox.group(2))}</li>'
            )
            return

        bullet = _UL_RE.match(line)
        if bullet:
            self.open_list(ListKind.UL)
            self.html.append(f"<li>{render_inline(bullet.group(1))}</li>")
            return

        numbered = _OL_RE.match(line)
        if numbered:
            self.open_list(ListKind.OL)
            self.html.append(f"<li>{render_inline(numbered.group(1))}</li>")
            return

        self.flush_list()
        if stripped:
            self.html.append(f"<p>{render_inline(line)}</p>")

    def finish(self) -> str:
        if self.in_code:
            self.close_code()
        self.flush_all()
        return "\n".join(self.html)


def render_markdown(markdown: str) -> str:
    """Render *markdown* to an HTML fragment."""
    renderer = _Renderer()
    for line in markdown.split("\n"):
        renderer.feed(line)
    return renderer.finish()
