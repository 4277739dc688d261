# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Browser-facing pages: the LLM corpus and rendered skill pages."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse, PlainTextResponse

from promptshelf.api.deps import get_catalog
from promptshelf.content.catalog import Catalog
from promptshelf.core.constants import PUBLIC_CACHE_CONTROL
from promptshelf.export.corpus import build_prompt_corpus
from promptshelf.parsers.markdown_renderer import escape_html, render_markdown

router = APIRouter()

_LINK_STYLE = (
    "display:inline-flex;font-size:0.875rem;padding:0.375rem 0.75rem;"
    "border-radius:0.375rem;border:1px solid var(--border);text-decoration:none;color:inherit"
)

_PAGE = """<!doctype html>
<html lang="en">
<head><meta charset="utf-8"><title>{title}</title></head>
<body>
<div style="display:flex;gap:1rem;margin-bottom:1.5rem;flex-wrap:wrap">
<a href="{api_url}" style="{style}">View API</a>
<a href="{download_url}" style="{style}">Download .zip</a>
</div>
<div>
{body}
</div>
</body>
</html>
"""


@router.get("/llms-full.txt", response_class=PlainTextResponse)
async def llms_full(catalog: Catalog = Depends(get_catalog)) -> PlainTextResponse:
    """All prompts concatenated for LLM ingestion."""
    corpus = build_prompt_corpus(await catalog.list_prompts_with_content())
    return PlainTextResponse(corpus, headers={"Cache-Control": PUBLIC_CACHE_CONTROL})


@router.get("/docs/skills/{slug}", response_class=HTMLResponse)
async def skill_page(slug: str, catalog: Catalog = Depends(get_catalog)) -> HTMLResponse:
    skill = await catalog.get_skill(slug)
    if skill is None:
        return HTMLResponse(
            f"<p>Skill not found: {escape_html(slug)}</p>", status_code=404
        )
    html = _PAGE.format(
        title=escape_html(skill.title),
        api_url=escape_html(skill.api_url),
        download_url=escape_html(skill.download_url),
        style=_LINK_STYLE,
        body=render_markdown(skill.content),
    )
    return HTMLResponse(html)
