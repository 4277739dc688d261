# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Prompt listing and lookup endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request
from fastapi.responses import Response

from promptshelf.api.deps import get_catalog
from promptshelf.api.negotiation import not_found, select_document, to_response
from promptshelf.content.catalog import Catalog
from promptshelf.models.content import PromptListing

router = APIRouter()


@router.get("/prompts", response_model=PromptListing)
async def list_prompts(catalog: Catalog = Depends(get_catalog)) -> PromptListing:
    prompts = await catalog.list_prompts()
    categories = sorted({p.category for p in prompts})
    return PromptListing(total=len(prompts), categories=categories, prompts=prompts)


@router.get("/prompts/{slug_path:path}", response_model=None)
async def get_prompt(
    slug_path: str, request: Request, catalog: Catalog = Depends(get_catalog)
) -> Response:
    """A prompt by ``<category>/<slug>``, as markdown or JSON."""
    prompt = await catalog.get_prompt(slug_path)
    if prompt is None:
        return not_found("Prompt", slug_path)
    document = select_document(
        request.headers.get("accept"), prompt.content, prompt.model_dump(by_alias=True)
    )
    return to_response(document)
