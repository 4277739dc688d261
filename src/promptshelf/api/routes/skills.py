# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Skill listing, lookup and download endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import Response

from promptshelf.api.deps import get_catalog
from promptshelf.api.negotiation import not_found, select_document, to_response
from promptshelf.content.catalog import Catalog
from promptshelf.core.constants import ARCHIVE_SUFFIX, BUNDLE_ARCHIVE_NAME, ZIP_MEDIA_TYPE
from promptshelf.export.archive import build_bundle_archive, build_directory_archive
from promptshelf.models.content import SkillContentListing, SkillListing

router = APIRouter()


def _zip_response(data: bytes, filename: str) -> Response:
    return Response(
        content=data,
        media_type=ZIP_MEDIA_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.get("/skills", response_model=SkillListing)
async def list_skills(catalog: Catalog = Depends(get_catalog)) -> SkillListing:
    """Metadata for every skill."""
    skills = await catalog.list_skills()
    return SkillListing(total=len(skills), skills=skills)


# Fixed paths are registered before ``/skills/{slug}`` so they win the match.
@router.get("/skills/all", response_model=SkillContentListing)
async def list_skills_with_content(catalog: Catalog = Depends(get_catalog)) -> SkillContentListing:
    """Every skill including its assembled content."""
    skills = await catalog.list_skills_with_content()
    return SkillContentListing(total=len(skills), skills=skills)


@router.get("/skills/all/download", response_model=None)
async def download_all_skills(catalog: Catalog = Depends(get_catalog)) -> Response:
    """Zip of every prebuilt per-skill archive."""
    data = await run_in_threadpool(build_bundle_archive, catalog.skill_archive_sources())
    if data is None:
        return not_found("Skill archives", "all")
    return _zip_response(data, BUNDLE_ARCHIVE_NAME)


@router.get("/skills/{slug}", response_model=None)
async def get_skill(
    slug: str, request: Request, catalog: Catalog = Depends(get_catalog)
) -> Response:
    """Assembled skill as markdown, or JSON when the client asks for it."""
    skill = await catalog.get_skill(slug)
    if skill is None:
        return not_found("Skill", slug)
    document = select_document(
        request.headers.get("accept"), skill.content, skill.model_dump(by_alias=True)
    )
    return to_response(document)


@router.get("/skills/{slug}/download", response_model=None)
async def download_skill(slug: str, catalog: Catalog = Depends(get_catalog)) -> Response:
    """The skill directory as ``<slug>.zip``."""
    source = catalog.skill_dir(slug)
    if source is None:
        return not_found("Skill", slug)
    data = await run_in_threadpool(build_directory_archive, source, slug)
    return _zip_response(data, f"{slug}{ARCHIVE_SUFFIX}")
