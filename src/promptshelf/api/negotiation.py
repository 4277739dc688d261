# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Choose between the raw markdown and the JSON form of a document."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from starlette.responses import JSONResponse, Response

from promptshelf.core.constants import JSON_MEDIA_TYPE, MARKDOWN_MEDIA_TYPE, PUBLIC_CACHE_CONTROL


@dataclass(frozen=True, slots=True)
class MarkdownDocument:
    text: str


@dataclass(frozen=True, slots=True)
class JsonDocument:
    payload: dict[str, Any]


Document = MarkdownDocument | JsonDocument


def wants_json(accept: str | None) -> bool:
    """True when the ``Accept`` header asks for JSON."""
    return JSON_MEDIA_TYPE in (accept or "")


def select_document(accept: str | None, markdown: str, payload: dict[str, Any]) -> Document:
    if wants_json(accept):
        return JsonDocument(payload)
    return MarkdownDocument(markdown)


def to_response(document: Document) -> Response:
    if isinstance(document, JsonDocument):
        return JSONResponse(document.payload)
    return Response(
        content=document.text,
        media_type=MARKDOWN_MEDIA_TYPE,
        headers={"Cache-Control": PUBLIC_CACHE_CONTROL},
    )


def not_found(kind: str, identifier: str) -> JSONResponse:
    """404 with the ``{"error": "<Kind> not found: <identifier>"}`` body."""
    return JSONResponse({"error": f"{kind} not found: {identifier}"}, status_code=404)
