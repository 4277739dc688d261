# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Zip archives for skill downloads.

Archives are built fully in memory: the writer is closed (which writes the
central directory) before the buffer's bytes are returned, so callers never
see a truncated stream.
"""

from __future__ import annotations

import io
import logging
import zipfile
from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING

from promptshelf.core.constants import ARCHIVE_SUFFIX, ZIP_COMPRESS_LEVEL
from promptshelf.core.exceptions import ArchiveError

if TYPE_CHECKING:
    from promptshelf.content.catalog import Catalog

logger = logging.getLogger("promptshelf.export.archive")


def _open_writer(buffer: io.BytesIO) -> zipfile.ZipFile:
    return zipfile.ZipFile(
        buffer, "w", compression=zipfile.ZIP_DEFLATED, compresslevel=ZIP_COMPRESS_LEVEL
    )


def build_directory_archive(source_dir: Path, arcname: str) -> bytes:
    """Zip every file under *source_dir* into a top-level ``<arcname>/`` folder.

    Raises:
        ArchiveError: If *source_dir* is not a directory.
    """
    if not source_dir.is_dir():
        raise ArchiveError(f"Not a directory: {source_dir}")

    files = sorted(
        (path.relative_to(source_dir).as_posix(), path)
        for path in source_dir.rglob("*")
        if path.is_file()
    )
    buffer = io.BytesIO()
    with _open_writer(buffer) as zf:
        for rel, path in files:
            zf.write(path, f"{arcname}/{rel}")
    logger.debug("Archived %d files from %s as %s", len(files), source_dir, arcname)
    return buffer.getvalue()


def build_bundle_archive(sources: Sequence[tuple[str, Path]]) -> bytes | None:
    """Bundle prebuilt per-skill archives into one zip.

    Each ``(name, path)`` becomes the entry ``<name>.zip``. Missing paths are
    skipped; ``None`` is returned when nothing is left to bundle.
    """
    existing = [(name, path) for name, path in sources if path.is_file()]
    if not existing:
        return None

    buffer = io.BytesIO()
    with _open_writer(buffer) as zf:
        for name, path in existing:
            zf.write(path, f"{name}{ARCHIVE_SUFFIX}")
    logger.debug("Bundled %d archives", len(existing))
    return buffer.getvalue()


def write_prebuilt_archives(catalog: Catalog, out_dir: Path) -> list[Path]:
    """Write ``<slug>.zip`` for every skill into *out_dir*."""
    out_dir.mkdir(parents=True, exist_ok=True)
    written: list[Path] = []
    for slug in catalog.store.list_skill_slugs():
        source = catalog.skill_dir(slug)
        if source is None:
            continue
        target = out_dir / f"{slug}{ARCHIVE_SUFFIX}"
        target.write_bytes(build_directory_archive(source, slug))
        written.append(target)
    logger.info("Wrote %d skill archives to %s", len(written), out_dir)
    return written
