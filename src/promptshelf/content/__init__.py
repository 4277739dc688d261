# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Content discovery, assembly and the catalog read API."""

from promptshelf.content.assembler import assemble
from promptshelf.content.catalog import Catalog
from promptshelf.content.store import ContentStore, FilesystemStore, MemoryStore

__all__ = [
    "Catalog",
    "ContentStore",
    "FilesystemStore",
    "MemoryStore",
    "assemble",
]
