# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Fixed markers, media types and file names."""

FRONTMATTER_DELIMITER = "---"
SECTION_SEPARATOR = "---"
REFERENCE_HEADING = "## Reference: {name}"

JSON_MEDIA_TYPE = "application/json"
MARKDOWN_MEDIA_TYPE = "text/markdown; charset=utf-8"
ZIP_MEDIA_TYPE = "application/zip"

PUBLIC_CACHE_CONTROL = "public, max-age=3600, s-maxage=3600"

ARCHIVE_SUFFIX = ".zip"
BUNDLE_ARCHIVE_NAME = "all-skills.zip"
ZIP_COMPRESS_LEVEL = 9

CORPUS_TITLE = "# AI Prompts for Coding: Full Content"
