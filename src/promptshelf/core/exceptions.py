# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Custom exception hierarchy for promptshelf.

Missing content is never an exception: lookups return ``None`` and the HTTP
layer turns that into a 404.
"""


class PromptshelfError(Exception):
    """Base exception for all promptshelf errors."""


class ConfigurationError(PromptshelfError):
    """Invalid or missing configuration."""


class ArchiveError(PromptshelfError):
    """An archive could not be built from the given source."""
