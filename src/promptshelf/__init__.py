# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""promptshelf - Prompts and skills for AI coding assistants, served as docs, JSON and archives."""

__version__ = "0.1.0"

__all__ = ["__version__"]
