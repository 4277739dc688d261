# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Typer CLI application root."""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path
from typing import Annotated

import typer

from promptshelf.content.catalog import Catalog
from promptshelf.core.config import Settings, get_settings
from promptshelf.core.exceptions import ConfigurationError

app = typer.Typer(
    name="promptshelf",
    help="Prompts and skills for AI coding assistants",
    no_args_is_help=True,
)

ContentRootOption = Annotated[
    Path | None,
    typer.Option("--content-root", "-c", help="Content directory (overrides PROMPTSHELF_CONTENT_ROOT)"),
]


def _settings(content_root: Path | None) -> Settings:
    settings = get_settings()
    if content_root is not None:
        settings = settings.model_copy(update={"content_root": content_root})
    if not settings.content_root.is_dir():
        raise ConfigurationError(f"Content root not found: {settings.content_root}")
    return settings


def _catalog(content_root: Path | None) -> Catalog:
    try:
        return Catalog.from_settings(_settings(content_root))
    except ConfigurationError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(1) from exc


def _write_output(text: str, output: Path | None) -> None:
    if output:
        output.write_text(text, encoding="utf-8")
        typer.echo(f"Output written to {output}")
    else:
        sys.stdout.write(text + "\n")


@app.command()
def skills(content_root: ContentRootOption = None) -> None:
    """List every skill."""
    from rich.console import Console
    from rich.table import Table

    catalog = _catalog(content_root)
    items = asyncio.run(catalog.list_skills())

    table = Table(title=f"Skills ({len(items)})")
    table.add_column("Slug", style="bold")
    table.add_column("Name")
    table.add_column("Description")
    for skill in items:
        table.add_row(skill.slug, skill.name, skill.description)
    Console().print(table)


@app.command()
def prompts(content_root: ContentRootOption = None) -> None:
    """List every prompt, grouped by category."""
    from rich.console import Console
    from rich.table import Table

    catalog = _catalog(content_root)
    items = asyncio.run(catalog.list_prompts())

    table = Table(title=f"Prompts ({len(items)})")
    table.add_column("Category")
    table.add_column("Slug", style="bold")
    table.add_column("Title")
    for prompt in items:
        table.add_row(prompt.category, prompt.slug, prompt.title)
    Console().print(table)


@app.command()
def show(
    slug: Annotated[str, typer.Argument(help="Skill slug")],
    content_root: ContentRootOption = None,
) -> None:
    """Print a skill's assembled markdown."""
    catalog = _catalog(content_root)
    skill = asyncio.run(catalog.get_skill(slug))
    if skill is None:
        typer.echo(f"Skill not found: {slug}", err=True)
        raise typer.Exit(1)
    sys.stdout.write(skill.content + "\n")


@app.command()
def corpus(
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Output file path"),
    ] = None,
    content_root: ContentRootOption = None,
) -> None:
    """Write every prompt as one text corpus (llms-full.txt)."""
    from promptshelf.export.corpus import build_prompt_corpus

    catalog = _catalog(content_root)
    _write_output(build_prompt_corpus(asyncio.run(catalog.list_prompts_with_content())), output)


@app.command()
def pack(
    out: Annotated[
        Path | None,
        typer.Option("--out", "-o", help="Archive directory (defaults to PROMPTSHELF_ARCHIVES_DIR)"),
    ] = None,
    content_root: ContentRootOption = None,
) -> None:
    """Build one <slug>.zip per skill for the bulk download."""
    from promptshelf.export.archive import write_prebuilt_archives

    catalog = _catalog(content_root)
    target = out or catalog.archives_dir or Path("skills")
    written = write_prebuilt_archives(catalog, target)
    typer.echo(f"Wrote {len(written)} archives to {target}")


@app.command()
def serve(
    host: Annotated[str | None, typer.Option("--host", help="Bind address (default: PROMPTSHELF_API_HOST)")] = None,
    port: Annotated[int | None, typer.Option("--port", "-p", help="Bind port (default: PROMPTSHELF_API_PORT)")] = None,
    workers: Annotated[
        int | None, typer.Option("--workers", "-w", help="Worker count (default: PROMPTSHELF_API_WORKERS)")
    ] = None,
) -> None:
    """Start the promptshelf API server."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "promptshelf.api.app:_create_app_from_env",
        host=host if host is not None else settings.api_host,
        port=port if port is not None else settings.api_port,
        workers=workers if workers is not None else settings.api_workers,
        factory=True,
    )
