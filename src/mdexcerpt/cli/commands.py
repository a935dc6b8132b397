"""CLI command implementations"""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer

from mdexcerpt.config import Settings, load_config
from mdexcerpt.core.pipeline import excerpt_file, run_excerpt


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def build_cmd(
    path: Annotated[Optional[str], typer.Argument(help="File or directory of posts (default: content_dir)")] = None,
    out: Annotated[Optional[str], typer.Option("--out-dir", help="Output directory")] = None,
    max_length: Annotated[Optional[int], typer.Option("--max-length", help="Excerpt character budget")] = None,
    parser: Annotated[Optional[str], typer.Option("--parser-config", help="MarkdownIt preset name")] = None,
    drafts: Annotated[Optional[bool], typer.Option("--drafts", help="Include draft posts")] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log debug output")] = False,
    ):
    """Compute excerpts for all posts and write one sidecar JSON per post."""
    _configure_logging(verbose)
    settings = _settings(overrides={
        "output_dir": out, "max_length": max_length,
        "parser_config": parser, "include_drafts": drafts,
    })
    source = path or settings.content_dir
    if not Path(source).exists():
        _fail(f"No such file or directory: {source}")

    output_dir = Path(settings.output_dir)
    try:
        results = run_excerpt(
            source, output_dir, settings.max_length,
            settings.parser_config, settings.include_drafts,
        )
    except RuntimeError as e:
        _fail(str(e))
    for src, out_file in results:
        typer.echo(f"  {src} -> {out_file}")
    typer.echo(f"Excerpted {len(results)} post(s) to {output_dir}/")


def show_cmd(
    path: Annotated[str, typer.Argument(help="Post file to excerpt")],
    max_length: Annotated[Optional[int], typer.Option("--max-length", help="Excerpt character budget")] = None,
    parser: Annotated[Optional[str], typer.Option("--parser-config", help="MarkdownIt preset name")] = None,
    ):
    """Print the excerpt HTML of a single post."""
    settings = _settings(overrides={"max_length": max_length, "parser_config": parser})
    if not Path(path).is_file():
        _fail(f"Not a file: {path}")
    try:
        doc = excerpt_file(Path(path), settings.max_length, settings.parser_config)
    except ValueError as e:
        _fail(f"Failed to excerpt {path}", e)
    typer.echo(doc.data["excerptHtml"])
    typer.echo(f"hasMoreSeparator: {str(doc.data['hasMoreSeparator']).lower()}", err=True)
