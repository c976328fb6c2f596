#!/usr/bin/env python3
"""
Resume HTML Rendering CLI

Renders JSON Resume documents (.json or .yaml) to self-contained HTML pages.

Commands:
    render    - Render a resume file to HTML
    locales   - List bundled locales
    negotiate - Show which locales a requested locale resolves to

Examples:\n

    render_resume.py render resume.json                        # Writes resume.html

    render_resume.py render resume.yaml -o site/index.html     # Custom output path

    render_resume.py render resume.json --locale fr            # Override meta.language

    render_resume.py render resume.json --self-contained       # Inline remote images

    render_resume.py negotiate pt-PT                           # Preview fallback chain
"""

import os
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from resume_html.contexts.i18n import default_catalog, negotiate_locales
from resume_html.contexts.rendering import (
    FileSystemImageSource,
    ImageResolver,
    NoFileSystemImageSource,
    render_resume,
)
from resume_html.contexts.rendering.logger import setup_rendering_logger
from resume_html.contexts.rendering.renderer import DEFAULT_LOCALE
from resume_html.utils.timestamp import now

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))


app = typer.Typer(
    help="Render JSON Resume documents to self-contained, localized HTML",
    add_completion=False,
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command("render")
def render_command(
    resume_file: Annotated[
        Path,
        typer.Argument(help="Resume document (.json, .yaml or .yml)"),
    ],
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Output HTML path (default: alongside the resume)"),
    ] = None,
    locale: Annotated[
        Optional[str],
        typer.Option("--locale", "-l", help="Override meta.language (e.g., fr, pt-BR)"),
    ] = None,
    self_contained: Annotated[
        Optional[bool],
        typer.Option(
            "--self-contained/--no-self-contained",
            help="Download and inline remote images (default: meta.selfContainedImages)",
        ),
    ] = None,
    no_local_images: Annotated[
        bool,
        typer.Option("--no-local-images", help="Never read local image files"),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show debug logging on the console"),
    ] = False,
):
    """
    Render a resume to HTML.

    Examples:\n

        $ render_resume.py render resume.json

        $ render_resume.py render resume.json --locale de -o out/de.html
    """
    setup_rendering_logger(LOGS_PATH / f"render_{now()}", locale=locale, verbose=verbose)

    resume_path = resume_file.resolve()
    if no_local_images:
        local_source = NoFileSystemImageSource()
    else:
        local_source = FileSystemImageSource(resume_path.parent)

    result = render_resume(
        resume_path,
        output_path=output,
        image_resolver=ImageResolver(local_source),
        locale=locale,
        self_contained=self_contained,
    )

    if not result.success:
        typer.secho(f"Error: {result.error}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    typer.secho("✓ Render succeeded", fg=typer.colors.GREEN, bold=True)
    typer.echo(f"  Locale: {result.locale}")
    typer.echo(f"  Output: {result.output_path} ({result.size_bytes} bytes)")


@app.command("locales")
def locales_command():
    """List the locales bundled with resume_html."""
    for code in default_catalog():
        typer.echo(code)


@app.command("negotiate")
def negotiate_command(
    requested: Annotated[str, typer.Argument(help="Requested locale (e.g., fr-CA)")],
    default: Annotated[
        Optional[str],
        typer.Option("--default", "-d", help="Fallback locale"),
    ] = DEFAULT_LOCALE,
):
    """Show the ordered locales a request resolves to."""
    selected = negotiate_locales(requested, default_catalog().keys(), default)
    if not selected:
        typer.secho(f"No bundled locale matches {requested!r}", fg=typer.colors.YELLOW)
        raise typer.Exit(code=1)

    for position, code in enumerate(selected, 1):
        typer.echo(f"{position}. {code}")


if __name__ == "__main__":
    app()
