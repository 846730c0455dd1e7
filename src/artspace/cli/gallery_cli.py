# -*- coding: utf-8 -*-
"""Command line launcher and gallery inspection commands."""

from __future__ import annotations

import logging
from pathlib import Path

import typer

from artspace.constants import SUPPORTED_LOCALES
from artspace.core.gallery import default_gallery
from artspace.core.renderer import render

app = typer.Typer(help="Art Space gallery viewer")
logger = logging.getLogger(__name__)


@app.command()
def run(
    config: Path = typer.Option(None, help="Path to settings.json (default: ./settings.json)"),
    locale: str = typer.Option(None, help=f"UI locale: {', '.join(SUPPORTED_LOCALES)}"),
    start: int = typer.Option(None, help="Index of the first artwork to show"),
) -> None:
    """Open the gallery window."""
    if locale is not None and locale not in SUPPORTED_LOCALES:
        typer.echo(f"Unsupported locale: {locale}", err=True)
        raise typer.Exit(code=2)

    from artspace.main import main

    raise typer.Exit(code=main(config_path=config, locale=locale, start_index=start))


@app.command("list")
def list_artworks() -> None:
    """Print every artwork in display order."""
    gallery = default_gallery()
    for index, record in enumerate(gallery):
        typer.echo(f"{index}: {record.title} | {record.artist_name} | {record.year}")
    typer.echo(f"\nTotal: {len(gallery)} artworks")


@app.command()
def show(index: int = typer.Argument(..., help="Artwork index (0-based)")) -> None:
    """Print what the screen shows for one cursor position."""
    gallery = default_gallery()
    try:
        view = render(gallery, index)
    except IndexError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=1)

    typer.echo(f"[{view.position}/{view.total}] {view.title}")
    typer.echo(view.caption)
    typer.echo(f"Description: {view.content_description}")
    typer.echo(f"Image: {view.image_ref}")
    typer.echo(f"Previous: {'on' if view.can_go_previous else 'off'}, Next: {'on' if view.can_go_next else 'off'}")


if __name__ == "__main__":
    app()
