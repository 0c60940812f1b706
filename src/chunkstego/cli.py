"""Command line interface for hiding messages in PNG chunks."""

from __future__ import annotations

from pathlib import Path
from typing import NoReturn, Optional

import click
from rich.console import Console
from rich.markup import escape

from .api import find_messages, hide_message, list_chunks, remove_message
from .exceptions import ChunkNotFoundError, ChunkStegoError
from .utils import configure_logging

console = Console(soft_wrap=True, highlight=False, emoji=False)

_PNG_PATH = click.Path(exists=True, dir_okay=False, path_type=Path)
_OUT_PATH = click.Path(dir_okay=False, writable=True, path_type=Path)


def _fail(message: str) -> NoReturn:
    console.print(f"[red]Error:[/red] {escape(message)}")
    click.get_current_context().exit(1)


def _echo_plain(text: str) -> None:
    console.print(text, markup=False)


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"], case_sensitive=False),
    default=None,
    help="Set the log level for the CLI session.",
)
def main(log_level: Optional[str]) -> None:
    """Hide, reveal and remove messages stored in PNG chunks."""
    configure_logging(log_level)


@main.command()
@click.argument("png_path", type=_PNG_PATH)
@click.argument("chunk_type")
@click.argument("message")
@click.argument("output_path", type=_OUT_PATH, required=False)
def encode(png_path: Path, chunk_type: str, message: str, output_path: Optional[Path]) -> None:
    """Store MESSAGE in a new CHUNK_TYPE chunk of PNG_PATH.

    The result goes to OUTPUT_PATH, or back into PNG_PATH when omitted.
    """
    try:
        chunk = hide_message(png_path, chunk_type, message, output_path=output_path)
    except (ChunkStegoError, OSError) as exc:
        _fail(str(exc))

    destination = output_path or png_path
    console.print(
        f"[green]Hid {chunk.length} bytes[/green] in a '{escape(str(chunk.chunk_type))}' chunk of {escape(str(destination))}"
    )


@main.command()
@click.argument("png_path", type=_PNG_PATH)
@click.argument("chunk_type")
@click.option("--utf8", "as_utf8", is_flag=True, help="Decode the message as UTF-8 instead of raw Latin-1.")
def decode(png_path: Path, chunk_type: str, as_utf8: bool) -> None:
    """Print every message stored in CHUNK_TYPE chunks of PNG_PATH."""
    try:
        chunks = find_messages(png_path, chunk_type)
        if not chunks:
            raise ChunkNotFoundError(chunk_type)
        messages = [chunk.data_as_utf8() if as_utf8 else chunk.data_as_string() for chunk in chunks]
    except (ChunkStegoError, OSError) as exc:
        _fail(str(exc))

    for message in messages:
        _echo_plain(message)


@main.command()
@click.argument("png_path", type=_PNG_PATH)
@click.argument("chunk_type")
@click.option("-o", "--output", "output_path", type=_OUT_PATH, help="Write the result here instead of PNG_PATH.")
def remove(png_path: Path, chunk_type: str, output_path: Optional[Path]) -> None:
    """Remove the first CHUNK_TYPE chunk from PNG_PATH."""
    try:
        removed = remove_message(png_path, chunk_type, output_path=output_path)
    except (ChunkStegoError, OSError) as exc:
        _fail(str(exc))

    console.print(f"[green]Removed[/green] '{escape(str(removed.chunk_type))}' chunk:")
    _echo_plain(str(removed))


@main.command("print")
@click.argument("png_path", type=_PNG_PATH)
def print_chunks(png_path: Path) -> None:
    """Print every chunk of PNG_PATH."""
    try:
        chunks = list_chunks(png_path)
    except (ChunkStegoError, OSError) as exc:
        _fail(str(exc))

    console.print(f"[bold]{len(chunks)} chunks[/bold] in {escape(str(png_path))}")
    for chunk in chunks:
        _echo_plain(str(chunk))


if __name__ == "__main__":  # pragma: no cover - module entry point
    main()
