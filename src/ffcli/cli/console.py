"""Rich consoles shared by the CLI layer.

``out`` is the stdout console.  Command results (JSON, Markdown) are written
straight to its underlying file by :func:`emit` so they reach a pipe byte for
byte: Rich would otherwise expand tabs and drop carriage returns found in
transcript text.
``err`` carries diagnostics, errors and log records to stderr.
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape

out = Console(highlight=False, emoji=False, soft_wrap=True)
err = Console(stderr=True, highlight=False, emoji=False, soft_wrap=True)


def emit(text: str) -> None:
    """Write *text* verbatim to stdout, ending with exactly one newline."""
    stream = out.file
    stream.write(text.rstrip("\n") + "\n")
    stream.flush()


def error(message: str, *, hint: str | None = None) -> None:
    """Render an error (and optional hint) on stderr."""
    err.print(f"[bold red]Error:[/bold red] {escape(message)}")
    if hint:
        err.print(f"[yellow]Hint:[/yellow] {escape(hint)}")


def info(message: str) -> None:
    """Write a plain status line to stdout."""
    emit(message)
