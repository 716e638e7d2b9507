"""CLI application entry point and command routing for ffcli.

This module is the **sole error boundary** for the entire application.
It catches :class:`~ffcli.exceptions.FfcliError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages via
Rich and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — all work is delegated to the core/service
  and infrastructure layers.
* ``print()`` is forbidden; the Rich consoles in :mod:`ffcli.cli.console`
  are used exclusively.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager

from ffcli.cli import console, exit_codes
from ffcli.config import Settings
from ffcli.core.executor import RequestExecutor
from ffcli.core.models import ListOptions
from ffcli.core.transcript_service import FirefliesService
from ffcli.exceptions import FfcliError
from ffcli.infra.credential_store import resolve_api_key
from ffcli.infra.http_transport import RequestsTransport
from ffcli.logging_utils import configure_logging
from ffcli.version import __version__

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def _non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}") from None
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be zero or more, got {number}")
    return number


def _add_format_flags(parser: argparse.ArgumentParser, *, md_help: str) -> None:
    group = parser.add_mutually_exclusive_group()
    group.add_argument("--md", action="store_true", help=md_help)
    group.add_argument("--json", action="store_true", help="Output as JSON (default)")


def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser with its four sub-commands."""
    parser = argparse.ArgumentParser(
        prog="ffcli",
        description="Fireflies.ai CLI — query meeting data from the command line.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log requests and retries to stderr.",
    )
    sub = parser.add_subparsers(dest="command", metavar="COMMAND")

    auth = sub.add_parser("auth", help="Store and verify your Fireflies API key")
    auth.add_argument("key", nargs="?", default=None, help="API key to save")
    auth.add_argument("--check", action="store_true", help="Verify the stored/env API key works")

    me = sub.add_parser("me", help="Show current user info")
    _add_format_flags(me, md_help="Output as Markdown")

    lst = sub.add_parser("list", help="List meetings")
    lst.add_argument("--limit", type=_positive_int, default=20, help="Number of meetings to return")
    lst.add_argument("--skip", type=_non_negative_int, default=None, help="Number of meetings to skip")
    lst.add_argument("--from", dest="from_date", metavar="DATE", help="Start date (YYYY-MM-DD)")
    lst.add_argument("--to", dest="to_date", metavar="DATE", help="End date (YYYY-MM-DD)")
    lst.add_argument("--search", metavar="QUERY", help="Filter by title keyword")
    lst.add_argument("--participant", metavar="EMAIL", help="Filter by participant email")
    lst.add_argument("--mine", action="store_true", help="Only meetings you own")
    lst.add_argument("--include-summaries", action="store_true", help="Include AI summaries")
    _add_format_flags(lst, md_help="Output as Markdown table")

    show = sub.add_parser("show", help="Show full meeting detail")
    show.add_argument("id", help="Meeting/transcript ID")
    show.add_argument("--include-transcript", action="store_true", help="Include the full transcript")
    show.add_argument(
        "--summary-only", action="store_true", help="Show only the AI summary (skip transcript)",
    )
    show.add_argument(
        "--transcript-only", action="store_true", help="Show only the transcript (skip summary)",
    )
    _add_format_flags(show, md_help="Output as Markdown")

    return parser


# ---------------------------------------------------------------------------
# Service wiring
# ---------------------------------------------------------------------------

@contextmanager
def _open_service(settings: Settings) -> Iterator[FirefliesService]:
    """Build the transport → executor → service stack for one invocation."""
    with RequestsTransport() as transport:
        executor = RequestExecutor(
            transport,
            lambda: resolve_api_key(path=settings.config_path),
            endpoint=settings.api_url,
            timeout=settings.timeout,
        )
        yield FirefliesService(executor)


def _dispatch(args: argparse.Namespace, service: FirefliesService, settings: Settings) -> int:
    from ffcli.cli import commands

    if args.command == "auth":
        return commands.handle_auth(
            service, args.key, check=args.check, config_path=settings.config_path,
        )
    if args.command == "me":
        return commands.handle_me(service, markdown=args.md)
    if args.command == "list":
        options = ListOptions(
            limit=args.limit,
            skip=args.skip,
            from_date=args.from_date,
            to_date=args.to_date,
            search=args.search,
            participant=args.participant,
            mine=args.mine,
            include_summaries=args.include_summaries,
        )
        return commands.handle_list(service, options, markdown=args.md)
    return commands.handle_show(
        service,
        args.id,
        include_transcript=args.include_transcript,
        summary_only=args.summary_only,
        transcript_only=args.transcript_only,
        markdown=args.md,
    )


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the ffcli CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return exit_codes.SUCCESS

    configure_logging(args.verbose)
    settings = Settings.from_env()
    logger.debug("Using endpoint %s", settings.api_url)

    with _open_service(settings) as service:
        return _dispatch(args, service, settings)


def run(argv: list[str] | None = None) -> int:
    """Run :func:`main` behind the error boundary and return the exit code."""
    try:
        return main(argv)
    except FfcliError as exc:
        console.error(exc.message, hint=exc.hint)
        return exit_codes.GENERAL_ERROR
    except KeyboardInterrupt:
        console.err.print("\n[yellow]Aborted by user.[/yellow]")
        return exit_codes.KEYBOARD_INTERRUPT
    except Exception as exc:  # noqa: BLE001
        console.err.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {console.escape(str(exc))}"
        )
        return exit_codes.UNEXPECTED_ERROR


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level entry invoked by the console script.

    Guarantees the process never exits with a raw stack trace during
    normal usage.
    """
    sys.exit(run())
