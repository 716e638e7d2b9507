"""Logging setup for the ffcli command line.

Library modules only call :func:`logging.getLogger`; the CLI attaches a
single Rich handler on stderr to the ``ffcli`` logger.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

_HANDLER_NAME = "ffcli-rich"


def configure_logging(verbose: bool = False) -> None:
    """Attach (or re-level) the stderr handler on the ``ffcli`` logger."""
    level = logging.DEBUG if verbose else logging.WARNING
    package_logger = logging.getLogger("ffcli")
    package_logger.setLevel(level)

    for handler in package_logger.handlers:
        if handler.get_name() == _HANDLER_NAME:
            handler.setLevel(level)
            return

    handler = RichHandler(
        console=Console(stderr=True),
        show_time=verbose,
        show_path=False,
        markup=False,
    )
    handler.set_name(_HANDLER_NAME)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(message)s"))
    package_logger.addHandler(handler)
