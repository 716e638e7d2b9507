"""Process exit statuses returned by ``ffcli``.

Scripts wrapping the CLI can rely on these values:

* ``0``: the command printed its result (JSON or Markdown) to stdout.
* ``1``: a Fireflies API failure, an invalid option value or a missing
  ``auth`` argument.  The classified message is on stderr and stdout is
  empty.
* ``2``: argparse rejected the command line, or an internal fault was
  caught by :func:`ffcli.cli.app.run`.
* ``130``: interrupted with Ctrl+C.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Result written to stdout."""

GENERAL_ERROR: int = 1
"""Classified API error (``auth_failed``, ``network_error``, ...), bad
``--from``/``--to``/``FFCLI_TIMEOUT`` value, or ``ffcli auth`` with no key."""

USAGE_ERROR: int = 2
"""Unknown command, bad flag or conflicting ``--md``/``--json``.  Raised by
argparse itself through ``SystemExit``; listed here for callers."""

UNEXPECTED_ERROR: int = 2
"""A non-ffcli exception reached the boundary in :func:`ffcli.cli.app.run`.
Shares argparse's status since neither is the user's API problem."""

KEYBOARD_INTERRUPT: int = 130
"""Ctrl+C; 128 + SIGINT."""
