"""Allow ``python -m ffcli`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m ffcli`` behaves identically to the ``ffcli`` console
script.
"""

from __future__ import annotations

from ffcli.cli.app import cli

if __name__ == "__main__":
    cli()
