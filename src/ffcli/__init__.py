"""ffcli — query Fireflies.ai meeting data from the command line.

Talks to the Fireflies GraphQL API with a strict layered architecture.
"""

from ffcli.version import __version__

__all__: list[str] = ["__version__"]
