"""Allow `python -m ticklist`."""

from .cli.main import main

main()
