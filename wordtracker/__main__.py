"""Allow ``python -m wordtracker``."""

from .cli import run

run()
