"""Entry point: ``python -m synonyms``."""

from .cli import main

main()
