"""Module entry point for ``python -m gointernal``."""

from gointernal.cli import cli

if __name__ == "__main__":  # pragma: no cover
    cli()
