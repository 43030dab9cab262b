"""Command-line interface."""

from treequery.cli.app import app

__all__ = ["app"]
