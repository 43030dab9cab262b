"""Configuration package."""

from treequery.config.settings import QuerySettings, load_settings

__all__ = [
    "QuerySettings",
    "load_settings",
]
