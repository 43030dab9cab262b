"""Runtime logging helpers."""

from __future__ import annotations

import os
import sys
from logging import Handler
from typing import Literal

from loguru import logger
from rich.console import Console
from rich.logging import RichHandler

LogProfile = Literal["default", "cli"]

_DEFAULT_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level:<6} | {name}:{function}:{line} | {message}"
_CONFIGURED_PROFILE: LogProfile | None = None


def _build_cli_handler() -> Handler:
    return RichHandler(
        console=Console(stderr=True),
        show_level=True,
        show_time=False,
        show_path=False,
        markup=False,
        rich_tracebacks=False,
    )


def parse_log_filter(raw: str | None = None) -> tuple[str, dict[str | None, str | int | bool]]:
    """Parse a TREEQUERY_LOG_FILTER value.

    Format: "level" or "level,module1=level,module2=false"
    Examples:
        - "info" - global INFO level
        - "debug,treequery.core=trace" - global DEBUG, treequery.core at TRACE
        - "info,treequery.core=false" - global INFO, treequery.core disabled

    Returns:
        (global_level, module_filter_dict)
    """
    filter_env = (raw if raw is not None else os.getenv("TREEQUERY_LOG_FILTER", "info")).lower()
    parts = [p.strip() for p in filter_env.split(",") if p.strip()]

    filter_dict: dict[str | None, str | int | bool] = {}
    global_level = "info"

    for part in parts:
        if "=" in part:
            module, level = part.split("=", 1)
            module = module.strip()
            level = level.strip()
            if level == "false":
                filter_dict[module] = False
            else:
                filter_dict[module] = level.upper()
        else:
            global_level = part

    # "" is the fallback entry for modules not listed.
    filter_dict.setdefault("", global_level.upper())
    return global_level, filter_dict


def configure_logging(*, profile: LogProfile = "default") -> None:
    """Configure process-level logging once per profile.

    Log levels are controlled by TREEQUERY_LOG_FILTER, see
    ``parse_log_filter``.
    """
    global _CONFIGURED_PROFILE
    if profile == _CONFIGURED_PROFILE:
        return

    _, module_filter = parse_log_filter()

    logger.remove()
    logger.enable("treequery")

    if profile == "cli":
        logger.add(
            _build_cli_handler(),
            level=0,
            format="{message}",
            backtrace=False,
            diagnose=False,
            filter=module_filter,
        )
    else:
        logger.add(
            sys.stderr,
            level=0,
            format=_DEFAULT_FORMAT,
            backtrace=False,
            diagnose=False,
            filter=module_filter,
        )

    _CONFIGURED_PROFILE = profile


def reset_logging() -> None:
    """Forget the configured profile and silence the library again."""
    global _CONFIGURED_PROFILE
    logger.remove()
    logger.disable("treequery")
    _CONFIGURED_PROFILE = None
