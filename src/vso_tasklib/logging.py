from __future__ import annotations

import sys

from loguru import logger


def setup_logging(level: str = "INFO") -> None:
    """
    Configures loguru for the vso_tasklib library.

    This function enables "vso_tasklib" logs. Each line carries the `tool` extra, the
    executable basename bound by `ToolRunner`, or "-" for records logged outside a
    runner such as `which` lookups and PathOps failures.
    """
    logger.remove()
    logger.configure(extra={"tool": "-"})

    fmt = (
        "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
        "<level>{level: <8}</level> | "
        "<cyan>{extra[tool]}</cyan> - "
        "<level>{message}</level>"
    )

    logger.add(sys.stderr, format=fmt, level=level)
    logger.enable("vso_tasklib")
