"""Central logging setup for the project."""
from __future__ import annotations
import logging
import sys

def _resolve_level(level: int | str) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level}")
    return resolved

def setup_logging(level: int | str = logging.INFO) -> None:
    """
    Configure root logger with sane defaults.

    uvicorn's own loggers are routed through the root handler so server
    and request logs share one format.

    Args:
        level: Logging level, numeric or a name such as "DEBUG".
    """
    handler = logging.StreamHandler(sys.stdout)
    fmt = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"
    handler.setFormatter(logging.Formatter(fmt))
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(_resolve_level(level))

    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        logger = logging.getLogger(name)
        logger.handlers.clear()
        logger.propagate = True
