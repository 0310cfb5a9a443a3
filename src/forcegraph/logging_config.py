"""
Logging configuration for the forcegraph namespace.

Library modules only create module loggers; applications and demos call
setup_logging() once to get console (and optionally file) output.

Ticks run on their own thread, so records carry the thread name. The
simulation logs skipped coincident pairs at DEBUG on every tick; those
stay muted unless trace_ticks is set.
"""
import logging
import os
import sys
from typing import Optional, Union

LEVEL_ENV = "FORCEGRAPH_LOG_LEVEL"
TICK_LOGGER = "forcegraph.core.force_graph"


def resolve_level(level: Union[int, str, None]) -> int:
    """Level number from a number, a name ("debug"), or $FORCEGRAPH_LOG_LEVEL."""
    if level is None:
        level = os.environ.get(LEVEL_ENV, "INFO")
    if isinstance(level, str):
        resolved = logging.getLevelName(level.strip().upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level {level!r}")
        return resolved
    return level


def setup_logging(
    level: Union[int, str, None] = None,
    log_file: Optional[str] = None,
    trace_ticks: bool = False,
) -> logging.Logger:
    """
    Configure the 'forcegraph' logger.

    Args:
        level: Level number or name; defaults to $FORCEGRAPH_LOG_LEVEL,
               else INFO
        log_file: Optional path to also write logs to
        trace_ticks: Keep the per-tick DEBUG records of the simulation

    Returns:
        The configured package logger
    """
    level = resolve_level(level)
    logger = logging.getLogger("forcegraph")
    logger.setLevel(level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(
        "%(asctime)s [%(threadName)s] %(name)s %(levelname)s: %(message)s",
        datefmt="%H:%M:%S",
    )
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="w", encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    quiet_ticks = level <= logging.DEBUG and not trace_ticks
    logging.getLogger(TICK_LOGGER).setLevel(logging.INFO if quiet_ticks else logging.NOTSET)

    logger.debug("Logging initialized at %s", logging.getLevelName(level))
    return logger
