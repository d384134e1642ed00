"""
Logging Configuration
=====================
Optional console/file output for the 'pointgeometry' logger namespace.

The geometry modules only ever do `logging.getLogger(__name__)`; importing the
package installs nothing but a NullHandler. A host application that already
configures logging does not need this module at all. It is meant for scripts
and debugging sessions that want to watch the solvers (degenerate
intersections, dropped Bezier points, refinement caps) without touching the
host's root configuration.
"""
import logging
import sys
from typing import Optional, Union

PACKAGE_LOGGER = "pointgeometry"

# Marks handlers added here so a repeat call replaces only those
_OWNED_ATTR = "_pointgeometry_owned"


def setup_logging(
    level: Union[int, str] = logging.WARNING,
    log_file: Optional[str] = None,
    propagate: bool = True
) -> logging.Logger:
    """
    Attaches a stderr handler (and optionally a file handler) to the
    'pointgeometry' logger.

    Args:
        level: Logging level as int or name, e.g. logging.DEBUG or "DEBUG".
        log_file: Optional path; records are appended so a host log is not truncated.
        propagate: Whether records continue to the host's root handlers.

    Returns:
        The configured package logger.
    """
    if isinstance(level, str):
        name = level
        level = logging.getLevelName(name.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown logging level: {name}")

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    logger.propagate = propagate

    # Handlers installed by the host application stay untouched
    for handler in list(logger.handlers):
        if getattr(handler, _OWNED_ATTR, False):
            logger.removeHandler(handler)
            handler.close()

    formatter = logging.Formatter(
        '%(asctime)s [%(levelname)s] %(name)s: %(message)s'
    )

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='a', encoding='utf-8'))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        setattr(handler, _OWNED_ATTR, True)
        logger.addHandler(handler)

    logger.debug(f"pointgeometry logging at {logging.getLevelName(level)}"
                 + (f", appending to {log_file}" if log_file else ""))
    return logger
