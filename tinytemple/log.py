"""Logger setup for TinyTemple.

Configures loguru with a single console sink. Structured fields attached with
``logger.bind(...)`` (path, error, template) are appended to every line.
"""

from __future__ import annotations

import sys

from loguru import logger

# Default level colors for console output
LEVEL_COLORS = {
    "WARNING": "<yellow>",
    "ERROR": "<red>",
    "CRITICAL": "<bold><red>",
}

LOG_FORMAT = (
    "{time:HH:mm:ss} | <level>{level: <7}</level> | <level>{message}</level> {extra}"
)


def setup_logger(verbose: bool = False, sink=None) -> int:
    """Configure loguru for a build.

    Args:
        verbose: Emit DEBUG records (every written and copied file).
        sink: Destination for records. Defaults to stderr.

    Returns:
        The loguru handler id, so callers can remove the sink again.
    """
    logger.remove()
    for level_name, color in LEVEL_COLORS.items():
        logger.level(level_name, color=color)
    return logger.add(
        sink if sink is not None else sys.stderr,
        format=LOG_FORMAT,
        level="DEBUG" if verbose else "INFO",
    )
