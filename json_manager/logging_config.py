"""Logging setup for json-manager.

The stdio transport owns stdout, so log output goes to stderr and,
optionally, to a dated file under a log directory.
"""

import logging
import sys
from datetime import date
from pathlib import Path
from typing import Any, Optional, Union

LOGGER_NAME = "json_manager"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logging(
    level: str = "INFO", log_dir: Optional[Union[str, Path]] = None
) -> logging.Logger:
    """Configure the ``json_manager`` logger.

    Args:
        level: Level name, case-insensitive. Unknown names fall back to INFO.
        log_dir: If given, also write to ``server-{date}.log`` in this directory.

    Returns:
        The configured logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    resolved = logging.getLevelName(str(level).upper())
    if not isinstance(resolved, int):
        resolved = logging.INFO
    logger.setLevel(resolved)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT)

    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)

    if log_dir is not None:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(
            log_path / f"server-{date.today().isoformat()}.log", encoding="utf-8"
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.propagate = False
    return logger


def log_operation(operation: str, collection: str, **fields: Any) -> None:
    """Emit one structured line for a mutating collection operation."""
    logger = logging.getLogger(f"{LOGGER_NAME}.operations")
    details = " ".join(f"{key}={value}" for key, value in sorted(fields.items()))
    message = f"op={operation} collection={collection}"
    if details:
        message = f"{message} {details}"
    logger.info(message, extra={"operation": operation, "collection": collection, **fields})
