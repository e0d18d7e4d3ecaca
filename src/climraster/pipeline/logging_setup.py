"""Logging setup for climraster runs."""

import logging
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


def configure_logging(config, log_path: Optional[Path] = None) -> None:
    """Attach console (and optional file) handlers to the package logger.

    Level comes from ``config.logging.level``. Existing handlers of the
    ``climraster`` logger are replaced so repeated calls do not duplicate
    output.
    """
    log_level = config.logging.level
    formatter = logging.Formatter(
        fmt='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    pkg_logger = logging.getLogger("climraster")
    pkg_logger.setLevel(log_level)
    for handler in pkg_logger.handlers[:]:
        pkg_logger.removeHandler(handler)
        handler.close()

    ch = logging.StreamHandler()
    ch.setLevel(log_level)
    ch.setFormatter(formatter)
    pkg_logger.addHandler(ch)

    if log_path is not None:
        log_path = Path(log_path)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(log_path)
        fh.setLevel(log_level)
        fh.setFormatter(formatter)
        pkg_logger.addHandler(fh)

    logger.info("Logging: level=%s, file=%s", log_level, log_path)
