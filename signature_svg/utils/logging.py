"""
Logging utilities for the conversion scripts.

Library modules log under the ``signature_svg`` namespace and never attach
handlers themselves; scripts call ``setup_logging`` once at startup.
"""

import logging
import sys
from pathlib import Path
from datetime import datetime

PACKAGE_LOGGER = "signature_svg"


def setup_logging(
    log_dir: str = "logs",
    log_level: str = "INFO",
    log_to_file: bool = True,
    name: str = PACKAGE_LOGGER
) -> logging.Logger:
    """
    Attach console (and optionally file) handlers to the package logger.

    Args:
        log_dir: Directory for per-run ``convert_<timestamp>.log`` files
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_to_file: Whether to also write a log file
        name: Logger to configure; children such as ``signature_svg.batch``
            inherit its handlers

    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, log_level.upper()))

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(logging.Formatter('%(levelname)s [%(module)s]: %(message)s'))
    logger.addHandler(console_handler)

    if log_to_file:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / f"convert_{datetime.now():%Y%m%d_%H%M%S}.log"
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))
        logger.addHandler(file_handler)
        logger.info(f"Logging to file: {log_file}")

    return logger
