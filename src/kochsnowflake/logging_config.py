"""
Logging Configuration
Sets up the logger for the package.

Numeric warnings raised while mapping curves (numpy's RuntimeWarning for overflow
in exp(z) or division by zero in 1/z) are captured into the same handlers, so
they end up in the log file next to the messages that caused them.
"""
import logging
import sys
from typing import Optional

PACKAGE_LOGGER = "kochsnowflake"
WARNINGS_LOGGER = "py.warnings"


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    capture_warnings: bool = True
) -> None:
    """
    Configures the logger for the 'kochsnowflake' namespace.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to save logs to a file.
        capture_warnings: Route `warnings.warn` output (numpy RuntimeWarnings) to the same handlers.
    """
    handlers: list[logging.Handler] = []

    # Format: Time - Module - Level - Message
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    console_handler = logging.StreamHandler(sys.stdout)
    handlers.append(console_handler)

    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)

    for name in (PACKAGE_LOGGER, WARNINGS_LOGGER):
        logger = logging.getLogger(name)
        # Calling this twice must not duplicate output
        for old in list(logger.handlers):
            old.close()
            logger.removeHandler(old)
        if name == WARNINGS_LOGGER and not capture_warnings:
            continue
        logger.setLevel(level)
        for handler in handlers:
            logger.addHandler(handler)

    logging.captureWarnings(capture_warnings)

    logging.getLogger(PACKAGE_LOGGER).debug(
        f"Logging initialized (level {logging.getLevelName(level)}, file {log_file or 'none'})."
    )
