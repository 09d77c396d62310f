import logging
import sys

from tanka.config import ConfigError, DEFAULT_LOG_LEVEL, get_log_level, logging_level

logger = logging.getLogger("tanka")
logger.propagate = False

stdout_handler = logging.StreamHandler(sys.stdout)
stderr_handler = logging.StreamHandler(sys.stderr)

stdout_handler.setLevel(logging.DEBUG)
stdout_handler.addFilter(lambda record: record.levelno < logging.WARNING)  # INFO and below
stderr_handler.setLevel(logging.WARNING)  # WARNING and above

formatter = logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")
stdout_handler.setFormatter(formatter)
stderr_handler.setFormatter(formatter)

logger.addHandler(stdout_handler)
logger.addHandler(stderr_handler)


def configure_level() -> int:
    """Apply TANKA_LOG_LEVEL to the logger and return the level set.

    An unusable value keeps INFO and is reported as a warning.
    """
    try:
        level = logging_level(get_log_level())
    except ConfigError as e:
        level = logging_level(DEFAULT_LOG_LEVEL)
        logger.setLevel(level)
        logger.warning(f"{e}; using {DEFAULT_LOG_LEVEL}")
        return level
    logger.setLevel(level)
    return level


configure_level()
