import logging
import os
import sys

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"

logger = logging.getLogger()
logger.setLevel(os.getenv("YOMIKAKI_LOG_LEVEL", "INFO").upper())


class _MaxLevelFilter(logging.Filter):
    """Let through only records strictly below *level*."""

    def __init__(self, level: int):
        super().__init__()
        self.level = level

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < self.level


if not any(getattr(h, "_yomikaki", False) for h in logger.handlers):
    stdout_handler = logging.StreamHandler(sys.stdout)
    stderr_handler = logging.StreamHandler(sys.stderr)

    stdout_handler.setLevel(logging.DEBUG)
    stdout_handler.addFilter(_MaxLevelFilter(logging.WARNING))  # below WARNING
    stderr_handler.setLevel(logging.WARNING)                    # WARNING and above

    formatter = logging.Formatter(LOG_FORMAT)
    for handler in (stdout_handler, stderr_handler):
        handler.setFormatter(formatter)
        handler._yomikaki = True
        logger.addHandler(handler)
