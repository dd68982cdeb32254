"""Root logger setup: INFO to stdout, WARNING and above to stderr."""

import logging
import sys

FORMAT = "%(asctime)s - %(levelname)s - %(message)s"

STDOUT_HANDLER = "katsuyo.stdout"
STDERR_HANDLER = "katsuyo.stderr"


class _MaxLevelFilter(logging.Filter):
    def __init__(self, level: int):
        super().__init__()
        self.level = level

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < self.level


def setup_logging(level: str | int = logging.INFO) -> logging.Logger:
    """Configure the root logger once; later calls only change the level."""
    logger = logging.getLogger()
    logger.setLevel(level)

    if any(h.name == STDOUT_HANDLER for h in logger.handlers):
        return logger

    stdout_handler = logging.StreamHandler(sys.stdout)
    stderr_handler = logging.StreamHandler(sys.stderr)
    stdout_handler.set_name(STDOUT_HANDLER)
    stderr_handler.set_name(STDERR_HANDLER)

    stdout_handler.setLevel(logging.DEBUG)                       # below WARNING
    stdout_handler.addFilter(_MaxLevelFilter(logging.WARNING))
    stderr_handler.setLevel(logging.WARNING)                     # WARNING and above

    formatter = logging.Formatter(FORMAT)
    stdout_handler.setFormatter(formatter)
    stderr_handler.setFormatter(formatter)

    logger.addHandler(stdout_handler)
    logger.addHandler(stderr_handler)
    return logger
