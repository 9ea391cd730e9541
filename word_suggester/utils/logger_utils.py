# logger_utils.py - logging setup and timing metrics

import logging
import time
from typing import Optional

ROOT_LOGGER = "word_suggester"
LOG_FORMAT = "[%(asctime)s] %(levelname)-7s | %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

logger = logging.getLogger(ROOT_LOGGER)


def configure_logging(level: str = "INFO", path: Optional[str] = None) -> logging.Logger:
    """
    Attach a handler to the package logger.
    Logs go to stderr, or appended to `path` if given.
    Calling again replaces the previous handler.
    """
    logger.setLevel(level.upper())
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()
    handler = logging.FileHandler(path, encoding="utf-8") if path else logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
    logger.addHandler(handler)
    return logger


class Log:
    """Timing metrics written through the package logger."""

    @staticmethod
    def metric(tag, value, unit=""):
        """
        Record a metric (timing, counts...).
        Example: "load done: 0.012s"
        """
        logger.info("%s: %s%s", tag, value, unit)

    @staticmethod
    def time_block(label):
        """
        Measure execution time of a code block:
            with Log.time_block("load"):
                do_some_work()
        """
        return _Timer(label)


class _Timer:
    """Context manager used internally to measure time for a code block."""

    def __init__(self, label):
        self.label = label
        self.start = 0.0
        self.elapsed = 0.0

    def __enter__(self):
        self.start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.elapsed = time.perf_counter() - self.start
        Log.metric(f"{self.label} done", round(self.elapsed, 3), "s")
