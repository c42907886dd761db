# logger_utils.py - for logging messages and performance metrics, timestamps etc

import logging
import os
import sys
import time
from typing import Optional

LOGGER_NAME = "markov_text_predictor"

logger = logging.getLogger(LOGGER_NAME)
logger.addHandler(logging.NullHandler())


class _ColorFormatter(logging.Formatter):
    """Formats as: [YYYY-MM-DD HH:MM:SS] LEVEL   | message, colour-coded by level."""
    COLORS = {
        "DEBUG": "\033[90m",   # gray
        "INFO": "\033[94m",    # blue
        "WARNING": "\033[93m", # yellow
        "ERROR": "\033[91m",   # red
        "RESET": "\033[0m",
    }

    def __init__(self, use_color: bool = True):
        super().__init__("[%(asctime)s] %(levelname)-7s | %(message)s", "%Y-%m-%d %H:%M:%S")
        self.use_color = use_color

    def format(self, record):
        line = super().format(record)
        if self.use_color and record.levelname in self.COLORS:
            return f"{self.COLORS[record.levelname]}{line}{self.COLORS['RESET']}"
        return line


class Log:
    """Lightweight facade over the package logger for messages and metrics."""

    @staticmethod
    def configure(level: int = logging.INFO, path: Optional[str] = None,
                  use_color: Optional[bool] = None, stream=None) -> logging.Logger:
        """
        Attach a console handler (stderr by default) and optionally a log file.
        Calling it again replaces the handlers installed by a previous call.
        """
        Log.reset()
        stream = stream or sys.stderr
        if use_color is None:
            use_color = hasattr(stream, "isatty") and stream.isatty()

        console = logging.StreamHandler(stream)
        console.setFormatter(_ColorFormatter(use_color))
        console._mtp_owned = True
        logger.addHandler(console)

        if path:
            folder = os.path.dirname(path)
            if folder:
                os.makedirs(folder, exist_ok=True)  # Create the folder if it doesn't already exist
            fh = logging.FileHandler(path, encoding="utf-8")
            fh.setFormatter(_ColorFormatter(use_color=False))
            fh._mtp_owned = True
            logger.addHandler(fh)

        logger.setLevel(level)
        return logger

    @staticmethod
    def reset():
        """Remove handlers added by configure()."""
        for h in list(logger.handlers):
            if getattr(h, "_mtp_owned", False):
                logger.removeHandler(h)
                h.close()
        logger.setLevel(logging.NOTSET)

    # Public logging methods (handlers serialise writes across threads)
    @staticmethod
    def debug(msg: str):
        logger.debug(msg)

    @staticmethod
    def info(msg: str):
        logger.info(msg)

    @staticmethod
    def warning(msg: str):
        logger.warning(msg)

    @staticmethod
    def error(msg: str):
        logger.error(msg)

    @staticmethod
    def metric(tag, value, unit=""):
        """
        Record a metric (like timing, counts, or performance stats).
        Example: engine.build done: 0.123s
        """
        logger.info(f"{tag}: {value}{unit}")

    @staticmethod
    def time_block(label):
        """
        Helper for measuring execution time of a code block.
        To use:
            with Log.time_block("engine.build") as t:
                do_some_work()
            t.duration  # seconds
        It automatically logs how long the block took.
        """
        return _Timer(label)


class _Timer:
    """Context manager used internally to measure time for a code block."""
    def __init__(self, label):
        self.label = label
        self.start = time.perf_counter()
        self.duration = 0.0

    def __enter__(self):
        self.start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb):
        """When exiting the 'with' block, calculate how long it took and record it as a metric."""
        self.duration = time.perf_counter() - self.start
        if exc_type is None:
            Log.metric(f"{self.label} done", round(self.duration, 3), "s")
        return False
