"""Ambient helpers: logging, config, metrics and the fork-join runner."""

from .logger_utils import Log
from .metrics_tracker import Metrics
from .threaded_runner import run_parallel

__all__ = ["Log", "Metrics", "run_parallel"]
