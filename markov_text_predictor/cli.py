"""
cli.py - command line front-end for the Markov text predictor
Features:
- Reads a corpus file and builds the back-off engine (concurrent per-order build)
- Generates text from an optional prompt
- Optional JSON config file, overridden by flags
- Uses Rich for the output panel and the per-order hit table
"""

import argparse
import logging
import sys
import time
from typing import List, Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich import box

from markov_text_predictor.core.errors import PredictorError
from markov_text_predictor.core.prediction_engine import PredictionEngine
from markov_text_predictor.corpus import load_corpus
from markov_text_predictor.generation import generate, normalize_output
from markov_text_predictor.utils.config_manager import Config
from markov_text_predictor.utils.logger_utils import Log
from markov_text_predictor.utils.metrics_tracker import Metrics


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="markov-text-predictor",
        description="Generate text from a character-level back-off Markov model.",
    )
    parser.add_argument("corpus", help="training text file")
    parser.add_argument("prompt", nargs="?", default="", help="text to continue")
    parser.add_argument("-n", "--length", type=int, help="characters to generate (default 1000)")
    parser.add_argument("-k", "--max-order", type=int, help="longest context length (default 15)")
    parser.add_argument("--seed", type=int, help="seed for reproducible output")
    parser.add_argument("--workers", type=int, help="build threads (default: one per order, up to CPU count)")
    parser.add_argument("--keep-newlines", action="store_true", help="do not flatten newlines")
    parser.add_argument("--no-stats", action="store_true", help="skip the hit table")
    parser.add_argument("--config", help="JSON config file")
    parser.add_argument("--log-file", help="also write log lines to this file")
    parser.add_argument("--metrics-file", help="JSON file accumulating timings across runs")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    parser.add_argument("-q", "--quiet", action="store_true", help="hide build progress, warnings only")
    return parser


class CLI:
    """One-shot run: load, build, generate, print."""

    def __init__(self, args: argparse.Namespace, console: Optional[Console] = None):
        self.args = args
        self.console = console or Console()
        self.cfg = Config(args.config)
        self._apply_overrides()
        self.metrics = Metrics(self.cfg.get("metrics_file"))

    def _apply_overrides(self):
        a = self.args
        overrides = {
            "length": a.length,
            "max_order": a.max_order,
            "seed": a.seed,
            "workers": a.workers,
            "log_file": a.log_file,
            "metrics_file": a.metrics_file,
        }
        for k, v in overrides.items():
            if v is not None:
                self.cfg.set(k, v, persist=False)
        if a.keep_newlines:
            self.cfg.set("replace_newlines", False, persist=False)
        if a.no_stats:
            self.cfg.set("show_stats", False, persist=False)

    def run(self) -> int:
        # build progress lines are INFO, shown unless --quiet
        level = logging.INFO
        if self.args.verbose:
            level = logging.DEBUG
        elif self.args.quiet:
            level = logging.WARNING
        Log.configure(level=level, path=self.cfg.get("log_file"))

        text = load_corpus(self.args.corpus)

        t0 = time.perf_counter()
        engine = PredictionEngine.from_config(text, self.cfg.engine_config())
        self.metrics.record("build_time", time.perf_counter() - t0)

        t0 = time.perf_counter()
        output = generate(engine, self.args.prompt, self.cfg.get("length"))
        self.metrics.record("generate_time", time.perf_counter() - t0)
        self.metrics.save()

        output = normalize_output(output, self.cfg.get("replace_newlines"))
        # markup off: corpus text may contain [brackets]
        self.console.print(output, markup=False, highlight=False, soft_wrap=True)

        if self.cfg.get("show_stats"):
            engine.print_stats(self.console)
            self._show_timings()
            self.cfg.show(self.console)
        return 0

    def _show_timings(self):
        t = Table(title="Timings", box=box.MINIMAL)
        t.add_column("Metric", style="cyan")
        t.add_column("Seconds", justify="right")
        for k, v in self.metrics.summary().items():
            t.add_row(k, f"{v:.3f}")
        self.console.print(t)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    console = Console()
    try:
        return CLI(args, console).run()
    except PredictorError as e:
        Log.error(str(e))
        Console(stderr=True).print(Panel(str(e), title="Error", border_style="red"))
        return 1


if __name__ == "__main__":
    sys.exit(main())
