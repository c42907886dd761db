# tools/profile_generate.py
"""
Small profiling harness for PredictionEngine.
Usage:
  python tools/profile_generate.py corpus.txt --max-order 15 --iters 2000

Prints build time (concurrent vs one worker) and per-character prediction
latency: mean/median/p90/max.
"""
import argparse
import statistics
import time

from markov_text_predictor.core.prediction_engine import PredictionEngine
from markov_text_predictor.corpus import load_corpus


def time_build(text, max_order, workers=None):
    t0 = time.perf_counter()
    engine = PredictionEngine(text, max_order, seed=0, workers=workers)
    return engine, time.perf_counter() - t0


def benchmark(engine, prompt, iterations=1000):
    times = []
    context = prompt
    for _ in range(iterations):
        t0 = time.perf_counter()
        ch = engine.predict_next_char(context)
        times.append((time.perf_counter() - t0) * 1000.0)  # ms
        context += ch
    return times


def summarize(times):
    times_sorted = sorted(times)
    return {
        "count": len(times_sorted),
        "mean_ms": statistics.mean(times_sorted),
        "median_ms": statistics.median(times_sorted),
        "p90_ms": times_sorted[max(0, int(0.9 * len(times_sorted)) - 1)],
        "max_ms": max(times_sorted),
    }


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("corpus", help="training text file")
    parser.add_argument("--max-order", type=int, default=15)
    parser.add_argument("--iters", type=int, default=1000, help="measured predictions")
    parser.add_argument("--prompt", type=str, default="", help="starting context")
    args = parser.parse_args()

    text = load_corpus(args.corpus)
    _, seq = time_build(text, args.max_order, workers=1)
    engine, par = time_build(text, args.max_order)
    print(f"build: sequential={seq:.3f}s concurrent={par:.3f}s")

    s = summarize(benchmark(engine, args.prompt, args.iters))
    print("Profiling summary (ms):", s)
    print("hits per order:", [row["hits"] for row in engine.hit_stats()])


if __name__ == "__main__":
    main()
