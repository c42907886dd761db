# threaded_runner.py - fork-join helper: run functions in threads and collect their results.

import os
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Iterable, List, Optional


def default_workers(n_tasks: int) -> int:
    """One thread per task, but never more than the machine has CPUs."""
    return max(1, min(n_tasks, os.cpu_count() or 1))


def run_parallel(tasks: Iterable[Callable], max_workers: Optional[int] = None) -> List:
    """
    Run callables (no-arg functions) in a thread pool and block until every one has finished.
    Results come back in submission order. If a task raised, its exception is re-raised
    here, after the join, so no task is still running when the caller sees it.
    """
    tasks = list(tasks)
    if not tasks:
        return []
    with ThreadPoolExecutor(max_workers=max_workers or default_workers(len(tasks))) as ex:
        futs = [ex.submit(t) for t in tasks]
    # leaving the with-block joined all workers
    return [f.result() for f in futs]
