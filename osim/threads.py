"""Two worker threads printing counters, joined before a final message."""

from __future__ import annotations

import argparse
import sys
import threading
import time
from typing import Optional, Sequence, TextIO

DONE_MESSAGE = "Done Hooman - [1370]"
LABELS = ("Thread Hooman", "Born in 2004")


def run_workers(
    iterations: int = 5, delay: float = 1.0, output: Optional[TextIO] = None
) -> list[str]:
    """Run both workers concurrently and return every line written, in order."""
    if delay < 0:
        raise ValueError(f"delay must not be negative, got {delay}")
    out = sys.stdout if output is None else output
    lines: list[str] = []
    lock = threading.Lock()

    def emit(line: str) -> None:
        with lock:
            lines.append(line)
            out.write(line + "\n")
            out.flush()

    def worker(label: str) -> None:
        for i in range(iterations):
            emit(f"{label} {i}")
            time.sleep(delay)

    workers = [threading.Thread(target=worker, args=(label,)) for label in LABELS]
    for thread in workers:
        thread.start()
    for thread in workers:
        thread.join()
    emit(DONE_MESSAGE)
    return lines


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the two workers and wait for them."""
    parser = argparse.ArgumentParser(description="Run two counting threads.")
    parser.add_argument("--iterations", type=int, default=5, help="lines per worker")
    parser.add_argument("--delay", type=float, default=1.0, help="seconds between lines")
    args = parser.parse_args(argv)
    try:
        run_workers(args.iterations, args.delay)
    except ValueError as exc:
        parser.error(str(exc))
    return 0