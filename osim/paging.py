"""FIFO and LRU page replacement simulation."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Sequence, TextIO

MAX_REF_LEN = 100
MAX_FRAMES = 10

Frames = tuple  # tuple of page numbers, None marking an empty frame


@dataclass(frozen=True)
class PagingResult:
    """Outcome of one replacement run: frame contents after every reference."""

    algorithm: str
    pages: tuple[int, ...]
    frame_count: int
    snapshots: tuple[Frames, ...]
    faults: int


def _validate(pages: Iterable[int], frame_count: int) -> tuple[int, ...]:
    refs = tuple(pages)
    if not 1 <= frame_count <= MAX_FRAMES:
        raise ValueError(f"frame count must be between 1 and {MAX_FRAMES}, got {frame_count}")
    if len(refs) > MAX_REF_LEN:
        raise ValueError(f"at most {MAX_REF_LEN} page references are allowed, got {len(refs)}")
    return refs


def simulate_fifo(pages: Iterable[int], frame_count: int) -> PagingResult:
    """Replace the page that has been in memory the longest."""
    refs = _validate(pages, frame_count)
    memory: list[Optional[int]] = [None] * frame_count
    front = 0
    faults = 0
    snapshots = []
    for page in refs:
        if page not in memory:
            memory[front] = page
            front = (front + 1) % frame_count
            faults += 1
        snapshots.append(tuple(memory))
    return PagingResult("FIFO", refs, frame_count, tuple(snapshots), faults)


def simulate_lru(pages: Iterable[int], frame_count: int) -> PagingResult:
    """Replace the page whose last use lies furthest in the past."""
    refs = _validate(pages, frame_count)
    memory: list[Optional[int]] = [None] * frame_count
    last_used = [0] * frame_count
    clock = 0
    faults = 0
    snapshots = []
    for page in refs:
        clock += 1
        if page in memory:
            slot = memory.index(page)
        else:
            slot = min(range(frame_count), key=last_used.__getitem__)
            memory[slot] = page
            faults += 1
        last_used[slot] = clock
        snapshots.append(tuple(memory))
    return PagingResult("LRU", refs, frame_count, tuple(snapshots), faults)


def format_result(result: PagingResult) -> str:
    """Render a run as a step-by-step frame table followed by the fault total."""
    lines = [f"\n--- {result.algorithm} Simulation ---"]
    for page, frames in zip(result.pages, result.snapshots):
        cells = "".join(" - " if frame is None else f" {frame} " for frame in frames)
        lines.append(f"Page {page}: {cells}")
    lines.append(f"Total Page Faults ({result.algorithm}): {result.faults}")
    return "\n".join(lines) + "\n"


def _read_ints(stream: TextIO) -> Iterator[int]:
    for line in stream:
        for token in line.split():
            yield int(token)


def _next_int(numbers: Iterator[int]) -> int:
    try:
        return next(numbers)
    except StopIteration:
        raise ValueError("unexpected end of input") from None


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read a reference string and frame count from stdin and compare FIFO with LRU."""
    parser = argparse.ArgumentParser(description="Simulate FIFO and LRU page replacement.")
    parser.parse_args(argv)

    numbers = _read_ints(sys.stdin)
    try:
        print("Enter number of page references: ", end="", flush=True)
        count = _next_int(numbers)
        print("Enter the page reference sequence (space-separated):", flush=True)
        pages = [_next_int(numbers) for _ in range(count)]
        print("Enter number of frames in memory: ", end="", flush=True)
        frame_count = _next_int(numbers)
        fifo = simulate_fifo(pages, frame_count)
        lru = simulate_lru(pages, frame_count)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    sys.stdout.write(format_result(fifo))
    sys.stdout.write(format_result(lru))
    return 0