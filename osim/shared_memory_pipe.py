"""Pass a string through a shared memory segment, synchronised by a pipe."""

from __future__ import annotations

import argparse
import mmap
import os
import sys
import threading
from typing import Optional, Sequence, TextIO

SHM_SIZE = 1024


def _c_string(raw: bytes) -> bytes:
    return raw.split(b"\0", 1)[0]


def exchange(text: str, size: int = SHM_SIZE, output: Optional[TextIO] = None) -> int:
    """Write the first line of ``text`` into shared memory and let a reader count it.

    The reader blocks on a pipe until the writer signals that the segment is filled.
    Returns the number of bytes the reader found in the segment.
    """
    if size < 1:
        raise ValueError(f"shared memory size must be positive, got {size}")
    out = sys.stdout if output is None else output
    lock = threading.Lock()

    def emit(line: str) -> None:
        with lock:
            out.write(line + "\n")
            out.flush()

    data = text.encode("utf-8")[: size - 1].split(b"\n", 1)[0]
    counts: list[int] = []

    with mmap.mmap(-1, size) as segment:
        read_fd, write_fd = os.pipe()

        def reader() -> None:
            emit(f"Child Process (TID: {threading.get_native_id()})")
            with os.fdopen(read_fd, "rb") as pipe_in:
                pipe_in.read(2)
            contents = _c_string(segment[:])
            emit(f"Child: Reading shared memory: '{contents.decode('utf-8', 'replace')}'")
            counts.append(len(contents))
            emit(f"Child: Character count: {len(contents)}")
            emit("Child: Shared memory detached.")

        worker = threading.Thread(target=reader)
        worker.start()
        segment.seek(0)
        segment.write(data + b"\0")
        written = _c_string(segment[:]).decode("utf-8", "replace")
        emit(f"Parent: Wrote to shared memory: '{written}'")
        with os.fdopen(write_fd, "wb") as pipe_out:
            pipe_out.write(b"OK")
        worker.join()

    emit("Parent: Shared memory detached and removed.")
    return counts[0]


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read one line from stdin and pass it through shared memory."""
    parser = argparse.ArgumentParser(description="Share a string between two workers.")
    parser.parse_args(argv)
    print(f"Parent Process (PID: {os.getpid()})")
    print("Enter a string: ", flush=True)
    line = sys.stdin.readline()
    exchange(line)
    return 0