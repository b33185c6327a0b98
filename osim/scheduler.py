"""CPU scheduling: FCFS, preemptive SJF, preemptive priority and round robin."""

from __future__ import annotations

import argparse
import math
import sys
from dataclasses import dataclass, replace
from typing import Callable, Iterable, Iterator, Optional, Sequence, TextIO


@dataclass(frozen=True)
class Process:
    """A process description together with the timings a scheduler assigned to it."""

    process_id: int
    arrival_time: int
    burst_time: int
    priority: int = 0
    waiting_time: int = 0
    turnaround_time: int = 0
    leave_time: int = 0


def _mean(values: Iterable[int]) -> float:
    items = list(values)
    if not items:
        return math.nan
    return sum(items) / len(items)


@dataclass(frozen=True)
class ScheduleResult:
    """Scheduled processes, in the order the algorithm reports them."""

    name: str
    processes: tuple[Process, ...]

    def average_waiting_time(self) -> float:
        return _mean(p.waiting_time for p in self.processes)

    def average_turnaround_time(self) -> float:
        return _mean(p.turnaround_time for p in self.processes)


def fcfs(processes: Iterable[Process]) -> ScheduleResult:
    """First come, first served; processes are reported in arrival order."""
    clock = 0
    done = []
    for proc in sorted(processes, key=lambda p: p.arrival_time):
        clock = max(clock, proc.arrival_time)
        waiting = clock - proc.arrival_time
        clock += proc.burst_time
        done.append(
            replace(
                proc,
                waiting_time=waiting,
                leave_time=clock,
                turnaround_time=waiting + proc.burst_time,
            )
        )
    return ScheduleResult("FCFS", tuple(done))


def _preemptive(
    processes: Iterable[Process], rank: Callable[[Process, int], int]
) -> tuple[Process, ...]:
    """Run one time unit at a time, always picking the lowest-ranked ready process."""
    procs = list(processes)
    for proc in procs:
        if proc.burst_time <= 0:
            raise ValueError(f"process {proc.process_id} has no positive burst time")
    remaining = [proc.burst_time for proc in procs]
    finished = list(procs)
    pending = len(procs)
    clock = 0
    while pending:
        ready = [
            i for i, proc in enumerate(procs) if proc.arrival_time <= clock and remaining[i] > 0
        ]
        if not ready:
            clock = min(proc.arrival_time for i, proc in enumerate(procs) if remaining[i] > 0)
            continue
        chosen = min(ready, key=lambda i: rank(procs[i], remaining[i]))
        remaining[chosen] -= 1
        clock += 1
        if remaining[chosen] == 0:
            pending -= 1
            proc = procs[chosen]
            finished[chosen] = replace(
                proc,
                leave_time=clock,
                waiting_time=clock - proc.burst_time - proc.arrival_time,
                turnaround_time=clock - proc.arrival_time,
            )
    return tuple(finished)


def sjf(processes: Iterable[Process]) -> ScheduleResult:
    """Shortest remaining time first; ties go to the earlier process."""
    return ScheduleResult("SJF", _preemptive(processes, lambda proc, left: left))


def priority_scheduling(processes: Iterable[Process]) -> ScheduleResult:
    """Preemptive priority scheduling; a lower number means a higher priority."""
    return ScheduleResult("Priority", _preemptive(processes, lambda proc, left: proc.priority))


def round_robin(processes: Iterable[Process], quantum: int) -> ScheduleResult:
    """Cycle through the processes in order, giving each at most one quantum per turn.

    Arrival times do not delay a process: every process is treated as ready at time 0.
    """
    if quantum < 1:
        raise ValueError(f"time quantum must be positive, got {quantum}")
    procs = list(processes)
    remaining = [proc.burst_time for proc in procs]
    finished = list(procs)
    clock = 0
    while any(left > 0 for left in remaining):
        for i, proc in enumerate(procs):
            if remaining[i] <= 0:
                continue
            run = min(remaining[i], quantum)
            remaining[i] -= run
            clock += run
            if remaining[i] == 0:
                turnaround = clock - proc.arrival_time
                finished[i] = replace(
                    proc,
                    leave_time=clock,
                    turnaround_time=turnaround,
                    waiting_time=turnaround - proc.burst_time,
                )
    return ScheduleResult("Round Robin", tuple(finished))


def format_results(result: ScheduleResult, with_priority: bool = False) -> str:
    """Render a schedule as a tab-separated table with the averages beneath it."""
    header = "Process\tArrival\tBurst"
    if with_priority:
        header += "\tPriority"
    header += "\tWaiting\tTurnaround\tLeave Time"
    lines = [f"\n{result.name} Scheduling Results:", header]
    for proc in result.processes:
        row = f"{proc.process_id}\t{proc.arrival_time}\t{proc.burst_time}"
        if with_priority:
            row += f"\t{proc.priority}"
        row += f"\t{proc.waiting_time}\t{proc.turnaround_time}\t\t{proc.leave_time}"
        lines.append(row)
    lines.append("")
    lines.append(f"Average Waiting Time: {result.average_waiting_time():.2f}")
    lines.append(f"Average Turnaround Time: {result.average_turnaround_time():.2f}")
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


def _prompt(text: str) -> None:
    print(text, end="", flush=True)


def _input_processes(numbers: Iterator[int], with_priority: bool) -> list[Process]:
    _prompt("Enter number of processes: ")
    count = _next_int(numbers)
    processes = []
    for process_id in range(1, count + 1):
        print(f"\nProcess {process_id}")
        _prompt("Arrival Time: ")
        arrival = _next_int(numbers)
        _prompt("Burst Time: ")
        burst = _next_int(numbers)
        priority = 0
        if with_priority:
            _prompt("Priority (lower is higher): ")
            priority = _next_int(numbers)
        processes.append(Process(process_id, arrival, burst, priority))
    return processes


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Ask for an algorithm and a process list on stdin, then print the schedule."""
    parser = argparse.ArgumentParser(description="Simulate CPU scheduling algorithms.")
    parser.parse_args(argv)

    numbers = _read_ints(sys.stdin)
    try:
        print("Select Scheduling Algorithm:")
        _prompt("1. FCFS\n2. SJF\n3. Priority\n4. Round Robin\nEnter choice (1-4): ")
        choice = _next_int(numbers)
        if choice == 1:
            result = fcfs(_input_processes(numbers, with_priority=False))
        elif choice == 2:
            result = sjf(_input_processes(numbers, with_priority=False))
        elif choice == 3:
            result = priority_scheduling(_input_processes(numbers, with_priority=True))
        elif choice == 4:
            _prompt("Enter Time Quantum: ")
            quantum = _next_int(numbers)
            result = round_robin(_input_processes(numbers, with_priority=False), quantum)
        else:
            print("Invalid choice.")
            return 0
    except ValueError as exc:
        print(f"\nerror: {exc}", file=sys.stderr)
        return 1

    sys.stdout.write(format_results(result, with_priority=choice == 3))
    return 0