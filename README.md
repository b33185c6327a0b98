# osim

Small simulations of classic operating-system concepts, usable as commands or as a library.

- **Page replacement** (`osim.paging`): FIFO and LRU over a page reference string. Shows the frames after every reference and the total number of page faults. At most 100 references and between 1 and 10 frames are accepted; anything else raises `ValueError`.
- **CPU scheduling** (`osim.scheduler`): FCFS, SJF (preemptive, shortest remaining time first), priority (preemptive, a lower number means a higher priority) and round robin. Reports waiting, turnaround and leave times for each process and the averages.
- **Shared memory with a pipe** (`osim.shared_memory_pipe`): a writer puts the first line of a text into a fixed-size shared buffer (1024 bytes by default, NUL-terminated), then signals a reader over a pipe. The reader prints the text and its length in bytes.
- **Threads** (`osim.threads`): two workers print numbered lines side by side, and a completion message follows once both have finished.

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Commands

```
osim-paging        # asks for a reference count, the references and a frame count; runs FIFO then LRU
osim-scheduler     # asks for an algorithm (1-4), a time quantum for round robin, then the processes
osim-shm-pipe      # asks for a line of text and passes it through shared memory
osim-threads       # runs two workers; options --iterations N (default 5) and --delay SECONDS (default 1.0)
```

The interactive commands read whitespace-separated integers (or, for `osim-shm-pipe`, one line) from standard input in the order of the prompts. Missing or malformed input makes `osim-paging` and `osim-scheduler` print an error and exit with status 1. An unknown scheduling choice prints `Invalid choice.`.

## Library use

```python
from osim.paging import simulate_fifo, simulate_lru, format_result

result = simulate_fifo([7, 0, 1, 2, 0, 3, 0, 4], 3)
print(result.faults)          # number of page faults
print(result.snapshots)       # frame contents after each reference, None for an empty frame
print(format_result(simulate_lru([7, 0, 1, 2, 0, 3, 0, 4], 3)))
```

```python
from osim.scheduler import Process, fcfs, sjf, priority_scheduling, round_robin, format_results

procs = [Process(1, 0, 5), Process(2, 1, 3), Process(3, 2, 1)]
result = round_robin(procs, quantum=2)
print(result.average_waiting_time())
print(format_results(result, with_priority=False))
```

`Process` and `ScheduleResult` are frozen dataclasses; the scheduling functions return new `Process` values with `waiting_time`, `turnaround_time` and `leave_time` filled in. `fcfs` reports processes in arrival order, the others in input order. `sjf` and `priority_scheduling` reject a process without a positive burst time, and `round_robin` rejects a quantum below 1, each with `ValueError`.

`osim.shared_memory_pipe.exchange(text, size=1024, output=None)` returns the number of bytes the reader found, and `osim.threads.run_workers(iterations=5, delay=1.0, output=None)` returns every line written, in order. Both write to standard output unless another stream is given.

## Limitations

- Round robin treats every process as ready at time 0: arrival times only affect the reported turnaround and waiting times, not the order of execution.
- In the shared memory demonstration the writer and the reader are threads of one process sharing an anonymous memory map; no separate process is started and no system-wide shared memory segment is created.