"""
Ordering strategies.

Every strategy takes a process batch plus an optional quantum and returns a
fresh :class:`ScheduleResult`. All processes are ready at time 0, so the
non-preemptive strategies differ only in the order they run the batch.
The input list is never modified.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, List, Optional, Sequence

from .config import QUANTUM
from .metrics import compute_averages, run_in_order
from .models import Process, ProcessMetrics, ScheduleResult, ScheduledSlice

logger = logging.getLogger(__name__)

Strategy = Callable[..., ScheduleResult]


def schedule_fcfs(processes: Sequence[Process], quantum: Optional[int] = None) -> ScheduleResult:
    """
    First-Come First-Serve (non-preemptive). Runs the batch in input order.
    """
    metrics, timeline = run_in_order(list(processes))
    result = ScheduleResult(algorithm="FCFS", quantum=None, processes=metrics, timeline=timeline)
    return compute_averages(result)


def schedule_sjf(processes: Sequence[Process], quantum: Optional[int] = None) -> ScheduleResult:
    """
    Shortest Job First (non-preemptive).

    Sorting is stable, so processes with equal burst time keep their input
    order.
    """
    ordered = sorted(processes, key=lambda p: p.burst_time)
    metrics, timeline = run_in_order(ordered)
    result = ScheduleResult(algorithm="SJF (non-preemptive)", quantum=None, processes=metrics, timeline=timeline)
    return compute_averages(result)


def schedule_priority(processes: Sequence[Process], quantum: Optional[int] = None) -> ScheduleResult:
    """
    Static Priority scheduling (non-preemptive).

    Lower numeric priority value means higher priority. Ties keep input order.
    """
    ordered = sorted(processes, key=lambda p: p.priority)
    metrics, timeline = run_in_order(ordered)
    result = ScheduleResult(algorithm="Priority (static)", quantum=None, processes=metrics, timeline=timeline)
    return compute_averages(result)


def schedule_rr(processes: Sequence[Process], quantum: Optional[int] = None) -> ScheduleResult:
    """
    Round Robin scheduling with a fixed time quantum.

    The batch is scanned in input order, pass after pass. Each unfinished
    process gets up to one quantum per pass; a preempted process waits for
    the next full pass rather than rejoining a ready queue behind the
    process that follows it. Waiting times therefore can differ from a
    textbook FIFO ready-queue implementation.

    Rows are reported in input order.
    """
    if quantum is None:
        quantum = QUANTUM
    if quantum <= 0:
        raise ValueError("Round Robin requires a positive quantum (use --quantum)")

    procs = list(processes)
    remaining = [p.burst_time for p in procs]
    start_times: List[Optional[int]] = [None] * len(procs)
    completion = [0] * len(procs)

    time = 0
    timeline: List[ScheduledSlice] = []

    while any(rt > 0 for rt in remaining):
        for i, p in enumerate(procs):
            if remaining[i] <= 0:
                continue

            if start_times[i] is None:
                start_times[i] = time

            run_time = min(quantum, remaining[i])
            timeline.append(ScheduledSlice(pid=p.pid, start_time=time, end_time=time + run_time))
            time += run_time
            remaining[i] -= run_time

            if remaining[i] == 0:
                completion[i] = time

    metrics: List[ProcessMetrics] = []
    for i, p in enumerate(procs):
        waiting_time = completion[i] - p.burst_time
        metrics.append(
            ProcessMetrics(
                pid=p.pid,
                burst_time=p.burst_time,
                priority=p.priority,
                start_time=start_times[i] or 0,
                completion_time=completion[i],
                waiting_time=waiting_time,
                turnaround_time=waiting_time + p.burst_time,
            )
        )

    result = ScheduleResult(algorithm="Round Robin", quantum=quantum, processes=metrics, timeline=timeline)
    return compute_averages(result)


ALGORITHMS: Dict[str, Strategy] = {
    "fcfs": schedule_fcfs,
    "sjf": schedule_sjf,
    "priority": schedule_priority,
    "rr": schedule_rr,
}


def run_algorithm(name: str, processes: Sequence[Process], quantum: Optional[int] = None) -> ScheduleResult:
    """
    Dispatch to the requested algorithm. Quantum is only used by round-robin.
    """
    name = name.lower()
    if name not in ALGORITHMS:
        raise ValueError(f"Unknown algorithm '{name}' (choose from {', '.join(ALGORITHMS)})")

    result = ALGORITHMS[name](processes, quantum=quantum)
    logger.debug(
        "%s scheduled %d processes: avg waiting %.2f, avg turnaround %.2f",
        result.algorithm,
        len(result.processes),
        result.avg_waiting_time,
        result.avg_turnaround_time,
    )
    return result
