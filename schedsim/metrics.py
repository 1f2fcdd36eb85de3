from __future__ import annotations

from typing import List, Sequence

from .models import Process, ProcessMetrics, ScheduleResult, ScheduledSlice


def cumulative_waiting_times(bursts: Sequence[int]) -> List[int]:
    """
    Waiting time of each job when the jobs run back to back in the given
    order: every job waits for the total burst of the jobs before it.
    """
    waiting: List[int] = []
    elapsed = 0
    for burst in bursts:
        waiting.append(elapsed)
        elapsed += burst
    return waiting


def run_in_order(ordered: Sequence[Process]) -> tuple[List[ProcessMetrics], List[ScheduledSlice]]:
    """
    Build per-process metrics and timeline slices for a non-preemptive run
    of ``ordered``.
    """
    waiting = cumulative_waiting_times([p.burst_time for p in ordered])

    metrics: List[ProcessMetrics] = []
    timeline: List[ScheduledSlice] = []
    for p, waiting_time in zip(ordered, waiting):
        completion_time = waiting_time + p.burst_time
        timeline.append(ScheduledSlice(pid=p.pid, start_time=waiting_time, end_time=completion_time))
        metrics.append(
            ProcessMetrics(
                pid=p.pid,
                burst_time=p.burst_time,
                priority=p.priority,
                start_time=waiting_time,
                completion_time=completion_time,
                waiting_time=waiting_time,
                turnaround_time=waiting_time + p.burst_time,
            )
        )
    return metrics, timeline


def compute_averages(result: ScheduleResult) -> ScheduleResult:
    """
    Fill in the average waiting and turnaround times of ``result``.

    An empty result has both averages defined as 0.0.
    """
    if not result.processes:
        result.avg_waiting_time = 0.0
        result.avg_turnaround_time = 0.0
        return result

    n = len(result.processes)
    result.avg_waiting_time = sum(p.waiting_time for p in result.processes) / n
    result.avg_turnaround_time = sum(p.turnaround_time for p in result.processes) / n
    return result


def total_burst_time(processes: Sequence[Process]) -> int:
    return sum(p.burst_time for p in processes)
