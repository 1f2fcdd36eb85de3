from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class Process:
    pid: int
    burst_time: int
    priority: int


@dataclass
class ScheduledSlice:
    """
    One contiguous slice of execution for a process in the Gantt chart.
    """

    pid: int
    start_time: int
    end_time: int


@dataclass
class ProcessMetrics:
    pid: int
    burst_time: int
    priority: int
    start_time: int
    completion_time: int
    waiting_time: int
    turnaround_time: int


@dataclass
class ScheduleResult:
    algorithm: str
    quantum: Optional[int]
    processes: List[ProcessMetrics] = field(default_factory=list)
    timeline: List[ScheduledSlice] = field(default_factory=list)
    avg_waiting_time: float = 0.0
    avg_turnaround_time: float = 0.0

    @property
    def order(self) -> List[int]:
        return [p.pid for p in self.processes]

    @property
    def waiting_times(self) -> List[int]:
        return [p.waiting_time for p in self.processes]

    @property
    def turnaround_times(self) -> List[int]:
        return [p.turnaround_time for p in self.processes]


@dataclass
class QueueResult:
    """
    Outcome of one multilevel queue: the strategy's own result plus the
    offset absorbed from the queues ahead of it.
    """

    index: int
    algorithm: str
    result: ScheduleResult
    offset: int = 0
    adjusted_avg_waiting_time: float = 0.0

    @property
    def size(self) -> int:
        return len(self.result.processes)


@dataclass
class MultilevelResult:
    queues: List[QueueResult] = field(default_factory=list)
    avg_waiting_time: float = 0.0

    @property
    def sizes(self) -> List[int]:
        return [q.size for q in self.queues]
