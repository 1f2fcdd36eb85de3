from __future__ import annotations

import logging
import random
from typing import List, Optional, Sequence

from .algorithms import run_algorithm
from .config import NUM_QUEUES, QUANTUM, QUEUE_ALGORITHMS
from .metrics import total_burst_time
from .models import MultilevelResult, Process, QueueResult

logger = logging.getLogger(__name__)


def partition_queues(processes: Sequence[Process], rng: random.Random) -> List[List[Process]]:
    """
    Assign every process to one of the queues, independently and uniformly
    at random. Input order is kept inside each queue.
    """
    queues: List[List[Process]] = [[] for _ in range(NUM_QUEUES)]
    for p in processes:
        queues[rng.randrange(NUM_QUEUES)].append(p)
    return queues


def schedule_multilevel(
    processes: Sequence[Process],
    rng: random.Random,
    quantum: Optional[int] = None,
) -> MultilevelResult:
    """
    Multilevel queue scheduling over a random partition of ``processes``.

    Queue 0 runs Round Robin, queue 1 FCFS and queue 2 SJF. Queues are
    served in index order, so each non-empty queue's average waiting time
    is shifted by the total burst time of every queue ahead of it. The
    overall figure is the plain mean of the per-queue averages (empty
    queues count as 0.0), not a mean over individual processes.
    """
    queues = partition_queues(processes, rng)
    logger.debug("Partitioned %d processes into queues of sizes %s", len(processes), [len(q) for q in queues])

    return compose_queues(queues, quantum=quantum)


def compose_queues(queues: Sequence[Sequence[Process]], quantum: Optional[int] = None) -> MultilevelResult:
    """
    Run the per-queue strategies over an already partitioned batch and
    combine their averages.
    """
    if len(queues) != NUM_QUEUES:
        raise ValueError(f"Expected {NUM_QUEUES} queues, got {len(queues)}")

    q = quantum if quantum is not None else QUANTUM

    queue_results: List[QueueResult] = []
    offset = 0
    for index, (alg, members) in enumerate(zip(QUEUE_ALGORITHMS, queues)):
        result = run_algorithm(alg, members, quantum=q if alg == "rr" else None)

        adjusted = result.avg_waiting_time + offset if members else 0.0
        queue_results.append(
            QueueResult(
                index=index,
                algorithm=alg,
                result=result,
                offset=offset,
                adjusted_avg_waiting_time=adjusted,
            )
        )
        offset += total_burst_time(members)

    overall = sum(qr.adjusted_avg_waiting_time for qr in queue_results) / NUM_QUEUES
    return MultilevelResult(queues=queue_results, avg_waiting_time=overall)
