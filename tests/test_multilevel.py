import random

import pytest

from schedsim.algorithms import schedule_fcfs, schedule_rr, schedule_sjf
from schedsim.config import NUM_QUEUES, SimulationConfig
from schedsim.models import Process
from schedsim.multilevel import compose_queues, partition_queues, schedule_multilevel
from schedsim.workload_io import generate_processes, make_rng


def _batch(n=12, seed=7):
    return generate_processes(SimulationConfig(process_count=n), make_rng(seed))


@pytest.mark.parametrize("seed", range(10))
def test_partition_conserves_processes(seed):
    procs = _batch(n=25)
    queues = partition_queues(procs, random.Random(seed))
    assert len(queues) == NUM_QUEUES
    assert sum(len(q) for q in queues) == len(procs)
    assert sorted(p.pid for q in queues for p in q) == [p.pid for p in procs]


def test_partition_keeps_input_order_within_queue():
    procs = _batch(n=30)
    for q in partition_queues(procs, random.Random(3)):
        pids = [p.pid for p in q]
        assert pids == sorted(pids)


def test_partition_reproducible_with_seed():
    procs = _batch()
    a = partition_queues(procs, random.Random(42))
    b = partition_queues(procs, random.Random(42))
    assert a == b


def test_multilevel_sizes_sum_to_batch():
    procs = _batch(n=20)
    res = schedule_multilevel(procs, random.Random(1))
    assert sum(res.sizes) == 20
    assert [q.algorithm for q in res.queues] == ["rr", "fcfs", "sjf"]


def test_compose_queues_offsets_and_mean_of_means():
    q0 = [Process(0, 5, 1), Process(1, 3, 2), Process(2, 1, 3)]
    q1 = [Process(3, 4, 1), Process(4, 2, 1)]
    q2 = [Process(5, 6, 2), Process(6, 1, 2)]

    res = compose_queues([q0, q1, q2], quantum=4)

    rr = schedule_rr(q0, quantum=4)
    fcfs = schedule_fcfs(q1)
    sjf = schedule_sjf(q2)

    assert res.queues[0].result.waiting_times == rr.waiting_times
    assert res.queues[1].result.waiting_times == fcfs.waiting_times
    assert res.queues[2].result.waiting_times == sjf.waiting_times

    assert [q.offset for q in res.queues] == [0, 9, 15]
    assert res.queues[0].adjusted_avg_waiting_time == pytest.approx(5.0)
    assert res.queues[1].adjusted_avg_waiting_time == pytest.approx(2.0 + 9)
    assert res.queues[2].adjusted_avg_waiting_time == pytest.approx(0.5 + 15)
    assert res.avg_waiting_time == pytest.approx((5.0 + 11.0 + 15.5) / 3)


def test_compose_queues_empty_queue_counts_as_zero():
    q0 = [Process(0, 4, 1)]
    q2 = [Process(1, 2, 1), Process(2, 6, 1)]

    res = compose_queues([q0, [], q2])

    assert res.sizes == [1, 0, 2]
    assert res.queues[1].adjusted_avg_waiting_time == 0.0
    assert res.queues[2].offset == 4
    assert res.queues[2].adjusted_avg_waiting_time == pytest.approx(1.0 + 4)
    # divided by the number of queues, not the number of non-empty ones
    assert res.avg_waiting_time == pytest.approx((0.0 + 0.0 + 5.0) / 3)


def test_multilevel_empty_batch():
    res = schedule_multilevel([], random.Random(0))
    assert res.sizes == [0, 0, 0]
    assert res.avg_waiting_time == 0.0


def test_compose_queues_rejects_wrong_queue_count():
    with pytest.raises(ValueError):
        compose_queues([[], []])


def test_multilevel_uses_quantum_for_round_robin_queue():
    res = compose_queues([[Process(0, 5, 1)], [], []], quantum=2)
    assert res.queues[0].result.quantum == 2
    assert len(res.queues[0].result.timeline) == 3
