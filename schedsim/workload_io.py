from __future__ import annotations

import csv
import json
import logging
import random
from pathlib import Path
from typing import Iterable, List, Optional

from .config import MAX_PRIORITY, MIN_PRIORITY, SimulationConfig
from .models import Process

logger = logging.getLogger(__name__)


def make_rng(seed: Optional[int] = None) -> random.Random:
    """
    Random generator used for process generation and queue partitioning.
    Passing a seed makes both reproducible.
    """
    return random.Random(seed)


def generate_processes(config: SimulationConfig, rng: random.Random) -> List[Process]:
    """
    Generate ``config.process_count`` processes with pids 0..n-1 and burst
    time and priority drawn uniformly from the configured inclusive ranges.
    """
    processes = [
        Process(
            pid=i,
            burst_time=rng.randint(config.min_burst, config.max_burst),
            priority=rng.randint(config.min_priority, config.max_priority),
        )
        for i in range(config.process_count)
    ]
    logger.debug("Generated %d processes", len(processes))
    return processes


def load_workload(path: str | Path) -> List[Process]:
    """
    Load a workload from a JSON or CSV file into a list of Process objects.
    """
    path = Path(path)
    suffix = path.suffix.lower()

    if suffix == ".json":
        return _load_json(path)
    if suffix == ".csv":
        return _load_csv(path)

    raise ValueError(f"Unsupported workload format: {suffix} (use .json or .csv)")


def _load_json(path: Path) -> List[Process]:
    with path.open("r", encoding="utf-8") as f:
        raw = json.load(f)

    if not isinstance(raw, list):
        raise ValueError("JSON workload must be a list of process objects")

    return _processes_from_rows(raw)


def _load_csv(path: Path) -> List[Process]:
    with path.open("r", encoding="utf-8", newline="") as f:
        return _processes_from_rows(csv.DictReader(f))


def _processes_from_rows(rows: Iterable) -> List[Process]:
    processes = [_process_from_mapping(row) for row in rows]

    pids = [p.pid for p in processes]
    if len(set(pids)) != len(pids):
        raise ValueError("Workload contains duplicate pids")

    logger.debug("Loaded %d processes", len(processes))
    return processes


def _int_field(mapping, key: str) -> int:
    # JSON booleans and fractional numbers would otherwise be coerced by int()
    value = mapping[key]
    if isinstance(value, bool) or (isinstance(value, float) and not value.is_integer()):
        raise ValueError(f"{key} must be an integer, got {value!r}")
    return int(value)


def _process_from_mapping(mapping) -> Process:
    try:
        pid = _int_field(mapping, "pid")
        burst_time = _int_field(mapping, "burst_time")
    except (KeyError, TypeError, ValueError) as exc:
        raise ValueError(f"Invalid process entry: {mapping!r}") from exc

    if burst_time <= 0:
        raise ValueError(f"Burst time must be positive: {mapping!r}")

    if mapping.get("priority") in (None, ""):
        return Process(pid=pid, burst_time=burst_time, priority=MAX_PRIORITY)

    try:
        priority = _int_field(mapping, "priority")
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Invalid priority in process entry: {mapping!r}") from exc

    if not MIN_PRIORITY <= priority <= MAX_PRIORITY:
        raise ValueError(f"Priority must be in [{MIN_PRIORITY}, {MAX_PRIORITY}]: {mapping!r}")

    return Process(pid=pid, burst_time=burst_time, priority=priority)
