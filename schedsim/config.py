from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

QUANTUM = 4
DEFAULT_PROCESS_COUNT = 10
MIN_BURST_TIME = 1
MAX_BURST_TIME = 20
MIN_PRIORITY = 1
MAX_PRIORITY = 3

# Queue index -> algorithm key. The mapping is fixed.
QUEUE_ALGORITHMS = ("rr", "fcfs", "sjf")
NUM_QUEUES = len(QUEUE_ALGORITHMS)


class ConfigError(ValueError):
    """Raised when a simulation is configured with unusable parameters."""


@dataclass(frozen=True)
class SimulationConfig:
    """
    Parameters for generating a process batch and running the schedulers.

    Validation happens at construction so an invalid configuration never
    reaches the scheduling code.
    """

    process_count: int = DEFAULT_PROCESS_COUNT
    quantum: int = QUANTUM
    min_burst: int = MIN_BURST_TIME
    max_burst: int = MAX_BURST_TIME
    min_priority: int = MIN_PRIORITY
    max_priority: int = MAX_PRIORITY
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        if self.process_count <= 0:
            raise ConfigError(f"process count must be positive, got {self.process_count}")
        if self.quantum <= 0:
            raise ConfigError(f"quantum must be positive, got {self.quantum}")
        if self.min_burst < 1:
            raise ConfigError(f"minimum burst time must be at least 1, got {self.min_burst}")
        if self.min_burst > self.max_burst:
            raise ConfigError(
                f"burst time range is inverted: [{self.min_burst}, {self.max_burst}]"
            )
        if self.min_priority > self.max_priority:
            raise ConfigError(
                f"priority range is inverted: [{self.min_priority}, {self.max_priority}]"
            )
