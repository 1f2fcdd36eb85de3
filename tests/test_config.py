import pytest

from schedsim.config import (
    DEFAULT_PROCESS_COUNT,
    NUM_QUEUES,
    QUANTUM,
    QUEUE_ALGORITHMS,
    ConfigError,
    SimulationConfig,
)


def test_defaults():
    config = SimulationConfig()
    assert config.process_count == DEFAULT_PROCESS_COUNT == 10
    assert config.quantum == QUANTUM == 4
    assert (config.min_burst, config.max_burst) == (1, 20)
    assert (config.min_priority, config.max_priority) == (1, 3)
    assert NUM_QUEUES == 3
    assert QUEUE_ALGORITHMS == ("rr", "fcfs", "sjf")


@pytest.mark.parametrize(
    "kwargs",
    [
        {"process_count": 0},
        {"process_count": -3},
        {"quantum": 0},
        {"quantum": -1},
        {"min_burst": 0},
        {"min_burst": 10, "max_burst": 5},
        {"min_priority": 3, "max_priority": 1},
    ],
)
def test_invalid_config_rejected(kwargs):
    with pytest.raises(ConfigError):
        SimulationConfig(**kwargs)


def test_config_error_is_value_error():
    assert issubclass(ConfigError, ValueError)
