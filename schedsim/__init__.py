"""
CPU scheduling simulator package.

Computes waiting and turnaround times for FCFS, SJF, Priority, Round Robin
and multilevel queue scheduling over a synthetic batch of processes.
"""

__all__ = ["algorithms", "cli", "config", "multilevel"]
