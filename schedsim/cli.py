from __future__ import annotations

import argparse
import logging
import random
from typing import List

from rich import box
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from .algorithms import ALGORITHMS, run_algorithm
from .config import DEFAULT_PROCESS_COUNT, QUANTUM, QUEUE_ALGORITHMS, ConfigError, SimulationConfig
from .gantt import build_rich_gantt
from .models import MultilevelResult, Process, ScheduleResult
from .multilevel import schedule_multilevel
from .workload_io import generate_processes, load_workload, make_rng

logger = logging.getLogger(__name__)

MENU_CHOICES = {
    "1": "fcfs",
    "2": "sjf",
    "3": "priority",
    "4": "rr",
    "5": "multilevel",
    "8": "show",
    "9": "regenerate",
    "0": "exit",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="schedsim",
        description="CPU scheduling simulator (FCFS, SJF, Priority, RR, Multilevel Queue).",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging.",
    )

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--count",
        "-n",
        type=int,
        default=None,
        help=f"Number of processes to generate (default: {DEFAULT_PROCESS_COUNT}; ignored with --workload).",
    )
    common.add_argument(
        "--quantum",
        "-q",
        type=int,
        default=QUANTUM,
        help=f"Time quantum for round-robin (default: {QUANTUM}).",
    )
    common.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for process generation and queue partitioning.",
    )
    common.add_argument(
        "--workload",
        "-w",
        default=None,
        help="Load processes from a JSON or CSV file instead of generating them.",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    run_parser = subparsers.add_parser("run", parents=[common], help="Run one scheduling algorithm.")
    run_parser.add_argument(
        "--algorithm",
        "-a",
        required=True,
        choices=sorted(ALGORITHMS),
        help="Algorithm to use.",
    )

    subparsers.add_parser(
        "compare",
        parents=[common],
        help="Run every algorithm on the same batch and compare average metrics.",
    )
    subparsers.add_parser(
        "multilevel",
        parents=[common],
        help="Run multilevel queue scheduling (RR / FCFS / SJF queues).",
    )
    subparsers.add_parser("show", parents=[common], help="Print the process batch.")
    subparsers.add_parser("menu", parents=[common], help="Interactive menu.")

    return parser


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
        force=True,
    )


def _print_processes(processes: List[Process], console: Console) -> None:
    table = Table(title=f"Process list ({len(processes)} processes)", box=box.SIMPLE_HEAVY)
    table.add_column("PID", justify="center")
    table.add_column("Burst", justify="right")
    table.add_column("Priority", justify="center")

    for p in processes:
        table.add_row(str(p.pid), str(p.burst_time), str(p.priority))

    console.print(table)


def _process_table(result: ScheduleResult, title: str) -> Table:
    headers = ["PID", "Burst", "Priority", "Start", "Complete", "Wait", "Turnaround"]

    table = Table(title=title, box=box.SIMPLE_HEAVY)
    for h in headers:
        justify = "center" if h in {"PID", "Priority"} else "right"
        table.add_column(h, justify=justify)

    for p in result.processes:
        table.add_row(
            str(p.pid),
            str(p.burst_time),
            str(p.priority),
            str(p.start_time),
            str(p.completion_time),
            str(p.waiting_time),
            str(p.turnaround_time),
        )
    return table


def _print_result(result: ScheduleResult, console: Console) -> None:
    console.print(f"[bold]Algorithm:[/bold] {result.algorithm}")
    if result.quantum is not None:
        console.print(f"[bold]Quantum:[/bold] {result.quantum}")

    console.print()

    panel, time_marks = build_rich_gantt(result.timeline)
    console.print(panel)
    if time_marks:
        console.print(time_marks)

    console.print()
    console.print(_process_table(result, "Per-process metrics"))

    console.print(f"Average waiting time: {result.avg_waiting_time:.2f}")
    console.print(f"Average turnaround time: {result.avg_turnaround_time:.2f}")


def _print_multilevel(result: MultilevelResult, console: Console) -> None:
    console.print("[bold]Multilevel queue scheduling[/bold]")

    for qr in result.queues:
        label = qr.result.algorithm
        if qr.result.quantum is not None:
            label += f", quantum {qr.result.quantum}"
        title = f"Queue {qr.index}: {label}"
        if not qr.size:
            console.print(f"\n{title}: [dim]no processes[/dim]")
            continue
        console.print()
        console.print(_process_table(qr.result, title))
        console.print(f"Average waiting time: {qr.result.avg_waiting_time:.2f}")
        if qr.offset:
            console.print(
                f"Average waiting time (including earlier queues, +{qr.offset}): "
                f"{qr.adjusted_avg_waiting_time:.2f}"
            )

    summary = Table(title="Multilevel queue summary", box=box.SIMPLE_HEAVY)
    summary.add_column("Queue", justify="center")
    summary.add_column("Algorithm")
    summary.add_column("Processes", justify="right")
    summary.add_column("Offset", justify="right")
    summary.add_column("Avg waiting", justify="right")
    for qr in result.queues:
        summary.add_row(
            str(qr.index),
            qr.result.algorithm,
            str(qr.size),
            str(qr.offset),
            f"{qr.adjusted_avg_waiting_time:.2f}",
        )

    console.print()
    console.print(summary)
    console.print(f"[bold]Overall average waiting time:[/bold] {result.avg_waiting_time:.2f}")


def _run_compare(processes: List[Process], quantum: int, rng: random.Random, console: Console) -> None:
    summary_table = Table(title="Algorithm comparison", box=box.SIMPLE_HEAVY)
    summary_table.add_column("Algorithm")
    summary_table.add_column("Quantum", justify="right")
    summary_table.add_column("Avg waiting", justify="right")
    summary_table.add_column("Avg turnaround", justify="right")

    for alg in ALGORITHMS:
        result = run_algorithm(alg, processes, quantum=quantum if alg == "rr" else None)
        summary_table.add_row(
            result.algorithm,
            "" if result.quantum is None else str(result.quantum),
            f"{result.avg_waiting_time:.2f}",
            f"{result.avg_turnaround_time:.2f}",
        )

    multilevel = schedule_multilevel(processes, rng, quantum=quantum)
    summary_table.add_row(
        f"Multilevel ({' / '.join(a.upper() for a in QUEUE_ALGORITHMS)})",
        str(quantum),
        f"{multilevel.avg_waiting_time:.2f}",
        "",
    )

    console.print(summary_table)


def _interactive_menu(config: SimulationConfig, processes: List[Process], rng: random.Random) -> None:
    console = Console()
    console.print(f"\nGenerated {len(processes)} processes for testing.")

    while True:
        console.print("\n[bold cyan]Scheduling algorithms menu[/bold cyan]")
        console.print("  [yellow]1[/yellow]. First Come First Served (FCFS)")
        console.print("  [yellow]2[/yellow]. Shortest Job First (SJF)")
        console.print("  [yellow]3[/yellow]. Priority Scheduling")
        console.print(f"  [yellow]4[/yellow]. Round Robin (quantum {config.quantum})")
        console.print("  [yellow]5[/yellow]. Multilevel Queue Scheduling")
        console.print("  [yellow]8[/yellow]. Display current processes")
        console.print("  [yellow]9[/yellow]. Generate new processes")
        console.print("  [yellow]0[/yellow]. Exit")

        choice = input("Enter your choice (0-9): ").strip()
        action = MENU_CHOICES.get(choice)
        if action is None:
            console.print("[red]Invalid option! Please enter a valid choice (0-9).[/red]")
            continue

        if action == "exit":
            console.print("Goodbye!")
            return

        try:
            if action == "show":
                _print_processes(processes, console)
            elif action == "regenerate":
                processes = generate_processes(config, rng)
                console.print(f"Generated {len(processes)} new processes.")
            elif action == "multilevel":
                _print_multilevel(schedule_multilevel(processes, rng, quantum=config.quantum), console)
            else:
                _print_result(run_algorithm(action, processes, quantum=config.quantum), console)
        except Exception as exc:  # noqa: BLE001
            console.print(f"[red]Error: {exc}[/red]")
            continue

        input("Press Enter to continue...")


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.verbose)
    console = Console()

    try:
        if args.workload:
            if args.count is not None:
                logger.warning("--count is ignored when --workload is given")
            config = SimulationConfig(quantum=args.quantum, seed=args.seed)
            rng = make_rng(config.seed)
            processes = load_workload(args.workload)
        else:
            count = DEFAULT_PROCESS_COUNT if args.count is None else args.count
            config = SimulationConfig(process_count=count, quantum=args.quantum, seed=args.seed)
            rng = make_rng(config.seed)
            processes = generate_processes(config, rng)
    except (ConfigError, ValueError, OSError) as exc:
        logger.error("%s", exc)
        return 2

    if args.command == "run":
        _print_result(run_algorithm(args.algorithm, processes, quantum=config.quantum), console)
        return 0

    if args.command == "compare":
        _run_compare(processes, config.quantum, rng, console)
        return 0

    if args.command == "multilevel":
        _print_multilevel(schedule_multilevel(processes, rng, quantum=config.quantum), console)
        return 0

    if args.command == "show":
        _print_processes(processes, console)
        return 0

    if args.command == "menu":
        _interactive_menu(config, processes, rng)
        return 0

    parser.error(f"Unknown command: {args.command}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
