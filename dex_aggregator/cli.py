"""CLI interface: a thin console consumer of the aggregator."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from dex_aggregator.aggregator import Aggregator
from dex_aggregator.config import AppConfig, load_config
from dex_aggregator.errors import AggregatorError
from dex_aggregator.formatting import display_number
from dex_aggregator.models import CatalogEntry, DetailRecord

console = Console()


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the CLI."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    # Set up logging
    level = logging.WARNING
    if args.verbose == 1:
        level = logging.INFO
    elif args.verbose >= 2:
        level = logging.DEBUG

    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
    )

    if not hasattr(args, "func"):
        parser.print_help()
        return

    try:
        args.func(args)
    except (AggregatorError, ValueError) as exc:
        console.print(f"[red]Error:[/red] {exc}")
        sys.exit(2)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dex-aggregator",
        description="Browse the PokeAPI catalog with localized names and descriptions",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="count",
        default=0,
        help="Increase verbosity (-v info, -vv debug)",
    )
    parser.add_argument(
        "-c", "--config",
        type=Path,
        default=None,
        help="Path to config.yaml (default: config.yaml)",
    )

    subparsers = parser.add_subparsers(title="commands", dest="command")

    # list
    list_parser = subparsers.add_parser("list", help="Show one catalog page")
    list_parser.add_argument("--page", type=int, default=1, help="1-indexed page number")
    list_parser.add_argument("--json", action="store_true", help="Print raw JSON")
    list_parser.set_defaults(func=_cmd_list)

    # show
    show_parser = subparsers.add_parser("show", help="Show one entry in detail")
    show_parser.add_argument("id", help="Entry identifier, e.g. 25")
    show_parser.add_argument("--json", action="store_true", help="Print raw JSON")
    show_parser.set_defaults(func=_cmd_show)

    return parser


# ------------------------------------------------------------------
# Command handlers
# ------------------------------------------------------------------


def _cmd_list(args: argparse.Namespace) -> None:
    config = load_config(args.config)
    entries = asyncio.run(_run_list(config, args.page))

    if args.json:
        console.print_json(json.dumps([e.to_dict() for e in entries], ensure_ascii=False))
        return
    console.print(_catalog_table(entries, args.page))


def _cmd_show(args: argparse.Namespace) -> None:
    config = load_config(args.config)
    record = asyncio.run(_run_detail(config, args.id))

    if record is None:
        console.print(f"[yellow]Entry {args.id} is not available[/yellow]")
        sys.exit(1)

    if args.json:
        console.print_json(json.dumps(record.to_dict(), ensure_ascii=False))
        return
    _print_detail(record)


async def _run_list(config: AppConfig, page: int) -> List[CatalogEntry]:
    async with Aggregator(config) as agg:
        return await agg.list_page(page)


async def _run_detail(config: AppConfig, identifier: str) -> Optional[DetailRecord]:
    async with Aggregator(config) as agg:
        return await agg.detail(identifier)


# ------------------------------------------------------------------
# Rendering
# ------------------------------------------------------------------


def _catalog_table(entries: List[CatalogEntry], page: int) -> Table:
    table = Table(title=f"Page {page}")
    table.add_column("No.", style="cyan")
    table.add_column("Name", style="bold")
    table.add_column("Types", style="green")
    for entry in entries:
        table.add_row(
            display_number(entry.id),
            entry.name,
            ", ".join(f"{t.localized} ({t.en})" for t in entry.types),
        )
    return table


def _print_detail(record: DetailRecord) -> None:
    console.print(f"\n[bold]{display_number(record.id)} {record.name}[/bold]")
    console.print(", ".join(f"{t.localized} ({t.en})" for t in record.types))
    console.print(f"Weight {record.weight} kg, height {record.height} m")
    if record.abilities:
        console.print(f"Abilities: {', '.join(record.abilities)}")

    stats = Table(title="Base stats")
    stats.add_column("Stat", style="cyan")
    stats.add_column("Value", justify="right", style="green")
    for stat in record.stats:
        stats.add_row(stat.name, str(stat.base_stat))
    console.print(stats)

    if record.description:
        console.print(record.description)
    nav = []
    if record.previous:
        nav.append(f"< {record.previous}")
    if record.next:
        nav.append(f"{record.next} >")
    if nav:
        console.print("   ".join(nav))
