#!/usr/bin/env python3
"""
PACINSPECT CLI
--------------
Command-line front end for reading pacman package descriptors.

    pacinspect show PATH [--field TAG ...] [--strategy memo|forgetful] [--format table|yaml]
    pacinspect scan DB_PATH [--max-depth N] [--strategy memo|forgetful] [--format table|yaml]

Author: PacInspect Team
Date: 2026-10-19
"""

import sys
import logging
import argparse
from pathlib import Path
from typing import List

from rich.progress import (
    Progress,
    SpinnerColumn,
    TextColumn,
    TimeElapsedColumn,
    BarColumn,
    TaskProgressColumn
)

from pacinspect.core.engine import DEFAULT_DB_PATH, STRATEGIES, InspectEngine
from pacinspect.core.models import FieldName
from pacinspect.cli.formatter import DescFormatter, console
from pacinspect.export.exporter import DescExporter

VERSION = "0.1.0"


class PacInspectCLI:
    """
    CLI wrapper that translates user commands into Engine actions.
    """

    def __init__(self):
        self.parser = argparse.ArgumentParser(
            prog="pacinspect",
            description="PacInspect - Query pacman package descriptors",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        self.formatter = DescFormatter()
        self.exporter = DescExporter()
        self._setup_args()

    def _setup_args(self):
        """Configures the command-line flags and subcommands."""
        self.parser.add_argument("-V", "--version", action="version", version=f"pacinspect v{VERSION}")
        self.parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
        subparsers = self.parser.add_subparsers(dest="command", metavar="Command")

        show_parser = subparsers.add_parser("show", help="Show the fields of one descriptor")
        show_parser.add_argument("path", help="Path to a desc file or a package directory")
        show_parser.add_argument("-f", "--field", action="append", default=[],
                                 help="Field tag to show (e.g. NAME, DEPENDS). Repeatable")
        show_parser.add_argument("--strategy", choices=sorted(STRATEGIES), default="forgetful",
                                 help="Query strategy (default: forgetful)")
        show_parser.add_argument("--format", choices=["table", "yaml"], default="table", help="Output format")

        scan_parser = subparsers.add_parser("scan", help="Scan a package database directory")
        scan_parser.add_argument("path", nargs="?", default=DEFAULT_DB_PATH,
                                 help=f"Database directory (default: {DEFAULT_DB_PATH})")
        scan_parser.add_argument("--max-depth", type=int, default=2, help="Maximum directory depth (default: 2)")
        scan_parser.add_argument("--strategy", choices=sorted(STRATEGIES), default="forgetful",
                                 help="Query strategy (default: forgetful)")
        scan_parser.add_argument("--format", choices=["table", "yaml"], default="table", help="Output format")

    def _resolve_fields(self, tags: List[str]) -> List[FieldName]:
        fields = []
        unknown = []
        for tag in tags:
            field = FieldName.from_tag(tag.strip("%").upper())
            if field is None:
                unknown.append(tag)
            else:
                fields.append(field)
        if unknown:
            console.print(f"[bold red]Error:[/bold red] Unknown field(s): {', '.join(unknown)}")
            console.print(f"[dim]Known fields: {', '.join(f.tag for f in FieldName)}[/dim]")
            sys.exit(2)
        return fields

    def _run_show(self, args: argparse.Namespace):
        input_path = Path(args.path).resolve()
        if not input_path.exists():
            console.print(f"[bold red]Error:[/bold red] Path '{args.path}' not found.")
            sys.exit(1)

        fields = self._resolve_fields(args.field)
        engine = InspectEngine(str(input_path.parent), strategy=args.strategy)
        report = engine.inspect_file(str(input_path), fields or None)

        if report.get("error"):
            console.print(f"[bold red]{report['status']}:[/bold red] {report['error']}")
            sys.exit(1)

        if args.format == "yaml":
            self.formatter.display_yaml(self.exporter.export(report), title=str(input_path))
        else:
            self.formatter.display_fields(report)

    def _run_scan(self, args: argparse.Namespace):
        db_path = Path(args.path).resolve()
        if not db_path.is_dir():
            console.print(f"[bold red]Error:[/bold red] Database directory '{args.path}' not found.")
            sys.exit(1)

        engine = InspectEngine(str(db_path), strategy=args.strategy)

        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            BarColumn(bar_width=40),
            TaskProgressColumn(),
            TimeElapsedColumn(),
            console=console
        ) as progress:
            task_id = progress.add_task("Reading descriptors...", total=None)

            def advance(done: int, total: int):
                progress.update(task_id, completed=done, total=total)

            reports = engine.scan_directory(max_depth=args.max_depth, progress_callback=advance)

        if not reports:
            console.print("\n[bold yellow]⚠️  No descriptors found.[/bold yellow]")
            return

        if args.format == "yaml":
            # No wrapping: long reasons or paths must stay on one YAML line
            console.print(self.exporter.export(reports), markup=False, highlight=False, soft_wrap=True)
        else:
            self.formatter.print_final_table(reports)
        self.formatter.print_summary(engine.generate_summary(reports))

    def run(self, argv=None):
        """Primary routing entry point."""
        args = self.parser.parse_args(argv)
        logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

        if args.command == "show":
            self._run_show(args)
        elif args.command == "scan":
            self._run_scan(args)
        else:
            self.parser.print_help()


def main():
    """Application entry point with interrupt handling."""
    try:
        PacInspectCLI().run()
    except KeyboardInterrupt:
        console.print("\n[bold red]Terminated by user.[/bold red]")
        sys.exit(1)


if __name__ == "__main__":
    main()
