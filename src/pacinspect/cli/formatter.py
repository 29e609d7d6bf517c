# src/pacinspect/cli/formatter.py
from typing import Any, Dict, List

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

# Initialize the Rich console for high-quality terminal output
console = Console()


class DescFormatter:
    """
    DescFormatter: The visual heart of the CLI.
    Responsible for rendering field tables, YAML output and scan reports.
    """

    def _render_value(self, value: Any) -> str:
        if isinstance(value, list):
            return "\n".join(escape(str(item)) for item in value) if value else "[dim](empty)[/dim]"
        if value == "":
            return "[dim](empty)[/dim]"
        return escape(str(value))

    def display_fields(self, report: Dict[str, Any]):
        """Renders one package's fields as a two-column table."""
        title = f"{report.get('name') or 'Unknown'} {report.get('version') or ''}".strip()
        table = Table(title=title, show_lines=True, header_style="bold magenta")
        table.add_column("Field", style="cyan")
        table.add_column("Value", style="white")

        for tag, value in report.get("fields", {}).items():
            table.add_row(tag.upper(), self._render_value(value))

        console.print(table)

        if report.get("missing"):
            console.print(f"[bold yellow]⚠️  Missing required fields:[/bold yellow] {', '.join(report['missing'])}")

    def display_yaml(self, yaml_text: str, title: str = "Fields"):
        if not yaml_text:
            console.print("[dim]ℹ Nothing to export.[/dim]")
            return
        syntax = Syntax(yaml_text, "yaml", theme="monokai", background_color="default")
        console.print(Panel(syntax, title=title, border_style="green"))

    def print_final_table(self, reports: List[Dict[str, Any]]):
        """
        Builds the summary table shown at the very end of a scan.
        """
        table = Table(title="PacInspect Scan Report", show_lines=True, header_style="bold magenta")
        table.add_column("Descriptor", style="cyan")
        table.add_column("Package", style="white")
        table.add_column("Version")
        table.add_column("Status", style="bold")
        table.add_column("Result", justify="center")

        for r in reports:
            success = r.get("success", False)
            status_color = "green" if success else "yellow" if r.get("status") == "INCOMPLETE" else "red"
            result_icon = "✅" if success else "⚠️" if r.get("status") == "INCOMPLETE" else "❌"
            table.add_row(
                str(r.get("file_path")),
                str(r.get("name") or "Unknown"),
                str(r.get("version") or "-"),
                f"[{status_color}]{r.get('status', 'FAILED')}[/{status_color}]",
                result_icon,
            )

        console.print(table)

    def print_summary(self, summary: Dict[str, Any]):
        console.print(Panel(
            f"[bold white]Summary Report[/bold white]\n"
            f"════════════════════════════════════════\n"
            f"Total Descriptors: {summary['total_files']}\n"
            f"Complete:         [green]{summary['successful']}[/green]\n"
            f"Incomplete:       [yellow]{summary['incomplete']}[/yellow]\n"
            f"Empty:            [yellow]{summary['empty']}[/yellow]\n"
            f"System Errors:    [red]{summary['system_errors']}[/red]\n"
            f"Success Rate:     [bold green]{summary['success_rate']:.1%}[/bold green]",
            border_style="dim"
        ))
