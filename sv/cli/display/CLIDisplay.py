"""CLI display implementation using Rich library."""

import json
import sys
from datetime import datetime
from typing import Any

import yaml
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from sv.api.process.ProcessState import ProcessState

_STATE_STYLES: dict[int, str] = {
    ProcessState.RUNNING: "green",
    ProcessState.STARTING: "yellow",
    ProcessState.STOPPING: "yellow",
    ProcessState.FATAL: "red",
}


def state_style(state: int) -> str:
    """Rich style for a state code; white for anything without a colour."""
    return _STATE_STYLES.get(state, "white")


class CLIDisplay:
    """Terminal output: progress and messages on stderr, data on stdout."""

    def __init__(self, stdout: Any = None, stderr: Any = None):
        self.console = Console(file=stdout or sys.stdout)
        self.stderr_console = Console(file=stderr or sys.stderr)

    @staticmethod
    def timestamp() -> str:
        return datetime.now().strftime("%H:%M:%S")

    def status(self, message: str) -> None:
        self.stderr_console.print(f"[dim]{self.timestamp()}[/dim] [blue]i[/blue] {escape(message)}")

    def success(self, message: str) -> None:
        self.stderr_console.print(f"[dim]{self.timestamp()}[/dim] [green]✓[/green] {escape(message)}")

    def error(self, message: str, details: str = "") -> None:
        self.stderr_console.print(f"[dim]{self.timestamp()}[/dim] [red]✗[/red] {escape(message)}")
        if details:
            self.stderr_console.print(f"  [dim]{escape(details)}[/dim]")

    def warning(self, message: str) -> None:
        self.stderr_console.print(f"[yellow]⚠[/yellow] {escape(message)}")

    def info(self, message: str) -> None:
        self.stderr_console.print(message)

    def json_output(self, data: Any, format: str = "yaml", indent: int = 2) -> None:
        if format == "yaml":
            print(yaml.dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True), end="")
        else:
            print(json.dumps(data, indent=indent, ensure_ascii=False))

    def process_table(self, processes: list[dict[str, Any]]) -> None:
        """Render ProcessInfo dicts as a table, or a notice when there are none."""
        if not processes:
            self.console.print("No processes found")
            return

        table = Table(title=f"Supervisor processes ({len(processes)})")
        table.add_column("#", justify="right")
        table.add_column("Name")
        table.add_column("State")
        table.add_column("PID", justify="right")
        table.add_column("Uptime")
        for proc in processes:
            pid = proc["pid"]
            table.add_row(
                str(proc["index"]),
                Text(proc["name"]),
                Text(proc["state_name"], style=state_style(proc["state"])),
                str(pid) if pid else "-",
                Text(proc["uptime"]),
            )
        self.console.print(table)

    def control_results(self, output: dict[str, Any]) -> None:
        """One line per target followed by the success/failure tally."""
        action = output["action"]
        for item in output["results"]:
            if item["success"]:
                self.console.print(f"  {action} {escape(item['name'])} ... [green]ok[/green]")
            else:
                self.console.print(f"  {action} {escape(item['name'])} ... [red]failed[/red] ({escape(item['error'])})")
        self.console.print(f"\n{output['succeeded']} succeeded, {output['failed']} failed")
