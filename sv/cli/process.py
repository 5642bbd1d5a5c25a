"""Process commands: status/list and start/stop/restart."""

import typer

from sv.api.process.cmd_restart import cmd_restart
from sv.api.process.cmd_start import cmd_start
from sv.api.process.cmd_status import cmd_status
from sv.api.process.cmd_stop import cmd_stop
from sv.cli._handle_stage_result import _handle_stage_result
from sv.cli.display.CLIDisplay import CLIDisplay

TOKENS_HELP = "Process index (1), range (1-3), or name (web, group:web)"


def _print_status(display: CLIDisplay, output: dict) -> None:
    display.process_table(output["processes"])


def _print_control(display: CLIDisplay, output: dict) -> None:
    display.control_results(output)


def register_process_commands(app: typer.Typer) -> None:
    """Attach the process commands directly to the root app."""

    @app.command(name="status")
    def status_cmd() -> None:
        """Show all supervisor processes."""
        _handle_stage_result(cmd_status, _print_status)()

    @app.command(name="list")
    def list_cmd() -> None:
        """Show all supervisor processes (same as status)."""
        _handle_stage_result(cmd_status, _print_status)()

    @app.command(name="start")
    def start_cmd(tokens: list[str] = typer.Argument(..., help=TOKENS_HELP)) -> None:  # noqa: B008
        """Start processes."""
        _handle_stage_result(cmd_start, _print_control)(tokens)

    @app.command(name="stop")
    def stop_cmd(tokens: list[str] = typer.Argument(..., help=TOKENS_HELP)) -> None:  # noqa: B008
        """Stop processes."""
        _handle_stage_result(cmd_stop, _print_control)(tokens)

    @app.command(name="restart")
    def restart_cmd(tokens: list[str] = typer.Argument(..., help=TOKENS_HELP)) -> None:  # noqa: B008
        """Restart processes (stop, wait one second, start)."""
        _handle_stage_result(cmd_restart, _print_control)(tokens)
