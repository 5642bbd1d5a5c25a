"""RPC Typer app factory."""

import typer

from sv.api.rpc.cmd_check import cmd_check
from sv.api.rpc.cmd_enable import cmd_enable
from sv.cli._handle_stage_result import _handle_stage_result


def rpc() -> typer.Typer:
    """Create and configure the rpc Typer app."""
    app = typer.Typer(
        name="rpc",
        help="supervisord XML-RPC configuration",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        """Show help when no subcommand is provided."""
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit()

    @app.command(name="check")
    def check_cmd() -> None:
        """Check whether XML-RPC is enabled in the supervisor config."""
        _handle_stage_result(cmd_check)()

    @app.command(name="enable")
    def enable_cmd(
        restart: bool = typer.Option(True, "--restart/--no-restart", help="Restart supervisor after changes"),
    ) -> None:
        """Add the XML-RPC sections to the supervisor config."""
        _handle_stage_result(cmd_enable)(restart=restart)

    return app
