"""Create the main Typer CLI app."""

import typer

from sv.api.config.SvConfig import SvConfig
from sv.api.errors import ConfigError
from sv.cli._handle_stage_result import DISPLAY_FORMATS
from sv.cli.process import register_process_commands
from sv.cli.rpc import rpc
from sv.utils.configure_logging import configure_logging
from sv.utils.get_package_version import get_package_version


def _setup_logging() -> None:
    try:
        config = SvConfig.load()
    except ConfigError:
        # Commands report the config error themselves
        configure_logging()
        return
    configure_logging(config.log_level, config.log_file)


def _create_app() -> typer.Typer:
    """Create and configure the main CLI Typer app."""
    app = typer.Typer(
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        help="sv - query and control supervisord processes",
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    register_process_commands(app)
    app.add_typer(rpc(), name="rpc")

    @app.callback(invoke_without_command=True)
    def main_callback(
        ctx: typer.Context,
        display: str = typer.Option("table", "--display", "-d", help="Output format: table, json or yaml"),
        version: bool = typer.Option(False, "--version", help="Show version and exit"),
    ) -> None:
        if version:
            typer.echo(f"sv {get_package_version()}")
            raise typer.Exit()

        if display not in DISPLAY_FORMATS:
            typer.echo(f"Error: --display must be one of {', '.join(DISPLAY_FORMATS)}, got '{display}'", err=True)
            raise typer.Exit(1)

        ctx.ensure_object(dict)
        ctx.obj["display_format"] = display
        _setup_logging()

        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help())
            raise typer.Exit()

    return app
