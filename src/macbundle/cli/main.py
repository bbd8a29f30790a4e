from __future__ import annotations

import os
from typing import Annotated

import typer

from macbundle.common import LoggingConfig, configure_cli_logging, create_logger
from macbundle.config import FileConfigStore
from macbundle.settings import settings

from .commands import build as build_commands
from .commands import config as config_commands

logger = create_logger("cli")

app = typer.Typer(help="Package Swift executables into macOS application bundles.")
app.command("build")(build_commands.build)
app.add_typer(config_commands.app, name="config")

NoColorOption = Annotated[
    bool,
    typer.Option("--no-color", help="Disable colored output. NO_COLOR in the environment does the same."),
]


@app.callback(invoke_without_command=True)
def _root_callback(ctx: typer.Context, no_color: NoColorOption = False) -> None:
    if no_color or os.getenv("NO_COLOR"):
        ctx.color = False

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def _configure_logging() -> None:
    # A broken global config is reported by the command itself; logging falls back to defaults.
    logging_config = FileConfigStore().load_logging().unwrap_or(LoggingConfig())
    if not logging_config.enabled:
        return

    log_path = logging_config.log_file.expanduser() if logging_config.log_file else settings.default_log_path
    configure_cli_logging(logging_config, log_path, environment=settings.environment)
    logger.debug("CLI started", environment=settings.environment)


def main() -> None:
    """Entrypoint for the macbundle CLI."""
    _configure_logging()
    app()
