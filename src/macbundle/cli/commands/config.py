from __future__ import annotations

import json
from enum import Enum
from pathlib import Path
from typing import Annotated, Any

import typer
import yaml
from result import is_err

from macbundle.config import ConfigLocations, FileConfigStore

from ..output import echo_error, format_config_error


class OutputFormat(str, Enum):
    YAML = "yaml"
    JSON = "json"

    def render(self, payload: dict[str, Any]) -> str:
        if self is OutputFormat.JSON:
            return json.dumps(payload, indent=2, sort_keys=True)
        return yaml.safe_dump(payload, sort_keys=True).rstrip("\n")


PackageDirOption = Annotated[
    Path | None,
    typer.Option(
        "--package-dir",
        "-p",
        help="Swift package whose project config is used. Defaults to the current directory.",
    ),
]

app = typer.Typer(help="Inspect macbundle configuration.")


@app.callback(invoke_without_command=True)
def _config_root(ctx: typer.Context) -> None:
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command("show")
def show(
    output_format: Annotated[
        OutputFormat, typer.Option("--format", "-f", case_sensitive=False, help="yaml or json.")
    ] = OutputFormat.YAML,
    package_dir: PackageDirOption = None,
) -> None:
    """Print the effective configuration a build in this package would use."""
    result = FileConfigStore(working_dir=package_dir).load()
    if is_err(result):
        echo_error(format_config_error(result.err()))
        raise typer.Exit(code=1)

    typer.echo(output_format.render(result.unwrap().model_dump(mode="json")))


@app.command("files")
def files(package_dir: PackageDirOption = None) -> None:
    """List the configuration files read for this package, lowest precedence first."""
    store = FileConfigStore(working_dir=package_dir)
    locations = ConfigLocations.discover(store.working_dir, store.settings)
    candidates = {
        "global": locations.global_path,
        "project": locations.project_path,
        "user": locations.user_path,
    }
    for scope, path in candidates.items():
        if path is None:
            typer.echo(f"{scope:<8} (no {store.settings.project_marker} directory found)")
        else:
            state = "" if path.is_file() else " (missing)"
            typer.echo(f"{scope:<8} {path}{state}")
