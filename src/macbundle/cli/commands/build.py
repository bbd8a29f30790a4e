from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError
from result import is_err

from macbundle.bundle import BundleInfo, BundlePackager, PackageOptions
from macbundle.common import create_logger, is_swift_package, resolve_directory
from macbundle.config import FileConfigStore
from macbundle.toolchain import BuildConfiguration, SwiftToolchain
from macbundle.utils import format_validation_error

from ..output import echo_error, echo_progress, exit_code_for, format_bundle_error, format_config_error

logger = create_logger("cli")

AppNameOption = Annotated[
    str | None,
    typer.Option("--app-name", "-n", help="Executable product name; also names the bundle."),
]
ConfigurationOption = Annotated[
    BuildConfiguration | None,
    typer.Option("--configuration", "-c", case_sensitive=False, help="Toolchain build configuration."),
]
PackageDirOption = Annotated[
    Path | None,
    typer.Option("--package-dir", "-p", help="Swift package directory. Defaults to the current directory."),
]
OutputDirOption = Annotated[
    Path | None,
    typer.Option("--output-dir", "-o", help="Directory that receives <Name>.app."),
]
ResourcesDirOption = Annotated[
    Path | None,
    typer.Option("--resources-dir", "-r", help="Resources to copy. Defaults to Sources/<Name>/Resources."),
]
NoInfoPlistOption = Annotated[
    bool,
    typer.Option("--no-info-plist", help="Do not write Contents/Info.plist."),
]
SwiftOption = Annotated[
    str | None,
    typer.Option("--swift", help="Swift executable to invoke."),
]


def build(
    app_name: AppNameOption = None,
    configuration: ConfigurationOption = None,
    package_dir: PackageDirOption = None,
    output_dir: OutputDirOption = None,
    resources_dir: ResourcesDirOption = None,
    no_info_plist: NoInfoPlistOption = False,
    swift: SwiftOption = None,
) -> None:
    """Build the Swift package and assemble the application bundle."""
    package_root = resolve_directory(package_dir)
    if not is_swift_package(package_root):
        logger.warning("No Package.swift in package directory", package_dir=str(package_root))

    config_result = FileConfigStore(working_dir=package_root).load()
    if is_err(config_result):
        echo_error(format_config_error(config_result.err()))
        raise typer.Exit(code=1)
    config = config_result.unwrap()

    info_plist = config.info_plist
    if no_info_plist:
        info_plist = info_plist.model_copy(update={"enabled": False})

    try:
        options = PackageOptions.from_config(
            config,
            package_root,
            app_name=app_name,
            configuration=configuration,
            output_dir=output_dir,
            resources_dir=resources_dir,
            info_plist=info_plist,
        )
    except ValidationError as exc:
        echo_error(format_validation_error("build options", exc))
        raise typer.Exit(code=1) from exc

    logger.debug(
        "Resolved build options",
        app_name=options.app_name,
        configuration=options.configuration.value,
        output_dir=str(options.resolved_output_dir),
    )
    toolchain = SwiftToolchain(package_root, executable=swift or config.bundle.swift_executable)
    result = BundlePackager(options, toolchain, on_progress=echo_progress).package()

    if is_err(result):
        error = result.err()
        echo_error(format_bundle_error(error))
        raise typer.Exit(code=exit_code_for(error))

    _report_success(result.unwrap())


def _report_success(info: BundleInfo) -> None:
    typer.secho(f"Successfully built {info.bundle_path.name}", fg=typer.colors.GREEN)
    if info.resources_copied:
        typer.echo(f"Copied {info.resource_count} resource file(s)")
    typer.echo(f"You can now run the app with: open {_display_path(info.bundle_path)}")


def _display_path(path: Path) -> str:
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)
