"""Swift Package Manager toolchain."""

from __future__ import annotations

import subprocess
from pathlib import Path

from result import Err, Ok, Result

from macbundle.common import create_logger

from .models import (
    BinPathError,
    BuildConfiguration,
    BuildFailedError,
    ToolchainError,
    ToolchainNotInstalledError,
)

logger = create_logger("toolchain")


class SwiftToolchain:
    """Runs `swift build` inside a Swift package directory."""

    def __init__(self, package_dir: Path, executable: str = "swift") -> None:
        self.package_dir = package_dir
        self.executable = executable

    def build(self, configuration: BuildConfiguration) -> Result[None, ToolchainError]:
        command = self._build_command(configuration)
        logger.info("Running build", command=" ".join(command), cwd=str(self.package_dir))

        try:
            # Compiler output goes straight to the terminal.
            subprocess.run(command, cwd=self.package_dir, check=True)
        except FileNotFoundError:
            return Err(self._not_installed())
        except subprocess.CalledProcessError as e:
            logger.error("Build failed", configuration=configuration.value, exit_code=e.returncode)
            return Err(
                BuildFailedError(
                    configuration=configuration,
                    exit_code=e.returncode,
                    message=f"'{' '.join(command)}' exited with status {e.returncode}",
                )
            )

        return Ok(None)

    def bin_path(self, configuration: BuildConfiguration) -> Result[Path, ToolchainError]:
        command = [*self._build_command(configuration), "--show-bin-path"]

        try:
            result = subprocess.run(
                command,
                cwd=self.package_dir,
                capture_output=True,
                text=True,
                check=True,
            )
        except FileNotFoundError:
            return Err(self._not_installed())
        except subprocess.CalledProcessError as e:
            stderr = e.stderr.strip() if e.stderr else "Unknown error"
            return Err(BinPathError(configuration=configuration, message=f"Failed to query bin path: {stderr}"))

        output = result.stdout.strip()
        if not output:
            return Err(BinPathError(configuration=configuration, message="Toolchain reported an empty bin path"))

        # The last line is the path; earlier lines may be resolver chatter.
        bin_dir = Path(output.splitlines()[-1].strip())
        if not bin_dir.is_absolute():
            bin_dir = self.package_dir / bin_dir

        logger.debug("Resolved bin path", configuration=configuration.value, bin_path=str(bin_dir))
        return Ok(bin_dir)

    def _build_command(self, configuration: BuildConfiguration) -> list[str]:
        return [self.executable, "build", "-c", configuration.value]

    def _not_installed(self) -> ToolchainNotInstalledError:
        return ToolchainNotInstalledError(
            executable=self.executable,
            message=f"{self.executable} command not found. Please install the Swift toolchain.",
        )
