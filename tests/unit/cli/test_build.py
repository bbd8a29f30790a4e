from __future__ import annotations

import subprocess
from collections.abc import Iterator
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from typer.testing import CliRunner

from macbundle.cli.main import app

runner = CliRunner()


@pytest.fixture
def package_dir(tmp_path: Path) -> Path:
    root = tmp_path / "Pensive"
    resources = root / "Sources" / "Pensive" / "Resources"
    resources.mkdir(parents=True)
    (resources / "a.txt").write_text("alpha")
    return root


@pytest.fixture
def env(tmp_path: Path) -> dict[str, str]:
    return {"XDG_CONFIG_HOME": str(tmp_path / "xdg")}


def _fake_swift(bin_dir: Path, *, app_name: str = "Pensive", fail_with: int | None = None):
    def run(command: list[str], **kwargs: object) -> MagicMock:
        if "--show-bin-path" in command:
            return MagicMock(stdout=f"{bin_dir}\n", returncode=0)
        if fail_with is not None:
            raise subprocess.CalledProcessError(fail_with, command)
        bin_dir.mkdir(parents=True, exist_ok=True)
        (bin_dir / app_name).write_bytes(b"binary")
        return MagicMock(returncode=0)

    return run


@pytest.fixture
def swift(package_dir: Path) -> Iterator[MagicMock]:
    fake = _fake_swift(package_dir / ".build" / "release")
    with patch("subprocess.run", side_effect=fake) as mock_run:
        yield mock_run


def test_build_creates_bundle_and_reports_success(
    package_dir: Path, env: dict[str, str], swift: MagicMock
) -> None:
    result = runner.invoke(app, ["build", "--package-dir", str(package_dir)], env=env)

    assert result.exit_code == 0, result.output
    assert "Building Pensive in release mode..." in result.output
    assert "Copying resources..." in result.output
    assert "Successfully built Pensive.app" in result.output
    assert "You can now run the app with: open" in result.output
    bundle = package_dir / "Pensive.app" / "Contents"
    assert (bundle / "MacOS" / "Pensive").read_bytes() == b"binary"
    assert (bundle / "Resources" / "a.txt").read_text() == "alpha"
    assert swift.call_args_list[0].args[0] == ["swift", "build", "-c", "release"]


def test_build_failure_exits_with_toolchain_status(package_dir: Path, env: dict[str, str]) -> None:
    fake = _fake_swift(package_dir / ".build" / "release", fail_with=65)
    with patch("subprocess.run", side_effect=fake):
        result = runner.invoke(app, ["build", "--package-dir", str(package_dir)], env=env)

    assert result.exit_code == 65
    assert "Build failed" in result.output
    assert not (package_dir / "Pensive.app").exists()


def test_missing_swift_exits_non_zero(package_dir: Path, env: dict[str, str]) -> None:
    with patch("subprocess.run", side_effect=FileNotFoundError):
        result = runner.invoke(app, ["build", "--package-dir", str(package_dir)], env=env)

    assert result.exit_code == 1
    assert "swift command not found" in result.output


def test_build_honours_cli_overrides(package_dir: Path, env: dict[str, str], tmp_path: Path) -> None:
    fake = _fake_swift(package_dir / ".build" / "debug", app_name="Journal")
    with patch("subprocess.run", side_effect=fake) as mock_run:
        result = runner.invoke(
            app,
            [
                "build",
                "--package-dir",
                str(package_dir),
                "--app-name",
                "Journal",
                "--configuration",
                "debug",
                "--output-dir",
                str(tmp_path / "dist"),
                "--swift",
                "/opt/swift/bin/swift",
                "--no-info-plist",
            ],
            env=env,
        )

    assert result.exit_code == 0, result.output
    contents = tmp_path / "dist" / "Journal.app" / "Contents"
    assert (contents / "MacOS" / "Journal").is_file()
    assert not (contents / "Info.plist").exists()
    assert mock_run.call_args_list[0].args[0] == ["/opt/swift/bin/swift", "build", "-c", "debug"]


def test_build_reads_project_config(package_dir: Path, env: dict[str, str]) -> None:
    config_dir = package_dir / ".macbundle"
    config_dir.mkdir()
    (config_dir / "config.yaml").write_text("bundle:\n  output_dir: out\n")

    fake = _fake_swift(package_dir / ".build" / "release")
    with patch("subprocess.run", side_effect=fake):
        result = runner.invoke(app, ["build", "--package-dir", str(package_dir)], env=env)

    assert result.exit_code == 0, result.output
    assert (package_dir / "out" / "Pensive.app" / "Contents" / "MacOS" / "Pensive").is_file()


def test_build_rejects_invalid_app_name(package_dir: Path, env: dict[str, str]) -> None:
    with patch("subprocess.run") as mock_run:
        result = runner.invoke(
            app,
            ["build", "--package-dir", str(package_dir), "--app-name", "bad/name"],
            env=env,
        )

    assert result.exit_code == 1
    assert "Invalid build options" in result.output
    mock_run.assert_not_called()


def test_build_reports_config_errors(package_dir: Path, env: dict[str, str]) -> None:
    config_dir = package_dir / ".macbundle"
    config_dir.mkdir()
    (config_dir / "config.yaml").write_text("bundle: [")

    with patch("subprocess.run") as mock_run:
        result = runner.invoke(app, ["build", "--package-dir", str(package_dir)], env=env)

    assert result.exit_code == 1
    assert "[project]" in result.output
    mock_run.assert_not_called()
