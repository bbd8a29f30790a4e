"""Bundle packager: build, then assemble `<Name>.app` from the build output."""

from __future__ import annotations

import shutil
import stat
from collections.abc import Callable
from dataclasses import dataclass, replace
from pathlib import Path

from result import Err, Ok, Result

from macbundle.common import create_logger
from macbundle.toolchain import Toolchain

from .layout import BundleLayout
from .models import (
    BinaryNotFoundError,
    BundleError,
    BundleInfo,
    BundleIOError,
    PackageOptions,
    PackageStep,
)
from .plist import write_info_plist

logger = create_logger("bundle")

ProgressCallback = Callable[[str], None]

_EXECUTABLE_BITS = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH


@dataclass(frozen=True)
class _PackagingContext:
    """Internal data passed between packaging steps once the binary is known."""

    layout: BundleLayout
    source_binary: Path
    resources_copied: bool = False
    resource_count: int = 0
    info_plist_written: bool = False


class BundlePackager:
    """Builds the executable and assembles the application bundle.

    The toolchain runs first; nothing under the bundle directory is created or
    modified until the build succeeded and the binary was located. Every
    filesystem failure after that point ends the run with a `BundleIOError`
    naming the failed step. Nothing is rolled back.
    """

    def __init__(
        self,
        options: PackageOptions,
        toolchain: Toolchain,
        on_progress: ProgressCallback | None = None,
    ) -> None:
        self._options = options
        self._toolchain = toolchain
        self._on_progress = on_progress

    @property
    def layout(self) -> BundleLayout:
        return self._options.layout()

    def package(self) -> Result[BundleInfo, BundleError]:
        logger.info(
            "Packaging bundle",
            app_name=self._options.app_name,
            configuration=self._options.configuration.value,
            bundle=str(self.layout.bundle_root),
        )

        return (
            self._build()
            .and_then(lambda _: self._resolve_binary())
            .and_then(self._create_directories)
            .and_then(self._copy_binary)
            .and_then(self._copy_resources)
            .and_then(self._write_info_plist)
            .and_then(self._set_permissions)
            .map(self._to_info)
            .inspect(lambda info: logger.success("Bundle packaged", bundle=str(info.bundle_path)))
            .inspect_err(lambda error: logger.error("Packaging failed", error=error.message))
        )

    def _build(self) -> Result[None, BundleError]:
        configuration = self._options.configuration
        self._progress(f"Building {self._options.app_name} in {configuration.value} mode...")
        return self._toolchain.build(configuration)

    def _resolve_binary(self) -> Result[_PackagingContext, BundleError]:
        match self._toolchain.bin_path(self._options.configuration):
            case Ok(bin_dir):
                binary = bin_dir / self._options.app_name
            case Err(error):
                return Err(error)

        if not binary.is_file():
            return Err(
                BinaryNotFoundError(
                    path=binary,
                    message=f"Built binary not found at {binary}",
                )
            )

        logger.debug("Resolved binary", path=str(binary))
        return Ok(_PackagingContext(layout=self.layout, source_binary=binary))

    def _create_directories(self, ctx: _PackagingContext) -> Result[_PackagingContext, BundleError]:
        for directory in ctx.layout.directories():
            try:
                directory.mkdir(parents=True, exist_ok=True)
            except OSError as exc:
                return Err(self._io_error(PackageStep.CREATE_DIRECTORIES, directory, exc))
        return Ok(ctx)

    def _copy_binary(self, ctx: _PackagingContext) -> Result[_PackagingContext, BundleError]:
        destination = ctx.layout.binary_path
        try:
            shutil.copy2(ctx.source_binary, destination)
        except OSError as exc:
            return Err(self._io_error(PackageStep.COPY_BINARY, destination, exc))

        logger.debug("Copied binary", source=str(ctx.source_binary), destination=str(destination))
        return Ok(ctx)

    def _copy_resources(self, ctx: _PackagingContext) -> Result[_PackagingContext, BundleError]:
        source = self._options.resolved_resources_dir
        if not source.is_dir():
            logger.debug("No resources directory, skipping", source=str(source))
            return Ok(ctx)

        self._progress("Copying resources...")
        try:
            count = _merge_tree(source, ctx.layout.resources_dir)
        except OSError as exc:
            return Err(self._io_error(PackageStep.COPY_RESOURCES, ctx.layout.resources_dir, exc))

        logger.debug("Copied resources", source=str(source), entries=count)
        return Ok(replace(ctx, resources_copied=True, resource_count=count))

    def _write_info_plist(self, ctx: _PackagingContext) -> Result[_PackagingContext, BundleError]:
        if not self._options.info_plist.enabled:
            return Ok(ctx)

        try:
            path = write_info_plist(ctx.layout, self._options.info_plist)
        except OSError as exc:
            return Err(self._io_error(PackageStep.WRITE_INFO_PLIST, ctx.layout.info_plist_path, exc))

        logger.debug("Wrote Info.plist", path=str(path))
        return Ok(replace(ctx, info_plist_written=True))

    def _set_permissions(self, ctx: _PackagingContext) -> Result[_PackagingContext, BundleError]:
        binary = ctx.layout.binary_path
        try:
            binary.chmod(binary.stat().st_mode | _EXECUTABLE_BITS)
        except OSError as exc:
            return Err(self._io_error(PackageStep.SET_PERMISSIONS, binary, exc))
        return Ok(ctx)

    def _to_info(self, ctx: _PackagingContext) -> BundleInfo:
        return BundleInfo(
            app_name=self._options.app_name,
            configuration=self._options.configuration,
            bundle_path=ctx.layout.bundle_root,
            binary_path=ctx.layout.binary_path,
            resources_copied=ctx.resources_copied,
            resource_count=ctx.resource_count,
            info_plist_written=ctx.info_plist_written,
        )

    def _progress(self, message: str) -> None:
        logger.info(message)
        if self._on_progress is not None:
            self._on_progress(message)

    @staticmethod
    def _io_error(step: PackageStep, path: Path, exc: OSError) -> BundleIOError:
        logger.error("Filesystem step failed", step=step.value, path=str(path), error=str(exc))
        return BundleIOError(step=step, path=path, message=f"{step.value} failed for {path}: {exc}")


def _merge_tree(source: Path, destination: Path) -> int:
    """Copy `source` into `destination` the way `cp -R` does.

    Existing entries are overwritten and unrelated ones are kept. Symlinks are
    copied as links, replacing whatever link a previous run left behind.
    Returns the number of files and links written.
    """
    written = 0
    for directory, _, names in source.walk():
        target_dir = destination / directory.relative_to(source)
        target_dir.mkdir(exist_ok=True)
        # Path.walk lists symlinks, including links to directories, as names.
        for name in names:
            entry = directory / name
            target = target_dir / name
            if target.is_symlink():
                target.unlink()
            if entry.is_symlink():
                target.symlink_to(entry.readlink())
            else:
                shutil.copy2(entry, target)
            written += 1
    return written
