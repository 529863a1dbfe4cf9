"""Postinstall step interpreter."""

from __future__ import annotations

import logging
from pathlib import Path

from drip.errors import (
    CommandFailed,
    CopyFailed,
    CreateDirFailed,
    DownloadFailed,
    ReadWriteFailed,
)
from drip.filesystem import RealFileSystem
from drip.process import ProcessRunner
from drip.protocols import CommandRunner, FileSystem
from drip.recipe import Append, Copy, Download, Postinstall, RunCommand

logger = logging.getLogger(__name__)


class PostinstallRunner:
    """Executes postinstall steps one at a time.

    Each step runs synchronously to completion or raises an InstallError
    subclass. There are no retries and a completed step is never undone.
    """

    def __init__(
        self,
        runner: CommandRunner,
        filesystem: FileSystem,
        curl: str = "curl",
        shell: str = "fish",
    ) -> None:
        """Initialize the interpreter with required dependencies.

        Args:
            runner: Process runner for curl and the shell.
            filesystem: Filesystem abstraction.
            curl: Fetch tool executable.
            shell: Shell executable, invoked as ``<shell> -c <command>``.
        """
        self.runner = runner
        self.fs = filesystem
        self.curl = curl
        self.shell = shell

    @classmethod
    def create(
        cls,
        runner: CommandRunner | None = None,
        filesystem: FileSystem | None = None,
        curl: str = "curl",
        shell: str = "fish",
    ) -> PostinstallRunner:
        """Factory method for production instantiation.

        Returns:
            Configured PostinstallRunner instance.
        """
        return cls(
            runner=runner or ProcessRunner(),
            filesystem=filesystem or RealFileSystem(),
            curl=curl,
            shell=shell,
        )

    def run_step(self, step: Postinstall, base_dir: Path) -> None:
        """Carry out a single postinstall step.

        Args:
            step: The step to run.
            base_dir: Recipe directory; copy sources are resolved against it.

        Raises:
            InstallError: A subclass describing the failed operation.
        """
        if isinstance(step, Copy):
            self._copy(step, base_dir)
        elif isinstance(step, Download):
            self._download(step)
        elif isinstance(step, Append):
            self._append(step)
        elif isinstance(step, RunCommand):
            self._run_command(step)
        else:
            raise TypeError(f"Unknown postinstall step: {step!r}")

    def _copy(self, step: Copy, base_dir: Path) -> None:
        """Copy the source file into the destination, creating it as a directory."""
        dst = step.destination
        if not self.fs.is_dir(dst):
            self._create_dir(dst)

        src = base_dir / step.source
        logger.info("Copying %s to %s", src, dst)
        try:
            self.fs.copy_file(src, dst)
        except OSError as e:
            raise CopyFailed(str(src), str(dst), str(e)) from e

    def _download(self, step: Download) -> None:
        """Fetch a URL with curl, failing on HTTP errors."""
        dst = step.destination
        if not self.fs.is_dir(dst.parent):
            self._create_dir(dst.parent)

        logger.info("Downloading %s to %s", step.url, dst)
        try:
            result = self.runner.run(
                [self.curl, "-fsSLo", str(dst), "--create-dirs", step.url]
            )
        except OSError as e:
            raise CommandFailed(self.curl, str(e)) from e

        if not result.success:
            raise DownloadFailed(step.url, str(dst), result.error_text)

    def _append(self, step: Append) -> None:
        """Append a line to a file that must already exist."""
        logger.info("Appending to %s", step.destination)
        try:
            self.fs.append_line(step.destination, step.text)
        except OSError as e:
            raise ReadWriteFailed(str(step.destination), str(e)) from e

    def _run_command(self, step: RunCommand) -> None:
        """Run a command line through the shell."""
        logger.info("Running %s -c %r", self.shell, step.command)
        try:
            result = self.runner.run([self.shell, "-c", step.command])
        except OSError as e:
            raise CommandFailed(self.shell, str(e)) from e

        if not result.success:
            raise CommandFailed(step.command, result.error_text)

    def _create_dir(self, path: Path) -> None:
        """Create a directory and its missing parents."""
        logger.debug("Creating directory %s", path)
        try:
            self.fs.mkdir(path, parents=True, exist_ok=True)
        except OSError as e:
            raise CreateDirFailed(str(path), str(e)) from e
