"""Homebrew operations."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from drip.errors import CaskFailed, CommandError, CommandFailed, FormulaFailed, TapFailed
from drip.process import ProcessResult, ProcessRunner
from drip.protocols import CommandRunner

logger = logging.getLogger(__name__)


class Homebrew:
    """Drives the ``brew`` executable.

    Follows Separate Use from Creation: constructor requires all dependencies.
    Use factory method `create()` for production instantiation with defaults.
    """

    def __init__(self, runner: CommandRunner, executable: str = "brew") -> None:
        """Initialize the Homebrew client.

        Args:
            runner: Process runner used for every brew invocation.
            executable: Name or path of the brew binary.
        """
        self.runner = runner
        self.executable = executable

    @classmethod
    def create(cls, executable: str = "brew", runner: CommandRunner | None = None) -> Homebrew:
        """Factory method for production instantiation.

        Args:
            executable: Name or path of the brew binary.
            runner: Optional process runner (created if not provided).

        Returns:
            Configured Homebrew instance.
        """
        return cls(runner=runner or ProcessRunner(), executable=executable)

    def add_tap(self, name: str) -> None:
        """Run ``brew tap <name>``.

        Raises:
            CommandFailed: If brew could not be started.
            TapFailed: If brew rejected the tap.
        """
        result = self._run(["tap"], name)
        if not result.success:
            raise TapFailed(name, result.error_text)

    def install_formula(self, name: str) -> None:
        """Run ``brew install <name>``.

        Raises:
            CommandFailed: If brew could not be started.
            FormulaFailed: If brew failed to install the formula.
        """
        result = self._run(["install"], name)
        if not result.success:
            raise FormulaFailed(name, result.error_text)

    def install_cask(self, name: str) -> None:
        """Run ``brew install --cask <name>``.

        Raises:
            CommandFailed: If brew could not be started.
            CaskFailed: If brew failed to install the cask.
        """
        result = self._run(["install", "--cask"], name)
        if not result.success:
            raise CaskFailed(name, result.error_text)

    def leaves(self) -> set[str]:
        """Get installed formulas that were installed on request and are not dependencies.

        Runs ``brew leaves -r``, which prints one formula per line.

        Returns:
            Set of formula names.

        Raises:
            CommandError: If brew could not be started or printed non-UTF-8 output.
        """
        cmd = f"{self.executable} leaves"
        try:
            result = self.runner.run([self.executable, "leaves", "-r"])
        except OSError as e:
            raise CommandError(cmd, str(e)) from e

        if not result.success:
            logger.warning("%s exited with status %d: %s", cmd, result.returncode, result.error_text)

        try:
            output = result.stdout.decode("utf-8")
        except UnicodeDecodeError as e:
            raise CommandError(cmd, str(e)) from e

        return {line.strip() for line in output.splitlines() if line.strip()}

    def _run(self, subcommand: Sequence[str], name: str) -> ProcessResult:
        """Run a brew subcommand with a single name argument.

        Raises:
            CommandFailed: If brew could not be started.
        """
        cmd = " ".join([self.executable, *subcommand])
        logger.debug("Running %s %s", cmd, name)
        try:
            return self.runner.run([self.executable, *subcommand, name])
        except OSError as e:
            raise CommandFailed(cmd, str(e)) from e
