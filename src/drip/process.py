"""Subprocess boundary.

All external tools (brew, curl, the shell) are run through here. A process
that cannot be started raises ``OSError``; a process that ran is always
returned as a ProcessResult, whatever its exit status.
"""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Sequence
from dataclasses import dataclass

logger = logging.getLogger(__name__)


def decode_lenient(data: bytes) -> str:
    """Decode process output as UTF-8, replacing invalid sequences."""
    return data.decode("utf-8", errors="replace")


@dataclass(frozen=True)
class ProcessResult:
    """Outcome of a process that was started and ran to completion.

    Attributes:
        args: The argv the process was started with.
        returncode: Exit status.
        stdout: Raw standard output.
        stderr: Raw standard error.
    """

    args: tuple[str, ...]
    returncode: int
    stdout: bytes = b""
    stderr: bytes = b""

    @property
    def success(self) -> bool:
        """True if the process exited with status 0."""
        return self.returncode == 0

    @property
    def error_text(self) -> str:
        """Standard error decoded for use in diagnostics."""
        return decode_lenient(self.stderr)


class ProcessRunner:
    """Runs external processes synchronously.

    There is no timeout: the caller blocks until the process exits.
    Satisfies the CommandRunner protocol structurally.
    """

    def run(self, args: Sequence[str]) -> ProcessResult:
        """Run a process and capture its output.

        Args:
            args: Program followed by its arguments.

        Returns:
            ProcessResult of the finished process.

        Raises:
            OSError: If the process could not be started.
        """
        argv = tuple(str(arg) for arg in args)
        logger.debug("Running %s", argv)
        completed = subprocess.run(argv, capture_output=True, check=False)
        if completed.returncode != 0:
            logger.debug("%s exited with status %d", argv[0], completed.returncode)
        return ProcessResult(
            args=argv,
            returncode=completed.returncode,
            stdout=completed.stdout,
            stderr=completed.stderr,
        )
