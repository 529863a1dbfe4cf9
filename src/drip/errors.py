"""Error types raised by drip.

Every failure is raised at the step that observed it and propagates to the
CLI unchanged. Each error keeps the inputs of the failed operation and the
reason reported by the OS or the external tool.
"""

from __future__ import annotations

from pathlib import Path


class DripError(Exception):
    """Base class for all drip errors."""

    pass


class ConfigError(DripError):
    """Error resolving configuration (e.g. the recipe directory)."""

    pass


# =============================================================================
# Recipe Errors
# =============================================================================


class RecipeError(DripError):
    """Error loading a recipe."""

    pass


class RecipeReadError(RecipeError):
    """The recipe file could not be read."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"cannot read recipe '{path}': {reason}")


class RecipeParseError(RecipeError):
    """The recipe text does not conform to the recipe format.

    Attributes:
        file_name: Name of the recipe file, used as source context.
        message: Description of the problem.
        line: 1-based line number of a KDL syntax error. Structural errors
            have no line and locate the node in ``message`` instead.
    """

    def __init__(self, file_name: str, message: str, line: int | None = None) -> None:
        self.file_name = file_name
        self.message = message
        self.line = line
        location = f"{file_name}:{line}" if line is not None else file_name
        super().__init__(f"failed to parse Recipe ({location}): {message}")


# =============================================================================
# Install Errors
# =============================================================================


class InstallError(DripError):
    """Base class for failures while installing a bundle."""

    reason: str


class TapFailed(InstallError):
    """The package manager rejected a tap."""

    def __init__(self, name: str, reason: str) -> None:
        self.name = name
        self.reason = reason
        super().__init__(f"cannot install tap '{name}': {reason}")


class FormulaFailed(InstallError):
    """The package manager rejected a formula."""

    def __init__(self, name: str, reason: str) -> None:
        self.name = name
        self.reason = reason
        super().__init__(f"cannot install formula '{name}': {reason}")


class CaskFailed(InstallError):
    """The package manager rejected a cask."""

    def __init__(self, name: str, reason: str) -> None:
        self.name = name
        self.reason = reason
        super().__init__(f"cannot install cask '{name}': {reason}")


class CommandFailed(InstallError):
    """A process could not be spawned, or a shell command exited non-zero."""

    def __init__(self, cmd: str, reason: str) -> None:
        self.cmd = cmd
        self.reason = reason
        super().__init__(f"command '{cmd}' failed: {reason}")


class CreateDirFailed(InstallError):
    """A directory could not be created."""

    def __init__(self, dir: str, reason: str) -> None:
        self.dir = dir
        self.reason = reason
        super().__init__(f"cannot create dir '{dir}': {reason}")


class CopyFailed(InstallError):
    """A file could not be copied."""

    def __init__(self, src: str, dst: str, reason: str) -> None:
        self.src = src
        self.dst = dst
        self.reason = reason
        super().__init__(f"cannot copy '{src}' to '{dst}': {reason}")


class DownloadFailed(InstallError):
    """The fetch tool exited unsuccessfully."""

    def __init__(self, url: str, dst: str, reason: str) -> None:
        self.url = url
        self.dst = dst
        self.reason = reason
        super().__init__(f"cannot download '{url}' to '{dst}': {reason}")


class ReadWriteFailed(InstallError):
    """A file could not be opened or written."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"cannot read from or write to '{path}': {reason}")


# =============================================================================
# Diff Errors
# =============================================================================


class CommandError(DripError):
    """Querying the package manager for installed formulas failed."""

    def __init__(self, cmd: str, reason: str) -> None:
        self.cmd = cmd
        self.reason = reason
        super().__init__(f"command '{cmd}' failed: {reason}")
