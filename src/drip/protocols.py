"""Protocol definitions for core abstractions.

This module defines abstract interfaces (Protocols) for the services the
installer and diff reporter depend on. Designing to interfaces enables:
- Loose coupling between components
- Easy substitution of test doubles
- Clear contracts for implementations

All concrete implementations satisfy these protocols structurally (duck typing).
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from drip.process import ProcessResult
    from drip.recipe import Postinstall, Recipe


@runtime_checkable
class CommandRunner(Protocol):
    """Protocol for running external processes."""

    def run(self, args: Sequence[str]) -> ProcessResult:
        """Run a process to completion.

        Args:
            args: Program followed by its arguments.

        Returns:
            Result of the finished process.

        Raises:
            OSError: If the process could not be started.
        """
        ...


@runtime_checkable
class FileSystem(Protocol):
    """Protocol for the filesystem operations used by postinstall steps."""

    def is_dir(self, path: Path) -> bool:
        """Check if a path is a directory."""
        ...

    def mkdir(self, path: Path, parents: bool = False, exist_ok: bool = False) -> None:
        """Create a directory."""
        ...

    def copy_file(self, src: Path, dst: Path) -> Path:
        """Copy a single file to a file path or into a directory."""
        ...

    def append_line(self, path: Path, text: str) -> None:
        """Append a line of text to an existing file."""
        ...


@runtime_checkable
class PackageManager(Protocol):
    """Protocol for package manager operations.

    Implementations raise InstallError subclasses for install operations and
    CommandError when the installed set cannot be queried.
    """

    def add_tap(self, name: str) -> None:
        """Add a tap."""
        ...

    def install_formula(self, name: str) -> None:
        """Install a formula."""
        ...

    def install_cask(self, name: str) -> None:
        """Install a cask."""
        ...

    def leaves(self) -> set[str]:
        """Get the names of installed formulas no other formula depends on."""
        ...


@runtime_checkable
class StepRunner(Protocol):
    """Protocol for executing postinstall steps."""

    def run_step(self, step: Postinstall, base_dir: Path) -> None:
        """Execute one postinstall step.

        Args:
            step: The step to run.
            base_dir: Directory that relative copy sources are resolved against.
        """
        ...


@runtime_checkable
class RecipeInstaller(Protocol):
    """Protocol for installing a whole recipe."""

    def install(self, recipe_base_dir: Path, recipe: Recipe) -> None:
        """Install every tap, formula and cask of a recipe, in order."""
        ...
