"""Application context for dependency injection.

This module separates object creation from object use, enabling testability
and reducing coupling in CLI commands.

Dependencies are typed using Protocols (abstract interfaces) rather than
concrete implementations, so test doubles can be injected without
inheritance.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from drip.config import Settings
from drip.protocols import PackageManager, RecipeInstaller


@dataclass
class AppContext:
    """Container for application dependencies.

    Provides a single injection point for all services used by CLI commands.
    """

    package_manager: PackageManager
    installer: RecipeInstaller
    settings: Settings = field(default_factory=Settings)


def create_context(settings: Settings | None = None) -> AppContext:
    """Factory for application dependencies.

    Creates all services with proper wiring. Use this in production code.
    For tests, construct AppContext directly with test doubles.

    Args:
        settings: Override settings. Defaults to settings from the environment.

    Returns:
        Configured AppContext with all dependencies.
    """
    from drip.brew import Homebrew
    from drip.bundle import BundleInstaller
    from drip.filesystem import RealFileSystem
    from drip.postinstall import PostinstallRunner
    from drip.process import ProcessRunner

    settings = settings or Settings.from_env()
    runner = ProcessRunner()
    package_manager = Homebrew.create(executable=settings.brew, runner=runner)
    steps = PostinstallRunner.create(
        runner=runner,
        filesystem=RealFileSystem(),
        curl=settings.curl,
        shell=settings.shell,
    )
    installer = BundleInstaller.create(package_manager=package_manager, steps=steps)

    return AppContext(
        package_manager=package_manager,
        installer=installer,
        settings=settings,
    )
