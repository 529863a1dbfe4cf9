"""Bundle installation."""

from __future__ import annotations

import logging
from pathlib import Path

from drip.brew import Homebrew
from drip.postinstall import PostinstallRunner
from drip.protocols import PackageManager, StepRunner
from drip.recipe import Recipe

logger = logging.getLogger(__name__)


class BundleInstaller:
    """Installs a recipe: taps, then formulas with their postinstall steps, then casks.

    Everything runs sequentially in declared order. The first failing step
    raises and nothing after it is attempted. Work completed before the
    failure is left in place.

    Follows Separate Use from Creation: constructor requires all dependencies.
    Use factory method `create()` for production instantiation with defaults.
    """

    def __init__(self, package_manager: PackageManager, steps: StepRunner) -> None:
        """Initialize installer with required dependencies.

        Args:
            package_manager: Package manager client.
            steps: Postinstall step interpreter.
        """
        self.package_manager = package_manager
        self.steps = steps

    @classmethod
    def create(
        cls,
        package_manager: PackageManager | None = None,
        steps: StepRunner | None = None,
    ) -> BundleInstaller:
        """Factory method for production instantiation.

        Args:
            package_manager: Optional package manager (Homebrew if not provided).
            steps: Optional step interpreter (created if not provided).

        Returns:
            Configured BundleInstaller instance.
        """
        return cls(
            package_manager=package_manager or Homebrew.create(),
            steps=steps or PostinstallRunner.create(),
        )

    def install(self, recipe_base_dir: Path, recipe: Recipe) -> None:
        """Install the recipe bundle.

        Args:
            recipe_base_dir: Recipe directory; relative copy sources resolve against it.
            recipe: The recipe to install.

        Raises:
            InstallError: A subclass describing the first step that failed.
        """
        for tap in recipe.taps:
            logger.info("Adding tap %s", tap)
            self.package_manager.add_tap(tap)

        for formula in recipe.formulas:
            logger.info("Installing formula %s", formula.name)
            self.package_manager.install_formula(formula.name)

            for step in formula.postinstall_steps:
                logger.info("Running %s step for %s", step.kind, formula.name)
                self.steps.run_step(step, recipe_base_dir)

        for cask in recipe.casks:
            logger.info("Installing cask %s", cask)
            self.package_manager.install_cask(cask)
