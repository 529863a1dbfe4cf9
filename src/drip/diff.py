"""Difference between recipe formulas and locally installed formulas."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from drip.protocols import PackageManager
from drip.recipe import Recipe

if TYPE_CHECKING:
    from drip.tui import TUI


@dataclass(frozen=True)
class RecipeDiff:
    """Set differences between a recipe and the installed leaf formulas.

    Attributes:
        missing: Formulas in the recipe that are not installed.
        extra: Installed formulas that the recipe does not declare.
    """

    missing: frozenset[str]
    extra: frozenset[str]


def compute_diff(recipe: Recipe, installed: set[str] | frozenset[str]) -> RecipeDiff:
    """Compare recipe formula names against installed formula names.

    Args:
        recipe: The recipe. Order of formulas is ignored.
        installed: Installed leaf formula names. Not modified.

    Returns:
        RecipeDiff with both set differences.
    """
    declared = recipe.formula_names
    local = frozenset(installed)
    return RecipeDiff(missing=declared - local, extra=local - declared)


def print_diff(recipe: Recipe, package_manager: PackageManager, tui: TUI) -> RecipeDiff:
    """Print the difference between the recipe and locally installed formulas.

    Args:
        recipe: The recipe.
        package_manager: Queried for the installed leaf formulas.
        tui: Output target.

    Returns:
        The computed RecipeDiff.

    Raises:
        CommandError: If the installed formulas cannot be queried.
    """
    diff = compute_diff(recipe, package_manager.leaves())
    tui.show_diff(diff)
    return diff
