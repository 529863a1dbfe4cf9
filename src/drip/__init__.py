"""Declarative Homebrew bundle installer."""

__version__ = "0.1.0"

from drip.bundle import BundleInstaller
from drip.diff import RecipeDiff, compute_diff, print_diff
from drip.parse import load_recipe, parse_recipe
from drip.recipe import Append, Copy, Download, Formula, Postinstall, Recipe, RunCommand

__all__ = [
    "__version__",
    "Append",
    "BundleInstaller",
    "Copy",
    "Download",
    "Formula",
    "Postinstall",
    "Recipe",
    "RecipeDiff",
    "RunCommand",
    "compute_diff",
    "load_recipe",
    "parse_recipe",
    "print_diff",
]
