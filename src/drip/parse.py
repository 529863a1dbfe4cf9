"""Recipe parsing from KDL documents.

A recipe looks like::

    tap "homebrew/cask-fonts"

    brew "fish" {
        cp "fish/config.fish" "~/.config/fish"
        dl "https://example.com/theme.fish" "~/.config/fish/themes/theme.fish"
        echo "/opt/homebrew/bin/fish" "/etc/shells"
        fish "fish_add_path /opt/homebrew/bin"
    }

    cask "font-fira-code"
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import kdl
from pydantic import ValidationError

from drip.config import RECIPE_FILE
from drip.errors import RecipeParseError, RecipeReadError
from drip.recipe import Append, Copy, Download, Formula, Postinstall, Recipe, RunCommand

logger = logging.getLogger(__name__)


# Postinstall node name -> (step type, argument field names)
STEP_NODES: dict[str, tuple[type[Any], tuple[str, ...]]] = {
    "cp": (Copy, ("source", "destination")),
    "dl": (Download, ("url", "destination")),
    "echo": (Append, ("text", "destination")),
    "fish": (RunCommand, ("command",)),
}


def load_recipe(recipe_dir: Path) -> Recipe:
    """Read and parse the recipe file of a recipe directory.

    Args:
        recipe_dir: Directory containing ``recipe.kdl``.

    Returns:
        The parsed Recipe.

    Raises:
        RecipeReadError: If the recipe file cannot be read.
        RecipeParseError: If the recipe file is malformed.
    """
    path = recipe_dir / RECIPE_FILE
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise RecipeReadError(path, str(e)) from e

    logger.debug("Loaded recipe from %s", path)
    return parse_recipe(RECIPE_FILE, text)


def parse_recipe(file_name: str, text: str) -> Recipe:
    """Parse a Recipe from KDL text.

    Args:
        file_name: Name of the source file, used in error messages.
        text: The KDL document.

    Returns:
        The parsed Recipe, with all step paths home-expanded.

    Raises:
        RecipeParseError: If the text is not a valid recipe.
    """
    try:
        document = kdl.parse(text)
    except kdl.ParseError as e:
        raise RecipeParseError(file_name, str(e), line=e.line) from e

    taps: list[str] = []
    casks: list[str] = []
    formulas: list[Formula] = []

    for index, node in enumerate(document.nodes, start=1):
        where = f"at top level (entry {index})"
        if node.name == "tap":
            taps.append(_single_leaf_argument(file_name, node, where))
        elif node.name == "cask":
            casks.append(_single_leaf_argument(file_name, node, where))
        elif node.name == "brew":
            formulas.append(_parse_formula(file_name, node, where))
        else:
            raise RecipeParseError(
                file_name,
                f"unexpected node '{node.name}' {where}, expected one of: tap, cask, brew",
            )

    return Recipe(taps=tuple(taps), casks=tuple(casks), formulas=tuple(formulas))


def _parse_formula(file_name: str, node: kdl.Node, where: str) -> Formula:
    """Build a Formula from a ``brew`` node and its children."""
    (name,) = _string_arguments(file_name, node, 1, where)
    steps = [_parse_step(file_name, name, child) for child in node.nodes]
    return Formula(name=name, postinstall_steps=tuple(steps))


def _parse_step(file_name: str, formula: str, node: kdl.Node) -> Postinstall:
    """Build one postinstall step from a child node of ``brew``."""
    where = f"in brew '{formula}'"
    if node.name not in STEP_NODES:
        raise RecipeParseError(
            file_name,
            f"unexpected node '{node.name}' {where}, "
            f"expected one of: {', '.join(STEP_NODES)}",
        )
    if node.nodes:
        raise RecipeParseError(file_name, f"node '{node.name}' {where} cannot have children")

    step_type, fields = STEP_NODES[node.name]
    values = _string_arguments(file_name, node, len(fields), where)
    try:
        return step_type(**dict(zip(fields, values)))
    except ValidationError as e:
        raise RecipeParseError(file_name, f"invalid '{node.name}' step {where}: {e}") from e


def _single_leaf_argument(file_name: str, node: kdl.Node, where: str) -> str:
    """Get the only argument of a node that takes no children."""
    (value,) = _string_arguments(file_name, node, 1, where)
    if node.nodes:
        raise RecipeParseError(
            file_name, f"node '{node.name}' '{value}' {where} cannot have children"
        )
    return value


def _string_arguments(file_name: str, node: kdl.Node, count: int, where: str) -> list[str]:
    """Check that a node has exactly ``count`` string arguments and no properties.

    ``where`` locates the node in the document for error messages.
    """
    if node.props:
        keys = ", ".join(node.props)
        raise RecipeParseError(
            file_name, f"node '{node.name}' {where} has unexpected properties: {keys}"
        )
    if len(node.args) != count:
        raise RecipeParseError(
            file_name,
            f"node '{node.name}' {where} expects {count} argument(s), got {len(node.args)}",
        )
    for value in node.args:
        if not isinstance(value, str):
            raise RecipeParseError(
                file_name,
                f"node '{node.name}' {where} expects string arguments, got {value!r}",
            )
    return list(node.args)
