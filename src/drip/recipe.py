"""Typed recipe model.

A recipe is built once by the parser and then only read. Path fields are
home-expanded when a model value is constructed, so nothing downstream has
to know about ``~``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Literal

from pydantic import AfterValidator, BaseModel, ConfigDict, Field


def expand_home(path: Path) -> Path:
    """Expand a leading ``~`` component into the invoking user's home directory.

    Only a bare ``~`` component is expanded; ``~name`` is kept literally.

    Raises:
        ValueError: If the home directory cannot be determined.
    """
    if not path.parts or path.parts[0] != "~":
        return path
    try:
        home = Path.home()
    except RuntimeError as e:
        raise ValueError(f"cannot expand '~': {e}") from e
    return home.joinpath(*path.parts[1:])


ExpandedPath = Annotated[Path, AfterValidator(expand_home)]


# =============================================================================
# Postinstall Steps
# =============================================================================


class Copy(BaseModel):
    """Copy ``source`` (relative to the recipe dir) into ``destination``."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["cp"] = "cp"
    source: ExpandedPath
    destination: ExpandedPath


class Download(BaseModel):
    """Download ``url`` to ``destination``."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["dl"] = "dl"
    url: str
    destination: ExpandedPath


class Append(BaseModel):
    """Append ``text`` as a new line to the existing file ``destination``."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["echo"] = "echo"
    text: str
    destination: ExpandedPath


class RunCommand(BaseModel):
    """Run ``command`` through the configured shell."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["fish"] = "fish"
    command: str


Postinstall = Annotated[
    Copy | Download | Append | RunCommand,
    Field(discriminator="kind"),
]


# =============================================================================
# Recipe
# =============================================================================


class Formula(BaseModel):
    """A formula and the steps to run after it is installed."""

    model_config = ConfigDict(frozen=True)

    name: str
    postinstall_steps: tuple[Postinstall, ...] = ()


class Recipe(BaseModel):
    """The root recipe container.

    Attributes:
        taps: Taps to add, in install order.
        casks: Casks to install, in install order.
        formulas: Formulas to install, in install order.
    """

    model_config = ConfigDict(frozen=True)

    taps: tuple[str, ...] = ()
    casks: tuple[str, ...] = ()
    formulas: tuple[Formula, ...] = ()

    @property
    def formula_names(self) -> frozenset[str]:
        """Names of all formulas in the recipe, ignoring order."""
        return frozenset(formula.name for formula in self.formulas)
