"""Runtime configuration resolved from the environment."""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path

from pydantic import BaseModel, ConfigDict

from drip.errors import ConfigError
from drip.recipe import expand_home

# Environment variable naming the default recipe directory
RECIPE_DIR_ENV = "DRIP_RECIPE_DIR"

# Name of the recipe file inside a recipe directory
RECIPE_FILE = "recipe.kdl"

# Environment variables overriding the external tools
BREW_ENV = "DRIP_BREW"
CURL_ENV = "DRIP_CURL"
SHELL_ENV = "DRIP_SHELL"


class Settings(BaseModel):
    """Settings for a drip run.

    Attributes:
        recipe_dir: Default recipe directory, if configured.
        brew: Package manager executable.
        curl: Fetch tool executable used by download steps.
        shell: Shell used by run-command steps (invoked as ``<shell> -c``).
    """

    model_config = ConfigDict(frozen=True)

    recipe_dir: Path | None = None
    brew: str = "brew"
    curl: str = "curl"
    shell: str = "fish"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Build settings from environment variables.

        Args:
            environ: Environment mapping. Defaults to ``os.environ``.

        Returns:
            Settings with unset or empty variables left at their defaults.
        """
        env = os.environ if environ is None else environ
        values: dict[str, object] = {}

        recipe_dir = env.get(RECIPE_DIR_ENV)
        if recipe_dir:
            values["recipe_dir"] = Path(recipe_dir)
        for key, var in (("brew", BREW_ENV), ("curl", CURL_ENV), ("shell", SHELL_ENV)):
            if env.get(var):
                values[key] = env[var]

        return cls.model_validate(values)


def resolve_recipe_dir(recipe_dir: Path | None, settings: Settings) -> Path:
    """Pick the recipe directory given on the command line or from settings.

    Args:
        recipe_dir: Directory passed by the user, if any.
        settings: Settings carrying the environment fallback.

    Returns:
        The recipe directory with ``~`` expanded.

    Raises:
        ConfigError: If neither a directory nor $DRIP_RECIPE_DIR is given, or
            the home directory cannot be determined.
    """
    chosen = recipe_dir or settings.recipe_dir
    if chosen is None:
        raise ConfigError(f"${RECIPE_DIR_ENV} is not set")
    try:
        return expand_home(chosen)
    except ValueError as e:
        raise ConfigError(str(e)) from e
