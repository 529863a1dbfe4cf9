"""CLI commands using Typer."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Annotated

if TYPE_CHECKING:
    from drip.context import AppContext

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.progress import Progress, SpinnerColumn, TextColumn

from drip import __version__
from drip.config import resolve_recipe_dir
from drip.context import create_context
from drip.diff import print_diff
from drip.errors import DripError
from drip.parse import load_recipe
from drip.recipe import Recipe
from drip.tui import TUI

app = typer.Typer(
    name="drip",
    help="Install a Homebrew bundle described by a KDL recipe",
    no_args_is_help=True,
)

console = Console()
tui = TUI(console)

RecipeDirOption = Annotated[
    Path | None,
    typer.Option(
        "--recipe-dir",
        "-d",
        help="The source Recipe dir (defaults to $DRIP_RECIPE_DIR)",
        file_okay=False,
    ),
]


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        console.print(f"drip v{__version__}")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """Route log records through Rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-v",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = False,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-V", help="Log every external command")
    ] = False,
) -> None:
    """Install a Homebrew bundle described by a KDL recipe."""
    configure_logging(verbose)


def _load(ctx: AppContext, recipe_dir: Path | None) -> tuple[Path, Recipe]:
    """Resolve the recipe directory and parse its recipe.

    Raises:
        typer.Exit: If the directory is not configured or the recipe is invalid.
    """
    try:
        resolved = resolve_recipe_dir(recipe_dir, ctx.settings)
        return resolved, load_recipe(resolved)
    except DripError as e:
        tui.show_error(str(e))
        raise typer.Exit(1) from e


@app.command()
def bundle(
    recipe_dir: RecipeDirOption = None,
    _context=None,
) -> None:
    """Install the Recipe bundle."""
    ctx = _context or create_context()
    resolved, recipe = _load(ctx, recipe_dir)

    try:
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=console,
            transient=True,
        ) as progress:
            progress.add_task("Installing bundle...", total=None)
            ctx.installer.install(resolved, recipe)
    except DripError as e:
        tui.show_error(str(e))
        raise typer.Exit(1) from e

    tui.show_success(
        f"Installed {len(recipe.taps)} tap(s), {len(recipe.formulas)} formula(s) "
        f"and {len(recipe.casks)} cask(s)"
    )


@app.command()
def diff(
    recipe_dir: RecipeDirOption = None,
    _context=None,
) -> None:
    """Print difference between the source Recipe and local formulas."""
    ctx = _context or create_context()
    _, recipe = _load(ctx, recipe_dir)

    try:
        print_diff(recipe, ctx.package_manager, tui)
    except DripError as e:
        tui.show_error(str(e))
        raise typer.Exit(1) from e


# Short aliases
app.command("b", help="Alias for bundle")(bundle)
app.command("d", help="Alias for diff")(diff)


if __name__ == "__main__":
    app()
