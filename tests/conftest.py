"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from drip.process import ProcessResult


@pytest.fixture
def temp_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the home directory at a temporary directory."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    return home


@pytest.fixture
def recipe_dir(tmp_path: Path) -> Path:
    """Create an empty recipe directory."""
    path = tmp_path / "recipe"
    path.mkdir()
    return path


# ============================================================================
# Process Fixtures
# ============================================================================


def ok(args: list[str] | tuple[str, ...] = (), stdout: bytes = b"") -> ProcessResult:
    """Build a successful ProcessResult."""
    return ProcessResult(args=tuple(args), returncode=0, stdout=stdout)


def failed(stderr: bytes, args: list[str] | tuple[str, ...] = ()) -> ProcessResult:
    """Build a failed ProcessResult."""
    return ProcessResult(args=tuple(args), returncode=1, stderr=stderr)


@pytest.fixture
def mock_runner() -> MagicMock:
    """Create a mock CommandRunner whose processes all succeed.

    Every call is recorded; tests inspect ``call_args_list`` for argv order.
    """
    runner = MagicMock()
    runner.run.side_effect = lambda args: ok(args)
    return runner


# ============================================================================
# Mock FileSystem Fixture
# ============================================================================


@pytest.fixture
def mock_filesystem() -> MagicMock:
    """Create a mock FileSystem for testing.

    The mock tracks all filesystem operations without touching real files.
    """
    fs = MagicMock()
    fs.is_dir.return_value = False
    return fs


# ============================================================================
# Sample Recipe Fixtures
# ============================================================================


@pytest.fixture
def sample_recipe_text() -> str:
    """Recipe with one tap, one cask and one formula using every step kind."""
    return """
tap "homebrew/cask-fonts"

brew "fish" {
    cp "fish/config.fish" "~/.config/fish"
    dl "https://example.com/theme.fish" "~/.config/fish/themes/theme.fish"
    echo "/opt/homebrew/bin/fish" "/etc/shells"
    fish "fish_add_path /opt/homebrew/bin"
}

cask "font-fira-code"
"""
