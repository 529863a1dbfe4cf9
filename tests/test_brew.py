"""Tests for the Homebrew client."""

from __future__ import annotations

from unittest.mock import MagicMock, call

import pytest
from conftest import failed, ok

from drip.brew import Homebrew
from drip.errors import CaskFailed, CommandError, CommandFailed, FormulaFailed, TapFailed
from drip.process import ProcessRunner
from drip.protocols import PackageManager


@pytest.fixture
def brew(mock_runner: MagicMock) -> Homebrew:
    """Create a Homebrew client with a mock runner."""
    return Homebrew(runner=mock_runner)


class TestHomebrewCreate:
    """Tests for the factory method."""

    def test_create_defaults(self) -> None:
        """create() wires a real ProcessRunner and the brew binary."""
        brew = Homebrew.create()
        assert isinstance(brew.runner, ProcessRunner)
        assert brew.executable == "brew"
        assert isinstance(brew, PackageManager)

    def test_create_custom_executable(self, mock_runner: MagicMock) -> None:
        """A custom executable is used for every call."""
        brew = Homebrew.create(executable="/opt/homebrew/bin/brew", runner=mock_runner)
        brew.add_tap("a/b")
        mock_runner.run.assert_called_once_with(["/opt/homebrew/bin/brew", "tap", "a/b"])


class TestHomebrewInstall:
    """Argument shapes and error mapping for install operations."""

    def test_add_tap(self, brew: Homebrew, mock_runner: MagicMock) -> None:
        """Tap name is the sole argument."""
        brew.add_tap("homebrew/cask-fonts")
        mock_runner.run.assert_called_once_with(["brew", "tap", "homebrew/cask-fonts"])

    def test_install_formula(self, brew: Homebrew, mock_runner: MagicMock) -> None:
        """Formula name is the sole argument."""
        brew.install_formula("ripgrep")
        mock_runner.run.assert_called_once_with(["brew", "install", "ripgrep"])

    def test_install_cask(self, brew: Homebrew, mock_runner: MagicMock) -> None:
        """Casks use the --cask flag."""
        brew.install_cask("kitty")
        mock_runner.run.assert_called_once_with(["brew", "install", "--cask", "kitty"])

    @pytest.mark.parametrize(
        ("method", "error_type"),
        [
            ("add_tap", TapFailed),
            ("install_formula", FormulaFailed),
            ("install_cask", CaskFailed),
        ],
    )
    def test_nonzero_exit(
        self, brew: Homebrew, mock_runner: MagicMock, method: str, error_type: type
    ) -> None:
        """A failing brew run raises the matching error with its stderr."""
        mock_runner.run.side_effect = None
        mock_runner.run.return_value = failed(b"Error: No available formula")

        with pytest.raises(error_type) as exc_info:
            getattr(brew, method)("nope")

        assert exc_info.value.name == "nope"
        assert exc_info.value.reason == "Error: No available formula"

    @pytest.mark.parametrize(
        ("method", "cmd"),
        [
            ("add_tap", "brew tap"),
            ("install_formula", "brew install"),
            ("install_cask", "brew install --cask"),
        ],
    )
    def test_spawn_failure(
        self, brew: Homebrew, mock_runner: MagicMock, method: str, cmd: str
    ) -> None:
        """A brew binary that cannot be started raises CommandFailed."""
        mock_runner.run.side_effect = FileNotFoundError("No such file or directory: 'brew'")

        with pytest.raises(CommandFailed) as exc_info:
            getattr(brew, method)("x")

        assert exc_info.value.cmd == cmd
        assert "No such file" in exc_info.value.reason

    def test_invalid_utf8_stderr(self, brew: Homebrew, mock_runner: MagicMock) -> None:
        """Undecodable stderr degrades to a lossy reason."""
        mock_runner.run.side_effect = None
        mock_runner.run.return_value = failed(b"\xff\xfe broken")

        with pytest.raises(FormulaFailed) as exc_info:
            brew.install_formula("x")

        assert exc_info.value.reason.endswith(" broken")


class TestHomebrewLeaves:
    """Tests for listing installed leaf formulas."""

    def test_leaves(self, brew: Homebrew, mock_runner: MagicMock) -> None:
        """Each output line is one formula."""
        mock_runner.run.side_effect = None
        mock_runner.run.return_value = ok(stdout=b"bat\nfish\n\nripgrep\n")

        assert brew.leaves() == {"bat", "fish", "ripgrep"}
        assert mock_runner.run.call_args == call(["brew", "leaves", "-r"])

    def test_leaves_empty(self, brew: Homebrew, mock_runner: MagicMock) -> None:
        """No output means no formulas."""
        assert brew.leaves() == set()

    def test_leaves_spawn_failure(self, brew: Homebrew, mock_runner: MagicMock) -> None:
        """A brew that cannot be started raises CommandError."""
        mock_runner.run.side_effect = PermissionError("Permission denied")

        with pytest.raises(CommandError) as exc_info:
            brew.leaves()

        assert exc_info.value.cmd == "brew leaves"

    def test_leaves_invalid_utf8(self, brew: Homebrew, mock_runner: MagicMock) -> None:
        """Undecodable output raises CommandError."""
        mock_runner.run.side_effect = None
        mock_runner.run.return_value = ok(stdout=b"bat\n\xff\n")

        with pytest.raises(CommandError):
            brew.leaves()

    def test_leaves_nonzero_exit_uses_output(
        self, brew: Homebrew, mock_runner: MagicMock
    ) -> None:
        """A non-zero exit is not an error; whatever was printed is used."""
        mock_runner.run.side_effect = None
        mock_runner.run.return_value = MagicMock(
            success=False, returncode=1, stdout=b"git\n", error_text="warning"
        )

        assert brew.leaves() == {"git"}
