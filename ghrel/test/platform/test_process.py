"""Tests for ghrel.platform.process module."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

from ghrel.core.result import Err, Ok
from ghrel.platform.process import ProcessError, run


class TestProcessError:
    def test_str_short_command(self) -> None:
        error = ProcessError(
            command=("git", "tag"),
            returncode=128,
            stdout="",
            stderr="fatal: not a git repository",
        )
        assert str(error) == "git tag failed (exit 128)"

    def test_str_long_command_truncated(self) -> None:
        error = ProcessError(("git", "-C", "/repo", "tag"), 1, "", "")
        assert str(error) == "git -C /repo ... failed (exit 1)"

    def test_frozen(self) -> None:
        error = ProcessError(("cmd",), 1, "", "")
        with pytest.raises(AttributeError):
            error.returncode = 2  # type: ignore[misc]


class TestRun:
    def test_success_returns_stdout(self, tmp_path: Path) -> None:
        result = run([sys.executable, "-c", "print('hello')"], cwd=tmp_path)
        assert isinstance(result, Ok)
        assert result.value.strip() == "hello"

    def test_nonzero_exit_returns_error(self, tmp_path: Path) -> None:
        code = "import sys; sys.stderr.write('nope'); sys.exit(3)"
        result = run([sys.executable, "-c", code], cwd=tmp_path)
        assert isinstance(result, Err)
        assert result.error.returncode == 3
        assert result.error.stderr == "nope"

    def test_missing_executable(self, tmp_path: Path) -> None:
        result = run(["definitely-not-a-real-command-ghrel"], cwd=tmp_path)
        assert isinstance(result, Err)
        assert result.error.returncode == -1

    def test_timeout(self, tmp_path: Path) -> None:
        code = "import time; time.sleep(5)"
        result = run([sys.executable, "-c", code], cwd=tmp_path, timeout=0.2)
        assert isinstance(result, Err)
        assert "timed out" in result.error.stderr
