"""
Unit tests for command execution, tool lookup and the scratch script.
"""

import os
import sys
import tempfile
from pathlib import Path
from unittest.mock import Mock, patch

import pytest

from binshrink.system import (
    EXIT_NOT_EXECUTABLE,
    EXIT_NOT_FOUND,
    TOOL_START_FAILED,
    ScratchScript,
    ScratchScriptError,
    StaticToolLocator,
    ToolLocator,
    normalize_returncode,
    run_build_command,
    run_tool,
)


@pytest.mark.unit
class TestRunBuildCommand:
    """Test cases for run_build_command."""

    @pytest.mark.parametrize("status", [0, 1, 3, 42])
    def test_exit_status_is_returned(self, status):
        command = [sys.executable, "-c", f"import sys; sys.exit({status})"]
        assert run_build_command(command) == status

    def test_arguments_are_passed_unmodified(self, temp_dir):
        out = temp_dir / "args.txt"
        command = [
            sys.executable, "-c",
            "import sys; open(sys.argv[1], 'w').write('|'.join(sys.argv[2:]))",
            str(out), "--release", "a b", "$HOME", "*",
        ]

        assert run_build_command(command) == 0
        assert out.read_text() == "--release|a b|$HOME|*"

    def test_runs_in_cwd(self, temp_dir):
        command = [sys.executable, "-c", "open('marker', 'w').close()"]

        run_build_command(command, cwd=temp_dir)

        assert (temp_dir / "marker").exists()

    def test_command_not_found(self, temp_dir):
        assert run_build_command([str(temp_dir / "no-such-build")]) == EXIT_NOT_FOUND

    def test_command_not_executable(self, temp_dir):
        script = temp_dir / "build.sh"
        script.write_text("#!/bin/sh\nexit 0\n")
        script.chmod(0o644)

        assert run_build_command([str(script)]) == EXIT_NOT_EXECUTABLE

    @patch("binshrink.system.commands.subprocess.Popen")
    def test_signal_death_maps_to_shell_status(self, mock_popen):
        mock_popen.return_value = Mock(wait=Mock(return_value=-15))

        assert run_build_command(["make"]) == 143


@pytest.mark.unit
class TestRunTool:
    """Test cases for run_tool."""

    def test_return_code(self):
        assert run_tool([sys.executable, "-c", "raise SystemExit(5)"]) == 5

    def test_streams(self, temp_dir):
        src = temp_dir / "in"
        dst = temp_dir / "out"
        src.write_bytes(b"payload")

        with open(src, "rb") as stdin, open(dst, "wb") as stdout:
            code = run_tool(
                [sys.executable, "-c",
                 "import sys; sys.stdout.buffer.write(sys.stdin.buffer.read()[::-1])"],
                stdin=stdin,
                stdout=stdout,
            )

        assert code == 0
        assert dst.read_bytes() == b"daolyap"

    def test_start_failure_is_a_return_code(self, temp_dir):
        assert run_tool([str(temp_dir / "missing-tool")]) == TOOL_START_FAILED

    def test_normalize_returncode(self):
        assert normalize_returncode(0) == 0
        assert normalize_returncode(2) == 2
        assert normalize_returncode(-9) == 137


@pytest.mark.unit
class TestToolLocator:
    """Test cases for ToolLocator and StaticToolLocator."""

    def test_finds_executable_on_search_path(self, tools, bin_dir):
        tools.script("upx", "exit 0")
        locator = ToolLocator(search_path=str(bin_dir))

        assert locator.find("upx") == str(bin_dir / "upx")
        assert locator.find("xz") is None

    def test_ignores_non_executable(self, bin_dir):
        (bin_dir / "gzip").write_text("not executable")
        (bin_dir / "gzip").chmod(0o644)

        assert ToolLocator(search_path=str(bin_dir)).find("gzip") is None

    def test_looks_up_at_call_time(self, tools, bin_dir):
        locator = ToolLocator(search_path=str(bin_dir))
        assert locator.find("strip") is None

        tools.script("strip", "exit 0")

        assert locator.find("strip") is not None

    def test_defaults_to_path_environment(self, tools, bin_dir, monkeypatch):
        tools.script("upx", "exit 0")
        monkeypatch.setenv("PATH", str(bin_dir))

        assert ToolLocator().find("upx") == str(bin_dir / "upx")

    def test_static_locator(self):
        locator = StaticToolLocator({"upx": "/opt/upx", "xz": None})

        assert locator.find("upx") == "/opt/upx"
        assert locator.find("xz") is None
        assert locator.find("gzip") is None


@pytest.mark.unit
class TestScratchScript:
    """Test cases for the temporary script resource."""

    def test_created_and_removed(self, scratch_dir):
        with ScratchScript("echo hi\n") as script:
            path = script.path
            assert path.parent == scratch_dir
            assert path.read_text() == "echo hi\n"

        assert not path.exists()
        assert list(scratch_dir.iterdir()) == []

    def test_unique_names(self, scratch_dir):
        with ScratchScript("a") as first, ScratchScript("b") as second:
            assert first.path != second.path

    def test_removed_when_body_raises(self, scratch_dir):
        with pytest.raises(RuntimeError):
            with ScratchScript("x"):
                raise RuntimeError("build exploded")

        assert list(scratch_dir.iterdir()) == []

    def test_removed_on_keyboard_interrupt(self, scratch_dir):
        with pytest.raises(KeyboardInterrupt):
            with ScratchScript("x"):
                raise KeyboardInterrupt

        assert list(scratch_dir.iterdir()) == []

    def test_remove_is_idempotent(self, scratch_dir):
        script = ScratchScript("x")
        script.create()
        script.path.unlink()

        script.remove()
        script.remove()

    def test_path_before_create(self):
        with pytest.raises(RuntimeError):
            ScratchScript("x").path

    def test_creation_failure(self, temp_dir):
        missing = temp_dir / "does" / "not" / "exist"

        with pytest.raises(ScratchScriptError):
            with ScratchScript("x", directory=missing):
                pytest.fail("body must not run")

    def test_mkstemp_failure_is_wrapped(self):
        with patch.object(tempfile, "mkstemp", side_effect=PermissionError("denied")):
            with pytest.raises(ScratchScriptError) as exc_info:
                ScratchScript("x").create()

        assert "denied" in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, PermissionError)
