"""Tests for tools.external: host shell execution, output relay, timing."""

import os
import signal
import sys
from unittest.mock import patch

import pytest

from pocketsh.tools.external import ExecResult, run_external, shell_argv

posix_only = pytest.mark.skipif(sys.platform == "win32", reason="uses sh -c")


class TestShellArgv:
    def test_posix(self):
        with patch("pocketsh.tools.external.sys.platform", "linux"):
            assert shell_argv("echo hi") == ["sh", "-c", "echo hi"]

    def test_windows(self):
        with patch("pocketsh.tools.external.sys.platform", "win32"):
            assert shell_argv("dir") == ["cmd", "/C", "dir"]


@posix_only
class TestRunExternal:
    def test_echo_output_then_duration(self, capsys):
        result = run_external("echo hello")
        out = capsys.readouterr().out
        lines = out.splitlines()
        assert lines[0] == "hello"
        assert lines[-1].startswith("[Command completed in ")
        assert isinstance(result, ExecResult)
        assert result.returncode == 0
        assert result.stdout == "hello\n"

    def test_stderr_goes_to_stderr(self, capsys):
        run_external("echo oops 1>&2")
        captured = capsys.readouterr()
        assert "oops" in captured.err
        assert "oops" not in captured.out

    def test_nonzero_exit_still_reports_duration(self, capsys):
        result = run_external("exit 3")
        assert result.returncode == 3
        assert "[Command completed in " in capsys.readouterr().out

    def test_env_is_passed_to_child(self, capsys):
        env = dict(os.environ, POCKETSH_CHILD_VAR="from-parent")
        run_external('echo "$POCKETSH_CHILD_VAR"', env=env)
        assert "from-parent" in capsys.readouterr().out

    def test_output_is_not_treated_as_markup(self, capsys):
        run_external("echo '[bold]x[/bold] :smile:'")
        assert "[bold]x[/bold] :smile:" in capsys.readouterr().out

    def test_sigint_handler_restored(self):
        before = signal.getsignal(signal.SIGINT)
        run_external("true")
        assert signal.getsignal(signal.SIGINT) is before


class TestSpawnFailure:
    def test_missing_interpreter_is_reported(self, capsys):
        with patch(
            "pocketsh.tools.external.subprocess.run",
            side_effect=FileNotFoundError(2, "No such file or directory", "sh"),
        ):
            assert run_external("echo hi") is None
        out = capsys.readouterr().out
        assert "Error executing command:" in out
        assert "Command completed" not in out

    def test_nul_byte_in_command_is_reported(self, capsys):
        assert run_external("echo a\0b") is None
        out = capsys.readouterr().out
        assert "Error executing command:" in out
        assert "Command completed" not in out

    @posix_only
    def test_bad_env_name_is_reported(self, capsys):
        assert run_external("true", env={"BAD=NAME": "x"}) is None
        assert "Error executing command:" in capsys.readouterr().out
