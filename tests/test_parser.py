"""Tests for commands.parser: tokenizing and classifying input lines."""

from pocketsh.commands import (
    COMMANDS,
    Builtin,
    BuiltinCall,
    EmptyLine,
    ExternalCall,
    builtin_names,
    parse,
)


class TestParse:
    def test_empty(self):
        assert parse("") == EmptyLine()
        assert parse("   \t ") == EmptyLine()

    def test_builtin_without_args(self):
        assert parse("help") == BuiltinCall(Builtin.HELP)

    def test_builtin_with_args(self):
        cmd = parse("setenv FOO bar")
        assert isinstance(cmd, BuiltinCall)
        assert cmd.kind is Builtin.SETENV
        assert cmd.args == ("FOO", "bar")

    def test_whitespace_tokenization_no_quoting(self):
        cmd = parse('setenv GREETING "hi there"')
        assert cmd.args == ("GREETING", '"hi', 'there"')

    def test_rest_keeps_raw_remainder(self):
        cmd = parse("alias ll=ls   -la")
        assert cmd.kind is Builtin.ALIAS
        assert cmd.rest == "ll=ls   -la"

    def test_hyphenated_builtins(self):
        assert parse("save-aliases").kind is Builtin.SAVE_ALIASES
        assert parse("load-aliases").kind is Builtin.LOAD_ALIASES
        assert parse("whoami-shell").kind is Builtin.WHOAMI

    def test_unknown_is_external(self):
        cmd = parse("  echo hello  ")
        assert cmd == ExternalCall("echo hello")
        assert cmd.name == "echo"

    def test_case_sensitive(self):
        assert isinstance(parse("EXIT"), ExternalCall)

    def test_bare_ls_is_builtin(self):
        assert parse("ls") == BuiltinCall(Builtin.LS)

    def test_ls_with_args_goes_to_host_shell(self):
        assert parse("ls -la") == ExternalCall("ls -la")


class TestCommandTable:
    def test_twelve_builtins(self):
        assert len(builtin_names()) == 12

    def test_help_covers_every_builtin(self):
        usages = " ".join(COMMANDS)
        for name in builtin_names():
            assert name in usages
