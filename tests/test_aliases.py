"""Tests for the alias store: set/lookup, persistence, round trip."""

from pocketsh.core.aliases import AliasStore


class TestSetAndLookup:
    def test_lookup_exact_match(self):
        store = AliasStore()
        store.set("ll", "ls -la")
        assert store.lookup("ll") == "ls -la"

    def test_lookup_trims_input(self):
        store = AliasStore()
        store.set("ll", "ls -la")
        assert store.lookup("  ll  ") == "ls -la"

    def test_no_prefix_match(self):
        store = AliasStore({"ll": "ls -la"})
        assert store.lookup("ll extra") is None
        assert store.lookup("l") is None

    def test_set_trims_name_and_value(self):
        store = AliasStore()
        store.set("  gs ", "  git status  ")
        assert dict(store.items()) == {"gs": "git status"}

    def test_last_set_wins(self):
        store = AliasStore()
        store.set("x", "first")
        store.set("x", "second")
        assert store.lookup("x") == "second"
        assert len(store) == 1

    def test_expand_falls_back_to_input(self):
        store = AliasStore({"ll": "ls -la"})
        assert store.expand(" ll extra ") == "ll extra"
        assert store.expand("ll") == "ls -la"


class TestPersist:
    def test_writes_name_value_lines(self, tmp_path):
        path = tmp_path / "aliases.txt"
        store = AliasStore({"ll": "ls -la", "gs": "git status"})
        msg = store.persist(path)
        assert msg == f"Aliases saved to {path}"
        assert path.read_text() == "ll=ls -la\ngs=git status\n"

    def test_unwritable_path_reports_instead_of_raising(self, tmp_path):
        path = tmp_path / "missing-dir" / "aliases.txt"
        msg = AliasStore({"a": "b"}).persist(path)
        assert msg.startswith("Failed to save aliases")
        assert not path.exists()

    def test_repeated_saves_are_byte_identical(self, tmp_path):
        path = tmp_path / "aliases.txt"
        store = AliasStore({"ll": "ls -la", "k": "a=b=c", "gs": "git status"})
        store.persist(path)
        first = path.read_bytes()
        store.persist(path)
        assert path.read_bytes() == first


class TestLoad:
    def test_missing_file(self, tmp_path):
        store = AliasStore({"keep": "me"})
        msg = store.load(tmp_path / "nope.txt")
        assert msg == "No alias file found."
        assert dict(store.items()) == {"keep": "me"}

    def test_skips_lines_without_equals(self, tmp_path):
        path = tmp_path / "aliases.txt"
        path.write_text("ll=ls -la\ngarbage line\n\ngs = git status\n")
        store = AliasStore()
        msg = store.load(path)
        assert msg == f"Aliases loaded from {path}"
        assert dict(store.items()) == {"ll": "ls -la", "gs": "git status"}

    def test_splits_on_first_equals_only(self, tmp_path):
        path = tmp_path / "aliases.txt"
        path.write_text("setfoo=export FOO=bar")
        store = AliasStore()
        store.load(path)
        assert store.lookup("setfoo") == "export FOO=bar"

    def test_merges_into_existing_table(self, tmp_path):
        path = tmp_path / "aliases.txt"
        path.write_text("a=from-file\nb=2\n")
        store = AliasStore({"a": "old", "c": "3"})
        store.load(path)
        assert dict(store.items()) == {"a": "from-file", "c": "3", "b": "2"}

    def test_unreadable_path_reports(self, tmp_path):
        # a directory can't be read as a file
        msg = AliasStore().load(tmp_path)
        assert msg.startswith("Failed to load aliases")


class TestRoundTrip:
    def test_load_of_persist_is_identity(self, tmp_path):
        path = tmp_path / "aliases.txt"
        table = {"ll": "ls -la", "eq": "x=y", "gs": "git status --short", "e": ""}
        AliasStore(table).persist(path)
        restored = AliasStore()
        restored.load(path)
        assert dict(restored.items()) == table
