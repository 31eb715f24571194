"""Tests for PinStore, the pinned-sessions text file."""

from __future__ import annotations

from hartoon import PinStore


class TestRead:
    def test_missing_file_is_empty(self, tmp_path):
        store = PinStore(tmp_path / "nope.txt")
        assert store.read() == []

    def test_lines_in_file_order(self, store):
        store.path.write_text("work\nblog\nnotes\n")
        assert store.read() == ["work", "blog", "notes"]

    def test_blank_lines_skipped(self, store):
        store.path.write_text("\nwork\n\n\nblog\n\n")
        assert store.read() == ["work", "blog"]

    def test_no_trailing_newline(self, store):
        store.path.write_text("work\nblog")
        assert store.read() == ["work", "blog"]

    def test_crlf_line_endings(self, store):
        store.path.write_bytes(b"work\r\nblog\r\n")
        assert store.read() == ["work", "blog"]

    def test_whitespace_kept_verbatim(self, store):
        store.path.write_text(" work\nblog \n")
        assert store.read() == [" work", "blog "]

    def test_directory_instead_of_file_is_empty(self, tmp_path):
        (tmp_path / "pins").mkdir()
        assert PinStore(tmp_path / "pins").read() == []


class TestWrite:
    def test_round_trip_preserves_order(self, store):
        names = ["notes", "work", "blog", "deploy"]
        assert store.write(names) is True
        assert store.read() == names

    def test_one_name_per_line(self, store):
        store.write(["work", "blog"])
        assert store.path.read_text() == "work\nblog\n"

    def test_overwrites_previous_contents(self, store):
        store.write(["a", "b", "c"])
        store.write(["c"])
        assert store.read() == ["c"]

    def test_empty_list_truncates(self, store):
        store.write(["work"])
        store.write([])
        assert store.path.read_text() == ""
        assert store.read() == []

    def test_creates_parent_dirs(self, tmp_path):
        store = PinStore(tmp_path / "deep" / "nested" / "pins.txt")
        assert store.write(["work"]) is True
        assert store.read() == ["work"]

    def test_duplicates_not_rejected(self, store):
        store.write(["work", "work"])
        assert store.read() == ["work", "work"]

    def test_unwritable_path_returns_false(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")
        store = PinStore(blocker / "pins.txt")
        assert store.write(["work"]) is False

    def test_special_characters_survive(self, store):
        names = ['my "quoted" session', "semi;colon", "dollar $HOME", "ünïcode"]
        store.write(names)
        assert store.read() == names


class TestRemove:
    def test_removes_every_exact_match(self, store):
        store.write(["work", "blog", "work"])
        assert store.remove("work") is True
        assert store.read() == ["blog"]

    def test_missing_name_leaves_file(self, store):
        store.write(["work"])
        assert store.remove("Work") is False
        assert store.read() == ["work"]

    def test_remove_from_missing_file(self, store):
        assert store.remove("work") is False
        assert not store.path.exists()
