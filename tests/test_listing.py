"""
Tests for ls.
"""

import os

import pytest

from ZeroShell import listing
from ZeroShell.listing import builtin_ls, format_time, quote_name, sort_key


@pytest.fixture
def listing_dir(session, monkeypatch):
    cwd = session.current_directory
    for name in ["a.txt", "B.txt", ".hidden"]:
        with open(os.path.join(cwd, name), "w") as f:
            f.write("x")
    os.mkdir(os.path.join(cwd, "sub"))
    script = os.path.join(cwd, "run.sh")
    with open(script, "w") as f:
        f.write("#!/bin/sh\n")
    os.chmod(script, 0o755)
    monkeypatch.setenv("COLUMNS", "200")
    return cwd


class TestHelpers:
    def test_sort_key_ignores_case_and_punctuation(self):
        names = ["b.txt", "_A.txt", "C", ".hidden"]
        assert sorted(names, key=sort_key) == ["_A.txt", "b.txt", "C", ".hidden"]

    @pytest.mark.parametrize("name, shown", [
        ("plain.txt", "plain.txt"),
        ("with space", "'with space'"),
        ("it's", '"it\'s"'),
        ("a$b", "'a$b'"),
    ])
    def test_quote_name(self, name, shown):
        assert quote_name(name) == shown

    def test_format_time_old_file_shows_year(self):
        # 2001-09-09, never the current year
        assert "2001" in format_time(1_000_000_000)

    def test_owner_names_without_user_database(self, monkeypatch):
        monkeypatch.setattr(listing, "pwd", None)
        st = os.stat(".")
        assert listing.owner_names(st) == (str(st.st_uid), str(st.st_gid))


class TestLs:
    def test_lists_current_directory(self, session, listing_dir, capsys):
        assert builtin_ls([], session) == 0
        assert capsys.readouterr().out.split() == ["a.txt", "B.txt", "run.sh", "sub"]

    def test_all_shows_hidden_and_dots(self, session, listing_dir, capsys):
        builtin_ls(["-a"], session)
        names = capsys.readouterr().out.split()
        assert names[:2] == [".", ".."]
        assert ".hidden" in names

    def test_classify(self, session, listing_dir, capsys):
        builtin_ls(["-F"], session)
        names = capsys.readouterr().out.split()
        assert "sub/" in names
        assert "run.sh*" in names
        assert "a.txt" in names

    def test_long_format(self, session, listing_dir, capsys):
        assert builtin_ls(["-l"], session) == 0
        lines = capsys.readouterr().out.splitlines()
        assert lines[0].startswith("total ")
        assert len(lines) == 5
        assert lines[-1].startswith("d")
        assert lines[-1].endswith("sub")
        assert lines[1].startswith("-rw")

    def test_combined_flags(self, session, listing_dir, capsys):
        builtin_ls(["-laF"], session)
        out = capsys.readouterr().out
        assert ".hidden" in out
        assert "sub/" in out

    def test_symlink_in_long_format(self, session, listing_dir, capsys):
        os.symlink("a.txt", os.path.join(listing_dir, "link"))
        builtin_ls(["-l"], session)
        assert "link -> a.txt" in capsys.readouterr().out

    def test_invalid_option(self, session, capsys):
        assert builtin_ls(["-z"], session) == 2
        assert "ls: invalid option -- 'z'" in capsys.readouterr().err

    def test_missing_path(self, session, capsys):
        assert builtin_ls(["nope"], session) == 1
        captured = capsys.readouterr()
        assert "cannot access 'nope'" in captured.err
        assert captured.out == ""

    def test_several_targets_get_headers(self, session, listing_dir, capsys):
        builtin_ls(["sub", "."], session)
        out = capsys.readouterr().out
        assert ".:\n" in out
        assert "sub:\n" in out

    def test_file_argument(self, session, listing_dir, capsys):
        assert builtin_ls(["a.txt"], session) == 0
        assert capsys.readouterr().out.split() == ["a.txt"]
