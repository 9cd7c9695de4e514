import pytest

from drills.dirlist import DirectoryError, DirectoryIterator, main


def test_nonexisting_directory(tmp_path):
    with pytest.raises(DirectoryError):
        DirectoryIterator(str(tmp_path / "no-such-directory"))


def test_empty_directory(tmp_path):
    with DirectoryIterator(str(tmp_path)) as entries:
        names = sorted(entries)
    assert names == [".", ".."]


def test_nonempty_directory(tmp_path):
    (tmp_path / "foo.txt").write_text("The Foo Diaries\n")
    (tmp_path / "bar.png").write_text("<PNG>\n")
    (tmp_path / "crab.rs").write_text("//! Crab\n")
    with DirectoryIterator(str(tmp_path)) as entries:
        names = sorted(entries)
    assert names == [".", "..", "bar.png", "crab.rs", "foo.txt"]


def test_path_object_accepted(tmp_path):
    (tmp_path / "one").write_text("1")
    with DirectoryIterator(tmp_path) as entries:
        names = sorted(entries)
    assert names == [".", "..", "one"]


def test_dots_come_first(tmp_path):
    (tmp_path / "a").write_text("a")
    with DirectoryIterator(str(tmp_path)) as entries:
        first_two = [next(entries), next(entries)]
        rest = list(entries)
    assert first_two == [".", ".."]
    assert rest == ["a"]


def test_bytes_path_yields_bytes(tmp_path):
    (tmp_path / "x").write_text("x")
    with DirectoryIterator(bytes(tmp_path)) as entries:
        names = sorted(entries)
    assert names == [b".", b"..", b"x"]


def test_nul_in_path_is_invalid():
    with pytest.raises(DirectoryError, match="Invalid path"):
        DirectoryIterator("bad\0path")


def test_main_lists_directory(tmp_path, capsys):
    (tmp_path / "listed.txt").write_text("x")
    assert main([str(tmp_path)]) == 0
    assert "listed.txt" in capsys.readouterr().out


def test_main_reports_missing_directory(tmp_path, capsys):
    assert main([str(tmp_path / "missing")]) == 1
    assert "Could not open" in capsys.readouterr().err