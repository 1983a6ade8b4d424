"""Tests for file_demos module."""

from pathlib import Path

from perf_demo.file_demos import (
    bad_file_writing_example,
    clear_files,
    ensure_directory,
    good_file_writing_example,
)
from perf_demo.file_writers import LeakyFileWriter


def test_ensure_directory_is_idempotent(tmp_path):
    """Test that ensuring a directory twice is harmless."""
    directory = tmp_path / "goodfile"

    ensure_directory(directory)
    ensure_directory(directory)

    assert directory.is_dir()


def test_good_file_writing_example(tmp_path, capsys):
    """Test that the good demo writes one file per iteration."""
    good_dir = tmp_path / "goodfile"

    good_file_writing_example(good_dir, iterations=30)

    names = sorted(p.name for p in good_dir.iterdir())
    assert names == sorted(f"{i}example.txt" for i in range(30))
    assert all(p.read_text() == "I'm a good file writer!\n" for p in good_dir.iterdir())

    out = capsys.readouterr().out
    assert "Starting Good File Writing" in out
    assert "Completed 30 file writes" in out


def test_good_file_writing_twice(tmp_path):
    """Test that the good demo can run twice in a row."""
    good_dir = tmp_path / "goodfile"

    good_file_writing_example(good_dir, iterations=20)
    good_file_writing_example(good_dir, iterations=20)

    assert len(list(good_dir.iterdir())) == 20


def test_bad_file_writing_example(tmp_path):
    """Test that the bad demo writes one file per iteration and leaks handles."""
    bad_dir = tmp_path / "badfile"
    writer = LeakyFileWriter(bad_dir)

    bad_file_writing_example(writer, iterations=30)

    names = sorted(p.name for p in bad_dir.iterdir())
    assert names == sorted(f"{i}-example.txt" for i in range(30))
    assert all(p.read_text() == "I'm a bad file writer\n" for p in bad_dir.iterdir())
    assert writer.open_handle_count == 30

    for handle in writer.leaked_handles:
        handle.close()


def test_bad_file_handles_accumulate_across_runs(tmp_path):
    """Test that a second bad run adds to the leaked handles."""
    writer = LeakyFileWriter(tmp_path / "badfile")

    bad_file_writing_example(writer, iterations=10)
    bad_file_writing_example(writer, iterations=10)

    assert writer.open_handle_count == 20
    assert len(list((tmp_path / "badfile").iterdir())) == 10

    for handle in writer.leaked_handles:
        handle.close()


def test_clear_files(tmp_path):
    """Test that both demo directories are removed."""
    good_dir = tmp_path / "goodfile"
    bad_dir = tmp_path / "badfile"
    good_file_writing_example(good_dir, iterations=5)
    bad_dir.mkdir()
    (bad_dir / "0-example.txt").write_text("x")

    clear_files(good_dir, bad_dir)

    assert not good_dir.exists()
    assert not bad_dir.exists()


def test_clear_files_when_missing(tmp_path):
    """Test that clearing missing directories is a no-op, even twice."""
    good_dir = tmp_path / "goodfile"
    bad_dir = tmp_path / "badfile"

    clear_files(good_dir, bad_dir)
    clear_files(good_dir, bad_dir)

    assert list(tmp_path.iterdir()) == []


def test_clear_files_accepts_strings(tmp_path, monkeypatch):
    """Test clearing the default relative directories."""
    monkeypatch.chdir(tmp_path)
    Path("goodfile").mkdir()
    Path("badfile").mkdir()

    clear_files("goodfile", "badfile")

    assert list(tmp_path.iterdir()) == []


def test_good_file_writing_default_count(tmp_path):
    """Test the good demo at its default size of 10,000 files."""
    good_dir = tmp_path / "goodfile"

    good_file_writing_example(good_dir)

    names = {p.name for p in good_dir.iterdir()}
    assert names == {f"{i}example.txt" for i in range(10000)}
    assert (good_dir / "0example.txt").read_text() == "I'm a good file writer!\n"
    assert (good_dir / "9999example.txt").read_text() == "I'm a good file writer!\n"
