from __future__ import annotations

from pathlib import Path

import pytest

from sprite_builder.files import read_bytes_if_exists, write_if_changed


def test_missing_file_is_written(tmp_path: Path):
    target = tmp_path / "out" / "nested" / "names.ts"

    assert write_if_changed(target, "hello\n") is True
    assert target.read_text(encoding="utf-8") == "hello\n"


def test_identical_content_is_not_rewritten(tmp_path: Path):
    target = tmp_path / "sprite.svg"
    target.write_text("same", encoding="utf-8")
    before = target.stat().st_mtime_ns

    assert write_if_changed(target, "same") is False
    assert target.stat().st_mtime_ns == before


def test_different_content_overwrites(tmp_path: Path):
    target = tmp_path / "sprite.svg"
    target.write_text("old", encoding="utf-8")

    assert write_if_changed(target, "new") is True
    assert target.read_text(encoding="utf-8") == "new"


def test_line_endings_are_compared_exactly(tmp_path: Path):
    target = tmp_path / "names.ts"
    target.write_bytes(b"a\r\nb\r\n")

    assert write_if_changed(target, "a\nb\n") is True
    assert target.read_bytes() == b"a\nb\n"


def test_other_read_failures_propagate(tmp_path: Path):
    target = tmp_path / "is-a-dir"
    target.mkdir()

    with pytest.raises(OSError):
        write_if_changed(target, "content")


def test_read_bytes_if_exists(tmp_path: Path):
    assert read_bytes_if_exists(tmp_path / "missing") is None


def test_existing_non_utf8_file_is_replaced(tmp_path: Path):
    target = tmp_path / "names.ts"
    target.write_bytes(b"\xff\xfe garbage")

    assert write_if_changed(target, "fresh\n") is True
    assert target.read_bytes() == b"fresh\n"


def test_write_failure_propagates(tmp_path: Path, monkeypatch):
    def refuse(self, data):
        raise PermissionError(13, "Permission denied", str(self))

    monkeypatch.setattr(Path, "write_bytes", refuse)

    with pytest.raises(PermissionError):
        write_if_changed(tmp_path / "sprite.svg", "content")
