from __future__ import annotations

from pathlib import Path


def read_bytes_if_exists(path: Path) -> bytes | None:
    try:
        return path.read_bytes()
    except FileNotFoundError:
        return None


def write_if_changed(path: Path, content: str) -> bool:
    """
    Each write can trigger dev server reloads, so only write when the content
    differs from what is already on disk. Returns True when the file was written.

    Compares UTF-8 bytes. A missing file counts as changed; any other read or
    write failure propagates.
    """
    data = content.encode("utf-8")
    if read_bytes_if_exists(path) == data:
        return False

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)
    return True
