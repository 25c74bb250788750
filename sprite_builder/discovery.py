from __future__ import annotations

from pathlib import Path

from .models import IconEntry


def _is_hidden(parts: tuple[str, ...]) -> bool:
    return any(part.startswith(".") for part in parts)


def discover_icons(input_dir: Path, *, extension: str = ".svg") -> list[IconEntry]:
    """
    Return every ``*<extension>`` file under ``input_dir`` (recursively), ordered by
    plain string comparison of the "/"-separated relative path.

    Dot-files and anything inside a dot-directory are skipped. A missing
    ``input_dir`` yields an empty list.
    """
    if not input_dir.is_dir():
        return []

    relative_paths: list[str] = []
    for path in input_dir.rglob(f"*{extension}"):
        rel = path.relative_to(input_dir)
        if _is_hidden(rel.parts) or not path.is_file():
            continue
        # rglob may match case-insensitively on some platforms.
        if not rel.name.endswith(extension):
            continue
        relative_paths.append(rel.as_posix())

    return [IconEntry.from_relative_path(p, extension=extension) for p in sorted(relative_paths)]
