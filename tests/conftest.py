from __future__ import annotations

from pathlib import Path

import pytest

SVG_NS = "http://www.w3.org/2000/svg"
XLINK_NS = "http://www.w3.org/1999/xlink"


def icon_svg(body: str = '<path d="M0 0h24v24H0z"/>', **attrs: str) -> str:
    extra = "".join(f' {k}="{v}"' for k, v in attrs.items())
    return (
        f'<svg xmlns="{SVG_NS}" xmlns:xlink="{XLINK_NS}" version="1.1" '
        f'width="24" height="24" viewBox="0 0 24 24"{extra}>{body}</svg>\n'
    )


@pytest.fixture
def project(tmp_path: Path) -> Path:
    (tmp_path / "src" / "assets" / "icons").mkdir(parents=True)
    return tmp_path


@pytest.fixture
def add_icon(project: Path):
    def _add(relative_path: str, content: str | None = None) -> Path:
        path = project / "src" / "assets" / "icons" / relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(icon_svg() if content is None else content, encoding="utf-8")
        return path

    return _add
