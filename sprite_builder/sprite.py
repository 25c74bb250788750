from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from copy import deepcopy
from pathlib import Path
from typing import Sequence

from lxml import etree

from .models import IconEntry

SVG_NS = "http://www.w3.org/2000/svg"
XLINK_NS = "http://www.w3.org/1999/xlink"

FRAGMENT_TAG = "symbol"
# Namespace declarations (xmlns, xmlns:xlink) are not attributes in lxml; they are
# dropped by unqualifying SVG tags and cleaning up unused declarations instead.
STRIPPED_ATTRIBUTES = ("version", "width", "height")

SPRITE_HEADER = [
    "<?xml version='1.0' encoding='UTF-8'?>",
    f"<svg xmlns='{SVG_NS}' xmlns:xlink='{XLINK_NS}' width='0' height='0'>",
    # <defs> because symbols are definitions, not rendered content.
    "<defs>",
]
SPRITE_FOOTER = ["</defs>", "</svg>"]


class SpriteBuildError(RuntimeError):
    pass


class MissingRootElementError(SpriteBuildError):
    pass


class IconParseError(SpriteBuildError):
    pass


def _parser() -> etree.XMLParser:
    # Parsers are not safe to share between threads.
    # Internal DTD entities (Illustrator exports) are expanded; the sprite has no DTD.
    return etree.XMLParser(remove_blank_text=False, resolve_entities="internal", no_network=True)


def find_svg_element(data: str | bytes, *, source: str = "<string>") -> etree._Element:
    if isinstance(data, str):
        data = data.encode("utf-8")
    if not data.strip():
        raise MissingRootElementError(f"No SVG element found in {source}")
    try:
        root = etree.fromstring(data, parser=_parser())
    except etree.XMLSyntaxError as e:
        raise IconParseError(f"Could not parse {source}: {e}") from e

    svg = next(root.iter("{*}svg"), None)
    if svg is None:
        raise MissingRootElementError(f"No SVG element found in {source}")
    return svg


def _unqualify_svg(element: etree._Element) -> None:
    for el in element.iter():
        if not isinstance(el.tag, str):
            continue
        if etree.QName(el).namespace == SVG_NS:
            el.tag = etree.QName(el).localname
    etree.cleanup_namespaces(element)


def to_symbol(svg: etree._Element, name: str) -> etree._Element:
    """Copy an icon's <svg> element into a new <symbol id=name>; the input is left untouched."""
    # A fresh element rather than a copy of the root, which would drag the
    # document's top-level comments and PIs along with it.
    symbol = etree.Element(FRAGMENT_TAG, nsmap={p: uri for p, uri in svg.nsmap.items() if uri != SVG_NS})
    for key, value in svg.attrib.items():
        if key not in STRIPPED_ATTRIBUTES:
            symbol.set(key, value)
    symbol.set("id", name)
    symbol.text = svg.text
    for child in svg:
        symbol.append(deepcopy(child))
    _unqualify_svg(symbol)
    return symbol


def render_symbol(data: str | bytes, name: str, *, source: str = "<string>") -> str:
    symbol = to_symbol(find_svg_element(data, source=source), name)
    return etree.tostring(symbol, encoding="unicode", with_tail=False).strip()


def read_symbol(entry: IconEntry, input_dir: Path) -> str:
    path = entry.source_path(input_dir)
    # Bytes, so lxml honours the encoding in the XML declaration.
    return render_symbol(path.read_bytes(), entry.name, source=entry.relative_path)


def assemble_sprite(symbols: Sequence[str]) -> str:
    return "\n".join([*SPRITE_HEADER, *symbols, *SPRITE_FOOTER])


def generate_svg_sprite(entries: Sequence[IconEntry], input_dir: Path, *, max_workers: int | None = None) -> str:
    """
    Outputs an SVG string with all the icons as symbols.

    Files are read and transformed in parallel; ``Executor.map`` yields results in
    submission order so symbols keep the discovery order.
    """
    if not entries:
        return assemble_sprite([])
    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        symbols = list(pool.map(lambda entry: read_symbol(entry, input_dir), entries))
    return assemble_sprite(symbols)
