"""Build :class:`TreeNode` trees from XML documents.

BeautifulSoup does the tree building. It recovers from broken markup without
complaint, so the raw bytes are parsed strictly with lxml first; a document
that fails that check is never converted. The soup is then made from lxml's
re-serialized root element, which has internal entities already expanded and
no DOCTYPE left for BeautifulSoup to trip over.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Tuple, Union

from bs4 import BeautifulSoup, CData, NavigableString, Tag
from lxml import etree

from .errors import InputUnavailableError
from .io_utils import read_bytes
from .node_model import NodeContent, TreeNode, element_children

DOCUMENT_NAME = "[document]"


def _qualified_name(tag: Tag) -> str:
    if tag.prefix:
        return f"{tag.prefix}:{tag.name}"
    return tag.name


def _attribute_pairs(tag: Tag) -> Tuple[Tuple[str, str], ...]:
    pairs: List[Tuple[str, str]] = []
    for key, value in tag.attrs.items():
        # Namespace declarations are not attributes of the element.
        if key == "xmlns" or str(key).startswith("xmlns:"):
            continue
        if isinstance(value, list):
            value = " ".join(value)
        pairs.append((str(key), str(value)))
    return tuple(pairs)


def _is_text(child: object) -> bool:
    # Comments, processing instructions and doctypes are NavigableString
    # subclasses too; only character data counts as text.
    return type(child) is NavigableString or isinstance(child, CData)


def _convert_tag(tag: Tag, name: str) -> TreeNode:
    children: List[NodeContent] = []
    for child in tag.contents:
        if isinstance(child, Tag):
            children.append(_convert_tag(child, _qualified_name(child)))
        elif _is_text(child):
            children.append(str(child))
    return TreeNode(name=name, attributes=_attribute_pairs(tag), children=tuple(children))


def _parse_strict(data: bytes, source: str) -> bytes:
    """Return the root element as UTF-8 markup with internal entities expanded."""
    parser = etree.XMLParser(resolve_entities="internal", no_network=True)
    try:
        root = etree.fromstring(data, parser)
    except etree.XMLSyntaxError as exc:
        raise InputUnavailableError(f"could not parse {source}: {exc}") from exc
    return etree.tostring(root, encoding="utf-8")


def parse_document(data: Union[bytes, str], source: str = "<string>") -> TreeNode:
    """Parse XML markup into a document node whose only element child is the root."""
    if isinstance(data, str):
        data = data.encode("utf-8")
    markup = _parse_strict(data, source)
    soup = BeautifulSoup(markup, "xml", from_encoding="utf-8")
    document = _convert_tag(soup, DOCUMENT_NAME)
    if not element_children(document):
        raise InputUnavailableError(f"no root element in {source}")
    return document


def load_document(path: Path) -> TreeNode:
    try:
        data = read_bytes(path)
    except OSError as exc:
        raise InputUnavailableError(f"could not read {path}: {exc.strerror or exc}") from exc
    return parse_document(data, source=str(path))
