"""Small structural parser for serialized SVG markup.

This is not a general XML parser.  It recognizes the shape produced by
:func:`svgicons.svg.optimize_markup`: one root element with
``key="value"`` attributes and nested elements that are either
self-closing or paired.  Leaf elements may hold plain text (``<title>``).

The parser builds a :class:`~svgicons.model.CallNode` tree once; every
emitter (:mod:`svgicons.calltree`, :mod:`svgicons.jsx`) walks that
tree instead of re-deriving structure from text.
"""

from __future__ import annotations

import html
import logging
import re
from typing import Dict, List

from .errors import MarkupError
from .model import CallNode

logger = logging.getLogger(__name__)

TAG_NAME = r"[A-Za-z][\w:.-]*"

ATTR_REGEX = re.compile(r'([A-Za-z_:][\w:.-]*)="([^"]*)"')
OPENING_TAG_REGEX = re.compile(rf"^<({TAG_NAME})([^>]*)>")
ELEMENT_MATCH_REGEX = re.compile(rf"^<({TAG_NAME})([^>]*?)(/)?>")


def parse_attributes(attr_string: str) -> Dict[str, str]:
    """Parse repeated ``key="value"`` pairs, preserving order.

    Values are unescaped, so ``&amp;`` comes back as ``&``.
    """
    return {m.group(1): html.unescape(m.group(2)) for m in ATTR_REGEX.finditer(attr_string)}


def find_matching_close_tag(content: str, tag: str) -> int:
    """Return the index of the ``</tag>`` that closes the first tag in ``content``.

    Scanning starts after the first opening tag.  Nested opening tags of
    the same name increase the depth unless they are self-closing.
    Returns -1 when no matching close tag exists.
    """
    open_regex = re.compile(rf"<{re.escape(tag)}(?=[\s/>])")
    close_tag = f"</{tag}>"

    first_end = content.find(">")
    pos = 0 if first_end == -1 else first_end + 1
    depth = 0
    while pos < len(content):
        close_index = content.find(close_tag, pos)
        if close_index == -1:
            return -1
        open_match = open_regex.search(content, pos)

        if open_match is None or close_index < open_match.start():
            if depth == 0:
                return close_index
            depth -= 1
            pos = close_index + len(close_tag)
            continue

        tag_end = content.find(">", open_match.start())
        if tag_end == -1:
            return -1
        if content[tag_end - 1] != "/":
            depth += 1
        pos = tag_end + 1
    return -1


def parse_element(content: str) -> CallNode:
    """Parse the element at the start of ``content`` into a tree.

    Raises:
        MarkupError: If no opening tag can be matched.
    """
    content = content.strip()
    match = OPENING_TAG_REGEX.match(content)
    if match is None:
        raise MarkupError(f"No opening tag found in markup: {content[:40]!r}")

    full_match = match.group(0)
    tag = match.group(1)
    attr_string = match.group(2)
    attrs = parse_attributes(attr_string)

    close_tag = f"</{tag}>"
    self_closing = (
        attr_string.rstrip().endswith("/")
        or content == full_match
        or re.match(rf"^<{re.escape(tag)}[^>]*/>", content) is not None
    )
    if self_closing or close_tag not in content:
        return CallNode(tag=tag, attributes=attrs, self_closing=True)

    close_index = find_matching_close_tag(content, tag)
    if close_index == -1:
        close_index = content.rfind(close_tag)

    body = content[len(full_match):close_index]
    children = parse_children(body)
    node = CallNode(tag=tag, attributes=attrs, children=children)

    text = body.strip()
    if not children and text and "<" not in text:
        node.text = html.unescape(text)
    return node


def parse_children(content: str) -> List[CallNode]:
    """Parse a sequence of sibling elements.

    Parsing stops at the first piece of content that is not an element
    (text or comments).

    Raises:
        MarkupError: If a paired element has no matching close tag.
    """
    children: List[CallNode] = []
    remaining = content.strip()

    while remaining:
        match = ELEMENT_MATCH_REGEX.match(remaining)
        if match is None:
            logger.debug("Stopped parsing children at %r", remaining[:20])
            break

        tag = match.group(1)
        if match.group(3) == "/":
            children.append(
                CallNode(tag=tag, attributes=parse_attributes(match.group(2)), self_closing=True)
            )
            remaining = remaining[match.end():].strip()
            continue

        close_tag = f"</{tag}>"
        close_index = find_matching_close_tag(remaining, tag)
        if close_index == -1:
            raise MarkupError(f"Unclosed <{tag}> element in markup")

        end = close_index + len(close_tag)
        children.append(parse_element(remaining[:end]))
        remaining = remaining[end:].strip()

    return children
