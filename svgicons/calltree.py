"""Convert SVG markup into nested constructor calls.

Frameworks without an HTML-like template syntax build elements with a
hyperscript style constructor::

    h("svg", { viewBox: "0 0 24 24", ...props }, [
        h("path", { d: "M1 1h22" }),
    ])

:func:`svg_to_calls` parses the markup with :mod:`svgicons.markup`,
merges the synthesized root attributes and the props spread into the
root node, optionally prepends a ``<title>`` child, and emits the call
expression.  Keys containing ``-`` or ``:`` are quoted; values are
emitted as double-quoted string literals.
"""

from __future__ import annotations

import json
from typing import Dict, List, Optional

from .markup import parse_element
from .model import CallNode

DEFAULT_CTOR = "h"
PROPS_SPREAD = "...props"


def _quote(value: str) -> str:
    return json.dumps(value, ensure_ascii=False)


def _format_key(key: str) -> str:
    if "-" in key or ":" in key:
        return _quote(key)
    return key


def format_attrs_object(attrs: Dict[str, str], spread: Optional[str] = None) -> str:
    """Format attributes as an object literal, ``spread`` last."""
    parts: List[str] = [f"{_format_key(k)}: {_quote(v)}" for k, v in attrs.items()]
    if spread:
        parts.append(spread)
    if not parts:
        return "{}"
    return "{ " + ", ".join(parts) + " }"


def to_call_tree(markup: str) -> CallNode:
    """Parse ``markup`` into the element tree.

    Raises:
        MarkupError: If ``markup`` has no recognizable opening tag.
    """
    return parse_element(markup)


def emit(node: CallNode, ctor: str = DEFAULT_CTOR, spread: Optional[str] = None) -> str:
    """Emit ``node`` and its descendants as a call expression.

    ``spread`` is only applied to ``node`` itself, never to children.
    """
    attrs = format_attrs_object(node.attributes, spread)
    if node.text is not None and not node.children:
        return f"{ctor}({_quote(node.tag)}, {attrs}, {_quote(node.text)})"
    if not node.children:
        return f"{ctor}({_quote(node.tag)}, {attrs})"
    children = ", ".join(emit(child, ctor) for child in node.children)
    return f"{ctor}({_quote(node.tag)}, {attrs}, [{children}])"


def inject_root_attrs(root: CallNode, extra_attrs: Optional[Dict[str, str]]) -> CallNode:
    """Merge ``extra_attrs`` after the root's own attributes."""
    if extra_attrs:
        merged = dict(root.attributes)
        merged.update(extra_attrs)
        root.attributes = merged
    return root


def inject_title(root: CallNode, title: str) -> CallNode:
    """Make a ``<title>`` node the first child of ``root``.

    A root without children gains a children list holding only the
    title; otherwise the title is prepended.
    """
    title_node = CallNode(tag="title", text=title)
    if root.text is not None and not root.children:
        # Text content and element children cannot be mixed.
        root.text = None
    root.children = [title_node] + list(root.children)
    root.self_closing = False
    return root


def svg_to_calls(
    markup: str,
    extra_attrs: Optional[Dict[str, str]] = None,
    title: Optional[str] = None,
    ctor: str = DEFAULT_CTOR,
    spread: Optional[str] = PROPS_SPREAD,
) -> str:
    """Convert SVG ``markup`` into a call expression.

    Root attributes are ordered: original attributes, then
    ``extra_attrs``, then ``spread``.

    Raises:
        MarkupError: If ``markup`` has no recognizable opening tag.
    """
    root = to_call_tree(markup)
    inject_root_attrs(root, extra_attrs)
    if title:
        inject_title(root, title)
    return emit(root, ctor=ctor, spread=spread)
