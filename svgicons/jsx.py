"""Render the SVG element tree as JSX.

React and Preact expect DOM property names rather than SVG attribute
names, so kebab-case and namespaced attributes are converted to
camelCase (``stroke-width`` -> ``strokeWidth``, ``xlink:href`` ->
``xlinkHref``).  ``aria-*`` and ``data-*`` attributes are valid JSX as
written and keep their names.  Purely numeric values become numeric
expressions (``strokeWidth={2}``) and ``style`` strings become object
literals.

Solid, Qwik and Svelte keep SVG attribute names, so they render with
``camel_case=False``.  Values and text holding characters JSX would
misread are emitted as string expressions in both modes.
"""

from __future__ import annotations

import json
import re
from typing import Dict, List, Optional

from .model import CallNode

NUMERIC_REGEX = re.compile(r"^-?\d+(\.\d+)?$")
CAMEL_REGEX = re.compile(r"[-:]([A-Za-z])")

SPECIAL_NAMES = {
    "class": "className",
    "for": "htmlFor",
    "tabindex": "tabIndex",
}


def to_jsx_attr_name(name: str) -> str:
    if name in SPECIAL_NAMES:
        return SPECIAL_NAMES[name]
    if name.startswith(("aria-", "data-")):
        return name
    return CAMEL_REGEX.sub(lambda m: m.group(1).upper(), name)


def _style_object(style: str) -> str:
    parts: List[str] = []
    for declaration in style.split(";"):
        if ":" not in declaration:
            continue
        prop, value = (p.strip() for p in declaration.split(":", 1))
        key = CAMEL_REGEX.sub(lambda m: m.group(1).upper(), prop)
        if NUMERIC_REGEX.match(value):
            parts.append(f"{key}: {value}")
        else:
            parts.append(f"{key}: {json.dumps(value, ensure_ascii=False)}")
    return "{{ " + ", ".join(parts) + " }}"


def to_jsx_attr(name: str, value: str) -> str:
    jsx_name = to_jsx_attr_name(name)
    if name == "style":
        return f"{jsx_name}={_style_object(value)}"
    if NUMERIC_REGEX.match(value) and not name.startswith(("aria-", "data-")):
        return f"{jsx_name}={{{value}}}"
    return f"{jsx_name}={_jsx_string(value)}"


def render_jsx(
    node: CallNode,
    root_props: Optional[List[str]] = None,
    camel_case: bool = True,
) -> str:
    """Render ``node`` as a single-line JSX expression.

    ``root_props`` are raw JSX attribute fragments (``ref={ref}``,
    ``{...props}``) appended after the node's own attributes.  They are
    applied to ``node`` only.
    """
    attrs = _render_attrs(node.attributes, camel_case)
    attrs.extend(root_props or [])
    open_tag = node.tag + "".join(f" {a}" for a in attrs)

    if node.text is not None and not node.children:
        return f"<{open_tag}>{_jsx_text(node.text)}</{node.tag}>"
    if not node.children:
        return f"<{open_tag} />"
    children = "".join(render_jsx(child, camel_case=camel_case) for child in node.children)
    return f"<{open_tag}>{children}</{node.tag}>"


def _jsx_string(value: str) -> str:
    if any(c in value for c in '"&{}'):
        return "{" + json.dumps(value, ensure_ascii=False) + "}"
    return f'"{value}"'


def _jsx_text(text: str) -> str:
    if any(c in text for c in "{}<>&"):
        return "{" + json.dumps(text, ensure_ascii=False) + "}"
    return text


def _render_attrs(attributes: Dict[str, str], camel_case: bool) -> List[str]:
    if camel_case:
        return [to_jsx_attr(k, v) for k, v in attributes.items()]
    return [f"{k}={_jsx_string(v)}" for k, v in attributes.items()]
