"""SVG optimization and attribute injection.

Raw icon markup goes through :func:`normalize` before any framework
specific emission:

1. :func:`optimize_markup` canonicalizes the document (comments,
   metadata and editor cruft removed, ``style`` properties moved to
   attributes, attributes sorted, compact serialization).
2. Accessibility and source tracking attributes are computed from the
   :class:`~svgicons.model.ComponentSpec`.
3. The attributes are injected into the root ``<svg>`` opening tag.
4. For the ``title`` strategy a ``<title>`` element becomes the first
   child of the root.

The output is still plain SVG markup.
"""

from __future__ import annotations

import logging
import re
import xml.etree.ElementTree as ET
from typing import Callable, Dict, List, Optional

from .errors import MarkupError
from .model import (
    A11Y_HIDDEN,
    A11Y_IMG,
    A11Y_PRESENTATION,
    A11Y_TITLE,
    ComponentSpec,
)

logger = logging.getLogger(__name__)

SVG_NS = "http://www.w3.org/2000/svg"
XLINK_NS = "http://www.w3.org/1999/xlink"

# ElementTree keeps prefixes in a process-wide table: importing this
# module makes every serialization in the process write ``<svg>`` and
# ``xlink:`` names for these URIs instead of ``ns0:``.
ET.register_namespace("", SVG_NS)
ET.register_namespace("xlink", XLINK_NS)

EDITOR_NAMESPACES = (
    "http://www.inkscape.org/namespaces/inkscape",
    "http://sodipodi.sourceforge.net/DTD/sodipodi-0.dtd",
    "http://ns.adobe.com/AdobeIllustrator/10.0/",
    "http://www.bohemiancoding.com/sketch/ns",
)

REMOVED_ELEMENTS = {"metadata", "title", "desc"}

# Properties that are valid as presentation attributes and can be moved
# out of a ``style`` declaration.
PRESENTATION_ATTRS = {
    "clip-path", "clip-rule", "color", "display", "fill", "fill-opacity",
    "fill-rule", "filter", "mask", "opacity", "stop-color", "stop-opacity",
    "stroke", "stroke-dasharray", "stroke-dashoffset", "stroke-linecap",
    "stroke-linejoin", "stroke-miterlimit", "stroke-opacity", "stroke-width",
    "transform", "visibility",
}

# Attributes listed first, in this order; everything else is alphabetical.
ATTR_ORDER = [
    "id", "width", "height", "x", "x1", "x2", "y", "y1", "y2",
    "cx", "cy", "r", "fill", "stroke", "marker", "d", "points",
]

PROLOG_REGEX = re.compile(r"^\s*(<\?xml[^>]*\?>\s*)?(<!DOCTYPE[^>]*>\s*)?", re.IGNORECASE)
SELF_CLOSE_SPACE_REGEX = re.compile(r"\s+/>")

# Full root element, with or without children.
SVG_TAG_REGEX = re.compile(r"<svg\b[\s\S]*</svg>|<svg\b[^>]*/>")
# Root opening tag; group 1 = attributes, group 2 = self-closing slash.
SVG_OPENING_TAG_REGEX = re.compile(r"<svg\b([^>]*?)\s*(/?)>")

READABLE_NAME_REGEX = re.compile(r"([a-z0-9])([A-Z])")


# ----------------------------------------------------------------------
# Optimization


def optimize_markup(markup: str) -> str:
    """Return a compact, canonical serialization of ``markup``.

    Raises:
        MarkupError: If ``markup`` is not well-formed XML.
    """
    text = PROLOG_REGEX.sub("", markup, count=1)
    try:
        root = ET.fromstring(text)
    except ET.ParseError as exc:
        raise MarkupError(f"Failed to parse SVG markup: {exc}") from exc

    _clean_element(root)
    result = ET.tostring(root, encoding="unicode", short_empty_elements=True)
    return SELF_CLOSE_SPACE_REGEX.sub("/>", result)


def _local_name(qname: str) -> str:
    return qname.rsplit("}", 1)[-1]


def _namespace(qname: str) -> str:
    if qname.startswith("{"):
        return qname[1:].split("}", 1)[0]
    return ""


def _clean_element(elem: ET.Element) -> None:
    for child in list(elem):
        if not isinstance(child.tag, str):
            elem.remove(child)
            continue
        if _namespace(child.tag) in EDITOR_NAMESPACES or _local_name(child.tag) in REMOVED_ELEMENTS:
            elem.remove(child)
            continue
        _clean_element(child)

    if elem.text is not None and not elem.text.strip():
        elem.text = None
    for child in elem:
        if child.tail is not None and not child.tail.strip():
            child.tail = None

    _convert_style_to_attrs(elem)
    _sort_attributes(elem)


def _convert_style_to_attrs(elem: ET.Element) -> None:
    style = elem.attrib.get("style")
    if not style:
        return
    remaining: List[str] = []
    for declaration in style.split(";"):
        if ":" not in declaration:
            continue
        prop, value = (part.strip() for part in declaration.split(":", 1))
        if prop in PRESENTATION_ATTRS and "!important" not in value and prop not in elem.attrib:
            elem.set(prop, value)
        else:
            remaining.append(f"{prop}:{value}")
    if remaining:
        elem.set("style", ";".join(remaining))
    else:
        del elem.attrib["style"]


def _attr_sort_key(qname: str):
    ns = _namespace(qname)
    name = _local_name(qname)
    if ns in EDITOR_NAMESPACES:
        return (3, 0, name)
    if name in ATTR_ORDER and not ns:
        return (0, ATTR_ORDER.index(name), name)
    return (1 if not ns else 2, 0, name)


def _sort_attributes(elem: ET.Element) -> None:
    items = [
        (k, v) for k, v in elem.attrib.items()
        if _namespace(k) not in EDITOR_NAMESPACES
    ]
    elem.attrib.clear()
    for key, value in sorted(items, key=lambda kv: _attr_sort_key(kv[0])):
        elem.set(key, value)


# ----------------------------------------------------------------------
# Accessibility attributes


def to_readable_name(component_name: str) -> str:
    """Convert ``ArrowUpRight`` into ``Arrow Up Right``."""
    return READABLE_NAME_REGEX.sub(r"\1 \2", component_name)


def get_a11y_attrs(a11y: Optional[str], component_name: str) -> Dict[str, str]:
    if a11y == A11Y_HIDDEN:
        return {"aria-hidden": "true"}
    if a11y == A11Y_IMG:
        return {"role": "img", "aria-label": to_readable_name(component_name)}
    if a11y == A11Y_PRESENTATION:
        return {"role": "presentation"}
    return {}


def get_extra_attrs(spec: ComponentSpec) -> Dict[str, str]:
    """Return all synthesized root attributes for ``spec``, in order."""
    attrs = get_a11y_attrs(spec.a11y, spec.component_name)
    if spec.track_source and spec.icon_name:
        attrs["data-icon"] = spec.icon_name
    return attrs


# ----------------------------------------------------------------------
# Root element splicing


def _escape_attr(value: str) -> str:
    return (value
            .replace("&", "&amp;")
            .replace("<", "&lt;")
            .replace('"', "&quot;"))


def _escape_text(value: str) -> str:
    return value.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


def _root_match(markup: str) -> re.Match:
    match = SVG_OPENING_TAG_REGEX.search(markup)
    if match is None:
        raise MarkupError("No <svg> root element found in markup")
    return match


def append_to_root_tag(markup: str, fragment: str) -> str:
    """Append raw ``fragment`` to the root opening tag's attribute list."""
    if not fragment:
        return markup
    match = _root_match(markup)
    attrs, slash = match.group(1), match.group(2)
    replacement = f"<svg{attrs} {fragment}{slash}>"
    return f"{markup[:match.start()]}{replacement}{markup[match.end():]}"


def inject_svg_attrs(markup: str, attrs: Dict[str, str]) -> str:
    """Add ``attrs`` to the root ``<svg>`` opening tag."""
    fragment = " ".join(f'{k}="{_escape_attr(v)}"' for k, v in attrs.items())
    return append_to_root_tag(markup, fragment)


def inject_svg_title(markup: str, title: str) -> str:
    """Insert ``<title>`` as the first child of the root element."""
    match = _root_match(markup)
    title_elem = f"<title>{_escape_text(title)}</title>"
    attrs, slash = match.group(1), match.group(2)
    if slash:
        # Childless root: expand ``<svg .../>`` into an open/close pair.
        replacement = f"<svg{attrs}>{title_elem}</svg>"
        return f"{markup[:match.start()]}{replacement}{markup[match.end():]}"
    return f"{markup[:match.end()]}{title_elem}{markup[match.end():]}"


def find_svg_markup(text: str) -> Optional[str]:
    """Return the root ``<svg>`` element found in ``text``, if any."""
    match = SVG_TAG_REGEX.search(text)
    return match.group(0) if match else None


# ----------------------------------------------------------------------
# Pipeline


def normalize(
    markup: str,
    spec: ComponentSpec,
    optimizer: Callable[[str], str] = optimize_markup,
) -> str:
    """Optimize ``markup`` and inject the attributes ``spec`` asks for."""
    result = optimizer(markup)
    extra = get_extra_attrs(spec)
    if extra:
        result = inject_svg_attrs(result, extra)
    if spec.a11y == A11Y_TITLE:
        result = inject_svg_title(result, to_readable_name(spec.component_name))
    logger.debug("Normalized %s (%d extra attributes)", spec.label, len(extra))
    return result
