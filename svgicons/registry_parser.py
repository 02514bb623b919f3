"""Locate the icon collection inside a registry source file.

A registry file is ordinary TypeScript/TSX that exports one object
literal, by default named ``Icons``::

    export const Icons = {
      Check: (props) => (<svg ... />),
      Home: (props) => (<svg ... />),
    } as const satisfies Record<string, Icon>;

:func:`parse_registry` returns the name and exact text span of every
entry so that :mod:`svgicons.editor` can splice the text without
reformatting anything else in the file.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from .model import RegistryEntry, RegistryFile
from .ts_backend import TsBackend

logger = logging.getLogger(__name__)

DEFAULT_COLLECTION = "Icons"


def parse_registry(
    source_text: str,
    collection: str = DEFAULT_COLLECTION,
    language: str = "tsx",
) -> RegistryFile:
    """Parse ``source_text`` and return the entries of ``collection``.

    Only properties keyed by a plain identifier are reported, including
    shorthand properties (``{ Check, Home }``).  Spread elements,
    string or computed keys and methods are skipped.

    If no exported object literal named ``collection`` exists the
    result has no entries and both collection offsets are ``0``.

    Raises:
        RegistryParseError: If ``source_text`` has syntax errors.
    """
    backend = TsBackend(language)
    root = backend.parse(source_text)

    literal = _find_collection_literal(backend, root, collection)
    if literal is None:
        logger.debug("Collection '%s' not found", collection)
        return RegistryFile(source_text=source_text)

    start, end = backend.span(literal)
    entries: List[RegistryEntry] = []
    for prop in literal.named_children:
        name = _property_name(backend, prop)
        if name is None:
            continue
        prop_start, prop_end = backend.span(prop)
        entries.append(RegistryEntry(name=name, start=prop_start, end=prop_end))

    logger.debug("Collection '%s' has %d entries", collection, len(entries))
    return RegistryFile(
        source_text=source_text,
        entries=entries,
        collection_start=start + 1,
        collection_end=end - 1,
    )


def get_existing_names(source_text: str, collection: str = DEFAULT_COLLECTION) -> List[str]:
    """Return entry names of ``collection`` in appearance order."""
    return parse_registry(source_text, collection).names()


def _find_collection_literal(backend: TsBackend, root, collection: str):
    for declarator in backend.iter_exported_declarators(root):
        name = declarator.child_by_field_name("name")
        if name is None or name.type != "identifier":
            continue
        if backend.node_text(name) != collection:
            continue
        value = backend.unwrap(declarator.child_by_field_name("value"))
        if value is not None and value.type == "object":
            return value
    return None


def _property_name(backend: TsBackend, prop) -> Optional[str]:
    if prop.type == "shorthand_property_identifier":
        return backend.node_text(prop)
    if prop.type == "pair":
        key = prop.child_by_field_name("key")
        if key is not None and key.type == "property_identifier":
            return backend.node_text(key)
    return None
