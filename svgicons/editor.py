"""Formatting-preserving edits of the registry collection.

Every function takes the current source text and returns new source
text.  Each call parses the text again with
:func:`svgicons.registry_parser.parse_registry`; no parse result is
reused across edits, so a sequence of edits is simply a left fold::

    text = insert_icon_alphabetically(text, "Home", home_src)
    text = insert_icon_alphabetically(text, "Check", check_src)

The editor keeps alphabetical order only by choosing insertion points;
it never moves existing entries.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Tuple

from .errors import IconNotFoundError, RegistryParseError
from .registry_parser import DEFAULT_COLLECTION, parse_registry

logger = logging.getLogger(__name__)

INDENT = "  "


def collation_key(name: str) -> Tuple[str, str]:
    """Sort key approximating locale-aware string comparison.

    Letters compare case-insensitively first; on a tie lowercase sorts
    before uppercase, so ``arrow < Arrow < ArrowUp < Bell``.

    Punctuation is compared by code point, so ``_`` sorts after digits
    (``A1 < A_b``) where ICU collation would put it first.  Component
    names are identifiers, which keeps this difference rare.
    """
    return name.casefold(), name.swapcase()


def sorts_after(name: str, other: str) -> bool:
    """Return True if ``name`` sorts strictly after ``other``."""
    return collation_key(name) > collation_key(other)


def insert_icon_alphabetically(
    source_text: str,
    name: str,
    component_text: str,
    collection: str = DEFAULT_COLLECTION,
) -> str:
    """Insert ``component_text`` so that entry names stay sorted.

    Raises:
        RegistryParseError: If the text does not parse or the
            collection does not exist.
    """
    registry = parse_registry(source_text, collection)
    if not registry.has_collection:
        raise RegistryParseError(f"No exported '{collection}' object found in registry source")

    entries = registry.entries
    if not entries:
        start, end = registry.collection_start, registry.collection_end
        if source_text[start:end].strip():
            # Spreads or comments only: keep them after the new entry.
            logger.debug("Inserting %s at start of collection", name)
            return f"{source_text[:start]}\n{INDENT}{component_text},{source_text[start:]}"
        logger.debug("Inserting %s into empty collection", name)
        return f"{source_text[:start]}\n{INDENT}{component_text},\n{source_text[end:]}"

    insert_index = -1
    for i, entry in enumerate(entries):
        if sorts_after(entry.name, name):
            insert_index = i
            break

    if insert_index == -1:
        last = entries[-1]
        logger.debug("Appending %s after %s", name, last.name)
        return f"{source_text[:last.end]},\n{INDENT}{component_text}{source_text[last.end:]}"

    target = entries[insert_index]
    logger.debug("Inserting %s before %s", name, target.name)
    return f"{source_text[:target.start]}{component_text},\n{INDENT}{source_text[target.start:]}"


def replace_icon(
    source_text: str,
    name: str,
    component_text: str,
    collection: str = DEFAULT_COLLECTION,
) -> str:
    """Replace the entry ``name`` with ``component_text``.

    Returns ``source_text`` unchanged when ``name`` does not exist.
    """
    registry = parse_registry(source_text, collection)
    entry = registry.find(name)
    if entry is None:
        return source_text
    return f"{source_text[:entry.start]}{component_text}{source_text[entry.end:]}"


def remove_icon(source_text: str, name: str, collection: str = DEFAULT_COLLECTION) -> str:
    """Remove the entry ``name`` together with one separator.

    Returns ``source_text`` unchanged when ``name`` does not exist.
    """
    registry = parse_registry(source_text, collection)
    entries = registry.entries
    index = registry.index_of(name)
    if index == -1:
        return source_text

    entry = entries[index]

    if len(entries) == 1:
        # Drop the entry's own trailing comma as well, leaving ``{}``.
        tail = source_text[entry.end:]
        stripped = tail.lstrip()
        if stripped.startswith(","):
            tail = stripped[1:]
        prefix = source_text[:entry.start].rstrip()
        if "//" in prefix.rsplit("\n", 1)[-1]:
            # A trailing line comment would swallow the closing brace.
            return f"{prefix}\n{tail.lstrip()}"
        return f"{prefix}{tail.lstrip()}"

    if index == len(entries) - 1:
        prev = entries[index - 1]
        between = source_text[prev.end:entry.start]
        if "," in between:
            return f"{source_text[:prev.end]}{source_text[entry.end:]}"
        return f"{source_text[:prev.end]}\n{source_text[entry.end:].lstrip()}"

    following = entries[index + 1]
    return f"{source_text[:entry.start]}{source_text[following.start:]}"


def find_missing(
    source_text: str,
    names: Iterable[str],
    collection: str = DEFAULT_COLLECTION,
) -> List[str]:
    """Return the subset of ``names`` absent from the collection, in order."""
    existing = set(parse_registry(source_text, collection).names())
    return [n for n in names if n not in existing]


def remove_icons(
    source_text: str,
    names: Iterable[str],
    collection: str = DEFAULT_COLLECTION,
) -> str:
    """Remove several entries, all or nothing.

    Every name is checked before any edit is made.

    Raises:
        IconNotFoundError: Listing every name that does not exist.
    """
    names = list(names)
    missing = find_missing(source_text, names, collection)
    if missing:
        raise IconNotFoundError(missing)
    for name in names:
        source_text = remove_icon(source_text, name, collection)
    return source_text
