"""Icon identifiers and the Iconify HTTP client.

Icons are addressed as ``prefix:name`` (``lucide:arrow-right``), where
both parts consist of lowercase alphanumerics separated by single
hyphens.  The component name is the PascalCase form of ``name``.
"""

from __future__ import annotations

import logging
import re
from typing import Optional, Tuple

import httpx

from .errors import IconFetchError, IconNotFoundError
from .svg import find_svg_markup

logger = logging.getLogger(__name__)

ICONIFY_API = "https://api.iconify.design"
DEFAULT_TIMEOUT = 10.0

ICON_NAME_REGEX = re.compile(r"^[a-z0-9]+(-[a-z0-9]+)*$")
SPLIT_REGEX = re.compile(r"[-_]")


def validate_icon_name(icon: str) -> Tuple[str, str]:
    """Split ``icon`` into ``(prefix, name)``.

    Raises:
        ValueError: If ``icon`` is not a valid ``prefix:name`` identifier.
    """
    parts = icon.split(":")
    if len(parts) != 2:
        raise ValueError(
            f'Invalid icon format "{icon}". Expected "prefix:name" (e.g., mdi:home)'
        )
    prefix, name = parts
    if not ICON_NAME_REGEX.match(prefix):
        raise ValueError(
            f'Invalid prefix "{prefix}". Must match: lowercase letters, numbers, hyphens'
        )
    if not ICON_NAME_REGEX.match(name):
        raise ValueError(
            f'Invalid name "{name}". Must match: lowercase letters, numbers, hyphens'
        )
    return prefix, name


def to_component_name(icon: str) -> str:
    """``lucide:arrow-right`` -> ``ArrowRight``."""
    _, _, name = icon.partition(":")
    if not name:
        raise ValueError(f"Invalid icon format: {icon}")
    return "".join(part[:1].upper() + part[1:].lower() for part in SPLIT_REGEX.split(name) if part)


def icon_url(icon: str, base_url: str = ICONIFY_API) -> str:
    prefix, name = validate_icon_name(icon)
    return f"{base_url}/{prefix}/{name}.svg"


def fetch_icon_markup(
    icon: str,
    client: Optional[httpx.Client] = None,
    base_url: str = ICONIFY_API,
) -> str:
    """Download the SVG document for ``icon``.

    Args:
        icon: ``prefix:name`` identifier.
        client: Optional client to reuse across a batch of downloads.
        base_url: Root of the Iconify API.

    Raises:
        ValueError: If ``icon`` is not a valid identifier.
        IconNotFoundError: If the provider does not know the icon.
        IconFetchError: On transport errors or unexpected responses.
    """
    url = icon_url(icon, base_url)
    owns_client = client is None
    if owns_client:
        client = httpx.Client(timeout=DEFAULT_TIMEOUT, follow_redirects=True)
    try:
        logger.debug("GET %s", url)
        response = client.get(url)
        response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        if exc.response.status_code == 404:
            raise IconNotFoundError([icon], f'Icon "{icon}" not found') from exc
        raise IconFetchError(
            f"Failed to fetch {icon}: HTTP {exc.response.status_code}"
        ) from exc
    except httpx.RequestError as exc:
        raise IconFetchError(f"Failed to fetch {icon}: {exc}") from exc
    finally:
        if owns_client:
            client.close()

    # Iconify answers unknown icons with a 200 and a plain "404" body.
    markup = find_svg_markup(response.text)
    if markup is None:
        raise IconNotFoundError([icon], f'Icon "{icon}" not found')
    return markup
