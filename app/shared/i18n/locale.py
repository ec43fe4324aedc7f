"""
Locale tag handling and ``Accept-Language`` negotiation.

Tags are normalized to lowercase with ``-`` separators so that
``de_AT``, ``de-AT`` and ``DE-at`` all select the same bundle.
"""

import re
from typing import Iterable, Optional

_TAG_PATTERN = re.compile(r"^(\*|[A-Za-z]{1,8}([-_][A-Za-z0-9]{1,8})*)$")


def normalize_locale(tag: str) -> str:
    """Return the canonical form of a locale tag."""
    return tag.strip().replace("_", "-").lower()


def primary_language(tag: str) -> str:
    """Return the language subtag, e.g. ``de`` for ``de-at``."""
    return normalize_locale(tag).split("-", 1)[0]


def parse_accept_language(header: Optional[str]) -> list[str]:
    """Parse an ``Accept-Language`` header into ranked language ranges.

    Ranges are ordered by descending quality; ties keep header order.
    Ranges with ``q=0`` and malformed entries are dropped.

    Args:
        header: Raw header value, or None when the header is absent.

    Returns:
        Normalized language ranges, best first.
    """
    if not header:
        return []

    ranked: list[tuple[float, int, str]] = []
    for index, part in enumerate(header.split(",")):
        tag, *params = (piece.strip() for piece in part.split(";"))
        if not _TAG_PATTERN.match(tag):
            continue
        quality = 1.0
        for param in params:
            name, _, value = param.partition("=")
            if name.strip().lower() != "q":
                continue
            try:
                quality = float(value)
            except ValueError:
                quality = 0.0
        if not 0.0 < quality <= 1.0:
            continue
        ranked.append((quality, index, normalize_locale(tag)))

    ranked.sort(key=lambda item: (-item[0], item[1]))
    return [tag for _, _, tag in ranked]


def negotiate_locale(
    header: Optional[str], supported: Iterable[str], default: str
) -> str:
    """Pick the best supported locale for an ``Accept-Language`` header.

    A range matches when its full tag or its primary language is
    supported. ``*``, an empty header or no match yields ``default``.
    """
    available = {normalize_locale(tag) for tag in supported}
    for tag in parse_accept_language(header):
        if tag == "*":
            break
        if tag in available:
            return tag
        language = primary_language(tag)
        if language in available:
            return language
    return normalize_locale(default)
