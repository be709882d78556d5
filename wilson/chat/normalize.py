"""Map free-text UI labels ("M&V Specialist", "Asia Pacific") to canonical persona keys."""

import re

from wilson.persona import TABLES, PersonaSelection

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def _slugify(value: str) -> str:
    return _NON_ALNUM.sub("-", value.lower().replace("&", "")).strip("-")


def normalize_key(kind: str, value: str | None) -> str:
    """Return the canonical key for value in the given table.

    Exact keys pass through, display names match case-insensitively, anything
    else is slugified. A slug that is still unknown is returned as-is and left
    for the composer to resolve to its default.
    """
    table = TABLES[kind]
    if value is None:
        return ""
    text = value.strip()
    if not text:
        return ""
    if text in table:
        return text

    folded = text.casefold()
    for profile in table:
        if profile.display_name.casefold() == folded:
            return profile.key

    return _slugify(text)


def normalize_selection(
    role: str | None,
    region: str | None,
    language: str | None,
) -> PersonaSelection:
    return PersonaSelection(
        role=normalize_key("role", role),
        region=normalize_key("region", region),
        language=normalize_key("language", language),
    )
