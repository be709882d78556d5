"""Persona prompt composer: role x region x language -> one system prompt.

Total over any key string. Unknown keys resolve to the table default
(mv-specialist / north-america / english) instead of raising, since callers
may pass raw UI labels that were never normalized.
"""

from dataclasses import dataclass
from typing import Any

from .profiles import (
    BASE_IDENTITY,
    DEFAULT_LANGUAGE,
    DEFAULT_REGION,
    DEFAULT_ROLE,
    LANGUAGES,
    REGIONS,
    ROLES,
    TABLES,
    Profile,
    ProfileTable,
)

SECTION_SEPARATOR = "\n\n"


@dataclass(frozen=True)
class PersonaSelection:
    """The (role, region, language) triple chosen for one request."""

    role: str = DEFAULT_ROLE
    region: str = DEFAULT_REGION
    language: str = DEFAULT_LANGUAGE


def _table(table: ProfileTable | str) -> ProfileTable:
    if isinstance(table, ProfileTable):
        return table
    try:
        return TABLES[table]
    except KeyError:
        raise ValueError(f"Unknown profile table: {table!r}. Use one of {tuple(TABLES)}") from None


def resolve_profile(table: ProfileTable | str, key: Any) -> Profile:
    """Return the profile for key, or the table default when key is not a member."""
    t = _table(table)
    profile = t.get(key)
    if profile is None:
        return t.default
    return profile


def compose_system_prompt(role: Any, region: Any, language: Any) -> str:
    """Build the system prompt for one persona selection.

    Order is fixed: base identity, role guidance, region guidance, language
    guidance, separated by one blank line each.
    """
    return SECTION_SEPARATOR.join(
        (
            BASE_IDENTITY,
            resolve_profile(ROLES, role).guidance,
            resolve_profile(REGIONS, region).guidance,
            resolve_profile(LANGUAGES, language).guidance,
        )
    )


def compose_for(selection: PersonaSelection) -> str:
    return compose_system_prompt(selection.role, selection.region, selection.language)


def _title_case(key: str) -> str:
    return " ".join(part.capitalize() for part in key.replace("_", "-").split("-") if part)


def display_name(table: ProfileTable | str, key: Any) -> str:
    """Human-readable label for key, e.g. mv-specialist -> M&V Specialist.

    Keys outside the table come back title-cased rather than replaced by the
    default's label, so a UI never shows a name the user didn't pick.
    """
    profile = _table(table).get(key)
    if profile is not None:
        return profile.display_name
    if not isinstance(key, str):
        return ""
    return _title_case(key)


def list_options() -> dict[str, list[dict[str, str]]]:
    """All selectable keys with their labels, per table, in declaration order."""
    options: dict[str, list[dict[str, str]]] = {}
    for kind, table in TABLES.items():
        entries = []
        for profile in table:
            entry = {"key": profile.key, "name": profile.display_name}
            if profile.description:
                entry["description"] = profile.description
            entries.append(entry)
        options[kind] = entries
    return options
