"""Persona prompt composition for the Wilson M&V assistant."""

from .composer import (
    PersonaSelection,
    compose_for,
    compose_system_prompt,
    display_name,
    list_options,
    resolve_profile,
)
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

__all__ = [
    # Composer
    "PersonaSelection",
    "compose_for",
    "compose_system_prompt",
    "display_name",
    "list_options",
    "resolve_profile",
    # Tables
    "BASE_IDENTITY",
    "DEFAULT_LANGUAGE",
    "DEFAULT_REGION",
    "DEFAULT_ROLE",
    "LANGUAGES",
    "REGIONS",
    "ROLES",
    "TABLES",
    "Profile",
    "ProfileTable",
]
