"""Tests for UI label -> canonical key normalization."""

import pytest

from wilson.chat.normalize import normalize_key, normalize_selection
from wilson.persona import PersonaSelection, compose_for, compose_system_prompt


class TestNormalizeKey:
    """Label mapping for each table."""

    @pytest.mark.parametrize(
        "kind,label,expected",
        [
            ("role", "M&V Specialist", "mv-specialist"),
            ("role", "Policy Maker", "policy-maker"),
            ("role", "legal professional", "legal-professional"),
            ("role", "student", "student"),
            ("region", "North America", "north-america"),
            ("region", "Asia Pacific", "asia-pacific"),
            ("region", "LATIN AMERICA", "latin-america"),
            ("language", "English", "english"),
            ("language", "Español", "spanish"),
            ("language", "日本語", "japanese"),
            ("language", "German", "german"),
        ],
    )
    def test_labels_map_to_keys(self, kind, label, expected):
        assert normalize_key(kind, label) == expected

    def test_surrounding_whitespace_ignored(self):
        assert normalize_key("region", "  Europe  ") == "europe"

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_blank_values(self, value):
        assert normalize_key("role", value) == ""

    def test_unknown_label_is_slugified(self):
        assert normalize_key("role", "Data Scientist") == "data-scientist"


class TestNormalizeSelection:
    """Full triples as sent by the persona-selection screen."""

    def test_ui_labels(self):
        selection = normalize_selection("Business Analyst", "Latin America", "Spanish")
        assert selection == PersonaSelection("business-analyst", "latin-america", "spanish")

    def test_unknown_labels_compose_to_defaults(self):
        selection = normalize_selection("Astronaut", "Moon", "Esperanto")
        assert compose_for(selection) == compose_system_prompt("", "", "")

    def test_missing_values_compose_to_defaults(self):
        selection = normalize_selection(None, None, None)
        assert compose_for(selection) == compose_for(PersonaSelection())
