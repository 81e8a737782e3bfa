"""
Tests for the MCP server tools.

Tools are called through their underlying function via ``tool.fn(...)``.
"""

import json
import logging

import pytest

import lat_spells.main as m
from lat_spells.errors import ErrorKind


class TestParseSpellTool:
    """Tests for the parse_spell tool."""

    def test_quick_cast_text(self):
        result = m.parse_spell.fn(text="Ure ignis magno")
        assert "**Quick Cast:** Ure ignis magno" in result
        assert "**Action:** Ure" in result
        assert "**Element:** Ignis" in result
        assert "**Modifier:** Magnus" in result
        assert "Target" not in result

    def test_full_cast_text(self):
        result = m.parse_spell.fn(text="Sana Aqua Parvus ad Amicum ex Caelo Nunc CumVi")
        assert "**Full Cast:**" in result
        assert "**Target:** Amicus" in result
        assert "**Origin:** Caelum" in result
        assert "**Emphasis:** Nunc, CumVi" in result

    def test_error_text(self):
        result = m.parse_spell.fn(text="Xyzzy Ignis Magnus")
        assert result == '❌ Parse Error: Unknown word "Xyzzy".'

    def test_json_success(self):
        data = json.loads(m.parse_spell.fn(text="Ure Ignis Magnus ex Terra", output_format="json"))
        assert "error" not in data
        assert data["spell"]["origin"] == "Terra"
        assert data["spell"]["element"] == "Ignis"
        assert "target" not in data["spell"]
        assert data["spell"]["source_text"] == "Ure Ignis Magnus ex Terra"

    def test_json_error(self):
        data = json.loads(m.parse_spell.fn(text="Ure", output_format="json"))
        assert "spell" not in data
        assert data["error"]["kind"] == ErrorKind.MISSING_CORE_COMPONENT.value
        assert data["error"]["component"] == "Element"

    def test_calls_are_independent(self):
        first = m.parse_spell.fn(text="Ure Ignis Magnus ad Hostis")
        second = m.parse_spell.fn(text="Ure Ignis Magnus")
        assert "Target" in first
        assert "Target" not in second


class TestListVocabularyTool:
    """Tests for the list_vocabulary tool."""

    def test_all_categories(self):
        data = json.loads(m.list_vocabulary.fn())
        assert set(data) == {
            "Action", "Element", "Modifier", "Target", "Origin", "Emphasis", "Preposition",
        }
        assert "terra" in data["Element"]
        assert "terra" in data["Origin"]
        assert data["Preposition"] == ["ad", "e", "ex"]

    @pytest.mark.parametrize("category", ["Action", "action", " ACTION "])
    def test_single_category(self, category):
        data = json.loads(m.list_vocabulary.fn(category=category))
        assert data == {"Action": ["defende", "feri", "sana", "ure"]}

    def test_unknown_category(self):
        result = m.list_vocabulary.fn(category="Adverb")
        assert result.startswith("❌ Unknown category 'Adverb'")
        assert "Preposition" in result


class TestLogLevel:
    """Tests for LAT_SPELLS_LOG_LEVEL parsing."""

    @pytest.mark.parametrize(
        "name,level",
        [
            ("DEBUG", logging.DEBUG),
            ("info", logging.INFO),
            (" warning ", logging.WARNING),
            ("error", logging.ERROR),
        ],
    )
    def test_known_levels(self, name, level):
        assert m._log_level(name) == level

    @pytest.mark.parametrize("name", ["verbose", "", "BASIC_FORMAT", "getLogger"])
    def test_invalid_level_falls_back_to_info(self, name):
        assert m._log_level(name) == logging.INFO
