"""
Unit tests for language handling in LLMService.

Tests _apply_language_instruction, resolve_language_name and SUPPORTED_LANGUAGES.
Run: pytest tests/unit/test_llm_service_language.py -v
"""

import pytest
from utils.llm_service import _apply_language_instruction
from utils.language_config import SUPPORTED_LANGUAGES, resolve_language_name, is_english


# ---------------------------------------------------------------------------
# _apply_language_instruction
# ---------------------------------------------------------------------------

class TestApplyLanguageInstruction:
    """Tests for the _apply_language_instruction helper."""

    def test_langcode_no_appends_norwegian(self):
        result = _apply_language_instruction("You are a bot.", "no")
        assert "MUST respond entirely in Norwegian" in result

    def test_language_name_is_accepted(self):
        result = _apply_language_instruction("You are a bot.", "Swedish")
        assert "MUST respond entirely in Swedish" in result

    def test_native_alias_is_resolved(self):
        result = _apply_language_instruction("You are a bot.", "norsk")
        assert "Norwegian" in result

    def test_langcode_en_returns_original(self):
        original = "You are a bot."
        assert _apply_language_instruction(original, "en") == original

    def test_language_name_english_returns_original(self):
        original = "You are a bot."
        assert _apply_language_instruction(original, "English") == original

    def test_langcode_EN_uppercase_returns_original(self):
        original = "You are a bot."
        assert _apply_language_instruction(original, "EN") == original

    def test_langcode_none_returns_original(self):
        original = "You are a bot."
        assert _apply_language_instruction(original, None) == original

    def test_langcode_empty_string_returns_original(self):
        original = "You are a bot."
        assert _apply_language_instruction(original, "") == original

    def test_system_prompt_none_with_langcode(self):
        result = _apply_language_instruction(None, "de")
        assert result is not None
        assert result.startswith("IMPORTANT")
        assert "German" in result

    def test_system_prompt_none_without_langcode(self):
        assert _apply_language_instruction(None, None) is None

    def test_unknown_langcode_uses_code_as_name(self):
        result = _apply_language_instruction("Prompt.", "xx")
        assert "MUST respond entirely in xx" in result

    def test_original_prompt_preserved(self):
        original = "You are a friendly interviewer."
        result = _apply_language_instruction(original, "pl")
        assert result.startswith(original)
        assert "Polish" in result


# ---------------------------------------------------------------------------
# resolve_language_name
# ---------------------------------------------------------------------------

class TestResolveLanguageName:

    @pytest.mark.parametrize("value", ["no", "NO", "Norwegian", "norwegian", "norsk", "Bokmål", " no "])
    def test_norwegian_spellings(self, value):
        assert resolve_language_name(value) == "Norwegian"

    def test_unknown_value_is_returned_stripped(self):
        assert resolve_language_name("  Klingon ") == "Klingon"

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_empty_returns_none(self, value):
        assert resolve_language_name(value) is None

    def test_is_english(self):
        assert is_english("en")
        assert is_english("english")
        assert not is_english("no")
        assert not is_english(None)


# ---------------------------------------------------------------------------
# SUPPORTED_LANGUAGES mapping
# ---------------------------------------------------------------------------

class TestSupportedLanguages:
    """Tests for the centralized SUPPORTED_LANGUAGES dict."""

    def test_en_present(self):
        assert SUPPORTED_LANGUAGES["en"] == "English"

    def test_no_maps_to_norwegian(self):
        assert SUPPORTED_LANGUAGES["no"] == "Norwegian"

    def test_all_keys_are_lowercase_two_char(self):
        for code in SUPPORTED_LANGUAGES:
            assert code == code.lower(), f"Key '{code}' is not lowercase"
            assert len(code) == 2, f"Key '{code}' is not 2 characters"

    def test_all_values_are_nonempty_strings(self):
        for code, name in SUPPORTED_LANGUAGES.items():
            assert isinstance(name, str) and len(name) > 0, f"Empty name for '{code}'"

    def test_expected_count(self):
        assert len(SUPPORTED_LANGUAGES) == 18


# ---------------------------------------------------------------------------
# All supported langcodes produce correct language name
# ---------------------------------------------------------------------------

class TestAllLanguagesIntegration:
    """Ensure every supported langcode flows through correctly."""

    @pytest.mark.parametrize("code,expected_name", list(SUPPORTED_LANGUAGES.items()))
    def test_langcode_resolves_to_language_name(self, code, expected_name):
        result = _apply_language_instruction("Prompt.", code)
        if code == "en":
            # English should return original prompt unchanged
            assert result == "Prompt."
        else:
            assert expected_name in result, (
                f"Expected '{expected_name}' for code '{code}', got: {result}"
            )
