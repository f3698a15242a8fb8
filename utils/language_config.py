"""
Supported response languages.

Candidates write CVs in many languages; every generated text (follow-up
questions, interview turns, emails) is produced in the candidate's language.
Languages are stored on the candidate by name (e.g. "Norwegian"); prompts
accept either an ISO 639-1 code or a name.
"""

from typing import Optional

SUPPORTED_LANGUAGES = {
    "no": "Norwegian",
    "en": "English",
    "sv": "Swedish",
    "da": "Danish",
    "fi": "Finnish",
    "de": "German",
    "nl": "Dutch",
    "fr": "French",
    "es": "Spanish",
    "it": "Italian",
    "pt": "Portuguese",
    "pl": "Polish",
    "lt": "Lithuanian",
    "uk": "Ukrainian",
    "ru": "Russian",
    "ar": "Arabic",
    "so": "Somali",
    "ti": "Tigrinya",
}

# Native spellings the detector sometimes returns
LANGUAGE_ALIASES = {
    "norsk": "Norwegian",
    "bokmål": "Norwegian",
    "bokmal": "Norwegian",
    "nynorsk": "Norwegian",
    "svenska": "Swedish",
    "dansk": "Danish",
    "suomi": "Finnish",
    "deutsch": "German",
    "polski": "Polish",
}


def resolve_language_name(language: Optional[str]) -> Optional[str]:
    """
    Resolve a language code, name or native alias to the canonical name.

    Args:
        language: "no", "Norwegian", "norsk", ... (case-insensitive)

    Returns:
        Canonical language name, the stripped input if it is unknown,
        or None for empty input
    """
    if not language or not language.strip():
        return None

    value = language.strip()
    key = value.lower()

    if key in SUPPORTED_LANGUAGES:
        return SUPPORTED_LANGUAGES[key]
    if key in LANGUAGE_ALIASES:
        return LANGUAGE_ALIASES[key]
    for name in SUPPORTED_LANGUAGES.values():
        if name.lower() == key:
            return name
    return value


def is_english(language: Optional[str]) -> bool:
    return resolve_language_name(language) == "English"
