"""
Language helpers for the bilingual (fr/en) site.

French is the default language: anything that is not explicitly English
resolves to French, so a request is never rejected for its language.
"""

from typing import Any, Literal, Optional

Language = Literal["fr", "en"]

DEFAULT_LANG: Language = "fr"


def resolve_lang(value: Any) -> Language:
    """Resolve a `lang` field from a request body ("en" or fall back to "fr")."""
    return "en" if value == "en" else "fr"


def lang_from_accept_language(header: Optional[str]) -> Language:
    """
    Infer the language from an Accept-Language header.

    Only the leading tag is considered: "en-US,en;q=0.9" is English,
    "fr-FR,en;q=0.8" and a missing header are French.
    """
    if header and header.startswith("en"):
        return "en"
    return DEFAULT_LANG

