"""
Internationalization (i18n) module for the storefront.

Dictionary-based translations backed by ``localization.TEXTS``.
Supports Arabic (ar), French (fr) and Dutch (nl); French is the default.

Usage:
    from app.core.i18n import _, resolve_language, localized_name

    lang = resolve_language("fr-BE")           # -> "fr"
    title = _("cart.title", lang="ar")
    name = localized_name(product.name, "nl")  # nl -> fr -> first available
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from localization import TEXTS, get_language_name, get_text

# Default language
DEFAULT_LANGUAGE = "fr"

# Supported languages
SUPPORTED_LANGUAGES = ("ar", "fr", "nl")

# Right-to-left scripts
RTL_LANGUAGES = frozenset({"ar"})

# Secondary language for product names missing in the requested one
NAME_FALLBACK_LANGUAGE = "fr"


def resolve_language(code: str | None, default: str = DEFAULT_LANGUAGE) -> str:
    """Normalize a language code; unsupported codes fall back to ``default``.

    Accepts region-qualified codes such as ``fr-BE`` or ``nl_NL``.
    """
    if default not in SUPPORTED_LANGUAGES:
        default = DEFAULT_LANGUAGE
    if not code:
        return default
    primary = str(code).strip().lower().replace("_", "-").split("-", 1)[0]
    if primary in SUPPORTED_LANGUAGES:
        return primary
    return default


def detect_language(accept_language: str | None, default: str = DEFAULT_LANGUAGE) -> str:
    """Pick a language from an Accept-Language header, browser style."""
    if not accept_language:
        return resolve_language(None, default)
    for part in accept_language.split(","):
        tag = part.split(";", 1)[0].strip().lower()
        if tag.startswith("ar"):
            return "ar"
        if tag.startswith("nl"):
            return "nl"
        if tag.startswith("fr"):
            return "fr"
    return resolve_language(None, default)


def translate(key: str, lang: str | None = None, **kwargs: Any) -> str:
    """
    Translate a message key to the appropriate language.

    Args:
        key: Translation key
        lang: Optional language code; unsupported codes use the default
        **kwargs: Formatting arguments for the translated string

    Returns:
        Translated and formatted string, or the key itself when missing
    """
    language = resolve_language(lang)
    return get_text(language, key, **kwargs) or key


# Shorthand alias
_ = translate


def text_direction(lang: str | None) -> str:
    """Return ``rtl`` or ``ltr`` for the language."""
    return "rtl" if resolve_language(lang) in RTL_LANGUAGES else "ltr"


def localized_name(names: Mapping[str, str] | None, lang: str | None) -> str:
    """Pick a display name: requested language -> French -> first available."""
    if not names:
        return ""

    language = resolve_language(lang)
    for candidate in (language, NAME_FALLBACK_LANGUAGE, *SUPPORTED_LANGUAGES):
        value = names.get(candidate)
        if value and str(value).strip():
            return str(value)

    for value in names.values():
        if value and str(value).strip():
            return str(value)
    return ""


def format_currency(amount: int, lang: str | None = None) -> str:
    """Format an amount with the localized currency label."""
    return f"{amount} {translate('product.price', lang)}"


def get_available_languages() -> list[dict[str, str]]:
    """Get list of available languages with their names and text direction."""
    return [
        {"code": code, "name": get_language_name(code), "dir": text_direction(code)}
        for code in SUPPORTED_LANGUAGES
    ]


def get_texts(lang: str | None) -> dict[str, str]:
    """All UI phrases for a language, French filling any missing keys."""
    return {key: translate(key, lang) for key in TEXTS[DEFAULT_LANGUAGE]}
