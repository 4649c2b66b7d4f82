from __future__ import annotations

"""
Internationalization (i18n) utility module for handling translations and language preferences.

This module provides functionality for:
- Loading message catalogs for every supported language
- Translating messages based on user preferences
- Determining user language from request headers or query parameters
- Fallback to the default language or the key itself for missing translations

Catalogs live in ``eventdesk/locales/<lang>/LC_MESSAGES/messages.po`` and are
parsed with Babel at startup. Compiled ``.mo`` files are picked up by gettext
when present and take precedence over the ``.po`` source.
"""

import gettext
import os
from typing import Dict

from babel.messages.pofile import read_po
from fastapi import Request

from eventdesk.core.config.settings import settings
from eventdesk.core.logging import logger

LOCALES_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "locales"))

_translations: Dict[str, gettext.NullTranslations] = {}
_catalogs: Dict[str, Dict[str, str]] = {}


def _load_po_catalog(lang: str) -> Dict[str, str]:
    po_path = os.path.join(LOCALES_PATH, lang, "LC_MESSAGES", "messages.po")
    catalog: Dict[str, str] = {}
    if not os.path.exists(po_path):
        return catalog

    with open(po_path, "rb") as po_file:
        for message in read_po(po_file, locale=lang):
            if message.id and isinstance(message.id, str):
                catalog[message.id] = message.string or message.id
    return catalog


def setup_i18n() -> None:
    """
    Initialize the internationalization system by loading translations.

    Raises:
        FileNotFoundError: If the locales directory is not found.
    """
    if not os.path.exists(LOCALES_PATH):
        raise FileNotFoundError(f"Locales directory not found: {LOCALES_PATH}")

    for lang in settings.SUPPORTED_LANGUAGES:
        _translations[lang] = gettext.translation(
            domain="messages",
            localedir=LOCALES_PATH,
            languages=[lang],
            fallback=True,
        )
        _catalogs[lang] = _load_po_catalog(lang)
        logger.info("i18n_initialized", language=lang, entries=len(_catalogs[lang]))

    logger.info("i18n_setup_complete", default_locale=settings.DEFAULT_LANGUAGE)


def get_translated_message(key: str, locale: str = settings.DEFAULT_LANGUAGE) -> str:
    """
    Retrieve a translated message for the given key and locale.

    Falls back to the default language, then to the key itself.

    Args:
        key: The message key to translate.
        locale: The target language code (defaults to DEFAULT_LANGUAGE).

    Returns:
        The translated message or the original key if translation fails.
    """
    if not _translations:
        setup_i18n()

    if locale not in _translations:
        locale = settings.DEFAULT_LANGUAGE

    translation = _translations.get(locale)
    translated = translation.gettext(key) if translation else key
    if translated == key:
        translated = _catalogs.get(locale, {}).get(key, key)
    if translated == key and locale != settings.DEFAULT_LANGUAGE:
        translated = _catalogs.get(settings.DEFAULT_LANGUAGE, {}).get(key, key)
    if translated == key:
        logger.warning("translation_key_not_found", key=key, locale=locale)

    return translated


def get_request_language(request: Request) -> str:
    """
    Determine the preferred language from a request.

    Checks language preference in order: query parameter 'lang',
    Accept-Language header, then default language from settings.

    Args:
        request: The FastAPI request object.

    Returns:
        The determined language code.
    """
    lang = request.query_params.get("lang")
    if lang and lang in settings.SUPPORTED_LANGUAGES:
        return lang

    accept_language = request.headers.get("Accept-Language", settings.DEFAULT_LANGUAGE)
    for lang in accept_language.split(","):
        lang = lang.split(";")[0].strip().split("-")[0]
        if lang in settings.SUPPORTED_LANGUAGES:
            return lang

    return settings.DEFAULT_LANGUAGE
