"""
declension/language.py
----------------------

Language descriptors and the catalog of supported languages.

Only what the declension engine needs from a language registry lives here:
a locale string, its fallback language, whether it is a translated
language, and a stable ordinal. Ordinals are written into persisted form
references, so entries are only ever appended to the catalog.
"""

from __future__ import annotations

from enum import Enum
from functools import lru_cache
from typing import Dict, Iterator, List, Optional, Tuple

import structlog
from pydantic import BaseModel, ConfigDict, Field

from declension.config import settings
from declension.errors import UnknownLanguageError

logger = structlog.get_logger()


class LanguageType(str, Enum):
    STANDARD = "standard"  # fully translated product languages
    END_USER = "end_user"  # translated, end-user facing
    PLATFORM = "platform"  # customer supplied translations only
    HIDDEN = "hidden"  # internal/test languages


class HumanLanguage(BaseModel):
    """A locale known to the declension engine."""

    model_config = ConfigDict(frozen=True)

    locale: str = Field(..., description="Locale string, e.g. 'en_US' or 'de'")
    language_type: LanguageType
    ordinal: int = Field(..., ge=0)
    fallback_locale: Optional[str] = None

    @property
    def language_code(self) -> str:
        return self.locale.split("_", 1)[0]

    @property
    def country(self) -> Optional[str]:
        parts = self.locale.split("_", 1)
        return parts[1] if len(parts) > 1 else None

    @property
    def is_translated(self) -> bool:
        return self.language_type in (LanguageType.STANDARD, LanguageType.END_USER)

    @property
    def fallback_language(self) -> Optional["HumanLanguage"]:
        if self.fallback_locale is None:
            return None
        return get_catalog().get(self.fallback_locale)

    def to_folded_case(self, value: str) -> str:
        """Lowercase `value` using the casing rules of this language."""
        if self.language_code in ("tr", "az"):
            value = value.replace("I", "ı").replace("İ", "i")
        return value.lower()

    def __str__(self) -> str:
        return self.locale


# ---------------------------------------------------------------------------
# 1. Catalog contents (order is persisted)
# ---------------------------------------------------------------------------

_STANDARD = (
    "en_US", "de", "es", "fr", "it", "ja", "sv", "ko", "zh_TW", "zh_CN",
    "pt_BR", "nl_NL", "da", "th", "fi", "ru", "es_MX", "no",
)
_END_USER = (
    "hu", "pl", "cs", "tr", "in", "ro", "vi", "uk", "iw", "el", "bg",
    "en_GB", "ar", "sk", "pt_PT", "hr", "sl",
)
_PLATFORM = (
    "ka", "sr", "sh", "ro_MD", "bs", "mk", "lv", "lt", "et", "sq", "sh_ME",
    "mt", "ga", "eu", "cy", "is", "ms", "tl", "lb", "rm", "hy", "hi", "ur",
    "bn", "ta", "af", "sw", "zu", "xh", "te", "ml", "kn", "mr", "gu", "pa",
    "mi", "my", "fa", "km", "am", "kk", "ht", "sm", "haw", "ca", "kl", "ji",
    "hmn", "ar_DZ", "en_AU", "en_IN", "en_PH", "en_CA", "en_HK", "en_IE",
    "en_SG", "en_ZA", "fr_CA", "de_AT", "de_CH", "fr_CH", "it_CH", "es_AR",
    "ru_IL", "zh_SG", "zh_HK",
)
_HIDDEN = ("eo", "en_IL")


def _translation_fallback(locale: str) -> Optional[str]:
    """
    The language whose translations a dialect inherits, or None when the
    locale is a base language of its own.
    """
    if locale == "haw":
        return "en_US"
    if locale == "ht":
        return "fr"
    if "_" not in locale:
        return None
    language, country = locale.split("_", 1)
    if language == "pt":
        return None if country == "BR" else "pt_BR"
    if language == "nl":
        return None if country == "NL" else "nl_NL"
    if language == "zh":
        if country in ("TW", "CN"):
            return None
        return "zh_TW" if country == "HK" else "zh_CN"
    if language == "en":
        if country == "US":
            return None
        return "en_US" if country in ("GB", "CA", "IL") else "en_GB"
    return language


def _fallback(locale: str, base_locale: str) -> Optional[str]:
    if locale == base_locale:
        return None
    if locale == "ms":
        return "in"
    return _translation_fallback(locale) or base_locale


# ---------------------------------------------------------------------------
# 2. Catalog
# ---------------------------------------------------------------------------


class LanguageCatalog:
    """Ordered registry of the supported languages."""

    def __init__(self, base_locale: Optional[str] = None):
        base_locale = base_locale or settings.DEFAULT_LANGUAGE
        entries: List[Tuple[str, LanguageType]] = []
        for locales, language_type in (
            (_STANDARD, LanguageType.STANDARD),
            (_END_USER, LanguageType.END_USER),
            (_PLATFORM, LanguageType.PLATFORM),
            (_HIDDEN, LanguageType.HIDDEN),
        ):
            entries.extend((locale, language_type) for locale in locales)

        self._languages: List[HumanLanguage] = [
            HumanLanguage(
                locale=locale,
                language_type=language_type,
                ordinal=i,
                fallback_locale=_fallback(locale, base_locale),
            )
            for i, (locale, language_type) in enumerate(entries)
        ]
        self._by_locale: Dict[str, HumanLanguage] = {
            lang.locale: lang for lang in self._languages
        }
        self.base_language = self.get(base_locale)
        logger.debug("language_catalog_built", languages=len(self._languages))

    def get(self, locale: str) -> HumanLanguage:
        try:
            return self._by_locale[locale]
        except KeyError:
            raise UnknownLanguageError(f"Unknown language: {locale}") from None

    def find(self, locale: str) -> Optional[HumanLanguage]:
        return self._by_locale.get(locale)

    def get_by_ordinal(self, ordinal: int) -> HumanLanguage:
        if not 0 <= ordinal < len(self._languages):
            raise UnknownLanguageError(f"Unknown language ordinal: {ordinal}")
        return self._languages[ordinal]

    def __iter__(self) -> Iterator[HumanLanguage]:
        return iter(self._languages)

    def __len__(self) -> int:
        return len(self._languages)

    def __contains__(self, locale: object) -> bool:
        return locale in self._by_locale


@lru_cache(maxsize=1)
def get_catalog() -> LanguageCatalog:
    """Process-wide catalog, built on first use."""
    return LanguageCatalog()


__all__ = ["LanguageType", "HumanLanguage", "LanguageCatalog", "get_catalog"]
