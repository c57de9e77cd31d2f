"""
declension/factory.py
---------------------

Maps a language to its declension.

Responsibilities
----------------
- Pick the declension class of a language from its ISO language code.
- Build one declension per catalog language, once, at construction.
- Share rule engines between dialects: a language that is not translated
  itself and whose fallback uses the same declension class gets a
  ForwardingLanguageDeclension over the fallback's instance.

The registry is read-only after construction, so lookups need no locking.

Languages without an entry get the simple (uninflected) declension, or an
UnsupportedOperationError when `settings.FAIL_ON_MISSING_DECLENSION` is set.

Extendibility
-------------
Add a language by adding its code to `DECLENSION_CLASS_REGISTRY`.
"""

from __future__ import annotations

import importlib
from functools import lru_cache
from typing import Dict, Optional, Tuple

import structlog

from declension.config import settings
from declension.errors import UnsupportedOperationError
from declension.forwarding import ForwardingLanguageDeclension, unwrap
from declension.language import HumanLanguage, LanguageCatalog, get_catalog

logger = structlog.get_logger()


# ---------------------------------------------------------------------------
# Registry: language code -> (module path, declension class name)
# ---------------------------------------------------------------------------

_F = "declension.families."

DECLENSION_CLASS_REGISTRY: Dict[str, Tuple[str, str]] = {
    # code   module path                       class name
    "en": (_F + "english", "EnglishDeclension"),
    "it": (_F + "romance", "ItalianDeclension"),
    "fr": (_F + "romance", "FrenchDeclension"),
    "es": (_F + "romance", "SpanishDeclension"),
    "pt": (_F + "romance", "PortugueseDeclension"),
    "rm": (_F + "romance", "RomanshDeclension"),
    "ca": (_F + "romance", "CatalanDeclension"),
    "ro": (_F + "romanian", "RomanianDeclension"),
    "de": (_F + "germanic", "GermanDeclension"),
    "sv": (_F + "germanic", "SwedishDeclension"),
    "nl": (_F + "germanic", "DutchDeclension"),
    "da": (_F + "germanic", "DanishDeclension"),
    "no": (_F + "germanic", "NorwegianDeclension"),
    "is": (_F + "germanic", "IcelandicDeclension"),
    "lb": (_F + "germanic", "LuxembourgishDeclension"),
    "ji": (_F + "germanic", "YiddishDeclension"),
    "el": (_F + "greek", "GreekDeclension"),
    "sq": (_F + "albanian", "AlbanianDeclension"),
    "cs": (_F + "slavic", "CzechDeclension"),
    "pl": (_F + "slavic", "PolishDeclension"),
    "ru": (_F + "slavic", "RussianDeclension"),
    "uk": (_F + "slavic", "UkrainianDeclension"),
    "sk": (_F + "slavic", "SlovakianDeclension"),
    "sl": (_F + "slavic", "SlovenianDeclension"),
    # Serbian (Cyrillic and Latin), Bosnian, Croatian; Montenegrin is sh_ME
    "sr": (_F + "slavic", "SerboCroatianDeclension"),
    "sh": (_F + "slavic", "SerboCroatianDeclension"),
    "bs": (_F + "slavic", "SerboCroatianDeclension"),
    "hr": (_F + "slavic", "SerboCroatianDeclension"),
    "ka": (_F + "slavic", "GeorgianDeclension"),
    "bg": (_F + "bulgarian", "BulgarianDeclension"),
    "mk": (_F + "bulgarian", "BulgarianDeclension"),
    "lt": (_F + "baltic", "BalticDeclension"),
    "lv": (_F + "baltic", "BalticDeclension"),
    "fi": (_F + "finnic", "FinnishDeclension"),
    "et": (_F + "finnic", "EstonianDeclension"),
    "hu": (_F + "hungarian", "HungarianDeclension"),
    "tr": (_F + "turkic", "TurkishDeclension"),
    "kk": (_F + "turkic", "KazakhDeclension"),
    "iw": (_F + "semitic", "HebrewDeclension"),
    "ar": (_F + "semitic", "ArabicDeclension"),
    "am": (_F + "amharic", "AmharicDeclension"),
    "hy": (_F + "armenian", "ArmenianDeclension"),
    "eu": (_F + "basque", "BasqueDeclension"),
    "hi": (_F + "indo_aryan", "HindiUrduDeclension"),
    "ur": (_F + "indo_aryan", "HindiUrduDeclension"),
    "bn": (_F + "indo_aryan", "BengaliDeclension"),
    "mr": (_F + "indo_aryan", "MarathiDeclension"),
    "gu": (_F + "indo_aryan", "GujaratiDeclension"),
    "pa": (_F + "indo_aryan", "PunjabiDeclension"),
    "ta": (_F + "dravidian", "TamilDeclension"),
    "te": (_F + "dravidian", "TeluguDeclension"),
    "kn": (_F + "dravidian", "KannadaDeclension"),
    "ml": (_F + "dravidian", "MalayalamDeclension"),
    "sw": (_F + "bantu", "SwahiliDeclension"),
    "zu": (_F + "bantu", "ZuluDeclension"),
    "xh": (_F + "bantu", "XhosaDeclension"),
    "in": (_F + "malayo_polynesian", "IndonesianDeclension"),
    "ms": (_F + "malayo_polynesian", "IndonesianDeclension"),
    "mi": (_F + "malayo_polynesian", "MalayoPolynesianDeclension"),
    "sm": (_F + "malayo_polynesian", "MalayoPolynesianDeclension"),
    "haw": (_F + "malayo_polynesian", "HawaiianDeclension"),
    "eo": (_F + "esperanto", "EsperantoDeclension"),
    "ko": (_F + "korean", "KoreanDeclension"),
    "ja": (_F + "simple", "SimpleDeclensionWithClassifiers"),
    "zh": (_F + "simple", "SimpleDeclensionWithClassifiers"),
    "vi": (_F + "simple", "VietnameseDeclension"),
    "th": (_F + "simple", "SimpleDeclension"),
    "tl": (_F + "simple", "SimpleDeclension"),
    # Grammar not modelled in depth
    "ga": (_F + "unsupported", "IrishDeclension"),  # lenition
    "cy": (_F + "unsupported", "CelticDeclension"),  # lenition
    "mt": (_F + "unsupported", "MalteseDeclension"),
    "fa": (_F + "unsupported", "PersianDeclension"),
}

SIMPLE_DECLENSION = (_F + "simple", "SimpleDeclension")


def _load_class(module_path: str, class_name: str) -> type:
    module = importlib.import_module(module_path)
    try:
        return getattr(module, class_name)
    except AttributeError:
        raise ImportError(
            f"Module {module_path!r} does not define declension class {class_name!r}"
        ) from None


def declension_class_for(language: HumanLanguage, strict: Optional[bool] = None) -> type:
    """
    The declension class of `language`.

    Raises UnsupportedOperationError for an unmapped language in strict mode.
    """
    entry = DECLENSION_CLASS_REGISTRY.get(language.language_code)
    if entry is None:
        if settings.FAIL_ON_MISSING_DECLENSION if strict is None else strict:
            raise UnsupportedOperationError(
                f"Language {language} has no defined declension"
            )
        logger.debug("declension_missing_using_simple", language=language.locale)
        entry = SIMPLE_DECLENSION
    return _load_class(*entry)


def create_declension(language: HumanLanguage, strict: Optional[bool] = None):
    """A new, unshared declension for `language`."""
    return declension_class_for(language, strict)(language)


class LanguageDeclensionFactory:
    """
    One declension per catalog language.

    Usage:

        factory = get_factory()
        declension = factory.get_declension(get_catalog().get("de"))
        noun = declension.create_noun("Account", ...)
    """

    def __init__(
        self,
        catalog: Optional[LanguageCatalog] = None,
        strict: Optional[bool] = None,
    ) -> None:
        self._catalog = catalog or get_catalog()
        self._strict = settings.FAIL_ON_MISSING_DECLENSION if strict is None else strict
        self._declensions: Dict[str, object] = {}
        for language in self._catalog:
            self._build(language)
        self._default = self._declensions[self._catalog.base_language.locale]
        logger.debug("declension_factory_built", languages=len(self._declensions))

    @property
    def catalog(self) -> LanguageCatalog:
        return self._catalog

    def _build(self, language: HumanLanguage):
        existing = self._declensions.get(language.locale)
        if existing is not None:
            return existing

        declension_class = declension_class_for(language, self._strict)
        declension = None
        fallback = self._fallback_of(language)
        if fallback is not None and not language.is_translated:
            delegate = unwrap(self._build(fallback))
            if type(delegate) is declension_class:
                declension = ForwardingLanguageDeclension(language, delegate)
        if declension is None:
            declension = declension_class(language)

        assert declension.language == language, "Programmer error, invalid declension"
        self._declensions[language.locale] = declension
        return declension

    def _fallback_of(self, language: HumanLanguage) -> Optional[HumanLanguage]:
        if language.fallback_locale is None:
            return None
        return self._catalog.find(language.fallback_locale)

    def get_declension(self, language: HumanLanguage):
        """
        The declension of `language`.

        Languages outside the catalog get a new declension of their own;
        in strict mode an unmapped one raises UnsupportedOperationError.
        """
        if language == self._catalog.base_language:
            return self._default
        declension = self._declensions.get(language.locale)
        if declension is None:
            declension = create_declension(language, self._strict)
        return declension

    def get_declension_for_locale(self, locale: str):
        return self.get_declension(self._catalog.get(locale))

    def __iter__(self):
        return iter(self._declensions.values())

    def __len__(self) -> int:
        return len(self._declensions)


@lru_cache(maxsize=1)
def get_factory() -> LanguageDeclensionFactory:
    """Process-wide factory, built on first use."""
    return LanguageDeclensionFactory()


__all__ = [
    "DECLENSION_CLASS_REGISTRY",
    "declension_class_for",
    "create_declension",
    "LanguageDeclensionFactory",
    "get_factory",
]
