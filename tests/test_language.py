# tests/test_language.py
"""
tests/test_language.py
----------------------

Language catalog: persisted ordinals, fallbacks, lookups; plus the
settings and logging bootstrap the catalog depends on.
"""

from __future__ import annotations

import logging

import pytest
import structlog

from declension import logging_setup
from declension.config import Settings
from declension.errors import UnknownLanguageError
from declension.language import LanguageCatalog, LanguageType


def test_catalog_order_is_stable(catalog) -> None:
    assert catalog.get_by_ordinal(0).locale == "en_US"
    assert catalog.get_by_ordinal(1).locale == "de"
    assert [language.ordinal for language in catalog] == list(range(len(catalog)))


def test_catalog_groups_by_language_type(catalog) -> None:
    types = [language.language_type for language in catalog]
    order = [LanguageType.STANDARD, LanguageType.END_USER, LanguageType.PLATFORM, LanguageType.HIDDEN]
    assert types == sorted(types, key=order.index)


@pytest.mark.parametrize(
    "locale, fallback",
    [
        ("en_US", None),
        ("de", "en_US"),
        ("en_CA", "en_US"),
        ("en_AU", "en_GB"),
        ("ro_MD", "ro"),
        ("ms", "in"),
        ("haw", "en_US"),
        ("ht", "fr"),
        ("sh_ME", "sh"),
        ("zh_SG", "zh_CN"),
        ("zh_HK", "zh_TW"),
        ("pt_PT", "pt_BR"),
        ("ar_DZ", "ar"),
        ("en_IL", "en_US"),
    ],
)
def test_fallbacks(catalog, locale: str, fallback) -> None:
    assert catalog.get(locale).fallback_locale == fallback


def test_fallback_language(catalog) -> None:
    assert catalog.get("de_AT").fallback_language == catalog.get("de")
    assert catalog.get("en_US").fallback_language is None


def test_translated_languages(catalog) -> None:
    assert catalog.get("es_MX").is_translated
    assert catalog.get("ro").is_translated
    assert not catalog.get("ro_MD").is_translated
    assert not catalog.get("eo").is_translated


def test_language_code_and_country(catalog) -> None:
    language = catalog.get("pt_BR")
    assert language.language_code == "pt"
    assert language.country == "BR"
    assert catalog.get("haw").country is None


def test_turkish_folds_dotted_i(catalog) -> None:
    assert catalog.get("tr").to_folded_case("KIRMIZI İP") == "kırmızı ip"
    assert catalog.get("de").to_folded_case("KIRMIZI") == "kirmizi"


def test_unknown_locale(catalog) -> None:
    with pytest.raises(UnknownLanguageError, match="xx"):
        catalog.get("xx")
    with pytest.raises(UnknownLanguageError):
        catalog.get_by_ordinal(len(catalog))
    assert catalog.find("xx") is None
    assert "xx" not in catalog
    assert "de" in catalog


def test_catalog_with_another_base_language() -> None:
    catalog = LanguageCatalog(base_locale="de")
    assert catalog.base_language.locale == "de"
    assert catalog.get("de").fallback_locale is None
    assert catalog.get("fr").fallback_locale == "de"


def test_settings_read_environment(monkeypatch) -> None:
    monkeypatch.setenv("DECLENSION_FAIL_ON_MISSING_DECLENSION", "true")
    monkeypatch.setenv("DECLENSION_LOG_LEVEL", "DEBUG")
    settings = Settings()
    assert settings.FAIL_ON_MISSING_DECLENSION is True
    assert settings.LOG_LEVEL == "DEBUG"
    assert settings.DEFAULT_LANGUAGE == "en_US"


def test_validation_messages_reach_stdlib_logging(caplog, declension_for) -> None:
    with caplog.at_level(logging.INFO):
        declension_for("th").create_noun("Empty").validate("Empty")
    assert "The noun Empty has no value" in caplog.text


def test_init_logging_is_idempotent() -> None:
    root_handlers = list(logging.getLogger().handlers)
    logging_setup.init_logging()
    assert logging.getLogger().handlers == root_handlers


def test_get_logger_is_bound_to_structlog() -> None:
    logger = logging_setup.get_logger("declension.test")
    assert hasattr(logger, "info")
    assert structlog.is_configured()
