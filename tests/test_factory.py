# tests/test_factory.py
"""
tests/test_factory.py
---------------------

Language -> declension mapping, dialect sharing through forwarding
declensions, and strict mode.
"""

from __future__ import annotations

import pytest

from declension.config import settings
from declension.errors import UnsupportedOperationError
from declension.factory import (
    DECLENSION_CLASS_REGISTRY,
    LanguageDeclensionFactory,
    declension_class_for,
    get_factory,
)
from declension.families.english import EnglishDeclension
from declension.families.simple import SimpleDeclension
from declension.forwarding import ForwardingLanguageDeclension, is_forwarding_proxy, unwrap
from declension.language import HumanLanguage, LanguageType

UNMAPPED = ("af", "my", "km", "kl", "hmn", "ht")


def test_every_catalog_language_has_a_declension(catalog, factory) -> None:
    assert len(factory) == len(catalog)
    for language in catalog:
        declension = factory.get_declension(language)
        assert declension.language == language


def test_base_language_is_served_directly(catalog, factory) -> None:
    base = catalog.base_language
    assert base.locale == "en_US"
    assert factory.get_declension(base) is factory.get_declension_for_locale("en_US")
    assert not is_forwarding_proxy(factory.get_declension(base))


@pytest.mark.parametrize(
    "locale, delegate_locale",
    [
        ("en_CA", "en_US"),
        ("en_AU", "en_GB"),
        ("ro_MD", "ro"),
        ("de_AT", "de"),
        ("ms", "in"),
    ],
)
def test_untranslated_dialect_forwards_to_fallback(factory, locale, delegate_locale) -> None:
    declension = factory.get_declension_for_locale(locale)
    delegate = factory.get_declension_for_locale(delegate_locale)

    assert is_forwarding_proxy(declension)
    assert declension.language.locale == locale
    assert unwrap(declension) is delegate
    assert declension.all_noun_forms == delegate.all_noun_forms


@pytest.mark.parametrize("locale", ["es_MX", "ro", "en_GB", "haw", "ht"])
def test_languages_with_own_rules_are_not_forwarded(factory, locale: str) -> None:
    # translated languages, languages without a fallback, and dialects whose
    # fallback uses another declension class
    assert not is_forwarding_proxy(factory.get_declension_for_locale(locale))


def test_forwarding_declension_repr(factory) -> None:
    assert repr(factory.get_declension_for_locale("en_CA")) == "EnglishDeclension@en_CA"


def test_forwarding_never_nests(factory) -> None:
    en_ca = factory.get_declension_for_locale("en_CA")
    wrapped = ForwardingLanguageDeclension(en_ca.language, en_ca)
    assert wrapped.delegate is unwrap(en_ca)


def test_nouns_of_a_dialect_belong_to_the_delegate(factory) -> None:
    noun = factory.get_declension_for_locale("en_CA").create_noun("Account")
    assert noun.declension is factory.get_declension_for_locale("en_US")


def test_declension_classes(factory) -> None:
    assert isinstance(factory.get_declension_for_locale("en_GB"), EnglishDeclension)
    assert type(factory.get_declension_for_locale("th")) is SimpleDeclension
    for locale in UNMAPPED:
        assert type(unwrap(factory.get_declension_for_locale(locale))) is SimpleDeclension


def test_registry_classes_are_importable() -> None:
    for code in DECLENSION_CLASS_REGISTRY:
        language = HumanLanguage(locale=code, language_type=LanguageType.HIDDEN, ordinal=0)
        assert isinstance(declension_class_for(language), type)


def test_uncatalogued_language_gets_a_fresh_declension(factory) -> None:
    language = HumanLanguage(locale="xx", language_type=LanguageType.PLATFORM, ordinal=999)
    declension = factory.get_declension(language)

    assert type(declension) is SimpleDeclension
    assert declension.language is language


def test_strict_mode_rejects_unmapped_languages(catalog) -> None:
    with pytest.raises(UnsupportedOperationError):
        declension_class_for(catalog.get("af"), strict=True)
    assert declension_class_for(catalog.get("af"), strict=False) is SimpleDeclension


def test_strict_factory_fails_on_construction(catalog) -> None:
    with pytest.raises(UnsupportedOperationError):
        LanguageDeclensionFactory(catalog, strict=True)


def test_strict_mode_follows_settings(monkeypatch, catalog) -> None:
    monkeypatch.setattr(settings, "FAIL_ON_MISSING_DECLENSION", True)
    with pytest.raises(UnsupportedOperationError):
        declension_class_for(catalog.get("hmn"))


def test_default_factory_is_shared() -> None:
    assert get_factory() is get_factory()
