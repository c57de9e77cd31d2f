# tests/test_declension_forms.py
"""
tests/test_declension_forms.py
------------------------------

Properties every shipped declension must have:

- form keys are unique within each form list;
- every dimension of a form is a legal value of its declension;
- approximate lookups always land on a form of the declension.

Parametrised over the whole language catalog.
"""

from __future__ import annotations

import pytest

from declension.enums import (
    LanguageArticle,
    LanguageCase,
    LanguageGender,
    LanguageNumber,
    LanguagePossessive,
    LanguageStartsWith,
    TermType,
)
from declension.errors import UnsupportedOperationError
from declension.forms import NounForm, SimpleModifierForm
from declension.forwarding import unwrap
from declension.language import get_catalog

ALL_LOCALES = [language.locale for language in get_catalog()]


def _keys(forms):
    return [form.key for form in forms]


@pytest.mark.parametrize("locale", ALL_LOCALES)
def test_noun_form_keys_are_unique(declension_for, locale: str) -> None:
    """No two noun forms of one declension share a key."""
    keys = _keys(declension_for(locale).all_noun_forms)
    assert keys, f"{locale} has no noun forms"
    assert len(keys) == len(set(keys)), f"duplicate noun form keys in {locale}"


@pytest.mark.parametrize("locale", ALL_LOCALES)
def test_adjective_form_keys_are_unique(declension_for, locale: str) -> None:
    keys = _keys(declension_for(locale).adjective_forms)
    assert keys, f"{locale} has no adjective forms"
    assert len(keys) == len(set(keys)), f"duplicate adjective form keys in {locale}"


@pytest.mark.parametrize("locale", ALL_LOCALES)
def test_article_form_keys_are_unique(declension_for, locale: str) -> None:
    declension = declension_for(locale)
    if not declension.has_article:
        pytest.skip(f"{locale} has no article words")
    keys = _keys(declension.article_forms)
    assert keys
    assert len(keys) == len(set(keys))


@pytest.mark.parametrize("locale", ["eu", "bg", "ta", "ja", "ru"])
def test_article_forms_raise_without_articles(declension_for, locale: str) -> None:
    with pytest.raises(UnsupportedOperationError):
        declension_for(locale).article_forms


@pytest.mark.parametrize("locale", ALL_LOCALES)
def test_noun_form_subsets(declension_for, locale: str) -> None:
    """Entity, field and other forms are drawn from the full list."""
    declension = declension_for(locale)
    all_forms = set(declension.all_noun_forms)
    for subset in (declension.entity_forms, declension.field_forms, declension.other_forms):
        assert subset
        assert set(subset) <= all_forms


@pytest.mark.parametrize("locale", ALL_LOCALES)
def test_noun_form_dimensions_are_legal(declension_for, locale: str) -> None:
    declension = declension_for(locale)
    for form in declension.all_noun_forms:
        assert isinstance(form.number, LanguageNumber)
        assert isinstance(form.case, LanguageCase)
        assert isinstance(form.article, LanguageArticle)
        assert isinstance(form.possessive, LanguagePossessive)

        assert form.number in declension.allowed_numbers, f"{locale}: {form}"
        assert form.case in declension.allowed_cases, f"{locale}: {form}"
        assert form.possessive in declension.required_possessive, f"{locale}: {form}"
        assert (
            form.article is declension.default_article
            or form.article in declension.allowed_article_types
        ), f"{locale}: {form}"


@pytest.mark.parametrize("locale", ALL_LOCALES)
def test_adjective_form_dimensions_are_legal(declension_for, locale: str) -> None:
    declension = declension_for(locale)
    genders = declension.required_genders or ()
    for form in declension.adjective_forms:
        assert isinstance(form.gender, LanguageGender)
        assert isinstance(form.starts_with, LanguageStartsWith)
        assert isinstance(form.number, LanguageNumber)
        assert isinstance(form.case, LanguageCase)
        # the shared uninflected form keeps its neuter gender in gendered languages
        if declension.has_gender and form is not SimpleModifierForm.SINGULAR:
            assert form.gender in genders or form.gender is declension.default_gender, f"{locale}: {form}"


@pytest.mark.parametrize("locale", ALL_LOCALES)
def test_default_noun_form_resolves(declension_for, locale: str) -> None:
    """Singular and plural nominatives always resolve to a form."""
    declension = declension_for(locale)
    for number in (LanguageNumber.SINGULAR, LanguageNumber.PLURAL):
        form = declension.get_noun_form(number, LanguageCase.NOMINATIVE)
        assert isinstance(form, NounForm)
        assert form.case is declension.default_case


@pytest.mark.parametrize("locale", ALL_LOCALES)
def test_form_ordinals_follow_list_order(declension_for, locale: str) -> None:
    declension = unwrap(declension_for(locale))
    for i, form in enumerate(declension.all_noun_forms):
        assert declension.form_ordinal(TermType.NOUN, form) == i
    for i, form in enumerate(declension.adjective_forms):
        assert declension.form_ordinal(TermType.ADJECTIVE, form) == i


@pytest.mark.parametrize("locale", ["mt", "ga", "cy"])
def test_uninflected_adjectives_share_the_single_modifier_form(declension_for, locale: str) -> None:
    declension = declension_for(locale)
    assert declension.has_gender
    assert tuple(declension.adjective_forms) == SimpleModifierForm.ALL
