# tests/test_terms.py
"""
tests/test_terms.py
-------------------

Word store behaviour shared by every family:

- values written with `set_string` read back unchanged, before and after
  `make_skinny`;
- defaulted lookups are stable;
- clones own their storage;
- JSON export carries only what the language distinguishes.
"""

from __future__ import annotations

import json

import pytest

from declension.enums import (
    LanguageArticle,
    LanguageCase,
    LanguageGender,
    LanguageNumber,
    LanguagePossessive,
    LanguageStartsWith,
    NounType,
)
from declension.forms import PluralNounForm
from declension.language import get_catalog

ALL_LOCALES = [language.locale for language in get_catalog()]


def _entity_noun(declension, values_per_form):
    noun = declension.create_noun(
        "Account",
        noun_type=NounType.ENTITY,
        gender=declension.default_gender,
    )
    for form, value in values_per_form.items():
        noun.set_string(form, value)
    return noun


def _distinct_values(declension):
    return {form: f"value{i}" for i, form in enumerate(declension.entity_forms)}


@pytest.mark.parametrize("locale", ALL_LOCALES)
def test_set_string_round_trip(declension_for, locale: str) -> None:
    """Every stored entity form reads back exactly, also after make_skinny."""
    declension = declension_for(locale)
    values = _distinct_values(declension)
    noun = _entity_noun(declension, values)

    for form, value in values.items():
        assert noun.get_string(form) == value, f"{locale}: {form}"

    noun.make_skinny()
    for form, value in values.items():
        assert noun.get_string(form) == value, f"{locale}: {form} after make_skinny"


@pytest.mark.parametrize("locale", ALL_LOCALES)
def test_default_string_is_stable(declension_for, locale: str) -> None:
    declension = declension_for(locale)
    noun = _entity_noun(declension, _distinct_values(declension))

    first = noun.get_default_string(False)
    assert first is not None
    assert noun.get_default_string(False) == first
    noun.make_skinny()
    assert noun.get_default_string(False) == first


def test_plural_default_falls_back_to_singular(declension_for) -> None:
    noun = declension_for("ru").create_noun("Account")
    singular = declension_for("ru").get_noun_form(LanguageNumber.SINGULAR, LanguageCase.NOMINATIVE)
    noun.set_string(singular, "Счёт")

    assert noun.get_default_string(True) == "Счёт"


def test_close_but_no_cigar_drops_case_then_number(declension_for) -> None:
    declension = declension_for("ru")
    noun = declension.create_noun("Account")
    noun.set_string(declension.get_noun_form(LanguageNumber.SINGULAR, LanguageCase.NOMINATIVE), "Счёт")

    genitive_plural = declension.get_exact_noun_form(
        LanguageNumber.PLURAL, LanguageCase.GENITIVE, LanguagePossessive.NONE, LanguageArticle.ZERO
    )
    assert noun.get_string(genitive_plural) is None
    assert noun.get_closest_string(genitive_plural) is None

    nominative_plural = declension.get_noun_form(LanguageNumber.PLURAL, LanguageCase.NOMINATIVE)
    assert noun.get_closest_string(nominative_plural) == "Счёт"


def test_entity_noun_validation_fills_missing_forms(declension_for) -> None:
    declension = declension_for("pl")
    noun = declension.create_noun("Account", noun_type=NounType.ENTITY, gender=LanguageGender.NEUTER)
    singular = declension.get_noun_form(LanguageNumber.SINGULAR, LanguageCase.NOMINATIVE)
    noun.set_string(singular, "Konto")

    assert noun.validate("Account") is True
    for form in declension.all_noun_forms:
        assert noun.get_string(form) == "Konto"


def test_non_entity_noun_needs_field_forms(declension_for) -> None:
    declension = declension_for("pl")
    noun = declension.create_noun("Stage", gender=LanguageGender.MASCULINE)
    noun.set_string(declension.get_noun_form(LanguageNumber.SINGULAR, LanguageCase.NOMINATIVE), "Etap")

    assert noun.validate("Stage") is False
    noun.set_string(declension.get_noun_form(LanguageNumber.PLURAL, LanguageCase.NOMINATIVE), "Etapy")
    assert noun.validate("Stage") is True


def test_invalid_gender_is_repaired(declension_for) -> None:
    declension = declension_for("de")
    noun = declension.create_noun("Account", gender=LanguageGender.CLASS_I)

    assert noun.validate_gender("Account") is True
    assert noun.gender is declension.default_gender


def test_clone_owns_its_values(declension_for) -> None:
    declension = declension_for("cs")
    noun = declension.create_noun("Account", gender=LanguageGender.MASCULINE)
    singular = declension.get_noun_form(LanguageNumber.SINGULAR, LanguageCase.NOMINATIVE)
    noun.set_string(singular, "Účet")
    noun.make_skinny()

    copy = noun.clone(
        gender_override=LanguageGender.FEMININE,
        value_overrides={singular: "Faktura"},
    )

    assert copy.gender is LanguageGender.FEMININE
    assert copy.get_string(singular) == "Faktura"
    assert noun.get_string(singular) == "Účet"
    assert noun.gender is LanguageGender.MASCULINE


def test_clone_applies_starts_with_override_last(declension_for) -> None:
    noun = declension_for("en_US").create_noun("Account", starts_with=LanguageStartsWith.VOWEL)
    copy = noun.clone(starts_with_override=LanguageStartsWith.CONSONANT)

    assert copy.starts_with is LanguageStartsWith.CONSONANT
    assert noun.starts_with is LanguageStartsWith.VOWEL


def test_nouns_compare_by_name_and_values(declension_for) -> None:
    declension = declension_for("en_US")
    first = declension.create_noun("Account")
    second = declension.create_noun("Account")
    for noun in (first, second):
        noun.set_string(PluralNounForm.SINGULAR, "Account")

    assert first == second
    assert hash(first) == hash(second)

    second.set_string(PluralNounForm.PLURAL, "Accounts")
    assert first != second


def test_make_skinny_orders_values_by_form_ordinal(declension_for) -> None:
    declension = declension_for("ru")
    forms = list(declension.all_noun_forms[:4])
    noun = declension.create_noun("Account", gender=LanguageGender.MASCULINE)
    for i, form in reversed(list(enumerate(forms))):
        noun.set_string(form, f"value{i}")

    noun.make_skinny()

    assert list(noun.get_all_defined_values()) == forms


def test_noun_hash_is_stable_while_values_load(declension_for) -> None:
    declension = declension_for("el")
    noun = declension.create_noun("City", gender=LanguageGender.FEMININE)
    before = hash(noun)

    noun.set_string(declension.all_noun_forms[0], "πόλη")

    assert noun.starts_with is LanguageStartsWith.SPECIAL
    assert hash(noun) == before


def test_to_json_only_carries_known_dimensions(declension_for) -> None:
    german = declension_for("de").create_noun("Account", gender=LanguageGender.NEUTER)
    german.set_string(declension_for("de").all_noun_forms[0], "Konto")
    data = json.loads(german.to_json())

    assert data == {"t": "n", "l": "Account", "g": "n", "v": {"0-n": "Konto"}}

    japanese = declension_for("ja").create_noun("Account")
    japanese.set_string(declension_for("ja").all_noun_forms[0], "取引先")
    japanese.set_classifier("件")
    data = json.loads(japanese.to_json())

    assert "g" not in data
    assert data["c"] == "件"
    assert data["v"] == {"s": "取引先"}


def test_simple_noun_has_one_value(declension_for) -> None:
    declension = declension_for("th")
    noun = declension.create_noun("Account")
    noun.set_string(declension.all_noun_forms[0], "บัญชี")

    plural = declension.get_noun_form(LanguageNumber.PLURAL, LanguageCase.GENITIVE)
    assert noun.get_string(plural) == "บัญชี"
    assert noun.validate("Account") is True
    assert declension.create_noun("Empty").validate("Empty") is False


def test_adjective_defaults_from_nearest_form(declension_for) -> None:
    declension = declension_for("de")
    adjective = declension.create_adjective("new")
    base = declension.get_adjective_form(
        LanguageStartsWith.CONSONANT,
        LanguageGender.NEUTER,
        LanguageNumber.SINGULAR,
        LanguageCase.NOMINATIVE,
        LanguageArticle.ZERO,
        LanguagePossessive.NONE,
    )
    adjective.set_string(base, "neues")

    assert adjective.validate("new") is True
    for form in declension.adjective_forms:
        assert adjective.get_string(form) is not None

    feminine = declension.get_adjective_form(
        LanguageStartsWith.CONSONANT,
        LanguageGender.FEMININE,
        LanguageNumber.SINGULAR,
        LanguageCase.NOMINATIVE,
        LanguageArticle.ZERO,
        LanguagePossessive.NONE,
    )
    adjective.set_string(feminine, "neue")
    assert adjective.get_agreeing_string(
        LanguageNumber.SINGULAR, LanguageGender.FEMININE, LanguageStartsWith.CONSONANT
    ) == "neue"


def test_adjective_without_value_fails_validation(declension_for) -> None:
    # Germanic adjectives only log missing forms
    adjective = declension_for("de").create_adjective("new")
    assert adjective.validate("new") is True
    assert declension_for("ja").create_adjective("new").validate("new") is False


def test_terms_sort_by_language_then_type_then_name(declension_for) -> None:
    german = declension_for("de")
    english = declension_for("en_US")
    terms = [
        german.create_noun("b"),
        german.create_adjective("a"),
        english.create_noun("z"),
        german.create_noun("a"),
    ]
    ordered = sorted(terms)

    assert [(t.declension.language.locale, t.name) for t in ordered] == [
        ("en_US", "z"),
        ("de", "a"),
        ("de", "b"),
        ("de", "a"),
    ]
