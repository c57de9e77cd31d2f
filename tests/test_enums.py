# tests/test_enums.py
"""
tests/test_enums.py
-------------------

Dimension enums (persisted db and api values) and the form maps built on
top of them.
"""

from __future__ import annotations

import pytest

from declension.enums import (
    LanguageArticle,
    LanguageCase,
    LanguageGender,
    LanguageNumber,
    LanguagePossessive,
    NounType,
    ordered,
)
from declension.errors import DuplicateFormError
from declension.form_maps import ModifierFormMap, NounFormMap
from declension.forms import AdjectiveForm, NounForm


def test_db_and_api_values() -> None:
    assert LanguageCase.from_db_value("g") is LanguageCase.GENITIVE
    assert LanguageCase.from_db_value("zz") is None
    assert LanguageCase.from_db_value(None) is None
    assert LanguageCase.from_api_value("Genitive") is LanguageCase.GENITIVE
    assert LanguageCase.from_api_value("genitive") is None
    # the persisted api value keeps its spelling
    assert LanguageCase.TERMINATIVE.api_value == "Termanative"


def test_gender_aliases() -> None:
    assert LanguageGender.COMMON is LanguageGender.FEMININE
    assert LanguageGender.EUTER is LanguageGender.FEMININE
    assert LanguageGender.from_label_value("c") is LanguageGender.FEMININE
    assert LanguageGender.from_label_value("Ki-vi") is LanguageGender.CLASS_VII
    assert LanguageGender.from_label_value("?") is None


def test_number_labels() -> None:
    assert LanguageNumber.from_label_value("other") is LanguageNumber.PLURAL
    assert LanguageNumber.from_label_value("y") is LanguageNumber.PLURAL
    assert LanguageNumber.from_label_value("D") is LanguageNumber.DUAL
    assert LanguageNumber.from_label_value(None) is LanguageNumber.SINGULAR
    assert LanguageNumber.from_int_value(1) is LanguageNumber.PLURAL
    assert not LanguageNumber.DUAL.is_plural


def test_article_and_possessive_labels() -> None:
    assert LanguageArticle.from_label_value("the") is LanguageArticle.DEFINITE
    assert LanguageArticle.from_label_value("Mass") is LanguageArticle.PARTITIVE
    assert LanguageArticle.from_label_value("None") is None
    assert LanguagePossessive.from_label_value("F") is LanguagePossessive.FIRST_PLURAL
    assert LanguagePossessive.FIRST_PLURAL.label_value == "fpl"


def test_noun_type_api_values() -> None:
    assert NounType.get_by_api_value("ENTITY") is NounType.ENTITY
    assert NounType.get_by_api_value("other") is NounType.OTHER
    assert NounType.get_by_api_value(None) is NounType.OTHER
    assert NounType.OTHER.api_value is None


def test_ordered_follows_definition_order() -> None:
    cases = ordered([LanguageCase.DATIVE, LanguageCase.NOMINATIVE, LanguageCase.DATIVE])
    assert cases == (LanguageCase.NOMINATIVE, LanguageCase.DATIVE)


def test_noun_form_map_lookup() -> None:
    forms = [
        NounForm(number=LanguageNumber.SINGULAR, case=LanguageCase.NOMINATIVE),
        NounForm(number=LanguageNumber.PLURAL, case=LanguageCase.GENITIVE),
    ]
    form_map = NounFormMap(forms)

    assert form_map.get_form(LanguageNumber.PLURAL, LanguageCase.GENITIVE) is forms[1]
    assert form_map.get_form(LanguageNumber.PLURAL, LanguageCase.NOMINATIVE) is None
    assert form_map.get_form(None, LanguageCase.NOMINATIVE) is None


def test_noun_form_map_rejects_duplicates() -> None:
    forms = [NounForm(key="a"), NounForm(key="b")]
    with pytest.raises(DuplicateFormError):
        NounFormMap(forms)


def test_modifier_form_map_rejects_duplicates() -> None:
    forms = [
        AdjectiveForm(gender=LanguageGender.MASCULINE, key="a"),
        AdjectiveForm(gender=LanguageGender.MASCULINE, key="b"),
    ]
    with pytest.raises(DuplicateFormError):
        ModifierFormMap(forms)


def test_forms_compare_by_class_and_fields() -> None:
    assert NounForm() == NounForm()
    assert NounForm(key="x") != NounForm(key="y")
    assert NounForm() != AdjectiveForm()
