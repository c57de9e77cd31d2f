# tests/test_persistence.py
"""
tests/test_persistence.py
-------------------------

Form references persisted as (language, term type, ordinal).
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from declension.enums import LanguageCase, TermType
from declension.errors import FormResolutionError
from declension.families.english import EnglishArticleForm
from declension.forms import NounForm, PluralNounForm
from declension.persistence import (
    FormRef,
    deserialize_form_map,
    form_ref,
    resolve_form_ref,
    serialize_form_map,
)


def test_form_ref_resolves_to_the_same_form(factory, declension_for) -> None:
    german = declension_for("de")
    form = german.all_noun_forms[3]

    ref = form_ref(german, form)

    assert ref == FormRef(language="de", term_type=TermType.NOUN, ordinal=3)
    assert resolve_form_ref(factory, ref) == form


def test_article_form_ref(declension_for) -> None:
    ref = form_ref(declension_for("en_US"), EnglishArticleForm.PLURAL)
    assert ref.term_type is TermType.ARTICLE
    assert ref.ordinal == 2


def test_form_ref_keeps_dialect_locale(factory, declension_for) -> None:
    ref = form_ref(declension_for("en_CA"), PluralNounForm.PLURAL)

    assert ref.language == "en_CA"
    assert resolve_form_ref(factory, ref) is PluralNounForm.PLURAL


def test_foreign_form_has_no_ref(declension_for) -> None:
    with pytest.raises(FormResolutionError):
        form_ref(declension_for("de"), NounForm(case=LanguageCase.ERGATIVE))


def test_out_of_range_ordinal(factory) -> None:
    ref = FormRef(language="de", term_type=TermType.NOUN, ordinal=999)
    with pytest.raises(FormResolutionError):
        resolve_form_ref(factory, ref)


def test_negative_ordinal_is_rejected() -> None:
    with pytest.raises(ValidationError):
        FormRef(language="de", term_type=TermType.NOUN, ordinal=-1)


def test_form_ref_json(factory, declension_for) -> None:
    ref = form_ref(declension_for("ru"), declension_for("ru").all_noun_forms[5])
    restored = FormRef.model_validate_json(ref.model_dump_json())

    assert restored == ref
    assert resolve_form_ref(factory, restored) == declension_for("ru").all_noun_forms[5]


def test_value_map_round_trip(declension_for) -> None:
    german = declension_for("de")
    noun = german.create_noun("Account")
    for form, value in zip(german.all_noun_forms, ("Konto", "Kontos", "Konten")):
        noun.set_string(form, value)

    data = serialize_form_map(german, TermType.NOUN, noun.get_all_defined_values())

    assert data == [(0, "Konto"), (1, "Kontos"), (2, "Konten")]
    assert deserialize_form_map(german, TermType.NOUN, data) == dict(noun.get_all_defined_values())


def test_serialized_map_skips_missing_values(declension_for) -> None:
    english = declension_for("en_US")
    values = {PluralNounForm.PLURAL: "Accounts", PluralNounForm.SINGULAR: None}

    assert serialize_form_map(english, TermType.NOUN, values) == [(1, "Accounts")]
