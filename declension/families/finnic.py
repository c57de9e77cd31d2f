"""
declension/families/finnic.py
-----------------------------

Finnish and Estonian: no gender, many cases. Finnish nouns also take the
first and second person possessive suffixes (talo, taloni, talosi).
"""

from __future__ import annotations

from typing import Sequence

import structlog

from declension.base import LanguageDeclension
from declension.enums import (
    LanguageArticle,
    LanguageCase,
    LanguageGender,
    LanguageNumber,
    LanguagePossessive,
    LanguageStartsWith,
    NounType,
)
from declension.forms import AdjectiveForm, NounForm, make_key
from declension.stores import ComplexAdjective, ComplexNoun
from declension.terms import VALIDATION_WARNING_HEADER
from declension.traits import DEFAULT_TRAITS

logger = structlog.get_logger()

C = LanguageCase
SG = LanguageNumber.SINGULAR
PL = LanguageNumber.PLURAL


class FinnishNoun(ComplexNoun):
    def __init__(self, declension, name, plural_alias=None, noun_type=NounType.OTHER,
                 entity_name=None, starts_with=None, gender=None, access=None,
                 is_standard_field=False, is_copied_from_default=False):
        super().__init__(declension, name, plural_alias, noun_type, entity_name,
                         LanguageStartsWith.CONSONANT, LanguageGender.NEUTER, access,
                         is_standard_field, is_copied_from_default)

    def validate_values(self, name: str, case: LanguageCase = LanguageCase.NOMINATIVE) -> bool:
        return self.default_validate(name, self.declension.field_forms)

    def validate_gender(self, name: str) -> bool:
        if self.gender is not LanguageGender.NEUTER:
            logger.info(f"{VALIDATION_WARNING_HEADER}{name} invalid gender")
            self.gender = self.declension.default_gender
        return True


class FinnishAdjective(ComplexAdjective):
    def validate(self, name: str) -> bool:
        form = self.declension.get_adjective_form(
            LanguageStartsWith.CONSONANT,
            LanguageGender.NEUTER,
            SG,
            LanguageCase.NOMINATIVE,
            LanguageArticle.ZERO,
            LanguagePossessive.NONE,
        )
        self.default_validate(name, {form})
        return True


class FinnishDeclension(LanguageDeclension):
    traits = DEFAULT_TRAITS.derive(
        has_possessive=True,
        required_possessive=(
            LanguagePossessive.NONE,
            LanguagePossessive.FIRST,
            LanguagePossessive.SECOND,
        ),
        required_cases=(
            C.NOMINATIVE, C.GENITIVE, C.INESSIVE, C.ELATIVE, C.ILLATIVE, C.ADESSIVE,
            C.ABLATIVE, C.ALLATIVE, C.ESSIVE, C.TRANSLATIVE, C.PARTITIVE,
        ),
    )
    noun_class = FinnishNoun
    adjective_class = FinnishAdjective

    def __init__(self, language):
        super().__init__(language)
        self._entity_forms = tuple(
            NounForm(number=number, case=case, possessive=possessive,
                     key=make_key(number, case, possessive))
            for number in (SG, PL)
            for case in self.required_cases
            for possessive in self.required_possessive
        )
        self._field_forms = tuple(
            f for f in self._entity_forms
            if f.case is C.NOMINATIVE and f.possessive is LanguagePossessive.NONE
        )
        self._adjective_forms = tuple(
            AdjectiveForm(number=number, case=case)
            for number in (SG, PL)
            for case in self.required_cases
        )

    @property
    def all_noun_forms(self) -> Sequence[NounForm]:
        return self._entity_forms

    @property
    def field_forms(self) -> Sequence[NounForm]:
        return self._field_forms

    @property
    def other_forms(self) -> Sequence[NounForm]:
        return self._field_forms[:1]

    @property
    def adjective_forms(self) -> Sequence[AdjectiveForm]:
        return self._adjective_forms


class EstonianDeclension(FinnishDeclension):
    traits = FinnishDeclension.traits.derive(
        has_possessive=False,
        required_possessive=(LanguagePossessive.NONE,),
        required_cases=(
            C.NOMINATIVE, C.GENITIVE, C.PARTITIVE, C.ILLATIVE, C.INESSIVE, C.ELATIVE,
            C.ALLATIVE, C.ADESSIVE, C.ABLATIVE, C.TRANSLATIVE, C.TERMINATIVE, C.ESSIVE,
            C.ABESSIVE, C.COMITATIVE,
        ),
    )
