"""
declension/families/slavic.py
-----------------------------

Czech, Polish, Russian, Ukrainian, Slovak, Slovenian and the
Serbo-Croatian variants, plus Georgian which reuses the same case-driven
layout without gender.

Nouns vary by number x case; adjectives by number x gender x case.
Adjectives of West and East Slavic languages have an animate masculine
gender, but only in the few (number, case) slots where it differs from
the masculine.
"""

from __future__ import annotations

from typing import Dict, Optional, Sequence, Tuple

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
from declension.form_maps import ModifierFormMap, NounFormMap
from declension.forms import AdjectiveForm, NounForm, make_key
from declension.stores import ComplexAdjective, ComplexNoun
from declension.terms import VALIDATION_WARNING_HEADER
from declension.traits import DEFAULT_TRAITS

logger = structlog.get_logger()

NOM = LanguageCase.NOMINATIVE
ACC = LanguageCase.ACCUSATIVE
DAT = LanguageCase.DATIVE
GEN = LanguageCase.GENITIVE
INS = LanguageCase.INSTRUMENTAL
LOC = LanguageCase.LOCATIVE
VOC = LanguageCase.VOCATIVE
SG = LanguageNumber.SINGULAR
PL = LanguageNumber.PLURAL

WEST_SLAVIC_CASES = (NOM, ACC, DAT, GEN, INS, LOC, VOC)
WEST_SLAVIC_CASES_NO_VOC = (NOM, ACC, DAT, GEN, INS, LOC)
WEST_SLAVIC_GENDERS = (
    LanguageGender.NEUTER,
    LanguageGender.MASCULINE,
    LanguageGender.FEMININE,
    LanguageGender.ANIMATE_MASCULINE,
)


class SlavicNoun(ComplexNoun):
    def __init__(self, declension, name, plural_alias=None, noun_type=NounType.OTHER,
                 entity_name=None, starts_with=None, gender=None, access=None,
                 is_standard_field=False, is_copied_from_default=False):
        super().__init__(declension, name, plural_alias, noun_type, entity_name,
                         LanguageStartsWith.CONSONANT, gender, access, is_standard_field,
                         is_copied_from_default)

    def validate_values(self, name: str, case: LanguageCase = LanguageCase.NOMINATIVE) -> bool:
        return self.default_validate(name, self.declension.field_forms)

    def validate_gender(self, name: str) -> bool:
        decl = self.declension
        if decl.has_gender and self.gender not in decl.required_genders:
            logger.info(f"{VALIDATION_WARNING_HEADER}{name} invalid gender")
            self.gender = decl.default_gender
        return True


class SlavicDeclension(LanguageDeclension):
    traits = DEFAULT_TRAITS.derive(
        has_gender=True,
        required_genders=(LanguageGender.NEUTER, LanguageGender.FEMININE, LanguageGender.MASCULINE),
    )
    noun_class = SlavicNoun
    adjective_class = ComplexAdjective

    # number -> cases with a distinct animate masculine adjective form
    MASCULINE_ANIMATE_FORMS: Optional[Dict[LanguageNumber, Tuple[LanguageCase, ...]]] = None

    def __init__(self, language):
        super().__init__(language)
        self._noun_forms = tuple(
            NounForm(number=number, case=case, key=make_key(number, case))
            for number in (SG, PL)
            for case in self.required_cases
        )
        self._noun_form_map = NounFormMap(self._noun_forms)

        genders = self.required_genders if self.has_gender else (self.default_gender,)
        adjective_forms = [
            AdjectiveForm(gender=gender, number=number, case=case)
            for number in (SG, PL)
            for gender in genders
            if gender is not LanguageGender.ANIMATE_MASCULINE
            for case in self.required_cases
        ]
        for number, cases in (self.MASCULINE_ANIMATE_FORMS or {}).items():
            adjective_forms.extend(
                AdjectiveForm(gender=LanguageGender.ANIMATE_MASCULINE, number=number, case=case)
                for case in cases
            )
        self._adjective_forms = tuple(adjective_forms)
        self._adjective_form_map = ModifierFormMap(self._adjective_forms)

    @property
    def all_noun_forms(self) -> Sequence[NounForm]:
        return self._noun_forms

    @property
    def field_forms(self) -> Sequence[NounForm]:
        return tuple(f for f in self._noun_forms if f.case is NOM)

    @property
    def other_forms(self) -> Sequence[NounForm]:
        return self._noun_forms[:1]

    @property
    def adjective_forms(self) -> Sequence[AdjectiveForm]:
        return self._adjective_forms

    def get_adjective_form(self, starts_with, gender, number, case, article, possessive):
        if article is not LanguageArticle.ZERO:
            return None
        return self._adjective_form_map.get_form(starts_with, gender, number, case)

    def get_exact_noun_form(self, number, case, possessive, article) -> Optional[NounForm]:
        if article is not LanguageArticle.ZERO or possessive is not LanguagePossessive.NONE:
            return None
        return self._noun_form_map.get_form(number, case)


class CzechDeclension(SlavicDeclension):
    traits = SlavicDeclension.traits.derive(
        required_cases=WEST_SLAVIC_CASES, required_genders=WEST_SLAVIC_GENDERS
    )
    MASCULINE_ANIMATE_FORMS = {PL: (NOM, VOC), SG: (ACC,)}


class PolishDeclension(SlavicDeclension):
    traits = SlavicDeclension.traits.derive(
        required_cases=WEST_SLAVIC_CASES, required_genders=WEST_SLAVIC_GENDERS
    )
    MASCULINE_ANIMATE_FORMS = {PL: (NOM, ACC), SG: (ACC,)}


class RussianDeclension(SlavicDeclension):
    traits = SlavicDeclension.traits.derive(
        required_cases=(NOM, ACC, DAT, GEN, INS, LanguageCase.PREPOSITIONAL),
        required_genders=WEST_SLAVIC_GENDERS,
        should_lowercase_entity_in_compound_nouns=True,
    )
    MASCULINE_ANIMATE_FORMS = {PL: (ACC,), SG: (ACC,)}


class UkrainianDeclension(SlavicDeclension):
    traits = SlavicDeclension.traits.derive(
        required_cases=WEST_SLAVIC_CASES, required_genders=WEST_SLAVIC_GENDERS
    )
    MASCULINE_ANIMATE_FORMS = {PL: (ACC,), SG: (ACC,)}


class SlovakianDeclension(SlavicDeclension):
    traits = SlavicDeclension.traits.derive(
        required_cases=WEST_SLAVIC_CASES_NO_VOC, required_genders=WEST_SLAVIC_GENDERS
    )
    MASCULINE_ANIMATE_FORMS = {PL: (NOM, ACC), SG: (ACC,)}


class SlovenianDeclension(SlavicDeclension):
    traits = SlavicDeclension.traits.derive(
        required_cases=WEST_SLAVIC_CASES, required_genders=WEST_SLAVIC_GENDERS
    )
    MASCULINE_ANIMATE_FORMS = {SG: (ACC,)}


class SerboCroatianDeclension(SlavicDeclension):
    traits = SlavicDeclension.traits.derive(required_cases=WEST_SLAVIC_CASES_NO_VOC)


class GeorgianDeclension(SlavicDeclension):
    traits = SlavicDeclension.traits.derive(
        has_gender=False,
        required_genders=None,
        required_cases=(NOM, LanguageCase.ERGATIVE, DAT, GEN, INS, LanguageCase.ADVERBIAL),
    )
