"""
declension/families/baltic.py
-----------------------------

Lithuanian and Latvian: Slavic-style number x case nouns with two genders,
feminine by default.
"""

from __future__ import annotations

from typing import Optional, Sequence

from declension.base import LanguageDeclension
from declension.enums import (
    LanguageArticle,
    LanguageCase,
    LanguageGender,
    LanguageNumber,
    LanguagePossessive,
    LanguageStartsWith,
)
from declension.families.slavic import WEST_SLAVIC_CASES_NO_VOC, SlavicNoun
from declension.form_maps import NounFormMap
from declension.forms import AdjectiveForm, NounForm, make_key
from declension.stores import ComplexAdjective
from declension.traits import DEFAULT_TRAITS

SG = LanguageNumber.SINGULAR
PL = LanguageNumber.PLURAL


class BalticAdjective(ComplexAdjective):
    def validate(self, name: str) -> bool:
        form = self.declension.get_adjective_form(
            LanguageStartsWith.CONSONANT,
            LanguageGender.FEMININE,
            SG,
            LanguageCase.NOMINATIVE,
            LanguageArticle.ZERO,
            LanguagePossessive.NONE,
        )
        return self.default_validate(name, {form})


class BalticDeclension(LanguageDeclension):
    traits = DEFAULT_TRAITS.derive(
        has_gender=True,
        required_genders=(LanguageGender.FEMININE, LanguageGender.MASCULINE),
        default_gender=LanguageGender.FEMININE,
        required_cases=WEST_SLAVIC_CASES_NO_VOC,
        allowed_article_types=(LanguageArticle.ZERO,),
    )
    noun_class = SlavicNoun
    adjective_class = BalticAdjective

    def __init__(self, language):
        super().__init__(language)
        self._noun_forms = tuple(
            NounForm(number=number, case=case, key=make_key(number, case))
            for number in (SG, PL)
            for case in self.required_cases
        )
        self._noun_form_map = NounFormMap(self._noun_forms)
        self._adjective_forms = tuple(
            AdjectiveForm(gender=gender, number=number, case=case, article=article)
            for number in (SG, PL)
            for gender in self.required_genders
            for case in self.required_cases
            for article in self.allowed_article_types
        )

    @property
    def all_noun_forms(self) -> Sequence[NounForm]:
        return self._noun_forms

    @property
    def field_forms(self) -> Sequence[NounForm]:
        return tuple(f for f in self._noun_forms if f.case is LanguageCase.NOMINATIVE)

    @property
    def other_forms(self) -> Sequence[NounForm]:
        return self._noun_forms[:1]

    @property
    def adjective_forms(self) -> Sequence[AdjectiveForm]:
        return self._adjective_forms

    def get_exact_noun_form(self, number, case, possessive, article) -> Optional[NounForm]:
        if article is not LanguageArticle.ZERO or possessive is not LanguagePossessive.NONE:
            return None
        return self._noun_form_map.get_form(number, case)
