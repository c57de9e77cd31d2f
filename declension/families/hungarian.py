"""
declension/families/hungarian.py
--------------------------------

Hungarian: no gender, seventeen cases and possessive suffixes on nouns.
Starts-with matters only for the definite article ("a" / "az").
Adjectives do not inflect.
"""

from __future__ import annotations

from typing import Optional, Sequence

import structlog

from declension.base import ArticledDeclension
from declension.enums import (
    LanguageArticle,
    LanguageCase,
    LanguageGender,
    LanguageNumber,
    LanguagePossessive,
    LanguageStartsWith,
    NounType,
)
from declension.errors import UnsupportedOperationError
from declension.form_maps import NounFormMap
from declension.forms import AdjectiveForm, ArticleForm, NounForm, SimpleModifierForm, make_key
from declension.stores import ComplexArticle, ComplexArticledNoun, SimpleAdjectiveWithStartsWith
from declension.terms import VALIDATION_WARNING_HEADER
from declension.traits import ARTICLED_TRAITS

logger = structlog.get_logger()

C = LanguageCase
SG = LanguageNumber.SINGULAR
PL = LanguageNumber.PLURAL
VOWEL = LanguageStartsWith.VOWEL
CONSONANT = LanguageStartsWith.CONSONANT


class HungarianArticleForm:
    SINGULAR = ArticleForm(number=SG, starts_with=CONSONANT)
    SINGULAR_V = ArticleForm(number=SG, starts_with=VOWEL)
    PLURAL = ArticleForm(number=PL, starts_with=CONSONANT)
    PLURAL_V = ArticleForm(number=PL, starts_with=VOWEL)
    ALL = (SINGULAR, SINGULAR_V, PLURAL, PLURAL_V)


class HungarianNoun(ComplexArticledNoun):
    def __init__(self, declension, name, plural_alias=None, noun_type=NounType.OTHER,
                 entity_name=None, starts_with=None, gender=None, access=None,
                 is_standard_field=False, is_copied_from_default=False):
        super().__init__(declension, name, plural_alias, noun_type, entity_name,
                         starts_with, LanguageGender.NEUTER, access, is_standard_field,
                         is_copied_from_default)

    def validate_values(self, name: str, case: LanguageCase = LanguageCase.NOMINATIVE) -> bool:
        return self.default_validate(name, self.declension.field_forms)

    def validate_gender(self, name: str) -> bool:
        if self.gender is not LanguageGender.NEUTER:
            logger.info(f"{VALIDATION_WARNING_HEADER}{name} must be neuter")
        return super().validate_gender(name)


class HungarianArticle(ComplexArticle):
    def validate(self, name: str) -> bool:
        form = self.declension.get_article_form(CONSONANT, LanguageGender.NEUTER, SG, C.NOMINATIVE)
        self.default_validate(name, {form})
        return True


class HungarianDeclension(ArticledDeclension):
    traits = ARTICLED_TRAITS.derive(
        has_starts_with=True,
        has_possessive=True,
        required_starts_with=(CONSONANT, VOWEL),
        required_possessive=(
            LanguagePossessive.NONE,
            LanguagePossessive.FIRST,
            LanguagePossessive.SECOND,
        ),
        required_cases=(
            C.NOMINATIVE, C.ACCUSATIVE, C.ILLATIVE, C.INESSIVE, C.ELATIVE, C.SUBLATIVE,
            C.SUPERESSIVE, C.DELATIVE, C.ALLATIVE, C.ABLATIVE, C.DATIVE, C.INSTRUMENTAL,
            C.TRANSLATIVE, C.CAUSALFINAL, C.ESSIVEFORMAL, C.TERMINATIVE, C.DISTRIBUTIVE,
        ),
    )
    noun_class = HungarianNoun
    article_class = HungarianArticle

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
        self._noun_form_map = NounFormMap.possessive_specific(self._entity_forms)

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
        return SimpleModifierForm.ALL

    @property
    def article_forms(self) -> Sequence[ArticleForm]:
        return HungarianArticleForm.ALL

    def create_adjective(self, name, starts_with=None, position=None):
        return SimpleAdjectiveWithStartsWith(self, name, starts_with, position)

    def get_adjective_form(self, starts_with, gender, number, case, article, possessive):
        return SimpleModifierForm.SINGULAR

    def get_article_form(self, starts_with, gender, number, case) -> ArticleForm:
        if number.is_plural:
            return HungarianArticleForm.PLURAL_V if starts_with is VOWEL else HungarianArticleForm.PLURAL
        return HungarianArticleForm.SINGULAR_V if starts_with is VOWEL else HungarianArticleForm.SINGULAR

    def get_exact_noun_form(self, number, case, possessive, article) -> Optional[NounForm]:
        if article is not LanguageArticle.ZERO:
            return None
        form_map = self._noun_form_map.get(possessive)
        return None if form_map is None else form_map.get_form(number, case)

    def get_default_article_string(self, form, article_type) -> Optional[str]:
        if article_type is LanguageArticle.INDEFINITE:
            return "Egy " if form.number is SG else None
        if article_type is LanguageArticle.DEFINITE:
            return "Az " if form.starts_with is VOWEL else "A "
        if article_type is LanguageArticle.ZERO:
            return None
        raise UnsupportedOperationError("Invalid article")
