"""
declension/families/turkic.py
-----------------------------

Turkish and Kazakh: no gender and no definite article; nouns vary by
number x case x possessive suffix. Modifiers do not inflect.
"""

from __future__ import annotations

from typing import Optional, Sequence

import structlog

from declension.base import ArticledDeclension
from declension.enums import (
    LanguageArticle,
    LanguageCase,
    LanguageGender,
    LanguagePossessive,
    NounType,
)
from declension.forms import AdjectiveForm, ArticleForm, NounForm, SimpleModifierForm, make_key
from declension.stores import ComplexArticledNoun, SimpleAdjective, SimpleArticle
from declension.terms import VALIDATION_WARNING_HEADER
from declension.traits import ARTICLED_TRAITS

logger = structlog.get_logger()

C = LanguageCase


class TurkishNoun(ComplexArticledNoun):
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


class TurkicDeclension(ArticledDeclension):
    traits = ARTICLED_TRAITS.derive(
        has_possessive=True,
        allowed_article_types=(LanguageArticle.ZERO, LanguageArticle.INDEFINITE),
        required_possessive=(
            LanguagePossessive.NONE,
            LanguagePossessive.FIRST,
            LanguagePossessive.SECOND,
        ),
        required_cases=(C.NOMINATIVE, C.ACCUSATIVE, C.DATIVE, C.LOCATIVE, C.GENITIVE, C.ABLATIVE),
    )
    noun_class = TurkishNoun
    adjective_class = SimpleAdjective
    article_class = SimpleArticle

    INDEFINITE_ARTICLE = "Bir "

    def __init__(self, language):
        super().__init__(language)
        self._entity_forms = tuple(
            NounForm(number=number, case=case, possessive=possessive,
                     key=make_key(number, case, possessive))
            for number in self.allowed_numbers
            for case in self.required_cases
            for possessive in self.required_possessive
        )
        self._field_forms = tuple(
            f for f in self._entity_forms
            if f.case is C.NOMINATIVE and f.possessive is LanguagePossessive.NONE
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
        return SimpleModifierForm.ALL

    @property
    def article_forms(self) -> Sequence[ArticleForm]:
        return SimpleModifierForm.ALL

    def get_adjective_form(self, starts_with, gender, number, case, article, possessive):
        return SimpleModifierForm.SINGULAR

    def get_article_form(self, starts_with, gender, number, case):
        return SimpleModifierForm.SINGULAR

    def get_default_article_string(self, form, article_type) -> Optional[str]:
        if article_type is LanguageArticle.INDEFINITE:
            return self.INDEFINITE_ARTICLE
        return None


class TurkishDeclension(TurkicDeclension):
    pass


class KazakhDeclension(TurkicDeclension):
    traits = TurkicDeclension.traits.derive(
        required_cases=(
            C.NOMINATIVE, C.ACCUSATIVE, C.DATIVE, C.LOCATIVE, C.GENITIVE, C.ABLATIVE,
            C.INSTRUMENTAL,
        )
    )
    INDEFINITE_ARTICLE = "Бір "
