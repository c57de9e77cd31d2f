"""
declension/families/armenian.py
-------------------------------

Armenian: no grammatical gender, seven cases and a definite article
suffixed to the noun. Adjectives do not inflect.
"""

from __future__ import annotations

from typing import Sequence

import structlog

from declension.base import LanguageDeclension
from declension.enums import LanguageArticle, LanguageCase, LanguageGender, NounType
from declension.forms import AdjectiveForm, ArticleForm, NounForm, SimpleModifierForm, make_key
from declension.form_maps import NounFormMap
from declension.stores import ComplexNoun, SimpleAdjective
from declension.terms import VALIDATION_WARNING_HEADER
from declension.traits import DEFAULT_TRAITS

logger = structlog.get_logger()


class ArmenianNoun(ComplexNoun):
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


class ArmenianDeclension(LanguageDeclension):
    traits = DEFAULT_TRAITS.derive(
        required_cases=(
            LanguageCase.NOMINATIVE,
            LanguageCase.ACCUSATIVE,
            LanguageCase.DATIVE,
            LanguageCase.LOCATIVE,
            LanguageCase.GENITIVE,
            LanguageCase.ABLATIVE,
            LanguageCase.INSTRUMENTAL,
        ),
        # no indefinite article
        allowed_article_types=(LanguageArticle.ZERO, LanguageArticle.DEFINITE),
        has_article_in_noun_form=True,
    )
    noun_class = ArmenianNoun
    adjective_class = SimpleAdjective

    def __init__(self, language):
        super().__init__(language)
        self._entity_forms = tuple(
            NounForm(number=number, case=case, article=article, key=make_key(number, case, article))
            for number in self.allowed_numbers
            for case in self.required_cases
            for article in self.allowed_article_types
        )
        # only the bare nominatives are needed for fields
        self._field_forms = tuple(
            f for f in self._entity_forms
            if f.case is LanguageCase.NOMINATIVE and f.article is LanguageArticle.ZERO
        )
        self._noun_form_map = NounFormMap.article_specific(self._entity_forms)

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

    def get_exact_noun_form(self, number, case, possessive, article):
        if possessive is not self.default_possessive:
            return None
        form_map = self._noun_form_map.get(article)
        return None if form_map is None else form_map.get_form(number, case)

    def get_adjective_form(self, starts_with, gender, number, case, article, possessive):
        return SimpleModifierForm.SINGULAR

    def get_article_form(self, starts_with, gender, number, case):
        # there is no article word
        return None
