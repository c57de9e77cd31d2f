"""
declension/families/romanian.py
-------------------------------

Romanian: three genders, nominative and dative (genitive-dative) cases and
a definite article suffixed to the noun, so nouns carry article forms.
Only the indefinite article is a separate word.
"""

from __future__ import annotations

from typing import Optional, Sequence

import structlog

from declension.enums import (
    LanguageArticle,
    LanguageCase,
    LanguageGender,
    LanguageNumber,
    LanguagePossessive,
    LanguageStartsWith,
    NounType,
)
from declension.families.romance import RomanceDeclension
from declension.form_maps import ModifierFormMap, NounFormMap
from declension.forms import AdjectiveForm, NounForm, make_key
from declension.stores import ComplexAdjective, ComplexArticle, ComplexArticledNoun
from declension.terms import VALIDATION_ERROR_HEADER

logger = structlog.get_logger()

N = LanguageGender.NEUTER
F = LanguageGender.FEMININE
M = LanguageGender.MASCULINE
SG = LanguageNumber.SINGULAR
PL = LanguageNumber.PLURAL
NOM = LanguageCase.NOMINATIVE
DAT = LanguageCase.DATIVE

MODIFIER_FORMS = tuple(
    AdjectiveForm(gender=gender, number=number, case=case, key=make_key(gender, case, number))
    for case in (NOM, DAT)
    for number in (SG, PL)
    for gender in (N, M, F)
)
MODIFIER_FORM_MAP = ModifierFormMap(MODIFIER_FORMS)


def _modifier(number, case, gender) -> AdjectiveForm:
    return MODIFIER_FORM_MAP.get_form(LanguageStartsWith.CONSONANT, gender, number, case)


class RomanianNoun(ComplexArticledNoun):
    def __init__(self, declension, name, plural_alias=None, noun_type=NounType.OTHER,
                 entity_name=None, starts_with=None, gender=None, access=None,
                 is_standard_field=False, is_copied_from_default=False):
        super().__init__(declension, name, plural_alias, noun_type, entity_name,
                         LanguageStartsWith.CONSONANT, gender, access, is_standard_field,
                         is_copied_from_default)

    def validate_values(self, name: str, case: LanguageCase = LanguageCase.NOMINATIVE) -> bool:
        # Only entity nouns need every form; they are filled from the closest one
        for form in self.declension.all_noun_forms:
            if self.get_string(form) is not None or self.noun_type is not NounType.ENTITY:
                continue
            value = self.get_close_but_no_cigar_string(form)
            if value is None:
                logger.info(
                    f"{VALIDATION_ERROR_HEADER} The noun {name} has no {form} form "
                    "and no default could be found"
                )
                return False
            self.set_string(form, value)
        return True


class RomanianAdjective(ComplexAdjective):
    def validate(self, name: str) -> bool:
        return self.default_validate(name, MODIFIER_FORMS)


class RomanianArticle(ComplexArticle):
    REQUIRED = (
        _modifier(SG, NOM, F), _modifier(SG, NOM, M), _modifier(SG, NOM, N), _modifier(PL, NOM, N),
        _modifier(SG, DAT, F), _modifier(SG, DAT, M), _modifier(SG, DAT, N), _modifier(PL, DAT, N),
    )

    def validate(self, name: str) -> bool:
        return self.default_validate(name, self.REQUIRED)


class RomanianDeclension(RomanceDeclension):
    traits = RomanceDeclension.traits.derive(
        required_genders=(N, F, M),
        default_gender=N,
        required_cases=(NOM, DAT),
        has_article_in_noun_form=True,
    )
    noun_class = RomanianNoun
    adjective_class = RomanianAdjective
    article_class = RomanianArticle

    # The plural indefinite article keeps its character reference ("nişte")
    INDEFINITE_ARTICLE = {
        _modifier(SG, NOM, N): "un ",
        _modifier(SG, NOM, F): "o ",
        _modifier(SG, NOM, M): "un ",
        _modifier(PL, NOM, N): "ni&#351;te ",
        _modifier(PL, NOM, F): "ni&#351;te ",
        _modifier(PL, NOM, M): "ni&#351;te ",
        _modifier(SG, DAT, N): "unui ",
        _modifier(SG, DAT, F): "unei ",
        _modifier(SG, DAT, M): "unui ",
        _modifier(PL, DAT, N): "unor ",
        _modifier(PL, DAT, F): "unor ",
        _modifier(PL, DAT, M): "unor ",
    }

    NOUN_ARTICLES = (LanguageArticle.ZERO, LanguageArticle.DEFINITE)

    def __init__(self, language):
        super().__init__(language)
        self._entity_forms = tuple(
            NounForm(number=number, case=case, article=article, key=make_key(number, case, article))
            for number in self.allowed_numbers
            for case in self.required_cases
            for article in self.NOUN_ARTICLES
        )
        self._field_forms = tuple(
            f for f in self._entity_forms
            if f.case is NOM and f.article is LanguageArticle.ZERO
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
        return MODIFIER_FORMS

    @property
    def article_forms(self) -> Sequence[AdjectiveForm]:
        return MODIFIER_FORMS

    def get_adjective_form(self, starts_with, gender, number, case, article, possessive):
        if article is not LanguageArticle.ZERO:
            return None
        return MODIFIER_FORM_MAP.get_form(starts_with, gender, number, case)

    def get_article_form(self, starts_with, gender, number, case):
        return MODIFIER_FORM_MAP.get_form(starts_with, gender, number, case)

    def get_exact_noun_form(self, number, case, possessive, article) -> Optional[NounForm]:
        if possessive is not LanguagePossessive.NONE:
            return None
        form_map = self._noun_form_map.get(article)
        return None if form_map is None else form_map.get_form(number, case)

    def get_default_article_string(self, form, article_type) -> Optional[str]:
        if article_type is LanguageArticle.INDEFINITE:
            return self.INDEFINITE_ARTICLE.get(form)
        # the definite article is part of the noun
        return None
