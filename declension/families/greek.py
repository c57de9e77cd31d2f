"""
declension/families/greek.py
----------------------------

Greek reuses the Germanic form machinery: three genders, four cases and
articles that are separate words. Adjectives do not inflect for
definiteness.

The accusative masculine and feminine articles keep their final ν before
a plosive, so nouns carry an auto-derived starts-with: SPECIAL when the
singular begins with a plosive, CONSONANT otherwise.
"""

from __future__ import annotations

from typing import Optional

import structlog

from declension.enums import LanguageArticle, LanguageCase, LanguageGender, LanguageNumber, LanguageStartsWith
from declension.families.germanic import ZERO_ARTICLES, GermanicDeclension, GermanicNoun
from declension.forms import NounForm

logger = structlog.get_logger()

N = LanguageGender.NEUTER
F = LanguageGender.FEMININE
M = LanguageGender.MASCULINE
SG = LanguageNumber.SINGULAR
PL = LanguageNumber.PLURAL
NOM = LanguageCase.NOMINATIVE
ACC = LanguageCase.ACCUSATIVE
GEN = LanguageCase.GENITIVE
SPECIAL = LanguageStartsWith.SPECIAL

PLOSIVES = (
    "κ", "π", "τ", "μπ", "ντ",
    "γκ", "τσ", "τζ", "ξ", "ψ",
)


def starts_with_greek_plosive(value: Optional[str]) -> bool:
    return bool(value) and value.startswith(PLOSIVES)


class GreekNoun(GermanicNoun):
    def set_string(self, form: NounForm, value: Optional[str]) -> None:
        super().set_string(form, value)
        if form == self.declension.all_noun_forms[0]:
            self.starts_with = (
                SPECIAL if starts_with_greek_plosive(value) else LanguageStartsWith.CONSONANT
            )


class GreekDeclension(GermanicDeclension):
    traits = GermanicDeclension.traits.derive(
        has_starts_with=True,
        has_auto_derived_starts_with=True,
        # SPECIAL marks a plosive
        required_starts_with=(LanguageStartsWith.CONSONANT, SPECIAL),
        required_cases=(NOM, ACC, GEN, LanguageCase.VOCATIVE),
    )
    noun_class = GreekNoun
    adjective_articles = ZERO_ARTICLES

    DEFINITE_ARTICLE = {
        NOM: {SG: {N: "το", F: "η", M: "ο"}, PL: {N: "τα", F: "οι", M: "οι"}},
        ACC: {SG: {N: "το", F: "τη", M: "το"}, PL: {N: "τα", F: "τις", M: "τους"}},
        GEN: {SG: {N: "του", F: "της", M: "του"}, PL: {N: "των", F: "των", M: "των"}},
    }
    INDEFINITE_ARTICLE = {
        NOM: {N: "ένα", F: "μία", M: "ένας"},
        ACC: {N: "ένα", F: "μία", M: "ένα"},
        GEN: {N: "ενός", F: "μιας", M: "ενός"},
    }

    def __init__(self, language):
        super().__init__(language)
        self._definite_overrides = {
            self.get_article_form(SPECIAL, M, SG, ACC): "τον",
            self.get_article_form(SPECIAL, F, SG, ACC): "την",
        }
        self._indefinite_overrides = {
            self.get_article_form(SPECIAL, M, SG, ACC): "έναν",
        }

    def get_default_article_string(self, form, article_type) -> Optional[str]:
        if article_type is LanguageArticle.DEFINITE:
            override = self._definite_overrides.get(form)
            if override is not None:
                return override
            by_case = self.DEFINITE_ARTICLE.get(form.case)
            if by_case is None:
                logger.debug("greek_illegal_definite_article_form", form=repr(form))
                return ""
            return by_case[form.number][form.gender]
        if article_type is LanguageArticle.INDEFINITE:
            if form.number is PL:
                return None
            override = self._indefinite_overrides.get(form)
            if override is not None:
                return override
            return self.INDEFINITE_ARTICLE.get(form.case, {}).get(form.gender)
        return None
