"""
declension/families/malayo_polynesian.py
----------------------------------------

Indonesian, Malay, Maori, Samoan and Hawaiian: nouns with a singular and
a plural, no gender and invariant adjectives.

Hawaiian also has article words; the definite article is "ka" before
most consonants, "ke" before k, e, a and o (tracked as SPECIAL) and "nā"
in the plural.
"""

from __future__ import annotations

from typing import Dict, Mapping, Optional, Sequence

import structlog

from declension.base import ArticledDeclension, LanguageDeclension
from declension.enums import LanguageArticle, LanguageCase, LanguageGender, LanguageNumber, LanguageStartsWith
from declension.errors import UnsupportedOperationError
from declension.forms import AdjectiveForm, ArticleForm, NounForm, PluralNounForm, SimpleModifierForm, make_key
from declension.stores import SimpleAdjective, SimpleAdjectiveWithStartsWith, SimpleArticledPluralNoun, SimplePluralNoun
from declension.terms import VALIDATION_ERROR_HEADER, Article
from declension.traits import ARTICLED_TRAITS

logger = structlog.get_logger()

SG = LanguageNumber.SINGULAR
PL = LanguageNumber.PLURAL
C = LanguageStartsWith.CONSONANT
SPECIAL = LanguageStartsWith.SPECIAL


class MalayoPolynesianDeclension(LanguageDeclension):
    noun_class = SimplePluralNoun
    adjective_class = SimpleAdjective

    @property
    def all_noun_forms(self) -> Sequence[NounForm]:
        return PluralNounForm.ALL

    @property
    def other_forms(self) -> Sequence[NounForm]:
        return (PluralNounForm.SINGULAR,)

    @property
    def adjective_forms(self) -> Sequence[AdjectiveForm]:
        return SimpleModifierForm.ALL

    def get_adjective_form(self, starts_with, gender, number, case, article, possessive):
        return SimpleModifierForm.SINGULAR


class IndonesianDeclension(MalayoPolynesianDeclension):
    """Indonesian and Malay."""


# ---------------------------------------------------------------------------
# Hawaiian
# ---------------------------------------------------------------------------


def _article_form(number, starts_with) -> ArticleForm:
    return ArticleForm(number=number, starts_with=starts_with, key=make_key(number, starts_with))


class HawaiianArticleForm:
    KA = _article_form(SG, C)
    KE = _article_form(SG, SPECIAL)
    NA = _article_form(PL, C)

    ALL = (KA, KE, NA)

    @classmethod
    def for_form(cls, form) -> ArticleForm:
        if form.number is not SG:
            return cls.NA
        return cls.KE if form.starts_with is SPECIAL else cls.KA


class HawaiianArticle(Article):
    """Stores one value per article form; the other two default to "ka"."""

    def __init__(self, declension, name: str, article_type: LanguageArticle):
        super().__init__(declension, name, article_type)
        self._values: Dict[ArticleForm, Optional[str]] = {}

    def get_all_values(self) -> Mapping[ArticleForm, str]:
        return {f: self._values[f] for f in HawaiianArticleForm.ALL if self._values.get(f) is not None}

    def get_string(self, form) -> Optional[str]:
        return self._values.get(HawaiianArticleForm.for_form(form))

    def set_string(self, form, value: Optional[str]) -> None:
        self._values[HawaiianArticleForm.for_form(form)] = value

    def validate(self, name: str) -> bool:
        singular = self._values.get(HawaiianArticleForm.KA)
        if singular is None:
            logger.info(f"{VALIDATION_ERROR_HEADER} The article {name} has no form")
            return False
        for form in (HawaiianArticleForm.KE, HawaiianArticleForm.NA):
            if self._values.get(form) is None:
                self._values[form] = singular
        return True


class HawaiianDeclension(ArticledDeclension):
    traits = ARTICLED_TRAITS.derive(
        has_starts_with=True,
        # only consonants generally matter
        required_starts_with=(C, SPECIAL),
    )
    noun_class = SimpleArticledPluralNoun
    article_class = HawaiianArticle

    DEFINITE_ARTICLES = {
        HawaiianArticleForm.KA: "Ka ",
        HawaiianArticleForm.KE: "Ke ",
        HawaiianArticleForm.NA: "Nā ",
    }

    @property
    def all_noun_forms(self) -> Sequence[NounForm]:
        return PluralNounForm.ALL

    @property
    def other_forms(self) -> Sequence[NounForm]:
        return (PluralNounForm.SINGULAR,)

    @property
    def adjective_forms(self) -> Sequence[AdjectiveForm]:
        return SimpleModifierForm.ALL

    @property
    def article_forms(self) -> Sequence[ArticleForm]:
        return HawaiianArticleForm.ALL

    def create_adjective(self, name, starts_with=None, position=None):
        return SimpleAdjectiveWithStartsWith(self, name, starts_with, position)

    def get_article_form(self, starts_with, gender: LanguageGender, number, case: LanguageCase) -> ArticleForm:
        if number is PL:
            return HawaiianArticleForm.NA
        return HawaiianArticleForm.KE if starts_with is SPECIAL else HawaiianArticleForm.KA

    def get_adjective_form(self, starts_with, gender, number, case, article, possessive):
        return SimpleModifierForm.SINGULAR

    def get_default_article_string(self, form, article_type) -> Optional[str]:
        if article_type is LanguageArticle.DEFINITE:
            return self.DEFINITE_ARTICLES[HawaiianArticleForm.for_form(form)]
        if article_type is LanguageArticle.INDEFINITE:
            return "He "
        if article_type is LanguageArticle.ZERO:
            return None
        raise UnsupportedOperationError("Invalid article")
