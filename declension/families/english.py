"""
declension/families/english.py
------------------------------

English: singular/plural nouns, invariant adjectives and the
"a"/"an"/"the" articles. Articles are separate words; entity nouns
prefix a default article when asked for an articled form.
"""

from __future__ import annotations

from typing import Dict, Mapping, Optional, Sequence

import structlog

from declension.base import ArticledDeclension
from declension.enums import (
    LanguageArticle,
    LanguageCase,
    LanguageNumber,
    LanguageStartsWith,
)
from declension.errors import UnsupportedOperationError
from declension.forms import (
    AdjectiveForm,
    ArticleForm,
    NounForm,
    PluralNounForm,
    SimpleModifierForm,
)
from declension.stores import SimpleAdjectiveWithStartsWith, SimpleArticledPluralNoun
from declension.terms import VALIDATION_ERROR_HEADER, Article
from declension.traits import ARTICLED_TRAITS

logger = structlog.get_logger()

SG = LanguageNumber.SINGULAR
PL = LanguageNumber.PLURAL


class EnglishArticleForm:
    SINGULAR = ArticleForm(number=SG, starts_with=LanguageStartsWith.CONSONANT)
    SINGULAR_V = ArticleForm(number=SG, starts_with=LanguageStartsWith.VOWEL)
    PLURAL = ArticleForm(number=PL, starts_with=LanguageStartsWith.CONSONANT)
    ALL = (SINGULAR, SINGULAR_V, PLURAL)

    @classmethod
    def for_form(cls, form) -> ArticleForm:
        if form.number is not SG:
            return cls.PLURAL
        return cls.SINGULAR_V if form.starts_with is LanguageStartsWith.VOWEL else cls.SINGULAR


class EnglishArticle(Article):
    """Stores "a", "an" and the plural; the last two default to the first."""

    def __init__(self, declension, name: str, article_type: LanguageArticle):
        super().__init__(declension, name, article_type)
        self._values: Dict[ArticleForm, Optional[str]] = {}

    def get_all_values(self) -> Mapping[ArticleForm, str]:
        return {f: self._values[f] for f in EnglishArticleForm.ALL if self._values.get(f) is not None}

    def get_string(self, form) -> Optional[str]:
        return self._values.get(EnglishArticleForm.for_form(form))

    def set_string(self, form, value: Optional[str]) -> None:
        self._values[EnglishArticleForm.for_form(form)] = value

    def validate(self, name: str) -> bool:
        singular = self._values.get(EnglishArticleForm.SINGULAR)
        if singular is None:
            logger.info(f"{VALIDATION_ERROR_HEADER} The article {name} has no form")
            return False
        for form in (EnglishArticleForm.SINGULAR_V, EnglishArticleForm.PLURAL):
            if self._values.get(form) is None:
                self._values[form] = singular
        return True


class EnglishDeclension(ArticledDeclension):
    traits = ARTICLED_TRAITS.derive(
        has_starts_with=True,
        required_starts_with=(LanguageStartsWith.CONSONANT, LanguageStartsWith.VOWEL),
    )
    noun_class = SimpleArticledPluralNoun
    article_class = EnglishArticle

    def __init__(self, language):
        assert language.language_code == "en", "Initializing a language that isn't english"
        super().__init__(language)

    @property
    def all_noun_forms(self) -> Sequence[NounForm]:
        return PluralNounForm.ALL

    @property
    def adjective_forms(self) -> Sequence[AdjectiveForm]:
        return SimpleModifierForm.ALL

    @property
    def article_forms(self) -> Sequence[ArticleForm]:
        return EnglishArticleForm.ALL

    def create_adjective(self, name, starts_with=None, position=None):
        return SimpleAdjectiveWithStartsWith(self, name, starts_with, position)

    def get_article_form(self, starts_with, gender, number, case: LanguageCase) -> ArticleForm:
        if number is PL:
            return EnglishArticleForm.PLURAL
        if starts_with is LanguageStartsWith.VOWEL:
            return EnglishArticleForm.SINGULAR_V
        return EnglishArticleForm.SINGULAR

    def get_adjective_form(self, starts_with, gender, number, case, article, possessive):
        return SimpleModifierForm.SINGULAR

    def get_default_article_string(self, form, article_type) -> Optional[str]:
        article_form = EnglishArticleForm.for_form(form)
        if article_type is LanguageArticle.INDEFINITE:
            if article_form is EnglishArticleForm.PLURAL:
                return None
            return "An " if article_form is EnglishArticleForm.SINGULAR_V else "A "
        if article_type is LanguageArticle.DEFINITE:
            return "The "
        if article_type is LanguageArticle.ZERO:
            return None
        raise UnsupportedOperationError("Invalid article")
