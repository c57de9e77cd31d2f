"""
declension/families/esperanto.py
--------------------------------

Esperanto: singular and plural nouns, invariant adjectives and a single
invariant definite article, "la".
"""

from __future__ import annotations

from typing import Optional, Sequence

from declension.base import ArticledDeclension
from declension.enums import LanguageArticle
from declension.forms import AdjectiveForm, ArticleForm, NounForm, PluralNounForm, SimpleModifierForm
from declension.stores import SimpleAdjective, SimpleArticle, SimpleArticledPluralNoun


class EsperantoDeclension(ArticledDeclension):
    noun_class = SimpleArticledPluralNoun
    adjective_class = SimpleAdjective
    article_class = SimpleArticle

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
        return SimpleModifierForm.ALL

    def get_article_form(self, starts_with, gender, number, case):
        return SimpleModifierForm.SINGULAR

    def get_adjective_form(self, starts_with, gender, number, case, article, possessive):
        return SimpleModifierForm.SINGULAR

    def get_default_article_string(self, form, article_type) -> Optional[str]:
        if article_type is LanguageArticle.DEFINITE:
            return "La"
        return None
