"""
declension/families/albanian.py
-------------------------------

Albanian uses the Germanic form machinery with five cases and both
articles suffixed to the noun, so every articled form must be supplied.
Adjectives follow the noun.
"""

from __future__ import annotations

from declension.enums import LanguageCase, LanguagePosition
from declension.families.germanic import ALL_ARTICLES, GermanicDeclension


class AlbanianDeclension(GermanicDeclension):
    traits = GermanicDeclension.traits.derive(
        required_cases=(
            LanguageCase.NOMINATIVE,
            LanguageCase.ACCUSATIVE,
            LanguageCase.GENITIVE,
            LanguageCase.DATIVE,
            LanguageCase.ABLATIVE,
        ),
        has_article_in_noun_form=True,
        default_adjective_position=LanguagePosition.POST,
    )
    noun_articles = ALL_ARTICLES
    adjective_articles = ALL_ARTICLES

    def __init__(self, language):
        assert language.language_code == "sq", "Initializing a language that isn't albanian"
        super().__init__(language)
