"""
declension/families/simple.py
-----------------------------

Languages without noun or adjective inflection (Chinese, Japanese, Thai,
Tagalog, Khmer, ...). Every word has a single value.

Variants:
- SimpleDeclensionWithClassifiers: nouns also carry a counter word.
- VietnameseDeclension: classifiers plus a singular/plural distinction and
  capitalization.

Languages without a declension of their own get SimpleDeclension unless
the factory runs in strict mode.
"""

from __future__ import annotations

from typing import Optional, Sequence

from declension.base import LanguageDeclension
from declension.enums import LanguageNumber
from declension.forms import (
    AdjectiveForm,
    NounForm,
    PluralNounForm,
    SimpleModifierForm,
    SimpleNounForm,
)
from declension.stores import (
    PluralNounWithClassifier,
    SimpleAdjective,
    SimpleNoun,
    SimpleNounWithClassifier,
)
from declension.traits import DEFAULT_TRAITS

DEFAULT_CLASSIFIERS = {
    "ja": "つ",
    "zh": "个",  # Simplified; Traditional below
    "ko": "개",
    "vi": "cái",
    "bn": "টা",  # টা
    "ms": "buah",
    "in": "buah",
    "id": "buah",
}
TRADITIONAL_CHINESE = ("zh_TW", "zh_HK")


def default_classifier_for(language) -> str:
    if language.locale in TRADITIONAL_CHINESE:
        return "個"
    return DEFAULT_CLASSIFIERS.get(language.language_code, "")


class SimpleDeclension(LanguageDeclension):
    traits = DEFAULT_TRAITS.derive(has_plural=False, has_capitalization=False, is_inflected=False)
    noun_class = SimpleNoun
    adjective_class = SimpleAdjective

    @property
    def all_noun_forms(self) -> Sequence[NounForm]:
        return SimpleNounForm.ALL

    @property
    def other_forms(self) -> Sequence[NounForm]:
        return SimpleNounForm.ALL

    @property
    def adjective_forms(self) -> Sequence[AdjectiveForm]:
        return SimpleModifierForm.ALL

    def get_exact_noun_form(self, number, case, possessive, article) -> Optional[NounForm]:
        return SimpleNounForm.SINGULAR

    def get_adjective_form(self, starts_with, gender, number, case, article, possessive):
        return SimpleModifierForm.SINGULAR


class SimpleDeclensionWithClassifiers(SimpleDeclension):
    traits = SimpleDeclension.traits.derive(has_classifiers=True)
    noun_class = SimpleNounWithClassifier

    def __init__(self, language, default_classifier: Optional[str] = None):
        super().__init__(language)
        self._default_classifier = (
            default_classifier if default_classifier is not None else default_classifier_for(language)
        )

    @property
    def default_classifier(self) -> Optional[str]:
        return self._default_classifier


class VietnameseDeclension(SimpleDeclensionWithClassifiers):
    traits = SimpleDeclensionWithClassifiers.traits.derive(has_capitalization=True, has_plural=True)
    noun_class = PluralNounWithClassifier

    @property
    def all_noun_forms(self) -> Sequence[NounForm]:
        return PluralNounForm.ALL

    @property
    def other_forms(self) -> Sequence[NounForm]:
        return PluralNounForm.ALL

    def get_exact_noun_form(self, number, case, possessive, article) -> Optional[NounForm]:
        return PluralNounForm.SINGULAR if number is LanguageNumber.SINGULAR else PluralNounForm.PLURAL
