"""
declension/families/korean.py
-----------------------------

Korean nouns do not inflect, but the particles that follow them do: the
particle allomorph depends on whether the noun ends in a vowel, a
consonant, or ㄹ (which acts like a vowel before the instrumental
particle). The noun's ending is derived from its value and stored in the
starts-with slot; "adjectives" (particles) have one form per ending.
"""

from __future__ import annotations

from typing import Dict, Optional, Sequence

import structlog

from declension.enums import LanguageStartsWith
from declension.families.simple import SimpleDeclensionWithClassifiers
from declension.forms import AdjectiveForm
from declension.stores import SimpleNounWithClassifier
from declension.terms import VALIDATION_ERROR_HEADER, Adjective

logger = structlog.get_logger()

C = LanguageStartsWith.CONSONANT
V = LanguageStartsWith.VOWEL
S = LanguageStartsWith.SPECIAL

# Precomposed Hangul syllables: 0xAC00 + (initial * 21 + medial) * 28 + final
HANGUL_FIRST = 0xAC00
HANGUL_LAST = 0xD7A3
FINAL_COUNT = 28
FINAL_RIEUL = 8
# Conjoining jamo: medial vowels, and final ㄹ
JAMO_VOWEL_FIRST = 0x1161
JAMO_VOWEL_LAST = 0x11A2
JAMO_FINAL_RIEUL = 0x11AF


def ends_with(value: Optional[str]) -> LanguageStartsWith:
    """Sound class of the end of `value`; consonant when unknown."""
    trimmed = value.strip() if value else ""
    if not trimmed:
        return C
    last = ord(trimmed[-1])
    if HANGUL_FIRST <= last <= HANGUL_LAST:
        final = (last - HANGUL_FIRST) % FINAL_COUNT
        if final == 0:
            return V
        if final == FINAL_RIEUL:
            return S
    elif JAMO_VOWEL_FIRST <= last <= JAMO_VOWEL_LAST:
        return V
    elif last == JAMO_FINAL_RIEUL:
        return S
    return C


class KoreanAdjectiveForm:
    """One particle form per ending of the preceding noun, keyed by it."""

    PREV_CONSONANT = AdjectiveForm(starts_with=C, key=C.db_value)
    PREV_VOWEL = AdjectiveForm(starts_with=V, key=V.db_value)
    PREV_FLAP = AdjectiveForm(starts_with=S, key=S.db_value)

    ALL = (PREV_CONSONANT, PREV_VOWEL, PREV_FLAP)

    @classmethod
    def for_ending(cls, starts_with: Optional[LanguageStartsWith]) -> AdjectiveForm:
        if starts_with is V:
            return cls.PREV_VOWEL
        if starts_with is S:
            return cls.PREV_FLAP
        return cls.PREV_CONSONANT


class KoreanNoun(SimpleNounWithClassifier):
    def set_string(self, form, value: Optional[str]) -> None:
        super().set_string(form, value)
        self.starts_with = ends_with(value)


class KoreanAdjective(Adjective):
    def __init__(self, declension, name, position=None):
        super().__init__(declension, name, position)
        self._values: Dict[AdjectiveForm, Optional[str]] = {}

    def get_all_values(self) -> Dict[AdjectiveForm, str]:
        return {f: v for f, v in self._values.items() if v is not None}

    def get_string(self, form) -> Optional[str]:
        if form is None:
            return None
        return self._values.get(KoreanAdjectiveForm.for_ending(form.starts_with))

    def set_string(self, form, value: Optional[str]) -> None:
        self._values[KoreanAdjectiveForm.for_ending(form.starts_with)] = value

    def validate(self, name: str) -> bool:
        consonant = self._values.get(KoreanAdjectiveForm.PREV_CONSONANT)
        if consonant is None:
            logger.info(f"{VALIDATION_ERROR_HEADER} The adjective {name} has no form")
            return False
        for form in (KoreanAdjectiveForm.PREV_VOWEL, KoreanAdjectiveForm.PREV_FLAP):
            if self._values.get(form) is None:
                self._values[form] = consonant
        return True


class KoreanDeclension(SimpleDeclensionWithClassifiers):
    traits = SimpleDeclensionWithClassifiers.traits.derive(
        has_ends_with=True,
        required_starts_with=(C, V, S),
    )
    noun_class = KoreanNoun
    adjective_class = KoreanAdjective

    def __init__(self, language, default_classifier: Optional[str] = None):
        assert language.language_code == "ko", "Initializing a language that isn't korean"
        super().__init__(language, default_classifier)

    @property
    def adjective_forms(self) -> Sequence[AdjectiveForm]:
        return KoreanAdjectiveForm.ALL

    def get_adjective_form(self, starts_with, gender, number, case, article, possessive):
        return KoreanAdjectiveForm.for_ending(starts_with)
