"""
declension/form_maps.py
-----------------------

Constant-time lookup maps from a requested dimension tuple to the form of a
declension that has exactly those dimensions.

Maps are built once per declension. Building raises DuplicateFormError when
two forms share a tuple; that is a bug in the declension. Lookups return
None when no form exists, and callers fall back from there.

The number dimension only distinguishes plural from everything else, so
DUAL forms share the singular branch.
"""

from __future__ import annotations

from typing import Dict, Generic, Iterable, Optional, Tuple, TypeVar

from declension.enums import (
    LanguageArticle,
    LanguageCase,
    LanguageGender,
    LanguageNumber,
    LanguagePossessive,
    LanguageStartsWith,
)
from declension.errors import DuplicateFormError

F = TypeVar("F")


class NounFormMap(Generic[F]):
    """Noun forms indexed by (plural?, case)."""

    def __init__(self, forms: Iterable[F]):
        self._forms: Dict[Tuple[bool, LanguageCase], F] = {}
        for form in forms:
            slot = (form.number.is_plural, form.case)
            existing = self._forms.get(slot)
            if existing is not None:
                raise DuplicateFormError(f"Duplicate noun forms {form} != {existing}")
            self._forms[slot] = form

    def get_form(self, number: Optional[LanguageNumber], case: LanguageCase) -> Optional[F]:
        if number is None:
            return None
        return self._forms.get((number.is_plural, case))

    def __len__(self) -> int:
        return len(self._forms)

    @classmethod
    def article_specific(cls, forms: Iterable[F]) -> Dict[LanguageArticle, "NounFormMap[F]"]:
        forms = list(forms)
        return {
            article: cls(f for f in forms if f.article is article)
            for article in LanguageArticle
        }

    @classmethod
    def possessive_specific(
        cls, forms: Iterable[F]
    ) -> Dict[LanguagePossessive, "NounFormMap[F]"]:
        forms = list(forms)
        return {
            poss: cls(f for f in forms if f.possessive is poss)
            for poss in LanguagePossessive
        }


class ModifierFormMap(Generic[F]):
    """Adjective or article forms indexed by (plural?, gender, case, starts-with)."""

    def __init__(self, forms: Iterable[F]):
        self._forms: Dict[
            Tuple[bool, LanguageGender, LanguageCase, LanguageStartsWith], F
        ] = {}
        for form in forms:
            slot = (form.number.is_plural, form.gender, form.case, form.starts_with)
            existing = self._forms.get(slot)
            if existing is not None:
                raise DuplicateFormError(f"Duplicate modifier forms {form} != {existing}")
            self._forms[slot] = form

    def get_form(
        self,
        starts_with: LanguageStartsWith,
        gender: LanguageGender,
        number: Optional[LanguageNumber],
        case: LanguageCase,
    ) -> Optional[F]:
        if number is None:
            return None
        return self._forms.get((number.is_plural, gender, case, starts_with))

    def __len__(self) -> int:
        return len(self._forms)

    @classmethod
    def article_specific(
        cls, forms: Iterable[F]
    ) -> Dict[LanguageArticle, "ModifierFormMap[F]"]:
        forms = list(forms)
        return {
            article: cls(f for f in forms if f.article is article)
            for article in LanguageArticle
        }


__all__ = ["NounFormMap", "ModifierFormMap"]
