"""
declension/traits.py
--------------------

The capability configuration of a declension.

A declension is a configuration value (which dimensions and values are
legal, which defaults apply) plus the family strategies that use it. This
module holds the configuration part. Families start from the defaults
below and override a handful of fields with `DeclensionTraits.derive`.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional, Tuple

from declension.enums import (
    PLURAL_SET,
    SINGULAR_SET,
    LanguageArticle,
    LanguageCase,
    LanguageGender,
    LanguageNumber,
    LanguagePosition,
    LanguagePossessive,
    LanguageStartsWith,
    ordered,
)


@dataclass(frozen=True)
class DeclensionTraits:
    # Dimensions
    has_gender: bool = False
    has_starts_with: bool = False
    has_ends_with: bool = False
    has_starts_with_in_adjective: Optional[bool] = None  # None: same as has_starts_with
    has_auto_derived_starts_with: bool = False
    has_plural: bool = True
    has_possessive: bool = False
    has_possessive_in_adjective: bool = False
    has_article: bool = False
    has_article_in_noun_form: bool = False
    is_article_in_noun_form_auto_derived: bool = False
    has_capitalization: bool = True

    # Legal values
    allowed_numbers: Optional[Tuple[LanguageNumber, ...]] = None  # None: from has_plural
    required_genders: Optional[Tuple[LanguageGender, ...]] = None
    required_cases: Tuple[LanguageCase, ...] = (LanguageCase.NOMINATIVE,)
    allowed_cases: Optional[Tuple[LanguageCase, ...]] = None  # None: required_cases
    required_starts_with: Tuple[LanguageStartsWith, ...] = (LanguageStartsWith.CONSONANT,)
    required_possessive: Tuple[LanguagePossessive, ...] = (LanguagePossessive.NONE,)
    allowed_article_types: Tuple[LanguageArticle, ...] = ()

    # Defaults
    default_gender: LanguageGender = LanguageGender.NEUTER
    default_starts_with: LanguageStartsWith = LanguageStartsWith.CONSONANT
    default_adjective_position: LanguagePosition = LanguagePosition.PRE
    default_case: LanguageCase = LanguageCase.NOMINATIVE
    default_article: LanguageArticle = LanguageArticle.ZERO
    default_possessive: LanguagePossessive = LanguagePossessive.NONE

    # Hints for the label engine
    is_inflected: bool = True
    move_noun_inflection_to_first_modifier: bool = False
    has_subject_gender_in_verb_conjugation: bool = False
    has_classifiers: bool = False
    should_infer_noun_def_article_from_particle: bool = False
    should_lowercase_entity_in_compound_nouns: bool = False
    max_distance_for_modifiers: Optional[int] = None  # None: 0 if inflected, else 5

    def __post_init__(self) -> None:
        # Value sets always iterate in enum definition order.
        for name in (
            "allowed_numbers",
            "required_genders",
            "required_cases",
            "allowed_cases",
            "required_starts_with",
            "required_possessive",
            "allowed_article_types",
        ):
            value = getattr(self, name)
            if value is not None:
                object.__setattr__(self, name, ordered(value))

    def derive(self, **changes) -> "DeclensionTraits":
        return replace(self, **changes)

    # -- resolved views --------------------------------------------------

    @property
    def numbers(self) -> Tuple[LanguageNumber, ...]:
        if self.allowed_numbers is not None:
            return self.allowed_numbers
        return PLURAL_SET if self.has_plural else SINGULAR_SET

    @property
    def cases(self) -> Tuple[LanguageCase, ...]:
        return self.allowed_cases if self.allowed_cases is not None else self.required_cases

    @property
    def starts_with_in_adjective(self) -> bool:
        if self.has_starts_with_in_adjective is None:
            return self.has_starts_with
        return self.has_starts_with_in_adjective

    @property
    def modifier_distance(self) -> int:
        if self.max_distance_for_modifiers is not None:
            return self.max_distance_for_modifiers
        return 0 if self.is_inflected else 5


DEFAULT_TRAITS = DeclensionTraits()

# Articled languages know zero, indefinite and definite articles.
ARTICLED_TRAITS = DEFAULT_TRAITS.derive(
    has_article=True,
    allowed_article_types=(
        LanguageArticle.ZERO,
        LanguageArticle.INDEFINITE,
        LanguageArticle.DEFINITE,
    ),
)

__all__ = ["DeclensionTraits", "DEFAULT_TRAITS", "ARTICLED_TRAITS"]
