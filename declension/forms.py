"""
declension/forms.py
-------------------

Grammatical form identities.

A form is one point in the (number x case x gender x article x possessive x
starts-with) space of a language. Forms are immutable value objects; a
declension enumerates the legal ones once and answers lookups with them.

Each form carries a deterministic `key` built from the db values of its
dimensions. The key is the storage-compatible name of the form; two forms
of one declension with the same key are the same form.

Three kinds of form exist, matching the three kinds of term:

- NounForm:      number, case, possessive, article
- AdjectiveForm: starts-with, gender, number, case, article, possessive
- ArticleForm:   starts-with, gender, number, case

Forms that do not vary along a dimension answer it with a fixed constant
(e.g. NOMINATIVE in a caseless language).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Optional, Tuple

from declension.enums import (
    DimensionEnum,
    LanguageArticle,
    LanguageCase,
    LanguageGender,
    LanguageNumber,
    LanguagePossessive,
    LanguageStartsWith,
    TermType,
)

SG = LanguageNumber.SINGULAR
PL = LanguageNumber.PLURAL


def make_key(*dims: DimensionEnum, sep: str = "-") -> str:
    """Join the db values of `dims` into a form key."""
    return sep.join(d.db_value for d in dims)


# ---------------------------------------------------------------------------
# 1. Form types
# ---------------------------------------------------------------------------


@dataclass(frozen=True, repr=False)
class NounForm:
    number: LanguageNumber = SG
    case: LanguageCase = LanguageCase.NOMINATIVE
    possessive: LanguagePossessive = LanguagePossessive.NONE
    article: LanguageArticle = LanguageArticle.ZERO
    key: str = ""

    term_type: ClassVar[TermType] = TermType.NOUN

    def __post_init__(self) -> None:
        if not self.key:
            object.__setattr__(
                self, "key", make_key(self.number, self.case, self.possessive, self.article)
            )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.key})"


@dataclass(frozen=True, repr=False)
class ArticleForm:
    starts_with: LanguageStartsWith = LanguageStartsWith.CONSONANT
    gender: LanguageGender = LanguageGender.NEUTER
    number: LanguageNumber = SG
    case: LanguageCase = LanguageCase.NOMINATIVE
    key: str = ""

    term_type: ClassVar[TermType] = TermType.ARTICLE

    def __post_init__(self) -> None:
        if not self.key:
            object.__setattr__(
                self, "key", make_key(self.number, self.case, self.gender, self.starts_with)
            )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.key})"


@dataclass(frozen=True, repr=False)
class AdjectiveForm:
    starts_with: LanguageStartsWith = LanguageStartsWith.CONSONANT
    gender: LanguageGender = LanguageGender.NEUTER
    number: LanguageNumber = SG
    case: LanguageCase = LanguageCase.NOMINATIVE
    article: LanguageArticle = LanguageArticle.ZERO
    possessive: LanguagePossessive = LanguagePossessive.NONE
    key: str = ""

    term_type: ClassVar[TermType] = TermType.ADJECTIVE

    def __post_init__(self) -> None:
        if not self.key:
            object.__setattr__(
                self,
                "key",
                make_key(
                    self.number,
                    self.case,
                    self.gender,
                    self.article,
                    self.possessive,
                    self.starts_with,
                ),
            )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.key})"


@dataclass(frozen=True, repr=False)
class LegacyArticledNounForm(NounForm):
    """
    A noun form plus an article, for languages where the article is a
    separate word that callers expect the noun to carry.

    Number, case and possessive come from the wrapped base form.
    """

    base_form: Optional[NounForm] = None

    @classmethod
    def wrap(cls, base_form: NounForm, article: LanguageArticle) -> "LegacyArticledNounForm":
        return cls(
            number=base_form.number,
            case=base_form.case,
            possessive=base_form.possessive,
            article=article,
            key=f"{article.db_value}~{base_form.key}",
            base_form=base_form,
        )


# ---------------------------------------------------------------------------
# 2. Shared static forms
# ---------------------------------------------------------------------------


class SimpleNounForm:
    """The single form of a language without inflection."""

    SINGULAR = NounForm(key="s")
    ALL: Tuple[NounForm, ...] = (SINGULAR,)


class PluralNounForm:
    """Singular and plural nominative, keyed by number."""

    SINGULAR = NounForm(number=SG, key=SG.db_value)
    PLURAL = NounForm(number=PL, key=PL.db_value)
    ALL: Tuple[NounForm, ...] = (SINGULAR, PLURAL)

    @classmethod
    def for_number(cls, number: LanguageNumber) -> NounForm:
        return cls.PLURAL if number.is_plural else cls.SINGULAR


class SimpleModifierForm:
    """
    The single modifier form of a language with no adjective inflection.

    It serves as both an adjective form and an article form.
    """

    SINGULAR = AdjectiveForm(key="0")
    ALL: Tuple[AdjectiveForm, ...] = (SINGULAR,)


__all__ = [
    "make_key",
    "NounForm",
    "ArticleForm",
    "AdjectiveForm",
    "LegacyArticledNounForm",
    "SimpleNounForm",
    "PluralNounForm",
    "SimpleModifierForm",
]
