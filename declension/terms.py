"""
declension/terms.py
-------------------

Word value stores: one instance per lexical item of a dictionary.

A term stores only the surface strings a translator actually supplied and
answers exact lookups (None on a miss), defaulted lookups and "closest
available" lookups. Missing forms are a normal condition, never an error.

Lifecycle of a term:
1. created by its declension while a dictionary is parsed,
2. filled through `set_string`,
3. checked once through `validate`, which may fill derived forms,
4. compacted with `make_skinny` for read-only serving.

After `make_skinny` the value map is read-only; `clone` a term to modify it
again.
"""

from __future__ import annotations

import copy
import json
from abc import ABC, abstractmethod
from types import MappingProxyType
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple

import structlog

from declension.enums import (
    LanguageArticle,
    LanguageCase,
    LanguageGender,
    LanguageNumber,
    LanguagePosition,
    LanguageStartsWith,
    NounType,
    TermType,
)
from declension.forms import (
    AdjectiveForm,
    ArticleForm,
    LegacyArticledNounForm,
    NounForm,
)

logger = structlog.get_logger()

VALIDATION_ERROR_HEADER = "###\tError:"
VALIDATION_WARNING_HEADER = "###\tWarning:"


def skinny(term: "GrammaticalTerm", values: Mapping[Any, str]) -> Mapping[Any, str]:
    """Read-only copy of a value map, ordered by the form ordinals of the term's declension."""
    def ordinal(item):
        position = term.declension.form_ordinal(term.term_type, item[0])
        return (position is None, position or 0, item[0].key)

    return MappingProxyType(dict(sorted(values.items(), key=ordinal)))


# ---------------------------------------------------------------------------
# 1. Base term
# ---------------------------------------------------------------------------


class GrammaticalTerm(ABC):
    term_type: TermType

    def __init__(self, declension, name: str):
        self.declension = declension
        self.name = name

    @property
    def sort_key(self) -> Tuple[int, int, str]:
        return (self.declension.language.ordinal, self.term_type.ordinal, self.name)

    def __lt__(self, other: "GrammaticalTerm") -> bool:
        return self.sort_key < other.sort_key

    @abstractmethod
    def validate(self, name: str) -> bool:
        ...

    @abstractmethod
    def make_skinny(self) -> None:
        ...


# ---------------------------------------------------------------------------
# 2. Nouns
# ---------------------------------------------------------------------------


class Noun(GrammaticalTerm):
    term_type = TermType.NOUN

    def __init__(
        self,
        declension,
        name: str,
        plural_alias: Optional[str] = None,
        noun_type: NounType = NounType.OTHER,
        entity_name: Optional[str] = None,
        starts_with: Optional[LanguageStartsWith] = None,
        gender: Optional[LanguageGender] = None,
        access: Optional[str] = None,
        is_standard_field: bool = False,
        is_copied_from_default: bool = False,
    ):
        super().__init__(declension, name)
        self.plural_alias = plural_alias
        self.noun_type = noun_type
        self.entity_name = entity_name
        self.starts_with = starts_with
        self.gender = gender
        self.access = access
        self.is_standard_field = is_standard_field
        self.is_copied_from_default = is_copied_from_default

    # -- storage (implemented per store) ----------------------------------

    @abstractmethod
    def get_string(self, form: Optional[NounForm]) -> Optional[str]:
        ...

    @abstractmethod
    def set_string(self, form: NounForm, value: Optional[str]) -> None:
        ...

    @abstractmethod
    def get_all_defined_values(self) -> Mapping[NounForm, str]:
        ...

    @abstractmethod
    def validate_values(self, name: str, case: LanguageCase = LanguageCase.NOMINATIVE) -> bool:
        ...

    # -- lookups ------------------------------------------------------------

    def get_default_string(self, is_plural: bool) -> Optional[str]:
        number = LanguageNumber.PLURAL if is_plural else LanguageNumber.SINGULAR
        result = self.get_string(self.declension.get_noun_form(number, LanguageCase.NOMINATIVE))
        if result is None and is_plural:
            logger.debug(
                "noun_missing_plural",
                noun=self.name,
                language=str(self.declension.language),
            )
            result = self.get_string(
                self.declension.get_noun_form(LanguageNumber.SINGULAR, LanguageCase.NOMINATIVE)
            )
        return result

    def get_string_lower(self, form: NounForm, lower_case: bool) -> Optional[str]:
        value = self.get_string(form)
        if lower_case and value:
            value = self.declension.form_lowercase_noun_form(value, form)
        return value

    def get_classifier(self) -> Optional[str]:
        return None

    def get_closest_string(self, form: NounForm) -> Optional[str]:
        result = self.get_string(form)
        return result if result is not None else self.get_close_but_no_cigar_string(form)

    def get_close_but_no_cigar_string(self, form: NounForm) -> Optional[str]:
        """
        Value of the nearest defined form, dropping possessive, then article,
        then case, then number.
        """
        decl = self.declension
        value = None
        if form.possessive is not decl.default_possessive:
            value = self.get_string(
                decl.get_exact_noun_form(form.number, form.case, decl.default_possessive, form.article)
            )
        if value is None and form.article is not decl.default_article:
            value = self.get_string(
                decl.get_exact_noun_form(form.number, form.case, form.possessive, decl.default_article)
            )
        if value is None and decl.has_allowed_cases and form.case is not decl.default_case:
            value = self.get_string(
                decl.get_exact_noun_form(form.number, decl.default_case, form.possessive, form.article)
            )
        if value is None and decl.has_plural and form.number is not LanguageNumber.SINGULAR:
            # plural tries singular; dual tries plural
            number_to_try = (
                LanguageNumber.SINGULAR
                if form.number is LanguageNumber.PLURAL
                else LanguageNumber.PLURAL
            )
            value = self.get_string(
                decl.get_exact_noun_form(number_to_try, form.case, form.possessive, form.article)
            )
        return value

    # -- validation ---------------------------------------------------------

    def validate_gender(self, name: str) -> bool:
        return True

    def validate(self, name: str) -> bool:
        # Both checks run; gender validation may repair the gender.
        gender_ok = self.validate_gender(name)
        values_ok = self.validate_values(name)
        return gender_ok and values_ok

    def default_validate(self, name: str, required_forms: Iterable[NounForm]) -> bool:
        """
        Fill every missing form of an entity noun from its nearest defined
        form. Other nouns only need the `required_forms`.
        """
        required = set(required_forms)
        for form in self.declension.all_noun_forms:
            if self.get_string(form) is not None:
                continue
            if self.noun_type is NounType.ENTITY:
                value = self.get_close_but_no_cigar_string(form)
                if value is None:
                    logger.info(
                        f"{VALIDATION_ERROR_HEADER} The noun {name} has no {form} form "
                        "and no default could be found"
                    )
                    return False
                self.set_string(form, value)
            elif form in required:
                logger.debug(f"{VALIDATION_ERROR_HEADER} The noun {name} has no {form} form")
                return False
        return True

    # -- lifecycle ----------------------------------------------------------

    def _copy_storage(self) -> None:
        """Give a fresh clone its own mutable storage."""

    def clone(
        self,
        gender_override: Optional[LanguageGender] = None,
        starts_with_override: Optional[LanguageStartsWith] = None,
        value_overrides: Optional[Mapping[NounForm, str]] = None,
    ) -> "Noun":
        noun = copy.copy(self)
        noun._copy_storage()
        if gender_override is not None:
            noun.gender = gender_override
        if value_overrides:
            for form, value in value_overrides.items():
                noun.set_string(form, value)
        if starts_with_override is not None:
            noun.starts_with = starts_with_override
        return noun

    def to_json(self) -> str:
        decl = self.declension
        data: Dict[str, Any] = {"t": "n", "l": self.name}
        if decl.has_gender and self.gender is not None:
            data["g"] = self.gender.db_value
        if (decl.has_starts_with or decl.has_ends_with) and self.starts_with is not None:
            data["s"] = self.starts_with.db_value
        if decl.has_classifiers and self.get_classifier() is not None:
            data["c"] = self.get_classifier()
        values = self.get_all_defined_values()
        data["v"] = {form.key: values[form] for form in sorted(values, key=lambda f: f.key)}
        return json.dumps(data, ensure_ascii=False, separators=(",", ":"))

    # -- equality -----------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Noun):
            return NotImplemented
        return (
            self.name == other.name
            and self.gender is other.gender
            and self.starts_with is other.starts_with
            and dict(self.get_all_defined_values()) == dict(other.get_all_defined_values())
        )

    def __hash__(self) -> int:
        return hash(self.name)

    def __repr__(self) -> str:
        first = next(iter(self.declension.all_noun_forms))
        return f"Noun-{self.declension.language}-'{self.get_all_defined_values().get(first)}'"


class LegacyArticledNoun(Noun):
    """
    Noun of an articled language whose forms do not carry the article.

    A LegacyArticledNounForm (base form + article) is answered by prefixing
    the default article string of the declension for entity nouns.
    """

    @abstractmethod
    def get_exact_string(self, form: Optional[NounForm]) -> Optional[str]:
        ...

    def get_string(self, form: Optional[NounForm]) -> Optional[str]:
        if isinstance(form, LegacyArticledNounForm):
            if self.noun_type is NounType.ENTITY:
                base = self.get_exact_string(form.base_form)
                article_form = self.declension.get_approximate_article_form(
                    self.starts_with, self.gender, form.number, form.case
                )
                article = self.declension.get_default_article_string(article_form, form.article)
                return self.append_article_to_base(base, article, form)
            return self.get_exact_string(form.base_form)
        return self.get_exact_string(form)

    def append_article_to_base(
        self, base: Optional[str], article: Optional[str], form: NounForm
    ) -> Optional[str]:
        if article is None or base is None:
            return base
        return article + self.declension.form_lowercase_noun_form(base, form)


# ---------------------------------------------------------------------------
# 3. Modifiers
# ---------------------------------------------------------------------------


class NounModifier(GrammaticalTerm):
    def __init__(self, declension, name: str):
        super().__init__(declension, name)
        self.is_copied_from_default = False

    @property
    def starts_with(self) -> LanguageStartsWith:
        return self.declension.default_starts_with

    @abstractmethod
    def get_all_values(self) -> Mapping[Any, str]:
        ...

    @abstractmethod
    def get_string(self, form) -> Optional[str]:
        ...

    @abstractmethod
    def set_string(self, form, value: Optional[str]) -> None:
        ...

    @abstractmethod
    def get_default_value(self) -> Optional[str]:
        ...

    def make_skinny(self) -> None:
        pass


class Adjective(NounModifier):
    term_type = TermType.ADJECTIVE

    def __init__(self, declension, name: str, position: Optional[LanguagePosition] = None):
        super().__init__(declension, name)
        self.position = position or declension.default_adjective_position

    def get_default_value(self) -> Optional[str]:
        decl = self.declension
        return self.get_string(
            decl.get_adjective_form(
                decl.default_starts_with,
                decl.default_gender,
                LanguageNumber.SINGULAR,
                decl.default_case,
                decl.default_article,
                decl.default_possessive,
            )
        )

    def get_agreeing_string(
        self,
        number: LanguageNumber,
        gender: LanguageGender,
        starts_with: LanguageStartsWith,
        case: Optional[LanguageCase] = None,
        article: Optional[LanguageArticle] = None,
    ) -> Optional[str]:
        """Value agreeing with a noun, through the approximate adjective form."""
        decl = self.declension
        return self.get_string(
            decl.get_approximate_adjective_form(
                starts_with,
                gender,
                number,
                case or decl.default_case,
                article or decl.default_article,
                decl.default_possessive,
            )
        )

    def derive_default_string(
        self, form: AdjectiveForm, value: str, base_form: Optional[AdjectiveForm]
    ) -> str:
        return value

    def validate(self, name: str) -> bool:
        decl = self.declension
        return self.default_validate(
            name,
            {
                decl.get_adjective_form(
                    LanguageStartsWith.CONSONANT,
                    decl.default_gender,
                    LanguageNumber.SINGULAR,
                    LanguageCase.NOMINATIVE,
                    LanguageArticle.ZERO,
                    decl.default_possessive,
                )
            },
        )

    def default_validate(self, name: str, required_forms: Iterable[AdjectiveForm]) -> bool:
        """
        Fill every missing form from the form one step away (article,
        starts-with, case, possessive, gender, number, in that order), else
        from the default value. Fails only when there is no default value.
        """
        decl = self.declension
        required = set(required_forms)
        for form in decl.adjective_forms:
            if self.get_string(form) is not None:
                continue
            if form in required:
                logger.debug(
                    f"{VALIDATION_ERROR_HEADER} The adjective {name} is missing required {form} form"
                )
            value = None
            base_form = None
            if (decl.has_article or decl.has_article_in_noun_form) and form.article is not decl.default_article:
                base_form = decl.get_adjective_form(
                    form.starts_with, form.gender, form.number, form.case,
                    decl.default_article, form.possessive,
                )
                value = self.get_string(base_form)
            if value is None and decl.has_starts_with and form.starts_with is not decl.default_starts_with:
                base_form = decl.get_adjective_form(
                    decl.default_starts_with, form.gender, form.number, form.case,
                    form.article, form.possessive,
                )
                value = self.get_string(base_form)
            if value is None and decl.has_allowed_cases and form.case is not decl.default_case:
                base_form = decl.get_adjective_form(
                    form.starts_with, form.gender, form.number, decl.default_case,
                    form.article, form.possessive,
                )
                value = self.get_string(base_form)
            if (
                value is None
                and decl.has_possessive_in_adjective
                and form.possessive is not decl.default_possessive
            ):
                base_form = decl.get_adjective_form(
                    form.starts_with, form.gender, form.number, form.case,
                    form.article, decl.default_possessive,
                )
                value = self.get_string(base_form)
            if value is None and decl.has_gender and form.gender is not decl.default_gender:
                base_form = decl.get_adjective_form(
                    form.starts_with, decl.default_gender, form.number, form.case,
                    form.article, form.possessive,
                )
                value = self.get_string(base_form)
            if value is None and decl.has_plural and form.number is not LanguageNumber.SINGULAR:
                number_to_try = (
                    LanguageNumber.SINGULAR
                    if form.number is LanguageNumber.PLURAL
                    else LanguageNumber.PLURAL
                )
                base_form = decl.get_adjective_form(
                    form.starts_with, form.gender, number_to_try, decl.default_case,
                    form.article, form.possessive,
                )
                value = self.get_string(base_form)
            if value is None:
                value = self.get_default_value()
                if value is None:
                    logger.debug(
                        f"{VALIDATION_ERROR_HEADER} The adjective {name} has no {form} form "
                        "and no default could be found"
                    )
                    return False
                logger.debug(
                    f"{VALIDATION_ERROR_HEADER} The adjective {name} has no obvious default for {form} form"
                )
            self.set_string(form, self.derive_default_string(form, value, base_form))
        return True

    def __repr__(self) -> str:
        first = next(iter(self.declension.adjective_forms))
        return f"Adj-{self.declension.language}-'{self.get_all_values().get(first)}'"


class Article(NounModifier):
    term_type = TermType.ARTICLE

    def __init__(self, declension, name: str, article_type: LanguageArticle):
        super().__init__(declension, name)
        self.article_type = article_type

    @property
    def position(self) -> LanguagePosition:
        return LanguagePosition.PRE

    def get_default_value(self) -> Optional[str]:
        decl = self.declension
        return self.get_string(
            decl.get_article_form(
                decl.default_starts_with, decl.default_gender, LanguageNumber.SINGULAR, decl.default_case
            )
        )

    def get_agreeing_string(
        self, number: LanguageNumber, gender: LanguageGender, starts_with: LanguageStartsWith
    ) -> Optional[str]:
        decl = self.declension
        return self.get_string(decl.get_article_form(starts_with, gender, number, decl.default_case))

    def validate(self, name: str) -> bool:
        decl = self.declension
        return self.default_validate(
            name,
            {
                decl.get_article_form(
                    LanguageStartsWith.CONSONANT,
                    decl.default_gender,
                    LanguageNumber.SINGULAR,
                    LanguageCase.NOMINATIVE,
                )
            },
        )

    def default_validate(self, name: str, required_forms: Iterable[ArticleForm]) -> bool:
        decl = self.declension
        required = set(required_forms)
        for form in decl.article_forms:
            if self.get_string(form) is not None:
                continue
            if form in required:
                logger.debug(
                    f"{VALIDATION_ERROR_HEADER} The article {name} is missing required {form} form"
                )
            value = None
            if decl.has_starts_with and form.starts_with is not decl.default_starts_with:
                value = self.get_string(
                    decl.get_article_form(decl.default_starts_with, form.gender, form.number, form.case)
                )
            if value is None and decl.has_gender and form.gender is not decl.default_gender:
                value = self.get_string(
                    decl.get_article_form(form.starts_with, decl.default_gender, form.number, form.case)
                )
            if value is None and decl.has_allowed_cases and form.case is not decl.default_case:
                value = self.get_string(
                    decl.get_article_form(form.starts_with, form.gender, form.number, decl.default_case)
                )
            if value is None and form.number is not LanguageNumber.SINGULAR:
                value = self.get_string(
                    decl.get_article_form(
                        form.starts_with, form.gender, LanguageNumber.SINGULAR, decl.default_case
                    )
                )
            if value is None:
                value = self.get_default_value()
                if value is None:
                    logger.info(
                        f"{VALIDATION_ERROR_HEADER} The article {name} has no {form} form "
                        "and no default could be found"
                    )
                    return False
                logger.info(
                    f"{VALIDATION_ERROR_HEADER} The article {name} has no obvious default for {form} form"
                )
            self.set_string(form, value)
        return True

    def __repr__(self) -> str:
        first = next(iter(self.declension.article_forms))
        return f"Article-{self.declension.language}-'{self.get_all_values().get(first)}'"


__all__ = [
    "VALIDATION_ERROR_HEADER",
    "VALIDATION_WARNING_HEADER",
    "skinny",
    "GrammaticalTerm",
    "Noun",
    "LegacyArticledNoun",
    "NounModifier",
    "Adjective",
    "Article",
]
