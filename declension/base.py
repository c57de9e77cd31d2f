"""
declension/base.py
------------------

The per-language rule engine.

A LanguageDeclension declares the legal form space of one language
(through its DeclensionTraits and its form lists), creates the word stores
for that language, and resolves requests for forms:

- exact lookups return None when the language has no such form;
- approximate lookups drop dimensions one at a time, unsupported
  dimensions first, until a legal form is found.

Declensions are built once by the factory and never mutated afterwards, so
they can be shared across threads without locking.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from functools import cached_property
from typing import Dict, Optional, Sequence, Tuple

import structlog

from declension.enums import (
    LanguageArticle,
    LanguageCase,
    LanguageGender,
    LanguageNumber,
    LanguagePosition,
    LanguagePossessive,
    LanguageStartsWith,
    NounType,
    TermType,
)
from declension.errors import UnsupportedOperationError
from declension.forms import (
    AdjectiveForm,
    ArticleForm,
    LegacyArticledNounForm,
    NounForm,
)
from declension.traits import ARTICLED_TRAITS, DEFAULT_TRAITS, DeclensionTraits

logger = structlog.get_logger()

SG = LanguageNumber.SINGULAR
PL = LanguageNumber.PLURAL


class LanguageDeclension(ABC):
    """Base rule engine; families override forms, stores and lookups."""

    traits: DeclensionTraits = DEFAULT_TRAITS

    # Word stores created by create_noun / create_adjective
    noun_class: type
    adjective_class: type

    def __init__(self, language):
        self._language = language

    @property
    def language(self):
        return self._language

    def __repr__(self) -> str:
        return type(self).__name__

    # ------------------------------------------------------------------
    # 1. Form lists
    # ------------------------------------------------------------------

    @property
    @abstractmethod
    def all_noun_forms(self) -> Sequence[NounForm]:
        ...

    @property
    def entity_forms(self) -> Sequence[NounForm]:
        """Forms a system-defined (entity) noun must supply."""
        return self.all_noun_forms

    @property
    def field_forms(self) -> Sequence[NounForm]:
        """Reduced set for customer-entered field names."""
        return self.all_noun_forms

    @property
    def other_forms(self) -> Sequence[NounForm]:
        """Minimal fallback set, usually singular nominative."""
        return self.all_noun_forms[:1]

    @property
    @abstractmethod
    def adjective_forms(self) -> Sequence[AdjectiveForm]:
        ...

    @property
    def article_forms(self) -> Sequence[ArticleForm]:
        raise UnsupportedOperationError(
            "You can only ask for article forms of a language with articles"
        )

    def forms_for(self, term_type: TermType) -> Sequence:
        if term_type is TermType.NOUN:
            return self.all_noun_forms
        if term_type is TermType.ADJECTIVE:
            return self.adjective_forms
        return self.article_forms

    @cached_property
    def _ordinal_index(self) -> Dict[TermType, Dict[object, int]]:
        index: Dict[TermType, Dict[object, int]] = {}
        for term_type in TermType:
            if term_type is TermType.ARTICLE and not self.has_article:
                continue
            index[term_type] = {
                form: i for i, form in enumerate(self.forms_for(term_type))
            }
        return index

    def form_ordinal(self, term_type: TermType, form) -> Optional[int]:
        """Position of `form` in this declension's list for `term_type`."""
        return self._ordinal_index.get(term_type, {}).get(form)

    # ------------------------------------------------------------------
    # 2. Term creation
    # ------------------------------------------------------------------

    def create_noun(
        self,
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
        return self.noun_class(
            self,
            name,
            plural_alias,
            noun_type,
            entity_name,
            starts_with,
            gender,
            access,
            is_standard_field,
            is_copied_from_default,
        )

    def create_adjective(
        self,
        name: str,
        starts_with: Optional[LanguageStartsWith] = None,
        position: Optional[LanguagePosition] = None,
    ):
        return self.adjective_class(self, name, position)

    def create_article(self, name: str, article_type: LanguageArticle):
        raise UnsupportedOperationError(
            "You can only create articles for a language with articles"
        )

    # ------------------------------------------------------------------
    # 3. Capabilities (read from the traits)
    # ------------------------------------------------------------------

    @property
    def has_gender(self) -> bool:
        return self.traits.has_gender

    @property
    def has_starts_with(self) -> bool:
        return self.traits.has_starts_with

    @property
    def has_ends_with(self) -> bool:
        return self.traits.has_ends_with

    @property
    def has_starts_with_in_adjective(self) -> bool:
        return self.traits.starts_with_in_adjective

    @property
    def has_auto_derived_starts_with(self) -> bool:
        return self.traits.has_auto_derived_starts_with

    @property
    def has_plural(self) -> bool:
        return self.traits.has_plural

    @property
    def allowed_numbers(self) -> Tuple[LanguageNumber, ...]:
        return self.traits.numbers

    @property
    def has_possessive(self) -> bool:
        return self.traits.has_possessive

    @property
    def has_possessive_in_adjective(self) -> bool:
        return self.traits.has_possessive_in_adjective

    @property
    def has_article(self) -> bool:
        return self.traits.has_article

    @property
    def has_article_in_noun_form(self) -> bool:
        return self.traits.has_article_in_noun_form

    @property
    def is_article_in_noun_form_auto_derived(self) -> bool:
        return self.traits.is_article_in_noun_form_auto_derived

    @property
    def has_required_cases(self) -> bool:
        return len(self.required_cases) > 1

    @property
    def has_allowed_cases(self) -> bool:
        return len(self.allowed_cases) > 1

    @property
    def has_capitalization(self) -> bool:
        return self.traits.has_capitalization

    @property
    def required_genders(self) -> Optional[Tuple[LanguageGender, ...]]:
        return self.traits.required_genders

    @property
    def required_cases(self) -> Tuple[LanguageCase, ...]:
        return self.traits.required_cases

    @property
    def allowed_cases(self) -> Tuple[LanguageCase, ...]:
        return self.traits.cases

    @property
    def required_starts_with(self) -> Tuple[LanguageStartsWith, ...]:
        return self.traits.required_starts_with

    @property
    def required_possessive(self) -> Tuple[LanguagePossessive, ...]:
        return self.traits.required_possessive

    @property
    def default_gender(self) -> LanguageGender:
        return self.traits.default_gender

    @property
    def default_starts_with(self) -> LanguageStartsWith:
        return self.traits.default_starts_with

    @property
    def default_adjective_position(self) -> LanguagePosition:
        return self.traits.default_adjective_position

    @property
    def default_case(self) -> LanguageCase:
        return self.traits.default_case

    @property
    def default_article(self) -> LanguageArticle:
        return self.traits.default_article

    @property
    def default_possessive(self) -> LanguagePossessive:
        return self.traits.default_possessive

    @property
    def is_inflected(self) -> bool:
        return self.traits.is_inflected

    @property
    def move_noun_inflection_to_first_modifier(self) -> bool:
        return self.traits.move_noun_inflection_to_first_modifier

    @property
    def has_subject_gender_in_verb_conjugation(self) -> bool:
        return self.traits.has_subject_gender_in_verb_conjugation

    @property
    def has_classifiers(self) -> bool:
        return self.traits.has_classifiers

    @property
    def default_classifier(self) -> Optional[str]:
        return None

    @property
    def allowed_article_types(self) -> Tuple[LanguageArticle, ...]:
        return self.traits.allowed_article_types

    @property
    def should_infer_noun_def_article_from_particle(self) -> bool:
        return self.traits.should_infer_noun_def_article_from_particle

    @property
    def should_lowercase_entity_in_compound_nouns(self) -> bool:
        return self.traits.should_lowercase_entity_in_compound_nouns

    @property
    def max_distance_for_modifiers(self) -> int:
        return self.traits.modifier_distance

    # ------------------------------------------------------------------
    # 4. Exact lookups
    # ------------------------------------------------------------------

    def get_exact_noun_form(
        self,
        number: LanguageNumber,
        case: LanguageCase,
        possessive: LanguagePossessive,
        article: LanguageArticle,
    ) -> Optional[NounForm]:
        for form in self.all_noun_forms:
            if (
                form.number is number
                and form.case is case
                and form.article is article
                and form.possessive is possessive
            ):
                return form
        return None

    def get_adjective_form(
        self,
        starts_with: LanguageStartsWith,
        gender: LanguageGender,
        number: LanguageNumber,
        case: LanguageCase,
        article: LanguageArticle,
        possessive: LanguagePossessive,
    ) -> Optional[AdjectiveForm]:
        for form in self.adjective_forms:
            if (
                form.number is number
                and form.case is case
                and form.gender is gender
                and form.starts_with is starts_with
                and form.article is article
                and form.possessive is possessive
            ):
                return form
        return None

    def get_article_form(
        self,
        starts_with: LanguageStartsWith,
        gender: LanguageGender,
        number: LanguageNumber,
        case: LanguageCase,
    ) -> Optional[ArticleForm]:
        for form in self.article_forms:
            if (
                (not self.has_plural or form.number is number)
                and form.case is case
                and (not self.has_gender or form.gender is gender)
                and (not self.has_starts_with or form.starts_with is starts_with)
            ):
                return form
        return None

    def get_noun_form(self, number: LanguageNumber, case: LanguageCase) -> NounForm:
        return self.get_approximate_noun_form(
            number, case, LanguagePossessive.NONE, LanguageArticle.ZERO
        )

    def get_noun_form_for_article(
        self, number: LanguageNumber, article: LanguageArticle
    ) -> NounForm:
        return self.get_approximate_noun_form(
            number, self.default_case, LanguagePossessive.NONE, article
        )

    def get_equivalent_noun_form(self, form: NounForm) -> Optional[NounForm]:
        """This declension's form with the same dimensions as `form`."""
        return self.get_exact_noun_form(form.number, form.case, form.possessive, form.article)

    def get_equivalent_adjective_form(self, form: AdjectiveForm) -> Optional[AdjectiveForm]:
        return self.get_adjective_form(
            form.starts_with, form.gender, form.number, form.case, form.article, form.possessive
        )

    def get_equivalent_article_form(self, form: ArticleForm) -> Optional[ArticleForm]:
        return self.get_article_form(form.starts_with, form.gender, form.number, form.case)

    # ------------------------------------------------------------------
    # 5. Approximate lookups
    # ------------------------------------------------------------------

    def get_approximate_noun_form(
        self,
        number: LanguageNumber,
        case: LanguageCase,
        possessive: LanguagePossessive,
        article: LanguageArticle,
    ) -> NounForm:
        base = self.get_exact_noun_form(number, case, possessive, article)

        # Articles that are separate words: resolve without the article and
        # let the noun prefix it.
        if base is None and not self.has_article_in_noun_form and article is not self.default_article:
            base = self.get_approximate_noun_form(number, case, possessive, self.default_article)
            if base is not None:
                return LegacyArticledNounForm.wrap(base, article) if self.has_article else base

        poss_try = possessive if self.has_possessive else self.default_possessive
        num_try = number if self.has_plural else SG
        art_try = article if self.has_article_in_noun_form else self.default_article
        case_try = case if self.has_required_cases else self.default_case

        # Unsupported dimensions first
        if base is None and not self.has_possessive and possessive is not self.default_possessive:
            base = self.get_exact_noun_form(num_try, case_try, self.default_possessive, art_try)
        if base is None and not self.has_article and article is not self.default_article:
            base = self.get_exact_noun_form(num_try, case_try, poss_try, art_try)
        if base is None and not self.has_required_cases and case is not self.default_case:
            base = self.get_exact_noun_form(num_try, self.default_case, poss_try, art_try)
        # Then supported ones
        if base is None and self.has_possessive and possessive is not self.default_possessive:
            base = self.get_exact_noun_form(num_try, case_try, self.default_possessive, art_try)
        if base is None and self.has_article_in_noun_form and article is not self.default_article:
            base = self.get_exact_noun_form(num_try, case_try, poss_try, self.default_article)
        if base is None and self.has_required_cases and case is not self.default_case:
            base = self.get_exact_noun_form(num_try, self.default_case, poss_try, art_try)
        if base is None and number is not PL:
            base = self.get_exact_noun_form(num_try, case_try, poss_try, art_try)
        # dual falls back to plural
        if base is None and number is LanguageNumber.DUAL:
            base = self.get_exact_noun_form(PL, case_try, poss_try, art_try)

        if base is None:
            assert False, "Programmer error, you asked for an illegal noun form"
            base = self.all_noun_forms[0]
        return base

    def get_approximate_adjective_form(
        self,
        starts_with: LanguageStartsWith,
        gender: LanguageGender,
        number: LanguageNumber,
        case: LanguageCase,
        article: LanguageArticle,
        possessive: LanguagePossessive,
    ) -> AdjectiveForm:
        base = self.get_adjective_form(starts_with, gender, number, case, article, possessive)
        if base is not None:
            return base

        sw_try = starts_with if self.has_starts_with else self.default_starts_with
        gender_try = gender if self.has_gender else self.default_gender
        num_try = number if self.has_plural else SG
        art_try = (
            article
            if (self.has_article or self.has_article_in_noun_form)
            and article in self.allowed_article_types
            else self.default_article
        )
        case_try = case if self.has_required_cases else self.default_case
        poss_try = possessive if self.has_possessive_in_adjective else self.default_possessive

        def lookup(sw=sw_try, g=gender_try, n=num_try, c=case_try, a=art_try, p=poss_try):
            return self.get_adjective_form(sw, g, n, c, a, p)

        # Drop unsupported values first
        if not self.has_possessive_in_adjective and possessive is not self.default_possessive:
            base = lookup(p=self.default_possessive)
        if base is None and not self.has_article and article is not self.default_article:
            base = lookup(a=self.default_article)
        if base is None and not self.has_starts_with and starts_with is not self.default_starts_with:
            base = lookup(sw=self.default_starts_with)
        if base is None and not self.has_gender and gender is not self.default_gender:
            base = lookup(g=self.default_gender)
        if base is None and not self.has_required_cases and case is not self.default_case:
            base = lookup(c=self.default_case)
        # Then supported ones: possessive, article, starts with, gender, case, number
        if base is None and self.has_possessive and possessive is not self.default_possessive:
            base = lookup(p=self.default_possessive)
        if base is None and self.has_article and article is not self.default_article:
            base = lookup(a=self.default_article)
        if base is None and self.has_starts_with and starts_with is not self.default_starts_with:
            base = lookup(sw=self.default_starts_with)
        if base is None and self.has_gender and gender is not self.default_gender:
            base = lookup(g=self.default_gender)
        if base is None and self.has_required_cases and case is not self.default_case:
            base = lookup(c=self.default_case)
        if base is None and number is not SG:
            base = lookup(n=SG)

        if base is None:
            assert False, "Programmer error, you asked for an illegal adjective form"
            base = self.adjective_forms[0]
        return base

    def get_approximate_article_form(
        self,
        starts_with: LanguageStartsWith,
        gender: LanguageGender,
        number: LanguageNumber,
        case: LanguageCase,
    ) -> ArticleForm:
        base = self.get_article_form(starts_with, gender, number, case)
        if base is None and starts_with is not self.default_starts_with:
            base = self.get_article_form(self.default_starts_with, gender, number, case)
        if base is None:
            assert False, (
                "Programmer error, you asked for an illegal article form: "
                f"{starts_with}:{gender}:{number}:{case}"
            )
            base = self.article_forms[0]
        return base

    # ------------------------------------------------------------------
    # 6. Rendering helpers
    # ------------------------------------------------------------------

    def form_lowercase_noun_form(self, value: str, form: NounForm) -> str:
        return self.language.to_folded_case(value) if self.has_capitalization else value


class ArticledDeclension(LanguageDeclension):
    """A language whose articles are words of their own."""

    traits = ARTICLED_TRAITS

    @property
    @abstractmethod
    def article_forms(self) -> Sequence[ArticleForm]:
        ...

    article_class: type

    def create_article(self, name: str, article_type: LanguageArticle):
        return self.article_class(self, name, article_type)

    @abstractmethod
    def get_default_article_string(
        self, form: ArticleForm, article_type: LanguageArticle
    ) -> Optional[str]:
        """
        Article string to prefix to an entity noun, or None for no article.

        Raises UnsupportedOperationError when the family has no computable
        article, so the dictionary must define it.
        """


__all__ = ["LanguageDeclension", "ArticledDeclension"]
