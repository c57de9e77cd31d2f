"""
declension/families/germanic.py
-------------------------------

German, Swedish, Dutch, Danish, Norwegian, Icelandic, Luxembourgish and
Yiddish.

The form space is built from the traits of each language: nouns vary by
number x case (x article, for the Scandinavian languages whose definite
article is a suffix), adjectives by starts-with x number x gender x
article x case, articles by starts-with x number x gender x case.

Languages with a prefixed article compute the default article of an entity
noun from small tables; the suffixing ones need every form supplied.
"""

from __future__ import annotations

from typing import Dict, Optional, Sequence, Tuple

import structlog

from declension.base import ArticledDeclension
from declension.enums import (
    LanguageArticle,
    LanguageCase,
    LanguageGender,
    LanguageNumber,
    LanguagePossessive,
    LanguageStartsWith,
    NounType,
)
from declension.errors import UnsupportedOperationError
from declension.form_maps import ModifierFormMap, NounFormMap
from declension.forms import AdjectiveForm, ArticleForm, NounForm, make_key
from declension.stores import ComplexAdjective, ComplexArticle, ComplexArticledNoun
from declension.terms import VALIDATION_WARNING_HEADER
from declension.traits import ARTICLED_TRAITS

logger = structlog.get_logger()

N = LanguageGender.NEUTER
F = LanguageGender.FEMININE
M = LanguageGender.MASCULINE
SG = LanguageNumber.SINGULAR
PL = LanguageNumber.PLURAL

ZERO_ARTICLES = (LanguageArticle.ZERO,)
ZERO_AND_DEF_ARTICLES = (LanguageArticle.ZERO, LanguageArticle.DEFINITE)
ALL_ARTICLES = (LanguageArticle.ZERO, LanguageArticle.INDEFINITE, LanguageArticle.DEFINITE)

FOUR_CASES = (
    LanguageCase.NOMINATIVE,
    LanguageCase.ACCUSATIVE,
    LanguageCase.GENITIVE,
    LanguageCase.DATIVE,
)


class GermanicNoun(ComplexArticledNoun):
    def __init__(self, declension, name, plural_alias=None, noun_type=NounType.OTHER,
                 entity_name=None, starts_with=None, gender=None, access=None,
                 is_standard_field=False, is_copied_from_default=False):
        if not declension.has_starts_with:
            starts_with = LanguageStartsWith.CONSONANT
        super().__init__(declension, name, plural_alias, noun_type, entity_name,
                         starts_with, gender, access, is_standard_field,
                         is_copied_from_default)

    def validate_values(self, name: str, case: LanguageCase = LanguageCase.NOMINATIVE) -> bool:
        return self.default_validate(name, self.declension.field_forms)

    def validate_gender(self, name: str) -> bool:
        if self.gender not in self.declension.required_genders:
            logger.info(f"{VALIDATION_WARNING_HEADER}{name} invalid gender")
            self.gender = self.declension.default_gender
        return True

    def append_article_to_base(self, base, article, form):
        # Germanic nouns keep their capitalization and take a space
        if article is None:
            return base
        return f"{article} {base}"


class GermanicAdjective(ComplexAdjective):
    def validate(self, name: str) -> bool:
        decl = self.declension
        self.default_validate(
            name,
            {
                decl.get_adjective_form(
                    LanguageStartsWith.CONSONANT, N, SG, LanguageCase.NOMINATIVE,
                    LanguageArticle.ZERO, LanguagePossessive.NONE,
                )
            },
        )
        return True


class GermanicArticle(ComplexArticle):
    def validate(self, name: str) -> bool:
        decl = self.declension
        self.default_validate(
            name,
            {decl.get_article_form(LanguageStartsWith.CONSONANT, N, SG, LanguageCase.NOMINATIVE)},
        )
        return True


class GermanicDeclension(ArticledDeclension):
    traits = ARTICLED_TRAITS.derive(
        has_gender=True,
        required_genders=(N, F, M),
        should_lowercase_entity_in_compound_nouns=True,
    )
    noun_class = GermanicNoun
    adjective_class = GermanicAdjective
    article_class = GermanicArticle

    # Articles that get their own noun forms; more than one means the
    # definite article is a suffix of the noun.
    noun_articles: Tuple[LanguageArticle, ...] = ZERO_ARTICLES
    adjective_articles: Tuple[LanguageArticle, ...] = ZERO_AND_DEF_ARTICLES

    def __init__(self, language):
        super().__init__(language)
        article_in_noun = len(self.noun_articles) > 1

        entity_forms = []
        for number in self.allowed_numbers:
            for case in self.required_cases:
                for article in self.noun_articles:
                    key = (
                        make_key(number, case, article) if article_in_noun else make_key(number, case)
                    )
                    entity_forms.append(NounForm(number=number, case=case, article=article, key=key))
        self._entity_forms = tuple(entity_forms)
        self._field_forms = tuple(
            f for f in entity_forms
            if f.case is LanguageCase.NOMINATIVE and f.article is LanguageArticle.ZERO
        )
        self._noun_form_map = NounFormMap.article_specific(self._entity_forms)

        adjective_forms = []
        for starts_with in self.required_starts_with:
            for number in self.allowed_numbers:
                for gender in self.required_genders:
                    for article in self.adjective_articles:
                        for case in self.required_cases:
                            dims = [gender, number, case, article]
                            if self.has_starts_with:
                                dims.append(starts_with)
                            adjective_forms.append(
                                AdjectiveForm(
                                    starts_with=starts_with, gender=gender, number=number,
                                    case=case, article=article, key=make_key(*dims),
                                )
                            )
        self._adjective_forms = tuple(adjective_forms)
        self._adjective_form_map = ModifierFormMap.article_specific(self._adjective_forms)

        self._article_forms = tuple(
            ArticleForm(starts_with=starts_with, gender=gender, number=number, case=case)
            for starts_with in self.required_starts_with
            for number in self.allowed_numbers
            for gender in self.required_genders
            for case in self.required_cases
        )
        self._article_form_map = ModifierFormMap(self._article_forms)

    @property
    def all_noun_forms(self) -> Sequence[NounForm]:
        return self._entity_forms

    @property
    def field_forms(self) -> Sequence[NounForm]:
        return self._field_forms

    @property
    def other_forms(self) -> Sequence[NounForm]:
        return self._field_forms[:1]

    @property
    def adjective_forms(self) -> Sequence[AdjectiveForm]:
        return self._adjective_forms

    @property
    def article_forms(self) -> Sequence[ArticleForm]:
        return self._article_forms

    def get_adjective_form(self, starts_with, gender, number, case, article, possessive):
        form_map = self._adjective_form_map.get(article)
        return None if form_map is None else form_map.get_form(starts_with, gender, number, case)

    def get_article_form(self, starts_with, gender, number, case):
        return self._article_form_map.get_form(starts_with, gender, number, case)

    def get_exact_noun_form(self, number, case, possessive, article):
        if possessive is not LanguagePossessive.NONE:
            return None
        form_map = self._noun_form_map.get(article)
        return None if form_map is None else form_map.get_form(number, case)

    def get_default_article_string(self, form, article_type) -> Optional[str]:
        raise UnsupportedOperationError("Postfixed articles must be defined with the language")


def _article_from_tables(
    form: ArticleForm,
    article_type: LanguageArticle,
    definite: Dict[LanguageCase, Dict[LanguageNumber, Dict[LanguageGender, str]]],
    indefinite: Dict[LanguageCase, Dict[LanguageGender, str]],
) -> Optional[str]:
    if article_type is LanguageArticle.DEFINITE:
        return definite[form.case][form.number][form.gender]
    if article_type is LanguageArticle.INDEFINITE:
        if form.number is PL:
            return None
        return indefinite[form.case][form.gender]
    return None


# ---------------------------------------------------------------------------
# Languages with prefixed articles
# ---------------------------------------------------------------------------


class GermanDeclension(GermanicDeclension):
    traits = GermanicDeclension.traits.derive(
        required_cases=FOUR_CASES,
        should_lowercase_entity_in_compound_nouns=False,
    )

    DEFINITE_ARTICLE = {
        LanguageCase.NOMINATIVE: {SG: {N: "Das", F: "Die", M: "Der"}, PL: {N: "Die", F: "Die", M: "Die"}},
        LanguageCase.ACCUSATIVE: {SG: {N: "Das", F: "Die", M: "Den"}, PL: {N: "Die", F: "Die", M: "Die"}},
        LanguageCase.GENITIVE: {SG: {N: "Des", F: "Der", M: "Des"}, PL: {N: "Der", F: "Der", M: "Der"}},
        LanguageCase.DATIVE: {SG: {N: "Dem", F: "Der", M: "Dem"}, PL: {N: "Den", F: "Den", M: "Den"}},
    }
    INDEFINITE_ARTICLE = {
        LanguageCase.NOMINATIVE: {N: "Ein", F: "Eine", M: "Ein"},
        LanguageCase.ACCUSATIVE: {N: "Ein", F: "Eine", M: "Einen"},
        LanguageCase.GENITIVE: {N: "Eines", F: "Einer", M: "Eines"},
        LanguageCase.DATIVE: {N: "Einem", F: "Einer", M: "Einem"},
    }

    def __init__(self, language):
        assert language.language_code == "de", "Initializing a variant german declension for non-german"
        super().__init__(language)

    def get_default_article_string(self, form, article_type) -> Optional[str]:
        return _article_from_tables(form, article_type, self.DEFINITE_ARTICLE, self.INDEFINITE_ARTICLE)

    def form_lowercase_noun_form(self, value: str, form: NounForm) -> str:
        # Only the article is lowercased; nouns stay capitalized
        if not value or form.article is LanguageArticle.ZERO:
            return value
        return self.language.to_folded_case(value[:1]) + value[1:]


class DutchDeclension(GermanicDeclension):
    traits = GermanicDeclension.traits.derive(required_genders=(N, LanguageGender.COMMON))

    def __init__(self, language):
        assert language.language_code == "nl", "Initializing a language that isn't dutch"
        super().__init__(language)

    def get_default_article_string(self, form, article_type) -> Optional[str]:
        if article_type is LanguageArticle.DEFINITE:
            if form.number is SG and form.gender is N:
                return "Het"
            return "De"
        if article_type is LanguageArticle.INDEFINITE:
            return None if form.number is PL else "Een"
        return None


class LuxembourgishDeclension(GermanicDeclension):
    traits = GermanicDeclension.traits.derive(
        required_cases=(LanguageCase.NOMINATIVE, LanguageCase.DATIVE)
    )

    DEFINITE_ARTICLE = {
        LanguageCase.NOMINATIVE: {SG: {N: "D'", F: "D'", M: "Den"}, PL: {N: "D'", F: "D'", M: "D'"}},
        LanguageCase.DATIVE: {SG: {N: "Dem", F: "Der", M: "Dem"}, PL: {N: "Den", F: "Den", M: "Den"}},
    }
    INDEFINITE_ARTICLE = {
        LanguageCase.NOMINATIVE: {N: "En", F: "Eng", M: "En"},
        LanguageCase.DATIVE: {N: "Engem", F: "Enger", M: "Engem"},
    }

    def get_default_article_string(self, form, article_type) -> Optional[str]:
        return _article_from_tables(form, article_type, self.DEFINITE_ARTICLE, self.INDEFINITE_ARTICLE)


class YiddishDeclension(GermanicDeclension):
    traits = GermanicDeclension.traits.derive(
        has_starts_with=True,
        required_starts_with=(LanguageStartsWith.CONSONANT, LanguageStartsWith.VOWEL),
        required_cases=(LanguageCase.NOMINATIVE, LanguageCase.ACCUSATIVE, LanguageCase.DATIVE),
    )

    DEFINITE_ARTICLE = {
        LanguageCase.NOMINATIVE: {N: "דאָס", F: "די", M: "דער"},
        LanguageCase.ACCUSATIVE: {N: "דאָס", F: "די", M: "דעם"},
        LanguageCase.DATIVE: {N: "דעם", F: "דער", M: "דעם"},
    }

    def get_default_article_string(self, form, article_type) -> Optional[str]:
        if article_type is LanguageArticle.DEFINITE:
            if form.number is PL:
                return "די"
            return self.DEFINITE_ARTICLE[form.case][form.gender]
        if article_type is LanguageArticle.INDEFINITE:
            if form.number is PL:
                return None
            return "אַן" if form.starts_with is LanguageStartsWith.VOWEL else "אַ"
        return None


# ---------------------------------------------------------------------------
# Languages with a suffixed definite article
# ---------------------------------------------------------------------------


class SwedishDeclension(GermanicDeclension):
    traits = GermanicDeclension.traits.derive(
        required_genders=(N, LanguageGender.EUTER), has_article_in_noun_form=True
    )
    noun_articles = ALL_ARTICLES

    def __init__(self, language):
        assert language.language_code == "sv", "Initializing a language that isn't swedish"
        super().__init__(language)


class DanishDeclension(GermanicDeclension):
    traits = GermanicDeclension.traits.derive(
        required_genders=(N, LanguageGender.COMMON), has_article_in_noun_form=True
    )
    noun_articles = ALL_ARTICLES

    def __init__(self, language):
        assert language.language_code == "da", "Initializing a language that isn't danish"
        super().__init__(language)


class NorwegianDeclension(GermanicDeclension):
    traits = GermanicDeclension.traits.derive(
        has_article_in_noun_form=True, should_infer_noun_def_article_from_particle=True
    )
    noun_articles = ALL_ARTICLES


class IcelandicDeclension(GermanicDeclension):
    traits = GermanicDeclension.traits.derive(
        required_cases=FOUR_CASES,
        has_article_in_noun_form=True,
        should_infer_noun_def_article_from_particle=True,
    )
    noun_articles = ZERO_AND_DEF_ARTICLES
