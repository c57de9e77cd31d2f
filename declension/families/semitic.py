"""
declension/families/semitic.py
------------------------------

Hebrew and Arabic. Both mark definiteness with a prefix on the noun and
its adjectives (ה, ال), so the article lives in the noun form and
adjectives agree in gender, number and definiteness. There is no separate
article word; the article store exists only for dictionary compatibility.

Arabic adds first and second person possessive forms and an accusative
that is rendered from the nominative.
"""

from __future__ import annotations

from typing import Optional, Sequence

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
from declension.forms import AdjectiveForm, ArticleForm, NounForm, SimpleModifierForm, make_key
from declension.stores import ComplexAdjective, ComplexArticledNoun, SimpleArticle
from declension.terms import VALIDATION_ERROR_HEADER
from declension.traits import ARTICLED_TRAITS

logger = structlog.get_logger()

F = LanguageGender.FEMININE
M = LanguageGender.MASCULINE
SG = LanguageNumber.SINGULAR
PL = LanguageNumber.PLURAL
ZERO = LanguageArticle.ZERO
DEF = LanguageArticle.DEFINITE
NOM = LanguageCase.NOMINATIVE


class SemiticDeclension(ArticledDeclension):
    traits = ARTICLED_TRAITS.derive(
        has_gender=True,
        required_genders=(F, M),
        default_gender=F,
        allowed_article_types=(ZERO, DEF),
        has_article_in_noun_form=True,
        has_subject_gender_in_verb_conjugation=True,
    )
    article_class = SimpleArticle

    # Prefix added to the noun for the definite article
    DEFINITE_PREFIX = ""

    @property
    def article_forms(self) -> Sequence[ArticleForm]:
        return SimpleModifierForm.ALL

    def get_article_form(self, starts_with, gender, number, case):
        return SimpleModifierForm.SINGULAR

    def get_definite_article_prefix(self, starts_with: LanguageStartsWith) -> str:
        return self.DEFINITE_PREFIX

    def get_default_article_string(self, form, article_type) -> Optional[str]:
        if article_type is DEF:
            return self.get_definite_article_prefix(form.starts_with)
        assert False, "No default article except for definite"
        return ""


class _SemiticNoun(ComplexArticledNoun):
    """Noun that always starts with a consonant; definiteness is in the form."""

    def __init__(self, declension, name, plural_alias=None, noun_type=NounType.OTHER,
                 entity_name=None, starts_with=None, gender=None, access=None,
                 is_standard_field=False, is_copied_from_default=False):
        super().__init__(declension, name, plural_alias, noun_type, entity_name,
                         LanguageStartsWith.CONSONANT, gender, access, is_standard_field,
                         is_copied_from_default)

    def _definite_from_zero(self, form: NounForm) -> Optional[str]:
        decl = self.declension
        zero_form = decl.get_exact_noun_form(form.number, form.case, form.possessive, ZERO)
        value = self.get_exact_string(zero_form)
        return None if value is None else decl.DEFINITE_PREFIX + value


class _SemiticAdjective(ComplexAdjective):
    def derive_default_string(self, form, value, base_form):
        if form.article is DEF and (base_form is None or base_form.article is not DEF):
            return self.declension.DEFINITE_PREFIX + value
        return value


# ---------------------------------------------------------------------------
# Hebrew
# ---------------------------------------------------------------------------


HEBREW_NOUN_FORMS = tuple(
    NounForm(number=number, article=article, key=make_key(number, article))
    for article in (ZERO, DEF)
    for number in (SG, PL)
)

HEBREW_MODIFIER_FORMS = tuple(
    AdjectiveForm(gender=gender, number=number, article=article, key=make_key(gender, article, number))
    for article in (ZERO, DEF)
    for number in (SG, PL)
    for gender in (M, F)
)


class HebrewNoun(_SemiticNoun):
    def get_default_string(self, is_plural: bool) -> Optional[str]:
        singular, plural = HEBREW_NOUN_FORMS[:2]
        if is_plural and self._values.get(plural) is not None:
            return self._values[plural]
        return self._values.get(singular)

    def validate_values(self, name: str, case: LanguageCase = NOM) -> bool:
        singular, plural, singular_def, plural_def = HEBREW_NOUN_FORMS
        if self._values.get(singular) is None:
            logger.info(f"{VALIDATION_ERROR_HEADER} The noun {name} has no singular form")
            return False
        if self.noun_type is NounType.ENTITY:
            if self._values.get(plural) is None:
                self._values[plural] = self._values[singular]
            for form in (singular_def, plural_def):
                if self._values.get(form) is None:
                    self._values[form] = self._definite_from_zero(form)
        return True


class HebrewAdjective(_SemiticAdjective):
    def validate(self, name: str) -> bool:
        return self.default_validate(name, HEBREW_MODIFIER_FORMS[:4])


class HebrewDeclension(SemiticDeclension):
    noun_class = HebrewNoun
    adjective_class = HebrewAdjective

    DEFINITE_PREFIX = "\u05d4"  # ה

    @property
    def all_noun_forms(self) -> Sequence[NounForm]:
        return HEBREW_NOUN_FORMS

    @property
    def other_forms(self) -> Sequence[NounForm]:
        return HEBREW_NOUN_FORMS[:1]

    @property
    def adjective_forms(self) -> Sequence[AdjectiveForm]:
        return HEBREW_MODIFIER_FORMS


# ---------------------------------------------------------------------------
# Arabic
# ---------------------------------------------------------------------------


FINAL_ALIF = "\u0627"  # ا
# Endings that never take the accusative alif: taa marbuta and hamza
NO_ALIF_ENDINGS = ("\u0629", "\u0621")
# Translators have not confirmed the indefinite accusative alif, so it is off
ADD_ACCUSATIVE_ALIF = False


def add_alif_for_accusative(value: Optional[str]) -> Optional[str]:
    """Mark an indefinite accusative the way MSA orthography does."""
    if not value or not ADD_ACCUSATIVE_ALIF or value.endswith(NO_ALIF_ENDINGS):
        return value
    return value + FINAL_ALIF


class ArabicNoun(_SemiticNoun):
    def get_exact_string(self, form: Optional[NounForm]) -> Optional[str]:
        if form is not None and form.case is LanguageCase.ACCUSATIVE:
            nom_form = self.declension.get_exact_noun_form(form.number, NOM, form.possessive, form.article)
            value = super().get_exact_string(nom_form)
            # definite nouns never take the alif
            return value if form.article is DEF else add_alif_for_accusative(value)
        return super().get_exact_string(form)

    def validate_values(self, name: str, case: LanguageCase = NOM) -> bool:
        required = set(self.declension.field_forms)
        for form in self.declension.all_noun_forms:
            if form.case is LanguageCase.ACCUSATIVE or self.get_exact_string(form) is not None:
                continue
            if self.noun_type is NounType.ENTITY:
                if form.article is DEF:
                    value = self._definite_from_zero(form)
                    if value is not None:
                        self.set_string(form, value)
                    continue
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


class ArabicAdjective(_SemiticAdjective):
    def derive_default_string(self, form, value, base_form):
        if form.possessive is not LanguagePossessive.NONE:
            # already carries the possessive prefix
            return value
        prefix = ""
        if form.article is DEF and (base_form is None or base_form.article is not DEF):
            prefix = self.declension.DEFINITE_PREFIX
        if form.case is LanguageCase.ACCUSATIVE:
            if not value:
                return value
            if form.article is DEF:
                return prefix + value
            return add_alif_for_accusative(prefix + value)
        return prefix + value

    def validate(self, name: str) -> bool:
        return self.default_validate(
            name,
            {
                self.declension.get_adjective_form(
                    LanguageStartsWith.CONSONANT, F, SG, NOM, ZERO, LanguagePossessive.NONE
                )
            },
        )


class ArabicDeclension(SemiticDeclension):
    traits = SemiticDeclension.traits.derive(
        has_possessive=True,
        has_possessive_in_adjective=True,
        required_possessive=(
            LanguagePossessive.NONE,
            LanguagePossessive.FIRST,
            LanguagePossessive.SECOND,
        ),
        required_cases=(NOM,),
        # the genitive is nearly always the nominative, so it is not modeled
        allowed_cases=(NOM, LanguageCase.ACCUSATIVE),
    )
    noun_class = ArabicNoun
    adjective_class = ArabicAdjective

    DEFINITE_PREFIX = "\u0627\u0644"  # ال

    def __init__(self, language):
        assert language.language_code == "ar", "Initializing a variant Arabic declension for non-arabic"
        super().__init__(language)
        self._noun_forms = tuple(
            NounForm(number=number, case=case, possessive=possessive, article=article)
            for number in (SG, PL)
            for case in self.required_cases
            for possessive in self.required_possessive
            for article in self.allowed_article_types
        )
        self._entity_forms = tuple(f for f in self._noun_forms if f.case is NOM)
        self._adjective_forms = tuple(
            AdjectiveForm(gender=gender, number=number, case=case, article=article, possessive=possessive)
            for number in (SG, PL)
            for gender in self.required_genders
            for case in self.required_cases
            for article in self.allowed_article_types
            for possessive in self.required_possessive
        )

    @property
    def all_noun_forms(self) -> Sequence[NounForm]:
        return self._noun_forms

    @property
    def entity_forms(self) -> Sequence[NounForm]:
        return self._entity_forms

    @property
    def other_forms(self) -> Sequence[NounForm]:
        return self._noun_forms

    @property
    def adjective_forms(self) -> Sequence[AdjectiveForm]:
        return self._adjective_forms
