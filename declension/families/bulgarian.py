"""
declension/families/bulgarian.py
--------------------------------

Bulgarian (and Macedonian): three genders and a definite article suffixed
to the noun. Only the bare singular and plural are stored; the definite
forms, including the short masculine object form, are derived from them
when asked for.
"""

from __future__ import annotations

from typing import Dict, Optional, Sequence

import structlog

from declension.base import LanguageDeclension
from declension.enums import LanguageArticle, LanguageCase, LanguageGender, LanguageNumber
from declension.forms import AdjectiveForm, NounForm, make_key
from declension.stores import ComplexAdjective
from declension.terms import VALIDATION_ERROR_HEADER, Noun
from declension.traits import DEFAULT_TRAITS

logger = structlog.get_logger()

N = LanguageGender.NEUTER
F = LanguageGender.FEMININE
M = LanguageGender.MASCULINE
SG = LanguageNumber.SINGULAR
PL = LanguageNumber.PLURAL
NOM = LanguageCase.NOMINATIVE
OBJ = LanguageCase.OBJECTIVE
ZERO = LanguageArticle.ZERO
DEF = LanguageArticle.DEFINITE

# Definite suffixes
TA = "та"
TO = "то"
TE = "те"
YAT = "ят"
AT = "ът"
YA = "я"  # -я (short form after й)
A = "а"  # -а (short form)

ENDS_WITH_I = ("Й", "й")
ENDS_WITH_A = ("я", "а")
ENDS_WITH_O = ("о",)
T = "т"


def _noun_form(number, case=NOM, article=ZERO) -> NounForm:
    key = make_key(number) if article is ZERO else make_key(number, case, article)
    return NounForm(number=number, case=case, article=article, key=key)


class BulgarianNounForm:
    SINGULAR = _noun_form(SG)
    PLURAL = _noun_form(PL)
    SINGULAR_DEF = _noun_form(SG, article=DEF)
    # Only used in the masculine
    SINGULAR_OBJ_DEF = _noun_form(SG, OBJ, DEF)
    PLURAL_DEF = _noun_form(PL, article=DEF)

    ALL = (SINGULAR, PLURAL, SINGULAR_DEF, SINGULAR_OBJ_DEF, PLURAL_DEF)
    NORMAL = (SINGULAR, PLURAL)


def _modifier(number, gender, article=ZERO, case=NOM) -> AdjectiveForm:
    return AdjectiveForm(
        gender=gender,
        number=number,
        case=case,
        article=article,
        key=make_key(number, gender, article, case),
    )


class BulgarianModifierForm:
    SINGULAR_MASCULINE = _modifier(SG, M)
    SINGULAR_FEMININE = _modifier(SG, F)
    SINGULAR_NEUTER = _modifier(SG, N)
    PLURAL_NEUTER = _modifier(PL, N)
    SINGULAR_MASCULINE_DEF = _modifier(SG, M, DEF)
    SINGULAR_MASCULINE_OBJ_DEF = _modifier(SG, M, DEF, OBJ)
    SINGULAR_FEMININE_DEF = _modifier(SG, F, DEF)
    SINGULAR_NEUTER_DEF = _modifier(SG, N, DEF)
    PLURAL_NEUTER_DEF = _modifier(PL, N, DEF)

    ALL = (
        SINGULAR_MASCULINE,
        SINGULAR_FEMININE,
        SINGULAR_NEUTER,
        PLURAL_NEUTER,
        SINGULAR_MASCULINE_DEF,
        SINGULAR_MASCULINE_OBJ_DEF,
        SINGULAR_FEMININE_DEF,
        SINGULAR_NEUTER_DEF,
        PLURAL_NEUTER_DEF,
    )
    REQUIRED = (SINGULAR_MASCULINE, SINGULAR_MASCULINE_DEF, SINGULAR_FEMININE, SINGULAR_NEUTER)


class BulgarianNoun(Noun):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.singular: Optional[str] = None
        self.plural: Optional[str] = None

    def get_all_defined_values(self) -> Dict[NounForm, str]:
        if self.plural is None:
            if self.is_standard_field:
                logger.debug("noun_standard_field_without_plural", noun=self.name)
            return {BulgarianNounForm.SINGULAR: self.singular} if self.singular is not None else {}
        values = {BulgarianNounForm.PLURAL: self.plural}
        if self.singular is not None:
            values[BulgarianNounForm.SINGULAR] = self.singular
        return values

    def get_default_string(self, is_plural: bool) -> Optional[str]:
        if is_plural and self.plural is not None:
            return self.plural
        return self.singular

    def get_string(self, form: Optional[NounForm]) -> Optional[str]:
        if form is None:
            return None
        base = self.singular if form.number is SG else self.plural
        if form.article is not DEF or not base:
            return base
        ends_with_i = base.endswith(ENDS_WITH_I)
        ends_with_a = base.endswith(ENDS_WITH_A)
        if form.number is not SG:
            return base + (TA if ends_with_a else TE)

        if ends_with_i:
            base = base[:-1]
        if self.gender is F:
            return base + TA
        if self.gender is N:
            return base + TO
        # masculine
        if ends_with_a:
            return base + TA
        if base.endswith(ENDS_WITH_O):
            return base + TO
        if form.case is OBJ:
            return base + (YA if ends_with_i else A)
        return base + (YAT if ends_with_i else AT)

    def set_string(self, form: NounForm, value: Optional[str]) -> None:
        # Definite forms are derived, never stored
        if form.article is not ZERO:
            return
        if form.number.is_plural:
            self.plural = value
        else:
            self.singular = value

    def validate_values(self, name: str, case: LanguageCase = NOM) -> bool:
        if self.singular is None:
            logger.info(f"{VALIDATION_ERROR_HEADER} The noun {name} has no singular form")
            return False
        return True

    def make_skinny(self) -> None:
        pass


class BulgarianAdjective(ComplexAdjective):
    def validate(self, name: str) -> bool:
        return self.default_validate(name, BulgarianModifierForm.REQUIRED)

    def derive_default_string(self, form, value, base_form):
        if form.article is DEF and (base_form is None or base_form.article is not DEF):
            if not value:
                return value
            if form.number is not SG:
                return value + TE
            if form.gender is F:
                return value + TA
            if form.gender is N:
                return value + TO
            return value
        if form is BulgarianModifierForm.SINGULAR_MASCULINE_OBJ_DEF:
            assert base_form is BulgarianModifierForm.SINGULAR_MASCULINE_DEF, "Defaulting from wrong form"
            return self._strip_final_t(value)
        return value

    @staticmethod
    def _strip_final_t(value: str) -> str:
        """Short object form: drop the т of the full definite article."""
        if value.endswith(T):
            return value[:-1]
        space = value.find(" ")
        if space > 0 and value[space - 1] == T:
            # the т ends the first word
            return value[: space - 1] + value[space:]
        return value


class BulgarianDeclension(LanguageDeclension):
    traits = DEFAULT_TRAITS.derive(
        has_gender=True,
        required_genders=(F, M, N),
        allowed_cases=(NOM, OBJ),
        has_article_in_noun_form=True,
        is_article_in_noun_form_auto_derived=True,
        allowed_article_types=(ZERO, DEF),
        move_noun_inflection_to_first_modifier=True,
    )
    noun_class = BulgarianNoun
    adjective_class = BulgarianAdjective

    @property
    def all_noun_forms(self) -> Sequence[NounForm]:
        return BulgarianNounForm.ALL

    @property
    def entity_forms(self) -> Sequence[NounForm]:
        return BulgarianNounForm.NORMAL

    @property
    def field_forms(self) -> Sequence[NounForm]:
        return BulgarianNounForm.NORMAL

    @property
    def other_forms(self) -> Sequence[NounForm]:
        return BulgarianNounForm.NORMAL

    @property
    def adjective_forms(self) -> Sequence[AdjectiveForm]:
        return BulgarianModifierForm.ALL
