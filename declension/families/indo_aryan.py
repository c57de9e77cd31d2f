"""
declension/families/indo_aryan.py
---------------------------------

Indo-Aryan languages.

- Gujarati, Marathi and Punjabi: nouns by number x case, adjectives by
  number x gender x case.
- Hindi and Urdu: a direct and an oblique case (stored as nominative and
  objective), two genders, adjectives agreeing in all three.
- Bengali: no gender, a definite article suffixed to the noun, and
  uninflected adjectives.
"""

from __future__ import annotations

from typing import Dict, Optional, Sequence

import structlog

from declension.base import ArticledDeclension, LanguageDeclension
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
from declension.forms import AdjectiveForm, NounForm, SimpleModifierForm, make_key
from declension.stores import ComplexAdjective, ComplexArticledNoun, ComplexNoun, SimpleAdjective, SimpleArticle
from declension.terms import VALIDATION_WARNING_HEADER, Noun
from declension.traits import DEFAULT_TRAITS

logger = structlog.get_logger()

N = LanguageGender.NEUTER
F = LanguageGender.FEMININE
M = LanguageGender.MASCULINE
SG = LanguageNumber.SINGULAR
PL = LanguageNumber.PLURAL
NOM = LanguageCase.NOMINATIVE
OBJ = LanguageCase.OBJECTIVE
ACC = LanguageCase.ACCUSATIVE
GEN = LanguageCase.GENITIVE
DAT = LanguageCase.DATIVE
INS = LanguageCase.INSTRUMENTAL
ABL = LanguageCase.ABLATIVE
LOC = LanguageCase.LOCATIVE
ZERO = LanguageArticle.ZERO
C = LanguageStartsWith.CONSONANT


# ---------------------------------------------------------------------------
# 1. Gujarati, Marathi, Punjabi
# ---------------------------------------------------------------------------


class IndoAryanNoun(ComplexNoun):
    def __init__(self, declension, name, plural_alias=None, noun_type=NounType.OTHER,
                 entity_name=None, starts_with=None, gender=None, access=None,
                 is_standard_field=False, is_copied_from_default=False):
        super().__init__(declension, name, plural_alias, noun_type, entity_name,
                         C, gender, access, is_standard_field, is_copied_from_default)

    def validate_values(self, name: str, case: LanguageCase = NOM) -> bool:
        return self.default_validate(name, self.declension.field_forms)

    def validate_gender(self, name: str) -> bool:
        decl = self.declension
        if self.gender not in decl.required_genders:
            logger.info(f"{VALIDATION_WARNING_HEADER}{name} invalid gender")
            self.gender = decl.default_gender
        return True


class IndoAryanAdjective(ComplexAdjective):
    def validate(self, name: str) -> bool:
        decl = self.declension
        # the result is ignored: a missing neuter form is only logged
        self.default_validate(name, {decl.get_adjective_form(C, N, SG, NOM, ZERO, LanguagePossessive.NONE)})
        return True


class IndoAryanDeclension(LanguageDeclension):
    traits = DEFAULT_TRAITS.derive(
        has_gender=True,
        required_genders=(N, F, M),
        default_gender=M,
    )
    noun_class = IndoAryanNoun
    adjective_class = IndoAryanAdjective

    def __init__(self, language):
        super().__init__(language)
        self._entity_forms = tuple(
            NounForm(number=number, case=case, key=make_key(number, case))
            for number in self.allowed_numbers
            for case in self.required_cases
        )
        self._field_forms = tuple(f for f in self._entity_forms if f.case is NOM)
        self._noun_form_map = NounFormMap(self._entity_forms)

        self._adjective_forms = tuple(
            AdjectiveForm(gender=gender, number=number, case=case, key=make_key(gender, number, case))
            for number in self.allowed_numbers
            for gender in self.required_genders
            for case in self.required_cases
        )
        self._adjective_form_map = ModifierFormMap(self._adjective_forms)

    @property
    def all_noun_forms(self) -> Sequence[NounForm]:
        return self._entity_forms

    @property
    def field_forms(self) -> Sequence[NounForm]:
        return self._field_forms

    @property
    def other_forms(self) -> Sequence[NounForm]:
        # only the singular
        return self._field_forms[:1]

    @property
    def adjective_forms(self) -> Sequence[AdjectiveForm]:
        return self._adjective_forms

    def get_exact_noun_form(self, number, case, possessive, article) -> Optional[NounForm]:
        if possessive is not LanguagePossessive.NONE:
            return None
        return self._noun_form_map.get_form(number, case)

    def get_adjective_form(self, starts_with, gender, number, case, article, possessive):
        return self._adjective_form_map.get_form(starts_with, gender, number, case)


class GujaratiDeclension(IndoAryanDeclension):
    # TODO: check whether Gujarati really needs a locative
    traits = IndoAryanDeclension.traits.derive(required_cases=(NOM, OBJ, LOC))


class MarathiDeclension(IndoAryanDeclension):
    traits = IndoAryanDeclension.traits.derive(required_cases=(NOM, ACC, INS, DAT, ABL, GEN, LOC))


class PunjabiDeclension(IndoAryanDeclension):
    traits = IndoAryanDeclension.traits.derive(
        required_cases=(NOM, ACC, INS, ABL, LanguageCase.VOCATIVE)
    )


# ---------------------------------------------------------------------------
# 2. Hindi and Urdu
# ---------------------------------------------------------------------------

# Direct and oblique
DIRECT_CASE = NOM
OBLIQUE_CASE = OBJ


class HindiUrduNounForm:
    SINGULAR = NounForm(number=SG, case=DIRECT_CASE, key=make_key(SG, DIRECT_CASE))
    SINGULAR_OBL = NounForm(number=SG, case=OBLIQUE_CASE, key=make_key(SG, OBLIQUE_CASE))
    PLURAL = NounForm(number=PL, case=DIRECT_CASE, key=make_key(PL, DIRECT_CASE))
    PLURAL_OBL = NounForm(number=PL, case=OBLIQUE_CASE, key=make_key(PL, OBLIQUE_CASE))

    ALL = (SINGULAR, SINGULAR_OBL, PLURAL, PLURAL_OBL)

    @classmethod
    def get(cls, number: LanguageNumber, case: LanguageCase) -> NounForm:
        if case is OBLIQUE_CASE:
            return cls.PLURAL_OBL if number.is_plural else cls.SINGULAR_OBL
        return cls.PLURAL if number.is_plural else cls.SINGULAR


def _hindi_modifier(number, gender, case) -> AdjectiveForm:
    return AdjectiveForm(gender=gender, number=number, case=case, key=make_key(number, gender, case))


class HindiUrduModifierForm:
    SINGULAR_MASCULINE = _hindi_modifier(SG, M, DIRECT_CASE)
    SINGULAR_FEMININE = _hindi_modifier(SG, F, DIRECT_CASE)
    PLURAL_MASCULINE = _hindi_modifier(PL, M, DIRECT_CASE)
    PLURAL_FEMININE = _hindi_modifier(PL, F, DIRECT_CASE)
    SINGULAR_MASCULINE_O = _hindi_modifier(SG, M, OBLIQUE_CASE)
    SINGULAR_FEMININE_O = _hindi_modifier(SG, F, OBLIQUE_CASE)
    PLURAL_MASCULINE_O = _hindi_modifier(PL, M, OBLIQUE_CASE)
    PLURAL_FEMININE_O = _hindi_modifier(PL, F, OBLIQUE_CASE)

    ALL = (
        SINGULAR_MASCULINE,
        SINGULAR_FEMININE,
        PLURAL_MASCULINE,
        PLURAL_FEMININE,
        SINGULAR_MASCULINE_O,
        SINGULAR_FEMININE_O,
        PLURAL_MASCULINE_O,
        PLURAL_FEMININE_O,
    )


class HindiUrduNoun(Noun):
    def __init__(self, declension, name, plural_alias=None, noun_type=NounType.OTHER,
                 entity_name=None, starts_with=None, gender=None, access=None,
                 is_standard_field=False, is_copied_from_default=False):
        super().__init__(declension, name, plural_alias, noun_type, entity_name,
                         C, gender, access, is_standard_field, is_copied_from_default)
        self.singular: Optional[str] = None
        self.plural: Optional[str] = None
        self.singular_obl: Optional[str] = None
        self.plural_obl: Optional[str] = None

    def get_all_defined_values(self) -> Dict[NounForm, str]:
        values = {
            HindiUrduNounForm.SINGULAR: self.singular,
            HindiUrduNounForm.PLURAL: self.plural,
            HindiUrduNounForm.SINGULAR_OBL: self.singular_obl,
            HindiUrduNounForm.PLURAL_OBL: self.plural_obl,
        }
        return {f: v for f, v in values.items() if v is not None}

    def get_default_string(self, is_plural: bool) -> Optional[str]:
        if is_plural and self.plural is not None:
            return self.plural
        return self.singular

    def get_string(self, form: Optional[NounForm]) -> Optional[str]:
        if form is None:
            return None
        if form.case is OBLIQUE_CASE:
            return self.plural_obl if form.number is PL else self.singular_obl
        return self.plural if form.number is PL else self.singular

    def set_string(self, form: NounForm, value: Optional[str]) -> None:
        if form.case is OBLIQUE_CASE:
            if form.number.is_plural:
                self.plural_obl = value
            else:
                self.singular_obl = value
        elif form.number.is_plural:
            self.plural = value
        else:
            self.singular = value

    def validate_values(self, name: str, case: LanguageCase = NOM) -> bool:
        if self.singular is None:
            return False
        if self.noun_type is NounType.ENTITY:
            if self.plural is None:
                self.plural = self.singular
            if self.singular_obl is None:
                self.singular_obl = self.singular
            if self.plural_obl is None:
                self.plural_obl = self.plural
        return True

    def make_skinny(self) -> None:
        pass


class HindiUrduAdjective(ComplexAdjective):
    def validate(self, name: str) -> bool:
        return self.default_validate(name, {HindiUrduModifierForm.SINGULAR_FEMININE})


class HindiUrduDeclension(LanguageDeclension):
    traits = DEFAULT_TRAITS.derive(
        has_gender=True,
        required_genders=(F, M),
        default_gender=F,
        # really direct and oblique
        required_cases=(DIRECT_CASE, OBLIQUE_CASE),
    )
    noun_class = HindiUrduNoun
    adjective_class = HindiUrduAdjective

    @property
    def all_noun_forms(self) -> Sequence[NounForm]:
        return HindiUrduNounForm.ALL

    @property
    def adjective_forms(self) -> Sequence[AdjectiveForm]:
        return HindiUrduModifierForm.ALL

    def get_exact_noun_form(self, number, case, possessive, article) -> Optional[NounForm]:
        if possessive is not LanguagePossessive.NONE or article is not ZERO:
            return None
        return HindiUrduNounForm.get(number, case)

    def get_adjective_form(self, starts_with, gender, number, case, article, possessive):
        if starts_with is not C or article is not ZERO:
            return None
        gender = M if gender is M else F
        case = OBLIQUE_CASE if case is OBLIQUE_CASE else DIRECT_CASE
        number = PL if number.is_plural else SG
        for form in HindiUrduModifierForm.ALL:
            if form.gender is gender and form.number is number and form.case is case:
                return form
        return None


# ---------------------------------------------------------------------------
# 3. Bengali
# ---------------------------------------------------------------------------


class BengaliNoun(ComplexArticledNoun):
    def __init__(self, declension, name, plural_alias=None, noun_type=NounType.OTHER,
                 entity_name=None, starts_with=None, gender=None, access=None,
                 is_standard_field=False, is_copied_from_default=False):
        super().__init__(declension, name, plural_alias, noun_type, entity_name,
                         C, gender, access, is_standard_field, is_copied_from_default)

    def validate_values(self, name: str, case: LanguageCase = NOM) -> bool:
        return self.default_validate(name, self.declension.field_forms)


class BengaliDeclension(ArticledDeclension):
    traits = ArticledDeclension.traits.derive(
        required_cases=(NOM, OBJ, GEN, LOC),
        has_article_in_noun_form=True,
        allowed_article_types=(ZERO, LanguageArticle.DEFINITE),
    )
    noun_class = BengaliNoun
    adjective_class = SimpleAdjective
    article_class = SimpleArticle

    def __init__(self, language):
        super().__init__(language)
        self._entity_forms = tuple(
            NounForm(number=number, case=case, article=article, key=make_key(number, case, article))
            for number in self.allowed_numbers
            for case in self.required_cases
            for article in self.allowed_article_types
        )
        self._field_forms = tuple(
            f for f in self._entity_forms if f.case is NOM and f.article is ZERO
        )

    @property
    def all_noun_forms(self) -> Sequence[NounForm]:
        return self._entity_forms

    @property
    def field_forms(self) -> Sequence[NounForm]:
        return self._field_forms

    @property
    def other_forms(self) -> Sequence[NounForm]:
        return self._entity_forms

    @property
    def adjective_forms(self) -> Sequence[AdjectiveForm]:
        return SimpleModifierForm.ALL

    @property
    def article_forms(self):
        return SimpleModifierForm.ALL

    def get_adjective_form(self, starts_with, gender, number, case, article, possessive):
        return SimpleModifierForm.SINGULAR

    def get_default_article_string(self, form, article_type) -> Optional[str]:
        raise UnsupportedOperationError("Postfixed articles must be defined with the language")
