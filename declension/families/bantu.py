"""
declension/families/bantu.py
----------------------------

Swahili, Zulu and Xhosa. The noun classes are modelled as genders;
adjectives agree with the class and number of their noun. Nouns only have
a singular and a plural.
"""

from __future__ import annotations

from typing import Optional, Sequence

from declension.base import LanguageDeclension
from declension.enums import (
    LanguageArticle,
    LanguageCase,
    LanguageGender,
    LanguageNumber,
    LanguagePossessive,
    LanguageStartsWith,
)
from declension.form_maps import ModifierFormMap
from declension.forms import AdjectiveForm, NounForm, PluralNounForm, make_key
from declension.stores import ComplexAdjective, SimplePluralNounWithGender
from declension.traits import DEFAULT_TRAITS

CLASS_I = LanguageGender.CLASS_I
CLASS_III = LanguageGender.CLASS_III
CLASS_V = LanguageGender.CLASS_V
CLASS_VII = LanguageGender.CLASS_VII
CLASS_IX = LanguageGender.CLASS_IX
CLASS_XI = LanguageGender.CLASS_XI
CLASS_XIV = LanguageGender.CLASS_XIV
CLASS_XV = LanguageGender.CLASS_XV
CLASS_XVI = LanguageGender.CLASS_XVI
CLASS_XVII = LanguageGender.CLASS_XVII
CLASS_XVIII = LanguageGender.CLASS_XVIII


class BantuAdjective(ComplexAdjective):
    def validate(self, name: str) -> bool:
        decl = self.declension
        required = decl.get_adjective_form(
            LanguageStartsWith.CONSONANT,
            CLASS_I,
            LanguageNumber.SINGULAR,
            LanguageCase.NOMINATIVE,
            LanguageArticle.ZERO,
            LanguagePossessive.NONE,
        )
        return self.default_validate(name, {required})


class BantuDeclension(LanguageDeclension):
    traits = DEFAULT_TRAITS.derive(has_gender=True, default_gender=CLASS_I)
    noun_class = SimplePluralNounWithGender
    adjective_class = BantuAdjective

    def __init__(self, language):
        super().__init__(language)
        self._adjective_forms = tuple(
            AdjectiveForm(gender=gender, number=number, key=make_key(gender, number))
            for number in self.allowed_numbers
            for gender in self.required_genders
        )
        self._adjective_form_map = ModifierFormMap(self._adjective_forms)

    @property
    def all_noun_forms(self) -> Sequence[NounForm]:
        return PluralNounForm.ALL

    @property
    def field_forms(self) -> Sequence[NounForm]:
        return (PluralNounForm.SINGULAR,)

    @property
    def other_forms(self) -> Sequence[NounForm]:
        return (PluralNounForm.SINGULAR,)

    @property
    def adjective_forms(self) -> Sequence[AdjectiveForm]:
        return self._adjective_forms

    def get_adjective_form(self, starts_with, gender, number, case, article, possessive) -> Optional[AdjectiveForm]:
        return self._adjective_form_map.get_form(starts_with, gender, number, case)


class SwahiliDeclension(BantuDeclension):
    traits = BantuDeclension.traits.derive(
        required_genders=(
            CLASS_I, CLASS_III, CLASS_V, CLASS_VII, CLASS_IX,
            CLASS_XI, CLASS_XVI, CLASS_XVII, CLASS_XVIII,
        ),
    )


# Zulu and Xhosa share their class inventory
NGUNI_CLASSES = (
    CLASS_I, CLASS_III, CLASS_V, CLASS_VII, CLASS_IX,
    CLASS_XI, CLASS_XIV, CLASS_XV, CLASS_XVII,
)


class ZuluDeclension(BantuDeclension):
    traits = BantuDeclension.traits.derive(required_genders=NGUNI_CLASSES)


class XhosaDeclension(BantuDeclension):
    traits = BantuDeclension.traits.derive(required_genders=NGUNI_CLASSES)
