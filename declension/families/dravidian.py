"""
declension/families/dravidian.py
--------------------------------

Tamil, Telugu, Kannada and Malayalam.

Nouns inflect for number and a language-specific set of cases; adjectives
do not inflect. Nouns carry a gender (for verb agreement) but never a
starts-with.
"""

from __future__ import annotations

from typing import Optional, Sequence

from declension.base import LanguageDeclension
from declension.enums import LanguageArticle, LanguageCase, LanguageGender, LanguagePossessive, LanguageStartsWith, NounType
from declension.form_maps import NounFormMap
from declension.forms import AdjectiveForm, NounForm, SimpleModifierForm, make_key
from declension.stores import ComplexNoun, SimpleAdjective
from declension.traits import DEFAULT_TRAITS

NOM = LanguageCase.NOMINATIVE
GEN = LanguageCase.GENITIVE
ACC = LanguageCase.ACCUSATIVE
DAT = LanguageCase.DATIVE
ABL = LanguageCase.ABLATIVE
INS = LanguageCase.INSTRUMENTAL
LOC = LanguageCase.LOCATIVE


class DravidianNoun(ComplexNoun):
    def __init__(self, declension, name, plural_alias=None, noun_type=NounType.OTHER,
                 entity_name=None, starts_with=None, gender=None, access=None,
                 is_standard_field=False, is_copied_from_default=False):
        super().__init__(declension, name, plural_alias, noun_type, entity_name,
                         LanguageStartsWith.CONSONANT, gender, access, is_standard_field,
                         is_copied_from_default)

    def validate_values(self, name: str, case: LanguageCase = NOM) -> bool:
        return self.default_validate(name, self.declension.field_forms)


class DravidianDeclension(LanguageDeclension):
    traits = DEFAULT_TRAITS.derive(
        has_gender=True,
        required_genders=(LanguageGender.NEUTER, LanguageGender.MASCULINE, LanguageGender.FEMININE),
    )
    noun_class = DravidianNoun
    adjective_class = SimpleAdjective

    def __init__(self, language):
        super().__init__(language)
        self._entity_forms = tuple(
            NounForm(number=number, case=case, key=make_key(number, case))
            for number in self.allowed_numbers
            for case in self.required_cases
        )
        self._field_forms = tuple(f for f in self._entity_forms if f.case is NOM)
        self._noun_form_map = NounFormMap(self._entity_forms)

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

    def get_exact_noun_form(self, number, case, possessive, article) -> Optional[NounForm]:
        if article is not LanguageArticle.ZERO or possessive is not LanguagePossessive.NONE:
            return None
        return self._noun_form_map.get_form(number, case)

    def get_adjective_form(self, starts_with, gender, number, case, article, possessive):
        return SimpleModifierForm.SINGULAR


class TamilDeclension(DravidianDeclension):
    traits = DravidianDeclension.traits.derive(required_cases=(NOM, GEN, ACC, DAT, ABL, INS, LOC))


class TeluguDeclension(DravidianDeclension):
    # ablative and instrumental have merged
    traits = DravidianDeclension.traits.derive(required_cases=(NOM, GEN, ACC, DAT, ABL, LOC))


class KannadaDeclension(DravidianDeclension):
    traits = DravidianDeclension.traits.derive(required_cases=(NOM, GEN, ACC, DAT, LOC))


class MalayalamDeclension(DravidianDeclension):
    traits = DravidianDeclension.traits.derive(required_cases=(NOM, GEN, ACC, DAT, INS, LOC))
