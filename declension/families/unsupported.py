"""
declension/families/unsupported.py
----------------------------------

Languages with grammar the engine does not model in depth: Welsh (Celtic),
Irish, Maltese and Persian. They get singular/plural nouns, single-value
modifiers and, for the articled ones, a single article form with an empty
default article.

Irish adds the genitive and Persian the accusative (the -rā object
marker) as a second case.
"""

from __future__ import annotations

from typing import Dict, Mapping, Optional, Sequence

from declension.base import ArticledDeclension, LanguageDeclension
from declension.enums import (
    LanguageCase,
    LanguageGender,
    LanguageNumber,
    LanguagePosition,
    NounType,
)
from declension.forms import (
    AdjectiveForm,
    ArticleForm,
    NounForm,
    PluralNounForm,
    SimpleModifierForm,
    make_key,
)
from declension.stores import (
    SimpleAdjective,
    SimpleArticle,
    SimpleArticledPluralNoun,
)
from declension.terms import LegacyArticledNoun, Noun
from declension.traits import ARTICLED_TRAITS, DEFAULT_TRAITS

SG = LanguageNumber.SINGULAR
PL = LanguageNumber.PLURAL


class UnsupportedLanguageDeclension(ArticledDeclension):
    traits = ARTICLED_TRAITS.derive(
        has_gender=True,
        required_genders=(LanguageGender.FEMININE, LanguageGender.MASCULINE),
        default_gender=LanguageGender.FEMININE,
    )
    noun_class = SimpleArticledPluralNoun
    adjective_class = SimpleAdjective
    article_class = SimpleArticle

    @property
    def all_noun_forms(self) -> Sequence[NounForm]:
        return PluralNounForm.ALL

    @property
    def other_forms(self) -> Sequence[NounForm]:
        return (PluralNounForm.SINGULAR,)

    @property
    def adjective_forms(self) -> Sequence[AdjectiveForm]:
        return SimpleModifierForm.ALL

    @property
    def article_forms(self) -> Sequence[ArticleForm]:
        return SimpleModifierForm.ALL

    def get_exact_noun_form(self, number, case, possessive, article) -> Optional[NounForm]:
        return PluralNounForm.PLURAL if number is PL else PluralNounForm.SINGULAR

    def get_adjective_form(self, starts_with, gender, number, case, article, possessive):
        return SimpleModifierForm.SINGULAR

    def get_article_form(self, starts_with, gender, number, case):
        return SimpleModifierForm.SINGULAR

    def get_default_article_string(self, form, article_type) -> Optional[str]:
        return ""


class CelticDeclension(UnsupportedLanguageDeclension):
    traits = UnsupportedLanguageDeclension.traits.derive(
        default_adjective_position=LanguagePosition.POST
    )


class MalteseDeclension(UnsupportedLanguageDeclension):
    traits = UnsupportedLanguageDeclension.traits.derive(
        default_adjective_position=LanguagePosition.POST
    )


# ---------------------------------------------------------------------------
# Two-case languages
# ---------------------------------------------------------------------------


def _two_case_forms(second_case: LanguageCase):
    """(singular, singular-second, plural, plural-second), keyed number-case."""
    return (
        NounForm(number=SG, key=make_key(SG, LanguageCase.NOMINATIVE)),
        NounForm(number=SG, case=second_case, key=make_key(SG, second_case)),
        NounForm(number=PL, key=make_key(PL, LanguageCase.NOMINATIVE)),
        NounForm(number=PL, case=second_case, key=make_key(PL, second_case)),
    )


class _TwoCaseValues:
    """
    Storage shared by the Irish and Persian nouns: singular and plural in
    the nominative and in one other case. Entity nouns default missing
    values from the nominative.
    """

    forms: Sequence[NounForm]

    def _init_values(self) -> None:
        self._values: Dict[NounForm, str] = {}

    def _copy_storage(self) -> None:
        self._values = dict(self._values)

    def _lookup(self, form: Optional[NounForm]) -> Optional[str]:
        if form is None:
            return None
        return self._values.get(self.declension.get_exact_noun_form(form.number, form.case, None, None))

    def _store(self, form: NounForm, value: Optional[str]) -> None:
        self._values[self.declension.get_exact_noun_form(form.number, form.case, None, None)] = value

    def get_all_defined_values(self) -> Mapping[NounForm, str]:
        return {f: v for f, v in self._values.items() if v is not None}

    def get_default_string(self, is_plural: bool) -> Optional[str]:
        singular, _, plural, _ = self.declension.all_noun_forms
        if is_plural and self._values.get(plural) is not None:
            return self._values[plural]
        return self._values.get(singular)

    def set_string(self, form: NounForm, value: Optional[str]) -> None:
        self._store(form, value)

    def validate_values(self, name: str, case: LanguageCase = LanguageCase.NOMINATIVE) -> bool:
        singular, singular_other, plural, plural_other = self.declension.all_noun_forms
        if self._values.get(singular) is None:
            return False
        if self.noun_type is NounType.ENTITY:
            if self._values.get(plural) is None:
                self._values[plural] = self._values[singular]
            if self._values.get(singular_other) is None:
                self._values[singular_other] = self._values[singular]
            if self._values.get(plural_other) is None:
                self._values[plural_other] = self._values[plural]
        return True

    def make_skinny(self) -> None:
        pass


class IrishNoun(_TwoCaseValues, LegacyArticledNoun):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._init_values()

    def get_exact_string(self, form: Optional[NounForm]) -> Optional[str]:
        return self._lookup(form)


class IrishDeclension(CelticDeclension):
    traits = CelticDeclension.traits.derive(
        required_cases=(LanguageCase.NOMINATIVE, LanguageCase.GENITIVE)
    )
    noun_class = IrishNoun

    FORMS = _two_case_forms(LanguageCase.GENITIVE)

    @property
    def all_noun_forms(self) -> Sequence[NounForm]:
        return self.FORMS

    @property
    def other_forms(self) -> Sequence[NounForm]:
        return self.FORMS[:1]

    def get_exact_noun_form(self, number, case, possessive, article) -> Optional[NounForm]:
        plural = number is PL
        if case is LanguageCase.GENITIVE:
            return self.FORMS[3] if plural else self.FORMS[1]
        return self.FORMS[2] if plural else self.FORMS[0]


class PersianNoun(_TwoCaseValues, Noun):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._init_values()

    def get_string(self, form: Optional[NounForm]) -> Optional[str]:
        return self._lookup(form)


class PersianDeclension(LanguageDeclension):
    traits = DEFAULT_TRAITS.derive(
        required_cases=(LanguageCase.NOMINATIVE, LanguageCase.ACCUSATIVE)
    )
    noun_class = PersianNoun
    adjective_class = SimpleAdjective

    FORMS = _two_case_forms(LanguageCase.ACCUSATIVE)

    @property
    def all_noun_forms(self) -> Sequence[NounForm]:
        return self.FORMS

    @property
    def field_forms(self) -> Sequence[NounForm]:
        return self.FORMS[:1]

    @property
    def other_forms(self) -> Sequence[NounForm]:
        return self.FORMS[:1]

    @property
    def adjective_forms(self) -> Sequence[AdjectiveForm]:
        return SimpleModifierForm.ALL

    def get_exact_noun_form(self, number, case, possessive, article) -> Optional[NounForm]:
        plural = number is PL
        if case is LanguageCase.ACCUSATIVE:
            return self.FORMS[3] if plural else self.FORMS[1]
        return self.FORMS[2] if plural else self.FORMS[0]
