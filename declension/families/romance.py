"""
declension/families/romance.py
------------------------------

Spanish, Portuguese, French, Romansh, Italian and Catalan.

Nouns have a singular and a plural. Adjectives and articles share one
modifier form space: number x gender (masculine/feminine), plus the
starts-with of the following word in French, Romansh, Italian ("lo/gli"
before s+consonant, z, gn, ...) and Catalan.

The default articles prefixed to entity nouns come from per-language
tables keyed by modifier form.
"""

from __future__ import annotations

from typing import Callable, Dict, Mapping, Optional, Sequence, Tuple

from declension.base import ArticledDeclension
from declension.enums import (
    LanguageArticle,
    LanguageCase,
    LanguageGender,
    LanguageNumber,
    LanguagePosition,
    LanguagePossessive,
    LanguageStartsWith,
)
from declension.forms import AdjectiveForm, NounForm, PluralNounForm, make_key
from declension.stores import ComplexAdjective, ComplexArticle, SimpleArticledPluralNoun
from declension.traits import ARTICLED_TRAITS

F = LanguageGender.FEMININE
M = LanguageGender.MASCULINE
SG = LanguageNumber.SINGULAR
PL = LanguageNumber.PLURAL
C = LanguageStartsWith.CONSONANT
V = LanguageStartsWith.VOWEL
Z = LanguageStartsWith.SPECIAL


class ModifierForms:
    """
    The number x gender (x starts-with) modifier forms of one language.

    Forms are ordered starts-with first, then number, then masculine before
    feminine. Any gender other than masculine resolves to the feminine form.
    """

    def __init__(
        self,
        starts_with: Sequence[LanguageStartsWith],
        key: Callable[[LanguageNumber, LanguageGender, LanguageStartsWith], str],
    ):
        self._by_dims: Dict[Tuple[LanguageStartsWith, LanguageNumber, LanguageGender], AdjectiveForm] = {}
        for sw in starts_with:
            for number in (SG, PL):
                for gender in (M, F):
                    self._by_dims[(sw, number, gender)] = AdjectiveForm(
                        starts_with=sw, gender=gender, number=number, key=key(number, gender, sw)
                    )
        self.all: Tuple[AdjectiveForm, ...] = tuple(self._by_dims.values())

    def get(self, starts_with, gender, number) -> Optional[AdjectiveForm]:
        gender = M if gender is M else F
        number = PL if number is not None and number.is_plural else SG
        return self._by_dims.get((starts_with, number, gender))

    def __getitem__(self, dims) -> AdjectiveForm:
        return self._by_dims[dims]


def _table(forms: ModifierForms, values: Mapping[Tuple, str]) -> Dict[AdjectiveForm, str]:
    return {forms[dims]: value for dims, value in values.items()}


class RomanceNoun(SimpleArticledPluralNoun):
    def validate_gender(self, name: str) -> bool:
        if self.gender is LanguageGender.NEUTER:
            self.gender = self.declension.default_gender
        return True  # any other gender is accepted


class RomanceAdjective(ComplexAdjective):
    def validate(self, name: str) -> bool:
        form = self.declension.get_adjective_form(
            C, F, SG, LanguageCase.NOMINATIVE, LanguageArticle.ZERO, LanguagePossessive.NONE
        )
        return self.default_validate(name, {form})


class RomanceAdjectiveWithStartsWith(RomanceAdjective):
    def __init__(self, declension, name, starts_with=None, position=None):
        super().__init__(declension, name, position)
        self._starts_with = starts_with

    @property
    def starts_with(self) -> Optional[LanguageStartsWith]:
        return self._starts_with


class RomanceArticle(ComplexArticle):
    def validate(self, name: str) -> bool:
        form = self.declension.get_article_form(C, F, SG, LanguageCase.NOMINATIVE)
        return self.default_validate(name, {form})


class RomanceDeclension(ArticledDeclension):
    traits = ARTICLED_TRAITS.derive(
        has_gender=True,
        required_genders=(F, M),
        default_gender=F,
        default_adjective_position=LanguagePosition.POST,
        should_lowercase_entity_in_compound_nouns=True,
    )
    noun_class = RomanceNoun
    adjective_class = RomanceAdjective
    article_class = RomanceArticle

    MODIFIER_FORMS = ModifierForms((C,), lambda n, g, sw: make_key(n, g))
    DEFINITE_ARTICLE: Dict[AdjectiveForm, str] = {}
    INDEFINITE_ARTICLE: Dict[AdjectiveForm, str] = {}

    @property
    def all_noun_forms(self) -> Sequence[NounForm]:
        return PluralNounForm.ALL

    @property
    def other_forms(self) -> Sequence[NounForm]:
        return PluralNounForm.ALL

    @property
    def adjective_forms(self) -> Sequence[AdjectiveForm]:
        return self.MODIFIER_FORMS.all

    @property
    def article_forms(self) -> Sequence[AdjectiveForm]:
        return self.MODIFIER_FORMS.all

    def get_exact_noun_form(self, number, case, possessive, article) -> Optional[NounForm]:
        if (
            case is not LanguageCase.NOMINATIVE
            or possessive is not LanguagePossessive.NONE
            or article is not LanguageArticle.ZERO
        ):
            return None
        return PluralNounForm.for_number(number)

    def get_adjective_form(self, starts_with, gender, number, case, article, possessive):
        if case is not LanguageCase.NOMINATIVE or article is not LanguageArticle.ZERO:
            return None
        if not self.has_starts_with and starts_with is not C:
            return None
        return self.MODIFIER_FORMS.get(starts_with, gender, number)

    def get_article_form(self, starts_with, gender, number, case):
        return self.get_adjective_form(
            starts_with, gender, number, case, LanguageArticle.ZERO, LanguagePossessive.NONE
        )

    def get_default_article_string(self, form, article_type) -> Optional[str]:
        if article_type is LanguageArticle.INDEFINITE:
            return self.INDEFINITE_ARTICLE.get(form)
        if article_type is LanguageArticle.DEFINITE:
            return self.DEFINITE_ARTICLE.get(form)
        return None


class SpanishDeclension(RomanceDeclension):
    INDEFINITE_ARTICLE = _table(RomanceDeclension.MODIFIER_FORMS, {
        (C, SG, F): "Una ", (C, SG, M): "Un ", (C, PL, F): "Unas ", (C, PL, M): "Unos ",
    })
    DEFINITE_ARTICLE = _table(RomanceDeclension.MODIFIER_FORMS, {
        (C, SG, F): "La ", (C, SG, M): "El ", (C, PL, F): "Las ", (C, PL, M): "Los ",
    })


class PortugueseDeclension(RomanceDeclension):
    INDEFINITE_ARTICLE = _table(RomanceDeclension.MODIFIER_FORMS, {
        (C, SG, F): "Uma ", (C, SG, M): "Um ", (C, PL, F): "Umas ", (C, PL, M): "Uns ",
    })
    DEFINITE_ARTICLE = _table(RomanceDeclension.MODIFIER_FORMS, {
        (C, SG, F): "A ", (C, SG, M): "O ", (C, PL, F): "As ", (C, PL, M): "Os ",
    })

    def __init__(self, language):
        assert language.language_code == "pt", "Initializing a variant portuguese declension for non-portuguese"
        super().__init__(language)


# ---------------------------------------------------------------------------
# Languages whose modifiers agree with the starts-with of the next word
# ---------------------------------------------------------------------------


class FrenchDeclension(RomanceDeclension):
    traits = RomanceDeclension.traits.derive(has_starts_with=True, required_starts_with=(C, V))
    adjective_class = RomanceAdjectiveWithStartsWith

    MODIFIER_FORMS = ModifierForms((C, V), lambda n, g, sw: make_key(n, g, sw))
    INDEFINITE_ARTICLE = _table(MODIFIER_FORMS, {
        (C, SG, F): "une ", (C, SG, M): "un ", (C, PL, F): "des ", (C, PL, M): "des ",
        (V, SG, F): "une ", (V, SG, M): "un ", (V, PL, F): "des ", (V, PL, M): "des ",
    })
    DEFINITE_ARTICLE = _table(MODIFIER_FORMS, {
        (C, SG, F): "la ", (C, SG, M): "le ", (C, PL, F): "les ", (C, PL, M): "les ",
        (V, SG, F): "l'", (V, SG, M): "l'", (V, PL, F): "les ", (V, PL, M): "les ",
    })

    def create_adjective(self, name, starts_with=None, position=None):
        return self.adjective_class(self, name, starts_with, position)


class RomanshDeclension(FrenchDeclension):
    INDEFINITE_ARTICLE = _table(FrenchDeclension.MODIFIER_FORMS, {
        (C, SG, F): "ina ", (C, SG, M): "in ", (C, PL, F): "", (C, PL, M): "",
        (V, SG, F): "in'", (V, SG, M): "in'", (V, PL, F): "", (V, PL, M): "",
    })
    DEFINITE_ARTICLE = _table(FrenchDeclension.MODIFIER_FORMS, {
        (C, SG, F): "la ", (C, SG, M): "il ", (C, PL, F): "las ", (C, PL, M): "ils ",
        (V, SG, F): "l'", (V, SG, M): "l'", (V, PL, F): "las ", (V, PL, M): "ils ",
    })


class ItalianDeclension(FrenchDeclension):
    traits = RomanceDeclension.traits.derive(has_starts_with=True, required_starts_with=(C, V, Z))

    MODIFIER_FORMS = ModifierForms((C, V, Z), lambda n, g, sw: make_key(n, g, sw))
    DEFINITE_ARTICLE = _table(MODIFIER_FORMS, {
        (C, SG, F): "La ", (C, SG, M): "Il ", (C, PL, F): "Le ", (C, PL, M): "I ",
        (V, SG, F): "L'", (V, SG, M): "L'", (V, PL, F): "Le ", (V, PL, M): "Gli ",
        (Z, SG, F): "La ", (Z, SG, M): "Lo ", (Z, PL, F): "Le ", (Z, PL, M): "Gli ",
    })
    # No plural indefinite article
    INDEFINITE_ARTICLE = _table(MODIFIER_FORMS, {
        (C, SG, F): "Una ", (C, SG, M): "Un ",
        (V, SG, F): "Un'", (V, SG, M): "Un ",
        (Z, SG, F): "Una ", (Z, SG, M): "Uno ",
    })


class CatalanDeclension(FrenchDeclension):
    MODIFIER_FORMS = ModifierForms((C, V), lambda n, g, sw: make_key(n, sw, g))
    DEFINITE_ARTICLE = _table(MODIFIER_FORMS, {
        (C, SG, F): "la ", (C, SG, M): "el ", (C, PL, F): "les ", (C, PL, M): "els ",
        (V, SG, F): "l'", (V, SG, M): "l'", (V, PL, F): "les ", (V, PL, M): "els ",
    })
    INDEFINITE_ARTICLE = _table(MODIFIER_FORMS, {
        (C, SG, F): "una ", (C, SG, M): "un ", (C, PL, F): "unes ", (C, PL, M): "uns ",
        (V, SG, F): "una ", (V, SG, M): "un ", (V, PL, F): "unes ", (V, PL, M): "uns ",
    })
