"""
declension/families/basque.py
-----------------------------

Basque is agglutinative: a noun phrase takes one case suffix chosen by
case, definiteness and number, and the stem ending adjusts it. Instead of
enumerating every combination, the dictionary stores a sparse set of
override forms and everything else is synthesized from the bare stem:

1. pick the suffix from a per-case table (indefinite singular, definite
   singular or definite plural column; the plural is always definite);
2. a-absorption: a stem-final "a" drops before a suffix starting in a or e;
3. r-doubling: a vowel-initial suffix after a final "r" gets an extra "r",
   except for a few lexical exceptions such as "ur".

The absolutive (NOMINATIVE here) indefinite singular is the bare stem.
Stem-ending flags are computed when the base form is stored, not per
render.
"""

from __future__ import annotations

from typing import Dict, NamedTuple, Optional, Sequence

import structlog

from declension.base import LanguageDeclension
from declension.enums import (
    LanguageArticle,
    LanguageCase,
    LanguageGender,
    LanguageNumber,
    LanguagePosition,
    LanguageStartsWith,
    NounType,
)
from declension.forms import AdjectiveForm, NounForm, SimpleModifierForm, make_key
from declension.terms import Adjective, Noun, skinny
from declension.traits import DEFAULT_TRAITS

logger = structlog.get_logger()

SG = LanguageNumber.SINGULAR
PL = LanguageNumber.PLURAL
ZERO = LanguageArticle.ZERO
INDEF = LanguageArticle.INDEFINITE
DEF = LanguageArticle.DEFINITE

ABS = LanguageCase.NOMINATIVE  # the absolutive
ERG = LanguageCase.ERGATIVE
DAT = LanguageCase.DATIVE
GEN = LanguageCase.GENITIVE
LOC = LanguageCase.LOCATIVE  # local genitive
INE = LanguageCase.INESSIVE
ALA = LanguageCase.ALLATIVE
ABL = LanguageCase.ABLATIVE
INS = LanguageCase.INSTRUMENTAL
COM = LanguageCase.COMITATIVE
BEN = LanguageCase.BENEFACTIVE
PAR = LanguageCase.PARTITIVE

# Stem-ending flags
A = 1
R = 1 << 1
H = 1 << 2
VOWEL = 1 << 3

VOWELS = "aeiou"

# Stems ending in r that never double it
UR_WORDS = frozenset({"ur", "paper", "plater"})


def _noun_form(number, case, article) -> NounForm:
    return NounForm(number=number, case=case, article=article, key=make_key(number, case, article, sep=":"))


class BasqueNounForm:
    """The forms a dictionary may override."""

    BASE = _noun_form(SG, ABS, ZERO)
    SG_N_DEF = _noun_form(SG, ABS, DEF)
    PL_N_DEF = _noun_form(PL, ABS, DEF)
    PL_ERG_DEF = _noun_form(PL, ERG, DEF)
    PL_DAT_DEF = _noun_form(PL, DAT, DEF)
    PL_GEN_DEF = _noun_form(PL, GEN, DEF)
    PL_LOC_DEF = _noun_form(PL, LOC, DEF)
    PL_INE_DEF = _noun_form(PL, INE, DEF)
    PL_ALL_DEF = _noun_form(PL, ALA, DEF)
    PL_ABL_DEF = _noun_form(PL, ABL, DEF)
    PL_INS_DEF = _noun_form(PL, INS, DEF)
    PL_COM_DEF = _noun_form(PL, COM, DEF)
    PL_BEN_DEF = _noun_form(PL, BEN, DEF)
    SG_ERG_DEF = _noun_form(SG, ERG, DEF)
    SG_DAT_DEF = _noun_form(SG, DAT, DEF)
    SG_GEN_DEF = _noun_form(SG, GEN, DEF)
    SG_N_IND = _noun_form(SG, ABS, INDEF)
    SG_ERG_IND = _noun_form(SG, ERG, INDEF)
    SG_DAT_IND = _noun_form(SG, DAT, INDEF)
    SG_GEN_IND = _noun_form(SG, GEN, INDEF)

    ALL = (
        BASE, SG_N_DEF, PL_N_DEF, PL_ERG_DEF, PL_DAT_DEF, PL_GEN_DEF, PL_LOC_DEF,
        PL_INE_DEF, PL_ALL_DEF, PL_ABL_DEF, PL_INS_DEF, PL_COM_DEF, PL_BEN_DEF,
        SG_ERG_DEF, SG_DAT_DEF, SG_GEN_DEF, SG_N_IND, SG_ERG_IND, SG_DAT_IND, SG_GEN_IND,
    )
    # Forms whose value is the stem
    STEMS = (BASE, SG_N_IND, SG_N_DEF)


class _CaseNounForms(NamedTuple):
    plural_def: NounForm
    singular_def: Optional[NounForm] = None
    singular_indef: Optional[NounForm] = None


NOUN_FORMS_BY_CASE: Dict[LanguageCase, _CaseNounForms] = {
    ABS: _CaseNounForms(BasqueNounForm.PL_N_DEF, BasqueNounForm.SG_N_DEF, BasqueNounForm.SG_N_IND),
    ERG: _CaseNounForms(BasqueNounForm.PL_ERG_DEF, BasqueNounForm.SG_ERG_DEF, BasqueNounForm.SG_ERG_IND),
    DAT: _CaseNounForms(BasqueNounForm.PL_DAT_DEF, BasqueNounForm.SG_DAT_DEF, BasqueNounForm.SG_DAT_IND),
    GEN: _CaseNounForms(BasqueNounForm.PL_GEN_DEF, BasqueNounForm.SG_GEN_DEF, BasqueNounForm.SG_GEN_IND),
    LOC: _CaseNounForms(BasqueNounForm.PL_LOC_DEF),
    INE: _CaseNounForms(BasqueNounForm.PL_INE_DEF),
    ALA: _CaseNounForms(BasqueNounForm.PL_ALL_DEF),
    ABL: _CaseNounForms(BasqueNounForm.PL_ABL_DEF),
    INS: _CaseNounForms(BasqueNounForm.PL_INS_DEF),
    COM: _CaseNounForms(BasqueNounForm.PL_COM_DEF),
    BEN: _CaseNounForms(BasqueNounForm.PL_BEN_DEF),
}


def _adjective_form(number, case) -> AdjectiveForm:
    return AdjectiveForm(number=number, case=case, key=make_key(number, case, sep=":"))


# (singular, plural) adjective forms per case; the partitive has no plural
ADJECTIVE_FORMS_BY_CASE: Dict[LanguageCase, tuple] = {
    case: (_adjective_form(SG, case), _adjective_form(PL, case))
    for case in (ABS, ERG, DAT, GEN, LOC, INE, ALA, ABL, INS, COM, BEN)
}
ADJECTIVE_FORMS_BY_CASE[PAR] = (_adjective_form(SG, PAR),) * 2

ADJECTIVE_FORMS = tuple(
    form
    for singular, plural in ADJECTIVE_FORMS_BY_CASE.values()
    for form in ((singular,) if singular is plural else (singular, plural))
)
SG_ABS_ADJECTIVE = ADJECTIVE_FORMS_BY_CASE[ABS][0]


class Suffixes(NamedTuple):
    indef_vowel: str
    indef_consonant: str
    def_singular_vowel: str
    def_singular_consonant: str
    def_plural: str


# The absolutive row only serves the definite forms
SUFFIXES: Dict[LanguageCase, Suffixes] = {
    ABS: Suffixes("a", "a", "a", "a", "ak"),
    ERG: Suffixes("k", "ek", "ak", "ak", "ek"),
    DAT: Suffixes("ri", "i", "ari", "ari", "ei"),
    GEN: Suffixes("ren", "en", "aren", "aren", "en"),
    LOC: Suffixes("ko", "eko", "ko", "eko", "etako"),
    INE: Suffixes("tan", "etan", "an", "ean", "etan"),
    ALA: Suffixes("tara", "etara", "ra", "era", "etara"),
    ABL: Suffixes("tatik", "etatik", "tik", "etik", "etatik"),
    INS: Suffixes("z", "ez", "az", "az", "ez"),
    COM: Suffixes("rekin", "ekin", "arekin", "arekin", "ekin"),
    BEN: Suffixes("rentzat", "entzat", "arentzat", "arentzat", "entzat"),
}


# ---------------------------------------------------------------------------
# Suffix synthesis
# ---------------------------------------------------------------------------


def compute_stem_flags(lower: str) -> int:
    """Flags for a lowercased stem; a final h is skipped when classifying."""
    if not lower:
        return 0
    ends_with_h = lower.endswith("h")
    target = lower[-2] if ends_with_h and len(lower) >= 2 else lower[-1]
    flags = 0
    if target == "a":
        flags |= A
    if target == "r":
        flags |= R
    if ends_with_h:
        flags |= H
    if target in VOWELS:
        flags |= VOWEL
    return flags


def is_indefinite(number: Optional[LanguageNumber], article: Optional[LanguageArticle]) -> bool:
    return (number or SG) is not PL and article in (INDEF, ZERO)


def choose_suffix(case: LanguageCase, indefinite: bool, plural: bool, ends_with_vowel: bool) -> str:
    if case is PAR:
        # indefinite only
        return "rik" if ends_with_vowel else "ik"
    if case is ABS and indefinite:
        return ""
    choices = SUFFIXES.get(case)
    if choices is None:
        return ""
    if plural:
        return choices.def_plural
    if indefinite:
        return choices.indef_vowel if ends_with_vowel else choices.indef_consonant
    return choices.def_singular_vowel if ends_with_vowel else choices.def_singular_consonant


def apply_a_absorption(stem: str, suffix: str, ends_with_a: bool) -> str:
    if ends_with_a and suffix and suffix[0].lower() in "ae":
        return stem[:-1]
    return stem


def apply_r_doubling(lower: str, suffix: str, ends_with_r: bool) -> str:
    if not ends_with_r or lower in UR_WORDS or not suffix:
        return suffix
    return "r" + suffix if suffix[0].lower() in VOWELS else suffix


# ---------------------------------------------------------------------------
# Terms
# ---------------------------------------------------------------------------


class BasqueNoun(Noun):
    def __init__(self, declension, name, plural_alias=None, noun_type=NounType.OTHER,
                 entity_name=None, starts_with=None, gender=None, access=None,
                 is_standard_field=False, is_copied_from_default=False):
        super().__init__(declension, name, plural_alias, noun_type, entity_name,
                         LanguageStartsWith.CONSONANT, LanguageGender.NEUTER, access,
                         is_standard_field, is_copied_from_default)
        self._values: Dict[NounForm, str] = {}
        self.stem_flags = -1

    def get_all_defined_values(self) -> Dict[NounForm, str]:
        return self._values

    def get_default_string(self, is_plural: bool) -> Optional[str]:
        priority = (BasqueNounForm.PL_N_DEF,) if is_plural else (
            BasqueNounForm.SG_N_IND, BasqueNounForm.BASE, BasqueNounForm.SG_N_DEF
        )
        for form in priority:
            value = self._values.get(form)
            if value is not None:
                return value
        return next(iter(self._values.values()), None)

    def get_string(self, form: Optional[NounForm]) -> Optional[str]:
        return self._values.get(form) if form is not None else None

    def get_closest_string(self, form: NounForm) -> Optional[str]:
        """The stored override, else the form synthesized from the stem."""
        result = self.get_string(form)
        if result is None:
            result = self.declension.generate_surface_from_term(self, form)
        return result if result is not None else self.get_close_but_no_cigar_string(form)

    def set_string(self, form: NounForm, value: Optional[str]) -> None:
        self._values[form] = value
        if form in BasqueNounForm.STEMS:
            stem = self.get_default_string(False)
            self.stem_flags = (
                -1 if stem is None else compute_stem_flags(self.declension.language.to_folded_case(stem))
            )

    def validate_values(self, name: str, case: LanguageCase = ABS) -> bool:
        return bool(self._values)

    def _copy_storage(self) -> None:
        self._values = dict(self._values)

    def make_skinny(self) -> None:
        self._values = skinny(self, self._values)

    def __eq__(self, other: object) -> bool:
        result = super().__eq__(other)
        if result is True and isinstance(other, BasqueNoun):
            return self.stem_flags == other.stem_flags
        return result

    def __hash__(self) -> int:
        return super().__hash__()


class BasqueAdjective(Adjective):
    def __init__(self, declension, name: str, position: Optional[LanguagePosition] = None):
        super().__init__(declension, name, position)
        self._values: Dict[AdjectiveForm, str] = {}
        self.stem_flags = -1

    def get_all_values(self) -> Dict[AdjectiveForm, str]:
        return self._values

    def get_string(self, form) -> Optional[str]:
        return self._values.get(form)

    def set_string(self, form, value: Optional[str]) -> None:
        self._values[form] = value
        if value is not None and form == SG_ABS_ADJECTIVE:
            self.stem_flags = compute_stem_flags(self.declension.language.to_folded_case(value))

    def validate(self, name: str) -> bool:
        return bool(self._values)

    def make_skinny(self) -> None:
        self._values = skinny(self, self._values)


# ---------------------------------------------------------------------------
# Declension
# ---------------------------------------------------------------------------


class BasqueDeclension(LanguageDeclension):
    traits = DEFAULT_TRAITS.derive(
        default_adjective_position=LanguagePosition.POST,
        has_article_in_noun_form=True,
        is_article_in_noun_form_auto_derived=True,
        default_article=INDEF,
        allowed_article_types=(ZERO, INDEF, DEF),
        allowed_cases=(ABS, ERG, DAT, GEN, INE, ALA, ABL, INS, COM, BEN, PAR, LOC),
    )
    noun_class = BasqueNoun
    adjective_class = BasqueAdjective

    @property
    def all_noun_forms(self) -> Sequence[NounForm]:
        return BasqueNounForm.ALL

    @property
    def other_forms(self) -> Sequence[NounForm]:
        return BasqueNounForm.ALL

    @property
    def adjective_forms(self) -> Sequence[AdjectiveForm]:
        return ADJECTIVE_FORMS

    def create_adjective(self, name, starts_with=None, position=None):
        return BasqueAdjective(self, name, position or self.default_adjective_position)

    def get_exact_noun_form(self, number, case, possessive, article) -> Optional[NounForm]:
        forms = NOUN_FORMS_BY_CASE.get(case or ABS)
        if (number or SG).is_plural:
            return forms.plural_def if forms else BasqueNounForm.BASE
        if article is DEF and forms and forms.singular_def:
            return forms.singular_def
        if article is INDEF and forms and forms.singular_indef:
            return forms.singular_indef
        return BasqueNounForm.BASE

    def get_approximate_noun_form(self, number, case, possessive, article) -> NounForm:
        """The stored form when one matches exactly, else a form to synthesize."""
        number = number or SG
        case = case or ABS
        article = article or self.default_article
        exact = self.get_exact_noun_form(number, case, possessive, article)
        if exact is not None and (exact.number, exact.case, exact.article) == (number, case, article):
            return exact
        return _noun_form(number, case, article)

    def get_noun_form_for_article(self, number, article) -> NounForm:
        if (number or SG).is_plural:
            return BasqueNounForm.PL_N_DEF
        article = article or self.default_article
        if article is DEF:
            return BasqueNounForm.SG_N_DEF
        if article is INDEF:
            return BasqueNounForm.SG_N_IND
        return BasqueNounForm.BASE

    def get_adjective_form(self, starts_with, gender, number, case, article, possessive):
        forms = ADJECTIVE_FORMS_BY_CASE.get(case or ABS)
        if forms is None:
            return SimpleModifierForm.SINGULAR
        return forms[1] if (number or SG).is_plural else forms[0]

    # -- rendering ----------------------------------------------------------

    def render_surface(
        self,
        base: Optional[str],
        case: Optional[LanguageCase],
        number: Optional[LanguageNumber],
        article: Optional[LanguageArticle],
        stem_flags: int = -1,
    ) -> Optional[str]:
        """
        Inflect the bare stem `base` for (case, number, article).

        `stem_flags` are the precomputed flags of the stem; they are
        computed here when negative.
        """
        if base is None:
            return None
        number = number or SG
        case = case or ABS
        indefinite = is_indefinite(number, article)
        if case is ABS and indefinite:
            return base
        lower = self.language.to_folded_case(base)
        if stem_flags < 0:
            stem_flags = compute_stem_flags(lower)
        suffix = choose_suffix(case, indefinite, number.is_plural, bool(stem_flags & VOWEL))
        stem = apply_a_absorption(base, suffix, bool(stem_flags & A))
        suffix = apply_r_doubling(lower, suffix, bool(stem_flags & R))
        return stem + suffix

    def generate_surface_from_base(self, base: Optional[str], form: NounForm) -> Optional[str]:
        return self.render_surface(base, form.case, form.number, form.article)

    def generate_surface_from_term(self, noun: Optional[Noun], form: NounForm) -> Optional[str]:
        if noun is None:
            return None
        base = noun.get_default_string(False)
        if base is None:
            return None
        flags = noun.stem_flags if isinstance(noun, BasqueNoun) else -1
        return self.render_surface(base, form.case, form.number, form.article, flags)

