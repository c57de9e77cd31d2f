"""
declension/families/amharic.py
------------------------------

Amharic: Semitic noun/adjective agreement with possessive forms and three
cases. Only the nominative is required; there is no definite prefix.
"""

from __future__ import annotations

from typing import Sequence

import structlog

from declension.enums import LanguageCase, LanguagePossessive, LanguageStartsWith, NounType
from declension.families.semitic import SemiticDeclension, _SemiticNoun
from declension.forms import AdjectiveForm, NounForm, make_key
from declension.stores import ComplexAdjective
from declension.terms import VALIDATION_ERROR_HEADER

logger = structlog.get_logger()

NOM = LanguageCase.NOMINATIVE


class AmharicNoun(_SemiticNoun):
    def validate_values(self, name: str, case: LanguageCase = NOM) -> bool:
        # Only checks that a default exists; nothing is filled in
        required = set(self.declension.field_forms)
        for form in self.declension.all_noun_forms:
            if form.case is LanguageCase.ACCUSATIVE or self.get_exact_string(form) is not None:
                continue
            if self.noun_type is NounType.ENTITY:
                if self.get_close_but_no_cigar_string(form) is None:
                    logger.info(
                        f"{VALIDATION_ERROR_HEADER} The noun {name} has no {form} form "
                        "and no default could be found"
                    )
                    return False
            elif form in required:
                logger.debug(f"{VALIDATION_ERROR_HEADER} The noun {name} has no {form} form")
                return False
        return True


class AmharicAdjective(ComplexAdjective):
    def validate(self, name: str) -> bool:
        decl = self.declension
        return self.default_validate(
            name,
            {
                decl.get_adjective_form(
                    LanguageStartsWith.CONSONANT,
                    decl.default_gender,
                    decl.allowed_numbers[0],
                    NOM,
                    decl.default_article,
                    LanguagePossessive.NONE,
                )
            },
        )


class AmharicDeclension(SemiticDeclension):
    traits = SemiticDeclension.traits.derive(
        has_possessive=True,
        has_possessive_in_adjective=True,
        required_possessive=(
            LanguagePossessive.NONE,
            LanguagePossessive.FIRST,
            LanguagePossessive.SECOND,
        ),
        required_cases=(NOM,),
        allowed_cases=(NOM, LanguageCase.ACCUSATIVE, LanguageCase.GENITIVE),
    )
    noun_class = AmharicNoun
    adjective_class = AmharicAdjective

    def __init__(self, language):
        assert language.language_code == "am", "Initializing a variant Amharic declension for non-Amharic"
        super().__init__(language)
        self._noun_forms = tuple(
            NounForm(number=number, case=case, possessive=possessive, article=article)
            for number in self.allowed_numbers
            for case in self.allowed_cases
            for possessive in self.required_possessive
            for article in self.allowed_article_types
        )
        self._entity_forms = tuple(f for f in self._noun_forms if f.case is NOM)
        self._adjective_forms = tuple(
            AdjectiveForm(
                gender=gender,
                number=number,
                case=case,
                article=article,
                possessive=possessive,
                key=make_key(gender, number, case, article, possessive),
            )
            for number in self.allowed_numbers
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
