"""
declension/stores.py
--------------------

Concrete word stores shared by several families.

Two storage strategies exist:

- field stores hold one or two strings (single value, singular/plural);
  used by languages whose form space is tiny.
- dict stores ("complex" stores) map form -> string for languages that
  enumerate many forms. `make_skinny` freezes the dict, ordered by key.
"""

from __future__ import annotations

from typing import Dict, Mapping, Optional

import structlog

from declension.enums import (
    LanguageArticle,
    LanguageCase,
    LanguageGender,
    LanguageNumber,
    LanguagePosition,
    LanguageStartsWith,
    NounType,
)
from declension.forms import (
    AdjectiveForm,
    ArticleForm,
    NounForm,
    PluralNounForm,
    SimpleModifierForm,
    SimpleNounForm,
)
from declension.terms import (
    VALIDATION_ERROR_HEADER,
    VALIDATION_WARNING_HEADER,
    Adjective,
    Article,
    LegacyArticledNoun,
    Noun,
    skinny,
)

logger = structlog.get_logger()


def _plural_values(singular: Optional[str], plural: Optional[str]) -> Dict[NounForm, str]:
    values: Dict[NounForm, str] = {}
    if singular is not None:
        values[PluralNounForm.SINGULAR] = singular
    if plural is not None:
        values[PluralNounForm.PLURAL] = plural
    return values


# ---------------------------------------------------------------------------
# 1. Field stores: nouns
# ---------------------------------------------------------------------------


class SimpleNoun(Noun):
    """A noun with exactly one value (languages without inflection)."""

    def __init__(self, declension, name, plural_alias=None, noun_type=NounType.OTHER,
                 entity_name=None, starts_with=None, gender=None, access=None,
                 is_standard_field=False, is_copied_from_default=False):
        super().__init__(declension, name, plural_alias, noun_type, entity_name,
                         starts_with or LanguageStartsWith.CONSONANT, LanguageGender.NEUTER,
                         access, is_standard_field, is_copied_from_default)
        self.value: Optional[str] = None

    def get_all_defined_values(self) -> Mapping[NounForm, str]:
        return {SimpleNounForm.SINGULAR: self.value} if self.value is not None else {}

    def get_default_string(self, is_plural: bool) -> Optional[str]:
        return self.value

    def get_string(self, form: Optional[NounForm]) -> Optional[str]:
        return self.value

    def set_string(self, form: NounForm, value: Optional[str]) -> None:
        self.value = value

    def validate_values(self, name: str, case: LanguageCase = LanguageCase.NOMINATIVE) -> bool:
        if self.value is None:
            logger.info(f"{VALIDATION_ERROR_HEADER} The noun {name} has no value")
            return False
        return True

    def make_skinny(self) -> None:
        pass


class SimpleNounWithClassifier(SimpleNoun):
    """Single-value noun with the counter word used when counting it."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.classifier: Optional[str] = None

    def get_classifier(self) -> Optional[str]:
        return self.classifier

    def set_classifier(self, classifier: Optional[str]) -> None:
        self.classifier = classifier


class SimplePluralNounWithGender(Noun):
    """Singular and plural value; the plural falls back to the singular."""

    def __init__(self, declension, name, plural_alias=None, noun_type=NounType.OTHER,
                 entity_name=None, starts_with=None, gender=None, access=None,
                 is_standard_field=False, is_copied_from_default=False):
        super().__init__(declension, name, plural_alias, noun_type, entity_name,
                         LanguageStartsWith.CONSONANT, gender, access,
                         is_standard_field, is_copied_from_default)
        self.singular: Optional[str] = None
        self.plural: Optional[str] = None

    def get_all_defined_values(self) -> Mapping[NounForm, str]:
        return _plural_values(self.singular, self.plural)

    def get_default_string(self, is_plural: bool) -> Optional[str]:
        if is_plural and self.plural is not None:
            return self.plural
        return self.singular

    def get_string(self, form: Optional[NounForm]) -> Optional[str]:
        if form is None:
            return None
        return self.get_default_string(form.number is LanguageNumber.PLURAL)

    def set_string(self, form: NounForm, value: Optional[str]) -> None:
        if form.number.is_plural:
            self.plural = value
        else:
            self.singular = value

    def validate_values(self, name: str, case: LanguageCase = LanguageCase.NOMINATIVE) -> bool:
        if self.singular is None:
            logger.info(f"{VALIDATION_ERROR_HEADER} The noun {name} has no singular form")
            return False
        return True

    def make_skinny(self) -> None:
        pass


class SimplePluralNoun(SimplePluralNounWithGender):
    """Singular/plural noun of a genderless language; always neuter."""

    def __init__(self, declension, name, plural_alias=None, noun_type=NounType.OTHER,
                 entity_name=None, starts_with=None, gender=None, access=None,
                 is_standard_field=False, is_copied_from_default=False):
        super().__init__(declension, name, plural_alias, noun_type, entity_name,
                         starts_with, LanguageGender.NEUTER, access, is_standard_field,
                         is_copied_from_default)

    def validate_gender(self, name: str) -> bool:
        if self.gender is not LanguageGender.NEUTER:
            logger.info(f"{VALIDATION_WARNING_HEADER}{name} must be neuter")
        return super().validate_gender(name)


class PluralNounWithClassifier(SimplePluralNoun):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.classifier: Optional[str] = None

    def get_classifier(self) -> Optional[str]:
        return self.classifier

    def set_classifier(self, classifier: Optional[str]) -> None:
        self.classifier = classifier


class SimpleArticledPluralNoun(LegacyArticledNoun):
    """Singular/plural noun of an articled language with a separate article word."""

    def __init__(self, declension, name, plural_alias=None, noun_type=NounType.OTHER,
                 entity_name=None, starts_with=None, gender=None, access=None,
                 is_standard_field=False, is_copied_from_default=False):
        super().__init__(declension, name, plural_alias, noun_type, entity_name,
                         starts_with, gender, access, is_standard_field,
                         is_copied_from_default)
        self.singular: Optional[str] = None
        self.plural: Optional[str] = None

    def get_all_defined_values(self) -> Mapping[NounForm, str]:
        return _plural_values(self.singular, self.plural)

    def get_default_string(self, is_plural: bool) -> Optional[str]:
        if is_plural and self.plural is not None:
            return self.plural
        return self.singular

    def get_exact_string(self, form: Optional[NounForm]) -> Optional[str]:
        if form is None:
            return None
        is_plural = form.number is LanguageNumber.PLURAL
        if self.declension.language.language_code == "en":
            return self.get_default_string(is_plural)
        return self.plural if is_plural else self.singular

    def set_string(self, form: NounForm, value: Optional[str]) -> None:
        if form.number.is_plural:
            self.plural = value
        else:
            self.singular = value

    def validate_values(self, name: str, case: LanguageCase = LanguageCase.NOMINATIVE) -> bool:
        if self.singular is None:
            logger.info(f"{VALIDATION_ERROR_HEADER} The noun {name} has no singular form")
            return False
        return True

    def make_skinny(self) -> None:
        pass


# ---------------------------------------------------------------------------
# 2. Field stores: modifiers
# ---------------------------------------------------------------------------


class SimpleAdjective(Adjective):
    def __init__(self, declension, name: str, position: Optional[LanguagePosition] = None):
        super().__init__(declension, name, position)
        self.value: Optional[str] = None

    def get_all_values(self) -> Mapping[AdjectiveForm, str]:
        return {SimpleModifierForm.SINGULAR: self.value}

    def get_string(self, form) -> Optional[str]:
        return self.value

    def set_string(self, form, value: Optional[str]) -> None:
        self.value = value

    def validate(self, name: str) -> bool:
        if self.value is None:
            logger.info(f"{VALIDATION_ERROR_HEADER} The adjective {name} has no value")
            return False
        return True


class SimpleAdjectiveWithStartsWith(SimpleAdjective):
    def __init__(self, declension, name: str, starts_with: Optional[LanguageStartsWith],
                 position: Optional[LanguagePosition] = None):
        super().__init__(declension, name, position)
        self._starts_with = starts_with

    @property
    def starts_with(self) -> Optional[LanguageStartsWith]:
        return self._starts_with


class SimpleArticle(Article):
    def __init__(self, declension, name: str, article_type: LanguageArticle):
        super().__init__(declension, name, article_type)
        self.value: Optional[str] = None

    def get_all_values(self) -> Mapping[ArticleForm, str]:
        return {SimpleModifierForm.SINGULAR: self.value}

    def get_string(self, form) -> Optional[str]:
        return self.value

    def set_string(self, form, value: Optional[str]) -> None:
        self.value = value

    def validate(self, name: str) -> bool:
        if self.value is None:
            logger.info(f"{VALIDATION_ERROR_HEADER} The article {name} has no form")
            return False
        return True


# ---------------------------------------------------------------------------
# 3. Dict stores
# ---------------------------------------------------------------------------


class ComplexNoun(Noun):
    """Noun storing any number of forms in a dict."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._values: Dict[NounForm, str] = {}

    def get_all_defined_values(self) -> Mapping[NounForm, str]:
        return self._values

    def get_string(self, form: Optional[NounForm]) -> Optional[str]:
        return self._values.get(form)

    def set_string(self, form: NounForm, value: Optional[str]) -> None:
        self._values[form] = value

    def _copy_storage(self) -> None:
        self._values = dict(self._values)

    def make_skinny(self) -> None:
        self._values = skinny(self, self._values)


class ComplexArticledNoun(LegacyArticledNoun):
    """Articled-language noun storing any number of forms in a dict."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._values: Dict[NounForm, str] = {}

    def get_all_defined_values(self) -> Mapping[NounForm, str]:
        return self._values

    def get_exact_string(self, form: Optional[NounForm]) -> Optional[str]:
        return self._values.get(form)

    def set_string(self, form: NounForm, value: Optional[str]) -> None:
        self._values[form] = value

    def _copy_storage(self) -> None:
        self._values = dict(self._values)

    def make_skinny(self) -> None:
        self._values = skinny(self, self._values)


class ComplexAdjective(Adjective):
    def __init__(self, declension, name: str, position: Optional[LanguagePosition] = None):
        super().__init__(declension, name, position)
        self._values: Dict[AdjectiveForm, str] = {}

    def get_all_values(self) -> Mapping[AdjectiveForm, str]:
        return self._values

    def get_string(self, form) -> Optional[str]:
        return self._values.get(form)

    def set_string(self, form, value: Optional[str]) -> None:
        self._values[form] = value

    def make_skinny(self) -> None:
        self._values = skinny(self, self._values)


class ComplexArticle(Article):
    def __init__(self, declension, name: str, article_type: LanguageArticle):
        super().__init__(declension, name, article_type)
        self._values: Dict[ArticleForm, str] = {}

    def get_all_values(self) -> Mapping[ArticleForm, str]:
        return self._values

    def get_string(self, form) -> Optional[str]:
        return self._values.get(form)

    def set_string(self, form, value: Optional[str]) -> None:
        self._values[form] = value

    def make_skinny(self) -> None:
        self._values = skinny(self, self._values)


__all__ = [
    "SimpleNoun",
    "SimpleNounWithClassifier",
    "SimplePluralNounWithGender",
    "SimplePluralNoun",
    "PluralNounWithClassifier",
    "SimpleArticledPluralNoun",
    "SimpleAdjective",
    "SimpleAdjectiveWithStartsWith",
    "SimpleArticle",
    "ComplexNoun",
    "ComplexArticledNoun",
    "ComplexAdjective",
    "ComplexArticle",
]
