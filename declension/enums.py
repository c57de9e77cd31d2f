"""
declension/enums.py
-------------------

Closed value sets for the grammatical dimensions of a form.

Every member carries:
- a db value (its Enum value): the stable external key written to
  dictionaries and caches. It must never be renumbered or reassigned.
- an api value: a human readable name used by admin tooling.

Enum definition order matters. Declensions enumerate their forms by
walking these enums in order, and the position of a form in that walk is
its persisted ordinal.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, Iterable, Optional, Tuple, TypeVar

E = TypeVar("E", bound="DimensionEnum")


class DimensionEnum(str, Enum):
    """
    Shared behaviour of all dimension enums.

    Members are declared as ``NAME = (db_value, api_value, *labels)``.
    """

    def __new__(cls, db_value: str, api_value: str, *labels: str):
        obj = str.__new__(cls, db_value)
        obj._value_ = db_value
        obj.api_value = api_value
        obj.labels = tuple(labels)
        return obj

    @property
    def db_value(self) -> str:
        return self.value

    @property
    def ordinal(self) -> int:
        return _ordinals(type(self))[self]

    @property
    def is_default(self) -> bool:
        return False

    @classmethod
    def from_db_value(cls: type[E], db_value: Optional[str]) -> Optional[E]:
        if db_value is None:
            return None
        try:
            return cls(db_value)
        except ValueError:
            return None

    @classmethod
    def from_api_value(cls: type[E], api_value: Optional[str]) -> Optional[E]:
        for member in cls:
            if member.api_value == api_value:
                return member
        return None

    def __str__(self) -> str:
        return self.value


_ORDINAL_CACHE: Dict[type, Dict[Enum, int]] = {}


def _ordinals(enum_cls: type) -> Dict[Enum, int]:
    cached = _ORDINAL_CACHE.get(enum_cls)
    if cached is None:
        cached = {member: i for i, member in enumerate(enum_cls)}
        _ORDINAL_CACHE[enum_cls] = cached
    return cached


def ordered(members: Iterable[E]) -> Tuple[E, ...]:
    """
    Return the distinct members in enum definition order.

    This is the Python stand-in for an EnumSet: form generation iterates
    these tuples, so the order fixes the ordinals of generated forms.
    """
    unique = set(members)
    return tuple(sorted(unique, key=lambda m: m.ordinal))


# ---------------------------------------------------------------------------
# 1. Case
# ---------------------------------------------------------------------------


class LanguageCase(DimensionEnum):
    NOMINATIVE = ("n", "Nominative")
    ACCUSATIVE = ("a", "Accusative")
    GENITIVE = ("g", "Genitive")
    DATIVE = ("d", "Dative")
    INESSIVE = ("ines", "Inessive")
    ELATIVE = ("el", "Elative")
    ILLATIVE = ("il", "Illative")
    ADESSIVE = ("ad", "Adessive")
    ABLATIVE = ("abl", "Ablative")
    ALLATIVE = ("al", "Allative")
    ESSIVE = ("es", "Essive")
    TRANSLATIVE = ("tra", "Translative")
    PARTITIVE = ("par", "Partitive")
    OBJECTIVE = ("o", "Objective")
    SUBJECTIVE = ("s", "Subjective")
    INSTRUMENTAL = ("in", "Instrumental")
    PREPOSITIONAL = ("pr", "Prepositional")
    LOCATIVE = ("l", "Locative")
    VOCATIVE = ("v", "Vocative")
    SUBLATIVE = ("sub", "Sublative")
    SUPERESSIVE = ("sup", "Superessive")
    DELATIVE = ("del", "Delative")
    CAUSALFINAL = ("cf", "Causalfinal")
    ESSIVEFORMAL = ("ef", "Essiveformal")
    TERMINATIVE = ("t", "Termanative")  # api value typo is persisted
    DISTRIBUTIVE = ("di", "Distributive")
    ERGATIVE = ("er", "Ergative")
    ADVERBIAL = ("adv", "Adverbial")
    ABESSIVE = ("abe", "Abessive")
    COMITATIVE = ("com", "Comitative")
    BENEFACTIVE = ("be", "Benefactive")

    @property
    def is_default(self) -> bool:
        return self is LanguageCase.NOMINATIVE


# ---------------------------------------------------------------------------
# 2. Gender
# ---------------------------------------------------------------------------


class LanguageGender(DimensionEnum):
    NEUTER = ("n", "Neuter")
    FEMININE = ("f", "Feminine", "c", "e")  # Dutch "c", Swedish "e"
    MASCULINE = ("m", "Masculine")
    ANIMATE_MASCULINE = ("a", "AnimateMasculine")  # West Slavic
    CLASS_I = ("1", "ClassI", "M-wa", "I")
    CLASS_III = ("3", "ClassIII", "M-mi", "III")
    CLASS_V = ("5", "ClassV", "Ma", "V")
    CLASS_VII = ("7", "ClassVII", "Ki-vi", "VII")
    CLASS_IX = ("9", "ClassIX", "N", "IX")
    CLASS_XI = ("U", "ClassXI", "XI")
    CLASS_XIV = ("B", "ClassXIV", "XIV")  # Zulu/Xhosa ubu-
    CLASS_XV = ("S", "ClassXV", "XV")  # Zulu/Xhosa uku-
    CLASS_XVI = ("P", "ClassXVI", "Pa", "XVI")
    CLASS_XVII = ("K", "ClassXVII", "Ku", "XVII")
    CLASS_XVIII = ("M", "ClassXVIII", "Mu", "XVIII")

    # Aliases of FEMININE (same db value)
    COMMON = ("f", "Feminine", "c", "e")
    EUTER = ("f", "Feminine", "c", "e")

    @classmethod
    def from_label_value(cls, label: Optional[str]) -> Optional["LanguageGender"]:
        if label is None:
            return None
        for member in cls:
            if member.value == label or label in member.labels:
                return member
        return None


# ---------------------------------------------------------------------------
# 3. Number
# ---------------------------------------------------------------------------


class LanguageNumber(DimensionEnum):
    SINGULAR = ("0", "Singular", "one")
    PLURAL = ("1", "Plural", "other")
    DUAL = ("2", "Dual", "two")

    @property
    def int_value(self) -> int:
        return int(self.value)

    @property
    def is_default(self) -> bool:
        return self is LanguageNumber.SINGULAR

    @property
    def is_plural(self) -> bool:
        # Only PLURAL selects the plural branch; DUAL is tracked on its own.
        return self is LanguageNumber.PLURAL

    @classmethod
    def from_int_value(cls, value: int) -> Optional["LanguageNumber"]:
        return cls.from_db_value(str(value))

    @classmethod
    def from_label_value(cls, label: Optional[str]) -> "LanguageNumber":
        if label is not None:
            for member in cls:
                if label in member.labels:
                    return member
            if label.lower() == "d" or label == "2":
                return cls.DUAL
            if label.lower() == "y":
                return cls.PLURAL
        return cls.SINGULAR


PLURAL_SET = (LanguageNumber.SINGULAR, LanguageNumber.PLURAL)
SINGULAR_SET = (LanguageNumber.SINGULAR,)
DUAL_SET = (LanguageNumber.SINGULAR, LanguageNumber.PLURAL, LanguageNumber.DUAL)


# ---------------------------------------------------------------------------
# 4. Article / Possessive / StartsWith / Position
# ---------------------------------------------------------------------------


class LanguageArticle(DimensionEnum):
    ZERO = ("n", "None")
    INDEFINITE = ("i", "A", "a")
    DEFINITE = ("d", "The", "the")
    PARTITIVE = ("p", "Mass", "mass")

    @property
    def is_default(self) -> bool:
        return self is LanguageArticle.ZERO

    @classmethod
    def from_label_value(cls, label: Optional[str]) -> Optional["LanguageArticle"]:
        if label is None:
            return None
        for member in cls:
            # the api value is the capitalized label
            if member.labels and (label in member.labels or label == member.api_value):
                return member
        return None


class LanguagePossessive(DimensionEnum):
    NONE = ("n", "None")
    FIRST = ("f", "FirstPerson")
    SECOND = ("s", "SecondPerson")
    FIRST_PLURAL = ("F", "FirstPersonPlural", "fpl")
    SECOND_PLURAL = ("S", "SecondPersonPlural", "spl")

    @property
    def is_default(self) -> bool:
        return self is LanguagePossessive.NONE

    @property
    def label_value(self) -> str:
        return self.labels[0] if self.labels else self.value

    @classmethod
    def from_label_value(cls, label: Optional[str]) -> Optional["LanguagePossessive"]:
        return cls.from_db_value(label)


class LanguageStartsWith(DimensionEnum):
    CONSONANT = ("c", "Consonant")
    VOWEL = ("v", "Vowel")
    SPECIAL = ("s", "Special")


class LanguagePosition(DimensionEnum):
    PRE = ("b", "Pre")  # before
    POST = ("a", "Post")  # after

    @classmethod
    def from_label_value(cls, label: Optional[str]) -> Optional["LanguagePosition"]:
        if label is None:
            return None
        for member in cls:
            if label in (member.value, member.api_value):
                return member
        return None


# ---------------------------------------------------------------------------
# 5. Term classification
# ---------------------------------------------------------------------------


class NounType(str, Enum):
    ENTITY = "entity"
    FIELD = "field"
    OTHER = "other"

    @property
    def api_value(self) -> Optional[str]:
        return None if self is NounType.OTHER else self.value

    @classmethod
    def get_by_api_value(cls, api_value: Optional[str]) -> "NounType":
        if api_value:
            for member in (cls.ENTITY, cls.FIELD):
                if member.value == api_value.lower():
                    return member
        return cls.OTHER


class TermType(DimensionEnum):
    NOUN = ("n", "Noun")
    ADJECTIVE = ("a", "Adjective")
    ARTICLE = ("d", "Article")


__all__ = [
    "DimensionEnum",
    "ordered",
    "LanguageCase",
    "LanguageGender",
    "LanguageNumber",
    "PLURAL_SET",
    "SINGULAR_SET",
    "DUAL_SET",
    "LanguageArticle",
    "LanguagePossessive",
    "LanguageStartsWith",
    "LanguagePosition",
    "NounType",
    "TermType",
]
