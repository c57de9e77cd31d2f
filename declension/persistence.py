"""
declension/persistence.py
-------------------------

Compact persisted references to forms.

A form is persisted as (language, term type, ordinal): its position in the
declension's list of forms of that term type. Declensions generate their
form lists in a fixed order, so ordinals stay valid across processes as
long as a declension's dimension sets are unchanged.

A word's value map is persisted the same way, as (ordinal, value) pairs.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Mapping, Tuple

from pydantic import BaseModel, ConfigDict, Field

from declension.enums import TermType
from declension.errors import FormResolutionError


class FormRef(BaseModel):
    model_config = ConfigDict(frozen=True)

    language: str = Field(..., description="Locale string of the declension")
    term_type: TermType
    ordinal: int = Field(..., ge=0)


def _ordinal_of(declension, term_type: TermType, form) -> int:
    ordinal = declension.form_ordinal(term_type, form)
    if ordinal is None:
        raise FormResolutionError(f"{form!r} is not a {term_type.name.lower()} form of {declension!r}")
    return ordinal


def form_ref(declension, form) -> FormRef:
    term_type = form.term_type
    return FormRef(
        language=declension.language.locale,
        term_type=term_type,
        ordinal=_ordinal_of(declension, term_type, form),
    )


def _form_at(declension, term_type: TermType, ordinal: int):
    forms = declension.forms_for(term_type)
    if not 0 <= ordinal < len(forms):
        raise FormResolutionError(
            f"No {term_type.name.lower()} form {ordinal} in {declension!r} ({len(forms)} forms)"
        )
    return forms[ordinal]


def resolve_form_ref(factory, ref: FormRef):
    """The form `ref` points at, in the factory's declension for its language."""
    declension = factory.get_declension_for_locale(ref.language)
    return _form_at(declension, ref.term_type, ref.ordinal)


def serialize_form_map(
    declension, term_type: TermType, values: Mapping
) -> List[Tuple[int, str]]:
    """(ordinal, value) pairs of a word's values, in ordinal order."""
    pairs = []
    for form, value in values.items():
        if value is None:
            continue
        pairs.append((_ordinal_of(declension, term_type, form), value))
    pairs.sort()
    return pairs


def deserialize_form_map(
    declension, term_type: TermType, data: Iterable[Tuple[int, str]]
) -> Dict[object, str]:
    return {_form_at(declension, term_type, ordinal): value for ordinal, value in data}


__all__ = [
    "FormRef",
    "form_ref",
    "resolve_form_ref",
    "serialize_form_map",
    "deserialize_form_map",
]
