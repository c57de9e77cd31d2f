# declension/__init__.py
"""
Grammatical declensions for localized labels.

A declension knows the legal noun, adjective and article forms of one
language and how to render or derive a word's value for any of them:

1. `get_factory().get_declension(language)` returns the declension of a
   catalog language (dialects share their fallback's rules).
2. The declension creates the word stores (`create_noun`,
   `create_adjective`, `create_article`) that a dictionary loader fills.
3. Words answer exact lookups with `get_string(form)`; declensions answer
   approximate form lookups when the exact form does not exist.
"""

from .base import ArticledDeclension, LanguageDeclension
from .errors import (
    DeclensionError,
    DuplicateFormError,
    FormResolutionError,
    UnknownLanguageError,
    UnsupportedOperationError,
)
from .factory import LanguageDeclensionFactory, get_factory
from .forwarding import ForwardingLanguageDeclension
from .language import HumanLanguage, LanguageCatalog, get_catalog

__all__ = [
    "LanguageDeclension",
    "ArticledDeclension",
    "ForwardingLanguageDeclension",
    "LanguageDeclensionFactory",
    "get_factory",
    "HumanLanguage",
    "LanguageCatalog",
    "get_catalog",
    "DeclensionError",
    "DuplicateFormError",
    "FormResolutionError",
    "UnknownLanguageError",
    "UnsupportedOperationError",
]
