"""
declension/errors.py
--------------------

Exception taxonomy of the declension engine.

Missing forms are never exceptions: lookups return ``None`` and callers
fall back. The classes below cover the narrow cases where something is
genuinely wrong:

- UnsupportedOperationError: a family has no computable value for the
  request (e.g. postfixed articles that must come from the dictionary), or
  strict mode found a language with no declension.
- DuplicateFormError: two forms of one declension share a dimension tuple.
  This is a bug in a declension, raised while building its lookup maps.
- UnknownLanguageError: a locale string that is not in the catalog.
- FormResolutionError: a persisted form reference that does not resolve.
"""

from __future__ import annotations


class DeclensionError(Exception):
    """Base class for all declension errors."""


class UnsupportedOperationError(DeclensionError, NotImplementedError):
    pass


class DuplicateFormError(DeclensionError, ValueError):
    pass


class UnknownLanguageError(DeclensionError, KeyError):
    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message.
        return str(self.args[0]) if self.args else ""


class FormResolutionError(DeclensionError, LookupError):
    pass


__all__ = [
    "DeclensionError",
    "UnsupportedOperationError",
    "DuplicateFormError",
    "UnknownLanguageError",
    "FormResolutionError",
]
