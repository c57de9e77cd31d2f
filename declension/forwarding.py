"""
declension/forwarding.py
------------------------

A declension that reports one language but shares every rule of another.

Dialects without translations of their own (en_CA, ro_MD, de_AT, ...) use
exactly the grammar of the language they fall back to. Rather than build a
second, identical rule engine, the factory wraps the fallback's instance:
`language` answers the dialect, everything else is the delegate's.
"""

from __future__ import annotations

from typing import Any


class ForwardingLanguageDeclension:
    __slots__ = ("_language", "_delegate")

    def __init__(self, language, delegate):
        assert language is not None and delegate is not None
        # Never stack proxies
        if isinstance(delegate, ForwardingLanguageDeclension):
            delegate = delegate.delegate
        self._language = language
        self._delegate = delegate

    @property
    def language(self):
        return self._language

    @property
    def delegate(self):
        return self._delegate

    def __getattr__(self, name: str) -> Any:
        # Only reached for names not defined on the proxy itself
        return getattr(self._delegate, name)

    def __repr__(self) -> str:
        return f"{self._delegate!r}@{self._language}"


def is_forwarding_proxy(declension) -> bool:
    return isinstance(declension, ForwardingLanguageDeclension)


def unwrap(declension):
    """The declension that actually implements the rules."""
    if isinstance(declension, ForwardingLanguageDeclension):
        return declension.delegate
    return declension


__all__ = ["ForwardingLanguageDeclension", "is_forwarding_proxy", "unwrap"]
