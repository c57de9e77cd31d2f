# tests/conftest.py
import pytest

from declension.factory import LanguageDeclensionFactory
from declension.language import get_catalog
from declension.logging_setup import init_logging


@pytest.fixture(scope="session", autouse=True)
def _logging() -> None:
    """Route structlog output through stdlib logging so caplog sees it."""
    init_logging()


@pytest.fixture(scope="session")
def catalog():
    return get_catalog()


@pytest.fixture(scope="session")
def factory(catalog):
    """
    A non-strict factory over the full catalog.
    Built once: construction creates a declension per catalog language.
    """
    return LanguageDeclensionFactory(catalog, strict=False)


@pytest.fixture(scope="session")
def declension_for(factory):
    """Returns a helper mapping a locale string to its declension."""

    def _declension_for(locale: str):
        return factory.get_declension_for_locale(locale)

    return _declension_for
