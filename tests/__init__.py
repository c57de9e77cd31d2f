# tests/__init__.py
"""
Test Suite for the declension engine

Organization:
- catalog-wide properties (form keys, dimensions, defaulting) run against
  every language of the catalog.
- family tests pin the concrete derivations of one language family.
- factory and persistence tests cover dialect sharing and form references.
"""
