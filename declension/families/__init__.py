# declension/families/__init__.py
"""
Per-family declensions.

Each module holds one language family: its form lists, its word stores
and the derivation rules that fill in missing forms. The factory imports
them by name (see `declension.factory.DECLENSION_CLASS_REGISTRY`).
"""
