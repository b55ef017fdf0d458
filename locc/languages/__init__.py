"""Syntax table and language registry."""

from locc.languages.registry import LanguageRegistry, create_default_registry, default_registry

__all__ = ["LanguageRegistry", "create_default_registry", "default_registry"]
