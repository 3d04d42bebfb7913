"""Parameterized analytical query patterns for healthcare and public-dataset domains."""

from analytics_patterns.core.compiler import BoundQuery, CompiledTemplate, bind_template, compile_template
from analytics_patterns.core.domain import DomainCatalog, Translation, get_domain_catalog, reset_domain_catalog
from analytics_patterns.core.errors import (
    ParameterValidationError,
    PatternNotFoundError,
    UnresolvedPlaceholderError,
)
from analytics_patterns.core.library import PatternLibrary, get_pattern_library, reset_pattern_library
from analytics_patterns.core.pattern import ParameterSpec, Pattern
from analytics_patterns.core.registry import PatternRegistry

__version__ = "0.1.0"

__all__ = [
    "bind_template",
    "BoundQuery",
    "compile_template",
    "CompiledTemplate",
    "DomainCatalog",
    "get_domain_catalog",
    "get_pattern_library",
    "ParameterSpec",
    "ParameterValidationError",
    "Pattern",
    "PatternLibrary",
    "PatternNotFoundError",
    "PatternRegistry",
    "reset_domain_catalog",
    "reset_pattern_library",
    "Translation",
    "UnresolvedPlaceholderError",
]
