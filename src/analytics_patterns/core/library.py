"""
Pattern Library - lookup, validation, compilation and hints in one call.

Typical use:

    registry = PatternRegistry.from_providers()
    library = PatternLibrary(registry)
    sql = library.generate_sql(
        "medicare_basic_eligibility",
        {"geography_type": "state", "geography_codes": ["California"]},
    )

Lookup and validation failures raise typed errors from
analytics_patterns.core.errors; nothing is reported through return values.
"""

import threading
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import structlog
from pydantic import BaseModel, ConfigDict, Field

from analytics_patterns.core.compiler import BoundQuery, bind_template, compile_template
from analytics_patterns.core.config_loader import EngineConfigDefaults, load_engine_config
from analytics_patterns.core.errors import ParameterValidationError, UnresolvedPlaceholderError
from analytics_patterns.core.hints import HintOptions, apply_hints
from analytics_patterns.core.pattern import Pattern
from analytics_patterns.core.registry import PatternRegistry
from analytics_patterns.core.validator import ValidationResult, validate_parameters

logger = structlog.get_logger()


class ParameterSummary(BaseModel):
    """Declared parameter as exposed to discovery clients."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(..., description="Parameter name as used in the template")
    type: str = Field(..., description="One of string, array, number")
    required: bool = Field(False, description="Whether generation fails without it")


class PatternSummary(BaseModel):
    """Discovery view of a registered pattern."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    id: str
    name: str
    description: str
    category: str
    parameters: list[ParameterSummary] = Field(default_factory=list)
    estimated_execution_ms: int = Field(0, ge=0, description="Advisory cost hint")
    optimization_hints: list[str] = Field(default_factory=list)
    template: str | None = Field(None, description="SQL template, only when requested")

    @classmethod
    def from_pattern(cls, pattern: Pattern, include_sql: bool = False) -> "PatternSummary":
        return cls(
            id=pattern.id,
            name=pattern.name,
            description=pattern.description,
            category=pattern.category,
            parameters=[
                ParameterSummary(name=name, type=spec.type, required=spec.required)
                for name, spec in pattern.parameters.items()
            ],
            estimated_execution_ms=pattern.estimated_execution_ms,
            optimization_hints=list(pattern.optimization_hints),
            template=pattern.template if include_sql else None,
        )


class PatternLibrary:
    """
    Facade over a PatternRegistry.

    Args:
        registry: Populated pattern registry
        config: Engine config dict (see load_engine_config). Missing keys fall
            back to EngineConfigDefaults; None uses the defaults without reading any file.
    """

    def __init__(self, registry: PatternRegistry, config: Mapping[str, Any] | None = None):
        self.registry = registry
        self.config: dict[str, Any] = {**EngineConfigDefaults().to_dict(), **(config or {})}
        self.hint_options = HintOptions(
            row_limit=int(self.config["row_limit"]),
            index_table=self.config["index_hint_table"],
            index_name=self.config["index_hint_name"],
        )

    def get_pattern(self, pattern_id: str) -> Pattern:
        return self.registry.get(pattern_id)

    def validate_parameters(self, pattern_id: str, parameters: Mapping[str, Any]) -> ValidationResult:
        """
        Validate parameters for a pattern without compiling anything.

        Raises:
            PatternNotFoundError: If pattern_id is unknown
        """
        pattern = self.registry.get(pattern_id)
        return validate_parameters(pattern.parameters, parameters)

    def generate_sql(self, pattern_id: str, parameters: Mapping[str, Any], *, validate: bool = True) -> str:
        """
        Produce executable SQL for a pattern.

        Steps: lookup, parameter validation, literal substitution, unresolved
        placeholder check, optimization hints.

        Args:
            pattern_id: Registered pattern id
            parameters: Flat parameter mapping
            validate: Run parameter validation first (default True)

        Returns:
            SQL text with all hints applied

        Raises:
            PatternNotFoundError: If pattern_id is unknown
            ParameterValidationError: If validation fails
            UnresolvedPlaceholderError: If placeholders remain and strict_placeholders is on
        """
        pattern = self._prepare(pattern_id, parameters, validate)

        compiled = compile_template(pattern.template, parameters)
        self._check_unresolved(pattern, compiled.unresolved)

        sql = apply_hints(compiled.sql, pattern.optimization_hints, self.hint_options)
        logger.debug("sql_generated", pattern_id=pattern_id, hints=list(pattern.optimization_hints))
        return sql

    def bind_sql(self, pattern_id: str, parameters: Mapping[str, Any], *, validate: bool = True) -> BoundQuery:
        """
        Produce query text with positional `?` markers plus bound values.

        Same pipeline as generate_sql(); values never appear in the SQL text.
        """
        pattern = self._prepare(pattern_id, parameters, validate)

        bound = bind_template(pattern.template, parameters)
        self._check_unresolved(pattern, bound.unresolved)

        sql = apply_hints(bound.sql, pattern.optimization_hints, self.hint_options)
        return BoundQuery(sql=sql, parameters=bound.parameters, unresolved=bound.unresolved)

    def get_execution_estimate(self, pattern_id: str, parameters: Mapping[str, Any]) -> int:
        """
        Advisory execution time in milliseconds.

        Base estimate plus per_geography_ms for each geography code, capped at
        max_estimate_ms.

        Raises:
            PatternNotFoundError: If pattern_id is unknown
        """
        pattern = self.registry.get(pattern_id)
        codes = parameters.get("geography_codes") or []
        code_count = len(codes) if isinstance(codes, (list, tuple)) else 0
        estimate = pattern.estimated_execution_ms + code_count * int(self.config["per_geography_ms"])
        return min(estimate, int(self.config["max_estimate_ms"]))

    def describe_patterns(self, category: str | None = None, include_sql: bool = False) -> list[PatternSummary]:
        """
        List registered patterns for discovery clients.

        Args:
            category: Only patterns in this category (None for all)
            include_sql: Include template text in each summary
        """
        patterns = self.registry.list_patterns() if category is None else self.registry.list_by_category(category)
        return [PatternSummary.from_pattern(p, include_sql=include_sql) for p in patterns]

    def _prepare(self, pattern_id: str, parameters: Mapping[str, Any], validate: bool) -> Pattern:
        pattern = self.registry.get(pattern_id)
        if validate:
            result = validate_parameters(pattern.parameters, parameters)
            if not result.valid:
                logger.info("parameter_validation_failed", pattern_id=pattern_id, errors=result.errors)
                raise ParameterValidationError(pattern_id, result.errors)
        return pattern

    def _check_unresolved(self, pattern: Pattern, unresolved: list[str]) -> None:
        if not unresolved:
            return
        if self.config["strict_placeholders"]:
            raise UnresolvedPlaceholderError(pattern.id, unresolved)
        logger.warning("unresolved_placeholders", pattern_id=pattern.id, placeholders=unresolved)


_default_library: PatternLibrary | None = None
_default_library_lock = threading.Lock()


def get_pattern_library(config_path: Path | None = None) -> PatternLibrary:
    """
    Process-wide default library, built on first use.

    Loads the healthcare providers and config/engine.yaml (or config_path).
    Prefer constructing PatternLibrary directly where a registry can be injected.
    """
    global _default_library
    if _default_library is None:
        with _default_library_lock:
            if _default_library is None:
                _default_library = PatternLibrary(PatternRegistry.from_providers(), load_engine_config(config_path))
    return _default_library


def reset_pattern_library() -> None:
    """Drop the process-wide default library (tests)."""
    global _default_library
    with _default_library_lock:
        _default_library = None
