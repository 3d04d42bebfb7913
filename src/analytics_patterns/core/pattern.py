"""
Pattern Contract

Defines the named query blueprint that domain providers produce and the
registry owns. A Pattern is built once by a provider factory and never
mutated afterwards: the registry hands out the same read-only instances to
every caller.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Literal

from analytics_patterns.core.compiler import find_placeholders

ParameterType = Literal["string", "array", "number"]
PatternCategory = Literal["medicare", "population_health", "facility_adequacy", "demographics"]

PARAMETER_TYPES: frozenset[str] = frozenset({"string", "array", "number"})
PATTERN_CATEGORIES: tuple[str, ...] = ("medicare", "population_health", "facility_adequacy", "demographics")


@dataclass(frozen=True)
class ParameterSpec:
    """Declared shape of a single template parameter."""

    type: ParameterType
    required: bool = False

    def __post_init__(self) -> None:
        if self.type not in PARAMETER_TYPES:
            raise ValueError(f"Invalid parameter type: {self.type}. Must be one of {sorted(PARAMETER_TYPES)}")


@dataclass(frozen=True)
class Pattern:
    """Named, parameterized query template plus its metadata."""

    id: str
    name: str
    description: str
    category: PatternCategory
    template: str  # SQL text with :param placeholders
    parameters: Mapping[str, ParameterSpec] = field(default_factory=dict)
    estimated_execution_ms: int = 0  # Advisory only, never enforced
    optimization_hints: tuple[str, ...] = ()  # Applied in order after compilation

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("Pattern id cannot be empty")
        if self.category not in PATTERN_CATEGORIES:
            raise ValueError(
                f"Invalid category for pattern '{self.id}': {self.category}. Must be one of {PATTERN_CATEGORIES}"
            )
        # Nested containers are read-only once constructed
        object.__setattr__(self, "parameters", MappingProxyType(dict(self.parameters)))
        object.__setattr__(self, "optimization_hints", tuple(self.optimization_hints))

    def placeholders(self) -> list[str]:
        """Distinct :name tokens in the template, in order of first appearance."""
        return find_placeholders(self.template)

    @property
    def required_parameters(self) -> list[str]:
        return [name for name, spec in self.parameters.items() if spec.required]


def geography_parameters(**optional: ParameterType) -> dict[str, ParameterSpec]:
    """
    Build the parameter spec shared by the geography-scoped healthcare patterns.

    Every healthcare template filters on :geography_type and :geography_codes;
    extra keyword arguments declare optional parameters on top of those two.

    Example:
        >>> geography_parameters(facility_type="string")
        {'geography_type': ..., 'geography_codes': ..., 'facility_type': ...}
    """
    spec = {
        "geography_type": ParameterSpec(type="string", required=True),
        "geography_codes": ParameterSpec(type="array", required=True),
    }
    for name, param_type in optional.items():
        spec[name] = ParameterSpec(type=param_type, required=False)
    return spec
