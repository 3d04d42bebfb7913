"""
Parameter validation against a pattern's declared parameter spec.

Checks presence of required parameters and the shape of array parameters.
Undeclared parameters are ignored, and number/string values are accepted as
long as they are present.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from analytics_patterns.core.pattern import ParameterSpec


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating one parameter set."""

    valid: bool
    errors: list[str] = field(default_factory=list)


def validate_parameters(parameter_spec: Mapping[str, ParameterSpec], parameters: Mapping[str, Any]) -> ValidationResult:
    """
    Validate a caller-supplied parameter set.

    Every failure is reported, in declaration order, so callers can surface
    all problems at once.

    Args:
        parameter_spec: Pattern's declared parameters
        parameters: Flat caller-supplied parameter mapping

    Returns:
        ValidationResult with valid flag and error messages

    Example:
        >>> spec = {"geography_codes": ParameterSpec(type="array", required=True)}
        >>> validate_parameters(spec, {"geography_codes": "California"}).errors
        ['Parameter geography_codes must be an array']
    """
    errors: list[str] = []

    for name, spec in parameter_spec.items():
        value = parameters.get(name)

        if spec.required and value is None:
            errors.append(f"Required parameter missing: {name}")
            continue

        if spec.type == "array" and value is not None and not isinstance(value, (list, tuple)):
            errors.append(f"Parameter {name} must be an array")

    return ValidationResult(valid=not errors, errors=errors)
