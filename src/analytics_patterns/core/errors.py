"""
Error types for pattern lookup, parameter validation, and compilation.

All failures are per-request: callers can recover by choosing another
pattern or correcting parameters. Unknown optimization hints are not errors.
"""


class PatternNotFoundError(KeyError):
    """Requested pattern id has no registry entry."""

    def __init__(self, pattern_id: str, available: list[str] | None = None):
        self.pattern_id = pattern_id
        self.available = sorted(available or [])
        super().__init__(pattern_id)

    def __str__(self) -> str:
        message = f"Pattern not found: {self.pattern_id}"
        if self.available:
            message += f". Available patterns: {', '.join(self.available)}"
        return message


class ParameterValidationError(ValueError):
    """One or more parameters failed validation against a pattern's spec."""

    def __init__(self, pattern_id: str, errors: list[str]):
        self.pattern_id = pattern_id
        self.errors = list(errors)
        super().__init__(f"Invalid parameters for pattern '{pattern_id}': {'; '.join(self.errors)}")


class UnresolvedPlaceholderError(ValueError):
    """Template placeholders left without a value after compilation."""

    def __init__(self, pattern_id: str, placeholders: list[str]):
        self.pattern_id = pattern_id
        self.placeholders = list(placeholders)
        tokens = ", ".join(f":{name}" for name in self.placeholders)
        super().__init__(f"Unresolved placeholders in pattern '{pattern_id}': {tokens}")
