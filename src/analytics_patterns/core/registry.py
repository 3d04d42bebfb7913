"""
Pattern Registry - in-memory catalog of query patterns.

The registry is an explicit object: build one at startup (usually with
PatternRegistry.from_providers()) and pass it to whatever needs it. It is
written only while providers are loaded and read-only afterwards, so
concurrent readers need no locking once construction has finished.
"""

import importlib
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

import structlog

from analytics_patterns.core.errors import PatternNotFoundError
from analytics_patterns.core.pattern import Pattern

logger = structlog.get_logger()

# Provider load order. Later providers replace earlier patterns that share an id.
HEALTHCARE_PROVIDERS: tuple[str, ...] = (
    "core",
    "medicare",
    "population_health",
    "facility_adequacy",
    "composite",
)


@dataclass(frozen=True)
class RegistrationResult:
    """Outcome of registering one pattern."""

    pattern_id: str
    replaced: Pattern | None = None  # Previous pattern under the same id, if any

    @property
    def overridden(self) -> bool:
        return self.replaced is not None


def load_provider_patterns(provider_name: str) -> list[Pattern]:
    """
    Import a provider module and call its get_patterns() factory.

    Args:
        provider_name: Subpackage name under analytics_patterns.patterns

    Returns:
        Patterns produced by the provider

    Raises:
        ImportError: If the provider module does not exist
        AttributeError: If the module has no get_patterns() factory
    """
    module = importlib.import_module(f"analytics_patterns.patterns.{provider_name}.definition")
    return list(module.get_patterns())


class PatternRegistry:
    """
    Catalog mapping pattern ids to Pattern instances.

    Duplicate ids follow last-write-wins; the replaced pattern is returned in
    the RegistrationResult and logged, never dropped silently.
    """

    def __init__(self, patterns: Iterable[Pattern] | None = None):
        self._patterns: dict[str, Pattern] = {}
        if patterns is not None:
            self.register_many(patterns)

    @classmethod
    def from_providers(cls, provider_names: Sequence[str] = HEALTHCARE_PROVIDERS) -> "PatternRegistry":
        """
        Build a registry by invoking each provider factory once, in order.

        Args:
            provider_names: Provider subpackages to load (default: HEALTHCARE_PROVIDERS)

        Returns:
            Populated PatternRegistry
        """
        registry = cls()
        for provider_name in provider_names:
            results = registry.register_many(load_provider_patterns(provider_name))
            logger.debug(
                "provider_loaded",
                provider=provider_name,
                pattern_count=len(results),
                overridden=[r.pattern_id for r in results if r.overridden],
            )
        logger.info("pattern_registry_ready", pattern_count=len(registry), providers=list(provider_names))
        return registry

    def register(self, pattern: Pattern) -> RegistrationResult:
        replaced = self._patterns.get(pattern.id)
        self._patterns[pattern.id] = pattern
        if replaced is not None:
            logger.warning("pattern_overridden", pattern_id=pattern.id, previous_name=replaced.name, name=pattern.name)
        return RegistrationResult(pattern_id=pattern.id, replaced=replaced)

    def register_many(self, patterns: Iterable[Pattern]) -> list[RegistrationResult]:
        return [self.register(pattern) for pattern in patterns]

    def get(self, pattern_id: str) -> Pattern:
        """
        Look up a pattern by id.

        Raises:
            PatternNotFoundError: If no pattern is registered under pattern_id
        """
        try:
            return self._patterns[pattern_id]
        except KeyError:
            raise PatternNotFoundError(pattern_id, available=list(self._patterns)) from None

    def list_patterns(self) -> list[Pattern]:
        """All patterns in registration order."""
        return list(self._patterns.values())

    def list_by_category(self, category: str) -> list[Pattern]:
        return [p for p in self._patterns.values() if p.category == category]

    def categories(self) -> list[str]:
        """Distinct categories present, in first-seen order."""
        return list(dict.fromkeys(p.category for p in self._patterns.values()))

    def ids(self) -> list[str]:
        return list(self._patterns)

    def __contains__(self, pattern_id: object) -> bool:
        return pattern_id in self._patterns

    def __len__(self) -> int:
        return len(self._patterns)
