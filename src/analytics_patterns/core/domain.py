"""
Domain Query Translator - keyword-driven pattern selection for generic datasets.

Unlike the healthcare registry, where the caller names a pattern id, each
generic domain (education, transportation, ...) owns an ordered list of
patterns plus ordered selection rules. A free-text question is matched
against those rules and the chosen template is filled with geography and
year values.

Templates here use `{geography}`, `{year}`, `{start_date}` and `{end_date}`
markers. They are substituted as already-quoted SQL literals and are kept
separate from the `:name` placeholder grammar of the compiler.
"""

import importlib
import re
import threading
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Literal

import structlog

from analytics_patterns.core.compiler import escape_literal, quote_literal
from analytics_patterns.core.config_loader import load_engine_config

logger = structlog.get_logger()

Complexity = Literal["simple", "medium", "complex"]
TemporalGranularity = Literal["yearly", "monthly", "daily"]

GENERIC_PROVIDERS: tuple[str, ...] = (
    "education",
    "transportation",
    "environment",
    "economics",
    "housing",
)

MARKER_PATTERN = re.compile(r"\{(geography|year|start_date|end_date)\}")


@dataclass(frozen=True)
class DomainPattern:
    """Curly-brace templated query for one generic domain."""

    name: str
    domain: str
    description: str
    intent: str
    template: str
    parameters: tuple[str, ...]
    geography_types: tuple[str, ...] = ()
    metrics: tuple[str, ...] = ()
    complexity: Complexity = "medium"
    estimated_execution_ms: int = 0


@dataclass(frozen=True)
class SelectionRule:
    """Selects pattern_name when any keyword occurs in the lower-cased question."""

    keywords: tuple[str, ...]
    pattern_name: str

    def matches(self, query_lower: str) -> bool:
        return any(keyword in query_lower for keyword in self.keywords)


@dataclass(frozen=True)
class DomainConfiguration:
    """Informational data-source description for a domain."""

    domain: str
    primary_data_source: str
    fallback_sources: tuple[str, ...] = ()
    common_geographies: tuple[str, ...] = ()
    standard_metrics: tuple[str, ...] = ()
    temporal_granularity: TemporalGranularity = "yearly"


@dataclass(frozen=True)
class DomainDefinition:
    """Everything one generic provider contributes."""

    name: str
    patterns: tuple[DomainPattern, ...]
    selection_rules: tuple[SelectionRule, ...] = ()
    configuration: DomainConfiguration | None = None
    derives_date_range: bool = False  # Fill {start_date}/{end_date} from the year

    def get_pattern(self, pattern_name: str) -> DomainPattern | None:
        return next((p for p in self.patterns if p.name == pattern_name), None)

    def select_pattern(self, query: str) -> DomainPattern | None:
        """
        Pick a pattern for a free-text question.

        Rules are tried in order and the first match wins. A matching rule that
        names a pattern this domain lacks, or no match at all, falls back to
        the domain's first pattern. Returns None only for an empty domain.
        """
        if not self.patterns:
            return None
        query_lower = query.lower()
        for rule in self.selection_rules:
            if rule.matches(query_lower):
                selected = self.get_pattern(rule.pattern_name)
                if selected is None:
                    logger.warning("selection_rule_target_missing", domain=self.name, pattern=rule.pattern_name)
                    break
                return selected
        return self.patterns[0]


@dataclass(frozen=True)
class Translation:
    """Result of translating a question against a domain."""

    intent: str
    entities: dict[str, Any]
    sql: str
    parameters: dict[str, str]
    pattern_name: str


def geography_list(geography: Sequence[str]) -> str:
    """Render geography names as a comma-joined list of quoted literals: 'a','b'."""
    return ",".join(f"'{escape_literal(str(name))}'" for name in geography)


def load_domain_definition(provider_name: str) -> DomainDefinition:
    """Import a generic provider module and call its get_domain() factory."""
    module = importlib.import_module(f"analytics_patterns.patterns.{provider_name}.definition")
    return module.get_domain()


class DomainCatalog:
    """
    Generic domains keyed by name, in registration order.

    Args:
        domains: Domain definitions to register
        default_timeframe: Year used when translate() gets no timeframe
    """

    def __init__(self, domains: Iterable[DomainDefinition] = (), default_timeframe: str = "2023"):
        self.default_timeframe = default_timeframe
        self._domains: dict[str, DomainDefinition] = {}
        for definition in domains:
            self.register(definition)

    @classmethod
    def from_providers(
        cls, provider_names: Sequence[str] = GENERIC_PROVIDERS, default_timeframe: str = "2023"
    ) -> "DomainCatalog":
        catalog = cls(default_timeframe=default_timeframe)
        for provider_name in provider_names:
            catalog.register(load_domain_definition(provider_name))
        logger.info("domain_catalog_ready", domains=catalog.available_domains())
        return catalog

    def register(self, definition: DomainDefinition) -> None:
        if definition.name in self._domains:
            logger.warning("domain_overridden", domain=definition.name)
        self._domains[definition.name] = definition

    def get_domain(self, domain: str) -> DomainDefinition | None:
        return self._domains.get(domain)

    def available_domains(self) -> list[str]:
        return list(self._domains)

    def get_patterns_for_domain(self, domain: str) -> list[DomainPattern]:
        """Patterns of a domain in declaration order; empty for unknown domains."""
        definition = self._domains.get(domain)
        return list(definition.patterns) if definition else []

    def patterns_by_complexity(self, complexity: str) -> list[DomainPattern]:
        """Patterns of the given complexity across all domains, domain order first."""
        return [p for definition in self._domains.values() for p in definition.patterns if p.complexity == complexity]

    def get_domain_configuration(self, domain: str) -> DomainConfiguration | None:
        definition = self._domains.get(domain)
        return definition.configuration if definition else None

    def translate(
        self,
        query: str,
        domain: str,
        geography: Sequence[str],
        timeframe: str | None = None,
    ) -> Translation | None:
        """
        Translate a free-text question into SQL for one domain.

        Args:
            query: Free-text question, matched case-insensitively against keywords
            domain: Domain name (e.g. "education")
            geography: Geography names substituted into {geography}
            timeframe: Year substituted into {year} (default: default_timeframe)

        Returns:
            Translation, or None when the domain is unknown or has no patterns

        Example:
            >>> catalog.translate("graduation rates", "education", ["Travis"]).pattern_name
            'school_district_performance'
        """
        definition = self._domains.get(domain)
        if definition is None:
            logger.debug("domain_not_found", domain=domain)
            return None

        pattern = definition.select_pattern(query)
        if pattern is None:
            return None

        year = timeframe or self.default_timeframe
        geography_sql = geography_list(geography)
        sql = self._build_sql(pattern, geography_sql, year, definition.derives_date_range)

        logger.debug("query_translated", domain=domain, pattern=pattern.name)
        return Translation(
            intent=pattern.intent,
            entities={
                "geography": list(geography),
                "metrics": list(pattern.metrics),
                "timeframe": year,
            },
            sql=sql,
            parameters={"geography": geography_sql, "year": year, "domain": domain},
            pattern_name=pattern.name,
        )

    def validate_pattern(self, pattern: DomainPattern, parameters: Mapping[str, Any]) -> bool:
        """Check that every declared parameter is present and non-empty."""
        for name in pattern.parameters:
            if not parameters.get(name):
                logger.warning("domain_parameter_missing", pattern=pattern.name, parameter=name)
                return False
        return True

    @staticmethod
    def _build_sql(pattern: DomainPattern, geography_sql: str, year: str, derives_date_range: bool) -> str:
        values = {"geography": geography_sql, "year": quote_literal(year)}
        if derives_date_range:
            values["start_date"] = quote_literal(f"{year}-01-01")
            values["end_date"] = quote_literal(f"{year}-12-31")

        # Single pass, so substituted values are never rescanned for markers
        sql = MARKER_PATTERN.sub(lambda m: values.get(m.group(1), m.group(0)), pattern.template)
        return sql.strip()


_default_catalog: DomainCatalog | None = None
_default_catalog_lock = threading.Lock()


def get_domain_catalog(config_path: Path | None = None) -> DomainCatalog:
    """Process-wide default catalog over GENERIC_PROVIDERS, using default_timeframe from engine config."""
    global _default_catalog
    if _default_catalog is None:
        with _default_catalog_lock:
            if _default_catalog is None:
                config = load_engine_config(config_path)
                _default_catalog = DomainCatalog.from_providers(default_timeframe=str(config["default_timeframe"]))
    return _default_catalog


def reset_domain_catalog() -> None:
    global _default_catalog
    with _default_catalog_lock:
        _default_catalog = None
