"""
Pytest configuration and fixtures for analytics pattern tests.
"""

import sys
from pathlib import Path

import pytest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from analytics_patterns.core.domain import DomainCatalog, reset_domain_catalog  # noqa: E402
from analytics_patterns.core.library import PatternLibrary, reset_pattern_library  # noqa: E402
from analytics_patterns.core.pattern import ParameterSpec, Pattern  # noqa: E402
from analytics_patterns.core.registry import PatternRegistry  # noqa: E402

DEMOGRAPHICS_ROWS = [
    ("Los Angeles", "California", 10_000_000, 1_500_000, 75_000),
    ("Alpine", "California", 1_200, 300, 55_000),
    ("O'Brien", "Iowa", 14_000, 3_400, 52_000),
    ("Travis", "Texas", 1_300_000, 130_000, 85_000),
    ("Harris", "Texas", 4_700_000, 500_000, 65_000),
]


@pytest.fixture(scope="session")
def project_root():
    """Return project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture(scope="session")
def healthcare_registry():
    """Registry loaded from every healthcare provider. Read-only, shared across the session."""
    return PatternRegistry.from_providers()


@pytest.fixture
def pattern_library(healthcare_registry):
    """Library over the healthcare registry with default engine config."""
    return PatternLibrary(healthcare_registry)


@pytest.fixture(scope="session")
def domain_catalog():
    """Catalog loaded from every generic domain provider."""
    return DomainCatalog.from_providers()


@pytest.fixture
def make_pattern():
    """Factory for small patterns with a geography-style parameter spec."""

    def _make(pattern_id="test_pattern", template="SELECT * FROM demographics WHERE state IN (:codes)", **overrides):
        fields = {
            "id": pattern_id,
            "name": "Test Pattern",
            "description": "Pattern used in tests",
            "category": "demographics",
            "template": template,
            "parameters": {"codes": ParameterSpec(type="array", required=True)},
        }
        fields.update(overrides)
        return Pattern(**fields)

    return _make


@pytest.fixture
def demographics_db():
    """In-memory DuckDB connection with a small demographics table."""
    duckdb = pytest.importorskip("duckdb")
    con = duckdb.connect(":memory:")
    con.execute(
        """
        CREATE TABLE demographics (
            county VARCHAR,
            state VARCHAR,
            population_total BIGINT,
            population_65_plus BIGINT,
            median_household_income DOUBLE
        )
        """
    )
    con.executemany("INSERT INTO demographics VALUES (?, ?, ?, ?, ?)", DEMOGRAPHICS_ROWS)
    yield con
    con.close()


@pytest.fixture(autouse=True)
def _reset_defaults():
    """Drop the process-wide defaults between tests."""
    yield
    reset_pattern_library()
    reset_domain_catalog()
