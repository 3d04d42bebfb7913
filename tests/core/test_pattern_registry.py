"""
Tests for the pattern registry.
"""

import pytest

from analytics_patterns.core.errors import PatternNotFoundError
from analytics_patterns.core.registry import HEALTHCARE_PROVIDERS, PatternRegistry, load_provider_patterns


class TestPatternRegistry:
    """Test suite for PatternRegistry."""

    def test_register_new_id_reports_no_override(self, make_pattern):
        # Arrange
        registry = PatternRegistry()

        # Act
        result = registry.register(make_pattern("a"))

        # Assert
        assert result.pattern_id == "a"
        assert result.overridden is False
        assert len(registry) == 1

    def test_register_duplicate_id_last_write_wins(self, make_pattern):
        # Arrange
        registry = PatternRegistry()
        first = make_pattern("dup", template="SELECT 1")
        second = make_pattern("dup", template="SELECT 2")
        registry.register(first)

        # Act
        result = registry.register(second)

        # Assert
        assert result.overridden is True
        assert result.replaced is first
        assert registry.get("dup") is second
        assert len(registry) == 1

    def test_register_duplicate_keeps_first_position(self, make_pattern):
        registry = PatternRegistry([make_pattern("a"), make_pattern("b")])

        registry.register(make_pattern("a", template="SELECT 2"))

        assert registry.ids() == ["a", "b"]

    def test_get_unknown_id_raises_pattern_not_found(self, make_pattern):
        # Arrange
        registry = PatternRegistry([make_pattern("known")])

        # Act & Assert
        with pytest.raises(PatternNotFoundError) as exc_info:
            registry.get("missing")

        assert exc_info.value.pattern_id == "missing"
        assert "Pattern not found: missing" in str(exc_info.value)
        assert "known" in str(exc_info.value)

    def test_pattern_not_found_is_a_key_error(self):
        registry = PatternRegistry()

        with pytest.raises(KeyError):
            registry.get("missing")

    def test_list_by_category_filters(self, make_pattern):
        # Arrange
        registry = PatternRegistry(
            [make_pattern("m", category="medicare"), make_pattern("d", category="demographics")]
        )

        # Act & Assert
        assert [p.id for p in registry.list_by_category("medicare")] == ["m"]
        assert registry.list_by_category("facility_adequacy") == []
        assert registry.categories() == ["medicare", "demographics"]

    def test_contains_checks_ids(self, make_pattern):
        registry = PatternRegistry([make_pattern("a")])

        assert "a" in registry
        assert "b" not in registry


class TestProviderLoading:
    def test_healthcare_provider_order_is_fixed(self):
        assert HEALTHCARE_PROVIDERS == ("core", "medicare", "population_health", "facility_adequacy", "composite")

    def test_load_provider_patterns_unknown_provider_raises_import_error(self):
        with pytest.raises(ImportError):
            load_provider_patterns("no_such_provider")

    def test_from_providers_specialized_versions_replace_core(self):
        # Arrange
        core_version = {p.id: p for p in load_provider_patterns("core")}["medicare_basic_eligibility"]

        # Act
        registry = PatternRegistry.from_providers()

        # Assert
        pattern = registry.get("medicare_basic_eligibility")
        assert pattern is not core_version
        assert pattern.name == "Medicare Basic Eligibility Analysis"
        assert "estimated_traditional_medicare" in pattern.template

    def test_from_providers_registers_full_healthcare_set(self, healthcare_registry):
        assert set(healthcare_registry.ids()) == {
            "medicare_basic_eligibility",
            "medicare_advantage_opportunity",
            "population_health_basic_risk",
            "facility_adequacy_basic",
            "healthcare_dashboard_composite",
            "medicare_5year_projection",
            "medicare_dual_eligible_analysis",
            "population_health_chronic_disease_risk",
            "population_health_social_determinants",
            "population_health_equity_analysis",
            "facility_adequacy_specialty_access",
            "facility_adequacy_rural_health_access",
            "facility_adequacy_emergency_coverage",
            "healthcare_comprehensive_composite",
        }

    def test_from_providers_subset_loads_only_named_providers(self):
        registry = PatternRegistry.from_providers(["composite"])

        assert registry.ids() == ["healthcare_comprehensive_composite"]
