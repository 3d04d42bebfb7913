"""Tests for keyword-driven domain translation."""

import pytest

from analytics_patterns.core.domain import (
    DomainCatalog,
    DomainDefinition,
    DomainPattern,
    SelectionRule,
    geography_list,
    get_domain_catalog,
    reset_domain_catalog,
)


def _pattern(name, template="SELECT * FROM t WHERE county IN ({geography}) AND year = {year}"):
    return DomainPattern(
        name=name,
        domain="custom",
        description="",
        intent="custom_analytics",
        template=template,
        parameters=("geography", "year"),
    )


class TestSelectPattern:
    @pytest.mark.parametrize(
        ("query", "expected"),
        [
            ("Show graduation rates", "school_district_performance"),
            ("College DEGREE holders by county", "educational_attainment_demographics"),
            ("per-pupil spending gaps", "school_funding_equity_analysis"),
            ("enrollment trends", "school_district_performance"),
        ],
    )
    def test_translate_education_keyword_selection(self, domain_catalog, query, expected):
        result = domain_catalog.translate(query, "education", ["Travis"])

        assert result.pattern_name == expected

    def test_translate_earlier_rule_wins_on_overlap(self, domain_catalog):
        # 'risk' matches the climate rule before 'water' matches the water rule
        result = domain_catalog.translate("water risk", "environment", ["Harris"])

        assert result.pattern_name == "climate_resilience_indicators"

    def test_translate_air_quality_precedes_generic_quality(self, domain_catalog):
        # Act
        air = domain_catalog.translate("air quality trends", "environment", ["Harris"])
        water = domain_catalog.translate("water quality trends", "environment", ["Harris"])

        # Assert
        assert air.pattern_name == "air_quality_monitoring"
        assert water.pattern_name == "water_quality_assessment"

    def test_select_pattern_missing_rule_target_falls_back_to_first(self):
        # Arrange
        definition = DomainDefinition(
            name="custom",
            patterns=(_pattern("first"), _pattern("second")),
            selection_rules=(
                SelectionRule(("alpha",), "does_not_exist"),
                SelectionRule(("alpha",), "second"),
            ),
        )

        # Act
        selected = definition.select_pattern("alpha")

        # Assert
        assert selected.name == "first"

    def test_select_pattern_empty_domain_returns_none(self):
        assert DomainDefinition(name="empty", patterns=()).select_pattern("anything") is None


class TestTranslate:
    def test_translate_substitutes_geography_and_default_year(self, domain_catalog):
        # Act
        result = domain_catalog.translate("graduation", "education", ["Travis", "Harris"])

        # Assert
        assert "county IN ('Travis','Harris')" in result.sql
        assert "school_year = '2023'" in result.sql
        assert "{" not in result.sql
        assert result.parameters == {"geography": "'Travis','Harris'", "year": "2023", "domain": "education"}

    def test_translate_populates_intent_and_entities(self, domain_catalog):
        # Act
        result = domain_catalog.translate("college degree", "education", ["Travis"], timeframe="2021")

        # Assert
        assert result.intent == "education_demographics"
        assert result.entities == {
            "geography": ["Travis"],
            "metrics": ["educational_attainment", "college_completion", "high_school_completion"],
            "timeframe": "2021",
        }
        assert "year = '2021'" in result.sql

    def test_translate_environment_derives_date_range(self, domain_catalog):
        result = domain_catalog.translate("air quality", "environment", ["Harris"], timeframe="2022")

        assert "BETWEEN '2022-01-01' AND '2022-12-31'" in result.sql

    def test_translate_geography_quotes_are_doubled(self, domain_catalog):
        result = domain_catalog.translate("housing costs", "housing", ["O'Brien"])

        assert "county IN ('O''Brien')" in result.sql

    def test_translate_value_containing_marker_is_not_rescanned(self):
        # Arrange
        catalog = DomainCatalog([DomainDefinition(name="custom", patterns=(_pattern("only"),))])

        # Act
        result = catalog.translate("anything", "custom", ["{year}"], timeframe="2020")

        # Assert
        assert result.sql == "SELECT * FROM t WHERE county IN ('{year}') AND year = '2020'"

    def test_translate_unknown_domain_returns_none(self, domain_catalog):
        assert domain_catalog.translate("anything", "agriculture", ["Travis"]) is None

    def test_translate_configured_default_timeframe(self):
        catalog = DomainCatalog.from_providers(["housing"], default_timeframe="2019")

        result = catalog.translate("rent", "housing", ["Travis"])

        assert result.entities["timeframe"] == "2019"
        assert "year = '2019'" in result.sql

    def test_register_duplicate_domain_last_wins(self):
        # Arrange
        catalog = DomainCatalog([DomainDefinition(name="custom", patterns=(_pattern("old"),))])

        # Act
        catalog.register(DomainDefinition(name="custom", patterns=(_pattern("new"),)))

        # Assert
        assert [p.name for p in catalog.get_patterns_for_domain("custom")] == ["new"]
        assert catalog.available_domains() == ["custom"]


class TestCatalogQueries:
    def test_available_domains_in_provider_order(self, domain_catalog):
        assert domain_catalog.available_domains() == [
            "education",
            "transportation",
            "environment",
            "economics",
            "housing",
        ]

    def test_get_patterns_for_domain_declaration_order(self, domain_catalog):
        names = [p.name for p in domain_catalog.get_patterns_for_domain("transportation")]

        assert names == ["commute_patterns_analysis", "public_transit_accessibility", "traffic_congestion_index"]

    def test_get_patterns_for_unknown_domain_is_empty(self, domain_catalog):
        assert domain_catalog.get_patterns_for_domain("agriculture") == []

    def test_patterns_by_complexity_spans_domains(self, domain_catalog):
        names = [p.name for p in domain_catalog.patterns_by_complexity("complex")]

        assert names == [
            "school_funding_equity_analysis",
            "public_transit_accessibility",
            "climate_resilience_indicators",
        ]

    def test_get_domain_configuration(self, domain_catalog):
        # Act
        config = domain_catalog.get_domain_configuration("environment")

        # Assert
        assert config.primary_data_source == "environmental_protection_agency"
        assert config.temporal_granularity == "daily"
        assert domain_catalog.get_domain_configuration("agriculture") is None

    def test_validate_pattern_requires_every_declared_parameter(self, domain_catalog):
        # Arrange
        pattern = domain_catalog.get_patterns_for_domain("environment")[0]

        # Act & Assert
        assert domain_catalog.validate_pattern(
            pattern, {"geography": "'Harris'", "start_date": "2022-01-01", "end_date": "2022-12-31"}
        )
        assert not domain_catalog.validate_pattern(pattern, {"geography": "'Harris'", "start_date": "2022-01-01"})
        assert not domain_catalog.validate_pattern(pattern, {"geography": "", "start_date": "x", "end_date": "y"})


class TestGeographyList:
    def test_geography_list_joins_without_spaces(self):
        assert geography_list(["Travis", "Harris"]) == "'Travis','Harris'"

    def test_geography_list_empty(self):
        assert geography_list([]) == ""


class TestDefaultCatalog:
    def test_get_domain_catalog_reads_default_timeframe_from_config(self, tmp_path):
        # Arrange
        config_path = tmp_path / "engine.yaml"
        config_path.write_text('default_timeframe: "2020"\n')

        # Act
        catalog = get_domain_catalog(config_path)

        # Assert
        assert catalog.default_timeframe == "2020"
        assert get_domain_catalog() is catalog

    def test_reset_domain_catalog_builds_new_instance(self):
        first = get_domain_catalog()

        reset_domain_catalog()

        assert get_domain_catalog() is not first
