"""
Tests for the PatternLibrary facade.

Test name follows: test_unit_scenario_expectedBehavior
"""

import pytest

from analytics_patterns.core.compiler import find_placeholders
from analytics_patterns.core.errors import (
    ParameterValidationError,
    PatternNotFoundError,
    UnresolvedPlaceholderError,
)
from analytics_patterns.core.library import (
    PatternLibrary,
    PatternSummary,
    get_pattern_library,
    reset_pattern_library,
)
from analytics_patterns.core.registry import PatternRegistry

CALIFORNIA = {"geography_type": "state", "geography_codes": ["California"]}


class TestGenerateSql:
    """Test suite for PatternLibrary.generate_sql()."""

    def test_generate_sql_state_filter_substitutes_and_limits(self, pattern_library):
        # Act
        sql = pattern_library.generate_sql("medicare_basic_eligibility", CALIFORNIA)

        # Assert
        assert "state IN ('California')" in sql
        assert "'state' = 'state'" in sql
        assert ":geography" not in sql
        assert sql.endswith("LIMIT 1000")

    def test_generate_sql_applies_index_directive_once(self, pattern_library):
        sql = pattern_library.generate_sql("medicare_basic_eligibility", CALIFORNIA)

        assert sql.count("/*+ INDEX(idx_demographics_geography) */") == 1

    def test_generate_sql_template_mentioning_limit_gets_no_row_limit(self, pattern_library):
        # Template text contains 'Limited Specialty Access'
        sql = pattern_library.generate_sql("facility_adequacy_specialty_access", CALIFORNIA)

        assert "LIMIT 1000" not in sql

    def test_generate_sql_quote_in_county_name_is_escaped(self, pattern_library):
        # Arrange
        parameters = {"geography_type": "county", "geography_codes": ["O'Brien"]}

        # Act
        sql = pattern_library.generate_sql("medicare_basic_eligibility", parameters)

        # Assert
        assert "county IN ('O''Brien')" in sql

    def test_generate_sql_missing_parameters_raises_with_every_error(self, pattern_library):
        # Act & Assert
        with pytest.raises(ParameterValidationError) as exc_info:
            pattern_library.generate_sql("medicare_basic_eligibility", {})

        assert exc_info.value.pattern_id == "medicare_basic_eligibility"
        assert exc_info.value.errors == [
            "Required parameter missing: geography_type",
            "Required parameter missing: geography_codes",
        ]

    def test_generate_sql_unknown_pattern_raises(self, pattern_library):
        with pytest.raises(PatternNotFoundError):
            pattern_library.generate_sql("unknown_pattern", CALIFORNIA)

    def test_generate_sql_unresolved_placeholder_strict_raises(self, make_pattern):
        # Arrange
        pattern = make_pattern(template="SELECT * FROM demographics WHERE state IN (:codes) AND year = :year")
        library = PatternLibrary(PatternRegistry([pattern]))

        # Act & Assert
        with pytest.raises(UnresolvedPlaceholderError) as exc_info:
            library.generate_sql("test_pattern", {"codes": ["Texas"]})

        assert exc_info.value.placeholders == ["year"]

    def test_generate_sql_unresolved_placeholder_lenient_left_verbatim(self, make_pattern):
        # Arrange
        pattern = make_pattern(template="SELECT * FROM demographics WHERE state IN (:codes) AND year = :year")
        library = PatternLibrary(PatternRegistry([pattern]), {"strict_placeholders": False})

        # Act
        sql = library.generate_sql("test_pattern", {"codes": ["Texas"]})

        # Assert
        assert sql == "SELECT * FROM demographics WHERE state IN ('Texas') AND year = :year"

    def test_generate_sql_validate_false_skips_validation(self, make_pattern):
        # Arrange
        pattern = make_pattern(template="SELECT * FROM demographics WHERE state IN (:codes)")
        library = PatternLibrary(PatternRegistry([pattern]), {"strict_placeholders": False})

        # Act
        sql = library.generate_sql("test_pattern", {}, validate=False)

        # Assert
        assert sql.endswith("IN (:codes)")

    def test_generate_sql_configured_row_limit_used(self, healthcare_registry):
        library = PatternLibrary(healthcare_registry, {"row_limit": 50})

        sql = library.generate_sql("population_health_basic_risk", CALIFORNIA)

        assert sql.endswith("LIMIT 50")

    def test_generate_sql_every_registered_pattern_fully_substituted(self, pattern_library, healthcare_registry):
        # Act & Assert
        for pattern_id in healthcare_registry.ids():
            sql = pattern_library.generate_sql(pattern_id, CALIFORNIA)
            assert find_placeholders(sql) == [], pattern_id


class TestBindSql:
    def test_bind_sql_returns_markers_and_values(self, pattern_library):
        # Arrange
        parameters = {"geography_type": "state", "geography_codes": ["California", "Texas"]}

        # Act
        bound = pattern_library.bind_sql("medicare_basic_eligibility", parameters)

        # Assert
        assert "state IN (?, ?)" in bound.sql
        assert "California" not in bound.sql
        assert bound.parameters.count("state") == 3
        assert bound.parameters[:3] == ["state", "California", "Texas"]
        assert bound.sql.endswith("LIMIT 1000")

    def test_bind_sql_validates_before_binding(self, pattern_library):
        with pytest.raises(ParameterValidationError):
            pattern_library.bind_sql("medicare_basic_eligibility", {"geography_type": "state"})


class TestValidateParameters:
    def test_validate_parameters_reports_without_raising(self, pattern_library):
        result = pattern_library.validate_parameters("facility_adequacy_basic", {"geography_type": "state"})

        assert result.valid is False
        assert result.errors == ["Required parameter missing: geography_codes"]

    def test_validate_parameters_unknown_pattern_raises(self, pattern_library):
        with pytest.raises(PatternNotFoundError):
            pattern_library.validate_parameters("unknown_pattern", {})


class TestExecutionEstimate:
    def test_estimate_adds_per_geography_cost(self, pattern_library):
        # medicare_basic_eligibility base estimate is 150ms
        parameters = {"geography_type": "state", "geography_codes": ["California", "Texas", "Iowa"]}

        assert pattern_library.get_execution_estimate("medicare_basic_eligibility", parameters) == 180

    def test_estimate_without_codes_returns_base(self, pattern_library):
        assert pattern_library.get_execution_estimate("medicare_basic_eligibility", {}) == 150

    def test_estimate_scalar_codes_not_counted(self, pattern_library):
        parameters = {"geography_codes": "California"}

        assert pattern_library.get_execution_estimate("medicare_basic_eligibility", parameters) == 150

    def test_estimate_capped_at_maximum(self, pattern_library):
        parameters = {"geography_codes": [f"county_{i}" for i in range(500)]}

        assert pattern_library.get_execution_estimate("medicare_basic_eligibility", parameters) == 2000

    def test_estimate_unknown_pattern_raises(self, pattern_library):
        with pytest.raises(PatternNotFoundError):
            pattern_library.get_execution_estimate("unknown_pattern", {})


class TestDescribePatterns:
    def test_describe_patterns_lists_every_pattern_without_sql(self, pattern_library, healthcare_registry):
        # Act
        summaries = pattern_library.describe_patterns()

        # Assert
        assert [s.id for s in summaries] == healthcare_registry.ids()
        assert all(isinstance(s, PatternSummary) for s in summaries)
        assert all(s.template is None for s in summaries)

    def test_describe_patterns_category_filter_and_sql(self, pattern_library):
        # Act
        summaries = pattern_library.describe_patterns(category="medicare", include_sql=True)

        # Assert
        assert {s.category for s in summaries} == {"medicare"}
        assert len(summaries) == 4
        assert all(":geography_codes" in s.template for s in summaries)

    def test_describe_patterns_parameter_summaries(self, pattern_library):
        summary = next(s for s in pattern_library.describe_patterns() if s.id == "population_health_basic_risk")

        params = {p.name: (p.type, p.required) for p in summary.parameters}
        assert params["geography_codes"] == ("array", True)
        assert params["risk_factors"] == ("array", False)
        assert summary.optimization_hints == ["add_limit", "force_index_scan"]


class TestDefaultLibrary:
    def test_get_pattern_library_is_cached(self):
        first = get_pattern_library()

        assert get_pattern_library() is first
        assert "medicare_basic_eligibility" in first.registry

    def test_reset_pattern_library_builds_new_instance(self):
        # Arrange
        first = get_pattern_library()

        # Act
        reset_pattern_library()

        # Assert
        assert get_pattern_library() is not first
