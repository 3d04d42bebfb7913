"""Tests for the Pattern and ParameterSpec contract."""

import dataclasses

import pytest

from analytics_patterns.core.pattern import ParameterSpec, Pattern, geography_parameters


class TestParameterSpec:
    def test_parameter_spec_rejects_unknown_type(self):
        with pytest.raises(ValueError, match="Invalid parameter type"):
            ParameterSpec(type="date")

    def test_parameter_spec_defaults_to_optional(self):
        assert ParameterSpec(type="string").required is False


class TestPattern:
    def test_pattern_rejects_unknown_category(self, make_pattern):
        with pytest.raises(ValueError, match="Invalid category"):
            make_pattern(category="education")

    def test_pattern_rejects_empty_id(self, make_pattern):
        with pytest.raises(ValueError, match="id cannot be empty"):
            make_pattern(pattern_id="")

    def test_pattern_is_immutable(self, make_pattern):
        # Arrange
        pattern = make_pattern()

        # Act & Assert
        with pytest.raises(dataclasses.FrozenInstanceError):
            pattern.template = "SELECT 1"
        with pytest.raises(TypeError):
            pattern.parameters["codes"] = ParameterSpec(type="string")

    def test_pattern_copies_caller_parameter_mapping(self, make_pattern):
        # Arrange
        parameters = {"codes": ParameterSpec(type="array", required=True)}
        pattern = make_pattern(parameters=parameters)

        # Act
        parameters["extra"] = ParameterSpec(type="string")

        # Assert
        assert "extra" not in pattern.parameters

    def test_pattern_hints_normalized_to_tuple(self, make_pattern):
        pattern = make_pattern(optimization_hints=["add_limit"])

        assert pattern.optimization_hints == ("add_limit",)

    def test_pattern_placeholders_and_required_parameters(self):
        # Arrange
        pattern = Pattern(
            id="p",
            name="P",
            description="",
            category="medicare",
            template="WHERE :geography_type = 'all' OR state IN (:geography_codes)",
            parameters=geography_parameters(year="string"),
        )

        # Act & Assert
        assert pattern.placeholders() == ["geography_type", "geography_codes"]
        assert pattern.required_parameters == ["geography_type", "geography_codes"]


class TestGeographyParameters:
    def test_geography_parameters_declares_required_pair_plus_optional_extras(self):
        # Act
        spec = geography_parameters(focus_quintile="number")

        # Assert
        assert spec["geography_type"] == ParameterSpec(type="string", required=True)
        assert spec["geography_codes"] == ParameterSpec(type="array", required=True)
        assert spec["focus_quintile"] == ParameterSpec(type="number", required=False)
