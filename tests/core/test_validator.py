"""Tests for parameter validation."""

from analytics_patterns.core.pattern import ParameterSpec, geography_parameters
from analytics_patterns.core.validator import validate_parameters


class TestValidateParameters:
    """Test suite for validate_parameters()."""

    def test_validate_parameters_complete_set_is_valid(self):
        # Arrange
        spec = geography_parameters()

        # Act
        result = validate_parameters(spec, {"geography_type": "state", "geography_codes": ["California"]})

        # Assert
        assert result.valid is True
        assert result.errors == []

    def test_validate_parameters_missing_required_reports_each_in_declaration_order(self):
        # Arrange
        spec = geography_parameters()

        # Act
        result = validate_parameters(spec, {})

        # Assert
        assert result.valid is False
        assert result.errors == [
            "Required parameter missing: geography_type",
            "Required parameter missing: geography_codes",
        ]

    def test_validate_parameters_none_counts_as_missing(self):
        spec = {"geography_type": ParameterSpec(type="string", required=True)}

        result = validate_parameters(spec, {"geography_type": None})

        assert result.errors == ["Required parameter missing: geography_type"]

    def test_validate_parameters_falsy_values_count_as_present(self):
        # Arrange: empty string, zero and empty list are supplied values
        spec = {
            "name": ParameterSpec(type="string", required=True),
            "count": ParameterSpec(type="number", required=True),
            "codes": ParameterSpec(type="array", required=True),
        }

        # Act
        result = validate_parameters(spec, {"name": "", "count": 0, "codes": []})

        # Assert
        assert result.valid is True

    def test_validate_parameters_array_given_scalar_reports_shape_error(self):
        # Arrange
        spec = geography_parameters()

        # Act
        result = validate_parameters(spec, {"geography_type": "state", "geography_codes": "California"})

        # Assert
        assert result.errors == ["Parameter geography_codes must be an array"]

    def test_validate_parameters_tuple_accepted_as_array(self):
        spec = geography_parameters()

        result = validate_parameters(spec, {"geography_type": "state", "geography_codes": ("Texas",)})

        assert result.valid is True

    def test_validate_parameters_optional_array_checked_only_when_present(self):
        # Arrange
        spec = geography_parameters(risk_factors="array")
        base = {"geography_type": "state", "geography_codes": ["Texas"]}

        # Act
        absent = validate_parameters(spec, base)
        wrong_shape = validate_parameters(spec, {**base, "risk_factors": "income"})

        # Assert
        assert absent.valid is True
        assert wrong_shape.errors == ["Parameter risk_factors must be an array"]

    def test_validate_parameters_number_and_string_types_are_permissive(self):
        spec = {
            "focus_quintile": ParameterSpec(type="number"),
            "focus_area": ParameterSpec(type="string"),
        }

        result = validate_parameters(spec, {"focus_quintile": "two", "focus_area": 7})

        assert result.valid is True

    def test_validate_parameters_undeclared_parameters_ignored(self):
        spec = geography_parameters()

        result = validate_parameters(
            spec, {"geography_type": "all", "geography_codes": [], "unexpected": {"nested": True}}
        )

        assert result.valid is True
