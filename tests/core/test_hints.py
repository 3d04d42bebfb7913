"""Tests for the optimization hint pipeline."""

from analytics_patterns.core.hints import (
    KNOWN_HINTS,
    HintOptions,
    add_limit,
    apply_hints,
    force_index_scan,
    known_hints,
    optimize_joins,
)

DIRECTIVE = "/*+ INDEX(idx_demographics_geography) */"


class TestAddLimit:
    def test_add_limit_appends_default_row_limit(self):
        assert add_limit("SELECT * FROM demographics", HintOptions()) == "SELECT * FROM demographics LIMIT 1000"

    def test_add_limit_existing_limit_any_case_left_unchanged(self):
        sql = "SELECT * FROM demographics limit 5"

        assert add_limit(sql, HintOptions()) == sql

    def test_add_limit_word_inside_identifier_suppresses_limit(self):
        # Arrange: substring check, so 'Limited' counts as a limit
        sql = "SELECT 'Limited Specialty Access' AS rating FROM demographics"

        # Act
        result = add_limit(sql, HintOptions())

        # Assert
        assert result == sql

    def test_add_limit_uses_configured_row_limit(self):
        assert add_limit("SELECT 1", HintOptions(row_limit=25)) == "SELECT 1 LIMIT 25"

    def test_add_limit_is_idempotent(self):
        once = add_limit("SELECT 1", HintOptions())

        assert add_limit(once, HintOptions()) == once


class TestForceIndexScan:
    def test_force_index_scan_annotates_demographics_reference(self):
        result = force_index_scan("SELECT * FROM demographics WHERE x = 1", HintOptions())

        assert result == f"SELECT * FROM demographics {DIRECTIVE} WHERE x = 1"

    def test_force_index_scan_only_first_occurrence(self):
        # Arrange
        sql = "WITH a AS (SELECT * FROM demographics), b AS (SELECT * FROM demographics) SELECT 1"

        # Act
        result = force_index_scan(sql, HintOptions())

        # Assert
        assert result.count(DIRECTIVE) == 1
        assert result.index(DIRECTIVE) < result.index("b AS")

    def test_force_index_scan_is_idempotent(self):
        once = force_index_scan("SELECT * FROM demographics", HintOptions())

        assert force_index_scan(once, HintOptions()) == once

    def test_force_index_scan_without_table_reference_unchanged(self):
        sql = "SELECT * FROM education_districts"

        assert force_index_scan(sql, HintOptions()) == sql

    def test_force_index_scan_uses_configured_table_and_index(self):
        options = HintOptions(index_table="facilities", index_name="idx_facilities_state")

        result = force_index_scan("SELECT * FROM facilities", options)

        assert result == "SELECT * FROM facilities /*+ INDEX(idx_facilities_state) */"


class TestApplyHints:
    def test_optimize_joins_leaves_sql_unchanged(self):
        assert optimize_joins("SELECT 1", HintOptions()) == "SELECT 1"

    def test_apply_hints_unknown_hint_is_a_no_op(self):
        assert apply_hints("SELECT 1", ["parallelize_everything"]) == "SELECT 1"

    def test_apply_hints_runs_in_declared_order(self):
        # Arrange
        sql = "SELECT * FROM demographics"

        # Act
        result = apply_hints(sql, ["add_limit", "force_index_scan"])

        # Assert
        assert result == f"SELECT * FROM demographics {DIRECTIVE} LIMIT 1000"

    def test_apply_hints_empty_list_returns_input(self):
        assert apply_hints("SELECT 1", []) == "SELECT 1"

    def test_known_hints_include_built_ins(self):
        assert set(KNOWN_HINTS) <= set(known_hints())
