"""Tests for the generic domain providers (education, transportation, ...)."""

import pytest

from analytics_patterns.core.domain import GENERIC_PROVIDERS, MARKER_PATTERN, load_domain_definition

DEFINITIONS = [pytest.param(load_domain_definition(name), id=name) for name in GENERIC_PROVIDERS]


@pytest.mark.parametrize("provider", GENERIC_PROVIDERS)
def test_provider_domain_name_matches_module(provider):
    definition = load_domain_definition(provider)

    assert definition.name == provider
    assert definition.configuration.domain == provider
    assert all(p.domain == provider for p in definition.patterns)


@pytest.mark.parametrize("definition", DEFINITIONS)
def test_selection_rules_target_declared_patterns(definition):
    names = {p.name for p in definition.patterns}

    assert all(rule.pattern_name in names for rule in definition.selection_rules)


@pytest.mark.parametrize("definition", DEFINITIONS)
def test_template_markers_match_declared_parameters(definition):
    for pattern in definition.patterns:
        # Act
        markers = {m.group(1) for m in MARKER_PATTERN.finditer(pattern.template)}

        # Assert
        assert markers == set(pattern.parameters), pattern.name


@pytest.mark.parametrize("definition", DEFINITIONS)
def test_templates_do_not_use_colon_placeholders(definition):
    for pattern in definition.patterns:
        assert ":geography" not in pattern.template


def test_only_environment_derives_date_range():
    derived = [name for name in GENERIC_PROVIDERS if load_domain_definition(name).derives_date_range]

    assert derived == ["environment"]


@pytest.mark.parametrize(
    ("provider", "granularity"),
    [
        ("education", "yearly"),
        ("transportation", "yearly"),
        ("environment", "daily"),
        ("economics", "monthly"),
        ("housing", "monthly"),
    ],
)
def test_temporal_granularity(provider, granularity):
    assert load_domain_definition(provider).configuration.temporal_granularity == granularity
