"""Economics domain. A single pattern, so every question selects it."""

from analytics_patterns.core.domain import DomainConfiguration, DomainDefinition, DomainPattern

REGIONAL_ECONOMIC_INDICATORS_SQL = """
    SELECT
      county, state,
      gdp_per_capita, median_household_income, unemployment_rate,
      job_growth_rate, business_establishments, labor_force_participation,
      cost_of_living_index, housing_cost_burden,
      ROUND(gdp_per_capita / (median_household_income / 12), 2) as gdp_to_income_ratio,
      CASE
        WHEN unemployment_rate <= 3.5 THEN 'Very Low'
        WHEN unemployment_rate <= 5.0 THEN 'Low'
        WHEN unemployment_rate <= 7.0 THEN 'Moderate'
        ELSE 'High'
      END as unemployment_category
    FROM economic_indicators
    WHERE county IN ({geography})
      AND year = {year}
    ORDER BY gdp_per_capita DESC, unemployment_rate ASC
"""


def get_domain() -> DomainDefinition:
    return DomainDefinition(
        name="economics",
        patterns=(
            DomainPattern(
                name="regional_economic_indicators",
                domain="economics",
                description="Regional economic performance and growth indicators",
                intent="economic_analytics",
                template=REGIONAL_ECONOMIC_INDICATORS_SQL,
                parameters=("geography", "year"),
                geography_types=("county", "metro", "state"),
                metrics=("gdp_per_capita", "employment", "business_growth"),
                complexity="medium",
                estimated_execution_ms=650,
            ),
        ),
        configuration=DomainConfiguration(
            domain="economics",
            primary_data_source="bureau_of_economic_analysis",
            fallback_sources=("bureau_of_labor_statistics", "census_bureau"),
            common_geographies=("county", "metro_area", "state"),
            standard_metrics=("gdp_per_capita", "employment_rate", "income", "business_growth"),
            temporal_granularity="monthly",
        ),
    )
