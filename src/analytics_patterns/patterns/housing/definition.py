"""Housing domain: affordability and market dynamics."""

from analytics_patterns.core.domain import DomainConfiguration, DomainDefinition, DomainPattern

HOUSING_AFFORDABILITY_SQL = """
    SELECT
      county, state,
      median_home_value, median_rent, median_household_income,
      homeownership_rate, housing_units, vacant_units,
      ROUND(median_home_value::float / median_household_income, 2) as price_to_income_ratio,
      ROUND(median_rent * 12::float / median_household_income * 100, 2) as rent_burden_pct,
      ROUND(vacant_units::float / housing_units * 100, 2) as vacancy_rate,
      CASE
        WHEN price_to_income_ratio <= 3.0 THEN 'Affordable'
        WHEN price_to_income_ratio <= 5.0 THEN 'Moderately Affordable'
        WHEN price_to_income_ratio <= 7.0 THEN 'Less Affordable'
        ELSE 'Least Affordable'
      END as affordability_category
    FROM housing_data
    WHERE county IN ({geography})
      AND year = {year}
    ORDER BY price_to_income_ratio DESC
"""


def get_domain() -> DomainDefinition:
    return DomainDefinition(
        name="housing",
        patterns=(
            DomainPattern(
                name="housing_affordability_analysis",
                domain="housing",
                description="Housing affordability and market dynamics",
                intent="housing_analytics",
                template=HOUSING_AFFORDABILITY_SQL,
                parameters=("geography", "year"),
                geography_types=("county", "metro", "state"),
                metrics=("home_values", "affordability", "rental_market"),
                complexity="medium",
                estimated_execution_ms=550,
            ),
        ),
        configuration=DomainConfiguration(
            domain="housing",
            primary_data_source="department_of_housing",
            fallback_sources=("census_bureau", "real_estate_agencies"),
            common_geographies=("county", "metro_area", "state"),
            standard_metrics=("home_values", "rental_rates", "affordability_index", "housing_supply"),
            temporal_granularity="monthly",
        ),
    )
