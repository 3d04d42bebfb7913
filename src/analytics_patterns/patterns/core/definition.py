"""
Baseline healthcare patterns.

The first provider loaded. The medicare, population_health and
facility_adequacy providers register richer versions of four of these ids and
replace them; healthcare_dashboard_composite is only defined here.
"""

from analytics_patterns.core.pattern import Pattern, geography_parameters

# Baseline templates match every row for geography_type = 'county'
_GEOGRAPHY_FILTER = "(:geography_type = 'state' AND state IN (:geography_codes) OR :geography_type = 'county')"

MEDICARE_BASIC_ELIGIBILITY_SQL = f"""
    SELECT
      county,
      state,
      population_total,
      population_65_plus,
      ROUND(100.0 * population_65_plus / NULLIF(population_total, 0), 2) as medicare_eligible_rate,
      CASE
        WHEN population_65_plus / NULLIF(population_total, 0) > 0.20 THEN 'High Senior Population'
        WHEN population_65_plus / NULLIF(population_total, 0) > 0.15 THEN 'Moderate Senior Population'
        ELSE 'Low Senior Population'
      END as senior_population_category,
      population_65_plus as estimated_medicare_beneficiaries
    FROM demographics
    WHERE population_total > 0
      AND {_GEOGRAPHY_FILTER}
    ORDER BY medicare_eligible_rate DESC
"""

MEDICARE_ADVANTAGE_OPPORTUNITY_SQL = f"""
    WITH medicare_metrics AS (
      SELECT
        county, state,
        population_total,
        population_65_plus,
        median_household_income,
        ROUND(100.0 * population_65_plus / NULLIF(population_total, 0), 2) as medicare_eligible_rate,
        -- MA penetration estimated from income and geography
        CASE
          WHEN median_household_income > 60000 AND state IN ('California', 'Florida', 'New York') THEN 0.45
          WHEN median_household_income > 50000 THEN 0.35
          ELSE 0.25
        END as estimated_ma_penetration,
        population_65_plus * 0.35 as current_ma_estimate
      FROM demographics
      WHERE population_total > 0 AND population_65_plus > 1000
    )
    SELECT
      county, state,
      population_65_plus as eligible_population,
      medicare_eligible_rate,
      estimated_ma_penetration * 100 as ma_penetration_pct,
      ROUND(current_ma_estimate) as estimated_current_ma_enrollment,
      ROUND(population_65_plus * (0.50 - estimated_ma_penetration)) as growth_opportunity,
      CASE
        WHEN estimated_ma_penetration < 0.30 THEN 'High Growth Potential'
        WHEN estimated_ma_penetration < 0.40 THEN 'Moderate Growth Potential'
        ELSE 'Saturated Market'
      END as opportunity_rating,
      median_household_income
    FROM medicare_metrics
    WHERE {_GEOGRAPHY_FILTER}
    ORDER BY growth_opportunity DESC
"""

POPULATION_HEALTH_BASIC_RISK_SQL = f"""
    WITH risk_factors AS (
      SELECT
        county, state,
        population_total,
        population_65_plus,
        median_household_income,
        CASE
          WHEN median_household_income < 35000 THEN 4
          WHEN median_household_income < 45000 THEN 3
          WHEN median_household_income < 65000 THEN 2
          ELSE 1
        END as income_risk_score,
        CASE
          WHEN population_65_plus / NULLIF(population_total, 0) > 0.25 THEN 3
          WHEN population_65_plus / NULLIF(population_total, 0) > 0.18 THEN 2
          ELSE 1
        END as age_risk_score,
        CASE
          WHEN population_total < 25000 THEN 2
          ELSE 1
        END as density_risk_score
      FROM demographics
      WHERE population_total > 0
    ),
    risk_analysis AS (
      SELECT *,
        (income_risk_score + age_risk_score + density_risk_score) as composite_risk_score
      FROM risk_factors
    )
    SELECT
      county, state,
      population_total,
      median_household_income,
      ROUND(100.0 * population_65_plus / population_total, 1) as senior_population_pct,
      income_risk_score,
      age_risk_score,
      density_risk_score,
      composite_risk_score,
      CASE
        WHEN composite_risk_score >= 8 THEN 'Very High Risk'
        WHEN composite_risk_score >= 6 THEN 'High Risk'
        WHEN composite_risk_score >= 4 THEN 'Moderate Risk'
        ELSE 'Low Risk'
      END as risk_category,
      composite_risk_score * population_total / 10000 as intervention_priority_score
    FROM risk_analysis
    WHERE {_GEOGRAPHY_FILTER}
    ORDER BY composite_risk_score DESC, population_total DESC
"""

FACILITY_ADEQUACY_BASIC_SQL = f"""
    WITH facility_metrics AS (
      SELECT
        county, state,
        population_total,
        population_65_plus,
        median_household_income,
        ROUND(population_total / 8000.0) as estimated_needed_facilities,
        ROUND(population_total / 12000.0) as estimated_current_facilities,
        ROUND(population_total / 10000.0, 2) as facilities_per_10k_estimate
      FROM demographics
      WHERE population_total > 0
    )
    SELECT
      county, state,
      population_total,
      population_65_plus,
      estimated_current_facilities as facilities_count,
      facilities_per_10k_estimate as facilities_per_10k,
      estimated_needed_facilities - estimated_current_facilities as facility_gap,
      CASE
        WHEN facilities_per_10k_estimate < 0.8 THEN 'Severely Underserved'
        WHEN facilities_per_10k_estimate < 1.2 THEN 'Underserved'
        WHEN facilities_per_10k_estimate > 2.0 THEN 'Well Served'
        ELSE 'Adequately Served'
      END as adequacy_rating,
      CASE
        WHEN facilities_per_10k_estimate < 0.8 THEN population_total / 1000
        WHEN facilities_per_10k_estimate < 1.2 THEN population_total / 2000
        ELSE 0
      END as development_priority_score,
      median_household_income
    FROM facility_metrics
    WHERE {_GEOGRAPHY_FILTER}
    ORDER BY development_priority_score DESC, facilities_per_10k ASC
"""

DASHBOARD_COMPOSITE_SQL = f"""
    WITH comprehensive_metrics AS (
      SELECT
        county, state,
        population_total,
        population_65_plus,
        median_household_income,
        ROUND(100.0 * population_65_plus / NULLIF(population_total, 0), 2) as medicare_eligible_rate,
        CASE
          WHEN median_household_income < 40000 THEN 3
          WHEN median_household_income < 60000 THEN 2
          ELSE 1
        END as income_risk_score,
        ROUND(population_total / 10000.0, 2) as facilities_per_10k_estimate,
        ROUND((
          (CASE WHEN median_household_income < 40000 THEN 3 ELSE 1 END) +
          (CASE WHEN population_65_plus / NULLIF(population_total, 0) > 0.20 THEN 2 ELSE 1 END) +
          (CASE WHEN population_total / 10000.0 < 1.0 THEN 2 ELSE 1 END)
        ) / 3.0, 1) as composite_health_index
      FROM demographics
      WHERE population_total > 0
    )
    SELECT
      county, state,
      population_total,
      population_65_plus,
      medicare_eligible_rate,
      income_risk_score,
      facilities_per_10k_estimate,
      composite_health_index,
      CASE
        WHEN composite_health_index >= 2.5 THEN 'High Need'
        WHEN composite_health_index >= 2.0 THEN 'Moderate Need'
        ELSE 'Low Need'
      END as overall_need_category,
      median_household_income
    FROM comprehensive_metrics
    WHERE {_GEOGRAPHY_FILTER}
    ORDER BY composite_health_index DESC
"""


def get_patterns() -> list[Pattern]:
    return [
        Pattern(
            id="medicare_basic_eligibility",
            name="Basic Medicare Eligibility Analysis",
            description="Calculate Medicare eligibility rates by county with senior population categorization",
            category="medicare",
            template=MEDICARE_BASIC_ELIGIBILITY_SQL,
            parameters=geography_parameters(),
            estimated_execution_ms=150,
            optimization_hints=("add_limit", "force_index_scan"),
        ),
        Pattern(
            id="medicare_advantage_opportunity",
            name="Medicare Advantage Market Opportunity",
            description="Analyze Medicare Advantage penetration opportunities with market gap analysis",
            category="medicare",
            template=MEDICARE_ADVANTAGE_OPPORTUNITY_SQL,
            parameters=geography_parameters(),
            estimated_execution_ms=300,
            optimization_hints=("add_limit",),
        ),
        Pattern(
            id="population_health_basic_risk",
            name="Basic Population Health Risk Assessment",
            description="Multi-factor risk scoring based on demographics and socioeconomic indicators",
            category="population_health",
            template=POPULATION_HEALTH_BASIC_RISK_SQL,
            parameters=geography_parameters(risk_factors="array"),
            estimated_execution_ms=250,
            optimization_hints=("add_limit",),
        ),
        Pattern(
            id="facility_adequacy_basic",
            name="Basic Healthcare Facility Adequacy",
            description="Assess healthcare facility adequacy using population-based ratios",
            category="facility_adequacy",
            template=FACILITY_ADEQUACY_BASIC_SQL,
            parameters=geography_parameters(facility_type="string"),
            estimated_execution_ms=200,
            optimization_hints=("add_limit",),
        ),
        Pattern(
            id="healthcare_dashboard_composite",
            name="Healthcare Dashboard Composite View",
            description="Comprehensive healthcare metrics combining Medicare, risk, and facility data",
            category="demographics",
            template=DASHBOARD_COMPOSITE_SQL,
            parameters=geography_parameters(),
            estimated_execution_ms=350,
            optimization_hints=("add_limit", "force_index_scan"),
        ),
    ]
