"""
Comprehensive composite pattern.

Joins Medicare demand, health risk and facility adequacy metrics per county
into a single 0-10 healthcare index plus a recommendation.
"""

from analytics_patterns.core.pattern import Pattern, geography_parameters

# Shared by the index column and the market category thresholds
_HEALTHCARE_INDEX = """ROUND(
        (medicare_demand_score / 4.0) * 2.0 +
        ((13 - composite_health_risk_score) / 12.0) * 3.0 +
        (facility_adequacy_score / 2.0) * 5.0,
        1
      )"""

COMPREHENSIVE_COMPOSITE_SQL = f"""
    WITH medicare_metrics AS (
      SELECT
        county, state,
        population_total,
        population_65_plus,
        median_household_income,
        ROUND(100.0 * population_65_plus / NULLIF(population_total, 0), 2) as medicare_eligible_rate,
        population_65_plus * 0.35 as estimated_ma_opportunity,
        CASE
          WHEN population_65_plus / NULLIF(population_total, 0) > 0.20 THEN 4
          WHEN population_65_plus / NULLIF(population_total, 0) > 0.15 THEN 3
          WHEN population_65_plus / NULLIF(population_total, 0) > 0.12 THEN 2
          ELSE 1
        END as medicare_demand_score
      FROM demographics
      WHERE population_total > 0
    ),
    health_risk_metrics AS (
      SELECT
        county, state,
        CASE
          WHEN median_household_income < 30000 THEN 5
          WHEN median_household_income < 45000 THEN 4
          WHEN median_household_income < 60000 THEN 3
          WHEN median_household_income < 80000 THEN 2
          ELSE 1
        END as income_health_risk_score,
        CASE
          WHEN population_65_plus / NULLIF(population_total, 0) > 0.25 THEN 4
          WHEN population_65_plus / NULLIF(population_total, 0) > 0.20 THEN 3
          WHEN population_65_plus / NULLIF(population_total, 0) > 0.15 THEN 2
          ELSE 1
        END as age_health_risk_score,
        CASE
          WHEN population_total < 15000 THEN 3  -- Rural access
          WHEN population_total > 500000 THEN 2  -- Urban density
          ELSE 1
        END as density_health_risk_score,
        ROUND(population_65_plus * 0.45) as estimated_chronic_disease_population
      FROM demographics
      WHERE population_total > 0
    ),
    facility_adequacy_metrics AS (
      SELECT
        county, state,
        ROUND(population_total / 3500.0, 2) as needed_primary_care_ratio,
        ROUND(population_total / 5000.0, 2) as estimated_current_primary_care_ratio,
        CASE
          WHEN population_total < 50000 THEN ROUND(population_total / 8000.0, 2)
          ELSE ROUND(population_total / 12000.0, 2)
        END as needed_hospital_ratio,
        ROUND(population_total / 15000.0, 2) as estimated_current_hospital_ratio,
        ROUND(population_total / 15000.0, 2) as needed_specialist_ratio,
        ROUND(population_total / 25000.0, 2) as estimated_current_specialist_ratio
      FROM demographics
      WHERE population_total > 0
    ),
    composite_calculation AS (
      SELECT
        mm.county, mm.state,
        mm.population_total,
        mm.population_65_plus,
        mm.median_household_income,
        mm.medicare_eligible_rate,
        mm.medicare_demand_score,
        mm.estimated_ma_opportunity,
        hrm.income_health_risk_score,
        hrm.age_health_risk_score,
        hrm.density_health_risk_score,
        (hrm.income_health_risk_score + hrm.age_health_risk_score + hrm.density_health_risk_score) as composite_health_risk_score,
        hrm.estimated_chronic_disease_population,
        fam.needed_primary_care_ratio,
        fam.estimated_current_primary_care_ratio,
        fam.needed_primary_care_ratio - fam.estimated_current_primary_care_ratio as primary_care_gap,
        fam.needed_hospital_ratio,
        fam.estimated_current_hospital_ratio,
        fam.needed_hospital_ratio - fam.estimated_current_hospital_ratio as hospital_gap,
        fam.needed_specialist_ratio,
        fam.estimated_current_specialist_ratio,
        fam.needed_specialist_ratio - fam.estimated_current_specialist_ratio as specialist_gap,
        -- Higher is better
        ROUND(
          GREATEST(0, 2 - (fam.needed_primary_care_ratio - fam.estimated_current_primary_care_ratio)) * 0.4 +
          GREATEST(0, 2 - (fam.needed_hospital_ratio - fam.estimated_current_hospital_ratio)) * 0.3 +
          GREATEST(0, 2 - (fam.needed_specialist_ratio - fam.estimated_current_specialist_ratio)) * 0.3,
          2
        ) as facility_adequacy_score
      FROM medicare_metrics mm
      LEFT JOIN health_risk_metrics hrm ON mm.county = hrm.county AND mm.state = hrm.state
      LEFT JOIN facility_adequacy_metrics fam ON mm.county = fam.county AND mm.state = fam.state
    )
    SELECT
      county, state,
      population_total,
      population_65_plus,
      median_household_income,
      medicare_eligible_rate,
      medicare_demand_score,
      ROUND(estimated_ma_opportunity) as medicare_advantage_opportunity,
      composite_health_risk_score,
      CASE
        WHEN composite_health_risk_score >= 12 THEN 'Very High Health Risk'
        WHEN composite_health_risk_score >= 9 THEN 'High Health Risk'
        WHEN composite_health_risk_score >= 6 THEN 'Moderate Health Risk'
        ELSE 'Low Health Risk'
      END as health_risk_category,
      ROUND(estimated_chronic_disease_population) as estimated_chronic_disease_cases,
      facility_adequacy_score,
      ROUND(primary_care_gap, 2) as primary_care_provider_gap,
      ROUND(hospital_gap, 2) as hospital_facility_gap,
      ROUND(specialist_gap, 2) as specialist_provider_gap,
      CASE
        WHEN facility_adequacy_score >= 1.5 THEN 'Well Served'
        WHEN facility_adequacy_score >= 1.0 THEN 'Adequately Served'
        WHEN facility_adequacy_score >= 0.7 THEN 'Underserved'
        ELSE 'Significantly Underserved'
      END as facility_adequacy_rating,
      -- 0-10 scale: Medicare demand 20%, inverted health risk 30%, facility adequacy 50%
      {_HEALTHCARE_INDEX} as comprehensive_healthcare_index,
      CASE
        WHEN {_HEALTHCARE_INDEX} >= 8.0 THEN 'Excellent Healthcare Market'
        WHEN {_HEALTHCARE_INDEX} >= 6.5 THEN 'Strong Healthcare Market'
        WHEN {_HEALTHCARE_INDEX} >= 5.0 THEN 'Moderate Healthcare Market'
        WHEN {_HEALTHCARE_INDEX} >= 3.5 THEN 'Challenging Healthcare Market'
        ELSE 'High-Need Healthcare Market'
      END as healthcare_market_category,
      ROUND(
        composite_health_risk_score * 0.3 +
        (4 - facility_adequacy_score) * 0.4 +
        (medicare_demand_score) * 0.2 +
        LOG(population_total + 1) / 10 * 0.1
      ) as healthcare_investment_priority_score,
      CASE
        WHEN primary_care_gap > 0.5 AND composite_health_risk_score >= 9 THEN 'Priority: Primary Care Expansion'
        WHEN hospital_gap > 0.3 AND medicare_demand_score >= 3 THEN 'Priority: Hospital Services Development'
        WHEN specialist_gap > 0.4 AND estimated_chronic_disease_population > 1000 THEN 'Priority: Specialty Care Access'
        WHEN composite_health_risk_score >= 10 THEN 'Priority: Community Health Programs'
        WHEN medicare_demand_score >= 3 AND facility_adequacy_score >= 1.2 THEN 'Opportunity: Medicare Advantage Growth'
        ELSE 'Standard: Maintain Current Service Levels'
      END as primary_healthcare_recommendation
    FROM composite_calculation
    WHERE (
      (:geography_type = 'state' AND state IN (:geography_codes)) OR
      (:geography_type = 'county' AND county IN (:geography_codes)) OR
      (:geography_type = 'all')
    )
    ORDER BY comprehensive_healthcare_index DESC, healthcare_investment_priority_score DESC
"""


def get_patterns() -> list[Pattern]:
    return [
        Pattern(
            id="healthcare_comprehensive_composite",
            name="Comprehensive Healthcare Indicator Composite Analysis",
            description=(
                "Multi-dimensional healthcare analysis combining Medicare, population health, "
                "and facility adequacy metrics"
            ),
            category="demographics",
            template=COMPREHENSIVE_COMPOSITE_SQL,
            parameters=geography_parameters(focus_area="string"),
            estimated_execution_ms=600,
            optimization_hints=("add_limit", "force_index_scan"),
        ),
    ]
