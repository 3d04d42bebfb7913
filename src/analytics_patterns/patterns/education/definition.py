"""Education domain: district performance, attainment and funding equity."""

from analytics_patterns.core.domain import DomainConfiguration, DomainDefinition, DomainPattern, SelectionRule

SCHOOL_DISTRICT_PERFORMANCE_SQL = """
    SELECT
      district_name, county, state,
      total_students, graduation_rate, test_scores_math, test_scores_reading,
      per_pupil_spending, teacher_student_ratio,
      ROUND(graduation_rate, 2) as grad_rate_pct,
      CASE
        WHEN graduation_rate >= 90 THEN 'Excellent'
        WHEN graduation_rate >= 80 THEN 'Good'
        WHEN graduation_rate >= 70 THEN 'Fair'
        ELSE 'Needs Improvement'
      END as performance_tier
    FROM education_districts
    WHERE county IN ({geography})
      AND school_year = {year}
    ORDER BY graduation_rate DESC, test_scores_math DESC
"""

EDUCATIONAL_ATTAINMENT_SQL = """
    SELECT
      county, state,
      total_population_25_plus,
      less_than_high_school, high_school_graduate, some_college,
      associates_degree, bachelors_degree, graduate_degree,
      ROUND((bachelors_degree + graduate_degree)::float / total_population_25_plus * 100, 2) as college_plus_rate,
      ROUND(high_school_graduate::float / total_population_25_plus * 100, 2) as hs_completion_rate
    FROM educational_attainment
    WHERE county IN ({geography})
      AND year = {year}
    ORDER BY college_plus_rate DESC
"""

FUNDING_EQUITY_SQL = """
    SELECT
      state,
      AVG(per_pupil_spending) as avg_spending,
      STDDEV(per_pupil_spending) as spending_variation,
      MIN(per_pupil_spending) as min_spending,
      MAX(per_pupil_spending) as max_spending,
      MAX(per_pupil_spending) - MIN(per_pupil_spending) as spending_gap,
      ROUND(AVG(free_reduced_lunch_pct), 2) as avg_poverty_rate
    FROM education_districts
    WHERE state IN ({geography})
      AND school_year = {year}
    GROUP BY state
    HAVING COUNT(*) >= 10  -- States with at least 10 districts
    ORDER BY spending_gap DESC
"""


def get_domain() -> DomainDefinition:
    return DomainDefinition(
        name="education",
        patterns=(
            DomainPattern(
                name="school_district_performance",
                domain="education",
                description="Analyze school district academic performance metrics",
                intent="education_analytics",
                template=SCHOOL_DISTRICT_PERFORMANCE_SQL,
                parameters=("geography", "year"),
                geography_types=("county", "state", "district"),
                metrics=("graduation_rate", "test_scores", "per_pupil_spending", "teacher_ratio"),
                complexity="medium",
                estimated_execution_ms=800,
            ),
            DomainPattern(
                name="educational_attainment_demographics",
                domain="education",
                description="Population educational attainment analysis",
                intent="education_demographics",
                template=EDUCATIONAL_ATTAINMENT_SQL,
                parameters=("geography", "year"),
                geography_types=("county", "state", "metro"),
                metrics=("educational_attainment", "college_completion", "high_school_completion"),
                complexity="simple",
                estimated_execution_ms=400,
            ),
            DomainPattern(
                name="school_funding_equity_analysis",
                domain="education",
                description="Analyze funding equity across school districts",
                intent="education_analytics",
                template=FUNDING_EQUITY_SQL,
                parameters=("geography", "year"),
                geography_types=("state", "region"),
                metrics=("funding_equity", "per_pupil_spending", "poverty_rates"),
                complexity="complex",
                estimated_execution_ms=1200,
            ),
        ),
        selection_rules=(
            SelectionRule(("school", "graduation", "performance"), "school_district_performance"),
            SelectionRule(("college", "degree", "attainment"), "educational_attainment_demographics"),
            SelectionRule(("funding", "equity", "spending"), "school_funding_equity_analysis"),
        ),
        configuration=DomainConfiguration(
            domain="education",
            primary_data_source="department_of_education",
            fallback_sources=("census_bureau", "state_education_agencies"),
            common_geographies=("county", "school_district", "state"),
            standard_metrics=("graduation_rate", "test_scores", "per_pupil_spending", "enrollment"),
            temporal_granularity="yearly",
        ),
    )
