"""
Environment domain: air quality, climate resilience and water systems.

Air quality readings are daily, so this domain fills {start_date} and
{end_date} with the first and last day of the requested year.
"""

from analytics_patterns.core.domain import DomainConfiguration, DomainDefinition, DomainPattern, SelectionRule

AIR_QUALITY_SQL = """
    SELECT
      county, state, monitoring_date,
      aqi_value, primary_pollutant, pm25_concentration, ozone_concentration,
      CASE
        WHEN aqi_value <= 50 THEN 'Good'
        WHEN aqi_value <= 100 THEN 'Moderate'
        WHEN aqi_value <= 150 THEN 'Unhealthy for Sensitive Groups'
        WHEN aqi_value <= 200 THEN 'Unhealthy'
        WHEN aqi_value <= 300 THEN 'Very Unhealthy'
        ELSE 'Hazardous'
      END as air_quality_category,
      ROUND(AVG(aqi_value) OVER (
        PARTITION BY county, state
        ORDER BY monitoring_date
        ROWS BETWEEN 6 PRECEDING AND CURRENT ROW
      ), 2) as seven_day_avg_aqi
    FROM air_quality_data
    WHERE county IN ({geography})
      AND monitoring_date BETWEEN {start_date} AND {end_date}
    ORDER BY monitoring_date DESC, aqi_value DESC
"""

CLIMATE_RESILIENCE_SQL = """
    SELECT
      county, state,
      avg_temperature, precipitation_annual, extreme_weather_events,
      flood_risk_score, wildfire_risk_score, drought_risk_score,
      green_infrastructure_score, renewable_energy_adoption,
      (flood_risk_score + wildfire_risk_score + drought_risk_score) / 3 as composite_risk_score,
      CASE
        WHEN green_infrastructure_score >= 80 THEN 'High Resilience'
        WHEN green_infrastructure_score >= 60 THEN 'Medium Resilience'
        WHEN green_infrastructure_score >= 40 THEN 'Low Resilience'
        ELSE 'Very Low Resilience'
      END as resilience_category
    FROM climate_data
    WHERE county IN ({geography})
      AND year = {year}
    ORDER BY composite_risk_score DESC, green_infrastructure_score ASC
"""

WATER_QUALITY_SQL = """
    SELECT
      watershed, county, state,
      water_availability_index, groundwater_level, surface_water_quality,
      contamination_incidents, treatment_plant_capacity,
      population_served, per_capita_water_use,
      ROUND(treatment_plant_capacity::float / population_served, 2) as treatment_capacity_per_person,
      CASE
        WHEN surface_water_quality >= 85 THEN 'Excellent'
        WHEN surface_water_quality >= 70 THEN 'Good'
        WHEN surface_water_quality >= 55 THEN 'Fair'
        ELSE 'Poor'
      END as water_quality_grade
    FROM water_systems
    WHERE county IN ({geography})
      AND assessment_year = {year}
    ORDER BY water_availability_index DESC, surface_water_quality DESC
"""


def get_domain() -> DomainDefinition:
    return DomainDefinition(
        name="environment",
        patterns=(
            DomainPattern(
                name="air_quality_monitoring",
                domain="environment",
                description="Air quality index and pollution monitoring",
                intent="environmental_analytics",
                template=AIR_QUALITY_SQL,
                parameters=("geography", "start_date", "end_date"),
                geography_types=("county", "metro", "state"),
                metrics=("air_quality_index", "pollutant_levels", "health_impact"),
                complexity="medium",
                estimated_execution_ms=800,
            ),
            DomainPattern(
                name="climate_resilience_indicators",
                domain="environment",
                description="Climate change vulnerability and resilience metrics",
                intent="environmental_analytics",
                template=CLIMATE_RESILIENCE_SQL,
                parameters=("geography", "year"),
                geography_types=("county", "state", "region"),
                metrics=("climate_risk", "resilience_score", "adaptation_measures"),
                complexity="complex",
                estimated_execution_ms=1100,
            ),
            DomainPattern(
                name="water_quality_assessment",
                domain="environment",
                description="Water quality and availability assessment",
                intent="environmental_analytics",
                template=WATER_QUALITY_SQL,
                parameters=("geography", "year"),
                geography_types=("county", "watershed", "state"),
                metrics=("water_availability", "water_quality", "infrastructure_capacity"),
                complexity="medium",
                estimated_execution_ms=750,
            ),
        ),
        # "air quality" must be tested before the bare "quality" keyword
        selection_rules=(
            SelectionRule(("air quality", "pollution", "aqi"), "air_quality_monitoring"),
            SelectionRule(("climate", "resilience", "risk"), "climate_resilience_indicators"),
            SelectionRule(("water", "quality", "watershed"), "water_quality_assessment"),
        ),
        configuration=DomainConfiguration(
            domain="environment",
            primary_data_source="environmental_protection_agency",
            fallback_sources=("noaa", "usgs", "state_environmental_agencies"),
            common_geographies=("county", "watershed", "state"),
            standard_metrics=("air_quality_index", "water_quality", "climate_indicators", "emissions"),
            temporal_granularity="daily",
        ),
        derives_date_range=True,
    )
