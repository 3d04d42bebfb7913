"""Transportation domain: commuting, transit access and congestion."""

from analytics_patterns.core.domain import DomainConfiguration, DomainDefinition, DomainPattern, SelectionRule

COMMUTE_PATTERNS_SQL = """
    SELECT
      county, state,
      total_commuters,
      drove_alone, carpooled, public_transportation, walked, other_means,
      worked_from_home, mean_commute_time,
      ROUND(drove_alone::float / total_commuters * 100, 2) as drive_alone_pct,
      ROUND(public_transportation::float / total_commuters * 100, 2) as transit_pct,
      ROUND(worked_from_home::float / total_commuters * 100, 2) as wfh_pct
    FROM commute_data
    WHERE county IN ({geography})
      AND year = {year}
    ORDER BY mean_commute_time DESC
"""

TRANSIT_ACCESSIBILITY_SQL = """
    SELECT
      metro_area, state,
      total_population, transit_routes, bus_stops, rail_stations,
      service_area_sq_miles, daily_ridership,
      ROUND(bus_stops::float / (total_population / 1000), 2) as stops_per_1k_pop,
      ROUND(daily_ridership::float / total_population * 100, 2) as ridership_rate,
      CASE
        WHEN stops_per_1k_pop >= 2.0 THEN 'High Access'
        WHEN stops_per_1k_pop >= 1.0 THEN 'Medium Access'
        WHEN stops_per_1k_pop >= 0.5 THEN 'Low Access'
        ELSE 'Very Low Access'
      END as accessibility_tier
    FROM transit_systems
    WHERE metro_area IN ({geography})
      AND year = {year}
    ORDER BY stops_per_1k_pop DESC
"""

TRAFFIC_CONGESTION_SQL = """
    SELECT
      metro_area, state,
      population, total_road_miles, interstate_miles, bridge_count,
      avg_congestion_index, peak_hour_delay_per_commuter,
      road_condition_rating, bridge_condition_rating,
      ROUND(total_road_miles / (population / 1000), 2) as road_miles_per_1k_pop,
      ROUND(avg_congestion_index * peak_hour_delay_per_commuter, 2) as congestion_impact_score
    FROM traffic_infrastructure
    WHERE metro_area IN ({geography})
      AND year = {year}
    ORDER BY congestion_impact_score DESC
"""


def get_domain() -> DomainDefinition:
    return DomainDefinition(
        name="transportation",
        patterns=(
            DomainPattern(
                name="commute_patterns_analysis",
                domain="transportation",
                description="Analyze commuting patterns and transportation modes",
                intent="transportation_analytics",
                template=COMMUTE_PATTERNS_SQL,
                parameters=("geography", "year"),
                geography_types=("county", "metro", "state"),
                metrics=("commute_time", "transportation_mode", "work_from_home"),
                complexity="medium",
                estimated_execution_ms=600,
            ),
            DomainPattern(
                name="public_transit_accessibility",
                domain="transportation",
                description="Evaluate public transportation accessibility and coverage",
                intent="transportation_analytics",
                template=TRANSIT_ACCESSIBILITY_SQL,
                parameters=("geography", "year"),
                geography_types=("metro", "county", "state"),
                metrics=("transit_accessibility", "ridership", "coverage"),
                complexity="complex",
                estimated_execution_ms=900,
            ),
            DomainPattern(
                name="traffic_congestion_index",
                domain="transportation",
                description="Traffic congestion and road infrastructure analysis",
                intent="transportation_analytics",
                template=TRAFFIC_CONGESTION_SQL,
                parameters=("geography", "year"),
                geography_types=("metro", "state"),
                metrics=("congestion_index", "infrastructure_condition", "delay_time"),
                complexity="medium",
                estimated_execution_ms=700,
            ),
        ),
        selection_rules=(
            SelectionRule(("commute", "drive", "work from home"), "commute_patterns_analysis"),
            SelectionRule(("transit", "bus", "accessibility"), "public_transit_accessibility"),
            SelectionRule(("traffic", "congestion", "delay"), "traffic_congestion_index"),
        ),
        configuration=DomainConfiguration(
            domain="transportation",
            primary_data_source="department_of_transportation",
            fallback_sources=("census_bureau", "transit_agencies"),
            common_geographies=("metro_area", "county", "state"),
            standard_metrics=("commute_time", "transportation_mode", "congestion_index", "ridership"),
            temporal_granularity="yearly",
        ),
    )
