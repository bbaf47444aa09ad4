"""
Insight payloads for the citizen view and the live-monitor card, composed from the ward derivations.
"""
import logging
import math
from typing import Any, Iterable, List, Mapping, Optional, Sequence, Union

from config import AQI_SCALE_MAX, GRID_UNITS_PER_KM, settings
from schemas import (
    CitizenInsights,
    LiveMonitorSummary,
    NearbyWard,
    NeighborWithDistance,
    Ward,
)
from services.wards.classification import classify_neighbors
from services.wards.pollutants import select_dominant_pollutant
from services.wards.proximity import rank_neighbors, resolve_reference_ward
from services.wards.trend import estimate_trend

logger = logging.getLogger(__name__)


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def load_wards(records: Iterable[Union[Ward, Mapping[str, Any]]]) -> List[Ward]:
    """Validate repository records (camelCase or snake_case keys) into Ward models."""
    return [r if isinstance(r, Ward) else Ward.model_validate(r) for r in records]


def approx_distance_km(distance: float, units_per_km: Optional[float] = None) -> Optional[int]:
    """Whole-km display figure for a grid distance (10 units ~ 1 km). None if distance is not finite."""
    if units_per_km is None:
        units_per_km = getattr(settings, "ward_grid_units_per_km", GRID_UNITS_PER_KM)
    if not math.isfinite(distance):
        return None
    return _round_half_up(distance / units_per_km)


def health_risk_pct(aqi: float, scale_max: Optional[int] = None) -> int:
    """AQI as a percentage of the scale maximum (500). Not clamped."""
    if scale_max is None:
        scale_max = getattr(settings, "aqi_scale_max", AQI_SCALE_MAX)
    return _round_half_up(aqi / scale_max * 100)


def _nearby_entry(neighbor: NeighborWithDistance) -> NearbyWard:
    return NearbyWard(
        id=neighbor.id,
        name=neighbor.name,
        aqi=neighbor.aqi,
        category=neighbor.category,
        distance=neighbor.distance,
        approx_km=approx_distance_km(neighbor.distance),
    )


def build_citizen_insights(wards: Sequence[Ward], ward_id: Optional[str] = None) -> CitizenInsights:
    """
    Local ward (ward_id, else the first ward), its nearest neighbors and their
    hotspot / safe-zone buckets.
    """
    local = resolve_reference_ward(wards, ward_id)
    nearby = rank_neighbors(local, wards)
    buckets = classify_neighbors(nearby)
    logger.debug(
        "Citizen insights for %s: %s nearby, %s hotspots, %s safe zones",
        local.id,
        len(nearby),
        len(buckets.hotspots),
        len(buckets.safe_zones),
    )
    return CitizenInsights(
        local_ward=local,
        nearby=nearby,
        hotspots=[_nearby_entry(n) for n in buckets.hotspots],
        safe_zones=[_nearby_entry(n) for n in buckets.safe_zones],
        primary_sources=list(local.primary_sources),
    )


def build_live_monitor_summary(ward: Ward) -> LiveMonitorSummary:
    """Live-monitor card values for one ward: dominant pollutant, trend, health risk, weather."""
    return LiveMonitorSummary(
        ward_id=ward.id,
        name=ward.name,
        zone=ward.zone,
        aqi=ward.aqi,
        category=ward.category,
        dominant_pollutant=select_dominant_pollutant(ward.pollutants),
        trend=estimate_trend(ward.aqi, ward.trend),
        health_risk_pct=health_risk_pct(ward.aqi),
        temperature=ward.weather.temperature,
        wind_speed=ward.weather.wind_speed,
        population=ward.population,
    )


def build_live_monitor_feed(wards: Sequence[Ward]) -> List[LiveMonitorSummary]:
    """One live-monitor summary per ward, in input order."""
    return [build_live_monitor_summary(w) for w in wards]
