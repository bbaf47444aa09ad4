"""
Neighborhood buckets: hotspots (aqi > 150) and safe zones (aqi <= 100) among nearby wards.
"""
from typing import Optional, Sequence

from config import HOTSPOT_AQI_THRESHOLD, SAFE_ZONE_AQI_THRESHOLD, settings
from schemas import NeighborhoodBuckets, NeighborWithDistance


def is_hotspot(aqi: float, threshold: Optional[int] = None) -> bool:
    """Strictly above the hotspot threshold."""
    if threshold is None:
        threshold = getattr(settings, "ward_hotspot_aqi_threshold", HOTSPOT_AQI_THRESHOLD)
    return aqi > threshold


def is_safe_zone(aqi: float, threshold: Optional[int] = None) -> bool:
    """At or below the safe-zone threshold."""
    if threshold is None:
        threshold = getattr(settings, "ward_safe_zone_aqi_threshold", SAFE_ZONE_AQI_THRESHOLD)
    return aqi <= threshold


def classify_neighbors(
    neighbors: Sequence[NeighborWithDistance],
    hotspot_threshold: Optional[int] = None,
    safe_zone_threshold: Optional[int] = None,
) -> NeighborhoodBuckets:
    """
    Split neighbors into hotspots and safe zones, each in input order.
    Wards between the two thresholds (100 < aqi <= 150 by default) go in neither bucket.
    """
    hotspots = [n for n in neighbors if is_hotspot(n.aqi, hotspot_threshold)]
    safe_zones = [n for n in neighbors if is_safe_zone(n.aqi, safe_zone_threshold)]
    return NeighborhoodBuckets(hotspots=hotspots, safe_zones=safe_zones)
