"""
Pydantic schemas for ward readings and the values derived from them.
"""
from enum import Enum
from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, Field


class AQICategory(str, Enum):
    GOOD = "GOOD"
    MODERATE = "MODERATE"
    POOR = "POOR"
    SEVERE = "SEVERE"


class TrendDirection(str, Enum):
    RISING = "rising"
    FALLING = "falling"


# ----- Ward readings (supplied by the repository) -----
class Weather(BaseModel):
    temperature: float  # °C
    wind_speed: float = Field(..., alias="windSpeed")  # km/h

    class Config:
        frozen = True
        populate_by_name = True


class Ward(BaseModel):
    id: str
    name: str
    zone: str
    center: Tuple[float, float]  # planar grid coordinates, not lat/lon
    aqi: int
    category: AQICategory
    pollutants: Dict[str, float] = Field(default_factory=dict)
    trend: List[float] = Field(default_factory=list)  # chronological, oldest first
    weather: Weather
    population: int = 0
    primary_sources: List[str] = Field(default_factory=list, alias="primarySources")

    class Config:
        frozen = True
        populate_by_name = True


# ----- Derived values -----
class NeighborWithDistance(Ward):
    distance: float


class DominantPollutant(BaseModel):
    label: str
    value: float

    class Config:
        frozen = True


class NeighborhoodBuckets(BaseModel):
    hotspots: List[NeighborWithDistance] = Field(default_factory=list)
    safe_zones: List[NeighborWithDistance] = Field(default_factory=list, alias="safeZones")

    class Config:
        frozen = True
        populate_by_name = True


# ----- Insight payloads (consumed by the views) -----
class NearbyWard(BaseModel):
    id: str
    name: str
    aqi: int
    category: AQICategory
    distance: float
    approx_km: Optional[int] = None  # None when distance is not finite

    class Config:
        frozen = True


class CitizenInsights(BaseModel):
    local_ward: Ward
    nearby: List[NeighborWithDistance] = Field(default_factory=list)
    hotspots: List[NearbyWard] = Field(default_factory=list)
    safe_zones: List[NearbyWard] = Field(default_factory=list)
    primary_sources: List[str] = Field(default_factory=list)

    class Config:
        frozen = True


class LiveMonitorSummary(BaseModel):
    ward_id: str
    name: str
    zone: str
    aqi: int
    category: AQICategory
    dominant_pollutant: DominantPollutant
    trend: TrendDirection
    health_risk_pct: int
    temperature: float
    wind_speed: float
    population: int

    class Config:
        frozen = True
