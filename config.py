"""
Application configuration from environment variables.
"""
from pydantic_settings import BaseSettings


# Ward neighborhood defaults (citizen view)
NEARBY_WARD_LIMIT: int = 5
HOTSPOT_AQI_THRESHOLD: int = 150  # aqi > threshold = hotspot
SAFE_ZONE_AQI_THRESHOLD: int = 100  # aqi <= threshold = safe zone
GRID_UNITS_PER_KM: float = 10.0
AQI_SCALE_MAX: int = 500  # US AQI upper bound


class Settings(BaseSettings):
    """Settings loaded from environment (and .env)."""

    # Proximity ranking
    ward_nearby_limit: int = NEARBY_WARD_LIMIT
    ward_grid_units_per_km: float = GRID_UNITS_PER_KM  # grid units -> approx km

    # Neighborhood buckets; 100 < aqi <= 150 falls in neither
    ward_hotspot_aqi_threshold: int = HOTSPOT_AQI_THRESHOLD
    ward_safe_zone_aqi_threshold: int = SAFE_ZONE_AQI_THRESHOLD

    # Live monitor
    aqi_scale_max: int = AQI_SCALE_MAX

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


settings = Settings()
