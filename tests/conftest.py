"""
Pytest configuration and shared fixtures for the ward derivation tests.
"""
import os
import sys
from typing import Any, Callable, Dict, List

import pytest

# Ensure project root is on path
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from schemas import AQICategory, Ward  # noqa: E402


def _category_for(aqi: int) -> AQICategory:
    # Test-only stand-in for the repository's classifier
    if aqi > 200:
        return AQICategory.SEVERE
    if aqi > 100:
        return AQICategory.POOR
    if aqi > 50:
        return AQICategory.MODERATE
    return AQICategory.GOOD


@pytest.fixture
def make_ward() -> Callable[..., Ward]:
    """Factory: make_ward("W01", (0, 0), 120, pollutants={...}, trend=[...])."""

    def _make(ward_id: str, center=(0.0, 0.0), aqi: int = 50, **overrides: Any) -> Ward:
        data: Dict[str, Any] = {
            "id": ward_id,
            "name": f"Ward {ward_id}",
            "zone": "North",
            "center": center,
            "aqi": aqi,
            "category": _category_for(aqi),
            "pollutants": {"pm25": 40.0, "pm10": 30.0, "no2": 10.0},
            "trend": [],
            "weather": {"temperature": 24.5, "windSpeed": 8.0},
            "population": 100_000,
            "primarySources": ["Traffic"],
        }
        data.update(overrides)
        return Ward.model_validate(data)

    return _make


@pytest.fixture
def grid_wards(make_ward) -> List[Ward]:
    """Six wards on a 10-unit grid; W01 at (0, 0) is the reference."""
    return [
        make_ward("W01", (0, 0), 180),
        make_ward("W02", (30, 0), 120),  # 30, neither bucket
        make_ward("W03", (0, 20), 80),  # 20, safe
        make_ward("W04", (10, 0), 210),  # 10, hotspot
        make_ward("W05", (50, 0), 151),  # 50, hotspot
        make_ward("W06", (0, -40), 100),  # 40, safe (boundary)
    ]


@pytest.fixture
def sample_ward_record() -> dict:
    """Raw repository record in the camelCase wire shape."""
    return {
        "id": "W07",
        "name": "Okhla Industrial",
        "zone": "South",
        "center": [40, 60],
        "aqi": 245,
        "category": "SEVERE",
        "pollutants": {"pm25": 180.5, "pm10": 220.0, "so2": 14.2},
        "trend": [190, 210, 230],
        "weather": {"temperature": 31.2, "windSpeed": 4.5},
        "population": 412_000,
        "primarySources": ["Industrial Emissions", "Heavy Vehicles"],
    }
