"""
Short-term AQI trend: current reading against the second-to-last historical point.
"""
from typing import Sequence

from schemas import TrendDirection


def trend_reference_point(current_aqi: float, history: Sequence[float]) -> float:
    """history[-2], or current_aqi itself when history has fewer than 2 points."""
    if len(history) < 2:
        return current_aqi
    return history[-2]


def estimate_trend(current_aqi: float, history: Sequence[float]) -> TrendDirection:
    """
    RISING iff current_aqi > reference point, else FALLING.
    Equal values and short histories (no reference) both resolve to FALLING;
    there is no neutral state.
    """
    reference = trend_reference_point(current_aqi, history)
    if current_aqi > reference:
        return TrendDirection.RISING
    return TrendDirection.FALLING
