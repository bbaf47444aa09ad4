"""
Dominant pollutant: highest concentration in a ward's pollutant mapping, with a display label.
"""
from typing import Dict, Mapping

from schemas import DominantPollutant

# Upper-cased code -> display label. PM10 is already its own display form.
POLLUTANT_DISPLAY_LABELS: Dict[str, str] = {
    "PM25": "PM2.5",
    "PM10": "PM10",
}

NO_POLLUTANT_LABEL = "N/A"


def normalize_pollutant_label(code: str) -> str:
    """Upper-case the code, then apply the display table (pm25 -> PM2.5)."""
    upper = code.upper()
    return POLLUTANT_DISPLAY_LABELS.get(upper, upper)


def select_dominant_pollutant(pollutants: Mapping[str, float]) -> DominantPollutant:
    """
    Entry with the strictly greatest value; on ties the first in insertion order wins.
    Empty mapping -> DominantPollutant(label="N/A", value=0).
    """
    if not pollutants:
        return DominantPollutant(label=NO_POLLUTANT_LABEL, value=0)
    items = iter(pollutants.items())
    best_code, best_value = next(items)
    for code, value in items:
        if value > best_value:
            best_code, best_value = code, value
    return DominantPollutant(label=normalize_pollutant_label(best_code), value=best_value)
