"""
Proximity ranking: planar distance between ward centers and the K nearest wards to a reference ward.
"""
import logging
from typing import List, Optional, Sequence

import numpy as np

from config import NEARBY_WARD_LIMIT, settings
from schemas import NeighborWithDistance, Ward

logger = logging.getLogger(__name__)


def ward_distance(a: Ward, b: Ward) -> float:
    """
    Euclidean distance between ward centers in grid units.
    Planar only; use approx_distance_km for a display figure.
    """
    dx = a.center[0] - b.center[0]
    dy = a.center[1] - b.center[1]
    return float(np.hypot(dx, dy))


def resolve_reference_ward(wards: Sequence[Ward], ward_id: Optional[str] = None) -> Ward:
    """
    Return the ward with ward_id. When ward_id is None or not in the collection,
    the first ward is the reference (the citizen view's simulated user location).
    Raises ValueError when the collection is empty.
    """
    if not wards:
        raise ValueError("Cannot resolve a reference ward from an empty collection")
    if ward_id is not None:
        for ward in wards:
            if ward.id == ward_id:
                return ward
        logger.warning("Reference ward %s not found; using first ward %s", ward_id, wards[0].id)
    return wards[0]


def rank_neighbors(
    reference: Ward,
    wards: Sequence[Ward],
    limit: Optional[int] = None,
) -> List[NeighborWithDistance]:
    """
    Wards other than reference (by id), nearest first, truncated to limit (default 5).
    Ties keep collection order. Non-finite distances sort after all finite ones.
    """
    if limit is None:
        limit = getattr(settings, "ward_nearby_limit", NEARBY_WARD_LIMIT)
    candidates = [w for w in wards if w.id != reference.id]
    if not candidates or limit <= 0:
        return []

    coords = np.asarray([w.center for w in candidates], dtype=float)
    origin = np.asarray(reference.center, dtype=float)
    distances = np.hypot(coords[:, 0] - origin[0], coords[:, 1] - origin[1])
    if not np.all(np.isfinite(distances)):
        logger.warning(
            "Non-finite distance from ward %s to %s ward(s); ranking them last",
            reference.id,
            int(np.count_nonzero(~np.isfinite(distances))),
        )
    order = np.argsort(distances, kind="stable")[:limit]

    ranked = [
        NeighborWithDistance(**candidates[i].model_dump(), distance=float(distances[i]))
        for i in order
    ]
    logger.debug("Ranked %s of %s neighbors for ward %s", len(ranked), len(candidates), reference.id)
    return ranked
