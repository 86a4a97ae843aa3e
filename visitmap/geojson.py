from __future__ import annotations

from typing import List, Optional, Sequence

import numpy as np
from shapely.geometry import Point, mapping

from .colors import ColorAssigner
from .constants import COORDINATE_SCALE
from .models import Visit
from .time_utils import format_visit_date


def truncate_coordinates(values: Sequence[float]) -> List[float]:
    """Cut coordinates toward zero at four decimals (12.34567 -> 12.3456)."""
    scaled = np.trunc(np.asarray(values, dtype=float) * COORDINATE_SCALE)
    # Adding 0.0 turns the -0.0 left by tiny negative values into 0.0.
    return [float(value) for value in scaled / COORDINATE_SCALE + 0.0]


def truncate_coordinate(value: float) -> float:
    return truncate_coordinates([value])[0]


def build_feature(visit: Visit, colors: Optional[ColorAssigner] = None) -> dict:
    lng, lat = truncate_coordinates(visit.as_lonlat)
    point = Point(lng, lat)
    properties = {
        "date": format_visit_date(visit.when),
        "name": visit.address,
    }
    if colors is not None:
        properties["marker-symbol"] = visit.purpose
        properties["marker-color"] = colors.color_for_year(visit.when)
    return {
        "type": "Feature",
        "geometry": mapping(point),
        "properties": properties,
    }


def build_feature_collection(
    visits: Sequence[Visit],
    colors: Optional[ColorAssigner] = None,
) -> dict:
    return {
        "type": "FeatureCollection",
        "features": [build_feature(visit, colors) for visit in visits],
    }
