from __future__ import annotations

import math
from typing import TYPE_CHECKING, List, Optional, Sequence

from .constants import RECORD_FIELDS, RECORD_PRECISION
from .models import Visit
from .time_utils import format_visit_date, parse_visit_date

if TYPE_CHECKING:
    from .geocode import GeocodeResolver


def parse_coordinate(raw: str) -> float:
    try:
        value = float(raw)
    except ValueError:
        return 0.0
    # float() accepts "nan" and "inf"; neither is a usable coordinate.
    return value if math.isfinite(value) else 0.0


def parse_record(
    fields: Sequence[str],
    resolver: Optional["GeocodeResolver"] = None,
) -> Optional[Visit]:
    """Build a Visit from one CSV row.

    Rows without exactly five fields yield ``None``. Malformed dates and
    coordinates are defaulted instead of raising, so a corrupt row never stops
    the run. When ``resolver`` is given and both coordinates are zero, the
    address is geocoded before the Visit is created.
    """
    if len(fields) != len(RECORD_FIELDS):
        return None

    raw_date, purpose, address, raw_lat, raw_lng = (field.strip() for field in fields)
    lat = parse_coordinate(raw_lat)
    lng = parse_coordinate(raw_lng)

    if resolver is not None and lat == 0.0 and lng == 0.0:
        lat, lng, address = resolver.resolve(address)

    return Visit(
        address=address,
        when=parse_visit_date(raw_date),
        purpose=purpose,
        lat=lat,
        lng=lng,
    )


def format_record(visit: Visit) -> List[str]:
    return [
        format_visit_date(visit.when),
        visit.purpose,
        visit.address,
        f"{visit.lat:.{RECORD_PRECISION}f}",
        f"{visit.lng:.{RECORD_PRECISION}f}",
    ]
