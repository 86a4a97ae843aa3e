from __future__ import annotations

from typing import Dict, Iterable, List, Sequence, Set, Tuple

from .constants import RECORD_PRECISION
from .models import Visit


def dedup_key(visit: Visit, on_pair: bool = False) -> str:
    # The historical key repeats the latitude, so visits sharing a latitude collapse
    # regardless of longitude. on_pair keys on the full coordinate instead.
    second = visit.lng if on_pair else visit.lat
    return f"{visit.lat:.{RECORD_PRECISION}f},{second:.{RECORD_PRECISION}f}"


def dedup_visits(visits: Iterable[Visit], on_pair: bool = False) -> Tuple[List[Visit], int]:
    kept: List[Visit] = []
    seen: Set[str] = set()
    dropped = 0

    for visit in visits:
        key = dedup_key(visit, on_pair)
        if key in seen:
            dropped += 1
            continue
        seen.add(key)
        kept.append(visit)

    return kept, dropped


def sort_visits(visits: Iterable[Visit]) -> List[Visit]:
    return sorted(visits, key=lambda visit: (visit.when, visit.address))


def partition_by_purpose(visits: Sequence[Visit]) -> Dict[str, List[Visit]]:
    partitions: Dict[str, List[Visit]] = {}
    for visit in visits:
        partitions.setdefault(visit.purpose, []).append(visit)
    return partitions


def count_unresolved(visits: Iterable[Visit]) -> int:
    return sum(1 for visit in visits if visit.is_unresolved)
