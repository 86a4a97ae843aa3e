from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Tuple


@dataclass(frozen=True)
class Visit:
    address: str
    when: date
    purpose: str
    lat: float
    lng: float

    @property
    def is_unresolved(self) -> bool:
        # (0, 0) doubles as "no coordinates yet"; a real visit there is indistinguishable.
        return self.lat == 0.0 and self.lng == 0.0

    @property
    def as_lonlat(self) -> Tuple[float, float]:
        return (self.lng, self.lat)
