from __future__ import annotations

from datetime import date
from typing import Dict, Sequence

from .constants import PALETTE


class ColorAssigner:
    """Hands out palette colors per year in first-seen order, cycling when exhausted."""

    def __init__(self, palette: Sequence[str] = PALETTE) -> None:
        if not palette:
            raise ValueError("Palette must contain at least one color.")
        self.palette = tuple(palette)
        self.cursor = 0
        self.assigned: Dict[int, str] = {}

    def color_for_year(self, when: date) -> str:
        year = when.year
        color = self.assigned.get(year)
        if color is None:
            color = self.palette[self.cursor % len(self.palette)]
            self.assigned[year] = color
            self.cursor += 1
        return color
