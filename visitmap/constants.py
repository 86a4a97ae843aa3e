from __future__ import annotations

from pathlib import Path
from typing import Sequence

DEFAULT_INPUT_FILE = Path("travel.csv")
GEOJSON_SUFFIX = ".geojson"

GEOCODE_URL = "https://maps.googleapis.com/maps/api/geocode/json"
API_KEY_ENV_VAR = "GOOGLE_API_KEY"

DATE_FORMAT = "%Y-%m-%d"
RECORD_FIELDS = ("date", "purpose", "address", "lat", "lng")
RECORD_PRECISION = 4
COORDINATE_SCALE = 10 ** RECORD_PRECISION

# One color per distinct year, handed out in first-seen order and reused after 12 years.
PALETTE: Sequence[str] = (
    "#e6194b",
    "#3cb44b",
    "#ffe119",
    "#4363d8",
    "#f58231",
    "#911eb4",
    "#46f0f0",
    "#f032e6",
    "#bcf60c",
    "#fabebe",
    "#008080",
    "#9a6324",
)
