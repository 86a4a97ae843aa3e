from __future__ import annotations

import csv
import json
from pathlib import Path
from typing import Dict, Iterable, List, Set

from .constants import GEOJSON_SUFFIX
from .models import Visit
from .records import format_record


def resolve_input_path(candidate: Path) -> Path:
    expanded = candidate.expanduser()
    if expanded.is_file():
        return expanded
    raise SystemExit(f"Input file not found: {expanded}")


def read_rows(path: Path) -> List[List[str]]:
    # utf-8-sig drops the byte-order mark spreadsheet exports put before the first date.
    try:
        with path.open("r", encoding="utf-8-sig", newline="") as handle:
            return [row for row in csv.reader(handle)]
    except (OSError, UnicodeDecodeError, csv.Error) as exc:
        raise SystemExit(f"Could not read {path}: {exc}")


def write_rows(path: Path, visits: Iterable[Visit]) -> None:
    try:
        with path.open("w", encoding="utf-8", newline="") as handle:
            writer = csv.writer(handle)
            writer.writerows(format_record(visit) for visit in visits)
    except OSError as exc:
        raise SystemExit(f"Could not rewrite {path}: {exc}")


def write_feature_collection(path: Path, collection: dict) -> None:
    try:
        text = json.dumps(collection, ensure_ascii=False, indent=2, allow_nan=False)
    except ValueError as exc:
        raise SystemExit(f"Refusing to write {path}: {exc}")
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise SystemExit(f"Could not write {path}: {exc}")


def geojson_path(csv_path: Path) -> Path:
    return csv_path.with_suffix(GEOJSON_SUFFIX)


def purpose_prefix(purpose: str) -> str:
    return purpose.replace("/", "_").replace("\\", "_")


def partition_paths(output_path: Path, purposes: Iterable[str]) -> Dict[str, Path]:
    """Map each purpose to its own file, numbering prefixes that sanitise to the same name."""
    paths: Dict[str, Path] = {}
    taken: Set[str] = set()
    for purpose in purposes:
        base = purpose_prefix(purpose)
        prefix = base
        counter = 2
        while prefix in taken:
            prefix = f"{base}_{counter}"
            counter += 1
        taken.add(prefix)
        paths[purpose] = output_path.with_name(f"{prefix}-{output_path.name}")
    return paths
