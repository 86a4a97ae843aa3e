from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Optional, Sequence

from .colors import ColorAssigner
from .constants import DEFAULT_INPUT_FILE
from .geocode import GeocodeResolver, resolver_from_env
from .geojson import build_feature_collection
from .io import (
    geojson_path,
    partition_paths,
    read_rows,
    resolve_input_path,
    write_feature_collection,
    write_rows,
)
from .models import Visit
from .preprocess import count_unresolved, dedup_visits, partition_by_purpose, sort_visits
from .records import parse_record

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Turn a CSV log of visits (date, purpose, address, lat, lng) into GeoJSON maps."
    )
    parser.add_argument(
        "-f",
        "--file",
        type=Path,
        default=DEFAULT_INPUT_FILE,
        help="CSV file name (default: travel.csv). Rewritten in place, sorted and deduplicated.",
    )
    parser.add_argument(
        "--geocode",
        action="store_true",
        help="Look up coordinates for rows whose lat/lng are both 0 (needs GOOGLE_API_KEY).",
    )
    parser.add_argument(
        "--plain",
        action="store_true",
        help="Only write date and name properties and skip the per-purpose files.",
    )
    parser.add_argument(
        "--no-partitions",
        action="store_true",
        help="Do not write one GeoJSON file per purpose.",
    )
    parser.add_argument(
        "--dedup-on-pair",
        action="store_true",
        help="Treat visits as duplicates only when both latitude and longitude match "
        "(default: latitude only).",
    )
    parser.add_argument(
        "--no-rewrite",
        action="store_true",
        help="Leave the CSV file untouched.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    return parser.parse_args(argv)


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )


def load_visits(
    rows: Sequence[Sequence[str]],
    resolver: Optional[GeocodeResolver] = None,
) -> List[Visit]:
    visits: List[Visit] = []
    for index, row in enumerate(rows, start=1):
        visit = parse_record(row, resolver)
        if visit is None:
            logger.debug(f"Dropping row {index}: expected 5 fields, got {len(row)}")
            continue
        visits.append(visit)
    return visits


def write_partitions(
    visits: Sequence[Visit],
    output_path: Path,
    colors: Optional[ColorAssigner],
) -> List[Path]:
    written: List[Path] = []
    partitions = partition_by_purpose(visits)
    paths = partition_paths(output_path, partitions)
    for purpose, subset in partitions.items():
        path = paths[purpose]
        write_feature_collection(path, build_feature_collection(subset, colors))
        print(f"Saved {len(subset)} '{purpose}' visits to {path}")
        written.append(path)
    return written


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)
    configure_logging(args.verbose)

    input_path = resolve_input_path(args.file)
    rows = read_rows(input_path)
    resolver = resolver_from_env() if args.geocode else None

    parsed = load_visits(rows, resolver)
    malformed = len(rows) - len(parsed)
    deduped, duplicates = dedup_visits(parsed, on_pair=args.dedup_on_pair)
    visits = sort_visits(deduped)

    if not args.no_rewrite:
        write_rows(input_path, visits)

    colors = None if args.plain else ColorAssigner()
    output_path = geojson_path(input_path)
    write_feature_collection(output_path, build_feature_collection(visits, colors))
    print(f"Saved {len(visits)} visits to {output_path}")

    if not (args.plain or args.no_partitions):
        write_partitions(visits, output_path, colors)

    print(
        f"Kept {len(visits)} visits "
        f"(dropped {malformed} malformed rows, {duplicates} duplicates; "
        f"{count_unresolved(visits)} without coordinates)."
    )
    if resolver is not None:
        print(f"Sent {resolver.requests_made} geocoding requests.")
