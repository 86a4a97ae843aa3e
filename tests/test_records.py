from datetime import date

import pytest

from visitmap.records import format_record, parse_record


def test_parse_record_strips_and_converts_fields():
    visit = parse_record([" 2021-03-04 ", " museum ", " 1 Rue de Rivoli, Paris ", " 48.8606 ", " 2.3376 "])

    assert visit.when == date(2021, 3, 4)
    assert visit.purpose == "museum"
    assert visit.address == "1 Rue de Rivoli, Paris"
    assert visit.lat == pytest.approx(48.8606)
    assert visit.lng == pytest.approx(2.3376)


@pytest.mark.parametrize(
    "fields",
    [
        [],
        ["2020-01-01", "museum", "123 Main St", "40.0"],
        ["2020-01-01", "museum", "123 Main St", "40.0", "-75.0", "extra"],
    ],
)
def test_parse_record_drops_wrong_field_count(fields):
    assert parse_record(fields) is None


def test_parse_record_defaults_bad_date_and_numbers():
    visit = parse_record(["yesterday", "", "Somewhere", "north", ""])

    assert visit.when == date.min
    assert visit.purpose == ""
    assert (visit.lat, visit.lng) == (0.0, 0.0)
    assert visit.is_unresolved


def test_parse_record_resolves_only_sentinel_coordinates():
    class Resolver:
        def __init__(self):
            self.addresses = []

        def resolve(self, address):
            self.addresses.append(address)
            return 51.5007, -0.1246, "Westminster, London SW1A 0AA, UK"

    resolver = Resolver()
    resolved = parse_record(["2019-07-01", "work", "Big Ben", "0", "0"], resolver)
    untouched = parse_record(["2019-07-01", "work", "Equator", "0", "12.5"], resolver)

    assert resolver.addresses == ["Big Ben"]
    assert resolved.address == "Westminster, London SW1A 0AA, UK"
    assert (resolved.lat, resolved.lng) == (51.5007, -0.1246)
    assert (untouched.lat, untouched.lng) == (0.0, 12.5)
    assert untouched.address == "Equator"


def test_format_record_round_trips_valid_rows():
    row = ["2020-06-15", "museum", "123 Main St", "40.12344", "-75.98761"]

    assert format_record(parse_record(row)) == [
        "2020-06-15",
        "museum",
        "123 Main St",
        "40.1234",
        "-75.9876",
    ]


def test_format_record_keeps_zero_date_padded():
    visit = parse_record(["not a date", "home", "Nowhere", "1", "2"])

    assert format_record(visit)[0] == "0001-01-01"


@pytest.mark.parametrize("raw", ["nan", "NaN", "inf", "-inf", "Infinity"])
def test_parse_record_treats_non_finite_coordinates_as_malformed(raw):
    visit = parse_record(["2020-01-01", "museum", "Somewhere", raw, raw])

    assert (visit.lat, visit.lng) == (0.0, 0.0)
    assert format_record(visit)[3:] == ["0.0000", "0.0000"]
