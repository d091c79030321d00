from unittest.mock import patch

import pytest
import requests

from fplhelp.core import (
    Config,
    DegreesMinutesSeconds,
    FlightPlanFile,
    GeocodingError,
    Orientation,
    Point,
    convert_coordinates,
    get_coordinates,
    get_list_coordinates_list,
    url_from,
)


class _FakeResponse:
    def __init__(self, payload):
        self._payload = payload

    def raise_for_status(self):
        return None

    def json(self):
        return self._payload


def _geojson(*coords):
    return {
        "type": "FeatureCollection",
        "features": [
            {"type": "Feature", "geometry": {"type": "Point", "coordinates": list(c)}}
            for c in coords
        ],
    }


def test_config_requires_file_name():
    with pytest.raises(ValueError, match="Please give a file name!"):
        Config.from_args(["prog"])


def test_config_takes_second_argument():
    assert Config.from_args(["prog", "plan.txt", "extra"]).file_name == "plan.txt"


def test_flight_plan_reads_lines(tmp_path):
    path = tmp_path / "plan.txt"
    path.write_text("Paris\nLyon\n\nNice", encoding="utf-8")
    plan = FlightPlanFile.from_config(Config(file_name=str(path)))
    assert plan.addresses == ["Paris", "Lyon", "", "Nice"]


def test_flight_plan_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        FlightPlanFile.from_config(Config(file_name=str(tmp_path / "absent.txt")))


@pytest.mark.parametrize(
    ("start", "expected"),
    [
        (Orientation.NORTH, Orientation.SOUTH),
        (Orientation.SOUTH, Orientation.NORTH),
        (Orientation.EAST, Orientation.WEST),
        (Orientation.WEST, Orientation.EAST),
    ],
)
def test_opposite_is_involution(start, expected):
    flipped = Orientation.opposite(start)
    assert flipped is expected
    assert Orientation.opposite(flipped) is start


def test_opposite_pairs():
    assert Orientation.NORTH.opposite() is Orientation.SOUTH
    assert Orientation.WEST.opposite() is Orientation.EAST


def test_dms_negative_flips_bearing():
    dms = DegreesMinutesSeconds.from_decimal(-48.5, Orientation.NORTH)
    assert (dms.degrees, dms.minutes, dms.seconds) == (48, 30, 0.0)
    assert dms.bearing is Orientation.SOUTH
    assert dms.is_latitude and not dms.is_longitude


def test_dms_positive_keeps_bearing():
    dms = DegreesMinutesSeconds.from_decimal(2.25, Orientation.WEST)
    assert (dms.degrees, dms.minutes) == (2, 15)
    assert dms.bearing is Orientation.WEST
    assert dms.is_longitude


def test_convert_coordinates_pinned():
    assert convert_coordinates(Point(2.25, 48.5)) == "4830N00215W"


@pytest.mark.parametrize(
    "point", [Point(0.0, 0.0), Point(179.75, 89.5), Point(-73.25, -12.5), Point(5.5, -1.0)]
)
def test_convert_coordinates_shape(point):
    text = convert_coordinates(point)
    assert len(text) == 11
    assert text[4] == ("S" if point.y < 0 else "N")
    assert text[10] == ("E" if point.x < 0 else "W")
    assert text[:4].isdigit() and text[5:10].isdigit()


def test_get_coordinates_rejects_empty():
    with pytest.raises(GeocodingError, match="Not a valid address."):
        get_coordinates("")


def test_get_coordinates_parses_features():
    with patch("requests.get", return_value=_FakeResponse(_geojson((2.25, 48.5), (4.75, 45.5)))) as get:
        points = get_coordinates("somewhere")
    assert points == [Point(2.25, 48.5), Point(4.75, 45.5)]
    assert get.call_args.kwargs["params"]["q"] == "somewhere"


def test_get_coordinates_network_error():
    with patch("requests.get", side_effect=requests.ConnectionError("down")):
        with pytest.raises(GeocodingError):
            get_coordinates("somewhere")


def test_get_coordinates_bad_payload():
    with patch("requests.get", return_value=_FakeResponse({"nothing": []})):
        with pytest.raises(GeocodingError):
            get_coordinates("somewhere")


def test_list_with_empty_address_gives_blank_line():
    assert get_list_coordinates_list(FlightPlanFile(addresses=[""])) == "\n"


def test_list_with_points():
    first, second = Point(2.25, 48.5), Point(4.75, 45.5)
    with patch("requests.get", return_value=_FakeResponse(_geojson((2.25, 48.5), (4.75, 45.5)))):
        output = get_list_coordinates_list(FlightPlanFile(addresses=["somewhere"]))
    assert output.startswith(convert_coordinates(first)[1:] + ", ")
    assert output.endswith(convert_coordinates(second) + ",\n")


def test_url_from_pinned():
    assert url_from(Point(2.25, 48.5)) == "https://www.openstreetmap.org/#map=10/48.5/2.25"


def test_url_from_integral_values_have_no_fraction():
    url = url_from(Point(3.0, 45.0))
    assert url.endswith("/45/3")
    assert url.startswith("https://www.openstreetmap.org/#map=10/")