"""Geocoding of addresses and conversion to flight-plan coordinate strings."""

from __future__ import annotations

import math
import sys
from collections.abc import Sequence
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from pathlib import Path

import requests

NOMINATIM_SEARCH_URL = "https://nominatim.openstreetmap.org/search"
MAP_URL_TEMPLATE = "https://www.openstreetmap.org/#map=10/{lat}/{lon}"
_USER_AGENT = "fplhelp"
_TIMEOUT = 30


class GeocodingError(Exception):
    """Raised when an address cannot be turned into coordinates."""


@dataclass(frozen=True)
class Point:
    """A geographic point: ``x`` is the longitude, ``y`` the latitude."""

    x: float
    y: float


@dataclass(frozen=True)
class Config:
    """Command-line configuration: the file holding the addresses."""

    file_name: str

    @classmethod
    def from_args(cls, args: Sequence[str]) -> Config:
        """Build a configuration from ``argv``-style arguments."""
        if len(args) < 2:
            raise ValueError("Please give a file name!")
        return cls(file_name=args[1])


@dataclass
class FlightPlanFile:
    """The addresses of a flight plan, one per line of a file."""

    addresses: list[str] = field(default_factory=list)

    @classmethod
    def from_config(cls, config: Config) -> FlightPlanFile:
        """Read every line of the configured file as an address."""
        text = Path(config.file_name).read_text(encoding="utf-8")
        return cls(addresses=text.splitlines())


class Orientation(Enum):
    NORTH = "N"
    EAST = "E"
    SOUTH = "S"
    WEST = "W"

    def opposite(self) -> Orientation:
        """The orientation pointing the other way."""
        return _OPPOSITES[self]

    @property
    def is_northern(self) -> bool:
        return self is Orientation.NORTH

    @property
    def is_eastern(self) -> bool:
        return self is Orientation.EAST

    @property
    def is_southern(self) -> bool:
        return self is Orientation.SOUTH

    @property
    def is_western(self) -> bool:
        return self is Orientation.WEST


_OPPOSITES = {
    Orientation.NORTH: Orientation.SOUTH,
    Orientation.EAST: Orientation.WEST,
    Orientation.SOUTH: Orientation.NORTH,
    Orientation.WEST: Orientation.EAST,
}


@dataclass(frozen=True)
class DegreesMinutesSeconds:
    """An angle split into whole degrees, minutes and seconds with a bearing."""

    degrees: int
    minutes: int
    seconds: float
    bearing: Orientation

    @classmethod
    def from_decimal(cls, decimal: float, bearing: Orientation) -> DegreesMinutesSeconds:
        """Split a decimal angle; a negative angle flips the bearing."""
        magnitude = abs(decimal)
        degrees = math.trunc(magnitude)
        minutes_exact = (magnitude - degrees) * 60.0
        minutes = math.trunc(minutes_exact)
        seconds = float(math.trunc((minutes_exact - minutes) * 60.0))
        if decimal < 0.0:
            bearing = bearing.opposite()
        return cls(degrees=degrees, minutes=minutes, seconds=seconds, bearing=bearing)

    @property
    def is_latitude(self) -> bool:
        return self.bearing in (Orientation.NORTH, Orientation.SOUTH)

    @property
    def is_longitude(self) -> bool:
        return self.bearing in (Orientation.EAST, Orientation.WEST)


def get_coordinates(address: str) -> list[Point]:
    """Look up an address with the OpenStreetMap geocoder."""
    if not address:
        raise GeocodingError("Not a valid address.")
    try:
        response = requests.get(
            NOMINATIM_SEARCH_URL,
            params={"q": address, "format": "geojson"},
            headers={"User-Agent": _USER_AGENT},
            timeout=_TIMEOUT,
        )
        response.raise_for_status()
        payload = response.json()
    except (requests.RequestException, ValueError) as exc:
        raise GeocodingError(str(exc)) from exc
    try:
        return [
            Point(x=float(lon), y=float(lat))
            for lon, lat, *_ in (
                feature["geometry"]["coordinates"] for feature in payload["features"]
            )
        ]
    except (KeyError, TypeError, ValueError) as exc:
        raise GeocodingError(f"unexpected geocoder response: {exc}") from exc


def convert_coordinates(point: Point) -> str:
    """Format a point as ``DDMM{N|S}DDDMM{E|W}`` for a flight plan."""
    longitude = DegreesMinutesSeconds.from_decimal(point.x, Orientation.WEST)
    latitude = DegreesMinutesSeconds.from_decimal(point.y, Orientation.NORTH)
    longitude_direction = "W" if longitude.bearing.is_western else "E"
    latitude_direction = "S" if latitude.bearing.is_southern else "N"
    return (
        f"{latitude.degrees:02d}{latitude.minutes:02d}{latitude_direction}"
        f"{longitude.degrees:03d}{longitude.minutes:02d}{longitude_direction}"
    )


def get_list_coordinates_list(plan: FlightPlanFile) -> str:
    """Geocode every address of a plan and list the converted coordinates."""
    output = ""
    for address in plan.addresses:
        try:
            points = get_coordinates(address)
        except GeocodingError as err:
            print(f"Error when geocoding: {err}", file=sys.stderr)
            points = []
        output += "".join(f"{convert_coordinates(point)}, " for point in points)
        output = output[1:-1] + "\n"
    return output


def _format_float(value: float) -> str:
    if value.is_integer():
        text = str(int(value))
        if value == 0 and math.copysign(1.0, value) < 0:
            return "-" + text
        return text
    return format(Decimal(repr(value)), "f")


def url_from(point: Point) -> str:
    """A map link centred on the point, for checking it by eye."""
    return MAP_URL_TEMPLATE.format(lat=_format_float(point.y), lon=_format_float(point.x))