# fplhelp

fplhelp is a small desktop helper that finds coordinates for a flight plan.

You type an address or a place name. fplhelp looks it up with the OpenStreetMap
(Nominatim) geocoder and shows each match in flight-plan notation. The notation
gives degrees and minutes, with the latitude first and the longitude second. For
example, `4512N00530W` is 45°12' latitude with the `N` marker and 005°30' longitude
with the `W` marker.

## Installation

```
pip install fplhelp
```

The window uses Tk through `tkinter`, so your Python installation must include Tk.

## Using the application

Start the window with:

```
fplhelp
```

- Enter an address and press **Convert** to list the coordinates that match it. If the
  lookup fails, the window shows the error in red.
- **Copy** puts one result on the clipboard.
- **Add** adds a result, followed by the address, to your planned flight.
- Each result also shows an OpenStreetMap link labelled **Verify coordinates**. The link
  is in a read-only field, so you can copy it into a browser to check the location.
- Under *Your planned flight*, you can remove each entry. You can also copy its
  coordinates only (**Copy coordinates**) or the whole entry (**Copy all**).
- A text box at the bottom shows the coordinates of every waypoint, each followed by a
  space. **Copy complete trip** copies the contents of that box.

## Using the library

```python
from fplhelp.core import Point, convert_coordinates, get_coordinates, url_from

convert_coordinates(Point(x=5.5, y=45.2))   # '4512N00530W'
url_from(Point(x=5.5, y=45.2))              # 'https://www.openstreetmap.org/#map=10/45.2/5.5'

for point in get_coordinates("Grenoble"):   # network lookup
    print(convert_coordinates(point))
```

`x` is the longitude and `y` is the latitude. The direction letters work as follows:

- A latitude of zero or more is marked `N`, and a negative latitude is marked `S`.
- A longitude of zero or more is marked `W`, and a negative longitude is marked `E`.

`get_coordinates` raises `GeocodingError` in these cases:

- the address is empty;
- the request fails;
- the geocoder's answer cannot be read.

`DegreesMinutesSeconds.from_decimal(value, bearing)` splits an angle into whole
degrees, minutes and seconds. If the value is negative, it uses `bearing.opposite()`
in place of the bearing you gave.

To geocode a whole file of addresses, with one address per line:

```python
from fplhelp.core import Config, FlightPlanFile, get_list_coordinates_list

config = Config.from_args(["fplhelp", "addresses.txt"])
plan = FlightPlanFile.from_config(config)
print(get_list_coordinates_list(plan))
```

- `Config.from_args` raises `ValueError` when it is not given a file name.
- `get_list_coordinates_list` prints each geocoding failure to standard error and
  continues with the next address.

`TripPlanner` in `fplhelp.app` holds an ordered list of waypoints without the window.
It has these methods: `add`, `remove`, `trip_text`, `coordinates_of` and `is_empty`.

## What it does not do

- The planned flight exists only while the window is open. Nothing is saved to disk.
- There is no command for converting a file of addresses. Use
  `get_list_coordinates_list` from Python for that.

## Running the tests

```
pip install "fplhelp[test]"
pytest
```