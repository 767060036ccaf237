"""Observer input layer: place lookup, range checks, and observer-local time."""

import logging
import math
import re
from datetime import datetime

from pytz import timezone
from timezonefinder import TimezoneFinder

from skydome.models import Location, ObserverContext, QueryInput

LOG = logging.getLogger(__name__)

_tf = TimezoneFinder()

PRESET_LOCATIONS: tuple[Location, ...] = (
    Location(40.7128, -74.006, "New York, USA"),
    Location(51.5074, -0.1278, "London, UK"),
    Location(35.6762, 139.6503, "Tokyo, Japan"),
    Location(-33.8688, 151.2093, "Sydney, Australia"),
    Location(48.8566, 2.3522, "Paris, France"),
    Location(55.7558, 37.6173, "Moscow, Russia"),
    Location(-22.9068, -43.1729, "Rio de Janeiro, Brazil"),
    Location(37.7749, -122.4194, "San Francisco, USA"),
    Location(41.9028, 12.4964, "Rome, Italy"),
    Location(52.52, 13.405, "Berlin, Germany"),
    Location(25.2048, 55.2708, "Dubai, UAE"),
    Location(1.3521, 103.8198, "Singapore"),
    Location(19.4326, -99.1332, "Mexico City, Mexico"),
    Location(-34.6037, -58.3816, "Buenos Aires, Argentina"),
    Location(59.3293, 18.0686, "Stockholm, Sweden"),
    Location(30.0444, 31.2357, "Cairo, Egypt"),
)

DEFAULT_LOCATION = PRESET_LOCATIONS[0]

_COORD_PATTERN = re.compile(r"^\s*([-+]?\d+(?:\.\d+)?)\s*[, ]\s*([-+]?\d+(?:\.\d+)?)\s*$")


class InvalidInputError(ValueError):
    """Coordinates or time string rejected before reaching the core."""


class LocationNotFoundError(LookupError):
    """Place name matches no preset location."""


def make_location(latitude: float, longitude: float, name: str = "") -> Location:
    """Validate coordinates and return a Location.

    An empty name defaults to the formatted coordinates.

    Raises:
        InvalidInputError: On non-finite or out-of-range coordinates.
    """
    if not (math.isfinite(latitude) and math.isfinite(longitude)):
        raise InvalidInputError("Please enter valid numbers for latitude and longitude")
    if not -90 <= latitude <= 90:
        raise InvalidInputError("Latitude must be between -90 and 90 degrees")
    if not -180 <= longitude <= 180:
        raise InvalidInputError("Longitude must be between -180 and 180 degrees")
    name = name.strip() or f"{latitude:.4f}, {longitude:.4f}"
    return Location(latitude=latitude, longitude=longitude, name=name)


def search_locations(query: str) -> list[Location]:
    """Case-insensitive substring search over the preset places."""
    needle = query.strip().lower()
    if not needle:
        return []
    return [loc for loc in PRESET_LOCATIONS if needle in loc.name.lower()]


def resolve_place(place: str) -> Location:
    """Turn a place string into a Location.

    Accepts ``"lat, lng"`` (manual entry) or a preset name. An exact name match
    wins over a substring match; among substring matches the first preset wins.

    Raises:
        InvalidInputError: When manual coordinates are out of range.
        LocationNotFoundError: When no preset matches.
    """
    match = _COORD_PATTERN.match(place)
    if match:
        return make_location(float(match.group(1)), float(match.group(2)))

    results = search_locations(place)
    if not results:
        raise LocationNotFoundError(f"Location not found: {place}")
    wanted = place.strip().lower()
    for loc in results:
        if loc.name.lower() == wanted:
            return loc
    return results[0]


def parse_when(when: str) -> datetime:
    """Parse "YYYY-MM-DD HH:MM" or any ISO 8601 string.

    Raises:
        InvalidInputError: When the string is not a valid date/time.
    """
    try:
        return datetime.fromisoformat(when.strip())
    except ValueError as exc:
        raise InvalidInputError(f"Invalid date/time: {when!r}") from exc


def resolve_query(query: QueryInput) -> ObserverContext:
    """Validate a QueryInput and return the ObserverContext the core expects."""
    location = resolve_place(query.place)
    when = parse_when(query.when)
    LOG.debug("Resolved %r at %r to %s", query.place, query.when, location)
    return ObserverContext(location=location, when=when)


def timezone_name(location: Location) -> str:
    """IANA zone for the location, UTC where the lookup has no answer."""
    tz_str = _tf.timezone_at(lat=location.latitude, lng=location.longitude)
    if tz_str is None:
        LOG.debug("No timezone for %s; using UTC", location)
        return "UTC"
    return tz_str


def local_time(when: datetime, location: Location) -> datetime:
    """Return ``when`` as an aware datetime in the observer's timezone.

    A naive datetime is read as the observer's wall clock. Ambiguous or
    skipped wall-clock times (DST transitions) resolve to standard time.
    """
    local_tz = timezone(timezone_name(location))
    if when.tzinfo is None:
        return local_tz.localize(when, is_dst=False)
    return when.astimezone(local_tz)
