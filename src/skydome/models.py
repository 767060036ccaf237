"""Data model definitions: explicit boundaries between input, generation, projection, and render layers."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class QueryInput:
    """Raw user input. Not yet validated."""

    place: str  # Preset place name ("New York") or "lat, lng"
    when: str  # "YYYY-MM-DD HH:MM" or ISO 8601 string


@dataclass(frozen=True)
class Location:
    """Observer position. Range-checked by the input layer before it reaches the core."""

    latitude: float  # Decimal degrees, [-90, 90]
    longitude: float  # Decimal degrees, [-180, 180]
    name: str = ""


@dataclass(frozen=True)
class ObserverContext:
    """Validated location + instant. Input to frame generation."""

    location: Location
    when: datetime  # Naive = observer wall clock, aware = absolute instant


@dataclass(frozen=True)
class SkyPosition:
    """Horizontal coordinates of a point on the sky."""

    altitude: float  # Degrees above horizon (negative = below)
    azimuth: float  # Degrees, 0=N, 90=E, clockwise


@dataclass(frozen=True)
class CelestialBody:
    """A single generated body. Created once per frame, never mutated."""

    id: str  # "star-17", "named-star-3"
    magnitude: float  # Apparent magnitude (lower = brighter)
    altitude: float  # Degrees, [-90, 90]
    azimuth: float  # Degrees, [0, 360)
    name: str | None = None  # Set only for the reference stars

    @property
    def position(self) -> SkyPosition:
        return SkyPosition(altitude=self.altitude, azimuth=self.azimuth)


@dataclass(frozen=True)
class ConstellationLine:
    """One edge of a constellation's line graph. Endpoints are lookups, not copies."""

    start: CelestialBody
    end: CelestialBody


@dataclass(frozen=True)
class ConstellationDef:
    """Which slice of the visible bodies forms a constellation."""

    name: str
    star_count: int
    start_index: int


@dataclass(frozen=True)
class Constellation:
    """Named path graph over visible bodies."""

    name: str
    lines: tuple[ConstellationLine, ...]
    center: SkyPosition  # Derived: mean altitude/azimuth of members

    @property
    def members(self) -> tuple[CelestialBody, ...]:
        """Endpoint bodies in path order, without repeats."""
        ordered: dict[str, CelestialBody] = {}
        for line in self.lines:
            ordered.setdefault(line.start.id, line.start)
            ordered.setdefault(line.end.id, line.end)
        return tuple(ordered.values())

    @property
    def is_empty(self) -> bool:
        return not self.lines


@dataclass(frozen=True)
class Frame:
    """One complete generation cycle. Superseded wholesale by the next one."""

    bodies: tuple[CelestialBody, ...]
    constellations: tuple[Constellation, ...]
    time: datetime
    location: Location


@dataclass(frozen=True)
class ProjectedPoint:
    """Surface-space position of a body for one frame at one surface size."""

    x: float
    y: float
    visible: bool


@dataclass(frozen=True)
class StarPoint:
    """Draw a body as a filled point."""

    x: float
    y: float
    radius: float
    intensity: float  # 0.35 (faint) … 1.0 (bright)
    glow: bool  # Bright bodies get a halo
    body_id: str


@dataclass(frozen=True)
class LineSegment:
    """Draw one constellation edge."""

    x1: float
    y1: float
    x2: float
    y2: float
    start_id: str
    end_id: str
    constellation: str


@dataclass(frozen=True)
class TextLabel:
    """Text anchor. kind: "star", "constellation", "altitude", or "cardinal"."""

    x: float
    y: float
    text: str
    kind: str


@dataclass(frozen=True)
class GuideCircle:
    """Horizon rim or a circle of equal altitude."""

    cx: float
    cy: float
    radius: float
    kind: str  # "horizon" or "altitude"
    altitude: float


DrawInstruction = StarPoint | LineSegment | TextLabel | GuideCircle


@dataclass(frozen=True)
class RenderableScene:
    """The sole input to renderers. Order-stable, contains only visible elements."""

    width: float
    height: float
    padding: float
    radius: float
    center_x: float
    center_y: float
    instructions: tuple[DrawInstruction, ...]

    @property
    def points(self) -> tuple[StarPoint, ...]:
        return tuple(i for i in self.instructions if isinstance(i, StarPoint))

    @property
    def segments(self) -> tuple[LineSegment, ...]:
        return tuple(i for i in self.instructions if isinstance(i, LineSegment))

    @property
    def labels(self) -> tuple[TextLabel, ...]:
        return tuple(i for i in self.instructions if isinstance(i, TextLabel))

    @property
    def circles(self) -> tuple[GuideCircle, ...]:
        return tuple(i for i in self.instructions if isinstance(i, GuideCircle))
