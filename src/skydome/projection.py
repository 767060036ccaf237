"""Zenith-centred azimuthal projection of horizontal coordinates onto a disk.

Altitude 90 maps to the surface centre, altitude 0 to the rim at ``radius``.
Azimuth 0 (north) points up and increases clockwise. Negative altitudes land
outside the disk; culling them is the visibility filter's job, not ours.
"""

import math
from dataclasses import dataclass

from skydome.models import CelestialBody, ProjectedPoint, SkyPosition
from skydome.visibility import is_visible


class SurfaceConfigError(ValueError):
    """The surface is non-finite or too small for the requested padding."""


@dataclass(frozen=True)
class SurfaceGeometry:
    """Render surface size. Rejects any configuration with a non-positive radius."""

    width: float
    height: float
    padding: float = 30.0

    def __post_init__(self) -> None:
        if not all(math.isfinite(v) for v in (self.width, self.height, self.padding)):
            raise SurfaceConfigError(
                f"Surface size and padding must be finite, got "
                f"{self.width}x{self.height} padding {self.padding}"
            )
        if self.width <= 0 or self.height <= 0:
            raise SurfaceConfigError(
                f"Surface must have positive size, got {self.width}x{self.height}"
            )
        if self.padding < 0:
            raise SurfaceConfigError(f"Padding must be >= 0, got {self.padding}")
        if self.radius <= 0:
            raise SurfaceConfigError(
                f"Surface {self.width}x{self.height} leaves no room for padding "
                f"{self.padding} (radius {self.radius})"
            )

    @property
    def radius(self) -> float:
        return min(self.width, self.height) / 2 - self.padding

    @property
    def center_x(self) -> float:
        return self.width / 2

    @property
    def center_y(self) -> float:
        return self.height / 2


def project_on(surface: SurfaceGeometry, altitude: float, azimuth: float) -> tuple[float, float]:
    """Surface coordinates for an (altitude, azimuth) pair, unclamped."""
    distance = surface.radius * (90 - altitude) / 90
    az = math.radians(azimuth)
    x = surface.center_x + distance * math.sin(az)
    y = surface.center_y - distance * math.cos(az)
    return x, y


def project(
    position: SkyPosition, width: float, height: float, padding: float
) -> tuple[float, float]:
    """Project a sky position onto a ``width`` x ``height`` surface.

    Raises:
        SurfaceConfigError: When ``min(width, height) / 2 - padding <= 0``.
    """
    surface = SurfaceGeometry(width=width, height=height, padding=padding)
    return project_on(surface, position.altitude, position.azimuth)


def project_body(body: CelestialBody, surface: SurfaceGeometry) -> ProjectedPoint:
    x, y = project_on(surface, body.altitude, body.azimuth)
    return ProjectedPoint(x=x, y=y, visible=is_visible(body))


def altitude_ring_radius(surface: SurfaceGeometry, altitude: float) -> float:
    """Radius of the circle of constant altitude."""
    return surface.radius * (1 - altitude / 90)
