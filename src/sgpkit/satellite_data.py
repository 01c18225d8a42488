'''Development code for a TLE propagation package
Result dataclasses: SatelliteData, LookAngles, GroundStation, TEMEState'''

import numpy as np
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class SatelliteData:
    """
    Snapshot of satellite state in geodetic coordinates.

    Values are expressed in display-friendly units. This type is a plain
    data container and performs no validation.

    Attributes
    ----------
    latitude : float
        Geodetic latitude [deg], range -90..90
    longitude : float
        Geodetic longitude [deg], range -180..180
    speed : float
        Inertial speed magnitude [km/h]
    altitude : float
        Height above the reference ellipsoid [km]
    """
    latitude: float
    longitude: float
    speed: float
    altitude: float

    def __str__(self):
        return (f"SatelliteData(lat={self.latitude:.6f} deg, "
                f"lon={self.longitude:.6f} deg, alt={self.altitude:.3f} km, "
                f"speed={self.speed:.3f} km/h)")


@dataclass(frozen=True)
class LookAngles:
    """
    Topocentric view of a satellite from a ground station.

    Attributes
    ----------
    azimuth : float
        Azimuth [deg] measured clockwise from north, range 0..360
    elevation : float
        Elevation above the local horizon [deg]
    range : float
        Slant range [km]
    range_rate : float
        Rate of change of slant range [km/s], negative when approaching
    """
    azimuth: float
    elevation: float
    range: float
    range_rate: float

    @property
    def is_visible(self) -> bool:
        """True when the satellite is above the geometric horizon"""
        return self.elevation > 0.0


@dataclass(frozen=True)
class GroundStation:
    """
    Immutable observer location on the reference ellipsoid.

    Attributes
    ----------
    latitude : float
        Geodetic latitude [deg]
    longitude : float
        Geodetic longitude [deg]
    altitude : float, optional
        Height above the ellipsoid [km] (default 0)
    name : str, optional
        Station identifier
    """
    latitude: float
    longitude: float
    altitude: float = 0.0
    name: Optional[str] = None

    def __post_init__(self):
        for label, value in (("Latitude", self.latitude),
                             ("Longitude", self.longitude),
                             ("Altitude", self.altitude)):
            if not np.isfinite(value):
                raise ValueError(f"{label} must be finite, got {value}")
        if not -90.0 <= self.latitude <= 90.0:
            raise ValueError(f"Latitude must be in [-90, 90] deg, got {self.latitude}")
        if not -180.0 <= self.longitude <= 360.0:
            raise ValueError(f"Longitude must be in [-180, 360] deg, got {self.longitude}")


@dataclass(frozen=True)
class TEMEState:
    """
    Raw SGP4 output in the True Equator Mean Equinox frame.

    Position [km] and velocity [km/s] are stored as read-only arrays.
    """
    time: datetime
    position: np.ndarray = field(repr=False)
    velocity: np.ndarray = field(repr=False)

    def __post_init__(self):
        for name in ("position", "velocity"):
            arr = np.array(getattr(self, name), dtype=float)
            if arr.shape != (3,):
                raise ValueError(f"{name.capitalize()} must be a 3-vector, got shape {arr.shape}")
            arr.flags.writeable = False  # Make array immutable
            object.__setattr__(self, name, arr)

    @property
    def speed(self) -> float:
        """Velocity magnitude [km/s]"""
        return float(np.linalg.norm(self.velocity))

    @property
    def radius(self) -> float:
        """Distance from Earth's center [km]"""
        return float(np.linalg.norm(self.position))

    def __eq__(self, other) -> bool:
        if not isinstance(other, TEMEState):
            return NotImplemented
        return (self.time == other.time and
                np.array_equal(self.position, other.position) and
                np.array_equal(self.velocity, other.velocity))

    def __hash__(self) -> int:
        return hash((self.time, tuple(self.position), tuple(self.velocity)))
