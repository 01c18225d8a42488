'''Development code for a TLE propagation package
Earth rotation and geodetic/topocentric conversions for SGP4 output'''

import numpy as np
from dataclasses import dataclass
from datetime import datetime
from typing import Tuple
from sgp4.api import jday
from .utils import to_utc

# Sidereal days per solar day
OMEGA_E = 1.00273790934
SECONDS_PER_DAY = 86400.0
TWO_PI = 2.0 * np.pi


@dataclass(frozen=True)
class Ellipsoid:
    """
    Reference ellipsoid for geodetic conversions.

    Attributes
    ----------
    radius : float
        Equatorial radius [km]
    flattening : float
        Flattening f = (a - b) / a
    """
    radius: float
    flattening: float
    name: str = ""

    def __post_init__(self):
        if self.radius <= 0:
            raise ValueError(f"Radius must be positive, got {self.radius}")
        if not 0 <= self.flattening < 1:
            raise ValueError(f"Flattening must be in [0, 1), got {self.flattening}")

    @property
    def e2(self) -> float:
        """First eccentricity squared"""
        return self.flattening * (2.0 - self.flattening)


WGS72 = Ellipsoid(radius=6378.135, flattening=1.0 / 298.26, name='WGS72')
WGS84 = Ellipsoid(radius=6378.137, flattening=1.0 / 298.257223563, name='WGS84')

# Ellipsoid matching each SGP4 gravity model
ELLIPSOIDS = {
    'wgs72old': WGS72,
    'wgs72': WGS72,
    'wgs84': WGS84,
}


def julian_date(date: datetime) -> Tuple[float, float]:
    """
    Split Julian date of a datetime, as expected by Satrec.sgp4().

    Naive datetimes are taken as UTC.

    Returns
    -------
    jd : float
        Julian date of the preceding midnight
    fr : float
        Fraction of the day
    """
    t = to_utc(date)
    return jday(t.year, t.month, t.day, t.hour, t.minute,
                t.second + t.microsecond * 1e-6)


def gmst(jd: float, fr: float = 0.0) -> float:
    """
    Greenwich mean sidereal time.

    IAU-82 polynomial evaluated at the previous midnight, plus the sidereal
    rotation accumulated over the rest of the day.

    Parameters
    ----------
    jd, fr : float
        Split Julian date (UT1 ~ UTC)

    Returns
    -------
    float
        GMST [rad], range 0..2pi
    """
    jd0 = np.floor(jd + fr + 0.5) - 0.5
    day_fraction = (jd - jd0) + fr
    t = (jd0 - 2451545.0) / 36525.0
    seconds = 24110.54841 + t * (8640184.812866 + t * (0.093104 - t * 6.2e-6))
    seconds += day_fraction * OMEGA_E * SECONDS_PER_DAY
    # 360 deg per 86400 s of sidereal time
    return float(np.mod(np.radians(seconds / 240.0), TWO_PI))


def wrap_longitude(angle: float) -> float:
    """Wrap an angle [rad] into [-pi, pi)"""
    return float(np.mod(angle + np.pi, TWO_PI) - np.pi)


def teme_to_geodetic(position, theta: float,
                     ellipsoid: Ellipsoid = WGS72) -> Tuple[float, float, float]:
    """
    Geodetic coordinates of a TEME position.

    Parameters
    ----------
    position : array-like
        TEME position [km]
    theta : float
        Greenwich mean sidereal time [rad]
    ellipsoid : Ellipsoid, optional
        Reference ellipsoid (default WGS72)

    Returns
    -------
    latitude, longitude, altitude : float
        Geodetic latitude [rad], longitude [rad] in [-pi, pi), height [km]
    """
    x, y, z = np.asarray(position, dtype=float)
    longitude = wrap_longitude(np.arctan2(y, x) - theta)

    r = np.hypot(x, y)
    e2 = ellipsoid.e2
    latitude = np.arctan2(z, r)
    # Fixed-point iteration on the geodetic latitude
    for _ in range(20):
        phi = latitude
        sin_phi = np.sin(phi)
        c = 1.0 / np.sqrt(1.0 - e2 * sin_phi * sin_phi)
        latitude = np.arctan2(z + ellipsoid.radius * c * e2 * sin_phi, r)
        if abs(latitude - phi) < 1e-10:
            break

    # Stays finite at the poles
    sin_lat = np.sin(latitude)
    altitude = (r * np.cos(latitude) + z * sin_lat
                - ellipsoid.radius * np.sqrt(1.0 - e2 * sin_lat * sin_lat))
    return float(latitude), float(longitude), float(altitude)


def geodetic_to_eci(latitude: float, longitude: float, altitude: float,
                    theta: float, ellipsoid: Ellipsoid = WGS72
                    ) -> Tuple[np.ndarray, np.ndarray]:
    """
    Inertial position and velocity of a point fixed on the rotating Earth.

    Parameters
    ----------
    latitude, longitude : float
        Geodetic latitude and longitude [rad]
    altitude : float
        Height above the ellipsoid [km]
    theta : float
        Greenwich mean sidereal time [rad]
    ellipsoid : Ellipsoid, optional
        Reference ellipsoid (default WGS72)

    Returns
    -------
    position : np.ndarray
        [km]
    velocity : np.ndarray
        [km/s], due to Earth rotation only
    """
    rotation_rate = TWO_PI * OMEGA_E / SECONDS_PER_DAY
    local_theta = np.mod(theta + longitude, TWO_PI)
    f = ellipsoid.flattening

    sin_lat = np.sin(latitude)
    c = 1.0 / np.sqrt(1.0 + f * (f - 2.0) * sin_lat * sin_lat)
    s = (1.0 - f) ** 2 * c
    achcp = (ellipsoid.radius * c + altitude) * np.cos(latitude)

    position = np.array([
        achcp * np.cos(local_theta),
        achcp * np.sin(local_theta),
        (ellipsoid.radius * s + altitude) * sin_lat,
    ])
    velocity = np.array([
        -rotation_rate * position[1],
        rotation_rate * position[0],
        0.0,
    ])
    return position, velocity


def topocentric(sat_position, sat_velocity, obs_position, obs_velocity,
                latitude: float, local_theta: float
                ) -> Tuple[float, float, float, float]:
    """
    Look angles from an observer to a satellite (SEZ frame).

    Parameters
    ----------
    sat_position, sat_velocity : array-like
        Satellite inertial state [km, km/s]
    obs_position, obs_velocity : array-like
        Observer inertial state [km, km/s]
    latitude : float
        Observer geodetic latitude [rad]
    local_theta : float
        Observer local mean sidereal time [rad]

    Returns
    -------
    azimuth, elevation : float
        [rad], azimuth in [0, 2pi)
    slant_range : float
        [km]
    range_rate : float
        [km/s]
    """
    rho = np.asarray(sat_position, dtype=float) - np.asarray(obs_position, dtype=float)
    rho_dot = np.asarray(sat_velocity, dtype=float) - np.asarray(obs_velocity, dtype=float)
    slant_range = float(np.linalg.norm(rho))
    if slant_range == 0.0:
        raise ValueError("Observer and satellite positions coincide")

    sin_lat, cos_lat = np.sin(latitude), np.cos(latitude)
    sin_theta, cos_theta = np.sin(local_theta), np.cos(local_theta)

    top_s = sin_lat * cos_theta * rho[0] + sin_lat * sin_theta * rho[1] - cos_lat * rho[2]
    top_e = -sin_theta * rho[0] + cos_theta * rho[1]
    top_z = cos_lat * cos_theta * rho[0] + cos_lat * sin_theta * rho[1] + sin_lat * rho[2]

    azimuth = float(np.mod(np.arctan2(top_e, -top_s), TWO_PI))
    elevation = float(np.arcsin(np.clip(top_z / slant_range, -1.0, 1.0)))
    range_rate = float(np.dot(rho, rho_dot) / slant_range)
    return azimuth, elevation, slant_range, range_rate
