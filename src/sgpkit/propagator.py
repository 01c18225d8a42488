'''Development code for a TLE propagation package
SGP4Propagator class definition: adapter around the sgp4 engine'''

import logging
import numpy as np
from datetime import datetime
from typing import Optional
from sgp4.api import Satrec, SGP4_ERRORS, WGS72, WGS72OLD, WGS84
from .config import config
from .errors import TLEError, SatelliteError, GenericError, SGPKitError
from .frames import (ELLIPSOIDS, julian_date, gmst, teme_to_geodetic,
                     geodetic_to_eci, topocentric)
from .satellite_data import SatelliteData, LookAngles, GroundStation, TEMEState
from .tle import TLE
from .utils import to_utc

logger = logging.getLogger(__name__)

# sgp4 gravity constant selectors by model name
GRAVITY_MODELS = {
    'wgs72old': WGS72OLD,
    'wgs72': WGS72,
    'wgs84': WGS84,
}


class SGP4Propagator:
    """
    Propagation adapter: TLE + time -> satellite state, or a structured error.

    Every public method either returns a result or raises exactly one
    SGPKitError whose ``code`` tells which stage failed:

    - TLE_ERROR (TLEError): missing or malformed TLE, or the engine rejects it
    - SATELLITE_ERROR (SatelliteError): the engine cannot propagate this
      satellite to the requested time (e.g. decayed orbit)
    - GENERIC_ERROR (GenericError): bad time argument or unexpected failure

    Parameters
    ----------
    gravity_model : str, optional
        'wgs72', 'wgs72old' or 'wgs84'. Defaults to config.GRAVITY_MODEL.
        Also selects the reference ellipsoid for geodetic output.

    Examples
    --------
    >>> propagator = SGP4Propagator()
    >>> data = propagator.get_satellite_data(tle, datetime(2013, 6, 15, 2, 57, 7))
    >>> data.altitude
    411.56...
    """

    def __init__(self, gravity_model: Optional[str] = None):
        if gravity_model is None:
            gravity_model = config.GRAVITY_MODEL
        key = str(gravity_model).lower()
        if key not in GRAVITY_MODELS:
            raise ValueError(
                f"Unknown gravity model '{gravity_model}'. "
                f"Options: {list(GRAVITY_MODELS)}"
            )
        self._gravity_model = key
        self._whichconst = GRAVITY_MODELS[key]
        self._ellipsoid = ELLIPSOIDS[key]

    # ========== PROPERTY ACCESS ==========
    @property
    def gravity_model(self) -> str:
        return self._gravity_model

    @property
    def ellipsoid(self):
        """Reference ellipsoid used for geodetic output"""
        return self._ellipsoid

    # ========== ENGINE ==========
    def satrec(self, tle: TLE) -> Satrec:
        """
        Build the engine record for a TLE.

        Raises
        ------
        TLEError
            If the TLE is missing, structurally invalid, or rejected by the engine
        """
        if tle is None:
            raise TLEError("TLE must not be None")
        if not isinstance(tle, TLE):
            raise TLEError(f"Expected a TLE, got {type(tle).__name__}")

        # Parse what the engine reads; it zero-fills garbage instead of failing
        fields = tle.validate().fields()
        if fields['mean_motion'] <= 0:
            raise TLEError(f"Mean motion must be positive, got {fields['mean_motion']}")

        try:
            sat = Satrec.twoline2rv(tle.first_line, tle.second_line, self._whichconst)
        except ValueError as exc:
            # pure-Python engine rejects malformed lines itself
            raise TLEError(f"Engine rejected TLE: {exc}") from exc
        except Exception as exc:
            raise GenericError(f"Unexpected engine failure while reading TLE: {exc}") from exc

        if sat.error != 0:
            message = SGP4_ERRORS.get(sat.error, f"error code {sat.error}")
            raise TLEError(f"Engine could not initialise TLE: {message}")

        logger.debug("Initialised satellite %s (%s)", sat.satnum, self._gravity_model)
        return sat

    def propagate(self, tle: TLE, date: datetime) -> TEMEState:
        """
        Raw SGP4 state at a given time.

        Parameters
        ----------
        tle : TLE
            The element set
        date : datetime
            Time of interest; naive datetimes are taken as UTC

        Returns
        -------
        TEMEState
            Position [km] and velocity [km/s] in the TEME frame
        """
        sat = self.satrec(tle)
        date = self._check_date(date)
        jd, fr = julian_date(date)

        try:
            error, r, v = sat.sgp4(jd, fr)
        except Exception as exc:
            raise GenericError(f"Unexpected engine failure during propagation: {exc}") from exc

        if error != 0:
            message = SGP4_ERRORS.get(error, f"error code {error}")
            raise SatelliteError(
                f"Propagation of satellite {sat.satnum} to {date.isoformat()} failed: {message}",
                engine_code=error,
            )
        if not (np.all(np.isfinite(r)) and np.all(np.isfinite(v))):
            raise SatelliteError(
                f"Propagation of satellite {sat.satnum} to {date.isoformat()} "
                f"produced a non-finite state"
            )

        logger.debug("Propagated satellite %s to %s", sat.satnum, date.isoformat())
        return TEMEState(time=date, position=r, velocity=v)

    # ========== DERIVED OUTPUTS ==========
    def get_satellite_data(self, tle: TLE, date: datetime) -> SatelliteData:
        """
        Geodetic position, altitude and speed of a satellite at a given time.

        Parameters
        ----------
        tle : TLE
            The element set (required)
        date : datetime
            Time of interest (required); naive datetimes are taken as UTC

        Returns
        -------
        SatelliteData
            Latitude/longitude [deg], altitude [km] and speed [km/h]

        Raises
        ------
        TLEError, SatelliteError, GenericError
            Exactly one, matching ErrorCode.TLE_ERROR, SATELLITE_ERROR,
            GENERIC_ERROR respectively
        """
        state = self.propagate(tle, date)
        return self._guard(self._to_satellite_data, state)

    def get_look_angles(self, tle: TLE, date: datetime,
                        station: GroundStation) -> LookAngles:
        """
        Azimuth, elevation, range and range rate seen from a ground station.

        Parameters
        ----------
        tle : TLE
            The element set
        date : datetime
            Time of interest; naive datetimes are taken as UTC
        station : GroundStation
            Observer location (altitude in km)
        """
        if not isinstance(station, GroundStation):
            raise GenericError(f"Expected a GroundStation, got {type(station).__name__}")
        state = self.propagate(tle, date)
        return self._guard(self._to_look_angles, state, station)

    def _to_satellite_data(self, state: TEMEState) -> SatelliteData:
        theta = gmst(*julian_date(state.time))
        lat, lon, alt = teme_to_geodetic(state.position, theta, self._ellipsoid)
        return SatelliteData(
            latitude=float(np.degrees(lat)),
            longitude=float(np.degrees(lon)),
            speed=state.speed * config.SPEED_UNITS_PER_HOUR,
            altitude=alt,
        )

    def _to_look_angles(self, state: TEMEState, station: GroundStation) -> LookAngles:
        theta = gmst(*julian_date(state.time))
        lat = np.radians(station.latitude)
        lon = np.radians(station.longitude)
        obs_r, obs_v = geodetic_to_eci(lat, lon, station.altitude, theta, self._ellipsoid)
        az, el, rng, rate = topocentric(state.position, state.velocity,
                                        obs_r, obs_v, lat, np.mod(theta + lon, 2 * np.pi))
        return LookAngles(
            azimuth=float(np.degrees(az)),
            elevation=float(np.degrees(el)),
            range=rng,
            range_rate=rate,
        )

    @staticmethod
    def _guard(func, *args):
        """Report conversion failures as GenericError."""
        try:
            return func(*args)
        except SGPKitError:
            raise
        except (ValueError, ArithmeticError) as exc:
            raise GenericError(f"Could not convert propagated state: {exc}") from exc

    @staticmethod
    def _check_date(date) -> datetime:
        if date is None:
            raise GenericError("Date must not be None")
        if not isinstance(date, datetime):
            raise GenericError(f"Expected a datetime, got {type(date).__name__}")
        try:
            return to_utc(date)
        except (OverflowError, ValueError) as exc:
            raise GenericError(f"Cannot convert {date!r} to UTC: {exc}") from exc

    # ========== SPECIAL METHODS ==========
    def __repr__(self):
        return f"SGP4Propagator(gravity_model='{self._gravity_model}')"
