'''Development code for a TLE propagation package
TLEInterpreter class definition'''

import logging
from datetime import datetime
from typing import Optional, Union
from .ground_track import GroundTrack
from .propagator import SGP4Propagator
from .satellite_data import SatelliteData, LookAngles, GroundStation
from .tle import TLE

logger = logging.getLogger(__name__)


class TLEInterpreter:
    """
    Calculates satellite position, speed, altitude and look angles from a TLE.

    Thin facade over SGP4Propagator; its errors (TLEError, SatelliteError,
    GenericError) propagate unchanged.

    Parameters
    ----------
    gravity_model : str, optional
        Passed to SGP4Propagator (default: config.GRAVITY_MODEL)
    propagator : SGP4Propagator, optional
        Use an existing propagator instead of building one
    """

    def __init__(self, gravity_model: Optional[str] = None,
                 propagator: Optional[SGP4Propagator] = None):
        if propagator is not None and gravity_model is not None:
            raise ValueError("Pass either gravity_model or propagator, not both")
        self._propagator = propagator or SGP4Propagator(gravity_model)

    @property
    def propagator(self) -> SGP4Propagator:
        return self._propagator

    def satellite_data(self, tle: TLE, date: datetime) -> SatelliteData:
        """
        SatelliteData for a TLE at the given time.

        Parameters
        ----------
        tle : TLE
            The element set
        date : datetime
            Time for which the satellite state is wanted

        Returns
        -------
        SatelliteData
        """
        return self._propagator.get_satellite_data(tle, date)

    def look_angles(self, tle: TLE, date: datetime,
                    latitude: Union[float, GroundStation],
                    longitude: Optional[float] = None,
                    altitude: float = 0.0) -> LookAngles:
        """
        Look angles of the satellite from a ground station.

        Parameters
        ----------
        tle : TLE
            The element set
        date : datetime
            Time of the observation
        latitude : float or GroundStation
            Station geodetic latitude [deg], or a complete GroundStation
        longitude : float
            Station longitude [deg] (required unless a GroundStation is given)
        altitude : float, optional
            Station height above the ellipsoid [km] (default 0)
        """
        if isinstance(latitude, GroundStation):
            station = latitude
        else:
            if longitude is None:
                raise ValueError("longitude is required when latitude is a number")
            station = GroundStation(latitude, longitude, altitude)
        return self._propagator.get_look_angles(tle, date, station)

    def ground_track(self, tle: TLE, start: datetime, end: datetime) -> GroundTrack:
        """Ground track of the satellite over [start, end]."""
        logger.debug("Ground track for %s from %s to %s", tle.title or "untitled TLE",
                     start, end)
        return GroundTrack(self._propagator, tle, start, end)

    def __repr__(self):
        return f"TLEInterpreter({self._propagator!r})"
