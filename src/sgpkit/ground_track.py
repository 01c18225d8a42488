'''Development code for a TLE propagation package
GroundTrack class definition'''

import numpy as np
import pandas as pd
import plotly.graph_objects as go
from datetime import datetime
from typing import Iterable, List, Optional, Union, TYPE_CHECKING
from .config import config
from .satellite_data import SatelliteData, GroundStation
from .tle import TLE
from .utils import to_utc
if TYPE_CHECKING:
    from .propagator import SGP4Propagator


class GroundTrack:
    """
    Sub-satellite track of one TLE over a time span.

    States are computed on demand by the propagator; nothing is stored
    between calls.

    Attributes:
        tle: The element set (immutable)
        propagator: SGP4Propagator used for every evaluation
        start: Start time (UTC)
        end: End time (UTC)
    """
    # ========== CONSTRUCTION ==========
    def __init__(self, propagator: "SGP4Propagator", tle: TLE,
                 start: datetime, end: datetime):
        start, end = to_utc(start), to_utc(end)
        if end < start:
            raise ValueError(f"end ({end.isoformat()}) must not precede "
                             f"start ({start.isoformat()})")
        self._propagator = propagator
        self._tle = tle
        self._start = start
        self._end = end

    # ========== PROPERTY ACCESS ==========
    @property
    def tle(self) -> TLE:
        return self._tle

    @property
    def propagator(self) -> "SGP4Propagator":
        return self._propagator

    @property
    def start(self) -> datetime:
        return self._start

    @property
    def end(self) -> datetime:
        return self._end

    @property
    def duration(self):
        """Track duration as a timedelta."""
        return self.end - self.start

    # ========== EVALUATION ==========
    def state_at(self, t: datetime) -> SatelliteData:
        """
        Satellite data at a time inside the track.

        Parameters:
            t: Time to query (must be in [start, end])
        """
        t = self._validate_time(t)
        return self._propagator.get_satellite_data(self._tle, t)

    def evaluate(self, times: Union[datetime, Iterable[datetime]]
                 ) -> Union[SatelliteData, List[SatelliteData]]:
        """
        Evaluate the track at one or more times.

        Returns:
            Single SatelliteData if times is a datetime,
            list of SatelliteData otherwise
        """
        if isinstance(times, datetime):
            return self.state_at(times)
        return [self.state_at(t) for t in times]

    def sample(self, n_points: int = 100) -> List[SatelliteData]:
        """Uniformly sample the track in time."""
        if n_points < 2:
            raise ValueError("n_points must be at least 2, use .state_at()")
        return self.evaluate(self.get_times(n_points))

    def get_times(self, n_points: int = 100) -> List[datetime]:
        """Uniform time grid spanning the track."""
        # datetime holds microseconds at most
        index = pd.date_range(self.start, self.end, periods=n_points).floor("us")
        return list(index.to_pydatetime())

    def contains_time(self, t: datetime) -> bool:
        """Check if time is within track bounds."""
        return self.start <= to_utc(t) <= self.end

    def _validate_time(self, t: datetime) -> datetime:
        t = to_utc(t)
        if not (self.start <= t <= self.end):
            raise ValueError(
                f"Time {t.isoformat()} outside track bounds "
                f"[{self.start.isoformat()}, {self.end.isoformat()}]"
            )
        return t

    def to_dataframe(self, times: Optional[Iterable[datetime]] = None,
                     n_points: Optional[int] = None) -> pd.DataFrame:
        """
        Export the track to a pandas DataFrame.

        Parameters:
            times: Specific times to evaluate. If None, uses uniform sampling.
            n_points: Number of uniform samples if times not provided
                (default: config.DEFAULT_TRACK_POINTS)

        Returns:
            DataFrame with columns time, latitude, longitude, altitude, speed
        """
        if times is None:
            times = self.get_times(n_points or config.DEFAULT_TRACK_POINTS)
        else:
            times = [to_utc(t) for t in times]

        states = self.evaluate(times)
        data = {
            'time': pd.to_datetime(times, utc=True),
            'latitude': [s.latitude for s in states],
            'longitude': [s.longitude for s in states],
            'altitude': [s.altitude for s in states],
            'speed': [s.speed for s in states],
        }
        return pd.DataFrame(data)

    # ========== SPECIAL METHODS ==========
    def __repr__(self):
        return (f"GroundTrack(satellite={self._tle.satellite_number}, "
                f"start={self.start.isoformat()}, end={self.end.isoformat()})")

    def __call__(self, t: datetime) -> SatelliteData:
        """Syntactic sugar for .state_at(t)."""
        return self.state_at(t)

    # ========== PLOTTING ==========
    def plot(self, n_points: Optional[int] = None,
             color: Optional[str] = None,
             station: Optional[GroundStation] = None,
             projection: Optional[str] = None) -> go.Figure:
        """
        Map of the ground track.

        Parameters:
            n_points: Number of samples (default: config.DEFAULT_TRACK_POINTS)
            color: Track line color (default: config.DEFAULT_TRACK_COLOR)
            station: Optional ground station to mark on the map
            projection: Plotly geo projection (default: config.DEFAULT_PROJECTION)

        Returns:
            Plotly Figure object
        """
        fig = go.Figure()
        name = self._tle.title or f"Satellite {self._tle.satellite_number}"
        self.add_to_plot(fig, n_points=n_points, color=color, name=name)

        if station is not None:
            fig.add_trace(go.Scattergeo(
                lat=[station.latitude],
                lon=[station.longitude],
                mode='markers+text',
                marker=dict(color=config.DEFAULT_STATION_COLOR, size=8),
                text=[station.name or 'Station'],
                textposition='top center',
                name=station.name or 'Station',
            ))

        fig.update_geos(
            projection_type=projection or config.DEFAULT_PROJECTION,
            showcountries=True,
            showland=True,
        )
        fig.update_layout(title=f"Ground Track: {name}", showlegend=True)
        return fig

    def add_to_plot(self, fig: go.Figure, n_points: Optional[int] = None,
                    color: Optional[str] = None, name: Optional[str] = None,
                    **kwargs) -> go.Figure:
        """
        Add this ground track to an existing Plotly figure.

        Parameters:
            fig: Existing Plotly Figure object
            n_points: Number of samples (default: config.DEFAULT_TRACK_POINTS)
            color: Line color (default: config.DEFAULT_TRACK_COLOR)
            name: Legend name (default: 'Track N')
            **kwargs: Additional arguments passed to Scattergeo

        Returns:
            Updated Plotly Figure object (same object, modified in place)
        """
        df = self.to_dataframe(n_points=n_points)
        lat, lon = self._split_at_antimeridian(df['latitude'].to_numpy(),
                                               df['longitude'].to_numpy())

        if name is None:
            n_existing = sum(1 for trace in fig.data if isinstance(trace, go.Scattergeo))
            name = f'Track {n_existing + 1}'

        fig.add_trace(go.Scattergeo(
            lat=lat,
            lon=lon,
            mode='lines',
            line=dict(color=color or config.DEFAULT_TRACK_COLOR, width=2),
            name=name,
            **kwargs
        ))
        return fig

    @staticmethod
    def _split_at_antimeridian(lat: np.ndarray, lon: np.ndarray):
        """Insert gaps where consecutive longitudes jump across +-180 deg."""
        out_lat: List[Optional[float]] = []
        out_lon: List[Optional[float]] = []
        for i in range(len(lon)):
            if i > 0 and abs(lon[i] - lon[i - 1]) > 180.0:
                out_lat.append(None)
                out_lon.append(None)
            out_lat.append(float(lat[i]))
            out_lon.append(float(lon[i]))
        return out_lat, out_lon
