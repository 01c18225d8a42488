"""
Global Configuration for SGPKit Package
=======================================

This module provides package-wide configuration settings that users can modify
to control the gravity model handed to the SGP4 engine, validation behavior,
and default plotting options.

Examples
--------
View current configuration:

>>> import sgpkit
>>> print(sgpkit.config)

Modify settings:

>>> sgpkit.config.GRAVITY_MODEL = 'wgs84'
>>> sgpkit.config.DEFAULT_TRACK_POINTS = 500

Reset to defaults:

>>> sgpkit.config.reset()

Temporarily modify settings:

>>> with sgpkit.temp_config(STRICT_VALIDATION=False):
...     # Structural TLE problems only warn inside this block
...     tle.validate()

Notes
-----
These settings affect package-wide behavior. Modifying them will impact
all subsequent operations until changed again or reset.
"""

from dataclasses import dataclass
from contextlib import contextmanager


@dataclass
class SGPKitConfig:
    """
    Global configuration for SGPKit package.

    Attributes
    ----------
    GRAVITY_MODEL : str
        Gravity model used to initialise the SGP4 engine and the reference
        ellipsoid for geodetic output. One of 'wgs72', 'wgs72old', 'wgs84'.
        Default: 'wgs72' (the model TLEs are generated with)
    STRICT_VALIDATION : bool
        If True, structural TLE validation failures raise TLEError.
        If False, they issue warnings.
        Default: True
    SPEED_UNITS_PER_HOUR : float
        Factor converting the engine's km/s velocity magnitude into the
        km/h speed reported by SatelliteData.
        Default: 3600.0
    DEFAULT_TRACK_POINTS : int
        Default number of samples for ground track export and plotting.
        Default: 1000
    DEFAULT_TRACK_COLOR : str
        Default color for ground track lines in plots.
        Default: 'red'
    DEFAULT_STATION_COLOR : str
        Default marker color for ground stations in plots.
        Default: 'blue'
    DEFAULT_PROJECTION : str
        Default plotly geo projection for ground track plots.
        Default: 'equirectangular'
    """

    # Engine
    GRAVITY_MODEL: str = 'wgs72'

    # Validation behavior
    STRICT_VALIDATION: bool = True

    # Output units
    SPEED_UNITS_PER_HOUR: float = 3600.0

    # Ground track defaults
    DEFAULT_TRACK_POINTS: int = 1000
    DEFAULT_TRACK_COLOR: str = 'red'
    DEFAULT_STATION_COLOR: str = 'blue'
    DEFAULT_PROJECTION: str = 'equirectangular'

    def reset(self):
        """
        Reset all configuration values to package defaults.

        Examples
        --------
        >>> import sgpkit
        >>> sgpkit.config.GRAVITY_MODEL = 'wgs84'  # Modify
        >>> sgpkit.config.reset()  # Back to defaults
        >>> sgpkit.config.GRAVITY_MODEL
        'wgs72'
        """
        defaults = SGPKitConfig()
        for key in self.__dataclass_fields__:
            setattr(self, key, getattr(defaults, key))

    def __repr__(self):
        """Return formatted string showing all configuration values."""
        lines = ["SGPKitConfig:"]
        lines.append("  Engine:")
        lines.append(f"    GRAVITY_MODEL = '{self.GRAVITY_MODEL}'")
        lines.append("  Behavior:")
        lines.append(f"    STRICT_VALIDATION = {self.STRICT_VALIDATION}")
        lines.append("  Units:")
        lines.append(f"    SPEED_UNITS_PER_HOUR = {self.SPEED_UNITS_PER_HOUR}")
        lines.append("  Ground Track:")
        lines.append(f"    DEFAULT_TRACK_POINTS = {self.DEFAULT_TRACK_POINTS}")
        lines.append(f"    DEFAULT_TRACK_COLOR = '{self.DEFAULT_TRACK_COLOR}'")
        lines.append(f"    DEFAULT_STATION_COLOR = '{self.DEFAULT_STATION_COLOR}'")
        lines.append(f"    DEFAULT_PROJECTION = '{self.DEFAULT_PROJECTION}'")
        return "\n".join(lines)


# Global configuration instance
config = SGPKitConfig()


@contextmanager
def temp_config(**kwargs):
    """
    Context manager for temporarily modifying configuration values.

    Configuration is automatically restored when the context exits,
    even if an exception occurs.

    Parameters
    ----------
    **kwargs
        Configuration attributes to temporarily modify.

    Examples
    --------
    >>> import sgpkit
    >>> with sgpkit.temp_config(GRAVITY_MODEL='wgs84'):
    ...     data = sgpkit.TLEInterpreter().satellite_data(tle, date)
    >>> # Original config restored here
    >>> sgpkit.config.GRAVITY_MODEL
    'wgs72'

    Raises
    ------
    AttributeError
        If an invalid configuration attribute is specified.
    """
    old_values = {}
    for key, value in kwargs.items():
        if not hasattr(config, key):
            raise AttributeError(
                f"SGPKitConfig has no attribute '{key}'. "
                f"Valid attributes: {list(config.__dataclass_fields__.keys())}"
            )
        old_values[key] = getattr(config, key)
        setattr(config, key, value)

    try:
        yield config
    finally:
        for key, value in old_values.items():
            setattr(config, key, value)
