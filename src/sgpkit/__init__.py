"""
SGPKit: Satellite State from Two-Line Element Sets

A Python package that turns TLE records into satellite positions, speeds,
altitudes and ground-station look angles using the SGP4/SDP4 propagator.
"""

import logging

# Core classes
from .tle import TLE
from .parser import TLEParser
from .decoder import TLEDecoder
from .encoder import TLEEncoder
from .propagator import SGP4Propagator
from .interpreter import TLEInterpreter
from .ground_track import GroundTrack
from .satellite_data import SatelliteData, LookAngles, GroundStation, TEMEState

# Errors
from .errors import (
    ErrorCode, SGPKIT_ERROR_DOMAIN,
    SGPKitError, TLEError, SatelliteError, GenericError,
    TLEParserError, TLEDecodingError, TLEEncodingError,
    ParserErrorReason, DecodingErrorReason, EncodingErrorReason,
)

# Configuration
from .config import config, temp_config

logging.getLogger(__name__).addHandler(logging.NullHandler())

# Package metadata
__version__ = "0.1.0"
__author__ = "Shane Billingsley"

# Define what gets imported with "from sgpkit import *"
__all__ = [
    # Classes
    "TLE",
    "TLEParser",
    "TLEDecoder",
    "TLEEncoder",
    "SGP4Propagator",
    "TLEInterpreter",
    "GroundTrack",
    "SatelliteData",
    "LookAngles",
    "GroundStation",
    "TEMEState",
    # Errors
    "ErrorCode",
    "SGPKIT_ERROR_DOMAIN",
    "SGPKitError",
    "TLEError",
    "SatelliteError",
    "GenericError",
    "TLEParserError",
    "TLEDecodingError",
    "TLEEncodingError",
    "ParserErrorReason",
    "DecodingErrorReason",
    "EncodingErrorReason",
    # Configuration
    "config",
    "temp_config",
]
