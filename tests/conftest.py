"""
Pytest Configuration and Fixtures
=================================

Shared fixtures for the SGPKit test suite.
"""
import pytest
from datetime import datetime, timezone
from pathlib import Path

from sgpkit import TLE, config

# Path to test data
DATA_DIR = Path(__file__).parent / "data"

ISS_2013_LINE1 = "1 25544U 98067A   13165.59097222  .00004759  00000-0  88814-4 0    47"
ISS_2013_LINE2 = "2 25544  51.6478 121.2152 0011003  68.5125 263.9959 15.50783143834295"


@pytest.fixture(scope="session")
def data_dir():
    """Directory holding TLE fixture files."""
    return DATA_DIR


@pytest.fixture
def load_data(data_dir):
    """Read a fixture file as raw bytes."""
    def _load(name):
        return (data_dir / name).read_bytes()
    return _load


@pytest.fixture
def iss_tle():
    """ISS element set from June 2013 (untitled)."""
    return TLE("", ISS_2013_LINE1, ISS_2013_LINE2)


@pytest.fixture
def iss_date():
    """2013-06-15 02:57:07.200 UTC, about 12.8 h after the ISS epoch."""
    return datetime(2013, 6, 15, 2, 57, 7, 200000, tzinfo=timezone.utc)


@pytest.fixture
def zarya_tle():
    """Element set stored in valid_tle.txt."""
    return TLE(
        title="ISS (ZARYA)",
        first_line="1 11416U 79057A   80003.44366214  .00000727  00000-0  33454-3 0   878",
        second_line="2 11416  98.7309  35.7226 0013335  92.0280 268.2428 14.22474848 27074",
    )


@pytest.fixture
def three_tles():
    """Element sets stored in three_valid_tle.txt."""
    return [
        TLE(
            title="ISS (ZARYA)",
            first_line="1 25544U 98067A   25311.45303466  .00013372  00000+0  24333-3 0  9996",
            second_line="2 25544  51.6332 317.1578 0005147  27.3119 332.8140 15.49822938537382",
        ),
        TLE(
            title="CSS (TIANHE)",
            first_line="1 48274U 21035A   25311.80807516  .00039652  00000+0  46682-3 0  9996",
            second_line="2 48274  41.4662 228.8136 0005483 340.8611  19.2021 15.60624711258578",
        ),
        TLE(
            title="ISS (NAUKA)",
            first_line="1 49044U 21066A   25311.19511068  .00011482  00000+0  21019-3 0  9990",
            second_line="2 49044  51.6334 318.4356 0005154  25.9626 334.1621 15.49813276230449",
        ),
    ]


@pytest.fixture(autouse=True)
def reset_config():
    """Leave the global configuration untouched between tests."""
    yield
    config.reset()
