"""
Test suite for SGP4Propagator.

Tests cover:
- Gravity model selection
- Raw TEME propagation
- Error taxonomy: TLE_ERROR, SATELLITE_ERROR, GENERIC_ERROR
- Date handling (naive, aware, invalid)
"""

import math
import numpy as np
import pytest
from datetime import datetime, timedelta, timezone

from sgpkit import (
    SGP4Propagator, TLE, TEMEState, GroundStation, ErrorCode,
    SGPKitError, TLEError, SatelliteError, GenericError, temp_config,
)
import sgpkit.propagator as propagator_module

# Low orbit with a very large drag term; decays well within a year
DECAYING_LINE1 = "1 99999U 24001A   24001.00000000  .00000000  00000-0  50000-0 0  9990"
DECAYING_LINE2 = "2 99999  51.6000 100.0000 0001000  90.0000 270.0000 16.30000000    10"


class FakeSatrec:
    """Stand-in engine record returning a fixed propagation result."""

    def __init__(self, error=0, init_error=0, r=(7000.0, 0.0, 0.0), v=(0.0, 7.5, 0.0)):
        self.error = init_error
        self.satnum = 25544
        self._result = (error, r, v)

    def sgp4(self, jd, fr):
        return self._result


def patch_engine(monkeypatch, **kwargs):
    """Replace the engine record factory used by the propagator."""
    class FakeFactory:
        @staticmethod
        def twoline2rv(line1, line2, whichconst):
            return FakeSatrec(**kwargs)
    monkeypatch.setattr(propagator_module, "Satrec", FakeFactory)


class TestConstruction:
    """Test gravity model selection."""

    def test_default_model_from_config(self):
        assert SGP4Propagator().gravity_model == 'wgs72'

    def test_config_override(self):
        with temp_config(GRAVITY_MODEL='wgs84'):
            propagator = SGP4Propagator()
        assert propagator.gravity_model == 'wgs84'
        assert propagator.ellipsoid.name == 'WGS84'

    def test_case_insensitive(self):
        assert SGP4Propagator('WGS72OLD').gravity_model == 'wgs72old'

    def test_unknown_model(self):
        with pytest.raises(ValueError, match="Unknown gravity model"):
            SGP4Propagator('egm96')

    def test_repr(self):
        assert repr(SGP4Propagator()) == "SGP4Propagator(gravity_model='wgs72')"


class TestPropagate:
    """Test raw TEME output."""

    def test_returns_teme_state(self, iss_tle, iss_date):
        state = SGP4Propagator().propagate(iss_tle, iss_date)

        assert isinstance(state, TEMEState)
        assert state.position.shape == (3,)
        assert state.velocity.shape == (3,)
        assert state.time == iss_date

    def test_low_earth_orbit_magnitudes(self, iss_tle, iss_date):
        """ISS sits roughly 6700-6800 km from Earth's center at ~7.7 km/s."""
        state = SGP4Propagator().propagate(iss_tle, iss_date)
        assert 6650.0 < state.radius < 6850.0
        assert 7.5 < state.speed < 7.8

    def test_state_is_read_only(self, iss_tle, iss_date):
        state = SGP4Propagator().propagate(iss_tle, iss_date)
        with pytest.raises(ValueError):
            state.position[0] = 0.0

    def test_naive_date_is_utc(self, iss_tle, iss_date):
        """Naive datetimes are interpreted as UTC."""
        propagator = SGP4Propagator()
        aware = propagator.propagate(iss_tle, iss_date)
        naive = propagator.propagate(iss_tle, iss_date.replace(tzinfo=None))
        np.testing.assert_allclose(naive.position, aware.position)

    def test_other_timezone_converted(self, iss_tle, iss_date):
        propagator = SGP4Propagator()
        shifted = iss_date.astimezone(timezone(timedelta(hours=2)))
        np.testing.assert_allclose(propagator.propagate(iss_tle, shifted).position,
                                   propagator.propagate(iss_tle, iss_date).position)

    def test_propagation_at_epoch(self, iss_tle):
        state = SGP4Propagator().propagate(iss_tle, iss_tle.epoch)
        assert np.all(np.isfinite(state.position))


class TestTLEErrors:
    """Missing or malformed element sets report TLE_ERROR."""

    def test_missing_tle(self, iss_date):
        with pytest.raises(TLEError) as excinfo:
            SGP4Propagator().get_satellite_data(None, iss_date)
        assert excinfo.value.code == ErrorCode.TLE_ERROR

    def test_wrong_type(self, iss_date):
        with pytest.raises(TLEError, match="Expected a TLE"):
            SGP4Propagator().get_satellite_data("not a tle", iss_date)

    def test_swapped_lines(self, iss_tle, iss_date):
        swapped = TLE.from_lines(iss_tle.second_line, iss_tle.first_line)
        with pytest.raises(TLEError):
            SGP4Propagator().get_satellite_data(swapped, iss_date)

    def test_garbage_fields(self, iss_tle, iss_date):
        """Non-numeric element columns are rejected before reaching the engine."""
        line2 = iss_tle.second_line[:52] + "abcdefghijk" + iss_tle.second_line[63:]
        tle = TLE.from_lines(iss_tle.first_line, line2)
        with pytest.raises(TLEError, match="mean motion"):
            SGP4Propagator().get_satellite_data(tle, iss_date)

    def test_zero_mean_motion(self, iss_tle, iss_date):
        line2 = iss_tle.second_line[:52] + " 0.00000000" + iss_tle.second_line[63:]
        tle = TLE.from_lines(iss_tle.first_line, line2)
        with pytest.raises(TLEError, match="Mean motion must be positive"):
            SGP4Propagator().get_satellite_data(tle, iss_date)

    def test_engine_initialisation_failure(self, monkeypatch, iss_tle, iss_date):
        patch_engine(monkeypatch, init_error=1)
        with pytest.raises(TLEError, match="could not initialise"):
            SGP4Propagator().get_satellite_data(iss_tle, iss_date)

    def test_missing_tle_wins_over_missing_date(self):
        """The element set is checked before the date."""
        with pytest.raises(TLEError):
            SGP4Propagator().get_satellite_data(None, None)


class TestSatelliteErrors:
    """Engine propagation failures report SATELLITE_ERROR."""

    def test_decayed_satellite(self, iss_date):
        tle = TLE.from_lines(DECAYING_LINE1, DECAYING_LINE2)
        date = datetime(2025, 1, 1, tzinfo=timezone.utc)
        with pytest.raises(SatelliteError) as excinfo:
            SGP4Propagator().get_satellite_data(tle, date)
        assert excinfo.value.code == ErrorCode.SATELLITE_ERROR
        assert excinfo.value.engine_code in propagator_module.SGP4_ERRORS

    @pytest.mark.parametrize("engine_code", [1, 2, 3, 4, 6])
    def test_engine_codes_mapped(self, monkeypatch, iss_tle, iss_date, engine_code):
        patch_engine(monkeypatch, error=engine_code)
        with pytest.raises(SatelliteError) as excinfo:
            SGP4Propagator().propagate(iss_tle, iss_date)
        assert excinfo.value.engine_code == engine_code
        assert propagator_module.SGP4_ERRORS[engine_code] in str(excinfo.value)

    def test_non_finite_state(self, monkeypatch, iss_tle, iss_date):
        patch_engine(monkeypatch, r=(math.nan, math.nan, math.nan))
        with pytest.raises(SatelliteError, match="non-finite"):
            SGP4Propagator().propagate(iss_tle, iss_date)


class TestGenericErrors:
    """Bad time arguments and unexpected failures report GENERIC_ERROR."""

    def test_missing_date(self, iss_tle):
        with pytest.raises(GenericError) as excinfo:
            SGP4Propagator().get_satellite_data(iss_tle, None)
        assert excinfo.value.code == ErrorCode.GENERIC_ERROR

    def test_string_date(self, iss_tle):
        with pytest.raises(GenericError, match="Expected a datetime"):
            SGP4Propagator().get_satellite_data(iss_tle, "2013-06-15")

    def test_date_out_of_utc_range(self, iss_tle):
        """An aware date that cannot be expressed in UTC is a generic error."""
        date = datetime(1, 1, 1, 0, 30, tzinfo=timezone(timedelta(hours=1)))
        with pytest.raises(GenericError, match="Cannot convert"):
            SGP4Propagator().get_satellite_data(iss_tle, date)

    def test_wrong_station_type(self, iss_tle, iss_date):
        with pytest.raises(GenericError, match="GroundStation"):
            SGP4Propagator().get_look_angles(iss_tle, iss_date, (0.0, 0.0))

    def test_engine_exception(self, monkeypatch, iss_tle, iss_date):
        class ExplodingSatrec(FakeSatrec):
            def sgp4(self, jd, fr):
                raise RuntimeError("boom")

        class FakeFactory:
            @staticmethod
            def twoline2rv(line1, line2, whichconst):
                return ExplodingSatrec()

        monkeypatch.setattr(propagator_module, "Satrec", FakeFactory)
        with pytest.raises(GenericError, match="boom"):
            SGP4Propagator().propagate(iss_tle, iss_date)

    def test_coincident_observer(self, monkeypatch, iss_tle, iss_date):
        """Conversion failures surface as GenericError."""
        def coincident(*args):
            raise ValueError("Observer and satellite positions coincide")

        monkeypatch.setattr(propagator_module, "topocentric", coincident)
        with pytest.raises(GenericError, match="coincide"):
            SGP4Propagator().get_look_angles(iss_tle, iss_date, GroundStation(0.0, 0.0))


class TestExclusiveOutcome:
    """Each call yields either a result or exactly one error."""

    @pytest.mark.parametrize("tle_ok,date_ok", [
        (True, True), (True, False), (False, True), (False, False),
    ])
    def test_one_outcome(self, iss_tle, iss_date, tle_ok, date_ok):
        tle = iss_tle if tle_ok else None
        date = iss_date if date_ok else None
        try:
            result = SGP4Propagator().get_satellite_data(tle, date)
        except SGPKitError as exc:
            assert not (tle_ok and date_ok)
            assert exc.code in (ErrorCode.TLE_ERROR, ErrorCode.GENERIC_ERROR)
        else:
            assert tle_ok and date_ok
            assert result is not None
