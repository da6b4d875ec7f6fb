# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Tests for the orbit catalog.

Covers LTAN to RAAN conversion (including the lenient parse), the
preset table, and the fallback-to-default lookup.
"""
import dataclasses
import logging
import math

import pytest

from orbitscope.domain.constants import calculate_orbital_period
from orbitscope.domain.orbits import (
    DEFAULT_ORBIT,
    DEFAULT_ORBIT_TYPE,
    ORBIT_TYPES,
    OrbitType,
    get_orbit_by_id,
    ltan_to_raan,
    orbit_ids,
)
from orbitscope.domain.position import calculate_orbital_position


class TestLtanToRaan:
    """Local noon is 0°, each hour is 15°."""

    @pytest.mark.parametrize("ltan,expected", [
        ("12:00", 0.0),
        ("06:00", -90.0),
        ("00:00", -180.0),
        ("18:00", 90.0),
        ("10:30", -22.5),
        ("13:15", 18.75),
        ("23:59", 179.75),
    ])
    def test_known_values(self, ltan, expected):
        assert ltan_to_raan(ltan) == pytest.approx(expected)

    def test_minutes_optional(self):
        assert ltan_to_raan("06") == pytest.approx(-90.0)

    def test_unparseable_parts_default_to_zero(self):
        """Garbage degrades to 00:00, i.e. -180°, rather than raising."""
        assert ltan_to_raan("xx:yy") == pytest.approx(-180.0)
        assert ltan_to_raan("") == pytest.approx(-180.0)
        assert ltan_to_raan("nan:nan") == pytest.approx(-180.0)

    def test_unparseable_minutes_only(self):
        assert ltan_to_raan("06:zz") == pytest.approx(-90.0)

    @pytest.mark.parametrize("ltan,expected", [
        ("inf:00", -180.0),
        ("-infinity:00", -180.0),
        ("06:inf", -90.0),
        ("1_2:00", -180.0),
        ("1e1:00", -180.0),
        ("0x6:00", -180.0),
        ("9" * 400 + ":00", -180.0),
    ])
    def test_non_decimal_numbers_count_as_zero(self, ltan, expected):
        """Only plain decimal clock parts parse; anything else is 0."""
        raan = ltan_to_raan(ltan)
        assert math.isfinite(raan)
        assert raan == pytest.approx(expected)

    def test_surrounding_whitespace_and_fractions_accepted(self):
        assert ltan_to_raan(" 06 : 30 ") == pytest.approx(-82.5)
        assert ltan_to_raan("6.5:00") == pytest.approx(-82.5)

    def test_garbage_ltan_gives_finite_position(self):
        orbit = dataclasses.replace(DEFAULT_ORBIT, raan=ltan_to_raan("inf:00"))
        assert all(math.isfinite(c) for c in calculate_orbital_position(1.0, orbit))

    def test_hours_out_of_range_not_validated(self):
        assert ltan_to_raan("24:00") == pytest.approx(180.0)


class TestCatalog:

    def test_ids_unique_and_non_empty(self):
        ids = orbit_ids()
        assert len(ids) == len(set(ids))
        assert all(ids)

    def test_all_periods_positive(self):
        for orbit in ORBIT_TYPES:
            assert orbit.period > 0, orbit.id

    def test_periods_derived_from_altitude(self):
        for orbit in ORBIT_TYPES:
            assert orbit.period == pytest.approx(calculate_orbital_period(orbit.altitude_km))

    @pytest.mark.parametrize("orbit_id,inclination,altitude_km,raan", [
        ("dawn-dusk", 98.0, 500.0, -90.0),
        ("sso-morning", 98.0, 500.0, -22.5),
        ("sso-noon", 98.0, 500.0, 0.0),
        ("polar", 90.0, 550.0, 0.0),
        ("iss", 51.6, 420.0, 0.0),
        ("leo", 45.0, 450.0, 0.0),
        ("equatorial", 0.0, 500.0, 0.0),
    ])
    def test_presets(self, orbit_id, inclination, altitude_km, raan):
        orbit = get_orbit_by_id(orbit_id)
        assert orbit.id == orbit_id
        assert orbit.inclination == inclination
        assert orbit.altitude_km == altitude_km
        assert orbit.raan == pytest.approx(raan)

    def test_sso_raan_derived_from_ltan(self):
        for orbit in ORBIT_TYPES:
            if orbit.ltan is not None:
                assert orbit.raan == ltan_to_raan(orbit.ltan)

    def test_default_is_dawn_dusk(self):
        assert DEFAULT_ORBIT_TYPE == "dawn-dusk"
        assert DEFAULT_ORBIT is ORBIT_TYPES[0]
        assert DEFAULT_ORBIT.ltan == "06:00"

    def test_catalog_is_immutable(self):
        assert isinstance(ORBIT_TYPES, tuple)
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_ORBIT.period = 1.0


class TestGetOrbitById:

    def test_finds_each_preset(self):
        for orbit in ORBIT_TYPES:
            assert get_orbit_by_id(orbit.id) is orbit

    def test_unknown_id_falls_back_to_default(self):
        assert get_orbit_by_id("nonexistent-id") == get_orbit_by_id(DEFAULT_ORBIT_TYPE)

    def test_empty_id_falls_back_to_default(self):
        assert get_orbit_by_id("") is DEFAULT_ORBIT

    def test_lookup_is_case_sensitive(self):
        assert get_orbit_by_id("ISS") is DEFAULT_ORBIT

    def test_fallback_logged_at_debug_only(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="orbitscope.domain.orbits"):
            get_orbit_by_id("stale-id")
        assert any("stale-id" in r.getMessage() for r in caplog.records)
        assert all(r.levelno <= logging.DEBUG for r in caplog.records)

    def test_known_id_does_not_log(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="orbitscope.domain.orbits"):
            get_orbit_by_id("polar")
        assert caplog.records == []

    def test_custom_orbit_type_constructible(self):
        custom = OrbitType(
            id="custom", name="Custom", description="",
            inclination=30.0, altitude_multiplier=0.5,
            altitude_km=600.0, period=calculate_orbital_period(600.0), raan=10.0,
        )
        assert custom.ltan is None
