"""Tests for the world-pixel projection and chunk/tile decomposition."""

from __future__ import annotations

import math
import random

import pytest

from wplace_tools.errors import DomainViolationError
from wplace_tools.geo.constants import MOD_CHUNK, MOD_TILE, SCALE
from wplace_tools.geo.models import LocalCoord
from wplace_tools.geo.projection import llz_to_world_pixel, to_local, world_to_lat_lng


class TestLlzToWorldPixel:
    def test_null_island_is_plane_centre(self):
        info = llz_to_world_pixel(0.0, 0.0)
        assert info.world_x == pytest.approx(SCALE / 2)
        assert info.world_y == pytest.approx(SCALE / 2)
        assert info.chunk == LocalCoord(256, 256, 0, 0)
        assert info.tile == LocalCoord(1024, 1024, 0, 0)

    def test_scale_value(self):
        assert SCALE == 2_048_000

    def test_west_edge_is_zero(self):
        assert llz_to_world_pixel(0.0, -180.0).world_x == pytest.approx(0.0)

    def test_north_is_smaller_y(self):
        north = llz_to_world_pixel(45.0, 0.0)
        south = llz_to_world_pixel(-45.0, 0.0)
        assert north.world_y < SCALE / 2 < south.world_y
        assert north.world_y + south.world_y == pytest.approx(SCALE)

    def test_chunk_and_tile_are_consistent(self):
        info = llz_to_world_pixel(35.6, 139.7)
        assert info.chunk.chunk_x * MOD_CHUNK + info.chunk.x == math.floor(info.world_x)
        assert info.tile.chunk_y * MOD_TILE + info.tile.y == math.floor(info.world_y)

    @pytest.mark.parametrize("lat", [90.0, -90.0, 91.0])
    def test_pole_raises(self, lat):
        with pytest.raises(DomainViolationError):
            llz_to_world_pixel(lat, 0.0)

    @pytest.mark.parametrize("lat", [89.99999999999999, -89.99999999999999])
    def test_latitude_rounding_to_pole_raises(self, lat):
        with pytest.raises(DomainViolationError, match="pole"):
            llz_to_world_pixel(lat, 0.0)

    def test_non_finite_raises(self):
        with pytest.raises(ValueError):
            llz_to_world_pixel(math.nan, 0.0)


class TestWorldToLatLng:
    def test_round_trip_random_points(self):
        rng = random.Random(42)
        for _ in range(500):
            lat = rng.uniform(-85.0, 85.0)
            lng = rng.uniform(-180.0, 180.0)
            info = llz_to_world_pixel(lat, lng)
            back = world_to_lat_lng(info.world_x, info.world_y)
            assert back.lat == pytest.approx(lat, abs=1e-6)
            assert back.lng == pytest.approx(lng, abs=1e-6)

    def test_longitude_wraps_once_east(self):
        pos = world_to_lat_lng(SCALE * 1.25, SCALE / 2)
        assert pos.lng == pytest.approx(-90.0)

    def test_longitude_wraps_once_west(self):
        pos = world_to_lat_lng(-SCALE * 0.25, SCALE / 2)
        assert pos.lng == pytest.approx(90.0)

    def test_east_edge_stays_180(self):
        assert world_to_lat_lng(SCALE, SCALE / 2).lng == pytest.approx(180.0)


class TestToLocal:
    def test_positive_coordinates(self):
        assert to_local(4500.7, 999.2, 1000) == LocalCoord(4, 0, 500, 999)

    def test_negative_coordinates_have_non_negative_offsets(self):
        c = to_local(-1.0, -4001.0, 4000)
        assert c == LocalCoord(-1, -2, 3999, 3999)

    def test_default_modulus_is_chunk(self):
        assert to_local(8001.0, 12.0) == LocalCoord(2, 0, 1, 12)

    @pytest.mark.parametrize("mod", [MOD_CHUNK, MOD_TILE, 7])
    def test_decomposition_invariant(self, mod):
        rng = random.Random(mod)
        for _ in range(500):
            px = rng.uniform(-1e6, 1e6)
            py = rng.uniform(-1e6, 1e6)
            c = to_local(px, py, mod)
            assert 0 <= c.x < mod
            assert 0 <= c.y < mod
            assert c.chunk_x * mod + c.x == math.floor(px)
            assert c.chunk_y * mod + c.y == math.floor(py)
