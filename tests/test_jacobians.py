# -*- coding: utf-8 -*-
"""Tests for coordinate-system Jacobians."""
import numpy as np
import pytest
from navgeom.geometry.coordinates import (
    sphrec,
    recsph,
    cylrec,
    reccyl,
    latrec,
    reclat,
)
from navgeom.geometry.jacobians import (
    drdsph,
    drdcyl,
    drdlat,
    dsphdr,
    dcyldr,
    dlatdr,
)
from navgeom.utils.exceptions import PointOnZAxisError


def _numeric_jacobian(func, coords, h=1e-6):
    """Central-difference Jacobian of func at coords."""
    coords = np.asarray(coords, dtype=np.float64)
    jac = np.zeros((3, 3))
    for col in range(3):
        step = np.zeros(3)
        step[col] = h
        jac[:, col] = (np.asarray(func(*(coords + step)))
                       - np.asarray(func(*(coords - step)))) / (2.0 * h)
    return jac


def _rect_state(rng):
    """Random rectangular position (kept off the z-axis) and velocity."""
    pos = rng.randn(3) * 1e4
    pos[0] += 5e3
    vel = rng.randn(3) * 10.0
    return pos, vel


class TestDrdsph:
    """Test the spherical -> rectangular Jacobian."""

    def test_literal_case(self):
        """Test on the equator at zero longitude."""
        jac = drdsph(1.0, np.pi / 2, 0.0)
        np.testing.assert_allclose(jac[:, 0], [1.0, 0.0, 0.0], atol=1e-15)
        assert jac[2, 1] == pytest.approx(-1.0)
        np.testing.assert_allclose(sphrec(1.0, np.pi / 2, 0.0), [1.0, 0.0, 0.0], atol=1e-15)

    def test_matches_finite_differences(self):
        """Columns match central differences of sphrec."""
        rng = np.random.RandomState(42)
        for _ in range(20):
            coords = np.array([rng.uniform(0.5, 5.0),
                               rng.uniform(0.1, 3.0),
                               rng.uniform(-np.pi, np.pi)])
            np.testing.assert_allclose(
                drdsph(*coords), _numeric_jacobian(sphrec, coords), atol=1e-8
            )

    def test_zero_radius(self):
        """At the origin only the radial column survives."""
        jac = drdsph(0.0, 0.7, 1.2)
        assert np.all(np.isfinite(jac))
        np.testing.assert_array_equal(jac[:, 1:], np.zeros((3, 2)))

    def test_pole(self):
        """At the pole longitude has no effect on position."""
        jac = drdsph(3.0, 0.0, 0.4)
        np.testing.assert_array_equal(jac[:, 2], np.zeros(3))
        assert jac[2, 0] == 1.0

    def test_velocity_roundtrip(self):
        """rect -> spherical velocity -> rect reproduces the velocity."""
        rng = np.random.RandomState(8)
        for _ in range(20):
            pos, vel = _rect_state(rng)
            r, colat, lon = recsph(pos)
            sphvel = dsphdr(*pos) @ vel
            np.testing.assert_allclose(sphrec(r, colat, lon), pos, rtol=1e-12)
            np.testing.assert_allclose(drdsph(r, colat, lon) @ sphvel, vel, atol=1e-9)


class TestDrdcyl:
    """Test the cylindrical -> rectangular Jacobian."""

    def test_matches_finite_differences(self):
        """Columns match central differences of cylrec."""
        coords = np.array([2.5, 0.8, -4.0])
        np.testing.assert_allclose(
            drdcyl(*coords), _numeric_jacobian(cylrec, coords), atol=1e-8
        )

    def test_zero_radius(self):
        jac = drdcyl(0.0, 1.0, 2.0)
        np.testing.assert_array_equal(jac[:, 1], np.zeros(3))

    def test_velocity_roundtrip(self):
        rng = np.random.RandomState(9)
        for _ in range(20):
            pos, vel = _rect_state(rng)
            cyl = reccyl(pos)
            cylvel = dcyldr(*pos) @ vel
            np.testing.assert_allclose(drdcyl(*cyl) @ cylvel, vel, atol=1e-9)


class TestDrdlat:
    """Test the latitudinal -> rectangular Jacobian."""

    def test_matches_finite_differences(self):
        """Columns match central differences of latrec."""
        coords = np.array([3.0, -2.1, 0.6])
        np.testing.assert_allclose(
            drdlat(*coords), _numeric_jacobian(latrec, coords), atol=1e-8
        )

    def test_velocity_roundtrip(self):
        rng = np.random.RandomState(10)
        for _ in range(20):
            pos, vel = _rect_state(rng)
            lat = reclat(pos)
            latvel = dlatdr(*pos) @ vel
            np.testing.assert_allclose(drdlat(*lat) @ latvel, vel, atol=1e-9)


class TestInverseJacobians:
    """Test rectangular -> spherical/cylindrical/latitudinal Jacobians."""

    @pytest.mark.parametrize("forward,inverse,to_rect", [
        (drdsph, dsphdr, sphrec),
        (drdcyl, dcyldr, cylrec),
        (drdlat, dlatdr, latrec),
    ])
    def test_inverse_of_forward(self, forward, inverse, to_rect):
        """Inverse Jacobian times forward Jacobian is the identity."""
        coords = (2.0, 0.9, 0.3)
        rect = to_rect(*coords)
        np.testing.assert_allclose(
            inverse(*rect) @ forward(*coords), np.eye(3), atol=1e-12
        )

    def test_dsphdr_matches_finite_differences(self):
        point = np.array([1.5, -0.5, 2.0])
        numeric = _numeric_jacobian(lambda x, y, z: recsph(np.array([x, y, z])), point)
        np.testing.assert_allclose(dsphdr(*point), numeric, atol=1e-8)

    def test_large_point(self):
        jac = dsphdr(1e200, 2e200, 3e200)
        assert np.all(np.isfinite(jac))

    @pytest.mark.parametrize("inverse", [dsphdr, dcyldr, dlatdr])
    def test_z_axis_raises(self, inverse):
        """Points on the z-axis have no inverse Jacobian."""
        with pytest.raises(PointOnZAxisError) as excinfo:
            inverse(0.0, 0.0, 5.0)
        np.testing.assert_array_equal(excinfo.value.point, [0.0, 0.0, 5.0])

    def test_z_axis_error_is_value_error(self):
        with pytest.raises(ValueError):
            dlatdr(0.0, 0.0, 0.0)
