# -*- coding: utf-8 -*-
"""
Coordinate Jacobians - Velocity transforms between coordinate systems.

Each function returns the 3x3 matrix of first partial derivatives of one
coordinate triple with respect to another, evaluated at a single point::

    J[row, col] = d(output_row) / d(input_col)

A velocity is carried across systems by ``J @ velocity``. The
rectangular-with-respect-to-curvilinear Jacobians (``drd*``) are defined
for all finite input, including the origin and the poles. The inverse
direction (``d*dr``) needs the longitude to be differentiable and is
undefined on the z-axis.

Coordinate conventions are those of `navgeom.geometry.coordinates`.

License
-------
MIT License
Copyright (c) 2024 geoint.org
"""

from typing import Tuple
import numpy as np

from navgeom.linalg.vector import vnorm
from navgeom.utils.exceptions import PointOnZAxisError


def _off_axis_point(x: float, y: float, z: float) -> Tuple[float, float, float]:
    """Return (x, y, z) as floats, rejecting points on the z-axis."""
    x, y, z = float(x), float(y), float(z)
    if x == 0.0 and y == 0.0:
        raise PointOnZAxisError(np.array([x, y, z]))
    return x, y, z


# ===================================================================
# Rectangular with respect to curvilinear
# ===================================================================

def drdsph(r: float, colat: float, lon: float) -> np.ndarray:
    """
    Jacobian of rectangular with respect to spherical coordinates.

    Rectangular coordinates are given by::

        x = r * cos(lon) * sin(colat)
        y = r * sin(lon) * sin(colat)
        z = r * cos(colat)

    Parameters
    ----------
    r : float
        Distance of the point from the origin.
    colat : float
        Angle of the point from the +z axis, radians.
    lon : float
        Longitude, counterclockwise about +z from the x-axis, radians.

    Returns
    -------
    np.ndarray
        3x3 matrix::

            | dx/dr  dx/dcolat  dx/dlon |
            | dy/dr  dy/dcolat  dy/dlon |
            | dz/dr  dz/dcolat  dz/dlon |

        Some partials vanish at ``r = 0`` or at the poles; that is the
        correct value there, not a failure.
    """
    ccolat = np.cos(colat)
    scolat = np.sin(colat)
    clon = np.cos(lon)
    slon = np.sin(lon)

    return np.array([
        [clon * scolat, r * clon * ccolat, -r * slon * scolat],
        [slon * scolat, r * slon * ccolat, r * clon * scolat],
        [ccolat, -r * scolat, 0.0]
    ])


def drdcyl(r: float, clon: float, z: float) -> np.ndarray:
    """
    Jacobian of rectangular with respect to cylindrical coordinates.

    Parameters
    ----------
    r : float
        Distance of the point from the z-axis.
    clon : float
        Longitude, radians.
    z : float
        Height above the x-y plane. The Jacobian does not depend on it.

    Returns
    -------
    np.ndarray
        3x3 matrix of d(x, y, z) / d(r, clon, z).
    """
    cosl = np.cos(clon)
    sinl = np.sin(clon)

    return np.array([
        [cosl, -r * sinl, 0.0],
        [sinl, r * cosl, 0.0],
        [0.0, 0.0, 1.0]
    ])


def drdlat(r: float, lon: float, lat: float) -> np.ndarray:
    """
    Jacobian of rectangular with respect to latitudinal coordinates.

    Parameters
    ----------
    r : float
        Distance of the point from the origin.
    lon : float
        Longitude, radians.
    lat : float
        Latitude, radians.

    Returns
    -------
    np.ndarray
        3x3 matrix of d(x, y, z) / d(r, lon, lat).
    """
    clon = np.cos(lon)
    slon = np.sin(lon)
    clat = np.cos(lat)
    slat = np.sin(lat)

    return np.array([
        [clon * clat, -r * slon * clat, -r * clon * slat],
        [slon * clat, r * clon * clat, -r * slon * slat],
        [slat, 0.0, r * clat]
    ])


# ===================================================================
# Curvilinear with respect to rectangular
# ===================================================================

def dsphdr(x: float, y: float, z: float) -> np.ndarray:
    """
    Jacobian of spherical with respect to rectangular coordinates.

    Parameters
    ----------
    x, y, z : float
        Rectangular coordinates of the point.

    Returns
    -------
    np.ndarray
        3x3 matrix of d(r, colat, lon) / d(x, y, z).

    Raises
    ------
    PointOnZAxisError
        If ``x`` and ``y`` are both zero.
    """
    x, y, z = _off_axis_point(x, y, z)
    rho = float(np.hypot(x, y))
    r = vnorm(np.array([x, y, z]))

    # Ratios are formed before dividing by r to avoid squaring large values
    return np.array([
        [x / r, y / r, z / r],
        [(x / rho) * (z / r) / r, (y / rho) * (z / r) / r, -(rho / r) / r],
        [-(y / rho) / rho, (x / rho) / rho, 0.0]
    ])


def dcyldr(x: float, y: float, z: float) -> np.ndarray:
    """
    Jacobian of cylindrical with respect to rectangular coordinates.

    Returns
    -------
    np.ndarray
        3x3 matrix of d(r, clon, z) / d(x, y, z).

    Raises
    ------
    PointOnZAxisError
        If ``x`` and ``y`` are both zero.
    """
    x, y, z = _off_axis_point(x, y, z)
    rho = float(np.hypot(x, y))

    return np.array([
        [x / rho, y / rho, 0.0],
        [-(y / rho) / rho, (x / rho) / rho, 0.0],
        [0.0, 0.0, 1.0]
    ])


def dlatdr(x: float, y: float, z: float) -> np.ndarray:
    """
    Jacobian of latitudinal with respect to rectangular coordinates.

    Returns
    -------
    np.ndarray
        3x3 matrix of d(r, lon, lat) / d(x, y, z).

    Raises
    ------
    PointOnZAxisError
        If ``x`` and ``y`` are both zero.
    """
    x, y, z = _off_axis_point(x, y, z)
    rho = float(np.hypot(x, y))
    r = vnorm(np.array([x, y, z]))

    return np.array([
        [x / r, y / r, z / r],
        [-(y / rho) / rho, (x / rho) / rho, 0.0],
        [-(x / rho) * (z / r) / r, -(y / rho) * (z / r) / r, (rho / r) / r]
    ])


__all__ = [
    "drdsph",
    "drdcyl",
    "drdlat",
    "dsphdr",
    "dcyldr",
    "dlatdr",
]
