# -*- coding: utf-8 -*-
"""
Coordinate Conversions - Rectangular, spherical, cylindrical, latitudinal.

Conventions
-----------
spherical : (r, colat, lon)
    ``colat`` measured from +z, ``lon`` counterclockwise about +z from +x.
cylindrical : (r, clon, z)
    ``r`` is the distance from the z-axis, ``clon`` in [0, 2π).
latitudinal : (r, lon, lat)
    ``lat`` measured from the x-y plane, positive toward +z.

All angles are in radians. Rectangular-to-curvilinear conversions are
defined everywhere: points on the z-axis get longitude zero and the
origin maps to all-zero coordinates.

License
-------
MIT License
Copyright (c) 2024 geoint.org
"""

from typing import Tuple
import numpy as np

from navgeom.linalg.vector import vnorm
from navgeom.utils.constants import TWO_PI


def _as_point(rectan: np.ndarray) -> np.ndarray:
    rectan = np.asarray(rectan, dtype=np.float64).ravel()
    if rectan.shape != (3,):
        raise ValueError(f"rectan must be shape (3,), got {rectan.shape}")
    return rectan


def _longitude(x: float, y: float) -> float:
    """Longitude of (x, y); zero on the z-axis."""
    if x == 0.0 and y == 0.0:
        return 0.0
    return float(np.arctan2(y, x))


# ===================================================================
# Spherical
# ===================================================================

def sphrec(r: float, colat: float, lon: float) -> np.ndarray:
    """
    Convert spherical coordinates to rectangular.

    Parameters
    ----------
    r : float
        Distance from the origin.
    colat : float
        Angle from the +z axis, radians.
    lon : float
        Longitude, radians.

    Returns
    -------
    np.ndarray
        Rectangular coordinates [x, y, z], shape (3,).
    """
    return np.array([
        r * np.cos(lon) * np.sin(colat),
        r * np.sin(lon) * np.sin(colat),
        r * np.cos(colat)
    ])


def recsph(rectan: np.ndarray) -> Tuple[float, float, float]:
    """
    Convert rectangular coordinates to spherical.

    Parameters
    ----------
    rectan : np.ndarray
        Rectangular coordinates, shape (3,).

    Returns
    -------
    r : float
        Distance from the origin.
    colat : float
        Colatitude in [0, π].
    lon : float
        Longitude in (-π, π].
    """
    x, y, z = _as_point(rectan)
    r = vnorm(np.array([x, y, z]))
    if r == 0.0:
        return 0.0, 0.0, 0.0

    colat = float(np.arctan2(np.hypot(x, y), z))
    return r, colat, _longitude(x, y)


# ===================================================================
# Cylindrical
# ===================================================================

def cylrec(r: float, clon: float, z: float) -> np.ndarray:
    """
    Convert cylindrical coordinates to rectangular.

    Parameters
    ----------
    r : float
        Distance from the z-axis.
    clon : float
        Longitude, radians.
    z : float
        Height above the x-y plane.

    Returns
    -------
    np.ndarray
        Rectangular coordinates [x, y, z], shape (3,).
    """
    return np.array([r * np.cos(clon), r * np.sin(clon), float(z)])


def reccyl(rectan: np.ndarray) -> Tuple[float, float, float]:
    """
    Convert rectangular coordinates to cylindrical.

    Returns
    -------
    r : float
        Distance from the z-axis.
    clon : float
        Longitude in [0, 2π).
    z : float
        Height above the x-y plane.
    """
    x, y, z = _as_point(rectan)
    clon = _longitude(x, y)
    if clon < 0.0:
        clon += TWO_PI
        # A tiny negative angle rounds up to exactly 2π.
        if clon >= TWO_PI:
            clon = 0.0
    return float(np.hypot(x, y)), clon, float(z)


# ===================================================================
# Latitudinal
# ===================================================================

def latrec(r: float, lon: float, lat: float) -> np.ndarray:
    """
    Convert latitudinal coordinates to rectangular.

    Parameters
    ----------
    r : float
        Distance from the origin.
    lon : float
        Longitude, radians.
    lat : float
        Latitude, radians.

    Returns
    -------
    np.ndarray
        Rectangular coordinates [x, y, z], shape (3,).
    """
    return np.array([
        r * np.cos(lon) * np.cos(lat),
        r * np.sin(lon) * np.cos(lat),
        r * np.sin(lat)
    ])


def reclat(rectan: np.ndarray) -> Tuple[float, float, float]:
    """
    Convert rectangular coordinates to latitudinal.

    Returns
    -------
    r : float
        Distance from the origin.
    lon : float
        Longitude in (-π, π].
    lat : float
        Latitude in [-π/2, π/2].
    """
    x, y, z = _as_point(rectan)
    r = vnorm(np.array([x, y, z]))
    if r == 0.0:
        return 0.0, 0.0, 0.0

    lat = float(np.arctan2(z, np.hypot(x, y)))
    return r, _longitude(x, y), lat


__all__ = [
    "sphrec",
    "recsph",
    "cylrec",
    "reccyl",
    "latrec",
    "reclat",
]
