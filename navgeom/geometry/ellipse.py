# -*- coding: utf-8 -*-
"""
Ellipse Geometry - Semi-axes of an ellipse given by generating vectors.

An ellipse centered at the origin can be described by any two vectors
``vec1`` and ``vec2`` as the point set::

    { cos(t) * vec1 + sin(t) * vec2 : t in (-pi, pi] }

The squared norm of such a point is the quadratic form ``X.T @ S @ X``
with ``X = (cos t, sin t)`` and ``S`` the Gram matrix of the generators.
Diagonalizing ``S`` by a rotation ``C`` shows the extrema of the norm are
reached at ``X`` equal to the columns of ``C``, so the semi-axes are
``C[0, i] * vec1 + C[1, i] * vec2`` for ``i = 0, 1``. The eigenvalues are
the squared semi-axis lengths.

Dependencies
------------
numpy - Vector operations
dataclasses - Ellipse container

License
-------
MIT License
Copyright (c) 2024 geoint.org
"""

# Standard library
import logging
from dataclasses import dataclass
from typing import Tuple

# Third-party
import numpy as np

# navgeom internal
from navgeom.linalg.eigen import diagonalize_symmetric_2x2
from navgeom.linalg.vector import vnorm, vlcom

logger = logging.getLogger(__name__)


# ===================================================================
# Data Structures
# ===================================================================

@dataclass
class Ellipse:
    """
    Ellipse in 3-space described by its center and semi-axes.

    Attributes
    ----------
    center : np.ndarray
        Center of the ellipse, shape (3,).
    semi_major : np.ndarray
        Semi-major axis vector, shape (3,).
    semi_minor : np.ndarray
        Semi-minor axis vector, shape (3,). Orthogonal to ``semi_major``
        and no longer than it. Either axis may be the zero vector for a
        degenerate ellipse.
    """
    center: np.ndarray
    semi_major: np.ndarray
    semi_minor: np.ndarray


# ===================================================================
# Semi-Axes
# ===================================================================

def semi_axes(
    vec1: np.ndarray,
    vec2: np.ndarray
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Find the semi-major and semi-minor axes of an ellipse.

    The ellipse is the set of points ``cos(t)*vec1 + sin(t)*vec2``.

    Parameters
    ----------
    vec1 : np.ndarray
        First generating vector, shape (3,).
    vec2 : np.ndarray
        Second generating vector, shape (3,).

    Returns
    -------
    semi_major : np.ndarray
        Semi-major axis, shape (3,).
    semi_minor : np.ndarray
        Semi-minor axis, shape (3,).

    Notes
    -----
    The axes are orthogonal and ``|semi_major| >= |semi_minor|``. When the
    generators are linearly dependent the semi-minor axis is the zero
    vector, and when both are zero so is the semi-major axis; these are
    valid results, not errors. Each axis is determined up to sign; the
    sign returned is deterministic for given inputs.

    Examples
    --------
    >>> smajor, sminor = semi_axes(np.array([1.0, 1.0, 1.0]),
    ...                            np.array([1.0, -1.0, 1.0]))
    >>> np.round(np.abs(smajor), 8)
    array([1.41421356, 0.        , 1.41421356])
    """
    vec1 = np.asarray(vec1, dtype=np.float64).ravel()
    vec2 = np.asarray(vec2, dtype=np.float64).ravel()
    if vec1.shape != (3,) or vec2.shape != (3,):
        raise ValueError(
            f"vec1 and vec2 must be shape (3,), got {vec1.shape} and {vec2.shape}"
        )

    # Scale to keep the inner products in range. Divide by scale rather
    # than multiplying by 1/scale, which can overflow.
    scale = max(vnorm(vec1), vnorm(vec2))
    if scale == 0.0:
        logger.debug("Both generating vectors are zero; returning zero axes")
        return np.zeros(3), np.zeros(3)

    tmpvc1 = vec1 / scale
    tmpvc2 = vec2 / scale

    # Gram matrix of the scaled generators
    s = np.empty((2, 2))
    s[0, 0] = np.dot(tmpvc1, tmpvc1)
    s[1, 0] = np.dot(tmpvc1, tmpvc2)
    s[0, 1] = s[1, 0]
    s[1, 1] = np.dot(tmpvc2, tmpvc2)

    eigval, c = diagonalize_symmetric_2x2(s)

    # Ties go to the first eigenvector
    if abs(eigval[0, 0]) >= abs(eigval[1, 1]):
        major, minor = 0, 1
    else:
        major, minor = 1, 0

    smajor = vlcom(c[0, major], tmpvc1, c[1, major], tmpvc2)
    sminor = vlcom(c[0, minor], tmpvc1, c[1, minor], tmpvc2)

    return scale * smajor, scale * sminor


# ===================================================================
# Ellipse Construction
# ===================================================================

def ellipse_from_generators(
    center: np.ndarray,
    vec1: np.ndarray,
    vec2: np.ndarray
) -> Ellipse:
    """
    Build an ellipse from its center and two generating vectors.

    Parameters
    ----------
    center : np.ndarray
        Center, shape (3,).
    vec1, vec2 : np.ndarray
        Generating vectors, shape (3,). The ellipse is the set of points
        ``center + cos(t)*vec1 + sin(t)*vec2``.

    Returns
    -------
    Ellipse
        Ellipse with semi-axes from `semi_axes`.
    """
    center = np.asarray(center, dtype=np.float64).ravel()
    if center.shape != (3,):
        raise ValueError(f"center must be shape (3,), got {center.shape}")

    smajor, sminor = semi_axes(vec1, vec2)
    return Ellipse(center=center.copy(), semi_major=smajor, semi_minor=sminor)


def ellipse_to_generators(ellipse: Ellipse) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Return the center, semi-major and semi-minor axes of ``ellipse``."""
    return (
        np.array(ellipse.center, dtype=np.float64),
        np.array(ellipse.semi_major, dtype=np.float64),
        np.array(ellipse.semi_minor, dtype=np.float64),
    )


def ellipse_point(ellipse: Ellipse, angle: float) -> np.ndarray:
    """
    Evaluate the point of ``ellipse`` at parameter ``angle`` (radians).

    Returns ``center + cos(angle)*semi_major + sin(angle)*semi_minor``.
    """
    center, smajor, sminor = ellipse_to_generators(ellipse)
    return center + vlcom(np.cos(angle), smajor, np.sin(angle), sminor)


__all__ = [
    "Ellipse",
    "semi_axes",
    "ellipse_from_generators",
    "ellipse_to_generators",
    "ellipse_point",
]
