# -*- coding: utf-8 -*-
"""
Vector Helpers - Overflow-safe norms and linear combinations of 3-vectors.

License
-------
MIT License
Copyright (c) 2024 geoint.org
"""

import numpy as np


def vnorm(v: np.ndarray) -> float:
    """
    Compute the Euclidean norm of a vector without intermediate overflow.

    The components are divided by the largest absolute component before
    squaring, so vectors with components near the floating point limits
    still produce a finite norm.

    Parameters
    ----------
    v : np.ndarray
        Input vector, any length.

    Returns
    -------
    float
        Norm of ``v``; 0.0 for the zero vector.
    """
    v = np.asarray(v, dtype=np.float64).ravel()
    vmax = np.max(np.abs(v)) if v.size else 0.0
    if vmax == 0.0:
        return 0.0
    scaled = v / vmax
    return float(vmax * np.sqrt(np.dot(scaled, scaled)))


def vhat(v: np.ndarray) -> np.ndarray:
    """
    Return the unit vector along ``v``.

    The zero vector maps to the zero vector.
    """
    v = np.asarray(v, dtype=np.float64)
    vmag = vnorm(v)
    if vmag == 0.0:
        return np.zeros_like(v)
    return v / vmag


def vlcom(a: float, v1: np.ndarray, b: float, v2: np.ndarray) -> np.ndarray:
    """
    Compute the linear combination ``a*v1 + b*v2``.

    Parameters
    ----------
    a, b : float
        Coefficients.
    v1, v2 : np.ndarray
        Vectors of equal shape.

    Returns
    -------
    np.ndarray
        New array holding ``a*v1 + b*v2``.
    """
    v1 = np.asarray(v1, dtype=np.float64)
    v2 = np.asarray(v2, dtype=np.float64)
    return a * v1 + b * v2


__all__ = [
    "vnorm",
    "vhat",
    "vlcom",
]
