# -*- coding: utf-8 -*-
"""
Exceptions - Error types raised by the navigation geometry kernels.

Every kernel in the package is a pure function; errors are raised at the
point of detection and carry the values needed to report them. Caller
contract violations (bad shapes, undersized buffers) raise ``ValueError``.

License
-------
MIT License
Copyright (c) 2024 geoint.org
"""

from typing import Optional, Tuple

import numpy as np


class NavGeomError(Exception):
    """Base class for errors raised by navgeom."""


class AllocationError(NavGeomError, MemoryError):
    """
    Scratch storage for a matrix product could not be allocated.

    Attributes
    ----------
    shape : tuple of int
        Shape of the scratch array that was requested.
    """

    def __init__(self, shape: Tuple[int, ...], message: Optional[str] = None):
        self.shape = tuple(int(n) for n in shape)
        if message is None:
            message = (
                f"An attempt to create a temporary matrix of shape "
                f"{self.shape} failed."
            )
        super().__init__(message)


class PointOnZAxisError(NavGeomError, ValueError):
    """
    A Jacobian was requested at a point where it is undefined.

    Longitude is not a differentiable function of rectangular position
    on the z-axis, so the curvilinear-with-respect-to-rectangular
    Jacobians cannot be evaluated there.

    Attributes
    ----------
    point : np.ndarray
        The offending rectangular point, shape (3,).
    """

    def __init__(self, point: np.ndarray):
        self.point = np.asarray(point, dtype=np.float64).copy()
        super().__init__(
            f"Input point {self.point.tolist()} lies on the z-axis; "
            f"the Jacobian is undefined there."
        )


__all__ = [
    "NavGeomError",
    "AllocationError",
    "PointOnZAxisError",
]
