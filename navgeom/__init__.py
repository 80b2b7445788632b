# -*- coding: utf-8 -*-
"""
navgeom - Linear-algebra and coordinate-geometry kernels for navigation.

Pure-NumPy numerical primitives used by planetary-geometry and spacecraft
navigation code: general-dimension matrix products, closed-form symmetric
2x2 diagonalization, ellipse semi-axes and coordinate-system Jacobians.

Modules
-------
linalg : General matrix products, 2x2 eigen-solver, vector helpers
geometry : Ellipse semi-axes, coordinate conversions and Jacobians
utils : Constants, error types and logging setup

License
-------
MIT License
Copyright (c) 2024 geoint.org
"""

import logging

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

from navgeom import linalg, geometry, utils

__all__ = ["linalg", "geometry", "utils", "__version__"]
