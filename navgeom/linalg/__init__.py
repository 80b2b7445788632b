# -*- coding: utf-8 -*-
"""
Linear Algebra - General-dimension matrix products and small eigen-solvers.

Provides:
- Matrix products on caller-sized buffers, safe for in-place output
- Closed-form diagonalization of symmetric 2x2 matrices
- Overflow-safe vector norms and linear combinations

License
-------
MIT License
Copyright (c) 2024 geoint.org
"""

from navgeom.linalg.matrix import (
    mtxm_general,
    mtxv_general,
    mxm_general,
    mxmt_general,
    mxv_general,
    transpose_general,
)

from navgeom.linalg.eigen import (
    quadratic_roots,
    diagonalize_symmetric_2x2,
)

from navgeom.linalg.vector import (
    vnorm,
    vhat,
    vlcom,
)

__all__ = [
    # Matrix products
    "mtxm_general",
    "mtxv_general",
    "mxm_general",
    "mxmt_general",
    "mxv_general",
    "transpose_general",
    # Eigen-decomposition
    "quadratic_roots",
    "diagonalize_symmetric_2x2",
    # Vectors
    "vnorm",
    "vhat",
    "vlcom",
]
