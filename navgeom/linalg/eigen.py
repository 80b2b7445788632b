# -*- coding: utf-8 -*-
"""
Symmetric 2x2 Eigen-Decomposition - Closed-form diagonalization.

Diagonalizes a real symmetric 2x2 matrix ``S`` by a rotation ``C`` so that
``C.T @ S @ C`` is diagonal. No iteration is involved: the eigenvalues are
the roots of the characteristic quadratic and the rotation follows from a
single eigenvector.

Dependencies
------------
numpy - Array containers and elementary functions

License
-------
MIT License
Copyright (c) 2024 geoint.org
"""

# Standard library
from typing import Tuple

# Third-party
import numpy as np


# ===================================================================
# Quadratic Roots
# ===================================================================

def quadratic_roots(a: float, b: float, c: float) -> Tuple[float, float]:
    """
    Find the real roots of ``a*x**2 + b*x + c``.

    The root of larger magnitude is computed directly and the other from
    the product of the roots, which avoids the cancellation of the
    schoolbook formula when ``b**2 >> 4*a*c``.

    Parameters
    ----------
    a, b, c : float
        Coefficients. When ``a == 0`` the equation is linear and both
        returned roots equal ``-c/b``.

    Returns
    -------
    root1, root2 : float
        The roots with ``root1 >= root2``.

    Raises
    ------
    ValueError
        If ``a`` and ``b`` are both zero, or the roots are complex.
    """
    a = float(a)
    b = float(b)
    c = float(c)

    if a == 0.0:
        if b == 0.0:
            raise ValueError("Both the quadratic and linear coefficients are zero")
        root = -c / b
        return root, root

    # Scale so the discriminant does not overflow
    scale = max(abs(a), abs(b), abs(c))
    a, b, c = a / scale, b / scale, c / scale

    discrm = b * b - 4.0 * a * c
    if discrm < 0.0:
        raise ValueError(f"Roots are complex (discriminant {discrm * scale * scale:g})")

    q = -0.5 * (b + np.copysign(np.sqrt(discrm), b))
    if q == 0.0:
        # b == 0 and c == 0: double root at zero
        return 0.0, 0.0

    root1 = q / a
    root2 = c / q
    if root1 < root2:
        root1, root2 = root2, root1
    return float(root1), float(root2)


# ===================================================================
# Symmetric 2x2 Diagonalization
# ===================================================================

def diagonalize_symmetric_2x2(symmat: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """
    Diagonalize a symmetric 2x2 matrix.

    Finds a diagonal matrix ``eigval`` and an orthonormal matrix ``rotate``
    such that::

        rotate.T @ symmat @ rotate == eigval

    The columns of ``rotate`` are unit eigenvectors of ``symmat``; column
    ``i`` belongs to ``eigval[i, i]``. Symmetry of the input is assumed,
    not checked: only ``symmat[0, 1]`` is used for the off-diagonal.

    Parameters
    ----------
    symmat : np.ndarray
        Symmetric matrix, shape (2, 2).

    Returns
    -------
    eigval : np.ndarray
        Diagonal matrix of eigenvalues, shape (2, 2).
    rotate : np.ndarray
        Rotation matrix whose columns are the eigenvectors, shape (2, 2).

    Notes
    -----
    No ordering of the eigenvalues is promised. When the input is not
    already diagonal the algebraically larger eigenvalue comes first.
    A diagonal input, including the zero matrix, returns its own diagonal
    and the identity rotation.
    """
    symmat = np.asarray(symmat, dtype=np.float64)
    if symmat.shape != (2, 2):
        raise ValueError(f"symmat must be shape (2, 2), got {symmat.shape}")

    a = float(symmat[0, 0])
    b = float(symmat[0, 1])
    c = float(symmat[1, 1])

    if b == 0.0:
        return np.diag([a, c]), np.eye(2)

    # b != 0, so scale > 0
    scale = max(abs(a), abs(b), abs(c))
    a, b, c = a / scale, b / scale, c / scale

    # Eigenvalues are mean +/- radius; radius > 0 because b != 0
    mean = 0.5 * (a + c)
    radius = np.hypot(0.5 * (a - c), b)
    det = a * c - b * b

    if mean >= 0.0:
        root1 = mean + radius
        root2 = det / root1
    else:
        root2 = mean - radius
        root1 = det / root2

    # An eigenvector for root1 solves (S - root1*I) x = 0. Either row of
    # that system gives one; use the longer for accuracy.
    if abs(root1 - a) >= abs(root1 - c):
        eigvec = np.array([b, root1 - a])
    else:
        eigvec = np.array([root1 - c, b])
    eigvec = eigvec / np.hypot(eigvec[0], eigvec[1])

    rotate = np.array([
        [eigvec[0], -eigvec[1]],
        [eigvec[1], eigvec[0]]
    ])
    eigval = np.diag([root1 * scale, root2 * scale])

    return eigval, rotate


__all__ = [
    "quadratic_roots",
    "diagonalize_symmetric_2x2",
]
