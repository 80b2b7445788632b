# -*- coding: utf-8 -*-
"""
General Matrix Products - Matrix arithmetic on caller-sized buffers.

The routines in this module operate on matrices whose extents are runtime
parameters. A matrix may be passed either as a 2D array, in which case
omitted extents are taken from its shape and an explicit column count must
equal its width, or as any buffer (flat or otherwise) together with
explicit row and column counts; in the latter case the leading
``nrow * ncol`` elements of the flattened buffer are read in row-major
order, element ``[row][col]`` living at ``row * ncol + col``.

Every product is accumulated into a freshly allocated scratch matrix and
copied to ``out`` only after the whole computation has finished, so
``out`` may be one of the inputs. Sums run sequentially over the inner
index starting from 0.0; the result is bit-for-bit identical to the
textbook triple loop.

Dependencies
------------
numpy - Array storage and elementwise arithmetic

License
-------
MIT License
Copyright (c) 2024 geoint.org
"""

# Standard library
import logging
from typing import Optional, Tuple

# Third-party
import numpy as np

# navgeom internal
from navgeom.utils.exceptions import AllocationError

logger = logging.getLogger(__name__)


# ===================================================================
# Buffer Helpers
# ===================================================================

def _check_extent(name: str, value: int) -> int:
    """Validate a row/column count that must be non-negative."""
    value = int(value)
    if value < 0:
        raise ValueError(f"{name} must be >= 0, got {value}")
    return value


def _inner_extent(name: str, value: int) -> int:
    """Inner (summed) dimension; negative counts behave as zero."""
    value = int(value)
    if value < 0:
        logger.debug("%s = %d is negative; result is the zero matrix", name, value)
        return 0
    return value


def _matrix_shape(m: np.ndarray, name: str) -> Tuple[int, int]:
    """Shape of a 2D input, used when extents are not supplied."""
    m = np.asarray(m)
    if m.ndim != 2:
        raise ValueError(
            f"{name} has shape {m.shape}; pass a 2D array or give its extents explicitly"
        )
    return m.shape[0], m.shape[1]


def _resolve_extents(
    m: np.ndarray,
    name: str,
    nrow: Optional[int],
    ncol: Optional[int]
) -> Tuple[int, int]:
    """
    Fill in omitted extents of ``m`` from its 2D shape.

    Buffers that are not 2D are returned untouched when both extents are
    given. For a 2D array the explicit extents must fit its shape: a column
    count other than ``shape[1]`` would reread the row-major memory with a
    different stride.
    """
    if nrow is not None and ncol is not None and np.ndim(m) != 2:
        return nrow, ncol
    rows, cols = _matrix_shape(m, name)
    if ncol is not None and 0 <= int(ncol) != cols:
        raise ValueError(f"{name} has {cols} columns; got ncol={ncol}")
    if nrow is not None and int(nrow) > rows:
        raise ValueError(f"{name} has {rows} rows; {nrow} required")
    return (rows if nrow is None else nrow), (cols if ncol is None else ncol)


def _as_matrix(m: np.ndarray, nrow: int, ncol: int, name: str) -> np.ndarray:
    """
    View the leading ``nrow * ncol`` elements of ``m`` as a row-major matrix.

    Parameters
    ----------
    m : np.ndarray
        Input buffer of any shape.
    nrow, ncol : int
        Row and column counts, both >= 0.
    name : str
        Argument name used in error messages.

    Returns
    -------
    np.ndarray
        float64 array of shape (nrow, ncol).
    """
    flat = np.asarray(m, dtype=np.float64).reshape(-1)
    nelt = nrow * ncol
    if flat.size < nelt:
        raise ValueError(
            f"{name} holds {flat.size} elements; {nrow}x{ncol} requires {nelt}"
        )
    return flat[:nelt].reshape(nrow, ncol)


def _as_vector(v: np.ndarray, n: int, name: str) -> np.ndarray:
    """View the leading ``n`` elements of ``v`` as a vector."""
    flat = np.asarray(v, dtype=np.float64).reshape(-1)
    if flat.size < n:
        raise ValueError(f"{name} holds {flat.size} elements; {n} required")
    return flat[:n]


def _check_out(out: Optional[np.ndarray], nelt: int) -> None:
    """Validate a caller-supplied output buffer before any work is done."""
    if out is None:
        return
    if not isinstance(out, np.ndarray):
        raise ValueError(f"out must be a numpy array, got {type(out).__name__}")
    if out.dtype != np.float64:
        raise ValueError(f"out must have dtype float64, got {out.dtype}")
    if not out.flags.c_contiguous or not out.flags.writeable:
        raise ValueError("out must be a writable C-contiguous array")
    if out.size < nelt:
        raise ValueError(f"out holds {out.size} elements; {nelt} required")


def _scratch(shape: Tuple[int, ...]) -> np.ndarray:
    """
    Allocate a zeroed scratch array for a product.

    Raises
    ------
    AllocationError
        If the array cannot be allocated.
    """
    try:
        return np.zeros(shape, dtype=np.float64)
    except MemoryError as exc:
        logger.debug("Scratch allocation of shape %s failed", shape)
        raise AllocationError(shape) from exc


def _deliver(result: np.ndarray, out: Optional[np.ndarray]) -> np.ndarray:
    """Copy a finished result into ``out`` (row-major), or return it."""
    if out is None:
        return result
    out.reshape(-1)[:result.size] = result.reshape(-1)
    return out


# ===================================================================
# Transpose Products
# ===================================================================

def mtxm_general(
    m1: np.ndarray,
    m2: np.ndarray,
    nc1: Optional[int] = None,
    nr1r2: Optional[int] = None,
    nc2: Optional[int] = None,
    out: Optional[np.ndarray] = None
) -> np.ndarray:
    """
    Multiply the transpose of a matrix with another matrix.

    Computes ``transpose(m1) @ m2`` where ``m1`` is ``nr1r2 x nc1`` and
    ``m2`` is ``nr1r2 x nc2``:

        mout[i][j] = sum_{k=0}^{nr1r2-1} m1[k][i] * m2[k][j]

    Parameters
    ----------
    m1 : np.ndarray
        Left matrix, ``nr1r2 x nc1``. A 2D array or a buffer read with
        the given extents.
    m2 : np.ndarray
        Right matrix, ``nr1r2 x nc2``.
    nc1 : int, optional
        Column count of ``m1`` (row count of the result). Taken from
        ``m1.shape[1]`` when omitted.
    nr1r2 : int, optional
        Row count shared by ``m1`` and ``m2``. Taken from ``m1.shape[0]``
        when omitted. A negative value yields the zero matrix.
    nc2 : int, optional
        Column count of ``m2`` (column count of the result). Taken from
        ``m2.shape[1]`` when omitted.
    out : np.ndarray, optional
        Writable C-contiguous float64 buffer of at least ``nc1 * nc2``
        elements receiving the result in row-major order. May be ``m1``
        or ``m2``.

    Returns
    -------
    np.ndarray
        ``out`` if given, otherwise a new ``(nc1, nc2)`` array.

    Raises
    ------
    AllocationError
        If the scratch matrix cannot be allocated. ``out`` is not written.
    ValueError
        If extents are negative (other than ``nr1r2``), inputs are too
        small, or shapes disagree. When some extents are inferred, an
        explicit column count that differs from a 2D input's width is
        also rejected.
    """
    if nc1 is None or nr1r2 is None or nc2 is None:
        nr1r2, nc1 = _resolve_extents(m1, "m1", nr1r2, nc1)
        _, nc2 = _resolve_extents(m2, "m2", nr1r2, nc2)

    nc1 = _check_extent("nc1", nc1)
    nc2 = _check_extent("nc2", nc2)
    nr1r2 = _inner_extent("nr1r2", nr1r2)

    a = _as_matrix(m1, nr1r2, nc1, "m1")
    b = _as_matrix(m2, nr1r2, nc2, "m2")
    _check_out(out, nc1 * nc2)

    tmp = _scratch((nc1, nc2))
    prod = _scratch((nc1, nc2))
    for k in range(nr1r2):
        np.multiply.outer(a[k], b[k], out=prod)
        tmp += prod

    return _deliver(tmp, out)


def mtxv_general(
    m: np.ndarray,
    v: np.ndarray,
    nrow: Optional[int] = None,
    ncol: Optional[int] = None,
    out: Optional[np.ndarray] = None
) -> np.ndarray:
    """
    Multiply the transpose of a matrix with a vector.

    Parameters
    ----------
    m : np.ndarray
        Matrix, ``nrow x ncol``.
    v : np.ndarray
        Vector of length ``nrow``.
    nrow, ncol : int, optional
        Extents of ``m``; taken from its shape when omitted. A negative
        ``nrow`` yields the zero vector.
    out : np.ndarray, optional
        Buffer of at least ``ncol`` elements; may alias ``v``.

    Returns
    -------
    np.ndarray
        ``transpose(m) @ v``, length ``ncol``.
    """
    if nrow is None or ncol is None:
        nrow, ncol = _resolve_extents(m, "m", nrow, ncol)

    ncol = _check_extent("ncol", ncol)
    nrow = _inner_extent("nrow", nrow)

    a = _as_matrix(m, nrow, ncol, "m")
    x = _as_vector(v, nrow, "v")
    _check_out(out, ncol)

    tmp = _scratch((ncol,))
    prod = _scratch((ncol,))
    for k in range(nrow):
        np.multiply(a[k], x[k], out=prod)
        tmp += prod

    return _deliver(tmp, out)


# ===================================================================
# Plain Products
# ===================================================================

def mxm_general(
    m1: np.ndarray,
    m2: np.ndarray,
    nr1: Optional[int] = None,
    nc1r2: Optional[int] = None,
    nc2: Optional[int] = None,
    out: Optional[np.ndarray] = None
) -> np.ndarray:
    """
    Multiply two matrices of arbitrary compatible dimension.

    Computes ``m1 @ m2`` with ``m1`` of size ``nr1 x nc1r2`` and ``m2`` of
    size ``nc1r2 x nc2``. Extent handling, aliasing and failure modes are
    those of `mtxm_general`.

    Returns
    -------
    np.ndarray
        ``out`` if given, otherwise a new ``(nr1, nc2)`` array.
    """
    if nr1 is None or nc1r2 is None or nc2 is None:
        nr1, nc1r2 = _resolve_extents(m1, "m1", nr1, nc1r2)
        _, nc2 = _resolve_extents(m2, "m2", nc1r2, nc2)

    nr1 = _check_extent("nr1", nr1)
    nc2 = _check_extent("nc2", nc2)
    nc1r2 = _inner_extent("nc1r2", nc1r2)

    a = _as_matrix(m1, nr1, nc1r2, "m1")
    b = _as_matrix(m2, nc1r2, nc2, "m2")
    _check_out(out, nr1 * nc2)

    tmp = _scratch((nr1, nc2))
    prod = _scratch((nr1, nc2))
    for k in range(nc1r2):
        np.multiply.outer(a[:, k], b[k], out=prod)
        tmp += prod

    return _deliver(tmp, out)


def mxmt_general(
    m1: np.ndarray,
    m2: np.ndarray,
    nr1: Optional[int] = None,
    nc1c2: Optional[int] = None,
    nr2: Optional[int] = None,
    out: Optional[np.ndarray] = None
) -> np.ndarray:
    """
    Multiply a matrix with the transpose of another matrix.

    Computes ``m1 @ transpose(m2)`` with ``m1`` of size ``nr1 x nc1c2``
    and ``m2`` of size ``nr2 x nc1c2``.

    Returns
    -------
    np.ndarray
        ``out`` if given, otherwise a new ``(nr1, nr2)`` array.
    """
    if nr1 is None or nc1c2 is None or nr2 is None:
        nr1, nc1c2 = _resolve_extents(m1, "m1", nr1, nc1c2)
        nr2, _ = _resolve_extents(m2, "m2", nr2, nc1c2)

    nr1 = _check_extent("nr1", nr1)
    nr2 = _check_extent("nr2", nr2)
    nc1c2 = _inner_extent("nc1c2", nc1c2)

    a = _as_matrix(m1, nr1, nc1c2, "m1")
    b = _as_matrix(m2, nr2, nc1c2, "m2")
    _check_out(out, nr1 * nr2)

    tmp = _scratch((nr1, nr2))
    prod = _scratch((nr1, nr2))
    for k in range(nc1c2):
        np.multiply.outer(a[:, k], b[:, k], out=prod)
        tmp += prod

    return _deliver(tmp, out)


def mxv_general(
    m: np.ndarray,
    v: np.ndarray,
    nrow: Optional[int] = None,
    ncol: Optional[int] = None,
    out: Optional[np.ndarray] = None
) -> np.ndarray:
    """
    Multiply a matrix with a vector.

    Parameters
    ----------
    m : np.ndarray
        Matrix, ``nrow x ncol``.
    v : np.ndarray
        Vector of length ``ncol``.
    nrow, ncol : int, optional
        Extents of ``m``; taken from its shape when omitted. A negative
        ``ncol`` yields the zero vector.
    out : np.ndarray, optional
        Buffer of at least ``nrow`` elements; may alias ``v``.

    Returns
    -------
    np.ndarray
        ``m @ v``, length ``nrow``.
    """
    if nrow is None or ncol is None:
        nrow, ncol = _resolve_extents(m, "m", nrow, ncol)

    nrow = _check_extent("nrow", nrow)
    ncol = _inner_extent("ncol", ncol)

    a = _as_matrix(m, nrow, ncol, "m")
    x = _as_vector(v, ncol, "v")
    _check_out(out, nrow)

    tmp = _scratch((nrow,))
    prod = _scratch((nrow,))
    for k in range(ncol):
        np.multiply(a[:, k], x[k], out=prod)
        tmp += prod

    return _deliver(tmp, out)


def transpose_general(
    m: np.ndarray,
    nrow: Optional[int] = None,
    ncol: Optional[int] = None,
    out: Optional[np.ndarray] = None
) -> np.ndarray:
    """
    Transpose a matrix of arbitrary size.

    In-place transposition (``out=m``) is supported for any shape: the
    result is written row-major as an ``ncol x nrow`` matrix into the same
    buffer.

    Returns
    -------
    np.ndarray
        ``out`` if given, otherwise a new ``(ncol, nrow)`` array.
    """
    if nrow is None or ncol is None:
        nrow, ncol = _resolve_extents(m, "m", nrow, ncol)

    nrow = _check_extent("nrow", nrow)
    ncol = _check_extent("ncol", ncol)

    a = _as_matrix(m, nrow, ncol, "m")
    _check_out(out, nrow * ncol)

    tmp = _scratch((ncol, nrow))
    tmp[...] = a.T

    return _deliver(tmp, out)


__all__ = [
    "mtxm_general",
    "mtxv_general",
    "mxm_general",
    "mxmt_general",
    "mxv_general",
    "transpose_general",
]
