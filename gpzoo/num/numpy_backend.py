# gpzoo/num/numpy_backend.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""NumPy numerical backend for GPzoo.

Dense linear algebra primitives used by the GP inference engine:
constructors, products, a floored Cholesky factorization, triangular
solves, and the process-wide random source.
"""

from typing import Any

import numpy
from numpy import (
    isnan,
    isfinite,
    allclose,
    stack,
    diag,
    arange,
    sqrt,
    exp,
    log,
    cos,
    maximum,
    einsum,
    all,
    any,
    mean,
    std,
)
from numpy.linalg import LinAlgError
from numpy import pi
from scipy.linalg import solve_triangular
from scipy.spatial.distance import cdist

from gpzoo.config import get_config, get_logger

ArrayLike = Any

_config = get_config()
_logger = get_logger()

_np_dtype = numpy.float64

# ..................................................


def asarray(x, dtype=None):
    if dtype is not None:
        return numpy.asarray(x, dtype=dtype)
    if isinstance(x, numpy.ndarray):
        if numpy.issubdtype(x.dtype, numpy.floating):
            return x.astype(_np_dtype, copy=False)
        return x
    elif isinstance(x, (int, float)):
        return numpy.array([x], dtype=_np_dtype)
    else:
        out = numpy.asarray(x)
        if numpy.issubdtype(out.dtype, numpy.integer):
            return out.astype(_np_dtype)
        if numpy.issubdtype(out.dtype, numpy.floating):
            return out.astype(_np_dtype, copy=False)
        return out


def asvector(x, name="x"):
    """Return `x` as a 1-d float array; a 2-d single column is flattened."""
    try:
        v = numpy.asarray(x, dtype=_np_dtype)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{name} must be a sequence of numbers") from exc
    if v.ndim == 2 and v.shape[1] == 1:
        v = v.reshape(-1)
    if v.ndim != 1:
        raise ValueError(f"{name} should be a 1D array, got shape {v.shape}")
    return v


def asmatrix(A, name="A"):
    """Return `A` as a non-empty rectangular 2-d float array."""
    try:
        M = numpy.asarray(A, dtype=_np_dtype)
    except (TypeError, ValueError) as exc:
        # ragged nested sequences end up here
        raise ValueError(f"{name} must be a rectangular matrix") from exc
    if M.ndim != 2:
        raise ValueError(f"{name} should be a 2D array, got shape {M.shape}")
    if M.shape[0] == 0 or M.shape[1] == 0:
        raise ValueError(f"{name} must be non-empty")
    return M


def _check_square(A, name="A"):
    if A.shape[0] != A.shape[1]:
        raise ValueError(f"{name} must be square, got shape {A.shape}")


# ..................................................


def zeros(shape, dtype=None):
    return numpy.zeros(shape, dtype=_np_dtype if dtype is None else dtype)


def ones(shape, dtype=None):
    return numpy.ones(shape, dtype=_np_dtype if dtype is None else dtype)


def full(n, m, value):
    """Return an (n, m) matrix filled with `value`."""
    if n < 1 or m < 1:
        raise ValueError(f"full requires n >= 1 and m >= 1, got ({n}, {m})")
    return numpy.full((n, m), value, dtype=_np_dtype)


def eye(n):
    """Return the (n, n) identity matrix."""
    if n < 1:
        raise ValueError(f"eye requires n >= 1, got {n}")
    return numpy.eye(n, dtype=_np_dtype)


def linspace(start, end, n):
    """Return `n` evenly spaced points from `start` to `end` inclusive.

    The range is divided into n - 1 equal steps, so n must be at least 2.
    """
    if n < 2:
        raise ValueError(f"linspace requires n >= 2, got {n}")
    return numpy.linspace(start, end, num=n, endpoint=True, dtype=_np_dtype)


# ..................................................


def transpose(A):
    return asmatrix(A).T.copy()


def matvec(A, x):
    """Matrix-vector product A x."""
    A = asmatrix(A)
    x = asvector(x)
    if A.shape[1] != x.shape[0]:
        raise ValueError(
            f"matvec: A has {A.shape[1]} columns but x has length {x.shape[0]}"
        )
    return A @ x


def matmul(A, B):
    """Matrix-matrix product A B."""
    A = asmatrix(A, "A")
    B = asmatrix(B, "B")
    if A.shape[1] != B.shape[0]:
        raise ValueError(f"matmul: incompatible shapes {A.shape} and {B.shape}")
    return A @ B


def add_diag(A, c):
    """Return a copy of the square matrix `A` with `c` added to its diagonal."""
    A = asmatrix(A)
    _check_square(A)
    out = A.copy()
    idx = arange(out.shape[0])
    out[idx, idx] += c
    return out


# ..................................................


def cholesky(A, floor=None, strict=None):
    """Cholesky factorization with a floor on the pivots.

    Parameters
    ----------
    A : array_like, shape (n, n)
        Symmetric matrix. Only the lower triangle is read.
    floor : float, optional
        Lower bound on the squared pivots. Defaults to
        ``get_config().cholesky_floor``.
    strict : bool, optional
        If True, raise instead of clamping a pivot. Defaults to
        ``get_config().strict_cholesky``.

    Returns
    -------
    L : ndarray, shape (n, n)
        Lower-triangular factor with L Lᵀ = A whenever no pivot was clamped.

    Raises
    ------
    numpy.linalg.LinAlgError
        In strict mode, if a pivot falls below `floor`.

    Notes
    -----
    Row i is obtained from the rows above it:

    .. math::
        L_{ij} = (A_{ij} - \\sum_{k<j} L_{ik} L_{jk}) / L_{jj},\\quad j < i

        L_{ii} = \\sqrt{\\max(A_{ii} - \\sum_{k<i} L_{ik}^2, \\epsilon)}

    The off-diagonal part of row i is a forward substitution against the
    leading (i, i) block of L. Clamping turns a mildly indefinite matrix
    into a usable factor instead of a NaN.
    """
    A = asmatrix(A)
    _check_square(A)
    floor = _config.cholesky_floor if floor is None else floor
    strict = _config.strict_cholesky if strict is None else strict

    n = A.shape[0]
    L = numpy.zeros((n, n), dtype=_np_dtype)
    nclamped = 0
    for i in range(n):
        if i > 0:
            L[i, :i] = solve_triangular(L[:i, :i], A[i, :i], lower=True)
        d = A[i, i] - L[i, :i] @ L[i, :i]
        if not d >= floor:
            if strict:
                raise LinAlgError(
                    f"Matrix is not positive definite: pivot {i} is {d:.3e} "
                    f"(floor {floor:.1e})"
                )
            nclamped += 1
            d = floor
        L[i, i] = sqrt(d)

    if nclamped > 0:
        _logger.debug(
            "cholesky: clamped %d of %d pivots to %.1e", nclamped, n, floor
        )
    return L


def _check_triangular_system(L, b):
    L = asmatrix(L, "L")
    _check_square(L, "L")
    b = asarray(b)
    if b.ndim not in (1, 2):
        raise ValueError(f"b should be 1D or 2D, got shape {b.shape}")
    if b.shape[0] != L.shape[0]:
        raise ValueError(
            f"L is {L.shape[0]}x{L.shape[0]} but b has {b.shape[0]} rows"
        )
    return L, b


def solve_l(L, b):
    """Forward substitution: solve L x = b for lower-triangular L."""
    L, b = _check_triangular_system(L, b)
    return solve_triangular(L, b, lower=True)


def solve_lt(L, b):
    """Backward substitution: solve Lᵀ x = b for lower-triangular L."""
    L, b = _check_triangular_system(L, b)
    return solve_triangular(L, b, lower=True, trans="T")


def cholesky_solve(L, b):
    """Solve (L Lᵀ) x = b given the Cholesky factor L."""
    return solve_lt(L, solve_l(L, b))


# ..................................................

# Build one global RNG (or let the user set the seed somewhere):
_np_rng = numpy.random.default_rng(seed=_config.seed)


def set_seed(seed: int) -> None:
    """Set the global NumPy generator seed."""
    global _np_rng
    _config.seed = seed
    _np_rng = numpy.random.default_rng(seed=seed)


def rand(*shape: int) -> ArrayLike:
    return _np_rng.random(shape, dtype=_np_dtype)


def _uniform_nonzero(*shape: int) -> ArrayLike:
    u = rand(*shape)
    zero = u == 0.0
    while zero.any():
        u[zero] = rand(int(zero.sum()))
        zero = u == 0.0
    return u


def randn(*shape: int) -> ArrayLike:
    """Standard normal variates by the Box-Muller transform.

    Each variate is built from two independent uniform(0, 1) draws; a
    draw that is exactly zero is resampled so that log(u) stays finite.
    With no argument, a single float is returned.
    """
    size = shape if shape else (1,)
    u = _uniform_nonzero(*size)
    v = _uniform_nonzero(*size)
    z = sqrt(-2.0 * log(u)) * cos(2.0 * pi * v)
    if not shape:
        return float(z[0])
    return z


# ..................................................


def pairwise_distance(x, y, lengthscale):
    """Matrix of scaled distances |x_i - y_j| / lengthscale for 1-d inputs."""
    xs = asvector(x, "x").reshape(-1, 1) / lengthscale
    ys = asvector(y, "y").reshape(-1, 1) / lengthscale
    if xs.shape[0] == 0 or ys.shape[0] == 0:
        return numpy.zeros((xs.shape[0], ys.shape[0]), dtype=_np_dtype)
    return cdist(xs, ys)
