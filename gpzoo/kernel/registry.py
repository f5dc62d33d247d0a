# gpzoo/kernel/registry.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Registry of the stationary kernels available to the inference engine.

Kernels form a closed set, `KernelKind`. Each kind maps to a profile
function of the scaled distance h = |x - y| / rho, from which both the
scalar kernel k(x1, x2, lengthscale, variance) and dense covariance
matrices are derived.

Functions
---------
get_kernel(kernel)
    Resolve None, a KernelKind, or an identifier string to a KernelKind.
kernel_function(kernel)
    Scalar kernel function for a kind.
covariance(x, y, kernel, lengthscale, variance)
    Dense matrix of pairwise kernel evaluations.
"""
from enum import Enum
from typing import Callable, NamedTuple

import gpzoo.num as gnp
from .exponential import exponential_kernel, squared_exponential_kernel
from .matern import matern32_kernel, matern52_kernel


class KernelKind(Enum):
    RBF = "rbf"
    MATERN12 = "matern12"
    MATERN32 = "matern32"
    MATERN52 = "matern52"

    @property
    def profile(self):
        return _PROFILES[self]

    @property
    def info(self):
        return KERNELS[self.value]


DEFAULT_KERNEL = KernelKind.RBF

_PROFILES = {
    KernelKind.RBF: squared_exponential_kernel,
    KernelKind.MATERN12: exponential_kernel,
    KernelKind.MATERN32: matern32_kernel,
    KernelKind.MATERN52: matern52_kernel,
}


def get_kernel(kernel=None):
    """Resolve a kernel identifier to a `KernelKind`.

    Parameters
    ----------
    kernel : None, KernelKind or str
        None selects the default (RBF). Strings are matched
        case-insensitively against the kernel identifiers.

    Returns
    -------
    KernelKind

    Raises
    ------
    ValueError
        If the identifier is not registered.
    TypeError
        If `kernel` is neither None, a KernelKind nor a string.
    """
    if kernel is None:
        return DEFAULT_KERNEL
    if isinstance(kernel, KernelKind):
        return kernel
    if not isinstance(kernel, str):
        raise TypeError(
            f"kernel must be a KernelKind or a string, got {type(kernel).__name__}"
        )
    try:
        return KernelKind(kernel.strip().lower())
    except ValueError:
        valid = ", ".join(repr(k.value) for k in KernelKind)
        raise ValueError(f"Unknown kernel {kernel!r}. Valid kernels are {valid}.")


def _check_lengthscale(lengthscale):
    if not lengthscale > 0.0:
        raise ValueError(f"lengthscale must be positive, got {lengthscale!r}")


def _scalar(kind, x1, x2, lengthscale, variance):
    _check_lengthscale(lengthscale)
    h = abs(x1 - x2) / lengthscale
    return float(variance * kind.profile(h))


def rbf(x1, x2, lengthscale, variance):
    """RBF kernel  sigma2 * exp(-(x1 - x2)^2 / (2 rho^2))."""
    return _scalar(KernelKind.RBF, x1, x2, lengthscale, variance)


def matern12(x1, x2, lengthscale, variance):
    """Matérn 1/2 kernel  sigma2 * exp(-r),  r = |x1 - x2| / rho."""
    return _scalar(KernelKind.MATERN12, x1, x2, lengthscale, variance)


def matern32(x1, x2, lengthscale, variance):
    """Matérn 3/2 kernel  sigma2 * (1 + sqrt(3) r) * exp(-sqrt(3) r)."""
    return _scalar(KernelKind.MATERN32, x1, x2, lengthscale, variance)


def matern52(x1, x2, lengthscale, variance):
    """Matérn 5/2 kernel  sigma2 * (1 + sqrt(5) r + 5 r^2 / 3) * exp(-sqrt(5) r)."""
    return _scalar(KernelKind.MATERN52, x1, x2, lengthscale, variance)


class KernelInfo(NamedTuple):
    name: str
    fn: Callable[[float, float, float, float], float]
    description: str


KERNELS = {
    "rbf": KernelInfo(
        "RBF (Squared Exponential)", rbf, "Infinitely differentiable, very smooth"
    ),
    "matern52": KernelInfo(
        "Matérn 5/2", matern52, "Twice differentiable, fairly smooth"
    ),
    "matern32": KernelInfo(
        "Matérn 3/2", matern32, "Once differentiable, moderately smooth"
    ),
    "matern12": KernelInfo(
        "Matérn 1/2 (Exponential)", matern12, "Continuous but rough, not differentiable"
    ),
}


def kernel_function(kernel=None):
    """Return the scalar function k(x1, x2, lengthscale, variance) of a kernel."""
    return get_kernel(kernel).info.fn


def covariance(x, y=None, kernel=None, lengthscale=1.0, variance=1.0):
    """Covariance matrix between 1-d inputs x (rows) and y (columns).

    .. math::
        K_{ij} = \\sigma^2 k(|x_i - y_j| / \\rho)

    Parameters
    ----------
    x : array_like, shape (n,)
    y : array_like, shape (m,), or None
        None means y := x, and the result is symmetric.
    kernel : None, KernelKind or str
    lengthscale : float
        rho > 0.
    variance : float
        sigma2 >= 0.

    Returns
    -------
    gnp.array, shape (n, m)
    """
    kind = get_kernel(kernel)
    _check_lengthscale(lengthscale)
    x_ = gnp.asvector(x, "x")
    y_ = x_ if y is None else gnp.asvector(y, "y")
    D = gnp.pairwise_distance(x_, y_, lengthscale)
    return variance * kind.profile(D)
