# gpzoo/kernel/__init__.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Gaussian Process kernels.

This subpackage provides the stationary covariance functions used by
the GPzoo inference engine, on one-dimensional inputs.

Modules
-------
exponential
    Exponential (Matérn 1/2) and squared-exponential profiles.
matern
    Matérn 3/2 and 5/2 profiles.
registry
    Closed set of named kernels, scalar kernel functions, and
    covariance matrices.

Public API
-----------
- Profiles of the scaled distance h:
    exponential_kernel, squared_exponential_kernel,
    matern32_kernel, matern52_kernel
- Registry:
    KernelKind, KernelInfo, KERNELS, DEFAULT_KERNEL,
    get_kernel, kernel_function, covariance
- Scalar kernels:
    rbf, matern12, matern32, matern52
"""

from .exponential import exponential_kernel, squared_exponential_kernel
from .matern import matern32_kernel, matern52_kernel
from .registry import (
    KernelKind,
    KernelInfo,
    KERNELS,
    DEFAULT_KERNEL,
    get_kernel,
    kernel_function,
    covariance,
    rbf,
    matern12,
    matern32,
    matern52,
)

__all__ = [
    # Profiles
    "exponential_kernel",
    "squared_exponential_kernel",
    "matern32_kernel",
    "matern52_kernel",
    # Registry
    "KernelKind",
    "KernelInfo",
    "KERNELS",
    "DEFAULT_KERNEL",
    "get_kernel",
    "kernel_function",
    "covariance",
    # Scalar kernels
    "rbf",
    "matern12",
    "matern32",
    "matern52",
]
