# gpzoo/kernel/exponential.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
import gpzoo.num as gnp


def exponential_kernel(h):
    """Exponential kernel (Matérn 1/2).

    .. math::
        k(h) = \\exp(-h)

    Parameters
    ----------
    h : gnp.array
        Scaled distances |x - y| / rho.

    Returns
    -------
    gnp.array
        Kernel values.
    """
    return gnp.exp(-h)


def squared_exponential_kernel(h):
    """Squared-exponential (RBF) kernel.

    .. math::
        k(h) = \\exp(-h^2 / 2)

    Parameters
    ----------
    h : gnp.array
        Scaled distances |x - y| / rho.

    Returns
    -------
    gnp.array
        Kernel values.
    """
    return gnp.exp(-0.5 * h * h)
