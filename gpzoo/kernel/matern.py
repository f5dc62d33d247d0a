# gpzoo/kernel/matern.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
from math import sqrt
import gpzoo.num as gnp


def matern32_kernel(h):
    """Matérn 3/2 kernel.

    .. math::
        K(h) = (1 + \\sqrt{3}\\,h) \\exp(-\\sqrt{3}\\,h)

    Parameters
    ----------
    h : gnp.array
        Scaled distances between points.

    Returns
    -------
    gnp.array
        Kernel values.
    """
    t = sqrt(3.0) * h
    return (1.0 + t) * gnp.exp(-t)


def matern52_kernel(h):
    """Matérn 5/2 kernel.

    .. math::
        K(h) = (1 + \\sqrt{5}\\,h + 5h^2/3) \\exp(-\\sqrt{5}\\,h)
    """
    t = sqrt(5.0) * h
    return (1.0 + t + t * t / 3.0) * gnp.exp(-t)

