# gpzoo/core/__init__.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------

"""
Core components of the gpzoo package.

This subpackage contains the GP inference engine: posterior mean and
variance, sampling from the prior and the posterior, and the value
types exchanged with callers.

Public API
----------
compute_posterior : function
    Posterior mean and variance at prediction points.
sample_from_gp : function
    One sample path from the prior or the posterior.
sample_paths : function
    Several sample paths sharing one factorization.
Model : class
    Façade holding GP parameters.
Observation, GPParams, PosteriorResult : types
"""

from .params import Observation, GPParams, PosteriorResult
from .posterior import compute_posterior
from .sampling import sample_from_gp, sample_paths
from .model import Model

__all__ = [
    "Observation",
    "GPParams",
    "PosteriorResult",
    "compute_posterior",
    "sample_from_gp",
    "sample_paths",
    "Model",
]
