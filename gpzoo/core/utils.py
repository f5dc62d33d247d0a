# gpzoo/core/utils.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Small utilities used across `gpzoo.core` modules.

This file hosts:
- Conversion of observations into aligned (xi, zi) arrays
- Shape/type validation & conversion helpers for xt
- Coercion of parameter bundles to GPParams
"""
from collections.abc import Mapping

import gpzoo.num as gnp
from .params import GPParams


def _observation_pair(obs, k):
    if isinstance(obs, Mapping):
        try:
            return obs["x"], obs["y"]
        except KeyError:
            raise ValueError(f"observation {k} must have keys 'x' and 'y'")
    try:
        x, y = obs
    except (TypeError, ValueError):
        raise ValueError(f"observation {k} must be an (x, y) pair, got {obs!r}")
    return x, y


def observations_to_arrays(observations):
    """Split a sequence of observations into input and output vectors.

    Parameters
    ----------
    observations : sequence
        Items are `Observation`s, (x, y) pairs, or mappings with keys
        'x' and 'y'. None is treated as an empty sequence.

    Returns
    -------
    xi : gnp.array, shape (n,)
        Observation points.
    zi : gnp.array, shape (n,)
        Observed values, in the same order as `xi`.
    """
    if observations is None:
        observations = []
    pairs = [_observation_pair(obs, k) for k, obs in enumerate(observations)]
    xi = gnp.asvector([p[0] for p in pairs], "observation inputs")
    zi = gnp.asvector([p[1] for p in pairs], "observation outputs")
    if not (gnp.all(gnp.isfinite(xi)) and gnp.all(gnp.isfinite(zi))):
        raise ValueError("observations must be finite")
    return xi, zi


def ensure_xt(xt):
    """Return prediction points as a 1-d backend array.

    A (m, 1) column is accepted and flattened.
    """
    xt_ = gnp.asvector(xt, "xt")
    if not gnp.all(gnp.isfinite(xt_)):
        raise ValueError("xt must be finite")
    return xt_


def ensure_params(params):
    """Coerce `params` (GPParams or mapping) to GPParams."""
    if isinstance(params, GPParams):
        return params
    if isinstance(params, Mapping):
        return GPParams.from_dict(params)
    raise TypeError(
        f"params must be a GPParams or a mapping, got {type(params).__name__}"
    )
