# gpzoo/core/posterior.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Posterior mean and variance of a zero-mean GP with observation noise.

Functions
---------
compute_posterior(observations, xt, params)
    Posterior mean and variance at the prediction points xt.

training_factor(xi, params)
    Cholesky factor of the regularized covariance at the observation
    points, shared with `gpzoo.core.sampling`.
"""
import gpzoo.num as gnp
from gpzoo.config import get_config, get_logger
from gpzoo.kernel import covariance
from .params import PosteriorResult
from . import utils

_logger = get_logger()


def training_factor(xi, params):
    """Cholesky factor of K(xi, xi) + (sigma_n^2 + jitter) I.

    Parameters
    ----------
    xi : array_like, shape (n,)
        Observation points, n >= 1.
    params : GPParams

    Returns
    -------
    L : gnp.array, shape (n, n)
        Lower-triangular factor.
    """
    Kii = covariance(
        xi, None, params.kernel, params.lengthscale, params.signal_variance
    )
    Kii = gnp.add_diag(Kii, params.noise_variance + get_config().jitter)
    return gnp.cholesky(Kii)


def compute_posterior(observations, xt, params):
    """Compute the posterior mean and variance at xt.

    Parameters
    ----------
    observations : sequence
        (x, y) pairs; see `gpzoo.core.utils.observations_to_arrays`.
        May be empty.
    xt : array_like, shape (m,)
        Prediction points.
    params : GPParams or mapping

    Returns
    -------
    PosteriorResult
        mean and variance, both of shape (m,), in the order of xt.

    Notes
    -----
    With L the Cholesky factor of K(xi, xi) + sigma_n^2 I and
    V = L^{-1} K(xi, xt), the posterior mean is Vᵀ (L^{-1} zi) =
    K(xt, xi) K^{-1} zi and the posterior variance is
    sigma2 - ||V[:, j]||^2, floored at `get_config().variance_floor`.
    Without observations, the prior (0, sigma2) is returned.
    """
    params = utils.ensure_params(params)
    xi, zi = utils.observations_to_arrays(observations)
    xt_ = utils.ensure_xt(xt)
    m = xt_.shape[0]

    # Prior case: no observations
    if xi.shape[0] == 0:
        return PosteriorResult(
            mean=gnp.zeros((m,)),
            variance=params.signal_variance * gnp.ones((m,)),
        )
    if m == 0:
        return PosteriorResult(mean=gnp.zeros((0,)), variance=gnp.zeros((0,)))

    _logger.debug(
        "compute_posterior: %d observations, %d prediction points, kernel %s",
        xi.shape[0],
        m,
        params.kernel.value,
    )

    L = training_factor(xi, params)
    Kit = covariance(
        xi, xt_, params.kernel, params.lengthscale, params.signal_variance
    )

    # one forward solve for the data, one for all columns of K(xi, xt)
    alpha = gnp.solve_l(L, zi)
    V = gnp.solve_l(L, Kit)

    zt_posterior_mean = gnp.einsum("ij,i->j", V, alpha)
    zt_posterior_variance = gnp.maximum(
        params.signal_variance - gnp.einsum("ij,ij->j", V, V),
        get_config().variance_floor,
    )
    return PosteriorResult(mean=zt_posterior_mean, variance=zt_posterior_variance)
