# gpzoo/core/sampling.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Sampling routines for GP models.

This module provides:
- Sample paths on a grid `xt` from the GP prior (no observations).
- Sample paths from the GP posterior given noisy observations.
"""
import gpzoo.num as gnp
from gpzoo.config import get_config, get_logger
from gpzoo.kernel import covariance
from .posterior import training_factor
from . import utils

_logger = get_logger()


def _standard_normal(randn, nt, nb_paths):
    if randn is None:
        return gnp.randn(nt, nb_paths)
    if not callable(randn):
        raise TypeError("randn must be a callable randn(n) -> array")
    # one call per path, so that a single-draw source serves both entry points
    cols = []
    for _ in range(nb_paths):
        z = gnp.asvector(randn(nt), "randn output")
        if z.shape[0] != nt:
            raise ValueError(f"randn({nt}) returned {z.shape[0]} values")
        cols.append(z)
    return gnp.stack(cols, axis=1)


def posterior_mean_and_covariance(xi, zi, xt, params):
    """Posterior mean vector and covariance matrix at xt.

    Parameters
    ----------
    xi, zi : gnp.array, shape (n,)
        Observation points and values, n >= 1.
    xt : gnp.array, shape (m,)
    params : GPParams

    Returns
    -------
    zt_mean : gnp.array, shape (m,)
        K(xt, xi) K^{-1} zi.
    zt_cov : gnp.array, shape (m, m)
        K(xt, xt) - Vᵀ V with V = L^{-1} K(xi, xt).
    """
    L = training_factor(xi, params)
    Kti = covariance(
        xt, xi, params.kernel, params.lengthscale, params.signal_variance
    )
    Ktt = covariance(
        xt, None, params.kernel, params.lengthscale, params.signal_variance
    )

    alpha = gnp.cholesky_solve(L, zi)
    zt_mean = gnp.matvec(Kti, alpha)

    V = gnp.solve_l(L, gnp.transpose(Kti))  # (n, m)
    zt_cov = Ktt - gnp.matmul(gnp.transpose(V), V)
    return zt_mean, zt_cov


def sample_paths(observations, xt, params, nb_paths=1, randn=None):
    """Generates ``nb_paths`` sample paths on ``xt`` from the GP prior, or
    from the posterior when observations are given.

    Parameters
    ----------
    observations : sequence
        (x, y) pairs; empty for the prior.
    xt : array_like, shape (nt,)
        Points where the sample paths are generated.
    params : GPParams or mapping
    nb_paths : int, optional (default: 1)
        Number of sample paths. All paths share one factorization.
    randn : callable, optional
        ``randn(nt)`` returning nt standard normal values. Defaults to
        the process-wide source `gpzoo.num.randn`.

    Returns
    -------
    ndarray, shape (nt, nb_paths)

    Notes
    -----
    - Prior: K(xt, xt) + jitter I = C Cᵀ, draw as C @ N(0, I).
    - Posterior: Σ = K(xt, xt) - K(xt, xi) K^{-1} K(xi, xt), then
      Σ + sample_jitter I = C Cᵀ, draw as mean + C @ N(0, I).
    """
    if int(nb_paths) != nb_paths or nb_paths < 1:
        raise ValueError(f"nb_paths must be a positive integer, got {nb_paths}")
    nb_paths = int(nb_paths)
    params = utils.ensure_params(params)
    xi, zi = utils.observations_to_arrays(observations)
    xt_ = utils.ensure_xt(xt)
    nt = xt_.shape[0]
    config = get_config()

    if nt == 0:
        return gnp.zeros((0, nb_paths))

    if xi.shape[0] == 0:
        K = covariance(
            xt_, None, params.kernel, params.lengthscale, params.signal_variance
        )
        C = gnp.cholesky(gnp.add_diag(K, config.jitter))
        zt_mean = gnp.zeros((nt,))
    else:
        _logger.debug(
            "sample_paths: %d observations, %d points, %d paths",
            xi.shape[0],
            nt,
            nb_paths,
        )
        zt_mean, zt_cov = posterior_mean_and_covariance(xi, zi, xt_, params)
        C = gnp.cholesky(gnp.add_diag(zt_cov, config.sample_jitter))

    zsim = gnp.matmul(C, _standard_normal(randn, nt, nb_paths))
    return zt_mean.reshape(-1, 1) + zsim


def sample_from_gp(observations, xt, params, randn=None):
    """Draw one sample function on ``xt`` from the GP prior or posterior.

    Parameters
    ----------
    observations : sequence
        (x, y) pairs; empty for the prior.
    xt : array_like, shape (nt,)
    params : GPParams or mapping
    randn : callable, optional
        ``randn(nt)`` returning nt standard normal values.

    Returns
    -------
    ndarray, shape (nt,)
    """
    return sample_paths(observations, xt, params, nb_paths=1, randn=randn)[:, 0]
