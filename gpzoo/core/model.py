# gpzoo/core/model.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Gaussian Process model class.
"""
from .posterior import compute_posterior
from .sampling import sample_from_gp, sample_paths
from . import utils
from .params import GPParams


class Model:
    """Gaussian Process (GP) Model Class.

    A zero-mean GP on the real line with a stationary kernel and
    Gaussian observation noise. The model only holds its parameters:
    every call to `predict` or `sample` builds and factorizes its own
    covariance matrices.

    Attributes
    ----------
    params : GPParams
        Kernel and hyperparameters.

    Examples
    --------
    >>> import gpzoo as gz
    >>> model = gz.Model(kernel="matern52", lengthscale=0.5,
    ...                  signal_variance=1.0, noise_level=0.1)
    >>> obs = [(0.0, 1.0), (1.0, -0.5), (2.0, 0.3)]
    >>> xt = gz.linspace(0.0, 2.0, 21)
    >>> zt_mean, zt_var = model.predict(obs, xt)
    >>> zsim = model.sample(obs, xt, nb_paths=5)
    """

    def __init__(self, params=None, **kwargs):
        """
        Parameters
        ----------
        params : GPParams or mapping, optional
            Model parameters. Mutually exclusive with keyword arguments.
        **kwargs
            Fields of GPParams (kernel, lengthscale, signal_variance,
            noise_level), used when `params` is None.
        """
        if params is not None and kwargs:
            raise ValueError("Provide either params or keyword arguments, not both.")
        if params is None:
            params = GPParams(**kwargs)
        self.params = utils.ensure_params(params)

    def __repr__(self):
        output = str("<gpzoo.core.Model object> " + hex(id(self)))
        return output

    def __str__(self):
        p = self.params
        return (
            f"GP Model:\n"
            f"  Kernel: {p.kernel.info.name}\n"
            f"  Length scale: {p.lengthscale}\n"
            f"  Signal variance: {p.signal_variance}\n"
            f"  Noise level: {p.noise_level}"
        )

    def predict(self, observations, xt):
        """Posterior mean and variance at xt.

        Returns
        -------
        PosteriorResult
            (mean, variance), both of shape (m,).
        """
        return compute_posterior(observations, xt, self.params)

    def sample(self, observations, xt, nb_paths=1, randn=None):
        """Sample paths on xt from the prior (no observations) or the posterior.

        Returns
        -------
        ndarray, shape (nt,) if nb_paths == 1, else (nt, nb_paths)
        """
        if nb_paths == 1:
            return sample_from_gp(observations, xt, self.params, randn)
        return sample_paths(observations, xt, self.params, nb_paths, randn)
