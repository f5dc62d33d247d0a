# gpzoo/core/params.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Value types exchanged with the inference engine.

Observation
    One (x, y) data point.
GPParams
    Kernel choice and hyperparameters of a GP model.
PosteriorResult
    Posterior mean and variance at the prediction points.
"""
import math
from dataclasses import dataclass, field
from typing import Any, NamedTuple

import scipy.stats as stats

import gpzoo.num as gnp
from gpzoo.kernel import KernelKind, get_kernel


class Observation(NamedTuple):
    x: float
    y: float


@dataclass(frozen=True)
class GPParams:
    """Hyperparameters of a zero-mean GP with observation noise.

    Attributes
    ----------
    lengthscale : float
        Length scale rho > 0.
    signal_variance : float
        Prior variance sigma2 >= 0 of the function values.
    noise_level : float
        Standard deviation sigma_n >= 0 of the observation noise.
    kernel : KernelKind
        Covariance kernel. Strings and None are resolved with
        `gpzoo.kernel.get_kernel`; None selects the RBF kernel.
    """

    lengthscale: float
    signal_variance: float
    noise_level: float = 0.0
    kernel: Any = field(default=None)

    _ALIASES = {
        "lengthScale": "lengthscale",
        "length_scale": "lengthscale",
        "signalVariance": "signal_variance",
        "noiseLevel": "noise_level",
    }

    def __post_init__(self):
        object.__setattr__(self, "kernel", get_kernel(self.kernel))
        for name in ("lengthscale", "signal_variance", "noise_level"):
            value = getattr(self, name)
            try:
                value = float(value)
            except (TypeError, ValueError):
                raise ValueError(f"{name} must be a real number, got {value!r}")
            if not math.isfinite(value):
                raise ValueError(f"{name} must be finite, got {value!r}")
            object.__setattr__(self, name, value)
        if self.lengthscale <= 0.0:
            raise ValueError(f"lengthscale must be positive, got {self.lengthscale}")
        if self.signal_variance < 0.0:
            raise ValueError(
                f"signal_variance must be nonnegative, got {self.signal_variance}"
            )
        if self.noise_level < 0.0:
            raise ValueError(f"noise_level must be nonnegative, got {self.noise_level}")

    @classmethod
    def from_dict(cls, d):
        """Build parameters from a mapping.

        Both the field names and the camelCase keys ``lengthScale``,
        ``signalVariance`` and ``noiseLevel`` are accepted.
        """
        kwargs = {}
        for key, value in d.items():
            name = cls._ALIASES.get(key, key)
            if name not in ("lengthscale", "signal_variance", "noise_level", "kernel"):
                raise ValueError(f"Unknown GP parameter {key!r}")
            if name in kwargs:
                raise ValueError(f"GP parameter {name!r} given twice")
            kwargs[name] = value
        return cls(**kwargs)

    @property
    def noise_variance(self):
        return self.noise_level ** 2

    def to_dict(self):
        return {
            "kernel": self.kernel.value,
            "lengthscale": self.lengthscale,
            "signal_variance": self.signal_variance,
            "noise_level": self.noise_level,
        }


class PosteriorResult(NamedTuple):
    """Posterior mean and variance, aligned with the prediction points."""

    mean: Any
    variance: Any

    def std(self):
        return gnp.sqrt(self.variance)

    def credible_interval(self, level=0.95):
        """Return (lower, upper) bounds of the pointwise Gaussian interval.

        .. math::
            \\mu \\pm \\Phi^{-1}((1 + level) / 2)\\, \\sigma
        """
        if not 0.0 < level < 1.0:
            raise ValueError(f"level must be in (0, 1), got {level}")
        delta = stats.norm.ppf((1.0 + level) / 2.0)
        s = self.std()
        return self.mean - delta * s, self.mean + delta * s


__all__ = ["Observation", "GPParams", "PosteriorResult", "KernelKind"]
