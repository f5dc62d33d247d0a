# gpzoo/config.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
import os
import logging

# Read version from VERSION file
_version_file = os.path.join(os.path.dirname(__file__), "..", "VERSION")
try:
    with open(os.path.abspath(_version_file), "r") as f:
        __version__ = f.read().strip()
except FileNotFoundError:
    __version__ = "0.0.0"

# Numerical floors. `jitter` and `sample_jitter` regularize covariance
# matrices before factorization; `cholesky_floor` and `variance_floor`
# bound pivots and reported variances away from zero.
_NUMERICS = {
    "jitter": 1e-8,
    "sample_jitter": 1e-6,
    "cholesky_floor": 1e-10,
    "variance_floor": 1e-10,
    "strict_cholesky": False,
}


def _seed_from_env(default=1234):
    env = os.environ.get("GPZOO_SEED")
    if env is None:
        return default
    try:
        return int(env)
    except ValueError:
        raise ValueError(f"GPZOO_SEED must be an integer, got {env!r}")


class _GPZooConfig:
    def __init__(self):
        self.version = __version__
        self.seed = _seed_from_env()
        for k, v in _NUMERICS.items():
            setattr(self, k, v)
        # logger lives in config
        self.logger = logging.getLogger("gpzoo")
        if not self.logger.handlers:
            h = logging.StreamHandler()
            h.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
            self.logger.addHandler(h)
        self.logger.setLevel(logging.INFO)

    def __str__(self):
        return (
            f"GPZooConfig("
            f"version={self.version}, "
            f"seed={self.seed}, "
            f"jitter={self.jitter}, "
            f"sample_jitter={self.sample_jitter}, "
            f"cholesky_floor={self.cholesky_floor}, "
            f"variance_floor={self.variance_floor}, "
            f"strict_cholesky={self.strict_cholesky})"
        )

    def __repr__(self):
        return (
            f"<GPZooConfig "
            f"version={self.version!r}, "
            f"seed={self.seed!r}, "
            f"jitter={self.jitter!r}, "
            f"sample_jitter={self.sample_jitter!r}, "
            f"cholesky_floor={self.cholesky_floor!r}, "
            f"variance_floor={self.variance_floor!r}, "
            f"strict_cholesky={self.strict_cholesky!r}>"
        )

    def update(self, **kwargs):
        for k, v in kwargs.items():
            if not hasattr(self, k):
                raise AttributeError(f"Unknown configuration entry {k!r}")
            if k == "seed":
                # reseed the process-wide generator as well
                from gpzoo.num import set_seed

                set_seed(v)
                continue
            if k in _NUMERICS and k != "strict_cholesky":
                try:
                    v = float(v)
                except (TypeError, ValueError):
                    raise ValueError(f"{k} must be a number, got {v!r}")
                if not v >= 0.0:
                    raise ValueError(f"{k} must be nonnegative, got {v!r}")
            setattr(self, k, v)
        return self

    def reset_numerics(self):
        for k, v in _NUMERICS.items():
            setattr(self, k, v)
        return self


_config = _GPZooConfig()


def get_config():
    return _config


def reset_numerics():
    """Restore the default jitter and floor values."""
    return _config.reset_numerics()


def get_logger():
    return _config.logger


def set_log_level(level):
    _config.logger.setLevel(level)
