# gpzoo/__init__.py

from . import config
from . import num
from . import kernel
from . import core
from . import misc
from .core import (
    Model,
    Observation,
    GPParams,
    PosteriorResult,
    compute_posterior,
    sample_from_gp,
    sample_paths,
)
from .kernel import KernelKind, KERNELS
from .num import linspace

__version__ = config.__version__

__all__ = [
    "num",
    "kernel",
    "core",
    "Model",
    "Observation",
    "GPParams",
    "PosteriorResult",
    "compute_posterior",
    "sample_from_gp",
    "sample_paths",
    "KernelKind",
    "KERNELS",
    "linspace",
    "__version__",
]
