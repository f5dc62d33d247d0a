## --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022, CentraleSupelec
# License: GPLv3 (see LICENSE)
## --------------------------------------------------------------
import sys
import numpy as np
import scipy.stats as stats
import matplotlib.pyplot as plt
from matplotlib import interactive

from gpzoo.core.utils import observations_to_arrays


class Figure:
    """Figures manager class for 1-d GP plots.

    Methods
    -------
    plot, plotdata
        Curves and observation markers.
    plotgp
        Posterior mean with coverage bands.
    plot_samples
        Sample paths, one curve per column.
    """

    def __init__(self, nrows=1, ncols=1, isinteractive=True, boxoff=True, **kargs):
        # Check if we run in interpreter mode
        self.interpreter = bool(getattr(sys, "ps1", None)) or bool(sys.flags.interactive)

        if isinteractive and self.interpreter:
            interactive(True)

        self.boxoff = boxoff

        self.fig = plt.figure(**kargs)

        self.axes = [
            self.fig.add_subplot(nrows, ncols, i + 1) for i in range(nrows * ncols)
        ]
        self.ax = self.axes[0]
        if self.boxoff:
            self.set_boxoff()

    def set_boxoff(self):
        self.ax.spines["right"].set_visible(False)
        self.ax.spines["top"].set_visible(False)
        self.ax.tick_params(direction="in")

    def subplot(self, i):
        self.ax = self.axes[i - 1]
        if self.boxoff:
            self.set_boxoff()

    def show(self, grid=None, legend=None):
        if grid:
            self.grid()
        if legend:
            self.legend()
        plt.show()

    def close(self):
        plt.close(self.fig)

    def plot(self, x, z, *args, **kargs):
        self.ax.plot(x, z, *args, **kargs)

    def plotdata(self, observations, label="data"):
        """Plot observations given as (x, y) pairs."""
        xi, zi = observations_to_arrays(observations)
        self.ax.plot(
            xi, zi, "rs", markerfacecolor="none", markersize=6, label=label
        )

    def xylabels(self, sx="", sy=""):
        self.ax.set_xlabel(sx)
        self.ax.set_ylabel(sy)

    def title(self, s):
        self.ax.set_title(s)

    def legend(self, **kwargs):
        self.ax.legend(**kwargs)

    def grid(self, visible=True, which="major", linestyle=(0, (1, 5)), linewidth=0.5):
        self.ax.grid(visible, which, linestyle=linestyle, linewidth=linewidth)

    def plotgp(
        self,
        x,
        mean,
        variance,
        mean_label="posterior mean",
        ci=(0.95, 0.99, 0.999),
        ci_labels=("CI 95%", "CI 99%", "CI 99.9%"),
    ):
        """Posterior mean and coverage intervals.

        norminv (1 - 0.05/2)  = 1.959964
        norminv (1 - 0.01/2)  = 2.575829
        norminv (1 - 0.001/2) = 3.290527
        """
        x = np.asarray(x, dtype=float).flatten()
        mean = np.asarray(mean, dtype=float).flatten()
        sd = np.sqrt(np.maximum(np.asarray(variance, dtype=float).flatten(), 0.0))
        if not (x.shape == mean.shape == sd.shape):
            raise ValueError("x, mean and variance must have the same length")
        if len(ci_labels) != len(ci):
            raise ValueError("ci and ci_labels must have the same length")

        # widest band first so that narrower ones are drawn on top
        order = np.argsort(ci)[::-1]
        fillcol = ["#F2F2F2", "#D8D8D8", "#BFBFBF"]
        for k, i in enumerate(order):
            delta = stats.norm.ppf((1 + ci[i]) / 2)
            lower = mean - delta * sd
            upper = mean + delta * sd
            self.ax.fill(
                np.hstack((x, x[::-1])),
                np.hstack((upper, lower[::-1])),
                color=fillcol[k % len(fillcol)],
                label=ci_labels[i],
                alpha=0.8,
                linewidth=0.5,
            )

        self.ax.plot(x, mean, color="#F2404C", linewidth=2.0, label=mean_label)

    def plot_samples(self, x, zsim, label="sample paths", **kargs):
        """Plot sample paths; zsim is (n,) or (n, nb_paths)."""
        zsim = np.asarray(zsim, dtype=float)
        if zsim.ndim == 1:
            zsim = zsim.reshape(-1, 1)
        kargs.setdefault("linewidth", 1)
        self.ax.plot(x, zsim[:, 0], "C0", label=label, **kargs)
        if zsim.shape[1] > 1:
            self.ax.plot(x, zsim[:, 1:], "C0", **kargs)
