"""
Plot the covariance functions of the kernel registry

Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
Copyright (c) 2022-2024, CentraleSupelec
License: GPLv3 (see LICENSE)
"""

import gpzoo as gz
import gpzoo.misc.plotutils as plotutils


def main():
    lengthscale = 0.5
    signal_variance = 1.0
    x = gz.linspace(-2.0, 2.0, 201)

    fig = plotutils.Figure(isinteractive=True)
    for kind in gz.KernelKind:
        k = gz.kernel.covariance(
            [0.0], x, kind, lengthscale=lengthscale, variance=signal_variance
        )
        fig.plot(x, k[0], linewidth=1.5, label=kind.info.name)
        print(f"{kind.value:9s} {kind.info.name:28s} {kind.info.description}")
    fig.xylabels("$x$", "$k(0, x)$")
    fig.title("Kernels (lengthscale = {:.2f})".format(lengthscale))
    fig.show(grid=True, legend=True)


if __name__ == "__main__":
    main()
