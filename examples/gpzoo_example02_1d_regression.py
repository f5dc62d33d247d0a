"""
GP regression on noisy observations of a 1d test function

Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
Copyright (c) 2022-2024, CentraleSupelec
License: GPLv3 (see LICENSE)
"""

import gpzoo as gz
import gpzoo.num as gnp
import gpzoo.misc.plotutils as plotutils


def generate_data(noise_level):
    """
    Data generation.

    Returns
    -------
    tuple
        (xt, zt): target data
        observations: list of noisy (x, y) pairs
    """
    nt = 200
    xt = gz.linspace(-1.0, 1.0, nt)
    zt = gz.misc.testfunctions.twobumps(xt)

    ni = 12
    gnp.set_seed(4321)
    xi = -1.0 + 2.0 * gnp.rand(ni)
    zi = gz.misc.testfunctions.twobumps(xi) + noise_level * gnp.randn(ni)
    observations = [gz.Observation(x, y) for x, y in zip(xi, zi)]

    return xt, zt, observations


def main():
    params = gz.GPParams(
        kernel="matern52", lengthscale=0.4, signal_variance=1.0, noise_level=0.1
    )
    xt, zt, observations = generate_data(params.noise_level)

    model = gz.Model(params)
    print(model)
    zpm, zpv = model.predict(observations, xt)

    fig = plotutils.Figure(isinteractive=True)
    fig.plot(xt, zt, "k", linewidth=1, linestyle=(0, (5, 5)), label="truth")
    fig.plotdata(observations)
    fig.plotgp(xt, zpm, zpv)
    fig.xylabels("$x$", "$z$")
    fig.title("Posterior GP, noisy observations")
    fig.show(grid=True, legend=True)


if __name__ == "__main__":
    main()
