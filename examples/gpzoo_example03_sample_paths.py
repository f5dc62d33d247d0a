"""GP Sample Paths

This script draws sample paths from a GP prior with a Matérn 3/2
kernel, then from the posterior given a few exact observations.

Copyright (c) 2022-2023, CentraleSupelec
Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
License: GPLv3 (see LICENSE)

"""

import gpzoo as gz
import gpzoo.misc.plotutils as plotutils


def generate_data():
    nt = 200
    xt = gz.linspace(-1.0, 1.0, nt)
    zt = gz.misc.testfunctions.twobumps(xt)

    ind = [10, 45, 100, 130, 155]
    observations = [(xt[i], zt[i]) for i in ind]

    return xt, zt, observations


def main():
    xt, zt, observations = generate_data()
    model = gz.Model(
        kernel="matern32", lengthscale=0.5, signal_variance=1.0, noise_level=0.0
    )

    n_samplepaths = 6
    zsim_prior = model.sample([], xt, nb_paths=n_samplepaths)
    zsim_post = model.sample(observations, xt, nb_paths=n_samplepaths)
    zpm, zpv = model.predict(observations, xt)

    fig = plotutils.Figure(nrows=1, ncols=2, isinteractive=True)
    fig.plot_samples(xt, zsim_prior, label="prior sample paths")
    fig.title("Prior sample paths")
    fig.subplot(2)
    fig.plot(xt, zt, "C2", linewidth=1, label="truth")
    fig.plot_samples(xt, zsim_post, label="posterior sample paths")
    fig.plotdata(observations)
    fig.plotgp(xt, zpm, zpv, ci=(0.95,), ci_labels=("CI 95%",))
    fig.title("Conditional sample paths")
    fig.show(legend=True)


if __name__ == "__main__":
    main()
