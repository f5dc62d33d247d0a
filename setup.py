#!/usr/bin/env python
import os
from setuptools import setup

with open(os.path.join(os.path.dirname(__file__), "VERSION"), "r") as fh:
    version = fh.read().strip()

long_description = """GPzoo: exact Gaussian process regression on the real line.

Posterior mean and variance, and sample paths from the prior or the
posterior, for the RBF and Matérn 1/2, 3/2, 5/2 kernels."""

setup(name='gpzoo',
      version=version,
      author='Emmanuel Vazquez',
      author_email='emmanuel.vazquez@centralesupelec.fr',
      description='GPzoo: Gaussian process regression and sampling in 1d',
      long_description=long_description,
      long_description_content_type="text/plain",
      classifiers=[
          "Programming Language :: Python :: 3",
          "License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)",
          "Operating System :: OS Independent",
      ],
      packages=['gpzoo', 'gpzoo.num', 'gpzoo.kernel', 'gpzoo.core', 'gpzoo.misc'],
      license='GPLv3',
      install_requires=[
             "numpy",
             "scipy>=1.8.0",
             "matplotlib"
         ],
      extras_require={
          "test": ["pytest"],
      },
      python_requires=">=3.8",
      )
