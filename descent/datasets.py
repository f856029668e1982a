# -*- coding: utf-8 -*-
"""Data sets for fitting linear models.

Provides synthetic linear systems for experiments and tests, and loading of
tabular data from CSV files.

"""
import numpy as np
import pandas as pd

from .exceptions import DimensionMismatchError, InvalidConfigurationError


def add_intercept(X) -> np.ndarray:
    """Returns ``X`` with a leading column of ones."""
    X = np.asarray(X, dtype=float)
    if X.ndim != 2:
        raise DimensionMismatchError('Design matrix must be 2-dimensional.')

    return np.hstack([np.ones((X.shape[0], 1)), X])


def make_linear(n_samples, n_features, noise=0.0, theta=None, seed=None):
    """Returns ``(X, y, theta)`` with ``y = X @ theta + noise``.

    Arguments:
        * n_samples (int): Number of rows of the design matrix.
        * n_features (int): Number of columns of the design matrix.
        * noise (float): Standard deviation of the Gaussian noise added to ``y``.
        * theta: True parameters, drawn from a standard normal if not given.
        * seed (int): Seed of the random generator.

    """
    if n_samples < 1 or n_features < 1:
        raise InvalidConfigurationError('n_samples and n_features must be positive.')
    if noise < 0:
        raise InvalidConfigurationError('noise must be non-negative.')

    rng = np.random.default_rng(seed)
    if theta is None:
        theta = rng.standard_normal(n_features)
    theta = np.asarray(theta, dtype=float)
    if theta.shape != (n_features,):
        raise DimensionMismatchError(
            'theta must have shape ({},), got {}.'.format(n_features, theta.shape)
        )

    X = rng.standard_normal((n_samples, n_features))
    y = X @ theta
    if noise > 0:
        y = y + noise * rng.standard_normal(n_samples)

    return X, y, theta


def load_csv(path, target, features=None, **kwargs):
    """Reads a CSV file and returns the design matrix and target vector.

    Arguments:
        * path (str): File location of the CSV file.
        * target (str): Name of the target column.
        * features (list): Names of the feature columns, all other columns if not given.
        * kwargs: Passed on to ``pandas.read_csv``.

    """
    df = pd.read_csv(path, **kwargs)
    if target not in df.columns:
        raise KeyError('Column {} not found in {}.'.format(target, path))
    if features is None:
        features = [column for column in df.columns if column != target]

    df = df[list(features) + [target]].dropna()
    X = df[features].astype('float64').values
    y = df[target].astype('float64').values

    return X, y
