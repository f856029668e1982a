# -*- coding: utf-8 -*-
"""Least-squares objective for linear models.

Both functions take the parameter vector first so they can be handed to
generic routines such as :func:`descent.gradient_descent.steepest_descent`
through ``functools.partial``.

"""
import numpy as np

from .exceptions import DimensionMismatchError


def check_shapes(theta, X, y):
    """Returns ``theta``, ``X`` and ``y`` as float arrays after checking that
    they can be combined in a linear model.

    Arguments:
        * theta: parameter vector (n_features,)
        * X: design matrix (n_samples, n_features)
        * y: target vector (n_samples,)

    """
    theta = np.asarray(theta, dtype=float)
    X = np.asarray(X, dtype=float)
    y = np.asarray(y, dtype=float)

    if X.ndim != 2:
        raise DimensionMismatchError(
            'Design matrix must be 2-dimensional, got {} dimension(s).'.format(X.ndim)
        )
    if theta.ndim != 1 or X.shape[1] != theta.shape[0]:
        raise DimensionMismatchError(
            'Design matrix has {} columns but theta has shape {}.'.format(X.shape[1], theta.shape)
        )
    if y.ndim != 1 or X.shape[0] != y.shape[0]:
        raise DimensionMismatchError(
            'Design matrix has {} rows but y has shape {}.'.format(X.shape[0], y.shape)
        )
    if X.shape[0] == 0:
        raise DimensionMismatchError('Design matrix has no rows.')

    return theta, X, y


def mse(theta, X, y) -> float:
    r"""Squared error loss of a linear model.

    .. math::
        L(\theta) = \frac{N}{2} e^T e, \quad e = y - X\theta

    The scaling by ``N`` follows the reference behaviour of this package and
    differs from the usual ``1 / 2N``. It changes the magnitude of the loss
    but not the location of its minimum.

    Arguments:
        * theta: parameter vector (n_features,)
        * X: design matrix (n_samples, n_features)
        * y: target vector (n_samples,)

    """
    theta, X, y = check_shapes(theta, X, y)
    n = X.shape[0]
    e = y - X @ theta

    return float((n / 2) * (e @ e))


def mse_gradient(theta, X, y) -> np.ndarray:
    r"""Gradient of the squared error loss of a linear model.

    .. math::
        \nabla L(\theta) = -\frac{1}{N} X^T e

    Arguments:
        * theta: parameter vector (n_features,)
        * X: design matrix (n_samples, n_features)
        * y: target vector (n_samples,)

    """
    theta, X, y = check_shapes(theta, X, y)
    n = X.shape[0]
    e = y - X @ theta

    return (-1 / n) * (X.T @ e)
