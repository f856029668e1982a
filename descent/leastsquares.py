# -*- coding: utf-8 -*-
"""Least-squares fitting of linear models by gradient descent.

The functional entry point :func:`leastsquares` and the
:class:`LinearRegression` estimator run their own training loops. Both
delegate a single pass over the data to :func:`step`, which lets the
optimizer decide how the data is split into update groups.

"""
import time

import numpy as np
import pandas as pd

from .datasets import add_intercept
from .exceptions import DimensionMismatchError, InvalidConfigurationError
from .losses import check_shapes, mse, mse_gradient
from .optimizers import SGD


def step(theta, optimizer, X, y) -> np.ndarray:
    """Update ``theta`` with one pass of gradient descent over ``X`` and ``y``.

    Groups are visited in the order returned by ``optimizer.partition`` and
    every update starts from the result of the previous one. The input
    vector is left untouched.

    Arguments:
        * theta: parameter vector (n_features,)
        * optimizer (:class:`descent.optimizers.Optimizer`): update strategy
        * X: design matrix (n_samples, n_features)
        * y: target vector (n_samples,)

    """
    theta, X, y = check_shapes(theta, X, y)
    for X_part, y_part in optimizer.partition(X, y):
        grad = mse_gradient(theta, X_part, y_part)
        theta = theta - optimizer.lr * grad

    return theta


def leastsquares(X,
                 y,
                 optimizer=None,
                 theta=None,
                 max_iter=100,
                 gtol=0.001,
                 early_stopping=False) -> np.ndarray:
    """Fit a linear model to ``X`` and ``y`` with the given optimizer.

    The loop runs exactly ``max_iter`` passes. ``gtol`` only ends the loop
    early when ``early_stopping`` is set, in which case the loop stops as
    soon as the norm of the full-data gradient is at most ``gtol``.

    Arguments:
        * X: design matrix (n_samples, n_features)
        * y: target vector (n_samples,)
        * optimizer (:class:`descent.optimizers.Optimizer`): defaults to ``SGD()``
        * theta: initial parameters, zeros if not given
        * max_iter (int): number of passes over the data
        * gtol (float): gradient norm tolerance
        * early_stopping (bool): stop once the gradient norm reaches ``gtol``

    """
    if optimizer is None:
        optimizer = SGD()
    if max_iter < 0:
        raise InvalidConfigurationError(
            'max_iter must be non-negative, got {}.'.format(max_iter)
        )

    X = np.asarray(X, dtype=float)
    if theta is None:
        theta = np.zeros(X.shape[1] if X.ndim == 2 else 0)
    theta, X, y = check_shapes(np.array(theta, dtype=float), X, y)

    nit = 1
    while nit <= max_iter:
        if early_stopping and np.linalg.norm(mse_gradient(theta, X, y)) <= gtol:
            break

        theta = step(theta, optimizer, X, y)
        nit += 1

    return theta


class LinearRegression():
    """Linear least-squares model trained by gradient descent.

    Arguments:
        * optimizer (:class:`descent.optimizers.Optimizer`): Update strategy, defaults to ``SGD()``.
        * max_iter (int): Number of passes over the training data.
        * fit_intercept (bool): Prepend a constant column to the design matrix.
        * verbose (bool): Print a status line after every pass.
        * gtol (float): Gradient norm tolerance, only used with ``early_stopping``.
        * early_stopping (bool): Stop once the gradient norm reaches ``gtol``.

    """

    def __init__(self,
                 optimizer=None,
                 max_iter=100,
                 fit_intercept=False,
                 verbose=False,
                 **kwargs):
        """Initialize properties."""
        if max_iter < 0:
            raise InvalidConfigurationError(
                'max_iter must be non-negative, got {}.'.format(max_iter)
            )
        self.optimizer = optimizer if optimizer is not None else SGD()
        self.max_iter = max_iter
        self.fit_intercept = fit_intercept
        self.verbose = verbose
        self.gtol = 0.001
        self.early_stopping = False
        allowed_args = ('gtol', 'early_stopping')
        for arg, value in kwargs.items():
            if arg in allowed_args:
                setattr(self, arg, value)
            else:
                raise InvalidConfigurationError('Invalid keyword argument: {}.'.format(arg))

        self.coef_ = None
        self.intercept_ = 0.0
        self.n_iter_ = 0
        self.history = {'training': []}

    def fit(self, X, y, theta=None):
        """Fits the model to a given data set.

        Arguments:
            * X: design matrix (n_samples, n_features)
            * y: target vector (n_samples,)
            * theta: initial parameters, including the intercept first when
              ``fit_intercept`` is set

        """
        X = np.asarray(X, dtype=float)
        if self.fit_intercept:
            X = add_intercept(X)
        if theta is None:
            theta = np.zeros(X.shape[1] if X.ndim == 2 else 0)
        theta, X, y = check_shapes(np.array(theta, dtype=float), X, y)

        self.history = {'training': []}
        start_time = time.time()
        nit = 1
        while nit <= self.max_iter:
            if self.early_stopping and \
                    np.linalg.norm(mse_gradient(theta, X, y)) <= self.gtol:
                break

            theta = step(theta, self.optimizer, X, y)
            loss = mse(theta, X, y)
            if np.isnan(loss):
                raise ValueError('NaN in training loss.')
            self.history['training'].append(loss)

            # Status update for the user
            if self.verbose:
                elapsed = time.time() - start_time
                status = '\rIteration {}/{}\tLoss: {:.6f}\tElapsed: {:.0f}m{:.0f}s   '
                print(
                    status.format(nit, self.max_iter, loss, elapsed // 60, elapsed % 60),
                    end=""
                )
            nit += 1

        if self.verbose:
            print()

        self.n_iter_ = nit - 1
        if self.fit_intercept:
            self.intercept_ = float(theta[0])
            self.coef_ = theta[1:]
        else:
            self.intercept_ = 0.0
            self.coef_ = theta

        return self

    def predict(self, X) -> np.ndarray:
        """Returns model predictions for the rows of ``X``."""
        if self.coef_ is None:
            raise RuntimeError('Model must be fitted before calling predict().')
        X = np.asarray(X, dtype=float)
        if X.ndim != 2 or X.shape[1] != self.coef_.shape[0]:
            raise DimensionMismatchError(
                'Expected {} feature columns, got shape {}.'.format(self.coef_.shape[0], X.shape)
            )

        return X @ self.coef_ + self.intercept_

    def loss_history(self) -> pd.DataFrame:
        """Training loss after every pass as a data frame."""
        losses = self.history['training']
        return pd.DataFrame({
            'iteration': np.arange(1, len(losses) + 1),
            'loss': losses
        })
