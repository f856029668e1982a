# -*- coding: utf-8 -*-
"""Optimizer module for least-squares gradient descent.

This module provides the update strategies used by
:func:`descent.leastsquares.leastsquares`. Each strategy carries its
hyperparameters and decides how the training data is split into groups,
one parameter update being performed per group.

"""
from abc import ABC, abstractmethod

import numpy as np

from .exceptions import DimensionMismatchError, InvalidConfigurationError


class Optimizer(ABC):
    """Base class of the gradient descent strategies.

    :param lr: Learning rate, must be positive.
    :type lr: float

    """

    def __init__(self, lr=0.001):
        if not lr > 0:
            raise InvalidConfigurationError(
                'Learning rate must be positive, got {}.'.format(lr)
            )
        self.lr = lr

    @abstractmethod
    def partition(self, X, y):
        """Return a list of ``(X_part, y_part)`` pairs that together cover
        every row of ``X`` exactly once.
        """
        raise NotImplementedError

    @staticmethod
    def _check_rows(X, y):
        if X.shape[0] != y.shape[0]:
            raise DimensionMismatchError(
                'X has {} rows but y has {} entries.'.format(X.shape[0], y.shape[0])
            )
        return X.shape[0]

    def __repr__(self):
        params = ', '.join(
            '{}={!r}'.format(key, value)
            for key, value in self.__dict__.items()
            if not key.startswith('_')
        )
        return '{}({})'.format(self.__class__.__name__, params)


class BatchGD(Optimizer):
    """Full-batch gradient descent, one update per pass over the data.

    :param lr: Learning rate.
    :type lr: float

    """

    def __init__(self, lr=0.001):
        super().__init__(lr=lr)

    def partition(self, X, y):
        """Iterates over X and y in a single pass."""
        self._check_rows(X, y)
        return [(X, y)]


class SGD(Optimizer):
    """Stochastic gradient descent, one update per sample.

    :param lr: Learning rate.
    :type lr: float
    :param shuffle: Visit the samples in a fresh random order on every pass.
    :type shuffle: bool
    :param seed: Seed for the generator used for shuffling.
    :type seed: int

    """

    def __init__(self, lr=0.001, shuffle=True, seed=None):
        super().__init__(lr=lr)
        self.shuffle = shuffle
        self.seed = seed
        self._rng = np.random.default_rng(seed)

    def partition(self, X, y):
        """Iterates over X and y one row at a time."""
        n = self._check_rows(X, y)

        indices = np.arange(n)
        if self.shuffle:
            self._rng.shuffle(indices)

        return [(X[[i], :], y[[i]]) for i in indices]


class MiniBatchGD(Optimizer):
    """Mini-batch gradient descent, one update per block of ``batch_size``
    rows. The last block is shorter when the number of samples is not a
    multiple of ``batch_size``.

    :param lr: Learning rate.
    :type lr: float
    :param batch_size: Number of rows per block.
    :type batch_size: int
    :param shuffle: Permute the rows before blocking on every pass.
    :type shuffle: bool
    :param seed: Seed for the generator used for shuffling.
    :type seed: int

    """

    def __init__(self, lr=0.001, batch_size=32, shuffle=False, seed=None):
        super().__init__(lr=lr)
        if int(batch_size) != batch_size or batch_size < 1:
            raise InvalidConfigurationError(
                'Batch size must be a positive integer, got {}.'.format(batch_size)
            )
        self.batch_size = int(batch_size)
        self.shuffle = shuffle
        self.seed = seed
        self._rng = np.random.default_rng(seed)

    def partition(self, X, y):
        """Iterates over X and y in contiguous blocks of ``batch_size`` rows."""
        n = self._check_rows(X, y)
        if self.batch_size > n:
            raise InvalidConfigurationError(
                'Batch size {} exceeds the number of samples {}.'.format(self.batch_size, n)
            )

        indices = np.arange(n)
        if self.shuffle:
            self._rng.shuffle(indices)

        batches = []
        for start in range(0, n, self.batch_size):
            batch_indices = indices[start:start + self.batch_size]
            batches.append((X[batch_indices], y[batch_indices]))

        return batches
