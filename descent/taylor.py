# -*- coding: utf-8 -*-
"""Taylor polynomial approximation of registered functions.

A :class:`Differentiable` bundles a function with a derivative generator:
``diff_gen(n)`` returns the n-th derivative of ``fn`` as a callable. The
registry maps names to instances so that scripts can pick a function by name.

"""
from math import factorial

import numpy as np

from .exceptions import InvalidConfigurationError


class Differentiable():
    """Represents a function that can be differentiated any number of times.

    :param fn: The function itself, ``fn(x) -> number``.
    :type fn: callable
    :param diff_gen: Derivative generator, ``diff_gen(n)`` returns the n-th
        derivative of ``fn`` as a callable.
    :type diff_gen: callable

    """

    def __init__(self, fn, diff_gen):
        self.fn = fn
        self.diff_gen = diff_gen

    def derivative(self, n):
        """Return the n-th derivative, ``fn`` itself for ``n == 0``."""
        if n == 0:
            return self.fn
        return self.diff_gen(n)


def _cosine_diff_gen(n):
    def g(x):
        return np.cos(x + n * (np.pi / 2))
    return g


def _sine_diff_gen(n):
    def g(x):
        return np.sin(x + n * (np.pi / 2))
    return g


def _exp_diff_gen(n):
    return np.exp


_REGISTRY = {
    'cosine': Differentiable(np.cos, _cosine_diff_gen),
    'sine': Differentiable(np.sin, _sine_diff_gen),
    'exp': Differentiable(np.exp, _exp_diff_gen),
}


def get_instance(name):
    """Return the registered :class:`Differentiable` or ``None``."""
    return _REGISTRY.get(name)


def available():
    """Names of the registered functions."""
    return sorted(_REGISTRY)


def make_taylor_poly(name, order, center):
    """Return the Taylor polynomial of order ``order`` around ``center``.

    :param name: Name of the function to approximate, see :func:`available`.
    :type name: str
    :param order: Order of the Taylor polynomial.
    :type order: int
    :param center: The polynomial is centered around this value.
    :type center: float

    """
    diff = get_instance(name)
    if diff is None:
        raise KeyError('Unknown function {}. Available: {}.'.format(name, available()))
    if order < 0:
        raise InvalidConfigurationError('Order must be non-negative, got {}.'.format(order))

    coefficients = np.array([
        diff.derivative(n)(center) / factorial(n) for n in range(order + 1)
    ])

    def taylor_poly(x):
        x = np.asarray(x, dtype=float)
        powers = np.stack([(x - center) ** n for n in range(order + 1)], axis=-1)
        return powers @ coefficients

    return taylor_poly
