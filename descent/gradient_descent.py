# -*- coding: utf-8 -*-
"""Steepest descent for arbitrary differentiable objectives."""
import numpy as np

from .exceptions import InvalidConfigurationError


def steepest_descent(f,
                     g,
                     x0,
                     max_iter=100,
                     lr=0.01,
                     gtol=0.001,
                     print_every=50):
    """Perform the steepest descent algorithm.

    Given a continuously differentiable function ``f`` and its gradient
    ``g``, steepest descent looks for a local minimum of ``f`` by moving
    against the gradient at every iteration. The loop ends once the norm of
    the gradient is at most ``gtol`` or after ``max_iter`` iterations.

    Arguments:
        * f (callable): objective, maps a point to a scalar
        * g (callable): gradient of ``f``, maps a point to an array of the same shape
        * x0: starting point, scalar or vector
        * max_iter (int): iteration budget
        * lr (float): step size
        * gtol (float): gradient norm tolerance
        * print_every (int): print the loss every ``print_every`` iterations,
          ``0`` or ``None`` to stay quiet

    """
    if not lr > 0:
        raise InvalidConfigurationError(
            'Learning rate must be positive, got {}.'.format(lr)
        )

    x = np.array(x0, dtype=float)
    nit = 1
    gradient = np.asarray(g(x), dtype=float)

    while nit <= max_iter and np.linalg.norm(gradient) > gtol:
        if print_every and nit % print_every == 0:
            print('[Step {}] loss = {}'.format(nit, f(x)))

        x = x - lr * gradient
        gradient = np.asarray(g(x), dtype=float)
        nit += 1

    if x.ndim == 0:
        return float(x)
    return x
