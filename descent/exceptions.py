# -*- coding: utf-8 -*-
"""Exceptions raised by the descent package."""


class DescentError(Exception):
    """Base class for all errors raised by descent."""


class DimensionMismatchError(DescentError, ValueError):
    """Raised when array shapes are incompatible for the requested operation."""


class InvalidConfigurationError(DescentError, ValueError):
    """Raised when an optimizer or estimator is configured with bad values."""
