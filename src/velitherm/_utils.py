"""
Helpers shared by the formula modules.
"""

from __future__ import annotations

import functools
import numbers

import numpy as np

from . import config

__all__ = [
    'as_float',
    'formula',
]


def as_float(value):
    """
    Promote Python scalars to ``numpy.float64`` and sequences to arrays.

    Arithmetic on numpy scalars follows IEEE semantics (NaN/inf plus a
    floating-point event) where plain Python floats raise
    ``ZeroDivisionError`` or silently go complex. Lists and tuples become
    float arrays; numpy arrays and other array-likes (xarray) are returned
    unchanged.
    """
    if isinstance(value, numbers.Real) and not isinstance(value, np.generic):
        return np.float64(value)
    if isinstance(value, (list, tuple)):
        return np.asarray(value, dtype=float)
    return value


def formula(func):
    """
    Decorate a formula so that it evaluates under the configured error state.

    Default values are promoted once, here; the arguments of each call are
    passed through :func:`as_float` before ``func`` runs inside
    ``numpy.errstate``.
    """
    if func.__defaults__:
        func.__defaults__ = tuple(as_float(value) for value in func.__defaults__)

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        args = [as_float(value) for value in args]
        kwargs = {name: as_float(value) for name, value in kwargs.items()}
        with np.errstate(**config.errstate()):
            return func(*args, **kwargs)

    return wrapper
