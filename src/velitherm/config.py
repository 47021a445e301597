"""
Runtime options for velitherm.

The formulas never check their arguments: non-physical inputs (a negative
pressure, a negative base to a fractional power, a zero denominator) produce
NaN or infinite results. These options only decide how numpy reports such
floating-point events while a formula is evaluated.

Options live in a context variable, like ``numpy.errstate`` itself: a
``with set_options(...)`` block affects only the thread or asyncio task that
runs it, and a plain ``set_options(...)`` call affects the current context
and the tasks it spawns afterwards.

Example
-------
>>> import velitherm
>>> with velitherm.set_options(invalid='raise'):
...     velitherm.altitude_from_pressure(-1.0)
Traceback (most recent call last):
    ...
FloatingPointError: invalid value encountered in log
"""

from __future__ import annotations

import logging
from contextvars import ContextVar
from typing import Any

logger = logging.getLogger(__name__)

__all__ = [
    'set_options',
    'get_options',
]

_VALID_MODES = ('ignore', 'warn', 'raise')

DEFAULTS: dict[str, str] = {
    'invalid': 'warn',
}

_VALIDATORS = {
    'invalid': lambda value: value in _VALID_MODES,
}

# Never mutated in place, every change sets a new dict
_options: ContextVar[dict[str, Any]] = ContextVar('velitherm_options', default=DEFAULTS)


def get_options() -> dict[str, Any]:
    """Return a copy of the options of the current context."""
    return dict(_options.get())


def errstate() -> dict[str, str]:
    """Keyword arguments for ``numpy.errstate`` under the current options."""
    mode = _options.get()['invalid']
    return {'divide': mode, 'invalid': mode, 'over': mode}


class set_options:
    """
    Set velitherm options for the current context, or within a ``with`` block.

    Parameters
    ----------
    invalid : {'ignore', 'warn', 'raise'}, optional
        How floating-point errors (division by zero, invalid operation,
        overflow) are reported while a formula runs:

        - ``'ignore'``: return NaN/inf silently
        - ``'warn'``: return NaN/inf and emit a ``RuntimeWarning`` (default)
        - ``'raise'``: raise ``FloatingPointError``

    Examples
    --------
    >>> velitherm.set_options(invalid='ignore')        # current context
    >>> with velitherm.set_options(invalid='raise'):   # scoped
    ...     ...
    """

    def __init__(self, **kwargs):
        for key, value in kwargs.items():
            if key not in DEFAULTS:
                raise ValueError(
                    f"Unknown option '{key}'. Available: {', '.join(sorted(DEFAULTS))}"
                )
            if not _VALIDATORS[key](value):
                raise ValueError(
                    f"Invalid {key}='{value}'. Expected one of: "
                    f"{', '.join(repr(m) for m in _VALID_MODES)}."
                )
        self._token = _options.set({**_options.get(), **kwargs})
        logger.debug("velitherm options updated: %s", kwargs)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        _options.reset(self._token)
        logger.debug("velitherm options restored: %s", _options.get())
