"""
Thermodynamic calculations for soaring flight.

Submodules
----------
constants : Physical constants used in calculations
formulas : Pure computational functions (scalars or numpy arrays)
"""

from . import constants
from . import formulas

__all__ = [
    'constants',
    'formulas',
]
