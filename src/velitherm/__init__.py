"""
velitherm - Basic Thermodynamics Equations for Soaring Flight

Closed-form equations for pressure/altitude conversions, humidity, air
density, lapse rates and flight levels, as used on velivole.fr/meteo.guru.

All functions use pressure in hPa, temperature in °C, height in meters,
relative humidity in % and specific humidity / mixing ratio in g/kg.

Example
-------
>>> import velitherm
>>> velitherm.altitude_from_standard_pressure(898.746)   # ~1000 m
>>> velitherm.dew_point(35, 23)                           # ~6.7 °C
>>> velitherm.FLFromPressure(821)                         # camelCase alias
"""

from .calc.constants import (
    G, Cp, L, gamma, ELR, P0, T0, Rd, Rv, Md, Mv, R, K, feetPerMeter,
)
from .calc.formulas import (
    altitude_from_standard_pressure,
    pressure_from_standard_altitude,
    altitude_from_pressure,
    pressure_from_altitude,
    water_vapor_saturation_pressure,
    relative_humidity,
    specific_humidity,
    mixing_ratio,
    specific_humidity_from_mixing_ratio,
    dew_point,
    relative_humidity_from_dew_point,
    air_density,
    lcl,
    gamma_moist,
    adiabatic_expansion,
    adiabatic_cooling,
    pressure_from_fl,
    fl_from_pressure,
)
from .config import get_options, set_options

__version__ = '1.2.0'

# Version of the formula set
velitherm = '1.0.0'

# Names used by the JavaScript and C++ consumers of the same formulas
altitudeFromStandardPressure = altitude_from_standard_pressure
pressureFromStandardAltitude = pressure_from_standard_altitude
altitudeFromPressure = altitude_from_pressure
pressureFromAltitude = pressure_from_altitude
waterVaporSaturationPressure = water_vapor_saturation_pressure
relativeHumidity = relative_humidity
specificHumidity = specific_humidity
mixingRatio = mixing_ratio
specificHumidityFromMixingRatio = specific_humidity_from_mixing_ratio
dewPoint = dew_point
relativeHumidityFromDewPoint = relative_humidity_from_dew_point
airDensity = air_density
LCL = lcl
gammaMoist = gamma_moist
adiabaticExpansion = adiabatic_expansion
adiabaticCooling = adiabatic_cooling
pressureFromFL = pressure_from_fl
FLFromPressure = fl_from_pressure

__all__ = [
    # Constants
    'G', 'Cp', 'L', 'gamma', 'ELR', 'P0', 'T0', 'Rd', 'Rv', 'Md', 'Mv', 'R', 'K',
    'feetPerMeter',
    # Formulas
    'altitude_from_standard_pressure',
    'pressure_from_standard_altitude',
    'altitude_from_pressure',
    'pressure_from_altitude',
    'water_vapor_saturation_pressure',
    'relative_humidity',
    'specific_humidity',
    'mixing_ratio',
    'specific_humidity_from_mixing_ratio',
    'dew_point',
    'relative_humidity_from_dew_point',
    'air_density',
    'lcl',
    'gamma_moist',
    'adiabatic_expansion',
    'adiabatic_cooling',
    'pressure_from_fl',
    'fl_from_pressure',
    # camelCase aliases
    'altitudeFromStandardPressure',
    'pressureFromStandardAltitude',
    'altitudeFromPressure',
    'pressureFromAltitude',
    'waterVaporSaturationPressure',
    'relativeHumidity',
    'specificHumidity',
    'mixingRatio',
    'specificHumidityFromMixingRatio',
    'dewPoint',
    'relativeHumidityFromDewPoint',
    'airDensity',
    'LCL',
    'gammaMoist',
    'adiabaticExpansion',
    'adiabaticCooling',
    'pressureFromFL',
    'FLFromPressure',
    # Options
    'set_options',
    'get_options',
]
