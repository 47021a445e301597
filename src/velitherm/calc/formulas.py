"""
Basic thermodynamic equations for soaring flight.

This module contains numpy-based functions for pressure/altitude conversions,
humidity, air density and lapse rates. They accept scalars, sequences or
numpy arrays and never check their arguments: non-physical input yields
NaN or inf.

All formulas use:

- Pressure in hPa
- Temperature in °C
- Height in meters
- Relative humidity in % from 0 to 100
- Specific humidity in g/kg
- Mixing ratio in g/kg

References
----------
Stull, R., 2017: Practical Meteorology: An Algebra-based Survey of
    Atmospheric Science. Univ. of British Columbia.
Sonntag, D., 1990: Important new values of the physical constants of 1986,
    vapour pressure formulations based on the ITS-90, and psychrometer
    formulae. Z. Meteorol., 40, 340-344.
"""

import numpy as np

from .constants import G, K, Md, Mv, P0, R, T0, feetPerMeter
from .._utils import formula

__all__ = [
    # Standard atmosphere
    'altitude_from_standard_pressure',
    'pressure_from_standard_altitude',
    # Hypsometric equation
    'altitude_from_pressure',
    'pressure_from_altitude',
    # Moisture
    'water_vapor_saturation_pressure',
    'relative_humidity',
    'specific_humidity',
    'mixing_ratio',
    'specific_humidity_from_mixing_ratio',
    'dew_point',
    'relative_humidity_from_dew_point',
    # Density
    'air_density',
    # Lifting
    'lcl',
    'gamma_moist',
    'adiabatic_expansion',
    'adiabatic_cooling',
    # Flight levels
    'pressure_from_fl',
    'fl_from_pressure',
]

# Magnus coefficients (Sonntag 1990)
_MAGNUS_B = 17.62
_MAGNUS_C = 243.12

# Heat capacity ratio of a diatomic gas
_HCR = 1.4


# ============================================================================
# ICAO Standard Atmosphere (barometric formula)
# ============================================================================

@formula
def altitude_from_standard_pressure(pressure, pressure0=P0):
    """
    Altitude from pressure using the barometric formula and ICAO's
    definition of the standard atmosphere (QNH).

    Parameters
    ----------
    pressure : array_like
        Pressure [hPa]
    pressure0 : array_like, optional
        Sea-level pressure of the day [hPa], default P0

    Returns
    -------
    array_like
        Altitude [m]
    """
    return 44330.0 * (1.0 - np.power(pressure / pressure0, 1 / 5.255))


@formula
def pressure_from_standard_altitude(altitude, pressure0=P0):
    """
    Pressure from altitude using the barometric formula and ICAO's
    definition of the standard atmosphere (QNH).

    Parameters
    ----------
    altitude : array_like
        Altitude [m], NaN above 44330 m
    pressure0 : array_like, optional
        Sea-level pressure of the day [hPa], default P0

    Returns
    -------
    array_like
        Pressure [hPa]
    """
    return pressure0 * np.power(1.0 - altitude / 44330.0, 5.255)


# ============================================================================
# Hypsometric Equation
# ============================================================================

@formula
def altitude_from_pressure(pressure, pressure0=P0, temp=T0):
    """
    Altitude from pressure using the hypsometric formula (QFF).

    Unlike the standard atmosphere, this takes into account the sea-level
    pressure of the day and the average temperature of the air column.

    Parameters
    ----------
    pressure : array_like
        Pressure [hPa]
    pressure0 : array_like, optional
        Sea-level pressure of the day [hPa], default P0
    temp : array_like, optional
        Average temperature of the air column [°C], default T0

    Returns
    -------
    array_like
        Altitude [m], unrounded
    """
    return 29.3 * (temp - K) * np.log(pressure0 / pressure)


@formula
def pressure_from_altitude(altitude, pressure0=P0, temp=T0):
    """
    Pressure from altitude using the hypsometric formula (QFF).

    Exact inverse of :func:`altitude_from_pressure`.

    Parameters
    ----------
    altitude : array_like
        Altitude [m]
    pressure0 : array_like, optional
        Sea-level pressure of the day [hPa], default P0
    temp : array_like, optional
        Average temperature of the air column [°C], default T0

    Returns
    -------
    array_like
        Pressure [hPa]
    """
    return pressure0 / np.exp(altitude / (29.3 * (temp - K)))


# ============================================================================
# Moisture
# ============================================================================

@formula
def water_vapor_saturation_pressure(temp=T0):
    """
    Saturation water vapor pressure using the Tetens equation.

    Accurate between about -40°C and +50°C.

    Parameters
    ----------
    temp : array_like, optional
        Temperature [°C], default T0

    Returns
    -------
    array_like
        Saturation vapor pressure [hPa]
    """
    return 6.1078 * np.exp(17.27 * temp / (temp + 237.3))


@formula
def relative_humidity(specific_humidity, pressure=P0, temp=T0):
    """
    Relative humidity from specific humidity.

    Parameters
    ----------
    specific_humidity : array_like
        Specific humidity [g/kg]
    pressure : array_like, optional
        Pressure [hPa], default P0
    temp : array_like, optional
        Temperature [°C], default T0

    Returns
    -------
    array_like
        Relative humidity [%]
    """
    return specific_humidity / (6.22 * water_vapor_saturation_pressure(temp) / pressure)


@formula
def specific_humidity(relative_humidity, pressure=P0, temp=T0):
    """
    Specific humidity from relative humidity.

    Parameters
    ----------
    relative_humidity : array_like
        Relative humidity [%]
    pressure : array_like, optional
        Pressure [hPa], default P0
    temp : array_like, optional
        Temperature [°C], default T0

    Returns
    -------
    array_like
        Specific humidity [g/kg]
    """
    return relative_humidity / 100 * (0.622 * water_vapor_saturation_pressure(temp) / pressure) * 1000


@formula
def mixing_ratio(specific_humidity):
    """Mixing ratio [g/kg] from specific humidity [g/kg]."""
    return specific_humidity / (1 - specific_humidity / 1000)


@formula
def specific_humidity_from_mixing_ratio(mixing_ratio):
    """Specific humidity [g/kg] from mixing ratio [g/kg]."""
    return mixing_ratio / (1 + mixing_ratio / 1000)


@formula
def dew_point(relative_humidity, temp=T0):
    """
    Dew point from relative humidity.

    Uses the Magnus approximation with the Sonntag (1990) coefficients.

    Parameters
    ----------
    relative_humidity : array_like
        Relative humidity [%]
    temp : array_like, optional
        Temperature [°C], default T0

    Returns
    -------
    array_like
        Dew point [°C]
    """
    g = np.log(relative_humidity / 100) + _MAGNUS_B * temp / (_MAGNUS_C + temp)
    return _MAGNUS_C * g / (_MAGNUS_B - g)


@formula
def relative_humidity_from_dew_point(dew_point, temp=T0):
    """
    Relative humidity from dew point, inverse of :func:`dew_point`.

    Parameters
    ----------
    dew_point : array_like
        Dew point [°C]
    temp : array_like, optional
        Temperature [°C], default T0

    Returns
    -------
    array_like
        Relative humidity [%]
    """
    g = dew_point * _MAGNUS_B / (dew_point + _MAGNUS_C)
    return np.exp(g - _MAGNUS_B * temp / (_MAGNUS_C + temp)) * 100


# ============================================================================
# Density
# ============================================================================

@formula
def air_density(relative_humidity, pressure=P0, temp=T0):
    """
    Density of humid air.

    Applies the ideal gas law separately to the dry air and to the water
    vapor partial pressures (Avogadro's law).

    Parameters
    ----------
    relative_humidity : array_like
        Relative humidity [%]
    pressure : array_like, optional
        Pressure [hPa], default P0
    temp : array_like, optional
        Temperature [°C], default T0

    Returns
    -------
    array_like
        Air density [kg/m³]
    """
    Psat = water_vapor_saturation_pressure(temp)
    Pv = relative_humidity / 100 * Psat
    Pd = pressure - Pv

    # hPa -> Pa
    return 100 * (Pd * Md + Pv * Mv) / (R * (temp - K))


# ============================================================================
# Lifting
# ============================================================================

@formula
def lcl(temp, dew_point):
    """
    Lifted condensation level from the Espy equation with Stull's
    coefficient.

    Parameters
    ----------
    temp : array_like
        Surface temperature [°C]
    dew_point : array_like
        Surface dew point [°C]

    Returns
    -------
    array_like
        Height of the LCL above the surface [m]
    """
    return 126.7 * (temp - dew_point)


@formula
def gamma_moist(temp, pressure=P0):
    """
    Moist adiabatic lapse rate.

    The saturation vapor pressure here is the Clausius-Clapeyron fit from
    Stull, not the Tetens equation of
    :func:`water_vapor_saturation_pressure`.

    Parameters
    ----------
    temp : array_like
        Temperature [°C]
    pressure : array_like, optional
        Pressure [hPa], default P0

    Returns
    -------
    array_like
        Moist adiabatic lapse rate [°C/m]

    References
    ----------
    Stull, R. (2017).
    """
    tK = temp - K
    es = 6.113 * np.exp(5423 * (-1 / K - 1 / tK))
    rs = 0.622 * es / (pressure - es)
    return G * 1e-3 * (1 + 8711 * rs / tK) / (1 + 1.35e7 * rs / (tK * tK))


@formula
def adiabatic_expansion(volume0, pressure, pressure0=P0):
    """
    Volume of an air parcel after an adiabatic pressure change.

    Parameters
    ----------
    volume0 : array_like
        Initial volume, any unit
    pressure : array_like
        Final pressure [hPa]
    pressure0 : array_like, optional
        Initial pressure [hPa], default P0

    Returns
    -------
    array_like
        Final volume, same unit as ``volume0``
    """
    return volume0 * np.power(pressure0 / pressure, 1 / _HCR)


@formula
def adiabatic_cooling(temp0, pressure, pressure0=P0):
    """
    Temperature of an air parcel after an adiabatic pressure change.

    Parameters
    ----------
    temp0 : array_like
        Initial temperature [°C]
    pressure : array_like
        Final pressure [hPa]
    pressure0 : array_like, optional
        Initial pressure [hPa], default P0

    Returns
    -------
    array_like
        Final temperature [°C]
    """
    return (temp0 - K) * np.power(pressure / pressure0, (_HCR - 1) / _HCR) + K


# ============================================================================
# Flight Levels
# ============================================================================

@formula
def pressure_from_fl(FL):
    """
    Pressure of a flight level.

    Flight levels are pressure altitudes in the standard atmosphere, so the
    sea-level pressure of the day plays no role.
    """
    return pressure_from_standard_altitude(FL * 100 / feetPerMeter, P0)


@formula
def fl_from_pressure(pressure):
    """Flight level of a pressure, unrounded."""
    return altitude_from_standard_pressure(pressure, P0) * feetPerMeter / 100
