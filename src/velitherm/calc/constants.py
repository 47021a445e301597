"""
Constants for soaring-flight thermodynamics.

This module contains the physical constants used by the formulas. Units
follow the library convention (hPa, °C, m) except where noted.
"""

# ============================================================================
# Fundamental Physical Constants
# ============================================================================

# Gas constants
Rd = 287.058          # Specific gas constant for dry air [J kg^-1 K^-1]
Rv = 461.495          # Specific gas constant for water vapor [J kg^-1 K^-1]
R = 8.31446           # Universal gas constant [J mol^-1 K^-1]

# Molar masses
Md = 0.0289652        # Molar mass of dry air [kg mol^-1]
Mv = 0.018016         # Molar mass of water vapor [kg mol^-1]

# Heat
Cp = 1005.0           # Specific heat of air at constant pressure [J kg^-1 K^-1]
L = 2500 * 10e6       # Enthalpy of vaporization of water [J kg^-1]

# Absolute zero
K = -273.15           # [°C]

# ============================================================================
# Earth Constants
# ============================================================================

G = 9.81              # Average gravitational acceleration [m s^-2]

# Lapse rates
gamma = 0.00976       # Dry adiabatic lapse rate [°C m^-1]
ELR = 0.0065          # Environmental (mean tropospheric) lapse rate [°C m^-1]

# ICAO standard atmosphere at sea level
P0 = 1013.25          # [hPa]
T0 = 15.0             # [°C]

# ============================================================================
# Units
# ============================================================================

feetPerMeter = 3.28084  # [ft m^-1]
