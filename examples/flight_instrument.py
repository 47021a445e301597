"""Altitude and flight level estimates from a barometer reading."""
import velitherm

barometer = 821          # hPa, instrument reading
pressure_msl = 1017      # hPa, sea-level pressure of the day
temperature_below = 23   # °C, average temperature below the aircraft

# Rough estimate from the pressure alone, rounded to 50 m
alt = round(velitherm.altitude_from_standard_pressure(barometer) / 50) * 50
print(f'Rough estimate of the altitude is {alt} m')

# Better estimate using the ground pressure
alt2 = round(velitherm.altitude_from_pressure(barometer, pressure_msl))
print(f'Better estimate of the altitude is {alt2} m')

# Even better estimate using the temperature
alt3 = round(velitherm.altitude_from_pressure(barometer, pressure_msl, temperature_below))
print(f'Even better estimate of the altitude is {alt3} m')

# Flight levels are pressure altitudes, the barometer reading is all we need
fl = int(round(velitherm.fl_from_pressure(barometer)))
print(f'The current closest flight level is FL{fl:03d}')

# FL115 is 11500 ft in the standard atmosphere
pressure_fl115 = velitherm.pressure_from_fl(115)
print(f'FL115 means the altitude at which the pressure is {round(pressure_fl115)} hPa')

# Actual altitude of FL115 today
altitude_fl115 = round(velitherm.altitude_from_pressure(pressure_fl115, pressure_msl, temperature_below))
print(f'Today FL115 is at {altitude_fl115} m')
print(f'You can climb {altitude_fl115 - alt3} m before reaching FL115')

# Pessimistic (lowest) FL115: minimum pressure and minimum temperature,
# 1000 hPa and -20°C outside of winter storms
altitude_min_fl115 = round(velitherm.altitude_from_pressure(pressure_fl115, 1000, -20))
print(f'FL115 should not be below {altitude_min_fl115} m even in bad winter weather')
print(f'You can climb {altitude_min_fl115 - alt3} m before reaching the pessimistic estimate for FL115')
