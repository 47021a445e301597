"""Does a rising air parcel form a cloud?"""
import velitherm

temp0 = 25       # °C
pressure0 = 1017  # hPa
height = 500     # m
temp_aloft = 20  # °C, measured at the new height

# Specific humidity is conserved while the air rises
q = velitherm.specific_humidity(75, pressure0, temp0)
print(f'Specific humidity = {q:.1f} g/kg')

# Pressure at the new height
p1 = velitherm.pressure_from_altitude(height, pressure0, temp0)
print(f'Pressure at {height}m = {p1:.0f} hPa')

# Dry adiabatic cooling
t1 = velitherm.adiabatic_cooling(temp0, p1, pressure0)
print(f'The new temperature of the air parcel at {height}m = {t1:.1f} °C')

# Relative humidity of the parcel at the new pressure and temperature
rh1 = velitherm.relative_humidity(q, p1, t1)
print(f'Relative humidity after rising to {height}m = {rh1:.0f} %')

# Condensation starts at 100%
if rh1 < 100:
    print('No, it did not form a cloud')
else:
    print('Yes, it did form a cloud')

print(f'Clouds will start forming at {velitherm.lcl(temp0, velitherm.dew_point(75, temp0)):.0f} m')

# Once the parcel is colder than the surrounding air it stops rising
if t1 < temp_aloft:
    print('The ceiling has been reached')
else:
    print('The air parcel will continue to rise')
