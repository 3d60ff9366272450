from dataclasses import dataclass

import numpy as np

R_EARTH = 6378.137e3 # m, WGS-84 equatorial radius

@dataclass
class KeplerElements:

    i_deg: float # inclination
    raan_deg: float # right ascension of ascending node
    e: float # eccentricity
    w_deg: float # argument of periapsis
    M_deg: float # mean anomaly

    n: float # mean motion rad/s

    a: float # semi-major axis m
    MU_E = 3.986004418e14 # m^3/s^2 standard gravitational parameter for Earth

    @property
    def a_km(self):
        return self.a / 1000.0

    @property
    def period(self):
        """orbital period in seconds"""
        return 2.0 * np.pi / self.n

    @property
    def altitude_km(self):
        """mean altitude above the equatorial radius"""
        return (self.a - R_EARTH) / 1000.0

    def __str__(self):
        return (
            f"Kepler Elements:\n"
            f"  Inclination (i): {self.i_deg:.4f} deg\n"
            f"  RAAN (Ω): {self.raan_deg:.4f} deg\n"
            f"  Eccentricity (e): {self.e:.7f}\n"
            f"  Argument of Periapsis (ω): {self.w_deg:.4f} deg\n"
            f"  Mean Anomaly (M): {self.M_deg:.4f} deg\n"
            f"  Mean Motion (n): {self.n:.6e} rad/s\n"
            f"  Semi-major Axis (a): {self.a_km:.3f} km"
        )
