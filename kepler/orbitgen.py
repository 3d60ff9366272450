import numpy as np

from logging_config import get_logger
from tle_io.keplerelement import KeplerElements, R_EARTH

logger = get_logger(__name__)

MIN_ALTITUDE_KM = 100.0
MAX_ALTITUDE_KM = 1000.0
MAX_INCLINATION_DEG = 90.0


class OrbitValidationError(ValueError):
    """Requested orbit is outside the supported altitude / inclination range."""


def generate_orbit(altitude_km, inclination_deg, raan_deg=0.0, M_deg=0.0):
    """
    Circular LEO orbit from altitude above the equatorial radius.

    Below MIN_ALTITUDE_KM or beyond +/-90 deg inclination is rejected;
    above MAX_ALTITUDE_KM is only logged as a warning.
    """
    if altitude_km < MIN_ALTITUDE_KM:
        raise OrbitValidationError(
            f"altitude {altitude_km} km is below the minimum of {MIN_ALTITUDE_KM} km"
        )
    if abs(inclination_deg) > MAX_INCLINATION_DEG:
        raise OrbitValidationError(
            f"inclination {inclination_deg} deg outside +/-{MAX_INCLINATION_DEG} deg"
        )
    if altitude_km > MAX_ALTITUDE_KM:
        logger.warning("altitude %.1f km is above %.0f km, outside LEO", altitude_km, MAX_ALTITUDE_KM)

    a = R_EARTH + altitude_km * 1000.0
    n = np.sqrt(KeplerElements.MU_E / a**3)

    return KeplerElements(i_deg=float(inclination_deg), raan_deg=float(raan_deg), e=0.0,
                          w_deg=0.0, M_deg=float(M_deg), n=float(n), a=float(a))
