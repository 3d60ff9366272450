from dataclasses import dataclass

import numpy as np

from logging_config import get_logger
from tle_io.keplerelement import KeplerElements

logger = get_logger(__name__)


class ConvergenceError(RuntimeError):
    """Kepler's equation did not converge within the iteration cap."""

    def __init__(self, M, e, iterations, last_E):
        super().__init__(
            f"Kepler solve did not converge for M={M}, e={e} after {iterations} iterations"
        )
        self.M = M
        self.e = e
        self.iterations = iterations
        self.last_E = last_E


@dataclass(frozen=True)
class StateVector:
    r: np.ndarray # m, ECI
    v: np.ndarray # m/s, ECI
    E: float # eccentric anomaly rad
    nu: float # true anomaly rad


def kepler_solve_E(M, e, tol=1e-12, i_max=100_000):
    """newton's method for solving inverse kepler equation"""
    #https://en.wikipedia.org/wiki/Kepler%27s_equation#Numerical_approximation_of_inverse_problem

    if not 0.0 <= e < 1.0:
        raise ValueError(f"eccentricity must be in [0, 1) for a bound orbit, got {e}")

    M = float(np.mod(M, 2*np.pi))

    if e < 0.8:
        E = M
    else:
        E = np.pi

    for i in range(i_max):

        f = E - e*np.sin(E) - M
        fp = 1 - e*np.cos(E)
        dE = -f / fp
        E += dE

        if abs(dE) < tol:
            logger.debug("kepler solve converged in %d iterations (M=%.6f, e=%.7f)", i + 1, M, e)
            return float(E)

    raise ConvergenceError(M, e, i_max, float(E))


def true_anomaly(E, e):
    return 2.0 * np.arctan2(np.sqrt(1 + e) * np.sin(E / 2), np.sqrt(1 - e) * np.cos(E / 2))


def perifocal_to_eci(raan, i, w):
    """3-1-3 rotation R3(-raan) R1(-i) R3(-w), angles in rad"""
    # crassidis page 379-380
    return np.array([
        [np.cos(raan)*np.cos(w) - np.sin(raan)*np.sin(w)*np.cos(i),
         -np.cos(raan)*np.sin(w) - np.sin(raan)*np.cos(w)*np.cos(i),
         np.sin(raan)*np.sin(i)],

        [np.sin(raan)*np.cos(w) + np.cos(raan)*np.sin(w)*np.cos(i),
         -np.sin(raan)*np.sin(w) + np.cos(raan)*np.cos(w)*np.cos(i),
         -np.cos(raan)*np.sin(i)],

        [np.sin(w)*np.sin(i),
         np.cos(w)*np.sin(i),
         np.cos(i)]
    ])


def kepler_to_rv(a, e, i_deg, raan_deg, w_deg, M_deg, mu=KeplerElements.MU_E):
    """
    Keplerian elements -> ECI state vector.
    a in m with mu in m^3/s^2 (or km with km^3/s^2, the result follows a's unit).
    """
    if not (a > 0 and np.isfinite(a)):
        raise ValueError(f"semi-major axis must be positive and finite, got {a}")

    i = np.deg2rad(i_deg)
    raan = np.deg2rad(raan_deg)
    w = np.deg2rad(w_deg)
    M = np.deg2rad(M_deg)

    E = kepler_solve_E(M, e)
    cosE = np.cos(E)
    sinE = np.sin(E)
    nu = true_anomaly(E, e)
    r = a * (1 - e*cosE)

    # position and velocity in perifocal frame
    r_pf = np.array([r*np.cos(nu), r*np.sin(nu), 0.0])

    h = np.sqrt(mu * a) / r
    v_pf = np.array([-h*sinE, h*np.sqrt(1 - e**2)*cosE, 0.0])

    R = perifocal_to_eci(raan, i, w)

    return StateVector(r=R @ r_pf, v=R @ v_pf, E=E, nu=float(nu))


class KeplerToRV:

    def state(self, el):
        return kepler_to_rv(el.a, el.e, el.i_deg, el.raan_deg, el.w_deg, el.M_deg,
                            mu=KeplerElements.MU_E)

    def rv_eci(self, el):
        sv = self.state(el)
        return sv.r, sv.v
