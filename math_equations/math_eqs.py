import numpy as np


class ZeroVectorError(ValueError):
    """Raised when a direction is requested for a vector with no length."""


def as_vec3(v):
    """ (x, y, z) -> float ndarray """
    v = np.asarray(v, dtype=float)
    if v.shape != (3,):
        raise ValueError(f"expected a 3-vector, got shape {v.shape}")
    return v

def cross(a, b):
    """ a x b """
    ax, ay, az = as_vec3(a)
    bx, by, bz = as_vec3(b)

    return np.array([ay*bz - az*by,
                     az*bx - ax*bz,
                     ax*by - ay*bx])

def dot(a, b):
    """ a . b """
    ax, ay, az = as_vec3(a)
    bx, by, bz = as_vec3(b)
    return float(ax*bx + ay*by + az*bz)

def norm(v):
    """euclidean length"""
    return float(np.sqrt(dot(v, v)))

def normalize(v):
    v = as_vec3(v)
    n = norm(v)
    if n == 0.0 or not np.isfinite(n):
        raise ZeroVectorError(f"cannot normalize vector {v.tolist()} (norm={n})")
    return v / n
