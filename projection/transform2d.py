from dataclasses import dataclass

import numpy as np

from math_equations.math_eqs import as_vec3, cross, dot, norm, normalize

COLLINEAR_TOL = 1e-12


class DegeneratePlaneError(ValueError):
    """The two reference vectors do not span a plane."""


@dataclass(frozen=True)
class PlaneBasis:
    normal: np.ndarray
    x_axis: np.ndarray
    y_axis: np.ndarray


def plane_basis(pos1, pos2):
    """
    Orthonormal basis of the plane through the origin, pos1 and pos2.
    x_axis and y_axis lie in the plane; normal = pos1 x pos2 direction.
    """
    pos1 = as_vec3(pos1)
    pos2 = as_vec3(pos2)

    n = cross(pos1, pos2)
    # relative test so the threshold does not depend on the length unit
    if norm(n) <= COLLINEAR_TOL * norm(pos1) * norm(pos2):
        raise DegeneratePlaneError(
            f"reference vectors {pos1.tolist()} and {pos2.tolist()} are collinear or zero"
        )
    normal = normalize(n)

    # reference direction not parallel to the normal
    if abs(normal[2]) < abs(normal[0]):
        temp = np.array([0.0, 0.0, 1.0])
    else:
        temp = np.array([1.0, 0.0, 0.0])

    x_axis = normalize(cross(normal, temp))
    y_axis = cross(normal, x_axis)

    return PlaneBasis(normal=normal, x_axis=x_axis, y_axis=y_axis)


def project(basis, point):
    return np.array([dot(point, basis.x_axis), dot(point, basis.y_axis)])


def transform_to_2d(pos1, pos2, point):
    """3D point -> (x, y) in the plane spanned by pos1 and pos2"""
    return project(plane_basis(pos1, pos2), point)


class PlaneProjector:

    def __init__(self, pos1, pos2):
        self.basis = plane_basis(pos1, pos2)

    def project(self, point):
        return project(self.basis, point)

    def project_many(self, points):
        """(N, 3) -> (N, 2)"""
        pts = np.asarray(points, dtype=float)
        if pts.ndim != 2 or pts.shape[1] != 3:
            raise ValueError(f"expected an (N, 3) array of points, got shape {pts.shape}")
        B = np.vstack((self.basis.x_axis, self.basis.y_axis))
        return pts @ B.T
