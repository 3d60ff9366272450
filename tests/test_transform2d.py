import math

import numpy as np
import pytest

from projection.transform2d import (
    DegeneratePlaneError,
    PlaneProjector,
    plane_basis,
    transform_to_2d,
)

POS1 = np.array([1000.0, 2000.0, 500.0])
POS2 = np.array([2000.0, 3000.0, 1000.0])


def test_reference_positions_regression():
    p1 = transform_to_2d(POS1, POS2, POS1)
    p2 = transform_to_2d(POS1, POS2, POS2)

    np.testing.assert_allclose(p1, [-2000.0, -500.0 * math.sqrt(5.0)], atol=1e-9)
    np.testing.assert_allclose(p2, [-3000.0, -1000.0 * math.sqrt(5.0)], atol=1e-9)


def test_in_plane_points_keep_lengths_and_separation():
    proj = PlaneProjector(POS1, POS2)
    p1 = proj.project(POS1)
    p2 = proj.project(POS2)

    assert np.linalg.norm(p1) == pytest.approx(np.linalg.norm(POS1), rel=1e-12)
    assert np.linalg.norm(p2) == pytest.approx(np.linalg.norm(POS2), rel=1e-12)
    assert np.linalg.norm(p2 - p1) == pytest.approx(np.linalg.norm(POS2 - POS1), rel=1e-12)


def test_angle_between_points_preserved():
    proj = PlaneProjector(POS1, POS2)
    p1 = proj.project(POS1)
    p2 = proj.project(POS2)

    cos3d = POS1 @ POS2 / (np.linalg.norm(POS1) * np.linalg.norm(POS2))
    cos2d = p1 @ p2 / (np.linalg.norm(p1) * np.linalg.norm(p2))
    assert cos2d == pytest.approx(cos3d, rel=1e-12)


def test_basis_is_orthonormal():
    b = plane_basis(POS1, POS2)
    M = np.vstack((b.x_axis, b.y_axis, b.normal))

    np.testing.assert_allclose(M @ M.T, np.eye(3), atol=1e-12)
    assert b.normal @ POS1 == pytest.approx(0.0, abs=1e-9)


def test_reference_axis_tie_break():
    # normal along +z: |n_z| < |n_x| is false, so x is the reference direction
    b = plane_basis([1.0, 0.0, 0.0], [0.0, 1.0, 0.0])

    np.testing.assert_allclose(b.normal, [0.0, 0.0, 1.0])
    np.testing.assert_allclose(b.x_axis, [0.0, 1.0, 0.0])
    np.testing.assert_allclose(b.y_axis, [-1.0, 0.0, 0.0])

    # normal along +x: z is the reference direction
    b = plane_basis([0.0, 1.0, 0.0], [0.0, 0.0, 1.0])
    np.testing.assert_allclose(b.normal, [1.0, 0.0, 0.0])
    np.testing.assert_allclose(b.x_axis, [0.0, -1.0, 0.0])


def test_normal_component_is_dropped():
    proj = PlaneProjector(POS1, POS2)
    np.testing.assert_allclose(proj.project(proj.basis.normal * 123.0), [0.0, 0.0], atol=1e-9)


def test_project_many_matches_single():
    proj = PlaneProjector(POS1, POS2)
    pts = np.array([POS1, POS2, [1.0, -2.0, 3.0]])

    out = proj.project_many(pts)

    assert out.shape == (3, 2)
    for k in range(3):
        np.testing.assert_allclose(out[k], proj.project(pts[k]), atol=1e-9)


@pytest.mark.parametrize("a, b", [
    (POS1, POS1),
    (POS1, -POS1),
    (POS1, 2.5 * POS1),
    (np.zeros(3), POS2),
])
def test_collinear_references_raise(a, b):
    with pytest.raises(DegeneratePlaneError):
        transform_to_2d(a, b, POS1)


def test_bad_shape_rejected():
    with pytest.raises(ValueError):
        PlaneProjector([1.0, 2.0], POS2)


@pytest.mark.parametrize("shape", [(3, 2), (6,), (2, 3, 1)])
def test_project_many_rejects_wrong_shape(shape):
    proj = PlaneProjector(POS1, POS2)
    with pytest.raises(ValueError):
        proj.project_many(np.ones(shape))
