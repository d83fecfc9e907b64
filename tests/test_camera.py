import math

import numpy as np
import pytest

from myengine.camera import Camera, perspective


def _ndc_depth(matrix, z):
    clip = matrix @ np.array([0.0, 0.0, z, 1.0])
    return clip[2] / clip[3]


def test_near_and_far_planes_map_to_clip_range():
    m = perspective(1.2, 1.5, 0.1, 1000.0)
    assert _ndc_depth(m, -0.1) == pytest.approx(-1.0)
    assert _ndc_depth(m, -1000.0) == pytest.approx(1.0)


def test_perspective_structure():
    m = perspective(1.0, 2.0, 0.5, 50.0)
    assert m[3, 2] == -1.0
    assert m[3, 3] == 0.0
    assert m[0, 0] * 2.0 == pytest.approx(m[1, 1])


def test_right_angle_fov_gives_unit_scale():
    m = perspective(math.pi / 2, 1.0, 1.0, 10.0)
    assert m[1, 1] == pytest.approx(1.0)
    assert m[0, 0] == pytest.approx(1.0)


def test_zero_aspect_raises():
    with pytest.raises(ValueError):
        perspective(1.0, 0.0, 0.1, 10.0)


def test_equal_planes_raise():
    with pytest.raises(ValueError):
        perspective(1.0, 1.0, 5.0, 5.0)


def test_camera_uses_its_parameters():
    cam = Camera(90, 1200 / 800, 0.1, 1000)
    np.testing.assert_allclose(
        cam.perspective_matrix(), perspective(90, 1200 / 800, 0.1, 1000)
    )
    assert cam.movement_speed == 1.0


def test_aspect_change_updates_matrix():
    cam = Camera(1.0, 1.0, 0.1, 100.0)
    before = cam.perspective_matrix()
    cam.aspect = 2.0
    after = cam.perspective_matrix()
    assert after[0, 0] == pytest.approx(before[0, 0] / 2)
    assert after[1, 1] == pytest.approx(before[1, 1])


def test_camera_transform_starts_at_origin():
    cam = Camera(1.0, 1.0, 0.1, 100.0)
    cam.transform.position -= np.array([0.0, 45.0, 45.0])
    np.testing.assert_allclose(cam.transform.position, [0.0, -45.0, -45.0])
    other = Camera(1.0, 1.0, 0.1, 100.0)
    np.testing.assert_allclose(other.transform.position, np.zeros(3))