"""Tests for the perspective transform."""
import math
import pytest
import numpy as np

from mapcues.overlay.perspective import perspective_transform, project_point
from mapcues.viewport import ViewportState


class TestPerspectiveTransform:
    """Tests for perspective_transform."""

    @pytest.mark.parametrize("tilt,bearing", [(0, 0), (45, 120), (60, 359)])
    def test_disabled_identity(self, tilt, bearing):
        """3D off -> identity regardless of tilt/bearing."""
        state = ViewportState(enabled=False, tilt_deg=tilt, bearing_deg=bearing)
        assert np.array_equal(perspective_transform(state), np.eye(4))

    def test_flat_view(self):
        """No rotation, only the perspective entry."""
        m = perspective_transform(ViewportState(enabled=True))
        expected = np.eye(4)
        expected[3, 2] = -0.001
        assert np.allclose(m, expected)

    def test_pitch_only(self):
        """Tilt t gives Rx(-t)."""
        t = math.radians(30)
        m = perspective_transform(ViewportState(enabled=True, tilt_deg=30))
        expected = np.array([
            [1, 0, 0],
            [0, math.cos(t), math.sin(t)],
            [0, -math.sin(t), math.cos(t)],
        ])
        assert np.allclose(m[:3, :3], expected)

    def test_yaw_only(self):
        """Bearing 90 gives a quarter turn about z."""
        m = perspective_transform(ViewportState(enabled=True, bearing_deg=90))
        expected = np.array([
            [0, -1, 0],
            [1, 0, 0],
            [0, 0, 1],
        ])
        assert np.allclose(m[:3, :3], expected, atol=1e-12)

    def test_composition_order(self):
        """Pitch is applied on the left of yaw: Rx(-t) @ Rz(b)."""
        t, b = math.radians(20), math.radians(70)
        rx = np.array([
            [1, 0, 0],
            [0, math.cos(-t), -math.sin(-t)],
            [0, math.sin(-t), math.cos(-t)],
        ])
        rz = np.array([
            [math.cos(b), -math.sin(b), 0],
            [math.sin(b), math.cos(b), 0],
            [0, 0, 1],
        ])
        m = perspective_transform(ViewportState(enabled=True, tilt_deg=20, bearing_deg=70))
        assert np.allclose(m[:3, :3], rx @ rz)
        assert m[3, 2] == -0.001
        assert np.allclose(m[3, :2], 0.0)
        assert m[3, 3] == 1.0

    def test_custom_depth(self):
        m = perspective_transform(ViewportState(enabled=True), depth=-0.01)
        assert m[3, 2] == -0.01

    def test_pure(self):
        state = ViewportState(enabled=True, tilt_deg=33, bearing_deg=12)
        assert np.array_equal(perspective_transform(state), perspective_transform(state))


class TestProjectPoint:
    """Tests for project_point."""

    def test_identity(self):
        assert np.allclose(project_point(np.eye(4), 1.0, 2.0, 3.0), [1.0, 2.0, 3.0])

    def test_ground_plane_unaffected_by_depth(self):
        """z = 0 points have w = 1, so only rotation applies."""
        m = perspective_transform(ViewportState(enabled=True, bearing_deg=90))
        assert np.allclose(project_point(m, 1.0, 0.0), [0.0, 1.0, 0.0], atol=1e-12)

    def test_depth_divides(self):
        m = perspective_transform(ViewportState(enabled=True))
        p = project_point(m, 2.0, 2.0, 100.0)
        w = 1.0 - 0.001 * 100.0
        assert np.allclose(p, [2.0 / w, 2.0 / w, 100.0 / w])
