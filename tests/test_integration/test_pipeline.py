"""Integration tests for a full overlay render pass."""
import pytest
import numpy as np

from mapcues import (
    GeoPoint,
    OverlayConfig,
    ViewportController,
    from_snapshot,
    render_overlay,
)
from mapcues.overlay.shadow import shadow_offset
from mapcues.route import ElevationProfileService


class TestRenderOverlay:
    """Tests for render_overlay."""

    def test_disabled_frame(self, paris, controller):
        """3D off: nothing to draw, identity transform."""
        frame = render_overlay(paris, 16.0, controller.state)
        assert frame.is_empty
        assert np.array_equal(frame.transform, np.eye(4))

    def test_enabled_frame(self, paris, controller):
        controller.toggle_3d()
        controller.set_tilt(30)
        frame = render_overlay(paris, 16.0, controller.state)

        assert len(frame.buildings) == 40
        assert len(frame.relief_lines) == 5
        assert len(frame.elevation_markers) == 15
        assert frame.transform[3, 2] == -0.001

    def test_zoomed_out_keeps_relief(self, paris, controller):
        """Below zoom 14 only relief cues remain; below 10 only ridge lines."""
        controller.toggle_3d()
        mid = render_overlay(paris, 12.0, controller.state)
        far = render_overlay(paris, 8.0, controller.state)

        assert mid.buildings == [] and len(mid.elevation_markers) == 15
        assert far.elevation_markers == [] and len(far.relief_lines) == 5

    def test_deterministic(self, paris, controller):
        """Same inputs -> equal frames (safe to cache)."""
        controller.toggle_3d()
        controller.set_bearing(200)
        a = render_overlay(paris, 15.5, controller.state)
        b = render_overlay(paris, 15.5, controller.state)
        assert a == b

    def test_state_changes_flow_through(self, paris, controller):
        """Listeners can re-render on every change."""
        frames = []
        controller.add_listener(lambda s: frames.append(render_overlay(paris, 15.0, s)))

        controller.toggle_3d()
        controller.set_tilt(45)
        controller.set_bearing(-90)

        assert len(frames) == 3
        last = frames[-1]
        for b in last.buildings:
            expected = shadow_offset(b.height, controller.state)
            assert b.shadow_offset == expected
            # Bearing 270: shadow points along -y
            assert b.shadow_offset.dy < 0

    def test_snapshot_restore_reproduces_frame(self, paris, controller):
        controller.toggle_3d()
        controller.set_tilt(50)
        controller.set_building_height(40)
        before = render_overlay(paris, 16.0, controller.state)

        restored = from_snapshot(controller.to_snapshot())
        assert render_overlay(paris, 16.0, restored) == before

    def test_custom_config(self, paris, controller):
        controller.toggle_3d()
        config = OverlayConfig(max_buildings=5, perspective_depth=-0.002)
        frame = render_overlay(paris, 18.0, controller.state, config)
        assert len(frame.buildings) == 5
        assert frame.transform[3, 2] == -0.002


class TestRouteAlongsideOverlay:
    """Route elevation is independent of viewport state."""

    def test_profile_ignores_viewport(self, short_route, controller):
        service = ElevationProfileService()
        before = service.profile(short_route)
        controller.toggle_3d()
        controller.set_tilt(60)
        assert service.profile(short_route) == before

    def test_marker_and_profile_agree(self, paris, controller):
        """Both read the same terrain model."""
        controller.toggle_3d()
        frame = render_overlay(paris, 12.0, controller.state)
        service = ElevationProfileService()
        positions = [m.position for m in frame.elevation_markers]
        samples = service.profile(positions)
        for marker, sample in zip(frame.elevation_markers, samples):
            assert marker.elevation_m == pytest.approx(sample.elevation_m)
