#!/usr/bin/env python3
"""
Synthetic 3D Overlay Demonstration

Renders one overlay frame around a city center and an elevation chart
for a short route:
- Simulated buildings with tilt/bearing-driven shadows
- Ridge lines and ring-placed spot heights
- Contour bands from the noise field
- Elevation profile with per-segment grade
"""
import logging

import numpy as np
import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt

from mapcues import GeoPoint, OverlayConfig, ViewportController, render_overlay
from mapcues.geodesy import cumulative_distance_m
from mapcues.overlay.perspective import project_point
from mapcues.route import ElevationProfileService
from mapcues.terrain import NoiseField, generate_contour_levels

CENTER = GeoPoint(48.8566, 2.3522)  # Paris
ZOOM = 16.0


def plot_frame(frame, contours, output_path: str) -> None:
    """Plot buildings, shadows, relief and contours in lon/lat space."""
    fig, ax = plt.subplots(figsize=(9, 9))

    colors = plt.cm.terrain(np.linspace(0.1, 0.9, max(len(contours), 1)))
    for level, color in zip(contours, colors):
        lats = [p.latitude for p in level.points]
        lons = [p.longitude for p in level.points]
        ax.scatter(lons, lats, s=4, color=color, alpha=0.5,
                   label=f"{level.elevation_m:.0f} m")

    for line in frame.relief_lines:
        ax.plot([p.longitude for p in line.points], [p.latitude for p in line.points],
                ':', color=(121 / 255, 85 / 255, 72 / 255), alpha=0.6, lw=2)

    # Shadows are screen offsets; scale them into degrees for display
    shadow_scale = 2e-6
    for b in frame.buildings:
        x, y = b.position.longitude, b.position.latitude
        ax.plot([x, x + b.shadow_offset.dx * shadow_scale],
                [y, y - b.shadow_offset.dy * shadow_scale],
                color='black', alpha=0.3, lw=3)
        ax.scatter([x], [y], s=b.height * 3, color='grey', edgecolors='dimgrey', zorder=3)

    for m in frame.elevation_markers:
        ax.annotate(m.label, (m.position.longitude, m.position.latitude),
                    fontsize=7, color='brown', ha='center')

    corner = project_point(frame.transform, 1.0, 1.0)
    ax.set_title(f"Overlay at zoom {ZOOM:.0f} "
                 f"({len(frame.buildings)} buildings, projected unit corner "
                 f"{corner[0]:.2f}, {corner[1]:.2f})")
    ax.set_xlabel("Longitude")
    ax.set_ylabel("Latitude")
    ax.legend(loc='upper right', fontsize=7)
    plt.tight_layout()
    plt.savefig(output_path, dpi=150, bbox_inches='tight')
    plt.close()


def plot_profile(route, service: ElevationProfileService, output_path: str) -> None:
    """Plot elevation against distance with grade per segment."""
    samples = service.profile(route)
    distance_km = cumulative_distance_m(route) / 1000.0
    elevations = [s.elevation_m for s in samples]
    grades = [s.grade_percent for s in service.slope_segments(route)]

    fig, (ax1, ax2) = plt.subplots(2, 1, figsize=(10, 6), sharex=True)
    ax1.fill_between(distance_km, elevations, color='tan', alpha=0.6)
    ax1.plot(distance_km, elevations, color='saddlebrown')
    ax1.set_ylabel("Elevation (m)")
    ax1.set_title("Simulated elevation profile")

    mids = (distance_km[:-1] + distance_km[1:]) / 2
    ax2.bar(mids, grades, width=np.diff(distance_km) * 0.9,
            color=['firebrick' if g > 0 else 'seagreen' for g in grades])
    ax2.set_ylabel("Grade (%)")
    ax2.set_xlabel("Distance (km)")

    plt.tight_layout()
    plt.savefig(output_path, dpi=150, bbox_inches='tight')
    plt.close()


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    print("=" * 60)
    print("  SYNTHETIC 3D OVERLAY DEMO")
    print("=" * 60)

    config = OverlayConfig()
    errors = config.validate()
    if errors:
        raise SystemExit("Invalid config: " + "; ".join(errors))

    controller = ViewportController()
    controller.add_listener(lambda s: print(f"  state -> {s}"))
    controller.toggle_3d()
    controller.set_tilt(45)
    controller.set_bearing(-30)
    controller.set_building_height(25)

    noise = NoiseField()
    frame = render_overlay(CENTER, ZOOM, controller.state, config, noise)
    contours = generate_contour_levels(CENTER, 2.0, controller.state, noise)

    print(f"\n[1/2] Rendering overlay frame...")
    plot_frame(frame, contours, "overlay_frame.png")
    print(f"      Saved: overlay_frame.png")

    route = [
        CENTER.offset(0.004 * i, 0.006 * i) for i in range(25)
    ]
    service = ElevationProfileService(noise, config)
    summary = service.summarize(route)

    print(f"\n[2/2] Rendering elevation profile...")
    plot_profile(route, service, "elevation_profile.png")
    print(f"      Saved: elevation_profile.png")

    print(f"\nRoute summary:")
    print(f"  Distance:   {summary.distance_m / 1000:.2f} km")
    print(f"  Elevation:  {summary.min_elevation_m:.0f} - {summary.max_elevation_m:.0f} m")
    print(f"  Ascent:     {summary.total_ascent_m:.0f} m")
    print(f"  Descent:    {summary.total_descent_m:.0f} m")
    print(f"  Max grade:  {summary.max_grade_percent:.1f} %")
    print(f"\nSnapshot: {controller.to_snapshot()}")


if __name__ == "__main__":
    main()
