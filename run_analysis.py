"""
Shape analysis runner for touch layouts.

Usage:
    # Single run (random cluster of 5 contacts)
    python run_analysis.py

    # Regular hexagon
    python run_analysis.py layout=polygon layout.n_sides=6

    # Recorded contacts
    python run_analysis.py layout=file layout.path=touches.json

    # Sweep over seeds and cluster sizes
    python run_analysis.py -m seed=1,2,3 layout.n_points=3,5,10
"""

import json
import logging
import math

import hydra
import numpy as np
from omegaconf import DictConfig, OmegaConf

from charade.geom import build_shape_report
from charade.layouts import collinear_points, load_points, make_touch_cluster, regular_polygon
from charade.touches import TouchTable

log = logging.getLogger(__name__)


def build_layout(cfg: DictConfig) -> np.ndarray:
    """Generate the contact positions described by cfg.layout."""
    layout = cfg.layout
    if layout.type == "cluster":
        return make_touch_cluster(
            n_points=layout.n_points,
            center=tuple(layout.center),
            spread=layout.spread,
            random_state=cfg.seed,
        )
    elif layout.type == "polygon":
        return regular_polygon(
            n_sides=layout.n_sides,
            radius=layout.radius,
            center=tuple(layout.center),
            rotation=layout.rotation,
        )
    elif layout.type == "collinear":
        return collinear_points(
            n_points=layout.n_points,
            start=tuple(layout.start),
            end=tuple(layout.end),
        )
    elif layout.type == "file":
        return load_points(hydra.utils.to_absolute_path(layout.path))
    raise ValueError(f"Unknown layout type: {layout.type}")


def fill_touch_table(points: np.ndarray, capacity: int) -> TouchTable:
    """Replay the layout as touch-begin events, dropping contacts past capacity."""
    table = TouchTable(capacity=capacity)
    if len(points) > capacity:
        log.warning(f"Layout has {len(points)} contacts, device reports {capacity}; extra contacts dropped")
    for touch_id, (x, y) in enumerate(points[:capacity]):
        table.add(touch_id, x, y)
    return table


def analyze(cfg: DictConfig) -> dict:
    """Run one layout through the touch table and the geometry kernel."""
    points = build_layout(cfg)
    table = fill_touch_table(points, cfg.capacity)
    snapshot = table.points()

    report = build_shape_report(snapshot, metadata={"layout": cfg.layout.type})
    if report.is_empty:
        log.warning("No contacts in layout; nothing to analyze")
        return report.to_dict()

    log.info(f"Touches: {report.touch_count}")
    log.info(f"Centroid: ({report.centroid.x:.1f}, {report.centroid.y:.1f})")
    log.info(f"BBox center: ({report.bbox_center.x:.1f}, {report.bbox_center.y:.1f})")
    log.info(
        f"Enclosing circle: ({report.circle.center.x:.1f}, {report.circle.center.y:.1f}) "
        f"r={report.circle.radius:.1f}"
    )
    log.info(f"Hull: {len(report.hull)} vertices, area={report.hull_area:.1f}")
    log.info(f"Oriented box: area={report.rect_area:.1f}, angle={math.degrees(report.rect.angle):.1f} deg")

    if report.rect_area <= 1e-9:
        log.warning("Degenerate layout: oriented box has zero area")

    arr = np.asarray([(p.x, p.y) for p in snapshot])
    extent = arr.max(axis=0) - arr.min(axis=0)
    aabb_area = float(extent[0] * extent[1])

    results = report.to_dict()
    results["aabb_area"] = aabb_area
    results["rect_to_aabb"] = report.rect_area / aabb_area if aabb_area > 0 else 1.0
    results["circle_area"] = math.pi * report.circle.r2
    return results


# =============================================================================
# Main entry point
# =============================================================================


@hydra.main(version_base=None, config_path="configs", config_name="config")
def main(cfg: DictConfig):
    log.info(f"Config:\n{OmegaConf.to_yaml(cfg)}")
    log.info(f"Seed: {cfg.seed}")
    log.info(f"Layout: {cfg.layout.type}")

    results = analyze(cfg)

    with open(cfg.output, "w") as f:
        json.dump({
            "config": OmegaConf.to_container(cfg, resolve=True),
            "results": results,
        }, f, indent=2)

    return results.get("rect_area", 0.0)


if __name__ == "__main__":
    main()
