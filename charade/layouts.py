import json

import numpy as np


# =============================================================================
# Synthetic touch layouts
# =============================================================================


def make_touch_cluster(n_points=5, center=(0.0, 0.0), spread=1.0, random_state=None):
    """
    Generate a Gaussian cluster of touch contacts, like fingers resting on a pad.

    Args:
        n_points: Number of contacts
        center: (x, y) centre of the cluster
        spread: Standard deviation of each coordinate
        random_state: Random seed for reproducibility

    Returns:
        Array of shape (n_points, 2)
    """
    rng = np.random.RandomState(random_state)
    return np.asarray(center, dtype=float) + rng.randn(n_points, 2) * spread


def regular_polygon(n_sides=4, radius=1.0, center=(0.0, 0.0), rotation=0.0):
    """Vertices of a regular polygon in counter-clockwise order, shape (n_sides, 2)."""
    theta = rotation + np.arange(n_sides) * (2 * np.pi / n_sides)
    return np.asarray(center, dtype=float) + radius * np.column_stack([np.cos(theta), np.sin(theta)])


def collinear_points(n_points=3, start=(0.0, 0.0), end=(1.0, 0.0)):
    """Evenly spaced contacts along a straight stroke, shape (n_points, 2)."""
    t = np.linspace(0.0, 1.0, n_points)[:, None]
    start = np.asarray(start, dtype=float)
    end = np.asarray(end, dtype=float)
    return start + t * (end - start)


# =============================================================================
# Recorded layouts
# =============================================================================


def load_points(path):
    """
    Load contacts from a JSON file.

    Accepts either a bare list of [x, y] pairs or an object with a "points" key.

    Returns:
        Array of shape (n_points, 2)
    """
    with open(path) as f:
        data = json.load(f)
    if isinstance(data, dict):
        data = data.get("points", [])
    arr = np.asarray(data, dtype=float).reshape(-1, 2) if len(data) else np.zeros((0, 2))
    return arr
