"""
Aggregate results from Hydra sweep runs of run_analysis.py into a summary CSV.

Usage:
    python aggregate_results.py runs/cluster_sweep_*
    python aggregate_results.py runs/*_sweep_*
"""

import json
import sys
from pathlib import Path

import pandas as pd

SCALAR_RESULTS = [
    "touch_count",
    "hull_area",
    "rect_area",
    "aabb_area",
    "circle_area",
    "fill_ratio",
    "rect_to_aabb",
]


def load_results(sweep_dir: Path) -> list[dict]:
    """Load all results.json files from a sweep directory."""
    results = []
    for results_file in sweep_dir.rglob("results.json"):
        try:
            with open(results_file) as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            print(f"Warning: Failed to load {results_file}: {e}")
            continue

        # Flatten config and scalar results into single dict
        row = {}
        for k, v in data.get("config", {}).items():
            if isinstance(v, dict):
                for k2, v2 in v.items():
                    row[f"{k}.{k2}"] = v2 if not isinstance(v2, list) else str(v2)
            else:
                row[k] = v
        for k in SCALAR_RESULTS:
            if k in data.get("results", {}):
                row[k] = data["results"][k]
        row["hull_vertices"] = len(data.get("results", {}).get("hull", []))

        row["_file"] = str(results_file)
        results.append(row)

    return results


def main():
    if len(sys.argv) < 2:
        print("Usage: python aggregate_results.py <sweep_dir> [sweep_dir2 ...]")
        sys.exit(1)

    all_results = []
    for pattern in sys.argv[1:]:
        for sweep_dir in Path(".").glob(pattern):
            if sweep_dir.is_dir():
                print(f"Loading results from {sweep_dir}...")
                results = load_results(sweep_dir)
                print(f"  Found {len(results)} runs")
                all_results.extend(results)

    if not all_results:
        print("No results found!")
        sys.exit(1)

    df = pd.DataFrame(all_results)

    # Print summary stats
    print(f"\nTotal runs: {len(df)}")

    if "fill_ratio" in df.columns:
        print(f"\nHull fill of oriented box:")
        print(f"  Mean: {df['fill_ratio'].mean():.3f}")
        print(f"  Median: {df['fill_ratio'].median():.3f}")
        print(f"  Min: {df['fill_ratio'].min():.3f}")
        print(f"  Max: {df['fill_ratio'].max():.3f}")

        # Group by layout parameters
        for col in ["layout.type", "layout.n_points", "layout.n_sides", "layout.spread"]:
            if col in df.columns and "rect_to_aabb" in df.columns:
                print(f"\nOriented box vs axis-aligned box by {col}:")
                grouped = df.groupby(col)["rect_to_aabb"].agg(["mean", "std", "count"])
                print(grouped.to_string())

    # Save to CSV
    output_file = "sweep_results.csv"
    df.to_csv(output_file, index=False)
    print(f"\nResults saved to {output_file}")

    return df


if __name__ == "__main__":
    main()
