#!/usr/bin/env python3
from __future__ import annotations

"""Plotting utility that visualises bucket counts from evaluate_engines."""

import argparse
import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt

COLORS = ["#2563eb", "#a855f7", "#f97316", "#10b981"]


def load_summary(path: Path) -> List[Dict[str, Any]]:
    """Parse the JSON summary emitted by evaluate_engines.py."""
    with path.open() as f:
        data = json.load(f)
    if not isinstance(data, list):
        raise ValueError("Summary file must contain a list of engine records")
    return data


def plot_summary(summary: List[Dict[str, Any]], output_path: Path) -> None:
    """Draw per-bucket counts and chi-square statistics side by side."""
    fig, (ax0, ax1) = plt.subplots(1, 2, figsize=(14, 5))

    width = 0.8 / len(summary)
    for idx, entry in enumerate(summary):
        counts = entry["bucketCounts"]
        positions = [b + idx * width for b in range(len(counts))]
        ax0.bar(positions, counts, width=width, label=entry["engine"], color=COLORS[idx % len(COLORS)])
    first = summary[0]
    expected = first["draws"] / first["buckets"]
    ax0.axhline(expected, color="#94a3b8", linewidth=0.8, linestyle="--", label="expected")
    ax0.set_xlabel("Bucket")
    ax0.set_ylabel("Count")
    ax0.set_title("Bucket Counts per Engine")
    ax0.legend()

    names = [entry["engine"] for entry in summary]
    chi = [entry["chiSquare"] for entry in summary]
    ax1.bar(names, chi, color=[COLORS[i % len(COLORS)] for i in range(len(names))])
    critical = first.get("chiSquareCritical")
    if critical is not None:
        ax1.axhline(critical, color="#dc2626", linewidth=1.0, linestyle="--", label="critical (α=0.05)")
        ax1.legend()
    ax1.set_ylabel("Chi-square")
    ax1.set_title("Uniformity Statistic")

    fig.tight_layout()
    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output_path, dpi=200)
    plt.close(fig)


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Plot engine uniformity from an evaluation summary.")
    parser.add_argument("--summary", required=True, help="JSON output from evaluate_engines.py")
    parser.add_argument("--output", required=True, help="Path to save the figure (PNG/SVG).")
    args = parser.parse_args(argv)

    summary = load_summary(Path(args.summary))
    if not summary:
        raise ValueError("Summary is empty")

    output_path = Path(args.output)
    plot_summary(summary, output_path)
    print(f"Saved uniformity plot to {output_path}")


if __name__ == "__main__":
    main()
