"""
Analysis layer: derived quantities of a layout.

IMPORTANT: This is NOT seen by the engine. One-way derivation only.

- LayoutStats / compute_layout_stats: snapshot summary
- kinetic_energy, pairwise_distances, edge_lengths: building blocks
- EnergyTrace: per-tick kinetic energy recorder (a subscriber)
"""

from forcegraph.analysis.layout import (
    LayoutStats,
    compute_layout_stats,
    node_positions,
    node_velocities,
    centroid,
    kinetic_energy,
    pairwise_distances,
    edge_lengths,
)
from forcegraph.analysis.energy import EnergyTrace

__all__ = [
    "LayoutStats",
    "compute_layout_stats",
    "node_positions",
    "node_velocities",
    "centroid",
    "kinetic_energy",
    "pairwise_distances",
    "edge_lengths",
    "EnergyTrace",
]
