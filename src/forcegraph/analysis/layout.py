"""
Derived quantities of a layout.

The engine never reads these: they are computed from a graph snapshot
for diagnostics, convergence checks and plots.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np
from scipy.spatial.distance import pdist

if TYPE_CHECKING:
    from forcegraph.core.force_graph import ForceGraph


@dataclass
class LayoutStats:
    """Summary of one layout snapshot."""

    n_nodes: int
    n_edges: int
    kinetic_energy: float
    centroid: np.ndarray  # [3]
    radius: float  # Largest node distance to the centroid
    min_separation: float  # Closest pair of nodes (inf with < 2 nodes)
    mean_edge_length: float  # nan without (non-loop) edges
    max_edge_length: float


def node_positions(graph: "ForceGraph") -> np.ndarray:
    """Positions of all nodes as an [N, 3] array, in node order."""
    return np.array(
        [node.position.as_array() for node in graph.nodes.values()],
        dtype=np.float64,
    ).reshape(-1, 3)


def node_velocities(graph: "ForceGraph") -> np.ndarray:
    """Velocities of all nodes as an [N, 3] array, in node order."""
    return np.array(
        [node.velocity.as_array() for node in graph.nodes.values()],
        dtype=np.float64,
    ).reshape(-1, 3)


def centroid(graph: "ForceGraph") -> np.ndarray:
    """Mean node position (origin for an empty graph)."""
    positions = node_positions(graph)
    if len(positions) == 0:
        return np.zeros(3)
    return positions.mean(axis=0)


def kinetic_energy(graph: "ForceGraph") -> float:
    """Total kinetic energy Σ ½·m·|v|²."""
    velocities = node_velocities(graph)
    masses = np.array([node.mass for node in graph.nodes.values()], dtype=np.float64)
    return float(0.5 * np.sum(masses * np.sum(velocities**2, axis=1)))


def pairwise_distances(graph: "ForceGraph") -> np.ndarray:
    """Condensed vector of all node-pair distances (see scipy pdist)."""
    positions = node_positions(graph)
    if len(positions) < 2:
        return np.zeros(0)
    return pdist(positions)


def edge_lengths(graph: "ForceGraph") -> np.ndarray:
    """Length of every edge except self-loops, in edge order."""
    return np.array(
        [
            (edge.origin.position - edge.destination.position).norm()
            for edge in graph.edges
            if not edge.is_loop
        ],
        dtype=np.float64,
    )


def compute_layout_stats(graph: "ForceGraph") -> LayoutStats:
    """Compute LayoutStats for the current state of graph."""
    positions = node_positions(graph)
    center = centroid(graph)
    radius = float(np.linalg.norm(positions - center, axis=1).max()) if len(positions) else 0.0

    distances = pairwise_distances(graph)
    lengths = edge_lengths(graph)

    return LayoutStats(
        n_nodes=len(graph.nodes),
        n_edges=len(graph.edges),
        kinetic_energy=kinetic_energy(graph),
        centroid=center,
        radius=radius,
        min_separation=float(distances.min()) if len(distances) else float("inf"),
        mean_edge_length=float(lengths.mean()) if len(lengths) else float("nan"),
        max_edge_length=float(lengths.max()) if len(lengths) else float("nan"),
    )
