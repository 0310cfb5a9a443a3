"""
Static rendering of a layout snapshot.

Draws what the interactive canvas view of the layout would draw:
- Edges as lines, with their label at the midpoint
- Nodes as circles of their radius, labelled with their content

Only x/y are drawn; z is ignored.
"""

from __future__ import annotations
from pathlib import Path
from typing import TYPE_CHECKING

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.figure import Figure
from matplotlib.patches import Circle

if TYPE_CHECKING:
    from forcegraph.core.force_graph import ForceGraph
    from forcegraph.analysis.energy import EnergyTrace


# Canvas palette: warm grey edges, orange nodes
EDGE_COLOR = (186 / 255, 180 / 255, 163 / 255)
NODE_COLOR = (217 / 255, 147 / 255, 61 / 255)


def plot_graph(
    graph: "ForceGraph",
    title: str | None = None,
    ax: Axes | None = None,
    figsize: tuple[float, float] = (8, 8),
    show_labels: bool = True,
    show_edge_labels: bool = True,
    margin: float = 20.0,
) -> tuple[Figure, Axes]:
    """
    Plot the current node positions and edges of graph.

    Args:
        graph: Graph to draw
        title: Optional plot title
        ax: Existing axes (creates new if None)
        show_labels: Write each node's content at its center
        show_edge_labels: Write edge labels at edge midpoints
        margin: Padding around the outermost nodes

    Returns:
        (fig, ax) tuple
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.figure

    for edge in graph.edges:
        start, end = edge.origin.position, edge.destination.position
        ax.plot([start.x, end.x], [start.y, end.y], color=EDGE_COLOR, linewidth=1.0, zorder=1)
        if show_edge_labels and edge.content is not None:
            mid = start.plus(end.minus(start).division(2))
            ax.text(mid.x, mid.y, str(edge.content), ha="center", va="center", fontsize=7, zorder=2)

    for node in graph.nodes.values():
        p = node.position
        ax.add_patch(Circle(
            (p.x, p.y), node.radius,
            facecolor=NODE_COLOR, edgecolor=EDGE_COLOR, zorder=3,
        ))
        if show_labels:
            ax.text(p.x, p.y, str(node), ha="center", va="center", fontsize=8, zorder=4)

    if len(graph.nodes) > 0:
        xy = np.array([(n.position.x, n.position.y) for n in graph.nodes.values()])
        reach = max(n.radius for n in graph.nodes.values()) + margin
        ax.set_xlim(xy[:, 0].min() - reach, xy[:, 0].max() + reach)
        ax.set_ylim(xy[:, 1].min() - reach, xy[:, 1].max() + reach)

    ax.set_aspect("equal")
    ax.set_xticks([])
    ax.set_yticks([])
    if title:
        ax.set_title(title)

    return fig, ax


def plot_energy_trace(
    trace: "EnergyTrace",
    title: str = "Kinetic energy",
    ax: Axes | None = None,
    figsize: tuple[float, float] = (8, 4),
    log_scale: bool = True,
) -> tuple[Figure, Axes]:
    """Plot recorded kinetic energy against tick number."""
    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.figure

    energy = trace.as_array()
    ax.plot(np.arange(len(energy)), energy, color="tab:blue", linewidth=1.5)
    if log_scale and len(energy) > 0 and np.all(energy > 0):
        ax.set_yscale("log")

    ax.set_xlabel("tick")
    ax.set_ylabel("kinetic energy")
    ax.set_title(title)
    ax.grid(True, alpha=0.3)

    return fig, ax


def save_figure(fig: Figure, path: str | Path, dpi: int = 150, **kwargs) -> None:
    """Save figure to file."""
    fig.savefig(path, dpi=dpi, bbox_inches="tight", **kwargs)
