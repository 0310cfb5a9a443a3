"""
Visualization utilities.

- Layout snapshot (nodes, edges, labels)
- Kinetic energy trace
"""

from forcegraph.viz.layout import (
    plot_graph,
    plot_energy_trace,
    save_figure,
)

__all__ = [
    "plot_graph",
    "plot_energy_trace",
    "save_figure",
]
