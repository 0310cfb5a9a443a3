"""
Core simulation engine.

- Vector3: immutable 3D vector
- Physics: Hooke, Coulomb, RK4 (stateless)
- Graph: directed labelled graph keyed by node identity
- Notifier: publish/subscribe for per-tick observers
- RecurringTask: cancellable recurring tick handle
- ForceGraph: the layout model tying all of the above together
"""

from forcegraph.core.vector import Vector3, DegenerateGeometryError
from forcegraph.core.physics import COULOMB_CONSTANT, hooke, coulomb, softened_coulomb, rk4_step_3d
from forcegraph.core.graph import Graph, Edge
from forcegraph.core.notifier import Notifier, Subscription
from forcegraph.core.scheduler import RecurringTask
from forcegraph.core.force_graph import ForceGraph, ForceGraphConfig, ForceNode

__all__ = [
    "Vector3",
    "DegenerateGeometryError",
    "COULOMB_CONSTANT",
    "hooke",
    "coulomb",
    "softened_coulomb",
    "rk4_step_3d",
    "Graph",
    "Edge",
    "Notifier",
    "Subscription",
    "RecurringTask",
    "ForceGraph",
    "ForceGraphConfig",
    "ForceNode",
]
