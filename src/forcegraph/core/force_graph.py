"""
ForceGraph: a directed graph whose nodes are laid out by a physical model.

Every tick:
1. Snapshot all node positions, charges and spring adjacency
2. For each enabled node, integrate its motion with RK4 over dt:
   - Springs: every edge touching the node, Hooke's law around a rest length
   - Repulsion: every other node, Coulomb's law softened inside contact
   - Damping: linear drag proportional to velocity
3. Write back all new positions/velocities
4. Publish the graph to every subscriber

Each node is integrated on its own against the tick-start snapshot:
the other nodes stay frozen at their pre-tick positions during all four
RK4 stages. The update order inside a tick therefore never matters.

The tick is driven by a RecurringTask thread. All mutations and ticks are
serialized through one re-entrant lock, so callers may mutate the graph
from any thread, and subscribers may mutate it from inside publish().
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Callable
import logging
import threading

import numpy as np

from forcegraph.core.graph import Edge, Graph, KeyFn
from forcegraph.core.notifier import Notifier, Subscription
from forcegraph.core.physics import COULOMB_CONSTANT, AccelerationFn, hooke, rk4_step_3d, softened_coulomb
from forcegraph.core.scheduler import RecurringTask
from forcegraph.core.vector import Vector3

logger = logging.getLogger(__name__)


@dataclass
class ForceGraphConfig:
    """Physical constants and scheduling for a ForceGraph."""

    spring_rest: float = 25.0  # Spring rest length (distance units)
    spring_constant: float = 0.0001
    damping: float = 0.005  # Linear drag coefficient
    coulomb_constant: float = COULOMB_CONSTANT
    period_ms: float = 25.0  # Tick period, also used as the tick's dt
    birth_radius: float = 50.0  # Minimum radius of the birth circle
    pick_tolerance: float = 5.0  # Added to node radius for hit-testing
    autostart: bool = True  # Start ticking on construction
    seed: int | None = None  # Seed for birth positions

    def __post_init__(self):
        if self.period_ms <= 0:
            raise ValueError(f"period_ms must be positive, got {self.period_ms}")
        if self.damping < 0:
            raise ValueError(f"damping must be non-negative, got {self.damping}")
        if self.spring_rest < 0:
            raise ValueError(f"spring_rest must be non-negative, got {self.spring_rest}")
        if self.birth_radius <= 0:
            raise ValueError(f"birth_radius must be positive, got {self.birth_radius}")


@dataclass(eq=False)
class ForceNode:
    """
    A charged spherical point mass wrapping caller content.

    Defaults: 1 kg, 2 µC, radius 8 (radius is only used for hit-testing).
    Disabled nodes are not integrated but still repel and pull others.
    """

    content: Any
    position: Vector3 = field(default_factory=Vector3.zero)
    velocity: Vector3 = field(default_factory=Vector3.zero)
    mass: float = 1.0
    charge: float = 2e-6
    radius: float = 8.0
    enabled: bool = True

    def __str__(self) -> str:
        return str(self.content)


def _separations(here: np.ndarray, others: np.ndarray) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Offsets and distances from others to here, coincident points dropped.

    Returns:
        (delta [K, 3], distance [K], apart [M]) where apart masks the
        points that were kept
    """
    delta = here - others
    distance = np.linalg.norm(delta, axis=1)
    apart = distance > 0.0
    return delta[apart], distance[apart], apart


class ForceGraph(Graph):
    """
    Force-directed layout model.

    Example
    -------
    >>> graph = ForceGraph(ForceGraphConfig(autostart=False, seed=1))
    >>> graph.add_edge("A", "B", "x")
    >>> graph.subscribe(renderer.redraw)
    >>> graph.start(25)
    """

    def __init__(self, config: ForceGraphConfig | None = None, key: KeyFn = str):
        super().__init__(key)
        self.config = config or ForceGraphConfig()
        self.notifier = Notifier(self)
        self.ticks = 0

        self._lock = threading.RLock()
        self._rng = np.random.default_rng(self.config.seed)
        self._task: RecurringTask | None = None
        self._ticking = False

        if self.config.autostart:
            self.start()

    def identity(self, n: Any):
        if isinstance(n, ForceNode):
            n = n.content
        return super().identity(n)

    # ═══════════════════════════════════════════════════════════════════
    # LIFECYCLE
    # ═══════════════════════════════════════════════════════════════════

    @property
    def running(self) -> bool:
        return self._task is not None and self._task.alive

    def start(self, period_ms: float | None = None) -> None:
        """
        Tick every period_ms milliseconds, replacing any running schedule.

        The period doubles as the integration step of each tick.
        """
        if period_ms is None:
            period_ms = self.config.period_ms
        if period_ms <= 0:
            raise ValueError(f"period_ms must be positive, got {period_ms}")

        self.stop()
        self._task = RecurringTask(
            period_ms / 1000.0,
            lambda: self.tick(period_ms),
            name=f"forcegraph-tick-{id(self):x}",
        )
        self._task.start()
        logger.debug("Simulation started, period %s ms", period_ms)

    def stop(self) -> None:
        """Cancel the recurring tick. Safe to call when already stopped."""
        task, self._task = self._task, None
        if task is not None:
            task.cancel()
            logger.debug("Simulation stopped after %d ticks", self.ticks)

    # ═══════════════════════════════════════════════════════════════════
    # OBSERVERS
    # ═══════════════════════════════════════════════════════════════════

    def subscribe(self, callback: Callable[..., Any], context: Any = None) -> Subscription:
        return self.notifier.subscribe(callback, context)

    def unsubscribe(self, callback: Callable[..., Any]) -> None:
        self.notifier.unsubscribe(callback)

    def publish(self) -> None:
        # A publish from another thread waits for the tick's publish to end
        with self._lock:
            self.notifier.publish()

    # ═══════════════════════════════════════════════════════════════════
    # MUTATION
    # ═══════════════════════════════════════════════════════════════════

    def add_node(self, content: Any) -> ForceNode | None:
        """
        Add a node for content at a fresh birth position.

        If a node with the same key exists it is returned untouched. A
        ForceNode passed in directly is stored with its own state.
        """
        if content is None:
            return None
        with self._lock:
            existing = self.get_node(content)
            if existing is not None:
                return existing
            if isinstance(content, ForceNode):
                node = content
            else:
                node = ForceNode(content, position=self.new_position())
            return super().add_node(node)

    def add_edge(self, c1: Any, c2: Any, label: Any = None) -> Edge | None:
        if c1 is None or c2 is None:
            return None
        with self._lock:
            n1 = self.add_node(c1)
            n2 = self.add_node(c2)
            return super().add_edge(n1, n2, label)

    def rem_node(self, content: Any) -> None:
        with self._lock:
            super().rem_node(content)

    def rem_edge(self, c1: Any, c2: Any, label: Any = None) -> None:
        with self._lock:
            super().rem_edge(c1, c2, label)

    def set_enabled(self, content: Any, enabled: bool = True) -> ForceNode | None:
        """Include (or exclude) a node from integration, e.g. while dragged."""
        with self._lock:
            node = self.get_node(content)
            if node is not None:
                node.enabled = enabled
            return node

    # ═══════════════════════════════════════════════════════════════════
    # SPATIAL QUERIES
    # ═══════════════════════════════════════════════════════════════════

    def new_position(self) -> Vector3:
        """
        Birth position for a new node.

        A uniformly random point on the circle centred on the centroid of
        all nodes, with radius the largest node distance to that centroid
        (at least birth_radius). New nodes start outside the cluster.
        """
        with self._lock:
            positions = np.array(
                [n.position.as_array() for n in self._nodes.values()],
                dtype=np.float64,
            ).reshape(-1, 3)

        radius = self.config.birth_radius
        if len(positions) > 0:
            centroid = positions.mean(axis=0)
            radius = max(radius, float(np.linalg.norm(positions - centroid, axis=1).max()))
        else:
            centroid = np.zeros(3)

        theta = self._rng.uniform(0.0, 2.0 * np.pi)
        return Vector3(
            centroid[0] + radius * np.cos(theta),
            centroid[1] + radius * np.sin(theta),
            centroid[2],
        )

    def get_node_at(self, position) -> ForceNode | None:
        """First node within radius + pick_tolerance of position, if any."""
        if not isinstance(position, Vector3):
            position = Vector3.from_array(position)
        with self._lock:
            for node in self._nodes.values():
                if (node.position - position).norm() < node.radius + self.config.pick_tolerance:
                    return node
        return None

    # ═══════════════════════════════════════════════════════════════════
    # SIMULATION
    # ═══════════════════════════════════════════════════════════════════

    def tick(self, dt: float | None = None) -> None:
        """Advance every enabled node by dt, then publish once."""
        if dt is None:
            dt = self.config.period_ms

        with self._lock:
            if self._ticking:
                logger.warning("Re-entrant tick dropped")
                return
            self._ticking = True
            try:
                self._step(dt)
                self.ticks += 1
                self.publish()
            finally:
                self._ticking = False

    def _step(self, dt: float) -> None:
        nodes = list(self._nodes.values())
        if not nodes:
            return

        # Tick-start snapshot, read-only for the rest of the step
        index = {id(node): i for i, node in enumerate(nodes)}
        positions = np.array([n.position.as_array() for n in nodes], dtype=np.float64)
        charges = np.array([n.charge for n in nodes], dtype=np.float64)
        radii = np.array([n.radius for n in nodes], dtype=np.float64)
        springs: list[list[int]] = [[] for _ in nodes]
        for edge in self._edges:
            if edge.is_loop:
                continue
            i, j = index[id(edge.origin)], index[id(edge.destination)]
            springs[i].append(j)
            springs[j].append(i)

        updates = []
        for i, node in enumerate(nodes):
            if not node.enabled:
                continue
            acceleration = self._net_acceleration(i, node, positions, charges, radii, springs[i])
            try:
                position, velocity = rk4_step_3d(node.position, node.velocity, acceleration, dt)
            except ArithmeticError:
                logger.warning("Node %s keeps its state this tick", node, exc_info=True)
                continue
            updates.append((node, position, velocity))

        for node, position, velocity in updates:
            node.position = position
            node.velocity = velocity

    def _net_acceleration(
        self,
        i: int,
        node: ForceNode,
        positions: np.ndarray,
        charges: np.ndarray,
        radii: np.ndarray,
        neighbours: list[int],
    ) -> AccelerationFn:
        """
        Acceleration of node i at a trial state, other nodes frozen.

        a = F/m - damping·v, F summing springs to neighbours and Coulomb
        repulsion from every other node. Repulsion is softened once two
        nodes' discs overlap (distance below the sum of their radii).
        Coincident points contribute no force.
        """
        cfg = self.config
        others = np.arange(len(positions)) != i
        spring_ends = positions[neighbours].reshape(-1, 3)
        other_positions = positions[others]
        other_charges = charges[others]
        contact = node.radius + radii[others]

        def acceleration(p: Vector3, v: Vector3, t: float) -> Vector3:
            here = p.as_array()
            force = np.zeros(3)

            delta, distance, linked = _separations(here, spring_ends)
            magnitude = hooke(cfg.spring_constant, (distance - cfg.spring_rest) / 2.0)
            force += (delta / distance[:, None] * magnitude[:, None]).sum(axis=0)

            delta, distance, apart = _separations(here, other_positions)
            magnitude = softened_coulomb(
                node.charge, other_charges[apart], distance, contact[apart], k=cfg.coulomb_constant
            )
            force += (delta / distance[:, None] * magnitude[:, None]).sum(axis=0)

            if not (linked.all() and apart.all()):
                logger.debug("Node %s coincides with another node, pair skipped", node)

            return Vector3.from_array(force / node.mass) - v * cfg.damping

        return acceleration
