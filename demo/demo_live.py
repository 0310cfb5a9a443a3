#!/usr/bin/env python3
"""
Demo: Live Simulation with Observers

Runs the simulation on its own recurring tick and watches it:
1. Start a ForceGraph ticking every 25 ms
2. Subscribe a progress printer (and a deliberately broken observer)
3. Grow the graph while it runs
4. Disable one node (as a drag would) and check it stays put
5. Stop the simulation

The broken observer is logged but never interrupts the simulation.
"""

import logging
import time

from forcegraph.analysis import kinetic_energy
from forcegraph.core import ForceGraph, ForceGraphConfig
from forcegraph.logging_config import setup_logging


class ProgressPrinter:
    """Prints kinetic energy every `every` ticks."""

    def __init__(self, every: int = 40):
        self.every = every

    def redraw(self, graph):
        if graph.ticks % self.every == 0:
            print(f"   tick {graph.ticks:5d}  nodes {len(graph):2d}  "
                  f"KE {kinetic_energy(graph):.3e}")


def broken_renderer(graph):
    raise RuntimeError("display surface went away")


def main():
    setup_logging(logging.WARNING)

    print("=" * 60)
    print("  LIVE FORCE-DIRECTED SIMULATION")
    print("=" * 60)

    graph = ForceGraph(ForceGraphConfig(period_ms=25.0, seed=1))
    graph.subscribe(ProgressPrinter.redraw, ProgressPrinter())
    graph.subscribe(broken_renderer)
    print(f"\n1. Running: {graph.running}")

    print("\n2. Growing a ring of 8 nodes...")
    for i in range(8):
        graph.add_edge(f"n{i}", f"n{(i + 1) % 8}")
        time.sleep(0.1)

    print("\n3. Disabling n0 (held in place)...")
    held = graph.set_enabled("n0", False)
    before = held.position
    time.sleep(1.0)
    print(f"   n0 moved: {held.position != before}")
    graph.set_enabled("n0", True)

    time.sleep(1.0)
    graph.stop()
    print(f"\n4. Stopped after {graph.ticks} ticks, running: {graph.running}")


if __name__ == "__main__":
    main()
