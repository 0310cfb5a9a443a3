#!/usr/bin/env python3
"""
Demo: Force-Directed Layout of a Small Graph

Builds a small directed graph and lets it settle:
1. Add nodes and labelled edges (nodes are born around the cluster)
2. Tick the simulation by hand, recording kinetic energy
3. Print layout statistics before and after
4. Plot the settled layout and the energy decay

Shows springs pulling linked nodes to the rest length while repulsion
spreads everything else apart.
"""

from pathlib import Path

import matplotlib.pyplot as plt

from forcegraph.analysis import EnergyTrace, compute_layout_stats
from forcegraph.core import ForceGraph, ForceGraphConfig
from forcegraph.logging_config import setup_logging
from forcegraph.viz import plot_energy_trace, plot_graph, save_figure


EDGES = [
    ("parser", "lexer", "uses"),
    ("parser", "ast", "builds"),
    ("compiler", "parser", None),
    ("compiler", "codegen", None),
    ("codegen", "ast", "reads"),
    ("codegen", "emitter", None),
    ("optimizer", "ast", "rewrites"),
    ("compiler", "optimizer", None),
]


def print_stats(label, graph):
    stats = compute_layout_stats(graph)
    print(f"\n{label}:")
    print(f"   Nodes: {stats.n_nodes}, edges: {stats.n_edges}")
    print(f"   Kinetic energy: {stats.kinetic_energy:.3e}")
    print(f"   Radius: {stats.radius:.1f}")
    print(f"   Min separation: {stats.min_separation:.1f}")
    print(f"   Edge length: mean {stats.mean_edge_length:.1f}, max {stats.max_edge_length:.1f}")


def main():
    setup_logging()

    print("=" * 60)
    print("  FORCE-DIRECTED LAYOUT")
    print("=" * 60)

    config = ForceGraphConfig(autostart=False, seed=42)
    graph = ForceGraph(config)
    for origin, destination, label in EDGES:
        graph.add_edge(origin, destination, label)

    print(f"\n{graph}")
    print_stats("1. Initial layout", graph)

    trace = EnergyTrace()
    graph.subscribe(trace.record)

    n_ticks = 3000
    print(f"\n2. Running {n_ticks} ticks (dt = {config.period_ms} ms)...")
    for _ in range(n_ticks):
        graph.tick(config.period_ms)
        if trace.has_converged(threshold=1e-8, window=20):
            break
    print(f"   Stopped after {graph.ticks} ticks, converged: {trace.has_converged(1e-8, 20)}")

    print_stats("3. Settled layout", graph)

    output_dir = Path(__file__).parent / "output"
    output_dir.mkdir(exist_ok=True)

    fig, axes = plt.subplots(1, 2, figsize=(14, 6))
    plot_graph(graph, title="Settled layout", ax=axes[0])
    plot_energy_trace(trace, ax=axes[1])
    save_figure(fig, output_dir / "layout.png")
    print(f"\n4. Saved {output_dir / 'layout.png'}")


if __name__ == "__main__":
    main()
