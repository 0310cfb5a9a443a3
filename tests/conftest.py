"""
Pytest configuration and shared fixtures.
"""

import matplotlib

matplotlib.use("Agg")

import pytest
import numpy as np


@pytest.fixture
def quiet_config():
    """Configuration for a graph that only moves when ticked by hand."""
    from forcegraph.core import ForceGraphConfig
    return ForceGraphConfig(autostart=False, seed=42)


@pytest.fixture
def graph(quiet_config):
    """Empty, stopped ForceGraph with seeded birth positions."""
    from forcegraph.core import ForceGraph
    g = ForceGraph(quiet_config)
    yield g
    g.stop()


@pytest.fixture
def abc_graph(graph):
    """Nodes A, B, C with edges A->B (label "x") and B->C (no label)."""
    graph.add_edge("A", "B", "x")
    graph.add_edge("B", "C")
    return graph


@pytest.fixture
def rng():
    """Reproducible random number generator."""
    return np.random.default_rng(seed=42)
