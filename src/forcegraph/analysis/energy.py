"""
EnergyTrace: records the kinetic energy of a graph after every tick.

Subscribe the trace's `record` method to a ForceGraph; the damped system
should show the recorded energy decaying toward zero.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import numpy as np

from forcegraph.analysis.layout import kinetic_energy

if TYPE_CHECKING:
    from forcegraph.core.force_graph import ForceGraph


@dataclass
class EnergyTrace:
    """Kinetic energy per published tick."""

    max_samples: int | None = None  # Keep only the most recent samples
    samples: list[float] = field(default_factory=list)

    def record(self, graph: "ForceGraph") -> None:
        self.samples.append(kinetic_energy(graph))
        if self.max_samples is not None and len(self.samples) > self.max_samples:
            del self.samples[: len(self.samples) - self.max_samples]

    def __len__(self) -> int:
        return len(self.samples)

    def as_array(self) -> np.ndarray:
        return np.array(self.samples, dtype=np.float64)

    def has_converged(self, threshold: float = 1e-6, window: int = 10) -> bool:
        """True when each of the last `window` samples is below threshold."""
        if len(self.samples) < window:
            return False
        return bool(np.all(self.as_array()[-window:] < threshold))
