"""
Force laws and the integrator used by the layout simulation.

Everything here is stateless:
- hooke: spring restoring force (scalar, along the separating axis)
- coulomb: electrostatic repulsion between two point charges
- softened_coulomb: the same, bounded for overlapping nodes
- rk4_step_3d: classical 4th order Runge-Kutta for a point mass

hooke and both Coulomb laws accept plain floats or numpy arrays, so the
force loop evaluates all pairs of a node at once.
"""

from __future__ import annotations
from typing import Callable

import numpy as np

from forcegraph.core.vector import DegenerateGeometryError, Vector3


# N·m²/C²
COULOMB_CONSTANT = 8.9875517923e9

AccelerationFn = Callable[[Vector3, Vector3, float], Vector3]


def hooke(spring_constant, displacement):
    """
    Hooke's law: F = -k·x.

    Negative values pull the endpoints together, positive push apart.
    """
    return -spring_constant * displacement


def coulomb(q1, q2, distance, k: float = COULOMB_CONSTANT):
    """
    Coulomb's law: F = k·q1·q2 / r².

    Positive values are repulsive for like charges.

    Raises:
        DegenerateGeometryError: if any distance is zero
    """
    r = np.asarray(distance, dtype=np.float64)
    if np.any(r == 0.0):
        raise DegenerateGeometryError("coulomb force at zero distance")
    force = k * q1 * q2 / r**2
    if np.ndim(force) == 0:
        return float(force)
    return force


def softened_coulomb(q1, q2, distance, softening, k: float = COULOMB_CONSTANT):
    """
    Coulomb's law without the singularity at r = 0.

    F = k·q1·q2·r / max(r, s)³: identical to coulomb() for r >= s, and
    falling linearly to zero inside s, as between overlapping charged
    spheres.

    Raises:
        DegenerateGeometryError: if both distance and softening are zero
    """
    r = np.asarray(distance, dtype=np.float64)
    reach = np.maximum(r, np.asarray(softening, dtype=np.float64))
    if np.any(reach == 0.0):
        raise DegenerateGeometryError("coulomb force at zero distance")
    force = k * q1 * q2 * r / reach**3
    if np.ndim(force) == 0:
        return float(force)
    return force


def rk4_step_3d(
    position: Vector3,
    velocity: Vector3,
    acceleration: AccelerationFn,
    dt: float,
) -> tuple[Vector3, Vector3]:
    """
    Advance a point mass by dt with classical RK4.

    Integrates the coupled system dp/dt = v, dv/dt = a(p, v, t).

    Args:
        position: Position at the start of the step
        velocity: Velocity at the start of the step
        acceleration: a(p, v, t) evaluated at trial states, t being the
                      stage offset from the start of the step
        dt: Step size

    Returns:
        (new_position, new_velocity)
    """
    half = dt / 2.0

    k1_p = velocity
    k1_v = acceleration(position, velocity, 0.0)

    k2_p = velocity + k1_v * half
    k2_v = acceleration(position + k1_p * half, k2_p, half)

    k3_p = velocity + k2_v * half
    k3_v = acceleration(position + k2_p * half, k3_p, half)

    k4_p = velocity + k3_v * dt
    k4_v = acceleration(position + k3_p * dt, k4_p, dt)

    sixth = dt / 6.0
    new_position = position + (k1_p + k2_p * 2.0 + k3_p * 2.0 + k4_p) * sixth
    new_velocity = velocity + (k1_v + k2_v * 2.0 + k3_v * 2.0 + k4_v) * sixth
    return new_position, new_velocity
