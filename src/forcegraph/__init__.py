"""
forcegraph: force-directed layout of directed graphs

Nodes are charged point masses, edges are springs:
- Springs pull connected nodes toward a rest length (Hooke's law)
- Every pair of nodes repels (Coulomb's law)
- Linear drag damps the motion toward equilibrium

A ForceGraph integrates this system with RK4 on a recurring tick and
publishes itself to its subscribers (renderers, recorders) after each one.
"""

__version__ = "0.1.0"
