"""sdf3d.examples — example 3D assemblies built from the shape catalog.

Implemented assemblies
----------------------
:func:`RocketAssembly`
    Parametric rocket with body, nose, and fins, standing along Y.

:func:`TorusLattice`
    Periodic lattice of rings clipped to a box.
"""

from .rocket_assembly import RocketAssembly
from .lattice import TorusLattice

__all__ = ["RocketAssembly", "TorusLattice"]
