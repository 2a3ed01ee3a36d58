"""Generic n-dimensional linear algebra scaffolding.

The fixed-size types in :mod:`math3d.geometry` wrap these containers and
re-expose their operations with narrowed return types.
"""

from math3d.linalg.matrix import Matrix, MatrixSize
from math3d.linalg.vector import Vector

__all__ = ["Vector", "Matrix", "MatrixSize"]
