"""Scene-graph transforms.

Transforms live in a :class:`Hierarchy` arena and are manipulated through
:class:`Transform` handles.
"""

from math3d.transform.hierarchy import Hierarchy, TransformState
from math3d.transform.space import Space
from math3d.transform.transform import Transform

__all__ = ["Hierarchy", "Space", "Transform", "TransformState"]
