"""Arena storage for transform hierarchies.

A :class:`Hierarchy` owns the state of every transform created through it.
Parent and child links are stored as integer indices into the arena, so a
node's lifetime never depends on its parent and the object graph holds no
reference cycles. :class:`~math3d.transform.Transform` objects are
lightweight handles ``(hierarchy, index)`` onto that state.

Example:
    >>> from math3d import Hierarchy, Quaternion, Vector3
    >>> scene = Hierarchy()
    >>> parent = scene.create(Vector3(0, 0, 5), Quaternion.euler(0, 90, 0), name="parent")
    >>> child = scene.create(Vector3(0, 0, 6), name="child")
    >>> child.set_parent(parent)
    >>> child.local_position.equals(Vector3(-1, 0, 0))
    True
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field

from math3d.errors import HierarchyError, InvalidArgumentError
from math3d.geometry import Quaternion, Vector3
from math3d.transform.transform import Transform

logger = logging.getLogger(__name__)


@dataclass
class TransformState:
    """Mutable per-node state held by the arena.

    World values are always ``parent.world`` composed with the local values;
    a node without a parent has ``local == world``.
    """

    name: str
    position: Vector3
    rotation: Quaternion
    local_position: Vector3
    local_rotation: Quaternion
    parent: int | None = None
    children: list[int] = field(default_factory=list)


class Hierarchy:
    """Arena of transforms.

    Transforms of one hierarchy may only be linked with each other. Access
    to a hierarchy must be serialized by the caller.
    """

    def __init__(self):
        self._nodes: list[TransformState] = []

    def create(
        self,
        position: Vector3 | None = None,
        rotation: Quaternion | None = None,
        name: str = "object",
    ) -> Transform:
        """Add a new root transform.

        :param position: World position, origin if omitted
        :param rotation: World rotation, identity if omitted
        :param name: Label
        :returns: Handle to the new transform
        :raises InvalidArgumentError: If position/rotation have the wrong type
        """
        if position is None:
            position = Vector3.zero
        elif not isinstance(position, Vector3):
            raise InvalidArgumentError("position must be a Vector3.")
        if rotation is None:
            rotation = Quaternion.identity
        elif not isinstance(rotation, Quaternion):
            raise InvalidArgumentError("rotation must be a Quaternion.")

        self._nodes.append(
            TransformState(
                name=name,
                position=position,
                rotation=rotation,
                local_position=position,
                local_rotation=rotation,
            )
        )
        logger.debug("[Hierarchy] Created transform %d (%s)", len(self._nodes) - 1, name)
        return Transform(self, len(self._nodes) - 1)

    def state(self, index: int) -> TransformState:
        """State of the node at ``index``."""
        return self._nodes[index]

    def ancestors(self, index: int) -> Iterator[int]:
        """Indices of the node's ancestors, nearest first.

        :raises HierarchyError: If the parent chain loops
        """
        steps = 0
        parent = self._nodes[index].parent
        while parent is not None:
            yield parent
            steps += 1
            if steps > len(self._nodes):
                raise HierarchyError(f"Parent chain of transform {index} contains a cycle")
            parent = self._nodes[parent].parent

    def descendants(self, index: int) -> Iterator[int]:
        """Indices of the node's descendants, depth first, parents before children."""
        stack = list(reversed(self._nodes[index].children))
        while stack:
            current = stack.pop()
            yield current
            stack.extend(reversed(self._nodes[current].children))

    def roots(self) -> tuple[Transform, ...]:
        """Transforms without a parent, in creation order."""
        return tuple(
            Transform(self, i) for i, node in enumerate(self._nodes) if node.parent is None
        )

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Transform]:
        return (Transform(self, i) for i in range(len(self._nodes)))

    def __repr__(self) -> str:
        return f"Hierarchy(transforms={len(self._nodes)})"
