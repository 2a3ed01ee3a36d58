"""Hierarchical transforms.

A :class:`Transform` is a handle onto one node of a
:class:`~math3d.transform.Hierarchy`. It exposes the node's world
(``position``, ``rotation``) and local (``local_position``,
``local_rotation``) pose and keeps them consistent:

- ``set_position`` / ``set_rotation`` write world state, re-derive the local
  state from the parent and recompute the world state of every descendant.
- ``set_local_position`` / ``set_local_rotation`` write local state and
  re-derive the world state of this node only.
- ``set_parent`` keeps the world pose and re-derives the local pose under the
  new parent.

Example:
    >>> from math3d import Hierarchy, Quaternion, Space, Vector3
    >>> scene = Hierarchy()
    >>> t = scene.create(Vector3.right, Quaternion.euler(0, 0, 90))
    >>> t.right.equals(Vector3.up)
    True
    >>> t.translate(Vector3.left, Space.WORLD).position.equals(Vector3.zero)
    True
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import TYPE_CHECKING

from math3d.errors import HierarchyError, InvalidArgumentError
from math3d.geometry import Matrix4x4, Quaternion, Vector3
from math3d.shared.numeric import is_number
from math3d.transform.space import Space

if TYPE_CHECKING:
    from math3d.transform.hierarchy import Hierarchy, TransformState

logger = logging.getLogger(__name__)


class Transform:
    """Position and rotation of an object, optionally relative to a parent.

    Create transforms with :meth:`Hierarchy.create`.

    :param hierarchy: Arena owning the node
    :param index: Index of the node in the arena
    """

    __slots__ = ("_hierarchy", "_index")

    def __init__(self, hierarchy: Hierarchy, index: int):
        self._hierarchy = hierarchy
        self._index = index

    @property
    def _state(self) -> TransformState:
        return self._hierarchy.state(self._index)

    def _parent_state(self) -> TransformState | None:
        parent = self._state.parent
        return None if parent is None else self._hierarchy.state(parent)

    def _require_linkable(self, other: object, operation: str) -> Transform:
        if not isinstance(other, Transform):
            raise InvalidArgumentError(f"{operation}: the argument must be a Transform.")
        if other._hierarchy is not self._hierarchy:
            raise HierarchyError(f"{operation}: transforms belong to different hierarchies.")
        return other

    # ------------------------------------------------------------------
    # Local <-> world derivation
    # ------------------------------------------------------------------

    def _local_position_from_world(self) -> Vector3:
        state = self._state
        parent = self._parent_state()
        if parent is None:
            return state.position
        return parent.rotation.inverse().mul_vector3(state.position.sub(parent.position))

    def _world_position_from_local(self) -> Vector3:
        state = self._state
        parent = self._parent_state()
        if parent is None:
            return state.local_position
        return parent.position.add(parent.rotation.mul_vector3(state.local_position))

    def _local_rotation_from_world(self) -> Quaternion:
        state = self._state
        parent = self._parent_state()
        if parent is None:
            return state.rotation
        return parent.rotation.inverse().mul(state.rotation)

    def _world_rotation_from_local(self) -> Quaternion:
        state = self._state
        parent = self._parent_state()
        if parent is None:
            return state.local_rotation
        return parent.rotation.mul(state.local_rotation)

    def _adjust_children(self) -> None:
        """Recompute the world pose of every descendant from its local pose."""
        for index in self._hierarchy.descendants(self._index):
            child = Transform(self._hierarchy, index)
            state = child._state
            state.rotation = child._world_rotation_from_local()
            state.position = child._world_position_from_local()

    def _commit_local(self) -> None:
        """Re-derive the world pose from the local pose and cascade."""
        state = self._state
        state.rotation = self._world_rotation_from_local()
        state.position = self._world_position_from_local()
        self._adjust_children()

    # ------------------------------------------------------------------
    # Identity
    # ------------------------------------------------------------------

    @property
    def hierarchy(self) -> Hierarchy:
        return self._hierarchy

    @property
    def index(self) -> int:
        return self._index

    @property
    def name(self) -> str:
        return self._state.name

    @name.setter
    def name(self, value: str) -> None:
        self._state.name = value

    # ------------------------------------------------------------------
    # Pose
    # ------------------------------------------------------------------

    @property
    def position(self) -> Vector3:
        """Position in world space."""
        return self._state.position

    @property
    def rotation(self) -> Quaternion:
        """Rotation in world space."""
        return self._state.rotation

    @property
    def local_position(self) -> Vector3:
        """Position relative to the parent."""
        return self._state.local_position

    @property
    def local_rotation(self) -> Quaternion:
        """Rotation relative to the parent."""
        return self._state.local_rotation

    def set_position(self, position: Vector3) -> None:
        """Set the world position; descendants follow."""
        if not isinstance(position, Vector3):
            raise InvalidArgumentError("position must be a Vector3.")
        state = self._state
        state.position = position
        state.local_position = self._local_position_from_world()
        self._adjust_children()

    def set_rotation(self, rotation: Quaternion) -> None:
        """Set the world rotation; descendants follow."""
        if not isinstance(rotation, Quaternion):
            raise InvalidArgumentError("rotation must be a Quaternion.")
        state = self._state
        state.rotation = rotation
        state.local_rotation = self._local_rotation_from_world()
        self._adjust_children()

    def set_local_position(self, local_position: Vector3) -> None:
        """Set the position relative to the parent.

        Only this transform's world position is recomputed; descendants are
        updated by the next world-space write on this transform.
        """
        if not isinstance(local_position, Vector3):
            raise InvalidArgumentError("local_position must be a Vector3.")
        state = self._state
        state.local_position = local_position
        state.position = self._world_position_from_local()

    def set_local_rotation(self, local_rotation: Quaternion) -> None:
        """Set the rotation relative to the parent.

        Only this transform's world rotation is recomputed; descendants are
        updated by the next world-space write on this transform.
        """
        if not isinstance(local_rotation, Quaternion):
            raise InvalidArgumentError("local_rotation must be a Quaternion.")
        state = self._state
        state.local_rotation = local_rotation
        state.rotation = self._world_rotation_from_local()

    # ------------------------------------------------------------------
    # Hierarchy
    # ------------------------------------------------------------------

    @property
    def parent(self) -> Transform | None:
        parent = self._state.parent
        return None if parent is None else Transform(self._hierarchy, parent)

    @property
    def children(self) -> tuple[Transform, ...]:
        """Direct children in the order they were attached."""
        return tuple(Transform(self._hierarchy, i) for i in self._state.children)

    @property
    def child_count(self) -> int:
        return len(self._state.children)

    @property
    def root(self) -> Transform:
        """The topmost ancestor, or this transform if it has no parent."""
        root = self._index
        for root in self._hierarchy.ancestors(self._index):
            pass
        return Transform(self._hierarchy, root)

    def iter_descendants(self) -> Iterator[Transform]:
        """All descendants, depth first."""
        return (Transform(self._hierarchy, i) for i in self._hierarchy.descendants(self._index))

    def is_child_of(self, other: Transform) -> bool:
        """True if ``other`` is this transform or one of its ancestors."""
        other = self._require_linkable(other, "is_child_of")
        if other._index == self._index:
            return True
        return other._index in self._hierarchy.ancestors(self._index)

    def set_parent(self, parent: Transform | None) -> None:
        """Attach to ``parent`` (or detach with None), keeping the world pose.

        :raises HierarchyError: If ``parent`` is this transform or one of its
            descendants, or lives in another hierarchy
        """
        state = self._state
        new_index = None
        if parent is not None:
            parent = self._require_linkable(parent, "set_parent")
            if parent.is_child_of(self):
                raise HierarchyError(
                    f"Cannot parent '{state.name}' to '{parent.name}': it would create a cycle"
                )
            new_index = parent._index

        old_index = state.parent
        if new_index == old_index:
            return

        if old_index is not None:
            self._hierarchy.state(old_index).children.remove(self._index)

        state.parent = new_index
        if new_index is None:
            state.local_rotation = state.rotation
            state.local_position = state.position
            logger.debug("[Transform] Detached '%s'", state.name)
        else:
            state.local_rotation = self._local_rotation_from_world()
            state.local_position = self._local_position_from_world()
            self._hierarchy.state(new_index).children.append(self._index)
            logger.debug("[Transform] Attached '%s' to '%s'", state.name, parent.name)

    def add_child(self, child: Transform) -> None:
        """Attach ``child`` to this transform, keeping its world pose."""
        child = self._require_linkable(child, "add_child")
        child.set_parent(self)

    def remove_child(self, child: Transform) -> None:
        """Detach ``child``; its local pose becomes its world pose.

        Removing a transform that is not a child of this one does nothing.
        """
        child = self._require_linkable(child, "remove_child")
        if child._state.parent != self._index:
            logger.debug(
                "[Transform] '%s' is not a child of '%s', nothing to remove", child.name, self.name
            )
            return
        child.set_parent(None)

    # ------------------------------------------------------------------
    # Movement
    # ------------------------------------------------------------------

    def translate(self, translation: Vector3, relative_to: Space = Space.SELF) -> Transform:
        """Move by ``translation``.

        :param translation: Offset, along this transform's axes for
            ``Space.SELF`` or the world axes for ``Space.WORLD``
        :param relative_to: Coordinate space of ``translation``
        :returns: This transform
        """
        if not isinstance(translation, Vector3):
            raise InvalidArgumentError("translation must be a Vector3.")
        if not isinstance(relative_to, Space):
            raise InvalidArgumentError("relative_to must be a Space.")

        state = self._state
        if relative_to is Space.WORLD:
            self.set_position(state.position.add(translation))
        elif state.parent is None:
            self.set_position(state.position.add(state.rotation.mul_vector3(translation)))
        else:
            state.local_position = state.local_position.add(
                state.local_rotation.mul_vector3(translation)
            )
            self._commit_local()
        return self

    def rotate(self, x: float, y: float, z: float, relative_to: Space = Space.SELF) -> Transform:
        """Rotate by Euler angles in degrees (z, then x, then y).

        :param relative_to: ``Space.SELF`` rotates about this transform's
            axes, ``Space.WORLD`` about the world axes
        :returns: This transform
        """
        if not (is_number(x) and is_number(y) and is_number(z)):
            raise InvalidArgumentError("Euler angles must be numbers.")
        if not isinstance(relative_to, Space):
            raise InvalidArgumentError("relative_to must be a Space.")

        euler = Quaternion.euler(x, y, z)
        state = self._state
        if relative_to is Space.WORLD:
            self.set_rotation(euler.mul(state.rotation))
        elif state.parent is None:
            self.set_rotation(state.rotation.mul(euler))
        else:
            state.local_rotation = state.local_rotation.mul(euler)
            self._commit_local()
        return self

    # ------------------------------------------------------------------
    # Derived views
    # ------------------------------------------------------------------

    @property
    def forward(self) -> Vector3:
        return self._state.rotation.mul_vector3(Vector3.forward)

    @property
    def right(self) -> Vector3:
        return self._state.rotation.mul_vector3(Vector3.right)

    @property
    def up(self) -> Vector3:
        return self._state.rotation.mul_vector3(Vector3.up)

    @property
    def local_to_world_matrix(self) -> Matrix4x4:
        """Matrix taking points from this transform's space to world space."""
        state = self._state
        return Matrix4x4.local_to_world_matrix(state.position, state.rotation, Vector3.one)

    @property
    def world_to_local_matrix(self) -> Matrix4x4:
        """Matrix taking points from world space to this transform's space."""
        state = self._state
        return Matrix4x4.world_to_local_matrix(state.position, state.rotation, Vector3.one)

    def transform_position(self, position: Vector3) -> Vector3:
        """Convert a point from local space to world space."""
        if not isinstance(position, Vector3):
            raise InvalidArgumentError("position must be a Vector3.")
        return self.local_to_world_matrix.mul_vector3(position)

    def inverse_transform_position(self, position: Vector3) -> Vector3:
        """Convert a point from world space to local space."""
        if not isinstance(position, Vector3):
            raise InvalidArgumentError("position must be a Vector3.")
        return self.world_to_local_matrix.mul_vector3(position)

    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Transform):
            return NotImplemented
        return self._hierarchy is other._hierarchy and self._index == other._index

    def __hash__(self) -> int:
        return hash((id(self._hierarchy), self._index))

    def __repr__(self) -> str:
        state = self._state
        return (
            f"Transform(name={state.name!r}, position={state.position}, "
            f"rotation={state.rotation})"
        )
