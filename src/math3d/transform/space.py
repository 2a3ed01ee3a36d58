"""Coordinate spaces for transform operations."""

from __future__ import annotations

from enum import Enum


class Space(Enum):
    """The coordinate system in which translate/rotate operate."""

    SELF = 0  # relative to the transform's own axes
    WORLD = 1  # relative to the world axes
