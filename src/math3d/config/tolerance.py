"""Tolerance specifications for floating point comparisons.

This module defines the ToleranceSpec dataclass and the registry of
tolerances used by equality checks, gimbal-lock detection and angle-axis
extraction.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class ToleranceSpec:
    """Specification for a floating point tolerance.

    Attributes:
        name: Tolerance name (e.g., "equality", "gimbal_pole")
        epsilon: Strict upper bound on the absolute difference
        description: Human-readable description
    """

    name: str
    epsilon: float
    description: str = ""

    def is_close(self, a: float, b: float) -> bool:
        """Check whether two scalars differ by less than epsilon.

        :param a: First value
        :param b: Second value
        :returns: True if ``|a - b| < epsilon``
        """
        return abs(a - b) < self.epsilon

    def all_close(self, a: np.ndarray, b: np.ndarray) -> bool:
        """Componentwise :meth:`is_close` over two arrays of the same shape.

        :param a: First array
        :param b: Second array
        :returns: True if every component pair is close
        """
        return bool(np.all(np.abs(np.asarray(a) - np.asarray(b)) < self.epsilon))

    def __repr__(self) -> str:
        return f"ToleranceSpec({self.name}, epsilon={self.epsilon})"


@dataclass(frozen=True)
class ToleranceConfig:
    """Tolerances shared by every value type and the transform hierarchy."""

    equality: ToleranceSpec = ToleranceSpec(
        name="equality",
        epsilon=1e-13,
        description="Componentwise equality of vectors, quaternions and matrices",
    )

    gimbal_pole: ToleranceSpec = ToleranceSpec(
        name="gimbal_pole",
        epsilon=1e-13,
        description="Distance of x*w - y*z from +/-0.5 treated as a gimbal-lock pole",
    )

    angle_axis: ToleranceSpec = ToleranceSpec(
        name="angle_axis",
        # Smallest normal float64
        epsilon=float(np.finfo(np.float64).tiny),
        description="Squared norm of the vector part below which a rotation has no defined axis",
    )

    def get_spec(self, name: str) -> ToleranceSpec:
        """Get tolerance spec by name.

        :param name: Tolerance name
        :return: ToleranceSpec for the tolerance
        :raises AttributeError: If tolerance not found
        """
        return getattr(self, name)

    def get_all_specs(self) -> dict[str, ToleranceSpec]:
        """Get all tolerance specs as a dictionary.

        :return: Dictionary mapping tolerance names to specs
        """
        return {
            "equality": self.equality,
            "gimbal_pole": self.gimbal_pole,
            "angle_axis": self.angle_axis,
        }
