"""Unified math3d configuration.

This module provides a top-level configuration dataclass that contains
the tolerance registry as a sub-attribute.
"""

from __future__ import annotations

from dataclasses import dataclass

from math3d.config.tolerance import ToleranceConfig, ToleranceSpec


@dataclass(frozen=True)
class Math3DConfig:
    """Top-level configuration.

    Provides hierarchical access to all tolerance specifications:
        CONFIG.tolerance.equality
        CONFIG.tolerance.gimbal_pole

    Attributes:
        tolerance: Floating point comparison tolerances
    """

    tolerance: ToleranceConfig = ToleranceConfig()

    def get_all_specs(self) -> dict[str, dict[str, ToleranceSpec]]:
        """Get all specs organized by section.

        :return: Nested dictionary of all specifications
        """
        return {"tolerance": self.tolerance.get_all_specs()}


# Main singleton instance
CONFIG = Math3DConfig()

TOLERANCE_CONFIG = CONFIG.tolerance
