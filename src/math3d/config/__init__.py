"""Configuration for math3d.

Example:
    >>> from math3d.config import CONFIG
    >>> CONFIG.tolerance.equality.epsilon
    1e-13
"""

from math3d.config.config import CONFIG, TOLERANCE_CONFIG, Math3DConfig
from math3d.config.tolerance import ToleranceConfig, ToleranceSpec

__all__ = [
    "CONFIG",
    "TOLERANCE_CONFIG",
    "Math3DConfig",
    "ToleranceConfig",
    "ToleranceSpec",
]
