"""Scalar helpers shared by the value types."""

from __future__ import annotations

from collections.abc import Iterable
from numbers import Real

import numpy as np


def is_number(value: object) -> bool:
    """Check whether ``value`` is a real number (booleans excluded).

    :param value: Object to test
    :returns: True for ints, floats and numpy real scalars
    """
    return isinstance(value, Real) and not isinstance(value, bool | np.bool_)


def is_integer(value: object) -> bool:
    """Check whether ``value`` is an integer (booleans excluded)."""
    return isinstance(value, int | np.integer) and not isinstance(value, bool)


def is_number_sequence(values: Iterable) -> bool:
    """Check whether every entry of ``values`` is a real number.

    :param values: Sequence or numpy array
    :returns: True if all entries are numbers
    """
    if isinstance(values, np.ndarray):
        return values.ndim == 1 and np.issubdtype(values.dtype, np.number) and not np.issubdtype(
            values.dtype, np.complexfloating
        )
    return all(is_number(v) for v in values)


def normalize_degrees(angle: float) -> float:
    """Wrap an angle in degrees into ``[0, 360)``.

    :param angle: Angle in degrees
    :returns: Equivalent angle in ``[0, 360)``
    """
    wrapped = angle % 360.0
    # -1e-17 % 360.0 rounds to 360.0
    if wrapped >= 360.0:
        return 0.0
    return wrapped
