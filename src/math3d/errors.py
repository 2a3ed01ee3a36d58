"""Error types raised by math3d.

Every error derives from :class:`Math3DError` and from the builtin exception
that best describes it, so callers may catch either ``TypeError`` /
``ValueError`` or the package-specific class.

Degenerate inputs are not errors: normalizing a zero vector returns it
unchanged and inverting a singular matrix returns ``None``.
"""

from __future__ import annotations


class Math3DError(Exception):
    """Base class for all math3d errors."""


class InvalidArgumentError(Math3DError, TypeError):
    """An operand has the wrong type or rank for the operation."""


class DimensionMismatchError(Math3DError, ValueError):
    """Vector or matrix shapes are incompatible for the operation."""


class HierarchyError(Math3DError, ValueError):
    """A transform hierarchy operation would corrupt the parent/child graph."""
