"""Error kinds raised by :mod:`c45py`.

All of them derive from ``ValueError`` so code that already guards estimator
calls with ``except ValueError`` keeps working.
"""
from __future__ import annotations


class AttributeParseError(ValueError):
    """A continuous attribute holds a value that is not a finite number."""


class UnknownTargetError(ValueError):
    """An instance label is not part of the declared target-value universe."""


class EmptyAttributeListError(ValueError):
    """No candidate attributes were given to choose a split from."""


__all__ = ["AttributeParseError", "UnknownTargetError", "EmptyAttributeListError"]
