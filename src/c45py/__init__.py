# c45py/__init__.py
"""
c45py: C4.5 gain-ratio split selection in pure Python (scikit-learn style).

Exports:
    - C45Classifier
    - Attribute, Instance
    - best_attribute, partition_by_threshold, majority_target, unanimous_target
"""
from .instances import Attribute, Instance
from .criterion import (
    best_attribute,
    best_threshold_for,
    majority_target,
    partition_by_threshold,
    unanimous_target,
)
from .errors import AttributeParseError, EmptyAttributeListError, UnknownTargetError
from .tree import C45Classifier

__all__ = [
    "C45Classifier",
    "Attribute",
    "Instance",
    "best_attribute",
    "best_threshold_for",
    "majority_target",
    "partition_by_threshold",
    "unanimous_target",
    "AttributeParseError",
    "EmptyAttributeListError",
    "UnknownTargetError",
]
__version__ = "0.1.0"
