"""
c45py.instances
===============

Plain records exchanged with the split criterion: :class:`Attribute` names a
feature column and :class:`Instance` holds one labeled training example.
Feature values are kept as text and parsed to ``float`` only when a continuous
attribute is evaluated.

The module also contains small adapters that turn numpy arrays or pandas
DataFrames into these records.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, List, Mapping, Sequence, Tuple
import math

import numpy as np
import pandas as pd

from .errors import AttributeParseError


# -----------------------------------------------------------------------------
# Records
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class Attribute:
    """One feature column.

    Parameters
    ----------
    name : str
        Key into :attr:`Instance.attribute_values`.
    is_continuous : bool, default=True
        Only continuous attributes are split by threshold; the others always
        score zero.
    """
    name: str
    is_continuous: bool = True


@dataclass(frozen=True)
class Instance:
    """One labeled training example.

    Parameters
    ----------
    attribute_values : Mapping[str, str]
        Raw feature values keyed by attribute name.  The mapping is copied and
        frozen on construction.
    target_value : str
        Class label.
    """
    attribute_values: Mapping[str, str] = field(default_factory=dict)
    target_value: str = ""

    def __post_init__(self):
        values = {str(k): str(v) for k, v in dict(self.attribute_values).items()}
        object.__setattr__(self, "attribute_values", MappingProxyType(values))
        object.__setattr__(self, "target_value", str(self.target_value))


# -----------------------------------------------------------------------------
# Value access
# -----------------------------------------------------------------------------
def attribute_value(instance: Instance, attribute: Attribute) -> float:
    """Parse ``instance``'s value for ``attribute`` as a finite float.

    Raises
    ------
    AttributeParseError
        If the value is missing, not numeric, or NaN.
    """
    try:
        raw = instance.attribute_values[attribute.name]
    except KeyError as exc:
        raise AttributeParseError(
            f"instance has no value for attribute '{attribute.name}'") from exc
    try:
        value = float(raw)
    except ValueError as exc:
        raise AttributeParseError(
            f"value {raw!r} of attribute '{attribute.name}' is not numeric") from exc
    if math.isnan(value):
        raise AttributeParseError(
            f"value {raw!r} of attribute '{attribute.name}' is missing (NaN)")
    return value


# -----------------------------------------------------------------------------
# Dataset adapters
# -----------------------------------------------------------------------------
def make_attributes(feature_names: Sequence[str],
                    categorical_features: Iterable[int | str] | None = None) -> List[Attribute]:
    """Build one :class:`Attribute` per feature name.

    ``categorical_features`` holds indices or names of the non-continuous
    columns; every other column is continuous.
    """
    names = [str(n) for n in feature_names]
    cats = set()
    for c in (categorical_features or []):
        if isinstance(c, str):
            if c not in names:
                raise ValueError(f"unknown categorical feature '{c}'")
            cats.add(names.index(c))
        else:
            cats.add(int(c))
    return [Attribute(n, is_continuous=(i not in cats)) for i, n in enumerate(names)]


def instances_from_arrays(X, y, feature_names: Sequence[str]) -> List[Instance]:
    """Convert an ``(n_samples, n_features)`` array and its labels to instances."""
    X = np.asarray(X, dtype=object)
    y = np.asarray(y)
    if X.ndim != 2:
        raise ValueError("X must be a 2-D array")
    if len(X) != len(y):
        raise ValueError("X and y must have the same number of rows")
    if X.shape[1] != len(feature_names):
        raise ValueError("feature_names length must match X.shape[1]")
    names = [str(n) for n in feature_names]
    return [Instance(dict(zip(names, row)), label) for row, label in zip(X, y)]


def instances_from_frame(df: pd.DataFrame, target: str) -> Tuple[List[Instance], List[Attribute]]:
    """Convert a DataFrame into instances plus its attribute schema.

    Numeric columns become continuous attributes; all other columns are
    declared non-continuous.  ``target`` names the label column.
    """
    if target not in df.columns:
        raise ValueError(f"target column '{target}' not found")
    features = [c for c in df.columns if c != target]
    attributes = [Attribute(str(c), is_continuous=(pd.api.types.is_numeric_dtype(df[c])
                                                  and not pd.api.types.is_bool_dtype(df[c])))
                  for c in features]
    instances = instances_from_arrays(df[features].to_numpy(dtype=object),
                                      df[target].to_numpy(), [a.name for a in attributes])
    return instances, attributes


__all__ = [
    "Attribute",
    "Instance",
    "attribute_value",
    "make_attributes",
    "instances_from_arrays",
    "instances_from_frame",
]
