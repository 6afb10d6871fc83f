"""
c45py.criterion
===============

Split selection for C4.5-style trees.  Given labeled instances and candidate
attributes, these functions find the binary threshold split of a continuous
attribute that maximises the gain ratio

    gain_ratio = (H(S) - H(S | A <= t)) / split_info(S, A, t)

and expose the leaf helpers a recursive tree builder needs to decide when to
stop splitting.

Every function is pure: results are returned, never stored on the attributes
or in module state, so independent attributes and subtrees can be scored
concurrently.  The target-value universe is an explicit ``target_values``
argument; when omitted it is taken from the labels present in the instances,
which yields the same entropy since absent labels contribute nothing.
"""
from __future__ import annotations
from collections import Counter
from typing import List, NamedTuple, Optional, Sequence, Tuple

import numpy as np

from .errors import EmptyAttributeListError, UnknownTargetError
from .instances import Attribute, Instance, attribute_value


class ThresholdSplit(NamedTuple):
    """Best threshold found for one attribute."""
    threshold: Optional[float]
    score: float
    gain: float


class SplitDecision(NamedTuple):
    """Winning attribute of :func:`best_attribute` and its split point."""
    attribute: Attribute
    threshold: Optional[float]
    score: float


# -----------------------------------------------------------------------------
# Helpers
# -----------------------------------------------------------------------------
def log2(x: float) -> float:
    """Base-2 logarithm with ``log2(0) == 0``."""
    return 0.0 if x == 0.0 else float(np.log2(x))


def _label_counts(instances: Sequence[Instance], target_values=None) -> np.ndarray:
    counts = Counter(inst.target_value for inst in instances)
    if target_values is None:
        universe = sorted(counts)
    else:
        universe = list(dict.fromkeys(str(t) for t in target_values))
        unknown = set(counts) - set(universe)
        if unknown:
            raise UnknownTargetError(
                f"target values {sorted(unknown)} are not in the declared universe")
    return np.array([counts.get(label, 0) for label in universe], dtype=float)


def _partition_weights(instances, attribute, threshold, target_values=None) -> Tuple[float, float]:
    """Conditional entropy and split information of one threshold split."""
    le, gt = partition_by_threshold(instances, attribute, threshold)
    n = float(len(instances))
    p_le, p_gt = len(le) / n, len(gt) / n
    cond = p_le * entropy(le, target_values) + p_gt * entropy(gt, target_values)
    split_info = -(p_le * log2(p_le)) - (p_gt * log2(p_gt))
    return cond, split_info


def _split_scores(instances, attribute, threshold, target_values=None,
                  parent_entropy=None) -> Tuple[float, float]:
    """``(gain, gain_ratio)`` of one threshold split, partitioning once."""
    if len(instances) == 0:
        return 0.0, 0.0
    if parent_entropy is None:
        parent_entropy = entropy(instances, target_values)
    cond, split_info = _partition_weights(instances, attribute, threshold, target_values)
    g = parent_entropy - cond
    return g, (g / split_info if split_info > 0 else 0.0)


# -----------------------------------------------------------------------------
# Entropy and partitioning
# -----------------------------------------------------------------------------
def entropy(instances: Sequence[Instance], target_values=None) -> float:
    """Shannon entropy (bits) of the label distribution of ``instances``.

    Returns 0.0 for an empty sequence.
    """
    if len(instances) == 0:
        return 0.0
    p = _label_counts(instances, target_values) / len(instances)
    p = p[p > 0]
    return float(-np.sum(p * np.log2(p)))


def partition_by_threshold(instances: Sequence[Instance], attribute: Attribute,
                           threshold: float) -> Tuple[List[Instance], List[Instance]]:
    """Split ``instances`` into values ``<= threshold`` and ``> threshold``.

    Both groups keep the input order.

    Raises
    ------
    ValueError
        If ``attribute`` is not continuous.
    AttributeParseError
        If an instance's value for ``attribute`` is not a finite number.
    """
    if not attribute.is_continuous:
        raise ValueError(f"attribute '{attribute.name}' is not continuous")
    less_equal, greater = [], []
    for inst in instances:
        if attribute_value(inst, attribute) <= threshold:
            less_equal.append(inst)
        else:
            greater.append(inst)
    return less_equal, greater


# -----------------------------------------------------------------------------
# Split evaluation
# -----------------------------------------------------------------------------
def conditional_entropy(instances, attribute: Attribute, threshold: float,
                        target_values=None) -> float:
    """Size-weighted entropy of the two sides of the threshold split."""
    if len(instances) == 0:
        return 0.0
    return _partition_weights(instances, attribute, threshold, target_values)[0]


def split_information(instances, attribute: Attribute, threshold: float) -> float:
    """Entropy of the split itself; 0.0 when one side is empty."""
    if len(instances) == 0:
        return 0.0
    return _partition_weights(instances, attribute, threshold)[1]


def gain(instances, attribute: Attribute, threshold: float, target_values=None) -> float:
    return _split_scores(instances, attribute, threshold, target_values)[0]


def gain_ratio(instances, attribute: Attribute, threshold: float, target_values=None) -> float:
    """Information gain normalised by split information.

    A split that leaves one side empty has no split information; its gain
    ratio is defined as 0.0.
    """
    return _split_scores(instances, attribute, threshold, target_values)[1]


# -----------------------------------------------------------------------------
# Threshold search
# -----------------------------------------------------------------------------
def candidate_thresholds(instances, attribute: Attribute) -> List[float]:
    """Midpoints between consecutive distinct sorted values of ``attribute``."""
    if len(instances) == 0:
        return []
    v = np.unique(np.array([attribute_value(x, attribute) for x in instances], dtype=float))
    return [float(t) for t in (v[:-1] + v[1:]) / 2.0]


def best_threshold_for(instances, attribute: Attribute, target_values=None) -> ThresholdSplit:
    """Find the candidate threshold with the highest gain ratio.

    Non-continuous attributes, empty inputs and attributes with fewer than two
    distinct values score 0.0 with no threshold.  Ties keep the first (lowest)
    candidate, and a threshold is only reported when its score is above zero.
    """
    best = ThresholdSplit(None, 0.0, 0.0)
    if not attribute.is_continuous or len(instances) == 0:
        return best

    parent = entropy(instances, target_values)
    for thr in candidate_thresholds(instances, attribute):
        g, gr = _split_scores(instances, attribute, thr, target_values, parent)
        if gr > best.score:
            best = ThresholdSplit(thr, float(gr), float(g))
    return best


# -----------------------------------------------------------------------------
# Attribute selection
# -----------------------------------------------------------------------------
def best_attribute(instances, attributes: Sequence[Attribute], target_values=None) -> SplitDecision:
    """Score every attribute and return the best one with its threshold.

    Attributes are scanned left to right; a later attribute replaces the
    current best when its score is greater than or equal to it.

    Raises
    ------
    EmptyAttributeListError
        If ``attributes`` is empty.
    """
    if len(attributes) == 0:
        raise EmptyAttributeListError("cannot select a split from an empty attribute list")
    best = None
    for attr in attributes:
        split = best_threshold_for(instances, attr, target_values)
        if best is None or split.score >= best.score:
            best = SplitDecision(attr, split.threshold, split.score)
    return best


# -----------------------------------------------------------------------------
# Leaf helpers
# -----------------------------------------------------------------------------
def majority_target(instances) -> str:
    """Most frequent label; ties go to the lexicographically smallest label.

    Returns ``""`` for an empty sequence.
    """
    counts = Counter(inst.target_value for inst in instances)
    if not counts:
        return ""
    return max(sorted(counts), key=counts.get)


def unanimous_target(instances) -> bool:
    """True iff all instances share exactly one label."""
    return len({inst.target_value for inst in instances}) == 1


__all__ = [
    "ThresholdSplit",
    "SplitDecision",
    "log2",
    "entropy",
    "partition_by_threshold",
    "conditional_entropy",
    "split_information",
    "gain",
    "gain_ratio",
    "candidate_thresholds",
    "best_threshold_for",
    "best_attribute",
    "majority_target",
    "unanimous_target",
]
