# -*- coding: utf-8 -*-
"""
c45py.tree
==========

This module implements a C4.5‑style binary decision tree classifier on top of
the split criterion in :mod:`c45py.criterion`.  Continuous features are split
by a single threshold chosen by gain ratio; features declared categorical are
kept in the schema but never split on.  The estimator follows scikit‑learn
conventions (``fit``/``predict``/``predict_proba``/``score``).

Every build step uses exactly four criterion operations: pick a split
(:func:`best_attribute`), partition the children
(:func:`partition_by_threshold`) and decide leaf versus recursion
(:func:`majority_target`, :func:`unanimous_target`).

The module also contains the ``TreeNode`` class which holds the data
structure for each node in the tree (internal or leaf).
"""

from __future__ import annotations
import logging
from collections import Counter

import numpy as np
from sklearn.base import BaseEstimator, ClassifierMixin

from .criterion import (
    best_attribute,
    majority_target,
    partition_by_threshold,
    unanimous_target,
)
from .instances import instances_from_arrays, make_attributes

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Node
# -----------------------------------------------------------------------------
class TreeNode:
    """Internal representation of a single node in a decision tree.

    Attributes
    ----------
    is_leaf : bool
        True if this node is terminal.
    feature_index : int or None
        Index of the feature used for the split at this node; ``None`` for
        leaves.
    threshold : float or None
        Split point; instances with value ``<= threshold`` go left.
    children : dict
        Mapping ``{"left": TreeNode, "right": TreeNode}`` for internal nodes.
    predicted_class : str or None
        Majority label (text form) of the training instances at this node.
    class_distribution : dict or None
        Dictionary mapping labels (text form) to counts within this node.
    """

    def __init__(self, *, is_leaf: bool = False):
        self.is_leaf: bool = is_leaf
        self.feature_index: int | None = None
        self.threshold: float | None = None
        self.children: dict = {}
        self.predicted_class: str | None = None
        self.class_distribution: dict | None = None


# -----------------------------------------------------------------------------
# Classifier
# -----------------------------------------------------------------------------
class C45Classifier(ClassifierMixin, BaseEstimator):
    """
    Binary decision tree classifier using Quinlan's gain ratio criterion.

    Parameters
    ----------
    min_samples_split : int, default=2
        Minimum number of training samples required to attempt a split.
    max_depth : int or None, default=None
        Maximum depth of the tree.  If ``None`` the depth is unbounded.
    feature_names : list[str] or None, default=None
        Optional feature names.  Defaults to ``f0, f1, ...``.  Required when
        ``categorical_features`` are given by name.
    categorical_features : list[int|str] or None, default=None
        Indices or names of non‑continuous features.  They are part of the
        schema but always score zero, so the tree never splits on them.
    verbose : int, default=0
        When positive, node decisions are logged at DEBUG level and a fit
        summary at INFO level through the ``c45py.tree`` logger.

    Notes
    -----
    Labels are compared in their text form during training; ``predict``
    returns the original label objects from ``classes_``.
    """

    def __init__(
        self,
        *,
        min_samples_split: int = 2,
        max_depth: int | None = None,
        feature_names: list[str] | None = None,
        categorical_features: list[int | str] | None = None,
        verbose: int = 0,
    ):
        self.min_samples_split = min_samples_split
        self.max_depth = max_depth
        self.feature_names = feature_names
        self.categorical_features = categorical_features
        self.verbose = verbose

    def fit(self, X, y, feature_names=None):
        X = np.asarray(X, dtype=object)
        y = np.asarray(y)
        if X.ndim != 2:
            raise ValueError("X must be a 2-D array")
        if len(X) != len(y):
            raise ValueError("X and y must have the same number of rows")
        n_features = X.shape[1]
        names = feature_names if feature_names is not None else self.feature_names
        if names is not None:
            if len(names) != n_features:
                raise ValueError("feature_names length must match X.shape[1]")
            self.feature_names_ = [str(n) for n in names]
        else:
            self.feature_names_ = [f"f{i}" for i in range(n_features)]
        if any(isinstance(c, str) for c in (self.categorical_features or [])) \
                and names is None:
            raise ValueError("feature_names must be provided when using categorical_features by name")

        self.n_features_in_ = n_features
        self.classes_ = np.unique(y)
        self._label_map = {str(c): c for c in self.classes_}
        self.target_values_ = list(self._label_map)
        self.attributes_ = make_attributes(self.feature_names_, self.categorical_features)
        self._index = {a.name: i for i, a in enumerate(self.attributes_)}

        instances = instances_from_arrays(X, y, self.feature_names_)
        self.tree_ = self._build_tree(instances, depth=0)
        if self.verbose:
            logger.info("fitted tree on %d samples: depth=%d, leaves=%d",
                        len(instances), self.get_depth(), self.get_n_leaves())
        return self

    def predict(self, X):
        """
        Predict class labels for the provided samples.

        Parameters
        ----------
        X : array-like of shape (n_samples, n_features)
            Input samples.  Split features must be numeric.

        Returns
        -------
        ndarray of shape (n_samples,)
            Predicted class labels.

        Raises
        ------
        ValueError
            If the estimator has not been fitted.
        """
        self._check_fitted()
        X = np.asarray(X, dtype=object)
        return np.array([self._label_map[self._leaf_for(x).predicted_class] for x in X])

    def predict_proba(self, X):
        """
        Predict class probabilities from the class distribution of each leaf.

        Returns
        -------
        ndarray of shape (n_samples, n_classes)
            Columns follow the order of ``classes_``.
        """
        self._check_fitted()
        X = np.asarray(X, dtype=object)
        out = np.zeros((len(X), len(self.classes_)), dtype=float)
        for r, x in enumerate(X):
            dist = self._leaf_for(x).class_distribution
            total = float(sum(dist.values()))
            for k, label in enumerate(self.target_values_):
                out[r, k] = dist.get(label, 0) / total if total > 0 else 0.0
        return out

    def get_depth(self) -> int:
        self._check_fitted()
        return self._depth(self.tree_)

    def get_n_leaves(self) -> int:
        self._check_fitted()
        return self._n_leaves(self.tree_)

    # ------------------------------------------------------------------
    # Tree construction (gain ratio)
    # ------------------------------------------------------------------
    def _build_tree(self, instances, depth: int = 0) -> TreeNode:
        """
        Recursively build a decision tree from ``instances``.

        A leaf is returned when there are too few instances, when they all
        share one label, when ``max_depth`` is reached, or when no attribute
        offers a split with positive gain ratio.
        """
        indent = "  " * depth
        if len(instances) < self.min_samples_split or unanimous_target(instances):
            return self._create_leaf(instances, depth, "pure or too small")
        if self.max_depth is not None and depth >= int(self.max_depth):
            return self._create_leaf(instances, depth, "max_depth reached")

        decision = best_attribute(instances, self.attributes_, self.target_values_)
        if decision.threshold is None or decision.score <= 0:
            return self._create_leaf(instances, depth, "no informative split")

        left, right = partition_by_threshold(instances, decision.attribute, decision.threshold)
        if self.verbose:
            logger.debug("%ssplit on '%s' <= %g (gain ratio %.4f): %d / %d",
                         indent, decision.attribute.name, decision.threshold,
                         decision.score, len(left), len(right))
        node = TreeNode(is_leaf=False)
        node.feature_index = self._index[decision.attribute.name]
        node.threshold = decision.threshold
        node.class_distribution = dict(Counter(i.target_value for i in instances))
        node.predicted_class = majority_target(instances)
        node.children["left"] = self._build_tree(left, depth + 1)
        node.children["right"] = self._build_tree(right, depth + 1)
        return node

    def _create_leaf(self, instances, depth: int, reason: str) -> TreeNode:
        leaf = TreeNode(is_leaf=True)
        leaf.class_distribution = dict(Counter(i.target_value for i in instances))
        leaf.predicted_class = majority_target(instances)
        if self.verbose:
            logger.debug("%sleaf '%s' (%s, n=%d)", "  " * depth,
                         leaf.predicted_class, reason, len(instances))
        return leaf

    # ------------------------------------------------------------------
    # Traversal
    # ------------------------------------------------------------------
    def _check_fitted(self):
        if getattr(self, "tree_", None) is None:
            raise ValueError("Estimator not fitted. Call fit(...) first.")

    def _leaf_for(self, x) -> TreeNode:
        node = self.tree_
        while not node.is_leaf:
            if float(x[node.feature_index]) <= node.threshold:
                node = node.children["left"]
            else:
                node = node.children["right"]
        return node

    def _depth(self, node: TreeNode) -> int:
        if node.is_leaf:
            return 0
        return 1 + max(self._depth(ch) for ch in node.children.values())

    def _n_leaves(self, node: TreeNode) -> int:
        if node.is_leaf:
            return 1
        return sum(self._n_leaves(ch) for ch in node.children.values())
