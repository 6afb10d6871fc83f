import logging

import numpy as np
import pytest
from sklearn.datasets import load_iris
from sklearn.model_selection import train_test_split

from c45py import C45Classifier


def _tiny_dataset():
    """Return a small classification dataset with a numeric and categorical feature."""
    X = np.array([[25, 'A'], [30, 'B'], [35, 'A'], [40, 'B']], dtype=object)
    y = np.array(['No', 'No', 'Yes', 'Yes'])
    return X, y


def test_classifier_splits_at_midpoint():
    X, y = _tiny_dataset()
    clf = C45Classifier(feature_names=['age', 'cat'], categorical_features=['cat'])
    clf.fit(X, y)
    assert not clf.tree_.is_leaf
    assert clf.tree_.feature_index == 0
    assert clf.tree_.threshold == 32.5
    assert clf.get_depth() == 1
    assert clf.get_n_leaves() == 2
    assert list(clf.predict(X)) == list(y)
    assert clf.predict([[31, 'B']])[0] == 'No'
    assert clf.predict([[33, 'B']])[0] == 'Yes'


def test_classifier_keeps_original_label_type():
    X = np.array([[1.0], [2.0], [3.0], [4.0]])
    y = np.array([0, 0, 1, 1])
    clf = C45Classifier().fit(X, y)
    preds = clf.predict(X)
    assert preds.dtype == y.dtype
    assert clf.score(X, y) == 1.0


def test_classifier_proba_sums_to_one():
    X = np.array([[1], [2], [2], [3], [4]])
    y = np.array([0, 0, 1, 1, 1])
    clf = C45Classifier().fit(X, y)
    proba = clf.predict_proba(X)
    assert proba.shape == (5, 2)
    assert np.allclose(proba.sum(axis=1), 1.0)


def test_classifier_pure_data_is_single_leaf():
    X = np.array([[1], [2], [3]])
    y = np.array(['A', 'A', 'A'])
    clf = C45Classifier().fit(X, y)
    assert clf.tree_.is_leaf
    assert clf.get_n_leaves() == 1
    assert list(clf.predict([[10]])) == ['A']


def test_classifier_never_splits_on_categorical():
    X = np.array([['A'], ['A'], ['B'], ['B']], dtype=object)
    y = np.array([0, 0, 1, 1])
    clf = C45Classifier(categorical_features=[0]).fit(X, y)
    assert clf.tree_.is_leaf


def test_classifier_max_depth():
    X = np.array([[1], [2], [3], [4]])
    y = np.array([0, 1, 0, 1])
    clf = C45Classifier(max_depth=1).fit(X, y)
    assert clf.get_depth() <= 1
    preds = clf.predict(X)
    assert preds.shape == y.shape


def test_classifier_not_fitted_raises():
    clf = C45Classifier()
    with pytest.raises(ValueError):
        clf.predict([[1]])
    with pytest.raises(ValueError):
        clf.predict_proba([[1]])


def test_classifier_feature_names_mismatch():
    X, y = _tiny_dataset()
    with pytest.raises(ValueError):
        C45Classifier(feature_names=['age']).fit(X, y)
    with pytest.raises(ValueError):
        C45Classifier(categorical_features=['cat']).fit(X, y)


def test_classifier_get_params_roundtrip():
    clf = C45Classifier(min_samples_split=4, max_depth=3)
    params = clf.get_params()
    assert params['min_samples_split'] == 4
    assert params['max_depth'] == 3
    clf.set_params(max_depth=5)
    assert clf.max_depth == 5


def test_classifier_verbose_logs_decisions(caplog):
    X, y = _tiny_dataset()
    clf = C45Classifier(feature_names=['age', 'cat'], categorical_features=[1], verbose=1)
    with caplog.at_level(logging.DEBUG, logger='c45py.tree'):
        clf.fit(X, y)
    messages = [r.getMessage() for r in caplog.records]
    assert any("split on 'age' <= 32.5" in m for m in messages)
    assert any('fitted tree on 4 samples' in m for m in messages)


def test_classifier_iris_accuracy():
    X, y = load_iris(return_X_y=True)
    X_tr, X_te, y_tr, y_te = train_test_split(X, y, test_size=0.3, random_state=0, stratify=y)
    clf = C45Classifier(min_samples_split=4).fit(X_tr, y_tr)
    assert clf.score(X_tr, y_tr) > 0.95
    assert clf.score(X_te, y_te) > 0.85


def test_classifier_mixed_categorical_names_need_feature_names():
    X, y = _tiny_dataset()
    with pytest.raises(ValueError, match="feature_names must be provided"):
        C45Classifier(categorical_features=[0, 'cat']).fit(X, y)
