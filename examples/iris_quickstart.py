import logging
from time import perf_counter

from sklearn.datasets import load_iris
from sklearn.metrics import accuracy_score, classification_report
from sklearn.model_selection import train_test_split

from c45py import C45Classifier

logging.basicConfig(level=logging.INFO, format="%(name)s: %(message)s")

data = load_iris()
X_tr, X_te, y_tr, y_te = train_test_split(
    data.data, data.target, test_size=0.3, random_state=42, stratify=data.target)

clf = C45Classifier(min_samples_split=4, feature_names=list(data.feature_names), verbose=1)

t0 = perf_counter(); clf.fit(X_tr, y_tr); print(f"fit: {perf_counter()-t0:.3f} s")
pred = clf.predict(X_te)
print(f"depth={clf.get_depth()} leaves={clf.get_n_leaves()}")
print(f"accuracy: {accuracy_score(y_te, pred):.3f}")
print(classification_report(y_te, pred, target_names=data.target_names))
