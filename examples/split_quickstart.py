import pandas as pd

from c45py import best_attribute, majority_target, partition_by_threshold, unanimous_target
from c45py.criterion import best_threshold_for, candidate_thresholds
from c45py.instances import instances_from_frame

df = pd.DataFrame({
    "age":    [25, 30, 35, 40, 45, 50],
    "income": [20.0, 55.5, 31.0, 70.2, 40.0, 65.0],
    "city":   ["Cork", "Galway", "Cork", "Dublin", "Galway", "Dublin"],
    "buys":   ["No", "No", "Yes", "Yes", "Yes", "No"],
})
instances, attributes = instances_from_frame(df, "buys")
universe = sorted(df["buys"].unique())

for attr in attributes:
    if attr.is_continuous:
        print(attr.name, "candidates:", candidate_thresholds(instances, attr))
    print(attr.name, "->", best_threshold_for(instances, attr, universe))

decision = best_attribute(instances, attributes, universe)
print(f"best: {decision.attribute.name} <= {decision.threshold} (gain ratio {decision.score:.3f})")

if decision.threshold is not None:
    left, right = partition_by_threshold(instances, decision.attribute, decision.threshold)
    for side, group in (("<=", left), (">", right)):
        print(side, len(group), "majority:", majority_target(group), "pure:", unanimous_target(group))
