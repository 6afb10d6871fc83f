import numpy as np
import pandas as pd
import pytest

from c45py.instances import (
    Attribute,
    Instance,
    attribute_value,
    instances_from_arrays,
    instances_from_frame,
    make_attributes,
)
from c45py.errors import AttributeParseError


def test_instance_values_are_text_and_frozen():
    inst = Instance({"age": 25, "city": "Cork"}, 1)
    assert inst.attribute_values["age"] == "25"
    assert inst.target_value == "1"
    with pytest.raises(TypeError):
        inst.attribute_values["age"] = "26"


def test_attribute_value_parses_on_demand():
    inst = Instance({"age": " 2.5e1 "}, "No")
    assert attribute_value(inst, Attribute("age")) == 25.0
    with pytest.raises(AttributeParseError):
        attribute_value(inst, Attribute("height"))


def test_make_attributes_by_index_and_name():
    attrs = make_attributes(["num", "cat", "other"], categorical_features=[1, "other"])
    assert [a.is_continuous for a in attrs] == [True, False, False]
    with pytest.raises(ValueError):
        make_attributes(["num"], categorical_features=["missing"])


def test_instances_from_arrays():
    X = np.array([[1.5, "A"], [2.0, "B"]], dtype=object)
    y = np.array([0, 1])
    data = instances_from_arrays(X, y, ["num", "cat"])
    assert [i.attribute_values["num"] for i in data] == ["1.5", "2.0"]
    assert [i.target_value for i in data] == ["0", "1"]
    with pytest.raises(ValueError):
        instances_from_arrays(X, y, ["num"])


def test_instances_from_frame():
    df = pd.DataFrame({"age": [25, 30], "city": ["Cork", "Galway"], "label": ["No", "Yes"]})
    data, attrs = instances_from_frame(df, "label")
    assert attrs == [Attribute("age", True), Attribute("city", False)]
    assert data[1].attribute_values == {"age": "30", "city": "Galway"}
    assert data[1].target_value == "Yes"
    with pytest.raises(ValueError):
        instances_from_frame(df, "nope")
