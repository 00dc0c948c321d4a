import pytest

from ascot.collection import Collection, OutputCollection
from ascot.inputs import Input, InputData, InputType, Range


def test_range_f64_serialization():
    item = Input.range_f64("increment", (1.0, 4.0, 0.1, 2.0))
    assert InputData.from_input(item).to_dict() == {
        "name": "increment",
        "type": {
            "RangeF64": {"minimum": 1.0, "maximum": 4.0, "step": 0.1, "default": 2.0}
        },
    }


def test_range_f64_converts_to_float():
    item = Input.range_f64("brightness", (0, 20, 1, 0))
    assert item.datatype.value == Range(0.0, 20.0, 1.0, 0.0)
    assert all(isinstance(v, float) for v in item.datatype.value.to_dict().values())


def test_range_u64_serialization():
    item = Input.range_u64("level", (0, 10, 1, 5))
    assert item.datatype.to_dict() == {
        "RangeU64": {"minimum": 0, "maximum": 10, "step": 1, "default": 5}
    }


def test_range_u64_rejects_negative():
    with pytest.raises(ValueError):
        Input.range_u64("level", (-1, 10, 1, 5))


def test_range_u64_rejects_float():
    with pytest.raises(TypeError):
        Input.range_u64("level", (0, 10.5, 1, 5))


def test_range_requires_four_values():
    with pytest.raises(ValueError):
        Input.range_f64("level", (0.0, 1.0, 0.1))


def test_boolean_serialization():
    item = Input.boolean("save-energy", False)
    assert InputData.from_input(item).to_dict() == {
        "name": "save-energy",
        "type": {"Bool": False},
    }


def test_unknown_input_type_tag():
    with pytest.raises(ValueError):
        InputType("String", True)


def test_inputs_equal_by_name():
    first = Input.boolean("save-energy", False)
    second = Input.range_f64("save-energy", (0.0, 1.0, 0.1, 0.0))
    assert first == second
    assert hash(first) == hash(second)
    assert first != Input.boolean("other", False)


def test_collection_deduplicates_inputs_by_name():
    inputs = Collection(
        [
            Input.range_f64("brightness", (0.0, 20.0, 0.1, 0.0)),
            Input.boolean("brightness", True),
            Input.boolean("save-energy", False),
        ]
    )
    assert [item.name for item in inputs] == ["brightness", "save-energy"]


def test_input_data_round_trip_keeps_fields():
    item = Input.range_u64("level", (1, 9, 2, 3))
    data = InputData.from_input(item)
    assert data.name == item.name
    assert data.datatype == item.datatype
    converted = OutputCollection.convert([item], InputData.from_input)
    assert converted.to_list() == [data.to_dict()]