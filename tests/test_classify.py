from strapi_stencil.classify import (
    FieldKind,
    classify_field,
    is_component,
    is_null,
    is_property,
)


def test_scalars_and_null_are_properties():
    record = {"a": 1, "b": "x", "c": None, "d": True, "e": 0.5}
    for key in record:
        assert is_property(record, key)
        assert classify_field(record, key) is FieldKind.PROPERTY


def test_absent_key_is_property():
    assert is_property({}, "missing")


def test_containers_are_not_properties():
    record = {"obj": {"x": 1}, "arr": [1, 2]}
    assert not is_property(record, "obj")
    assert not is_property(record, "arr")


def test_component_detection():
    record = {
        "plain": {"iso": "STK"},
        "empty": {},
        "list": [],
        "zero_data": {"data": 0},
        "blank_data": {"data": ""},
        "relation": {"data": {"id": 1}},
        "null_relation": {"data": None},
    }
    assert is_component(record, "plain")
    assert is_component(record, "empty")
    assert is_component(record, "list")
    assert is_component(record, "zero_data")
    assert is_component(record, "blank_data")
    assert not is_component(record, "relation")
    assert not is_component(record, "null_relation")


def test_empty_list_data_is_a_relation():
    record = {"tags": {"data": []}}
    assert not is_component(record, "tags")
    assert not is_null(record, "tags")
    assert classify_field(record, "tags") is FieldKind.RELATION


def test_null_relation():
    record = {"image": {"data": None}, "other": {"x": None}}
    assert is_null(record, "image")
    assert not is_null(record, "other")
    assert classify_field(record, "image") is FieldKind.NULL_RELATION


def test_classification_order():
    record = {"empty": {}, "arr": [], "rel": {"data": {"id": 2}}}
    assert classify_field(record, "empty") is FieldKind.COMPONENT
    assert classify_field(record, "arr") is FieldKind.COMPONENT
    assert classify_field(record, "rel") is FieldKind.RELATION
