from __future__ import annotations

from collections import OrderedDict, defaultdict, namedtuple

import pytest

from utilkit import arrays


Point = namedtuple("Point", "x y")


class Holder:
    def __init__(self, value, child=None):
        self.value = value
        self.child = child


def test_flatten_joins_nested_keys():
    data = {"dir": {"file": 10, "nested": {"deep": "x"}}, "list": [1, [2, 3]]}

    assert arrays.flatten(data) == {
        "dir.file": 10,
        "dir.nested.deep": "x",
        "list.0": 1,
        "list.1.0": 2,
        "list.1.1": 3,
    }


def test_flatten_supports_separator_and_prepend():
    assert arrays.flatten({"a": {"b": 1}}, separator="/", prepend="root/") == {"root/a/b": 1}


def test_flatten_drops_empty_containers_and_stringifies_keys():
    assert arrays.flatten({"empty": {}, 1: {2: "two"}, "none": []}) == {"1.2": "two"}


def test_flatten_handles_deep_nesting():
    data: dict = {}
    node = data
    for _ in range(50):
        node["k"] = {}
        node = node["k"]
    node["leaf"] = True

    flat = arrays.flatten(data)
    assert flat == {".".join(["k"] * 50 + ["leaf"]): True}


def test_unflatten_rebuilds_flattened_data():
    flat = arrays.flatten({"a": {"b": 1, "c": {"d": 2}}, "e": 3})

    assert arrays.unflatten(flat) == {"a": {"b": 1, "c": {"d": 2}}, "e": 3}
    assert arrays.flatten(arrays.unflatten(flat)) == flat


def test_map_deep_rebuilds_containers():
    data = {"a": [" x ", (" y ", Point(" p ", 1))], "b": " z "}

    result = arrays.map_deep(data, lambda value: value.strip() if isinstance(value, str) else value)

    assert result == {"a": ["x", ("y", Point("p", 1))], "b": "z"}
    assert isinstance(result["a"][1][1], Point)
    assert data["b"] == " z "


def test_map_deep_updates_objects_in_place_and_survives_cycles():
    outer = Holder("a")
    inner = Holder("b", child=outer)
    outer.child = inner

    result = arrays.map_deep(outer, str.upper)

    assert result is outer
    assert outer.value == "A"
    assert outer.child is inner
    assert inner.value == "B"
    assert inner.child is outer


def test_map_deep_leaves_self_references_alone():
    items = [" x "]
    items.append(items)
    mapping = {"name": " y "}
    mapping["self"] = mapping

    result = arrays.map_deep(items, str.strip)
    mapped = arrays.map_deep(mapping, str.strip)

    assert result[0] == "x"
    assert result[1] is items
    assert mapped["name"] == "y"
    assert mapped["self"] is mapping


def test_map_deep_keeps_mapping_and_sequence_types():
    ordered = OrderedDict([("b", " 1 "), ("a", " 2 ")])
    grouped = defaultdict(list, {"k": [" v "]})

    ordered_result = arrays.map_deep(ordered, str.strip)
    grouped_result = arrays.map_deep(grouped, str.strip)

    assert type(ordered_result) is OrderedDict
    assert list(ordered_result.items()) == [("b", "1"), ("a", "2")]
    assert type(grouped_result) is defaultdict
    assert grouped_result.default_factory is list
    assert grouped_result == {"k": ["v"]}
    assert ordered["b"] == " 1 "


def test_map_deep_treats_strings_as_leaves():
    assert arrays.map_deep(["abc", b"de"], len) == [3, 2]


def test_get_and_key_exists():
    data = {"a": 1, "b": None}

    assert arrays.key_exists(data, "b")
    assert not arrays.key_exists(data, "c")
    assert arrays.get(data, "a") == 1
    assert arrays.get(data, "c", "fallback") == "fallback"

    items = ["x", "y"]
    assert arrays.key_exists(items, 1)
    assert arrays.key_exists(items, -2)
    assert not arrays.key_exists(items, 2)
    assert not arrays.key_exists(items, "0")
    assert arrays.get(items, 5, "missing") == "missing"


def test_set_value_assigns_or_replaces():
    data = {"a": 1}

    assert arrays.set_value(data, "b", 2) is data
    assert data == {"a": 1, "b": 2}
    assert arrays.set_value(data, None, ["replaced"]) == ["replaced"]


def test_value_exists_is_type_strict():
    assert arrays.value_exists([1, "2", 3.0], "2")
    assert not arrays.value_exists([1, "2", 3.0], 2)
    assert not arrays.value_exists([1, 2], 1.0)
    assert arrays.value_exists({"a": True}, True)
    assert not arrays.value_exists({"a": 1}, True)


def test_group_by_skips_items_without_the_key():
    rows = [
        {"state": "TX", "name": "Austin"},
        {"state": "CA", "name": "Fresno"},
        {"name": "Nowhere"},
        {"state": "TX", "name": "Dallas"},
    ]

    grouped = arrays.group_by(rows, "state")

    assert list(grouped) == ["TX", "CA"]
    assert [row["name"] for row in grouped["TX"]] == ["Austin", "Dallas"]
    assert arrays.group_by(rows, "missing") == {}


def test_interlace_alternates_values():
    assert arrays.interlace([1, 2, 3], ["a", "b", "c"]) == [1, "a", 2, "b", 3, "c"]
    assert arrays.interlace([1, 2, 3], ["a"], ("x", "y")) == [1, "a", "x", 2, "y", 3]
    assert arrays.interlace([1, 2]) == [1, 2]
    assert arrays.interlace() is None


def test_interlace_skips_missing_values():
    assert arrays.interlace([1, None, 3], ["a", "b"]) == [1, "a", "b", 3]
    assert arrays.interlace([None], [None, 2]) == [2]


@pytest.mark.parametrize(
    ("data", "expected"),
    [
        ({"a": 1}, True),
        ({0: "a", 1: "b"}, False),
        ({1: "a", 0: "b"}, True),
        ([1, 2], False),
        ({}, False),
    ],
)
def test_is_associative(data, expected):
    assert arrays.is_associative(data) is expected
