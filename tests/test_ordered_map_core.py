from __future__ import annotations

import collections.abc as abc
import copy

import pytest

import ordered_map
from ordered_map import NOT_FOUND, POP, Found, KeyConflict, OrderedMap
from ordered_map.diagnostics import check_invariants


def _abc() -> OrderedMap:
    return OrderedMap().put("a", 1).put("b", 2).put("c", 3)


def test_new_is_empty() -> None:
    omap = ordered_map.new()
    assert len(omap) == 0
    assert not omap
    assert omap.keys() == []
    assert omap.values() == []
    assert omap == OrderedMap()


def test_insertion_order_preserved_on_update() -> None:
    omap = _abc()
    assert omap.keys() == ["a", "b", "c"]
    updated = omap.put("b", 20)
    assert updated.keys() == ["a", "b", "c"]
    assert updated.get("b") == 20
    assert len(updated) == 3


def test_put_leaves_receiver_untouched() -> None:
    base = OrderedMap().put("a", 1)
    grown = base.put("b", 2)
    changed = base.put("a", 10)
    assert base.items() == [("a", 1)]
    assert grown.items() == [("a", 1), ("b", 2)]
    assert changed.items() == [("a", 10)]


def test_put_is_idempotent() -> None:
    once = OrderedMap().put("k", 1)
    assert once.put("k", 1) == once


@pytest.mark.parametrize("falsy", [False, 0, "", None, [], 0.0])
def test_falsy_values_are_present(falsy: object) -> None:
    omap = OrderedMap().put("k", falsy)
    assert omap.get("k", "default") == falsy
    assert omap.has_key("k")
    assert omap.fetch("k") == Found(falsy)
    assert len(omap) == 1


def test_falsy_value_keeps_position_and_size() -> None:
    omap = OrderedMap().put("k", False).put("j", 1).put("k", 0)
    assert omap.keys() == ["k", "j"]
    assert len(omap) == 2
    assert omap.get("k") == 0


def test_get_default_and_missing() -> None:
    omap = _abc()
    assert omap.get("z") is None
    assert omap.get("z", "fallback") == "fallback"
    assert ordered_map.get(OrderedMap(), "key", "some_default") == "some_default"


def test_fetch_distinguishes_absent() -> None:
    omap = _abc()
    assert omap.fetch("a") == Found(1)
    assert omap.fetch("z") is NOT_FOUND
    assert ordered_map.fetch(OrderedMap(), "key") is NOT_FOUND


def test_put_if_absent() -> None:
    omap = OrderedMap().put_if_absent("k", False)
    assert omap.get("k") is False
    same = omap.put_if_absent("k", True)
    assert same is omap
    assert same.get("k") is False


def test_put_if_absent_or_fail_conflict() -> None:
    omap = ordered_map.put_if_absent_or_fail(OrderedMap(), "key1", 1)
    with pytest.raises(KeyConflict) as excinfo:
        omap.put_if_absent_or_fail("key1", 2)
    assert excinfo.value.key == "key1"
    assert str(excinfo.value) == (
        "key 'key1' already exists in: OrderedMap([('key1', 1)])"
    )
    assert omap.items() == [("key1", 1)]


def test_key_conflict_is_catchable_as_package_error() -> None:
    omap = OrderedMap().put("k", None)
    with pytest.raises(ordered_map.OrderedMapError):
        omap.put_if_absent_or_fail("k", 1)


def test_delete() -> None:
    omap = OrderedMap().put("key1", 1).put("key2", 2)
    assert omap.delete("key1").items() == [("key2", 2)]
    assert omap.items() == [("key1", 1), ("key2", 2)]


def test_delete_absent_or_empty_is_noop() -> None:
    assert ordered_map.delete(OrderedMap(), "key") == OrderedMap()
    omap = OrderedMap().put("key1", 1)
    assert omap.delete("key2") is omap


def test_delete_falsy_value() -> None:
    omap = OrderedMap().put("k", False).delete("k")
    assert len(omap) == 0
    assert omap.keys() == []


def test_delete_middle_keeps_order() -> None:
    omap = _abc().delete("b")
    assert omap.keys() == ["a", "c"]
    assert omap.put("b", 9).keys() == ["a", "c", "b"]


def test_pop_present_and_absent() -> None:
    omap = OrderedMap().put("key1", 1).put("key2", 2)
    value, rest = omap.pop("key1")
    assert value == 1
    assert rest == omap.delete("key1")

    missing, same = omap.pop("nope")
    assert missing is None
    assert same == omap
    assert len(same) == 2

    assert ordered_map.pop(omap, "nope", "dflt") == ("dflt", omap)


def test_get_and_update_replaces_value() -> None:
    omap = OrderedMap().put("key1", 1).put("key2", 2)
    returned, updated = omap.get_and_update("key1", lambda current: (current, 3))
    assert returned == 1
    assert updated.items() == [("key1", 3), ("key2", 2)]


def test_get_and_update_absent_key_inserts() -> None:
    returned, updated = ordered_map.get_and_update(
        OrderedMap().put("a", 1), "b", lambda current: (current, 5)
    )
    assert returned is None
    assert updated.keys() == ["a", "b"]


def test_get_and_update_pop() -> None:
    omap = _abc()
    returned, updated = omap.get_and_update("b", lambda current: POP)
    assert returned == 2
    assert updated.keys() == ["a", "c"]


def test_get_and_update_rejects_bad_callback() -> None:
    with pytest.raises(TypeError):
        _abc().get_and_update("a", lambda current: current)


def test_values_follow_keys() -> None:
    omap = _abc().put("a", 10)
    assert omap.values() == [10, 2, 3]
    assert ordered_map.keys(omap) == ["a", "b", "c"]
    assert ordered_map.values(omap) == [10, 2, 3]
    assert ordered_map.items(omap) == [("a", 10), ("b", 2), ("c", 3)]


def test_keys_returns_fresh_list() -> None:
    omap = _abc()
    first = omap.keys()
    first.append("z")
    assert omap.keys() == ["a", "b", "c"]


def test_subscript_and_mapping_protocol() -> None:
    omap = _abc()
    assert omap["a"] == 1
    with pytest.raises(KeyError):
        omap["z"]
    assert "b" in omap
    assert "z" not in omap
    assert list(omap) == ["a", "b", "c"]
    assert list(reversed(omap)) == ["c", "b", "a"]
    assert isinstance(omap, abc.Mapping)
    assert dict(omap) == {"a": 1, "b": 2, "c": 3}


def test_equality_respects_order() -> None:
    forward = OrderedMap().put("a", 1).put("b", 2)
    backward = OrderedMap().put("b", 2).put("a", 1)
    assert forward != backward
    assert forward == OrderedMap([("a", 1), ("b", 2)])
    assert forward != {"a": 1, "b": 2}


def test_hash_matches_equality() -> None:
    assert hash(_abc()) == hash(OrderedMap([("a", 1), ("b", 2), ("c", 3)]))
    assert len({_abc(), _abc()}) == 1


def test_immutable_attributes() -> None:
    omap = _abc()
    with pytest.raises(AttributeError):
        omap._size = 0  # type: ignore[misc]
    with pytest.raises(AttributeError):
        del omap._lookup


def test_repr() -> None:
    assert repr(OrderedMap()) == "OrderedMap()"
    assert repr(OrderedMap().put("k", False)) == "OrderedMap([('k', False)])"


def test_copy_roundtrip() -> None:
    omap = _abc()
    assert copy.copy(omap) == omap
    assert copy.deepcopy(omap) == omap


def test_constructor_accepts_mapping() -> None:
    omap = OrderedMap({"x": 1, "y": 2})
    assert omap.keys() == ["x", "y"]
    assert OrderedMap.from_pairs(omap) == omap


def test_size_tracks_every_operation() -> None:
    omap = OrderedMap()
    for key in ["a", "b", "a", "c", "b"]:
        omap = omap.put(key, key.upper())
    assert len(omap) == 3
    omap = omap.delete("a").delete("a").delete("zz")
    assert len(omap) == 2
    _, omap = omap.pop("b")
    _, omap = omap.pop("b")
    assert len(omap) == 1
    assert omap.keys() == ["c"]


def test_delete_nan_key_keeps_structures_in_sync() -> None:
    nan = float("nan")
    omap = OrderedMap().put(nan, 1).put("b", 2).delete(nan)
    assert check_invariants(omap) == []
    assert omap.items() == [("b", 2)]
    value, rest = OrderedMap().put(nan, 1).pop(nan)
    assert value == 1
    assert check_invariants(rest) == []
    assert len(rest) == 0


def test_reinit_does_not_rebind_fields() -> None:
    omap = OrderedMap([("a", 1)])
    assert omap.keys() == ["a"]
    omap.__init__([("z", 9)])  # type: ignore[misc]
    assert omap.keys() == ["a"]
    assert omap.items() == [("a", 1)]
    assert len(omap) == 1
