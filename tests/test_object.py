"""Tests for ProtoObject attribute sugar and protocol names."""

import pytest

from proto_core import (
    Absent,
    ProtoObject,
    call_method,
    create,
    delete,
    fn,
    has_own,
    read,
    write,
)


def test_attribute_read_and_write():
    point = create(None, {"x": 0, "y": 0})
    point.x = 5
    assert point.x == 5
    assert read(point, "x") == 5


def test_attribute_read_missing_is_absent():
    point = create(None, {})
    assert point.nope is Absent


def test_attribute_assignment_creates_property():
    obj = create(None, {})
    obj.foo = 42
    assert has_own(obj, "foo")
    del obj.foo
    assert obj.foo is Absent


def test_item_access():
    obj = create(None, {})
    obj["a"] = 1
    assert obj["a"] == 1
    del obj["a"]
    assert obj["a"] is Absent


def test_contains_walks_chain():
    a = create(None, {"x": 1})
    b = create(a, {})
    assert "x" in b
    assert "y" not in b


def test_query_suffix_not_assignable_as_attribute():
    obj = create(None, {})
    with pytest.raises(AttributeError):
        setattr(obj, "ready?", True)
    write(obj, "ready?", True)
    assert getattr(obj, "ready?") is True


def test_dunder_probe_raises_attribute_error():
    obj = create(None, {"x": 1})
    with pytest.raises(AttributeError):
        obj.__deepcopy__
    assert not hasattr(obj, "__length_hint__")


def test_dir_lists_accessors():
    obj = create(None, {"x": 1, "y": 2})
    assert {"x", "y", "tap"} <= set(dir(obj))


class TestEquality:
    def test_equal_tables(self):
        assert create(None, {"x": 1}) == create(None, {"x": 1})

    def test_prototype_ignored(self):
        a = create(create(None, {"z": 1}), {"x": 1})
        b = create(create(None, {"z": 2}), {"x": 1})
        assert a == b

    def test_mapping(self):
        assert create(None, {"x": 1}) == {"x": 1}

    def test_nested(self):
        a = create(None, {"p": create(None, {"x": 1})})
        assert a == {"p": {"x": 1}}

    def test_other_values(self):
        obj = create(None, {})
        assert obj != None  # noqa: E711
        assert obj != 1
        assert obj != [("x", 1)]

    def test_unhashable(self):
        with pytest.raises(TypeError):
            hash(create(None, {}))


def test_repr():
    obj = create(None, {"x": 1})
    text = repr(obj)
    assert text.startswith("<ProtoObject object=0x")
    assert "proto=None" in text
    assert "table={'x': 1}" in text


class TestProtocolNames:
    def test_tap_without_property(self):
        seen = []
        obj = create(None, {"x": 1})
        assert obj.tap(seen.append) is obj
        assert seen == [obj]

    def test_property_shadows_method(self):
        obj = create(None, {"tap": 12})
        assert obj.tap == 12

    def test_call_method_branches(self):
        seen = []
        obj = create(None, {"tap": 12})
        assert call_method(obj, "tap") == 12
        assert call_method(obj, "tap", seen.append) is obj
        assert call_method(obj, "tap", block=seen.append) is obj
        assert seen == [obj, obj]

    def test_inspect_property_with_function(self):
        a = create(None, {"x": 5})
        b = create(a, {"y": 10})
        c = create(b, {"inspect": fn(lambda self, m: [self.x * m, self.y * m])})
        assert c.inspect(2) == [10, 20]
        assert call_method(c, "inspect").receiver is c
        assert repr(c).startswith("<ProtoObject")

    def test_to_dict_and_eql(self):
        obj = create(None, {"x": create(None, {"y": [create(None, {"z": 1})]})})
        assert obj.to_dict() == {"x": {"y": [{"z": 1}]}}
        assert obj.to_dict(recursive=False)["x"] is read(obj, "x")
        assert obj.eql({"x": {"y": [{"z": 1}]}})

    def test_delete_marker_keeps_method(self):
        seen = []
        obj = create(None, {"x": 1})
        delete(obj, "tap")
        assert obj.tap(seen.append) is obj
        assert seen == [obj]

    def test_deleted_property_restores_method(self):
        obj = create(None, {"inspect": "stored"})
        assert obj.inspect == "stored"
        delete(obj, "inspect")
        assert obj.inspect().startswith("<ProtoObject")

    def test_inherited_property_shadows_method(self):
        base = create(None, {"tap": 12})
        child = create(base, {})
        write(child, "tap", 13)
        delete(child, "tap")
        assert child.tap == 12

    def test_respond_to(self):
        a = create(None, {"x": 1})
        b = create(a, {})
        assert b.respond_to("x")
        assert not b.respond_to("y")


class TestCallMethod:
    def test_plain_name(self):
        obj = create(None, {"x": 1})
        assert call_method(obj, "x") == 1

    def test_plain_name_with_args_raises(self):
        obj = create(None, {"x": 1})
        with pytest.raises(TypeError):
            call_method(obj, "x", 1)

    def test_unknown_name_reads_chain(self):
        a = create(None, {"x": 1})
        b = create(a, {})
        assert call_method(b, "x") == 1
        assert call_method(b, "y") is Absent


def test_isinstance():
    assert isinstance(create(None, {}), ProtoObject)


def test_slot_named_properties_read_as_properties():
    obj = create(None, {"x": 1})
    write(obj, "_table", "t")
    write(obj, "_proto", "p")
    assert obj._table == "t"
    assert obj._proto == "p"
    assert read(obj, "x") == 1
    assert obj.x == 1
    assert obj.to_dict() == {"x": 1, "_table": "t", "_proto": "p"}
