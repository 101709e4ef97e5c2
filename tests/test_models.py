"""
Tests for the TextEdit builder and its canonical form.
"""

import pytest

from textot.models import Delete, Insert, OperationType, Retain, TextEdit


class TestLengths:
    def test_empty_edit(self):
        o = TextEdit()
        assert o.ops == ()
        assert o.base_len == 0
        assert o.target_len == 0

    def test_lengths_track_each_append(self):
        o = TextEdit()
        o.retain(5)
        assert (o.base_len, o.target_len) == (5, 5)
        o.insert("abc")
        assert (o.base_len, o.target_len) == (5, 8)
        o.retain(2)
        assert (o.base_len, o.target_len) == (7, 10)
        o.delete(2)
        assert (o.base_len, o.target_len) == (9, 10)

    def test_insert_counts_characters_not_bytes(self):
        o = TextEdit().insert("😀é")
        assert o.target_len == 2
        assert o.ops[0].length == 2


class TestMerging:
    def test_ops_merging(self):
        o = TextEdit()
        o.retain(2)
        assert o.ops == (Retain(2),)
        o.retain(3)
        assert o.ops == (Retain(5),)
        o.insert("abc")
        assert o.ops[-1] == Insert("abc")
        o.insert("xyz")
        assert len(o) == 2
        assert o.ops[-1] == Insert("abcxyz")
        o.delete(1)
        assert len(o) == 3
        assert o.ops[-1] == Delete(1)
        o.delete(1)
        assert o.ops == (Retain(5), Insert("abcxyz"), Delete(2))

    def test_sequence_ignores_zero_lengths(self):
        o = TextEdit()
        o.retain(5)
        o.retain(0)
        o.insert("lorem")
        o.insert("")
        o.delete(3)
        o.delete(0)
        assert len(o) == 3

    def test_empty_primitives_are_dropped(self):
        o = TextEdit().retain(0).insert("").delete(0)
        assert len(o) == 0
        assert o == TextEdit()

    def test_insert_moves_before_trailing_delete(self):
        o = TextEdit().retain(1).delete(1).insert("abc")
        assert o.ops == (Retain(1), Insert("abc"), Delete(1))

    def test_insert_joins_insert_before_trailing_delete(self):
        o = TextEdit().insert("ab").delete(2).insert("cd")
        assert o.ops == (Insert("abcd"), Delete(2))
        assert o.target_len == 4
        assert o.base_len == 2

    def test_negative_counts_rejected(self):
        with pytest.raises(ValueError):
            TextEdit().retain(-1)
        with pytest.raises(ValueError):
            TextEdit().delete(-3)


class TestEquality:
    def test_equal_after_different_append_orders(self):
        o1 = TextEdit().delete(1).insert("lo").retain(2).retain(3)
        o2 = TextEdit().delete(1).insert("l").insert("o").retain(5)
        assert o1 == o2

        o1.delete(1)
        o2.retain(1)
        assert o1 != o2

    def test_from_primitives_normalizes(self):
        o = TextEdit.from_primitives([Delete(1), Insert("l"), Insert("o"), Retain(2), Retain(3)])
        assert o.ops == (Insert("lo"), Delete(1), Retain(5))
        assert o == TextEdit.from_primitives([Delete(1), Insert("lo"), Retain(5)])

    def test_not_equal_to_other_types(self):
        assert TextEdit() != []

    def test_add_rejects_non_primitives(self):
        with pytest.raises(TypeError):
            TextEdit().add(3)


class TestQueries:
    def test_is_noop(self):
        o = TextEdit()
        assert o.is_noop()
        o.retain(5)
        assert o.is_noop()
        o.retain(3)
        assert o.is_noop()
        o.insert("lorem")
        assert not o.is_noop()

    def test_lone_delete_is_not_noop(self):
        assert not TextEdit().delete(2).is_noop()

    def test_primitive_types(self):
        assert Retain(1).type == OperationType.RETAIN
        assert Delete(1).type == OperationType.DELETE
        assert Insert("a").type == OperationType.INSERT

    def test_ops_view_is_read_only(self, lorem_edit):
        ops = lorem_edit.ops
        assert isinstance(ops, tuple)
        assert list(lorem_edit) == list(ops)

    def test_repr_lists_primitives(self, lorem_edit):
        text = repr(lorem_edit)
        assert "Insert(text='lorem')" in text
        assert "base_len=9" in text
        assert "target_len=12" in text
