"""Tests for Array combinators."""

import math

import pytest
from hypothesis import given
from hypothesis import strategies as st
from rubyish import Array, Boolean, Hash, Integer, NoInstanceError, Nothing, Some, String, init
from strategies import int_arrays, int_lists, nonempty_int_arrays, small_counts


class TestArrayCreation:
    """Tests for Array construction and the Python protocol."""

    def test_items_stored_as_tuple(self):
        """Any iterable is accepted and stored as a tuple."""
        assert Array([1, 2, 3]).items == (1, 2, 3)
        assert Array(x for x in range(3)).items == (0, 1, 2)

    def test_of(self):
        assert Array.of(1, 2, 3) == Array([1, 2, 3])

    def test_empty(self):
        assert Array().items == ()
        assert Array().is_empty()
        assert not Array()

    def test_repr(self):
        assert repr(Array([1, 'a'])) == "Array([1, 'a'])"

    def test_len_iter_contains(self):
        a = Array([1, 2, 3])
        assert len(a) == 3
        assert list(a) == [1, 2, 3]
        assert 2 in a
        assert 4 not in a

    def test_getitem(self):
        """Integer indexing returns elements, slicing returns an Array."""
        a = Array([10, 20, 30])
        assert a[0] == 10
        assert a[-1] == 30
        assert a[1:] == Array([20, 30])

    def test_to_list(self):
        assert Array([1, 2]).to_list() == [1, 2]

    def test_is_frozen(self):
        with pytest.raises(AttributeError):
            Array([1]).items = (2,)  # type: ignore[misc]

    def test_hashable_when_elements_are(self):
        assert hash(Array([1, 2])) == hash(Array((1, 2)))
        assert {Array([1, 2]): 'x'}[Array([1, 2])] == 'x'
        with pytest.raises(TypeError):
            hash(Array([[1]]))


class TestArrayCount:
    """Tests for the three forms of count()."""

    def test_count_all(self):
        assert Array([1, 2, 2, 3]).count() == 4

    def test_count_value(self):
        assert Array([1, 2, 2, 3]).count(2) == 2
        assert Array([1, 2, 2, 3]).count(9) == 0

    def test_count_none_value(self):
        """None is a countable value, not 'no argument'."""
        assert Array([None, 1, None]).count(None) == 2

    def test_count_where(self):
        assert Array([1, 2, 2, 3]).count(where=lambda x: x > 1) == 3

    def test_count_returns_integer(self):
        assert isinstance(Array([1]).count(), Integer)

    def test_length_and_size(self):
        a = Array([1, 2, 3])
        assert a.length() == 3
        assert a.size() == 3


class TestArrayTransforms:
    """Tests for map, select, reject and friends."""

    def test_map(self):
        assert Array([1, 2, 3]).map(lambda x: x * 2) == Array([2, 4, 6])

    def test_select_and_filter(self):
        a = Array([1, 2, 3, 4])
        assert a.select(lambda x: x % 2 == 0) == Array([2, 4])
        assert a.filter(lambda x: x % 2 == 0) == Array([2, 4])

    def test_reject(self):
        assert Array([1, 2, 3, 4]).reject(lambda x: x % 2 == 0) == Array([1, 3])

    def test_receiver_untouched(self):
        """Transformations never mutate the receiver."""
        a = Array([3, 1, 2])
        a.map(lambda x: x + 1)
        a.select(lambda x: x > 1)
        a.sort()
        a.push(4)
        a.pop()
        a.shift()
        a.unshift(0)
        a.clear()
        a.fill(9)
        assert a == Array([3, 1, 2])

    def test_reduce(self):
        assert Array([1, 2, 3, 4]).reduce(lambda acc, x: acc + x, 0) == 10
        assert Array([]).reduce(lambda acc, x: acc + x, 5) == 5

    def test_partition(self):
        evens, odds = Array([1, 2, 3, 4]).partition(lambda x: x % 2 == 0)
        assert evens == Array([2, 4])
        assert odds == Array([1, 3])

    def test_group_by(self):
        groups = Array(['apple', 'avocado', 'banana']).group_by(lambda s: s[0])
        assert isinstance(groups, Hash)
        assert groups == Hash({'a': Array(['apple', 'avocado']), 'b': Array(['banana'])})

    def test_sum(self):
        assert Array([1, 2, 3]).sum() == 6
        assert Array([]).sum() == 0
        assert Array([0.5, 0.25]).sum() == 0.75


class TestArrayIteration:
    """Tests for each and each_with_index."""

    def test_each_in_order(self):
        seen = []
        Array([1, 2, 3]).each(seen.append)
        assert seen == [1, 2, 3]

    def test_each_with_index(self):
        seen = []
        Array(['a', 'b']).each_with_index(lambda value, index: seen.append((value, index)))
        assert seen == [('a', 0), ('b', 1)]
        assert all(isinstance(index, Integer) for _, index in seen)


class TestArrayQueries:
    """Tests for find, any/all/none, first/last, index lookups."""

    def test_find(self):
        a = Array([1, 2, 3, 4])
        assert a.find(lambda x: x > 2) == Some(3)
        assert a.find(lambda x: x > 10) is Nothing

    def test_find_falsy_value(self):
        """A falsy match is still Some."""
        assert Array([0, 1]).find(lambda x: x == 0) == Some(0)

    def test_any_all_none(self):
        a = Array([1, 2, 3])
        assert a.any(lambda x: x > 2)
        assert not a.any(lambda x: x > 3)
        assert a.all(lambda x: x > 0)
        assert not a.all(lambda x: x > 1)
        assert a.none(lambda x: x > 3)
        assert not a.none(lambda x: x == 1)

    def test_any_all_none_without_predicate(self):
        """Without a predicate, element truthiness is used."""
        assert Array([0, 1]).any()
        assert not Array([0, 1]).all()
        assert Array([0, None]).none()

    def test_empty_quantifiers(self):
        empty = Array([])
        assert not empty.any(lambda x: True)
        assert empty.all(lambda x: False)
        assert empty.none(lambda x: True)

    def test_first_last(self):
        a = Array([1, 2, 3])
        assert a.first() == Some(1)
        assert a.last() == Some(3)
        assert Array().first() is Nothing
        assert Array().last() is Nothing

    def test_include(self):
        assert Array([1, 2]).include(2)
        assert not Array([1, 2]).include(3)

    def test_index_and_rindex(self):
        a = Array([1, 2, 1, 3])
        assert a.index(1) == 0
        assert a.rindex(1) == 2
        assert a.index(9) == -1
        assert a.rindex(9) == -1

    def test_min_max(self):
        a = Array([3, 1, 2])
        assert a.min() == Some(1)
        assert a.max() == Some(3)
        assert Array().min() is Nothing
        assert Array().max() is Nothing
        assert Array(['bb', 'a', 'ccc']).max(key=len) == Some('ccc')


class TestArrayOrdering:
    """Tests for reverse, sort, uniq, compact, rotate."""

    def test_reverse(self):
        assert Array([1, 2, 3]).reverse() == Array([3, 2, 1])

    def test_sort_numbers(self):
        assert Array([3, 1.5, 2]).sort() == Array([1.5, 2, 3])

    def test_sort_strings(self):
        assert Array(['b', 'c', 'a']).sort() == Array(['a', 'b', 'c'])

    def test_sort_string_wrappers(self):
        assert Array([String('b'), String('a')]).sort() == Array(['a', 'b'])

    def test_sort_booleans(self):
        """False orders before True."""
        values = Array([Boolean(True), Boolean(False), Boolean(True)])
        assert values.sort() == Array([Boolean(False), Boolean(True), Boolean(True)])
        assert values.min() == Some(Boolean(False))
        assert values.max() == Some(Boolean(True))

    def test_sort_with_key(self):
        assert Array(['ccc', 'a', 'bb']).sort(key=len) == Array(['a', 'bb', 'ccc'])

    def test_sort_requires_comparator(self):
        """Element types without a sort_key instance cannot be sorted without key=."""
        with pytest.raises(NoInstanceError):
            Array([{'a': 1}, {'b': 2}]).sort()

    def test_uniq_keeps_first_occurrence(self):
        assert Array([1, 2, 1, 3, 2]).uniq() == Array([1, 2, 3])

    def test_uniq_unhashable(self):
        assert Array([[1], [2], [1]]).uniq() == Array([[1], [2]])

    def test_compact(self):
        """None and zero values are dropped."""
        a = Array([0, 1, None, '', 'a', False, 2.5, 0.0, String(''), String('x')])
        assert a.compact() == Array([1, 'a', 2.5, String('x')])

    def test_compact_keeps_containers(self):
        assert Array([[], {}, 1]).compact() == Array([[], {}, 1])

    def test_rotate(self):
        a = Array([1, 2, 3, 4])
        assert a.rotate(1) == Array([2, 3, 4, 1])
        assert a.rotate(-1) == Array([4, 1, 2, 3])
        assert a.rotate(5) == Array([2, 3, 4, 1])
        assert a.rotate(0) == a
        assert Array().rotate(3) == Array()


class TestArraySlicing:
    """Tests for take, drop, chunk and cycle."""

    def test_take_drop(self):
        a = Array([1, 2, 3])
        assert a.take(2) == Array([1, 2])
        assert a.drop(2) == Array([3])

    def test_take_drop_clamped(self):
        a = Array([1, 2, 3])
        assert a.take(-1) == Array()
        assert a.take(10) == a
        assert a.drop(-1) == a
        assert a.drop(10) == Array()

    def test_chunk(self):
        chunks = Array([1, 2, 3, 4, 5]).chunk(2)
        assert [chunk.to_list() for chunk in chunks] == [[1, 2], [3, 4], [5]]

    def test_chunk_non_positive_size(self):
        assert Array([1, 2, 3]).chunk(0) == Array()
        assert Array([1, 2, 3]).chunk(-2) == Array()

    def test_chunk_larger_than_array(self):
        assert Array([1, 2]).chunk(5) == Array([Array([1, 2])])

    def test_cycle(self):
        assert Array([1, 2]).cycle(3) == Array([1, 2, 1, 2, 1, 2])

    def test_cycle_degenerate(self):
        assert Array([1, 2]).cycle(0) == Array()
        assert Array([1, 2]).cycle(-1) == Array()
        assert Array([]).cycle(3) == Array()


class TestArrayJoin:
    """Tests for join()."""

    def test_join(self):
        joined = Array(['a', 'b', 'c']).join('-')
        assert isinstance(joined, String)
        assert joined == 'a-b-c'

    def test_join_default_separator(self):
        assert Array(['a', 'b']).join() == 'ab'

    def test_join_renders_with_to_s(self):
        assert Array([1, 2.5, True, None]).join(',') == '1,2.5,true,'

    def test_join_nested(self):
        assert Array([Array([1, 2]), 3]).join(' ') == '[1, 2] 3'


class TestArrayStackQueue:
    """Tests for push, pop, shift, unshift, clear and fill."""

    def test_push_unshift(self):
        a = Array([2])
        assert a.push(3) == Array([2, 3])
        assert a.unshift(1) == Array([1, 2])

    def test_pop(self):
        value, rest = Array([1, 2, 3]).pop()
        assert value == Some(3)
        assert rest == Array([1, 2])

    def test_shift(self):
        value, rest = Array([1, 2, 3]).shift()
        assert value == Some(1)
        assert rest == Array([2, 3])

    def test_pop_shift_empty(self):
        assert Array().pop() == (Nothing, Array())
        assert Array().shift() == (Nothing, Array())

    def test_clear_fill_clone(self):
        a = Array([1, 2, 3])
        assert a.clear() == Array()
        assert a.fill(0) == Array([0, 0, 0])
        assert a.clone() == a


class TestArrayRandom:
    """Tests for sample and shuffle."""

    def test_sample(self, seeded):
        a = Array([1, 2, 3])
        assert a.sample().unwrap() in a
        assert Array().sample() is Nothing

    def test_shuffle_is_permutation(self, seeded):
        a = Array(range(20))
        assert sorted(a.shuffle()) == list(range(20))

    def test_shuffle_deterministic_with_seed(self):
        a = Array(range(20))
        init(random_seed=7)
        first = a.shuffle()
        init(random_seed=7)
        assert a.shuffle() == first


class TestArrayProperties:
    """Property-based tests for Array invariants."""

    @given(int_arrays)
    def test_reverse_involution(self, a):
        assert a.reverse().reverse() == a

    @given(int_arrays, small_counts)
    def test_take_length(self, a, n):
        assert a.take(n).length() == min(max(n, 0), a.length())

    @given(int_arrays, small_counts)
    def test_take_drop_reassemble(self, a, n):
        assert a.take(n).to_list() + a.drop(n).to_list() == a.to_list()

    @given(int_arrays)
    def test_uniq_idempotent(self, a):
        once = a.uniq()
        assert once.uniq() == once
        assert len(set(once)) == len(once)

    @given(int_arrays, st.integers(min_value=-50, max_value=50))
    def test_rotate_round_trip(self, a, k):
        assert a.rotate(k).rotate(-k) == a
        assert sorted(a.rotate(k)) == sorted(a)

    @given(nonempty_int_arrays, st.integers(min_value=1, max_value=10))
    def test_chunk_reassembles(self, a, size):
        chunks = a.chunk(size)
        assert len(chunks) == math.ceil(len(a) / size)
        assert [x for chunk in chunks for x in chunk] == a.to_list()

    @given(int_lists)
    def test_select_reject_complement(self, items):
        a = Array(items)
        evens = a.select(lambda x: x % 2 == 0)
        odds = a.reject(lambda x: x % 2 == 0)
        assert evens.length() + odds.length() == a.length()
        assert sorted(evens.to_list() + odds.to_list()) == sorted(items)
