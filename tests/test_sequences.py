"""Tests for the sequence combinators."""

from __future__ import annotations

import random

import pytest

from sanity import (
    EmptyCollectionError,
    IndexOutOfRangeError,
    SanityError,
    any,
    concat,
    conj,
    cons,
    contains,
    drop,
    drop_while,
    every,
    filter,
    first,
    index_of,
    interleave,
    interpose,
    last,
    map,
    maximum,
    minimum,
    nth,
    reduce,
    remove,
    rest,
    reverse,
    shuffle,
    sort,
    take,
    take_while,
)

from fakes import SAMPLE, RecordingPredicate, plus, positive, times2


class TestAccessors:
    def test_first(self):
        assert first([7, 8, 9]) == 7
        assert first((x for x in "xyz")) == "x"

    def test_first_empty_raises(self):
        with pytest.raises(EmptyCollectionError) as excinfo:
            first([])
        assert excinfo.value.operation == "first"
        assert isinstance(excinfo.value, ValueError)
        assert isinstance(excinfo.value, SanityError)

    def test_rest(self):
        assert rest([1, 2, 3]) == [2, 3]
        assert rest((1,)) == ()

    def test_rest_empty_returns_empty(self):
        assert rest([]) == []
        assert rest("") == ""

    def test_last(self):
        assert last([1, 2, 3]) == 3
        assert last("abc") == "c"

    def test_last_empty_raises(self):
        with pytest.raises(EmptyCollectionError):
            last(())

    def test_nth(self):
        assert nth(["a", "b", "c"], 1) == "b"
        assert nth(["a", "b", "c"], 5, "none") == "none"
        assert nth(["a", "b", "c"], 2, "none") == "c"

    def test_nth_out_of_range(self):
        with pytest.raises(IndexOutOfRangeError) as excinfo:
            nth([1, 2, 3], 3)
        assert excinfo.value.index == 3
        assert excinfo.value.length == 3
        assert isinstance(excinfo.value, IndexError)

    def test_nth_negative_index_is_out_of_range(self):
        with pytest.raises(IndexOutOfRangeError):
            nth([1, 2, 3], -1)
        assert nth([1, 2, 3], -1, None) is None

    def test_nth_not_found_may_be_none(self):
        assert nth([], 0, None) is None


class TestProjection:
    def test_map(self):
        assert map([1, 2, 3], times2) == [2, 4, 6]

    def test_map_keeps_tuple(self):
        assert map((1, 2), str) == ("1", "2")

    def test_map_over_string_yields_list(self):
        assert map("ab", ord) == [97, 98]

    def test_map_does_not_mutate(self):
        data = [1, 2, 3]
        result = map(data, times2)
        assert data == [1, 2, 3]
        assert result is not data

    def test_map_propagates_errors(self):
        def boom(_):
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError, match="boom"):
            map([1], boom)


class TestReduce:
    def test_reduce_with_init(self):
        assert reduce(10.0, [1, 2, 3], plus) == 16.0

    def test_reduce_with_init_on_empty(self):
        assert reduce(5, [], plus) == 5

    def test_reduce_without_init(self):
        assert reduce(SAMPLE, plus) == -1

    def test_reduce_is_left_fold(self):
        assert reduce([1, 2, 3], lambda a, b: f"({a}{b})") == "((12)3)"

    def test_reduce_without_init_on_empty(self):
        with pytest.raises(EmptyCollectionError):
            reduce([], plus)

    def test_reduce_bad_arity(self):
        with pytest.raises(TypeError):
            reduce([1])  # type: ignore[call-overload]

    def test_minimum_and_maximum(self):
        assert minimum(SAMPLE) == -10
        assert maximum(map(range(30), times2)) == 58

    def test_minimum_empty(self):
        with pytest.raises(EmptyCollectionError) as excinfo:
            minimum([])
        assert excinfo.value.operation == "minimum"

    def test_maximum_empty(self):
        with pytest.raises(EmptyCollectionError):
            maximum([])

    def test_extremes_prefer_earliest(self):
        a, b = [1], [1]
        assert minimum([a, b]) is a
        assert maximum([a, b]) is a


class TestSelection:
    def test_filter_and_remove(self):
        assert filter(SAMPLE, positive) == [1, 2, 3, 4]
        assert remove(SAMPLE, positive) == [-10, -1]

    def test_filter_after_map(self):
        assert filter(map(SAMPLE, times2), positive) == [2, 4, 6, 8]

    def test_filter_keeps_container_kind(self):
        assert filter((1, -1, 2), positive) == (1, 2)
        assert filter("a1b2", str.isdigit) == "12"

    def test_filter_does_not_mutate(self):
        data = list(SAMPLE)
        filter(data, positive)
        remove(data, positive)
        assert data == SAMPLE

    def test_every_and_any(self):
        assert every([1, 2], positive)
        assert not every(SAMPLE, positive)
        assert any(SAMPLE, positive)
        assert not any([-1, -2], positive)

    def test_quantifiers_on_empty(self):
        assert every([], positive) is True
        assert any([], positive) is False

    def test_every_short_circuits(self):
        pred = RecordingPredicate()
        every([1, -1, 2], pred)
        assert pred.seen == [1, -1]

    def test_contains(self):
        assert contains(range(100), 50)
        assert not contains([1, 2], 3)
        assert not contains("abc", "ab")

    def test_index_of(self):
        assert index_of([5, 6, 5], 5) == 0
        assert index_of([5, 6, 5], 6) == 1
        assert index_of([5, 6, 5], 7) == -1


class TestOrdering:
    def test_sort_default(self):
        assert sort([3, 1, 2]) == [1, 2, 3]

    def test_sort_with_less(self):
        assert sort([3, 1, 2], lambda a, b: a > b) == [3, 2, 1]

    def test_sort_is_stable(self):
        words = ["bb", "a", "cc", "d"]
        assert sort(words, lambda a, b: len(a) < len(b)) == ["a", "d", "bb", "cc"]
        assert sort(words, key=len) == ["a", "d", "bb", "cc"]

    def test_sort_with_less_and_key(self):
        people = [("ann", 31), ("bob", 25), ("cid", 31)]
        result = sort(people, lambda a, b: a > b, key=lambda p: p[1])
        assert result == [("ann", 31), ("cid", 31), ("bob", 25)]

    def test_sort_does_not_mutate(self):
        data = [3, 1, 2]
        sort(data)
        assert data == [3, 1, 2]

    def test_reverse(self):
        assert reverse([1, 2, 3]) == [3, 2, 1]
        assert reverse("abc") == "cba"
        assert reverse(()) == ()

    def test_shuffle_is_permutation(self):
        data = list(range(50))
        result = shuffle(data)
        assert sorted(result) == data
        assert data == list(range(50))

    def test_shuffle_with_injected_generator(self):
        data = list(range(20))
        assert shuffle(data, random.Random(7)) == shuffle(data, random.Random(7))

    def test_shuffle_keeps_tuple(self):
        assert isinstance(shuffle((1, 2, 3), random.Random(0)), tuple)


class TestSlicing:
    def test_take_and_drop(self):
        assert take([1, 2, 3], 2) == [1, 2]
        assert drop([1, 2, 3], 2) == [3]

    def test_take_and_drop_clamp(self):
        assert take([1, 2, 3], 5) == [1, 2, 3]
        assert drop([1, 2, 3], 5) == []
        assert take([1, 2, 3], -1) == []
        assert drop([1, 2, 3], -1) == [1, 2, 3]

    def test_take_returns_new_list(self):
        data = [1, 2, 3]
        result = take(data, 3)
        assert result == data
        assert result is not data

    def test_take_while_and_drop_while(self):
        assert take_while(SAMPLE, positive) == [1, 2, 3]
        assert drop_while(SAMPLE, positive) == [-10, -1, 4]

    def test_take_while_none_match(self):
        assert take_while([-1, 2], positive) == []
        assert drop_while([-1, 2], positive) == [-1, 2]


class TestBuilding:
    def test_cons_and_conj(self):
        data = [2, 3]
        assert cons(data, 1) == [1, 2, 3]
        assert conj(data, 4) == [2, 3, 4]
        assert data == [2, 3]

    def test_concat(self):
        assert concat([1, 2], [3]) == [1, 2, 3]
        assert concat((1,), [2]) == (1, 2)
        assert concat([], []) == []

    def test_interleave(self):
        assert interleave([1, 2, 3], ["a", "b"]) == [1, "a", 2, "b"]
        assert interleave([], [1]) == []

    def test_interpose(self):
        assert interpose([1, 2, 3], 0) == [1, 0, 2, 0, 3]
        assert interpose([1], 0) == [1]
        assert interpose("abc", "-") == "a-b-c"

    def test_interpose_empty(self):
        assert interpose([], 0) == []

    def test_string_with_non_string_items_gives_list(self):
        assert cons("bc", 1) == [1, "b", "c"]
        assert conj("ab", 3) == ["a", "b", 3]
        assert concat("ab", [1]) == ["a", "b", 1]
        assert interleave("ab", [1, 2]) == ["a", 1, "b", 2]
        assert interpose("abc", 0) == ["a", 0, "b", 0, "c"]

    def test_string_with_string_items_stays_string(self):
        assert cons("bc", "a") == "abc"
        assert concat("ab", ["c", "d"]) == "abcd"
        assert interleave("ac", "bd") == "abcd"
