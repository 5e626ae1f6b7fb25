import suite
from dgen import from_schema
from seqops import (
    sort, sort_with, natural_compare, SortOption, SourceNotRestartableError, generate, seq, once
)

test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises

person_schema = {
    'name': 'first_name',
    'age': ('pyint', {'min_value': 18, 'max_value': 65})
}


class Keyed:
    """orders by key only, so equal keys with different labels expose stability"""

    def __init__(self, key, label):
        self.key = key
        self.label = label

    def __lt__(self, other):
        return self.key < other.key

    def __gt__(self, other):
        return self.key > other.key

    def __repr__(self):
        return f"{self.label}{self.key}"


# sort() tests

@test("sort orders ascending by default")
def test_sort_ascending():
    result = sort([5, 3, 1, 4, 2])
    assert_that(result == [1, 2, 3, 4, 5], f"got {result}")
    assert_that(sort([5, 3, 1, 4, 2], SortOption.ASCENDING) == result, "explicit ascending should match")


@test("sort orders descending")
def test_sort_descending():
    result = sort([5, 3, 1, 4, 2], SortOption.DESCENDING)
    assert_that(result == [5, 4, 3, 2, 1], f"got {result}")


@test("sort option default is ascending")
def test_sort_option_default():
    assert_that(SortOption.DEFAULT is SortOption.ASCENDING, "default should alias ascending")
    assert_that(SortOption.ASCENDING.multiplier == 1, "ascending multiplier should be 1")
    assert_that(SortOption.DESCENDING.multiplier == -1, "descending multiplier should be -1")
    assert_that(sort([2, 1], 1) == [2, 1], "plain ints should be accepted as options")


@test("sort rejects unknown options")
def test_sort_bad_option():
    with assert_raises(ValueError):
        sort([1, 2], 7)


@test("sort returns a new list and leaves the source alone")
def test_sort_copies():
    data = [3, 1, 2]
    result = sort(data)
    assert_that(isinstance(result, list), "should return a list")
    assert_that(data == [3, 1, 2], "source should be untouched")
    result.append(99)
    assert_that(data == [3, 1, 2], "result should not alias the source")


@test("sort handles empty and single element sources")
def test_sort_small():
    assert_that(sort([]) == [], "empty should stay empty")
    assert_that(sort([7], SortOption.DESCENDING) == [7], "single element should be returned")
    assert_that(sort_with([], lambda a, b: 0) == [], "empty with comparer should stay empty")


@test("sort keeps equal elements in their original order")
def test_sort_stable():
    items = [Keyed(1, 'a'), Keyed(2, 'b'), Keyed(1, 'c'), Keyed(2, 'd')]
    ascending = [repr(x) for x in sort(items)]
    descending = [repr(x) for x in sort(items, SortOption.DESCENDING)]
    assert_that(ascending == ['a1', 'c1', 'b2', 'd2'], f"got {ascending}")
    assert_that(descending == ['b2', 'd2', 'a1', 'c1'], f"got {descending}")


@test("ascending and descending are reverses for distinct values")
def test_sort_reverse_property():
    data = [9, -2, 14, 0, 3, 7, 1]
    assert_that(sort(data) == list(reversed(sort(data, SortOption.DESCENDING))), "should be reverses")


@test("sorting twice is idempotent")
def test_sort_idempotent():
    data = [4, 4, 1, 3, 1, 2]
    once_sorted = sort(data)
    assert_that(sort(once_sorted) == once_sorted, "second sort should not change anything")
    assert_that(once_sorted == sorted(data), "should agree with sorted()")


@test("sort places None first ascending and last descending")
def test_sort_none():
    assert_that(sort([3, None, 1]) == [None, 1, 3], "None should sort as smallest")
    assert_that(sort([3, None, 1], SortOption.DESCENDING) == [3, 1, None], "None should end up last")


@test("natural_compare is three-way and treats a missing first operand as less")
def test_natural_compare():
    assert_that(natural_compare(1, 2) == -1, "1 < 2")
    assert_that(natural_compare(2, 1) == 1, "2 > 1")
    assert_that(natural_compare('b', 'b') == 0, "equal strings")
    assert_that(natural_compare(None, 1) == -1, "None first is less")
    assert_that(natural_compare(1, None) == 1, "None second is greater")
    assert_that(natural_compare(None, None) == -1, "unresolved first operand is less")


@test("sort reads a restartable source twice")
def test_sort_two_passes():
    invocations = []

    def numbers():
        invocations.append(1)
        return iter([3, 1, 2])

    result = sort(generate(numbers))
    assert_that(result == [1, 2, 3], f"got {result}")
    assert_that(len(invocations) == 2, f"expected a count pass and a copy pass, got {len(invocations)}")


@test("sort refuses single-pass sources before consuming them")
def test_sort_single_pass():
    source = iter([3, 1, 2])
    with assert_raises(SourceNotRestartableError) as caught:
        sort(source)
    assert_that(isinstance(caught['error'], TypeError), "should also be a TypeError")
    assert_that(list(source) == [3, 1, 2], "nothing should have been consumed")

    with assert_raises(SourceNotRestartableError):
        sort_with((x for x in [2, 1]), lambda a, b: a - b)
    with assert_raises(SourceNotRestartableError):
        once([2, 1]).sort()


@test("sort works on strings and other comparable elements")
def test_sort_strings():
    assert_that(sort("banana") == ['a', 'a', 'a', 'b', 'n', 'n'], "should sort characters")
    assert_that(sort(['pear', 'fig', 'apple'], SortOption.DESCENDING) == ['pear', 'fig', 'apple'],
                "should sort words descending")


# sort_with() tests

@test("sort_with uses the comparer's three-way result")
def test_sort_with_basic():
    result = sort_with([5, 3, 1, 4, 2], lambda a, b: b - a)
    assert_that(result == [5, 4, 3, 2, 1], f"got {result}")


@test("sort_with is stable for equal comparisons")
def test_sort_with_stable():
    pairs = [(1, 'a'), (0, 'b'), (1, 'c'), (0, 'd')]
    result = sort_with(pairs, lambda x, y: x[0] - y[0])
    assert_that(result == [(0, 'b'), (0, 'd'), (1, 'a'), (1, 'c')], f"got {result}")


@test("sort_with propagates comparer errors")
def test_sort_with_error():
    def broken(a, b):
        raise ArithmeticError("cannot compare")

    with assert_raises(ArithmeticError):
        sort_with([2, 1], broken)


@test("sort_with orders generated records")
def test_sort_with_records():
    people = from_schema(person_schema, seed=7).take(15)
    by_age = people.sort_with(lambda a, b: a['age'] - b['age']).to.list()
    ages = [p['age'] for p in by_age]
    assert_that(ages == sorted(ages), f"ages should be non-decreasing, got {ages}")
    assert_that(len(by_age) == 15, "no records should be lost")


@test("fluent sort materializes immediately")
def test_sort_fluent_eager():
    data = [3, 1, 2]
    ordered = seq(data).sort(SortOption.DESCENDING)
    data.append(10)
    assert_that(ordered.to.list() == [3, 2, 1], "later changes to the source should not show up")
    assert_that(ordered.to.list() == [3, 2, 1], "sorted enumerable should be restartable")


if __name__ == "__main__":
    suite.run(title="seqops ordering test suite")
