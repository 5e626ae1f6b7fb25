import suite
from seqops import for_each, for_each_with_index, seq, once, empty

test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises


@test("for_each runs the action on every element in order")
def test_for_each_basic():
    results = []
    returned = for_each([1, 2, 3, 4], lambda x: results.append(x * 2))
    assert_that(results == [2, 4, 6, 8], f"got {results}")
    assert_that(returned is None, "for_each should return nothing")


@test("for_each on empty source never calls the action")
def test_for_each_empty():
    calls = []
    for_each([], calls.append)
    for_each(empty(), calls.append)
    assert_that(calls == [], "action should not run")


@test("for_each propagates action errors immediately")
def test_for_each_error():
    seen = []

    def action(x):
        if x == 2:
            raise ValueError("bad element")
        seen.append(x)

    with assert_raises(ValueError) as caught:
        for_each([1, 2, 3], action)
    assert_that(str(caught['error']) == "bad element", "original error should surface unchanged")
    assert_that(seen == [1], f"got {seen}")


@test("for_each_with_index passes zero-based positions")
def test_for_each_with_index():
    pairs = []
    for_each_with_index(['a', 'b', 'c'], lambda x, i: pairs.append((x, i)))
    assert_that(pairs == [('a', 0), ('b', 1), ('c', 2)], f"got {pairs}")


@test("for_each_with_index needs only one pass")
def test_for_each_with_index_single_pass():
    pairs = []
    for_each_with_index(iter(['x', 'y']), lambda x, i: pairs.append((i, x)))
    assert_that(pairs == [(0, 'x'), (1, 'y')], f"got {pairs}")


@test("util accessor runs for_each eagerly at the end of a chain")
def test_util_for_each():
    results = []
    chain = seq(range(10)).without(lambda x: x % 3).take_last(2)
    assert_that(chain.util.for_each(results.append) is None, "should return nothing")
    assert_that(results == [6, 9], f"got {results}")


@test("util accessor for_each_with_index works on single-pass enumerables")
def test_util_for_each_with_index():
    pairs = []
    once(iter("ab")).util.for_each_with_index(lambda x, i: pairs.append(f"{i}:{x}"))
    assert_that(pairs == ["0:a", "1:b"], f"got {pairs}")


if __name__ == "__main__":
    suite.run(title="seqops actions test suite")
