import suite
from suite import assert_equal
from lazyq import pipe, zip, interleave, iter, iterate, repeatedly, take, map, into_list, into_dict, inc


# zip() tests

@suite.test("zip pairs elements up to the shortest source")
def test_zip_shortest_wins():
    result = into_list(zip([1, 2, 3], ['a', 'b', 'c', 'd', 'e']))
    assert_equal(result, [(1, 'a'), (2, 'b'), (3, 'c')], "shorter first")
    result = into_list(zip("abcde", [1, 2, 3]))
    assert_equal(result, [('a', 1), ('b', 2), ('c', 3)], "shorter last")


@suite.test("zip accepts any number of mixed sources")
def test_zip_many_sources():
    result = into_list(zip(range(3), "xyz", iterate(inc, 10), {'k': 1, 'j': 2, 'i': 3}))
    expected = [(0, 'x', 10, ('k', 1)), (1, 'y', 11, ('j', 2)), (2, 'z', 12, ('i', 3))]
    assert_equal(result, expected, "four sources")
    assert_equal(into_list(zip([1, 2])), [(1,), (2,)], "single source")
    assert_equal(into_list(zip()), [], "no sources")
    assert_equal(into_list(zip([1, 2], None)), [], "absent source is empty")


@suite.test("zip discards the partial step that hits the end")
def test_zip_partial_step():
    long_source = iter([1, 2, 3, 4])
    result = into_list(zip(long_source, [10, 20]))
    assert_equal(result, [(1, 10), (2, 20)], "two full steps")
    # the third value was pulled on the exhausting step and dropped with it
    assert_equal(into_list(long_source), [4], "what is left of the long source")


@suite.test("zip of infinite sources is bounded by take")
def test_zip_infinite():
    counter = iter(range(100))
    result = pipe(zip(iterate(inc, 0), repeatedly(lambda: next(counter))), take(3), into_list)
    assert_equal(result, [(0, 0), (1, 1), (2, 2)], "lock-step")
    assert_equal(next(counter), 3, "only three steps were pulled")


@suite.test("zip feeds into_dict")
def test_zip_into_dict():
    assert_equal(into_dict(zip("abc", range(3))), {'a': 0, 'b': 1, 'c': 2}, "keys and values")


# interleave() tests

@suite.test("interleave alternates sources up to the shortest")
def test_interleave():
    result = into_list(interleave([1, 2, 3], ['a', 'b', 'c', 'd', 'e']))
    assert_equal(result, [1, 'a', 2, 'b', 3, 'c'], "two sources")
    result = into_list(interleave("ab", "cd", "ef"))
    assert_equal(result, ['a', 'c', 'e', 'b', 'd', 'f'], "three sources")
    assert_equal(into_list(interleave([1], [])), [], "an empty source ends it at once")
    assert_equal(into_list(interleave()), [], "no sources")


@suite.test("interleave reads list sources once, not from the start every step")
def test_interleave_normalizes_once():
    result = into_list(interleave([1, 2], iterate(inc, 100)))
    assert_equal(result, [1, 100, 2, 101], "list progresses across steps")


@suite.test("interleave is lazy")
def test_interleave_lazy():
    result = pipe(interleave(iterate(inc, 0), iterate(lambda x: x - 1, -1)), map(abs), take(5), into_list)
    assert_equal(result, [0, 1, 1, 2, 2], "infinite sources")


if __name__ == "__main__":
    suite.run(title="lazyq zip and interleave test suite")
