import suite
import numpy as np
import pandas as pd
from ranqy import (
    R, iota, generate, materialize, materialize_text, materialize_nested,
    configure, get_options, options, ConstructionError
)

test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises

# helper data
numbers = [1, 2, 3, 4, 5]
words = ['apple', 'banana', 'cherry']


def counting_source():
    """an unbounded view that records every element it produces"""
    calls = []

    def rule():
        calls.append(len(calls))
        return len(calls)

    return generate(rule), calls


# unbounded rejection tests

@test("materializers refuse unbounded views before pulling anything")
def test_unbounded_rejected():
    view, calls = counting_source()
    assert_raises(ConstructionError, lambda: materialize(view), "materialize")
    assert_raises(ConstructionError, lambda: materialize_text(view.select(str)), "materialize_text")
    assert_raises(ConstructionError, lambda: materialize_nested(view.select(lambda n: [n])), "materialize_nested")
    assert_that(calls == [], f"no element should have been produced: {calls}")


@test("draining accessors refuse unbounded views before pulling anything")
def test_unbounded_rejected_accessors():
    view, calls = counting_source()
    for name, drain in [
        ('list', view.to.list),
        ('set', view.to.set),
        ('count', view.to.count),
        ('dict', view.select(lambda n: (n, n)).to.dict),
        ('array', view.to.array),
        ('typed array', lambda: view.to.array(dtype=int)),
        ('pandas', view.to.pandas),
        ('df', view.to.df),
        ('all', lambda: view.to.all(lambda n: n > 0)),
        ('aggregate', lambda: view.to.aggregate(lambda a, b: a + b)),
    ]:
        assert_raises(ConstructionError, drain, f"{name} should refuse")
    assert_that(calls == [], f"no element should have been produced: {calls}")


@test("the refusal points at take and take_while")
def test_unbounded_message():
    error = assert_raises(ConstructionError, iota(0).to.list, "iota(0) is unbounded")
    assert_that('take' in str(error), f"message should suggest bounding: {error}")


@test("short-circuiting accessors work on unbounded views")
def test_short_circuit_unbounded():
    assert_that(iota(5).to.first() == 5, "first of iota(5)")
    assert_that(iota(0).to.first(lambda n: n > 10) == 11, "first matching")
    assert_that(iota(0).to.any(), "iota has elements")
    assert_that(iota(0).to.any(lambda n: n == 1000), "any stops at the hit")


# list / text / nested tests

@test("materialize accepts plain iterables")
def test_materialize_plain():
    assert_that(materialize(numbers) == numbers, "list in, equal list out")
    assert_that(materialize(numbers) is not numbers, "a new list is built")
    assert_that(materialize("ab") == ['a', 'b'], "strings become characters")


@test("materialize_text concatenates strings")
def test_materialize_text():
    assert_that(R(words).to.text() == "applebananacherry", "no separator by default")
    assert_that(R(words).to.text(", ") == "apple, banana, cherry", "explicit separator")
    assert_that(materialize_text(R([])) == "", "empty view gives empty text")


@test("materialize_text needs string elements")
def test_materialize_text_types():
    assert_raises(TypeError, R(numbers).to.text, "integers cannot be joined")
    assert_that(R(numbers).select(str).to.text("+") == "1+2+3+4+5", "select str first")


@test("the text separator default can be overridden")
def test_text_separator_option():
    with options(text_separator='/'):
        assert_that(R(words).to.text() == "apple/banana/cherry", "option separator")
        assert_that(R(words).to.text("") == "applebananacherry", "explicit argument wins")
    assert_that(R(words).to.text() == "applebananacherry", "option restored after the block")


@test("configure changes options for the process")
def test_configure():
    previous = get_options()
    try:
        updated = configure(text_separator='-')
        assert_that(updated.text_separator == '-', "configure returns the new options")
        assert_that(R(words).to.text() == "apple-banana-cherry", "new default in effect")
    finally:
        configure(text_separator=previous.text_separator)
    assert_that(get_options().text_separator == previous.text_separator, "restored")


@test("configure rejects unknown option names")
def test_configure_unknown():
    assert_raises(ValueError, lambda: configure(no_such_option=True), "unknown name")
    assert_raises(ValueError, lambda: options(no_such_option=True).__enter__(), "unknown name in a block")


# numpy / pandas tests

@test("array converts to numpy")
def test_array():
    arr = R(numbers).select(lambda x: x * 2).to.array()
    assert_that(isinstance(arr, np.ndarray), "should be an ndarray")
    assert_that(arr.tolist() == [2, 4, 6, 8, 10], f"unexpected values: {arr}")


@test("array with a dtype streams into the array")
def test_array_dtype():
    arr = iota(0).take(4).to.array(dtype=float)
    assert_that(arr.dtype == np.float64, f"unexpected dtype: {arr.dtype}")
    assert_that(arr.tolist() == [0.0, 1.0, 2.0, 3.0], f"unexpected values: {arr}")


@test("pandas converts to a series")
def test_pandas():
    series = R(numbers).where(lambda x: x > 2).to.pandas()
    assert_that(isinstance(series, pd.Series), "should be a series")
    assert_that(series.tolist() == [3, 4, 5], f"unexpected values: {series.tolist()}")


@test("df converts records to a dataframe")
def test_df():
    records = [{'name': 'alice', 'age': 25}, {'name': 'bob', 'age': 30}]
    frame = R(records).to.df()
    assert_that(isinstance(frame, pd.DataFrame), "should be a dataframe")
    assert_that(list(frame.columns) == ['name', 'age'], f"unexpected columns: {list(frame.columns)}")
    assert_that(frame['age'].sum() == 55, "ages should sum to 55")


# set / dict / count / any / all tests

@test("set and dict collect elements")
def test_set_dict():
    assert_that(R([1, 2, 2, 3]).to.set() == {1, 2, 3}, "duplicates collapse")
    assert_that(R({'a': 1, 'b': 2}).to.dict() == {'a': 1, 'b': 2}, "pairs round-trip through dict")
    lengths = R(words).to.dict(value_selector=len)
    assert_that(lengths == {'apple': 5, 'banana': 6, 'cherry': 6}, f"unexpected dict: {lengths}")
    initials = R(words).to.dict(key_selector=lambda w: w[0])
    assert_that(initials == {'a': 'apple', 'b': 'banana', 'c': 'cherry'}, f"unexpected dict: {initials}")


@test("dict builds from any view of pairs")
def test_dict_from_pairs():
    # views have a keys() method, which must not make dict() treat them as mappings
    assert_that(R('ab').enumerate().to.dict() == {0: 'a', 1: 'b'}, "enumerate pairs")
    swapped = R({'a': 1, 'b': 2}).select(lambda kv: (kv[1], kv[0])).to.dict()
    assert_that(swapped == {1: 'a', 2: 'b'}, f"selected pairs: {swapped}")


@test("count with and without a predicate")
def test_count():
    assert_that(R(numbers).to.count() == 5, "five elements")
    assert_that(R(numbers).to.count(lambda x: x % 2 == 0) == 2, "two evens")
    assert_that(R([]).to.count() == 0, "empty count is zero")


@test("any and all")
def test_any_all():
    assert_that(R(numbers).to.any(lambda x: x > 4), "5 is greater than 4")
    assert_that(not R(numbers).to.any(lambda x: x > 5), "nothing greater than 5")
    assert_that(not R([]).to.any(), "empty has nothing")
    assert_that(R(numbers).to.all(lambda x: x > 0), "all positive")
    assert_that(not R(numbers).to.all(lambda x: x > 1), "1 is not greater than 1")


# first / aggregate tests

@test("first and first_or_default")
def test_first():
    assert_that(R(numbers).to.first() == 1, "first element")
    assert_that(R(numbers).to.first(lambda x: x > 3) == 4, "first matching")
    assert_raises(ValueError, R([]).to.first, "empty view has no first")
    assert_raises(ValueError, lambda: R(numbers).to.first(lambda x: x > 9), "no match")
    assert_that(R([]).to.first_or_default(default=-1) == -1, "default for empty")
    assert_that(R(numbers).to.first_or_default(lambda x: x > 9) is None, "None default")


@test("aggregate folds the elements")
def test_aggregate():
    assert_that(R(numbers).to.aggregate(lambda a, b: a + b) == 15, "sum without seed")
    assert_that(R(numbers).to.aggregate(lambda a, b: a + b, 10) == 25, "sum with seed")
    assert_that(R(words).to.aggregate(lambda a, w: a + len(w), 0) == 17, "fold to a different type")
    assert_raises(ValueError, lambda: R([]).to.aggregate(lambda a, b: a + b), "empty without seed")


if __name__ == "__main__":
    suite.run(title="ranqy terminal operations test suite")
