import suite
from collections import namedtuple
from dgen import from_schema
from ranqy import R, iota, from_mapping, keys, values, pipe, ConstructionError

test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises

Person = namedtuple('Person', ['name', 'age', 'city'])

sample_people = [
    Person('alice', 25, 'nyc'),
    Person('bob', 30, 'la'),
    Person('charlie', 25, 'nyc'),
]

triples = [(1, 2, 3), (4, 5, 6), (7, 8, 9)]
prices = {'apple': 3, 'pear': 5, 'plum': 2}

record_schema = {
    'name': 'first_name',
    'score': ('pyint', {'min_value': 0, 'max_value': 100}),
}


# elements() tests

@test("elements projects one tuple component")
def test_elements_basic():
    assert_that(R(triples).elements(1).to.list() == [2, 5, 8], "should take the middle component")
    assert_that(R(triples).elements(0).to.list() == [1, 4, 7], "should take the first component")


@test("elements works on named tuples")
def test_elements_namedtuple():
    names = R(sample_people).elements(0).to.list()
    assert_that(names == ['alice', 'bob', 'charlie'], f"should project names: {names}")


@test("elements rejects an index past the known width")
def test_elements_out_of_range():
    assert_raises(ConstructionError, lambda: R(triples).elements(3), "index 3 of a 3-tuple")
    assert_raises(ConstructionError, lambda: R(prices).elements(2), "index 2 of a pair")
    assert_raises(ConstructionError, lambda: R(triples).elements(-1), "negative index")


@test("elements with an unknown width fails only when read")
def test_elements_unknown_arity():
    squares = iota(0, 3).select(lambda n: (n, n * n))
    assert_that(squares.elements(1).to.list() == [0, 1, 4], "should project the squares")
    too_far = squares.elements(5)
    assert_raises(IndexError, too_far.to.list, "short tuples fail on read")


@test("elements over generated records")
def test_elements_generated():
    rows = from_schema(record_schema, seed=9).select(lambda r: (r['name'], r['score'])).take(8)
    scores = rows.elements(1).to.list()
    names = rows.elements(0).to.list()
    assert_that(len(scores) == 8 and all(0 <= s <= 100 for s in scores), f"unexpected scores: {scores}")
    assert_that(all(isinstance(n, str) and n for n in names), f"unexpected names: {names}")


@test("keys and values of generated records turned into a mapping")
def test_keys_values_generated():
    records = from_schema(record_schema, seed=10).take(5).to.list()
    board = {r['name']: r['score'] for r in records}
    assert_that(set(keys(board).to.list()) == set(board), "keys of the board")
    assert_that(sorted(values(board).to.list()) == sorted(board.values()), "values of the board")


@test("elements keeps the source live")
def test_elements_live():
    data = [(1, 'a'), (2, 'b')]
    view = R(data).elements(1)
    data[1] = (2, 'z')
    assert_that(view.to.list() == ['a', 'z'], "replacement should show through")


@test("elements is reversible over a sequence")
def test_elements_reverse():
    assert_that(R(triples).elements(2).reverse().to.list() == [9, 6, 3], "should reverse the projection")


# keys() / values() tests

@test("keys and values project a mapping's pairs")
def test_keys_values():
    assert_that(set(keys(prices).to.list()) == set(prices), "keys should match")
    assert_that(sorted(values(prices).to.list()) == [2, 3, 5], "values should match")


@test("keys and values enumerate in the same order")
def test_keys_values_aligned():
    # order itself is left to the mapping; only the pairing is asserted
    paired = set(zip(keys(prices), values(prices)))
    assert_that(paired == set(prices.items()), f"keys and values should line up: {paired}")


@test("keys and values are available as view methods")
def test_keys_values_methods():
    view = from_mapping(prices)
    assert_that(set(view.keys().to.list()) == set(prices), "keys method")
    assert_that(set(view.values().to.list()) == set(prices.values()), "values method")


@test("keys see entries added before iteration")
def test_keys_live():
    data = {'a': 1}
    view = keys(data)
    data['b'] = 2
    assert_that(set(view.to.list()) == {'a', 'b'}, "new key should be visible")


@test("keys over enumerate gives the indices")
def test_keys_of_enumerate():
    assert_that(R('xyz').enumerate().keys().to.list() == [0, 1, 2], "indices from enumerate")


@test("projection pipes")
def test_projection_pipes():
    pairs = [(1, 'a'), (2, 'b')]
    assert_that((pairs | pipe.elements(1)).to.list() == ['a', 'b'], "elements pipe")
    assert_that(set((prices | pipe.keys()).to.list()) == set(prices), "keys pipe")
    assert_that(sorted((prices | pipe.values()).to.list()) == [2, 3, 5], "values pipe")


if __name__ == "__main__":
    suite.run(title="ranqy projection test suite")
