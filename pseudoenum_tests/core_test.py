import re
import suite
from pseudoenum import P, filter_by, transform, generator, from_iterable, InvalidArgumentError
from records import people

test = suite.test
assert_that = suite.assert_that
raises = suite.raises

# helper data
numbers = P(range(1, 11))  # 1 through 10
words = P(['apple', 'banana', 'cherry', 'date', 'elderberry'])


def _boom(_):
    raise RuntimeError("callable should not have run yet")


# filter_by() tests

@test("filter_by keeps matching elements in order")
def test_filter_by_basic():
    evens = filter_by([1, 2, 3, 4], lambda x: x % 2 == 0)
    assert_that(list(evens) == [2, 4], "should keep 2 and 4")

    fluent = numbers.filter_by(lambda x: x % 2 == 0).to.list()
    assert_that(fluent == [2, 4, 6, 8, 10], f"should filter even numbers: {fluent}")


@test("filter_by length equals the number of matching elements")
def test_filter_by_count():
    records = people(40)
    active = filter_by(records, lambda p: p['active']).to.list()
    expected = [p for p in records if p['active']]
    assert_that(active == expected, "should match a plain comprehension, order included")
    assert_that(len(active) == sum(1 for p in records if p['active']), "length should equal match count")


@test("filter_by handles empty result and empty source")
def test_filter_by_empty():
    assert_that(numbers.filter_by(lambda x: x > 100).to.list() == [], "no element matches")
    assert_that(filter_by([], lambda x: True).to.list() == [], "empty source stays empty")


@test("filter_by with regex pattern")
def test_filter_by_regex():
    text = P(['apple123', 'banana', 'cherry456', 'date', '789elderberry'])
    with_digits = text.filter_by(lambda x: bool(re.search(r'\d', x))).to.list()
    assert_that(with_digits == ['apple123', 'cherry456', '789elderberry'], f"unexpected: {with_digits}")


@test("filter_by does not call the predicate until iterated")
def test_filter_by_is_lazy():
    result = filter_by([1, 2, 3], _boom)
    with raises(RuntimeError, "predicate should run on iteration"):
        list(result)


@test("filter_by visits each element once per traversal")
def test_filter_by_single_visit():
    seen = []
    result = filter_by([1, 2, 3, 4], lambda x: seen.append(x) or x > 2)
    assert_that(seen == [], "nothing visited before iteration")
    assert_that(list(result) == [3, 4], "first traversal")
    assert_that(seen == [1, 2, 3, 4], f"each element visited once: {seen}")
    assert_that(list(result) == [3, 4], "second traversal yields the same")
    assert_that(len(seen) == 8, "a second traversal visits the source again")


@test("filter_by stops pulling once the consumer stops")
def test_filter_by_partial_consumption():
    seen = []
    iterator = iter(filter_by(range(100), lambda x: seen.append(x) or True))
    assert_that(next(iterator) == 0 and next(iterator) == 1, "first two elements")
    assert_that(seen == [0, 1], f"only two elements pulled: {seen}")


@test("filter_by rejects absent arguments immediately")
def test_filter_by_validation():
    with raises(InvalidArgumentError) as caught:
        filter_by(None, lambda x: True)
    assert_that(caught.error.argument == "source", "should name the source")

    with raises(InvalidArgumentError) as caught:
        filter_by([1, 2], None)
    assert_that(caught.error.argument == "predicate", "should name the predicate")

    with raises(ValueError, "invalid argument is also a ValueError"):
        numbers.filter_by(None)

    with raises(InvalidArgumentError, "a non-iterable source is rejected"):
        filter_by(42, lambda x: True)


@test("filter_by keeps a known element type")
def test_filter_by_element_type():
    assert_that(generator(5, 0).filter_by(lambda x: x > 1).element_type is int, "int survives filtering")


# transform() tests

@test("transform applies the transformer to every element")
def test_transform_basic():
    squares = numbers.transform(lambda x: x * x).to.list()
    assert_that(squares == [1, 4, 9, 16, 25, 36, 49, 64, 81, 100], "should square all numbers")
    assert_that(list(transform(words, len)) == [5, 6, 6, 4, 10], "should map to lengths")


@test("transform preserves order and cardinality")
def test_transform_cardinality():
    records = people(25)
    names = transform(records, lambda p: p['name']).to.list()
    assert_that(len(names) == len(records), "same number of elements")
    for i, record in enumerate(records):
        assert_that(names[i] == record['name'], f"element {i} should be the transformed source element")


@test("transform does not call the transformer until iterated")
def test_transform_is_lazy():
    calls = []
    result = transform([1, 2, 3], lambda x: calls.append(x) or x * 10)
    assert_that(calls == [], "transformer not called at construction")
    iterator = iter(result)
    assert_that(next(iterator) == 10, "first element")
    assert_that(calls == [1], "transformer called once per consumed element")

    with raises(RuntimeError):
        list(transform([1], _boom))


@test("transform drops the element type")
def test_transform_element_type():
    assert_that(generator(3).transform(str).element_type is None, "result type is unknown")


@test("transform rejects absent arguments immediately")
def test_transform_validation():
    with raises(InvalidArgumentError):
        transform(None, str)
    with raises(InvalidArgumentError) as caught:
        transform([1], None)
    assert_that(caught.error.argument == "transformer", "should name the transformer")
    with raises(InvalidArgumentError):
        transform([1], "not callable")


@test("operators chain into each other")
def test_chaining():
    records = people(30)
    result = (from_iterable(records)
              .filter_by(lambda p: p['age'] >= 30)
              .transform(lambda p: p['age'])
              .sort_by(lambda age: age)
              .to.list())
    assert_that(result == sorted(p['age'] for p in records if p['age'] >= 30), f"unexpected: {result}")

    free = list(transform(filter_by(range(10), lambda x: x % 3 == 0), lambda x: -x))
    assert_that(free == [0, -3, -6, -9], "free functions accept each other's output")


if __name__ == "__main__":
    suite.main(title="pseudoenum filter/transform test suite")
