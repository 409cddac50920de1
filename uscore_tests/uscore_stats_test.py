import sys
import math
import suite
from decimal import Decimal
from dgen import from_schema
from uscore import create, empty, EmptyContainer, TypeCoercionFailure

test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises

order_schema = {
    'order_id': 'uuid4',
    'quantity': ('pyint', {'min_value': 1, 'max_value': 20}),
}


# --- sum / product ---

@test("sum adds values as floats")
def test_sum():
    total = create([1, 2, 3, 4]).sum()
    assert_that(total == 10, f"got {total}")
    assert_that(isinstance(total, float), "result should be a float")


@test("product multiplies values as floats")
def test_product():
    result = create([1, 2, 3]).product()
    assert_that(result == 6, f"got {result}")
    assert_that(isinstance(result, float), "result should be a float")


@test("sum and product of nothing are their identities")
def test_empty_reductions():
    assert_that(empty().sum() == 0.0, "empty sum is 0")
    assert_that(empty().product() == 1.0, "empty product is 1")


@test("numeric-like values are coerced")
def test_coercion():
    mixed = create(['1.5', 2, True, Decimal('0.5')])
    assert_that(math.isclose(mixed.sum(), 5.0), f"got {mixed.sum()}")
    assert_that(math.isclose(create({'a': '2', 'b': 3.5}).product(), 7.0), "mapping values")


@test("non-numeric values raise TypeCoercionFailure")
def test_coercion_failure():
    error = assert_raises(TypeCoercionFailure, lambda: create([1, 'abc', 3]).sum())
    assert_that(error.key == 1 and error.value == 'abc', "error should point at the bad entry")
    assert_that(isinstance(error, TypeError), "should also be a TypeError")
    assert_raises(TypeCoercionFailure, lambda: create([1, None]).product())
    assert_raises(TypeCoercionFailure, lambda: create([[1]]).sum())


@test("sum matches a hand-rolled total on generated orders")
def test_sum_generated():
    orders = from_schema(order_schema, seed=99).take(25)
    quantities = orders.map(lambda o: o['quantity'])
    expected = 0
    for q in quantities.to.list():
        expected += q
    assert_that(quantities.sum() == expected, f"expected {expected}, got {quantities.sum()}")


# --- max / min ---

@test("max returns the value with the largest computed key")
def test_max():
    assert_that(create(['1', 'two', 'three']).max(len) == 'three', "longest string")


@test("min returns the value with the smallest computed key")
def test_min():
    assert_that(create(['tree', 'two', '1']).min(len) == '1', "shortest string")


@test("max and min keep the first value on ties")
def test_extremum_ties():
    words = create(['aa', 'bb', 'c', 'dd', 'e'])
    assert_that(words.max(len) == 'aa', "first of the longest")
    assert_that(words.min(len) == 'c', "first of the shortest")


@test("max and min default to the values themselves")
def test_extremum_identity():
    assert_that(create([3, 9, 1]).max() == 9, "largest value")
    assert_that(create([3, 9, 1]).min() == 1, "smallest value")


@test("max and min on an empty container raise EmptyContainer")
def test_extremum_empty():
    error = assert_raises(EmptyContainer, lambda: empty().max(len))
    assert_that(error.operation == 'max', "error should name the operation")
    assert_that(isinstance(error, ValueError), "should also be a ValueError")
    assert_raises(EmptyContainer, lambda: empty().min(len))


if __name__ == "__main__":
    sys.exit(suite.run(title="uscore stats test suite"))
