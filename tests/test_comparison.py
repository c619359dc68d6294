import pytest

from cmmlang.arithmetic import OperationError
from cmmlang.comparison import (
    equal,
    greater,
    greater_equal,
    less,
    less_equal,
    logical_and,
    logical_not,
    logical_or,
    not_equal,
)
from cmmlang.values import ConversionError, ValueObject, ValueType


def i(n):
    return ValueObject(ValueType.INTEGER, n)


def r(x):
    return ValueObject(ValueType.REAL, x)


def s(t):
    return ValueObject(ValueType.STRING, t)


def b(flag):
    return ValueObject(ValueType.BOOL, flag)


def c(z):
    return ValueObject(ValueType.COMPLEX, z)


ANY = ValueObject(ValueType.ANY, None)


def test_equal_integers():
    assert equal(i(3), i(3)) == ValueObject(ValueType.BOOL, True)
    assert equal(i(3), i(4)) == ValueObject(ValueType.BOOL, False)


def test_equal_promotes_integer_to_real():
    assert equal(i(2), r(2.0)).value is True
    assert equal(i(2), r(2.5)).value is False


def test_equal_promotes_to_complex():
    assert equal(r(1.0), c(complex(1, 0))).value is True
    assert equal(r(1.0), c(complex(1, 1))).value is False


def test_equal_strings_compare_content():
    assert equal(s("abc"), s("abc")).value is True
    assert equal(s("abc"), s("abd")).value is False


def test_equal_integer_and_string_uses_text():
    assert equal(i(12), s("12")).value is True


def test_equal_bools():
    assert equal(b(True), b(True)).value is True
    assert equal(b(True), b(False)).value is False


def test_not_equal_strings_compare_length():
    assert not_equal(s("ab"), s("cd")).value is False
    assert not_equal(s("ab"), s("abc")).value is True


def test_not_equal_numbers():
    assert not_equal(i(1), i(2)).value is True
    assert not_equal(r(1.5), r(1.5)).value is False


def test_string_ordering_by_length():
    assert greater(s("zz"), s("aaa")).value is False
    assert less(s("zz"), s("aaa")).value is True
    assert greater_equal(s("ab"), s("xy")).value is True
    assert less_equal(s("abc"), s("x")).value is False


def test_bool_ordering():
    assert greater(b(True), b(False)).value is True
    assert less(b(True), b(False)).value is False


@pytest.mark.parametrize("left,right", [
    (i(1), i(2)), (i(5), r(2.5)), (r(-1.0), r(-1.0)), (b(True), i(0)),
])
def test_ordering_invariants(left, right):
    assert greater(left, right).value == less(right, left).value
    assert greater_equal(left, right).value == less_equal(right, left).value
    assert greater_equal(left, right).value == (
        greater(left, right).value or equal(left, right).value
    )
    assert not_equal(left, right).value == (not equal(left, right).value)


def test_comparison_results_are_bool_typed():
    for op in (equal, not_equal, greater, less, greater_equal, less_equal):
        assert op(i(1), r(2.0)).type is ValueType.BOOL


def test_comparison_with_void_raises_operation_error():
    with pytest.raises(OperationError) as info:
        equal(ValueObject.void(), i(1))
    assert '"^"' in str(info.value)


def test_ordering_with_void_raises_operation_error():
    with pytest.raises(OperationError):
        less(i(1), ValueObject.void())


def test_any_against_any_is_false():
    assert equal(ANY, ANY) == ValueObject(ValueType.BOOL, False)


def test_integer_against_any_cannot_convert():
    with pytest.raises(ConversionError):
        equal(i(1), ANY)


def test_logical_or_and():
    assert logical_or(i(0), s("x")).value is True
    assert logical_or(i(0), r(0.0)).value is False
    assert logical_and(i(2), b(True)).value is True
    assert logical_and(i(2), s("")).value is False


def test_logical_not():
    assert logical_not(i(0)) == ValueObject(ValueType.BOOL, True)
    assert logical_not(s("text")).value is False
    assert logical_not(c(complex(0, 1))).value is False


def test_logical_with_void_raises_conversion_error():
    with pytest.raises(ConversionError):
        logical_and(ValueObject.void(), b(True))
    with pytest.raises(ConversionError):
        logical_not(ValueObject.void())