import pytest

from shamir_recover import DivisionByZero, NonIntegralResult, Rational


def test_normalization():
    r = Rational(6, -8)
    assert (r.numerator, r.denominator) == (-3, 4)
    assert Rational(0, -5) == Rational(0)
    assert Rational(0, 7).denominator == 1
    assert Rational(-4, -2) == Rational(2)


def test_equality_and_hash():
    assert Rational(1, 2) == Rational(2, 4)
    assert hash(Rational(1, 2)) == hash(Rational(-3, -6))
    assert len({Rational(1, 3), Rational(2, 6), Rational(3, 9)}) == 1


def test_arithmetic():
    a = Rational(1, 2)
    b = Rational(1, 3)
    assert a.add(b) == Rational(5, 6)
    assert a.subtract(b) == Rational(1, 6)
    assert a.multiply(b) == Rational(1, 6)
    assert a.divide(b) == Rational(3, 2)
    assert a.negate() == Rational(-1, 2)


def test_operators_accept_ints():
    a = Rational(3, 4)
    assert a + 1 == Rational(7, 4)
    assert 1 - a == Rational(1, 4)
    assert 2 * a == Rational(3, 2)
    assert 3 / a == Rational(4)
    assert -a == Rational(-3, 4)


def test_immutable():
    r = Rational(1, 2)
    with pytest.raises(AttributeError):
        r.numerator = 5  # type: ignore[misc]
    r + Rational(1, 2)
    assert r == Rational(1, 2)


def test_zero_denominator():
    with pytest.raises(DivisionByZero):
        Rational(1, 0)
    with pytest.raises(ZeroDivisionError):
        Rational(1, 2).divide(Rational(0, 3))


def test_to_integer_is_checked():
    assert Rational(10, 5).to_integer() == 2
    assert Rational(-9, 3).to_integer() == -3
    assert Rational(12, 4).is_integer()
    with pytest.raises(NonIntegralResult):
        Rational(7, 2).to_integer()


def test_large_values_stay_exact():
    big = 10**400 + 7
    r = Rational(big, 3) * Rational(3, big)
    assert r == Rational(1)


def test_rejects_floats():
    with pytest.raises(TypeError):
        Rational(1, 2) + 0.5  # type: ignore[operator]


@pytest.mark.parametrize("args", [(1.5,), (7, 2.9), ("3",), (True,), (1, False)])
def test_constructor_rejects_non_ints(args):
    with pytest.raises(TypeError):
        Rational(*args)


def test_integral_values_equal_ints():
    assert Rational(6, 2) == 3
    assert 3 == Rational(6, 2)
    assert Rational(7, 2) != 3
    assert hash(Rational(10, 5)) == hash(2)
    assert {Rational(4, 2), 2} == {2}
    assert Rational(1) != True  # noqa: E712


def test_huge_operands_keep_error_types():
    huge = 10**5000 + 1
    with pytest.raises(NonIntegralResult) as info:
        Rational(huge, 2).to_integer()
    assert info.value.numerator == huge
    assert "bit integer" in str(info.value)
    with pytest.raises(DivisionByZero):
        Rational(huge, 3) / 0
    with pytest.raises(DivisionByZero):
        Rational(huge, 0)
