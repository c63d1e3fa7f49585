"""Test exact rational arithmetic, parsing and formatting of Fraction."""
import pickle
import pytest
from fractions import Fraction as PyFraction
from sympy import Rational
from exactsimplex import Fraction, DivisionByZero, FormatError


def test_normalization(int_pair):
    """Constructed fractions are in lowest terms with positive denominator."""
    n, d = int_pair
    f = Fraction(n, d)
    assert f.denominator > 0
    assert Fraction.gcf(abs(f.numerator), f.denominator) == 1
    assert PyFraction(f.numerator, f.denominator) == PyFraction(n, d)


def test_zero_normalizes_to_zero_over_one():
    """Test that zero is stored as 0/1."""
    for d in (1, -1, 5, -42):
        f = Fraction(0, d)
        assert (f.numerator, f.denominator) == (0, 1)


def test_sign_moves_to_numerator():
    """Test sign normalization."""
    f = Fraction(3, -6)
    assert (f.numerator, f.denominator) == (-1, 2)
    f = Fraction(-3, -6)
    assert (f.numerator, f.denominator) == (1, 2)


def test_zero_denominator():
    """Test DivisionByZero for a zero denominator."""
    with pytest.raises(DivisionByZero):
        Fraction(1, 0)
    with pytest.raises(ZeroDivisionError):
        Fraction(0, 0)


def test_non_integer_arguments():
    """Test TypeError for non-integer arguments."""
    with pytest.raises(TypeError):
        Fraction(1.5, 2)
    with pytest.raises(TypeError):
        Fraction(True, 2)


def test_immutable():
    """Test that attributes cannot be reassigned."""
    f = Fraction(1, 2)
    with pytest.raises(AttributeError):
        f._numerator = 3
    with pytest.raises(AttributeError):
        f.numerator = 3


def test_arithmetic_matches_python_fractions(fraction_pair):
    """Test arithmetic against fractions.Fraction."""
    a, b = fraction_pair
    pa, pb = PyFraction(a.numerator, a.denominator), PyFraction(b.numerator, b.denominator)
    assert a.add(b) == Fraction.value_of(pa + pb)
    assert a.subtract(b) == Fraction.value_of(pa - pb)
    assert a.multiply(b) == Fraction.value_of(pa * pb)
    if not b.is_zero():
        assert a.divide(b) == Fraction.value_of(pa / pb)


def test_arithmetic_laws(fraction_pair):
    """Test inverse and commutative laws."""
    a, b = fraction_pair
    assert a.add(b).subtract(b) == a
    assert a.multiply(b) == b.multiply(a)
    if not b.is_zero():
        assert a.multiply(b).divide(b) == a


def test_operations_do_not_mutate_operands():
    """Test that operands stay unchanged."""
    a, b = Fraction(1, 3), Fraction(1, 6)
    c = a + b
    assert c == Fraction(1, 2)
    assert (a.numerator, a.denominator) == (1, 3)
    assert (b.numerator, b.denominator) == (1, 6)


def test_divide_by_zero():
    """Test DivisionByZero for division by zero."""
    with pytest.raises(DivisionByZero):
        Fraction(3, 4).divide(Fraction(0))
    with pytest.raises(DivisionByZero):
        Fraction(3, 4) / 0
    with pytest.raises(DivisionByZero):
        Fraction.ZERO.reciprocal()


def test_operators_with_int():
    """Test operators with int operands."""
    assert Fraction(1, 2) + 1 == Fraction(3, 2)
    assert 1 - Fraction(1, 2) == Fraction(1, 2)
    assert 3 * Fraction(1, 6) == Fraction(1, 2)
    assert 1 / Fraction(2, 3) == Fraction(3, 2)
    assert -Fraction(2, 3) == Fraction(-2, 3)
    assert abs(Fraction(-2, 3)) == Fraction(2, 3)
    assert Fraction(4, 2) == 2


def test_gcf_lcm():
    """Test greatest common factor and least common multiple."""
    assert Fraction.gcf(12, 18) == 6
    assert Fraction.gcf(18, 12) == Fraction.gcf(12, 18)
    assert Fraction.gcf(7, 0) == 7
    assert Fraction.gcf(0, 7) == 7
    assert Fraction.gcf(-4, 6) == 2
    assert Fraction.gcf(17, 5) == 1
    assert Fraction.lcm(4, 6) == 12
    assert Fraction.lcm(3, 5) == 15


def test_exact_comparison():
    """Test ordering below double precision."""
    # these differ by less than double precision can resolve
    a = Fraction(10**20 + 1, 10**20)
    b = Fraction(10**20 + 2, 10**20)
    assert a.to_double() == b.to_double()
    assert a < b
    assert b > a
    assert a.compare_to(b) == -1
    assert b.compare_to(a) == 1
    assert a.compare_to(Fraction(10**20 + 1, 10**20)) == 0
    assert Fraction(-1, 3) < Fraction(-1, 4) <= Fraction(-1, 4) < 0


def test_sign_helpers():
    """Test sign predicates."""
    assert Fraction(-2, 5).signum() == -1
    assert Fraction(0).signum() == 0
    assert Fraction(2, 5).signum() == 1
    assert Fraction(-2, 5).is_negative()
    assert Fraction(2, 5).is_positive()
    assert Fraction(0, 3).is_zero()
    assert not Fraction(0, 3)


def test_to_double():
    """Test floating point approximation."""
    assert Fraction(1, 4).to_double() == 0.25
    assert float(Fraction(-3, 2)) == -1.5


def test_to_string():
    """Test string formatting."""
    assert str(Fraction(4, 2)) == "2"
    assert str(Fraction(-6, 4)) == "-3/2"
    assert str(Fraction(0, 9)) == "0"
    assert repr(Fraction(1, 3)) == "Fraction(1, 3)"


@pytest.mark.parametrize("text,expected", [
    ("5", Fraction(5)),
    ("-12", Fraction(-12)),
    ("3/4", Fraction(3, 4)),
    ("-6/8", Fraction(-3, 4)),
    ("6/-8", Fraction(-3, 4)),
    ("-6/-8", Fraction(3, 4)),
    ("0.25", Fraction(1, 4)),
    ("-0.5", Fraction(-1, 2)),
    ("12.125", Fraction(97, 8)),
    ("007", Fraction(7)),
])
def test_parse(text, expected):
    """Test parsing of valid literals."""
    assert Fraction.parse(text) == expected


@pytest.mark.parametrize("text", ["1..2", "abc", "1//2", "", " 1", "1/", ".5", "1.", "+3", "1e3", "1/2/3"])
def test_parse_invalid(text):
    """Test FormatError for invalid literals."""
    with pytest.raises(FormatError):
        Fraction.parse(text)


def test_parse_zero_denominator():
    """Test DivisionByZero when parsing n/0."""
    with pytest.raises(DivisionByZero):
        Fraction.parse("1/0")


def test_parse_to_string_inverse(fraction_pair):
    """Test that parse inverts str."""
    for f in fraction_pair:
        assert Fraction.parse(str(f)) == f


def test_value_of():
    """Test the value_of factory."""
    assert Fraction.value_of(3) == Fraction(3)
    assert Fraction.value_of("2/6") == Fraction(1, 3)
    assert Fraction.value_of(PyFraction(-4, 6)) == Fraction(-2, 3)
    assert Fraction.value_of(Rational(5, 10)) == Fraction(1, 2)
    assert Fraction.value_of(0.75) == Fraction(3, 4)
    f = Fraction(2, 7)
    assert Fraction.value_of(f) is f
    with pytest.raises(TypeError):
        Fraction.value_of([1, 2])


def test_to_sympy():
    """Test conversion to sympy.Rational."""
    assert Fraction(-3, 9).to_sympy() == Rational(-1, 3)


def test_hash_and_pickle():
    """Test hashing and pickling."""
    assert hash(Fraction(4, 2)) == hash(2)
    assert len({Fraction(1, 2), Fraction(2, 4), Fraction(-1, 2)}) == 2
    f = Fraction(-5, 15)
    assert pickle.loads(pickle.dumps(f)) == f
