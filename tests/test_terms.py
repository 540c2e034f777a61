import math

import pytest

from termcalc.terms import Term, TermKind, ieee_divide


def test_operate_with_add():
    assert Term.add(5.0).operate_with(3.0) == 8.0


def test_operate_with_subtract():
    assert Term.subtract(5.0).operate_with(3.0) == -2.0


def test_operate_with_multiply():
    assert Term.multiply(5.0).operate_with(3.0) == 15.0


def test_operate_with_divide():
    assert Term.divide(5.0).operate_with(3.0) == 3.0 / 5.0


@pytest.mark.parametrize("symbol, kind", [
    ("+", TermKind.ADD),
    ("-", TermKind.SUBTRACT),
    ("*", TermKind.MULTIPLY),
    ("/", TermKind.DIVIDE),
])
def test_kind_from_symbol(symbol, kind):
    assert TermKind(symbol) is kind


def test_multiply_or_divide():
    assert Term.multiply(1.0).is_multiply_or_divide
    assert Term.divide(1.0).is_multiply_or_divide
    assert not Term.add(1.0).is_multiply_or_divide
    assert not Term.subtract(1.0).is_multiply_or_divide


def test_terms_are_immutable():
    term = Term.add(1.0)
    with pytest.raises(AttributeError):
        term.operand = 2.0


def test_str():
    assert str(Term.subtract(2.5)) == "-2.5"


class TestDivideByZero:
    def test_positive(self):
        assert Term.divide(0.0).operate_with(1.0) == math.inf

    def test_negative(self):
        assert Term.divide(0.0).operate_with(-1.0) == -math.inf

    def test_negative_zero_denominator(self):
        assert ieee_divide(1.0, -0.0) == -math.inf

    def test_zero_over_zero(self):
        assert math.isnan(Term.divide(0.0).operate_with(0.0))

    def test_nan_over_zero(self):
        assert math.isnan(ieee_divide(math.nan, 0.0))

    def test_ordinary_division(self):
        assert ieee_divide(1.0, 4.0) == 0.25
