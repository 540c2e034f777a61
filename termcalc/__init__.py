"""termcalc: arithmetic expression calculator.

Parses a line such as ``3 + (3 + 5) * 6 + 4 - 3 / 2`` into an ordered list of
terms and reduces it to a float, honouring ``*``/``/`` precedence and one
level of parentheses.

Usage:
    from termcalc import parse, evaluate
    evaluate(parse("4 + 5 * 2"))    # 14.0
"""

from termcalc.errors import CalculationError, NumberParseFailure, UnbalancedParenthesis
from termcalc.expression import Expression, evaluate, evaluate_expression, parse
from termcalc.terms import Term, TermKind

__all__ = [
    "CalculationError",
    "Expression",
    "NumberParseFailure",
    "Term",
    "TermKind",
    "UnbalancedParenthesis",
    "evaluate",
    "evaluate_expression",
    "parse",
]
