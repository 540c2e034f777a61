import logging
from dataclasses import dataclass, field
from typing import Iterator

from lark import Lark, Token
from lark.exceptions import UnexpectedInput

from termcalc.errors import NumberParseFailure, UnbalancedParenthesis
from termcalc.terms import Term, TermKind

log = logging.getLogger(__name__)

# Only the lexer is used: the scan below decides what each token means,
# since operators inside parentheses are plain text until the group is re-parsed.
# LITERAL and WS share the same notion of whitespace, so every character matches.
grammar = r"""
    start: (OPERATOR | LPAR | RPAR | LITERAL)*
    OPERATOR: "+" | "-" | "*" | "/"
    LPAR: "("
    RPAR: ")"
    LITERAL: /[^+\-*\/()\s]+/
    WS: /\s+/
    %ignore WS
"""

tokenizer = Lark(grammar, parser="lalr", lexer="basic")


@dataclass
class Expression:
    """
    Ordered terms of one line of input or one parenthesized group.

    ``9 + 2 - (5 + 3) * 2`` becomes::

        Expression([Term.add(9.0), Term.add(2.0), Term.subtract(8.0), Term.multiply(2.0)])

    where ``8.0`` is the already evaluated group.
    """

    terms: list[Term] = field(default_factory=list)

    def push(self, kind: TermKind, value: float) -> None:
        self.terms.append(Term(kind, float(value)))

    @classmethod
    def from_str(cls, text: str) -> "Expression":
        return parse(text)

    def evaluate(self) -> float:
        return evaluate(self)

    def __iter__(self) -> Iterator[Term]:
        return iter(self.terms)

    def __len__(self):
        return len(self.terms)

    def __str__(self):
        return " ".join(str(term) for term in self.terms)


def to_float(text: str) -> float:
    # float() also takes digit separators and non-ASCII digits, neither of
    # which is part of the input language
    if "_" in text or not text.isascii():
        raise NumberParseFailure(text)
    try:
        return float(text)
    except ValueError:
        raise NumberParseFailure(text) from None


def tokenize(text: str) -> Iterator[Token]:
    try:
        yield from tokenizer.lex(text)
    except UnexpectedInput as e:
        raise NumberParseFailure(text) from e


def parse(text: str) -> Expression:
    """
    Scan ``text`` once, left to right, into an :class:`Expression`.

    Only one level of parentheses is supported. A group's text is collected
    verbatim and handed to a recursive ``parse``; its value enters the outer
    expression as a single term of the operator that preceded the group.
    Text left over at the end is converted whether or not a group is still
    open, so ``(5`` is just 5.

    Raises :class:`NumberParseFailure` for literal text that is not a number and
    :class:`UnbalancedParenthesis` for a nested ``(`` or a stray ``)``.
    """
    expression = Expression()

    current_kind = TermKind.ADD
    accumulated_text = ""
    inside_parenthesis = False
    awaiting_operand = False

    for token in tokenize(text):
        value = str(token)

        if token.type == "OPERATOR":
            if inside_parenthesis:
                accumulated_text += value
                continue

            if accumulated_text:
                expression.push(current_kind, to_float(accumulated_text))

            current_kind = TermKind(value)
            accumulated_text = ""
            awaiting_operand = True

        elif token.type == "LPAR":
            if inside_parenthesis:
                raise UnbalancedParenthesis(accumulated_text)

            inside_parenthesis = True

        elif token.type == "RPAR":
            if not inside_parenthesis:
                raise UnbalancedParenthesis(accumulated_text)

            inside_parenthesis = False
            expression.push(current_kind, parse(accumulated_text).evaluate())
            accumulated_text = ""
            awaiting_operand = False

        else:
            accumulated_text += value
            if not inside_parenthesis:
                awaiting_operand = False

    if accumulated_text:
        expression.push(current_kind, to_float(accumulated_text))
    elif awaiting_operand:
        # trailing operator, nothing left to convert
        raise NumberParseFailure(accumulated_text)

    log.debug("parsed %r into %d terms", text, len(expression))
    return expression


def evaluate(expression: Expression) -> float:
    """
    Reduce ``expression`` to a float, honouring ``*``/``/`` precedence.

    A multiply or divide term is absorbed into the operand of the term before
    it, so ``+3 *2 /3`` collapses to ``+2.0`` before being added. The
    expression itself is left untouched.
    """
    result = 0.0

    terms = list(expression.terms)
    i = 0
    while i < len(terms):
        term = terms[i]

        if i + 1 < len(terms) and terms[i + 1].is_multiply_or_divide:
            terms[i] = Term(term.kind, terms[i + 1].operate_with(term.operand))
            del terms[i + 1]
            continue

        if term.kind is TermKind.ADD:
            result += term.operand
        elif term.kind is TermKind.SUBTRACT:
            result -= term.operand
        # a leading multiply/divide has nothing to act on
        i += 1

    log.debug("evaluated %s to %r", expression, result)
    return result


def evaluate_expression(text: str) -> float:
    return evaluate(parse(text))
