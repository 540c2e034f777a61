import math
from dataclasses import dataclass
from enum import Enum


class TermKind(Enum):
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"

    @property
    def is_multiply_or_divide(self) -> bool:
        return self in (TermKind.MULTIPLY, TermKind.DIVIDE)


@dataclass(frozen=True)
class Term:
    """One step of an expression: apply ``kind`` with ``operand``."""

    kind: TermKind
    operand: float

    @classmethod
    def add(cls, operand: float) -> "Term":
        return cls(TermKind.ADD, operand)

    @classmethod
    def subtract(cls, operand: float) -> "Term":
        return cls(TermKind.SUBTRACT, operand)

    @classmethod
    def multiply(cls, operand: float) -> "Term":
        return cls(TermKind.MULTIPLY, operand)

    @classmethod
    def divide(cls, operand: float) -> "Term":
        return cls(TermKind.DIVIDE, operand)

    @property
    def is_multiply_or_divide(self) -> bool:
        return self.kind.is_multiply_or_divide

    def operate_with(self, other: float) -> float:
        # operand order matters for subtract and divide: ``other`` is the left side
        if self.kind is TermKind.ADD:
            return self.operand + other
        if self.kind is TermKind.SUBTRACT:
            return other - self.operand
        if self.kind is TermKind.MULTIPLY:
            return self.operand * other
        return ieee_divide(other, self.operand)

    def __str__(self):
        return f"{self.kind.value}{self.operand!r}"


def ieee_divide(numerator: float, denominator: float) -> float:
    """Float division that yields inf/nan on a zero denominator instead of raising."""
    if denominator == 0.0:
        if numerator == 0.0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator
