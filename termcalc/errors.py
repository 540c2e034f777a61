class CalculationError(Exception):
    """Base class for errors raised while turning text into an expression."""

    def __init__(self, text: str, message: str):
        super().__init__(message)
        self.text = text


class NumberParseFailure(CalculationError):
    def __init__(self, text: str):
        super().__init__(text, f"Can't convert {text!r} to a number.")


class UnbalancedParenthesis(CalculationError):
    def __init__(self, text: str):
        super().__init__(text, f"Unbalanced parenthesis near {text!r}.")
