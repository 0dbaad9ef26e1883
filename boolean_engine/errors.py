"""Exceptions raised by the Boolean function engine."""


class BooleanFunctionError(Exception):
    """Base class for every error raised by this package."""


class InvalidArityError(BooleanFunctionError, ValueError):
    """Arity below 1, or two operands with different arities."""


class OutOfRangeError(BooleanFunctionError, ValueError):
    """A binary expansion that does not fit the supported width."""


class IllFormedInputError(BooleanFunctionError, ValueError):
    """A bit string containing characters other than '0' and '1'."""


class BudgetExceededError(BooleanFunctionError, RuntimeError):
    """Prime implicant generation produced more cubes than allowed."""
