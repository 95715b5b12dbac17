"""Exception hierarchy for mortgage calculations.

Every failure is permanent: bad input or a value the numeric types cannot
represent. Nothing here is retried.
"""


class MortgageError(Exception):
    """Base class for all mortgage calculation failures."""


class ValidationError(MortgageError, ValueError):
    """Loan parameters violate a precondition (rate range, term, principal)."""


class ConversionError(MortgageError, ValueError):
    """A number could not be converted between int, Decimal and float."""


class CalculationError(MortgageError, ArithmeticError):
    """Decimal overflow, zero division or invalid operation inside a formula."""
