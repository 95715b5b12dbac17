"""Decimal context shared by every engine computation."""

from decimal import Context, DivisionByZero, InvalidOperation, Overflow, ROUND_HALF_EVEN

from canmortgage.config import settings


def decimal_context() -> Context:
    """Fresh context: configured precision, banker's rounding, hard traps.

    Built per call so a caller's thread-local context never changes results.
    """
    return Context(
        prec=settings.decimal_precision,
        rounding=ROUND_HALF_EVEN,
        traps=[InvalidOperation, DivisionByZero, Overflow],
    )
