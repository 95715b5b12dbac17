"""Fixed periodic payment that fully amortizes a loan.

Pure functions: Decimal in, Decimal out. No I/O.
"""

import logging
from decimal import Decimal, DecimalException, localcontext

from canmortgage.engine.precision import decimal_context
from canmortgage.errors import CalculationError

logger = logging.getLogger(__name__)


def mortgage_payment(principal: Decimal, periodic_rate: Decimal, periods: int) -> Decimal:
    """Calculate the fixed payment per period.

    Args:
        principal: Amount borrowed
        periodic_rate: Rate per payment period as a fraction
            (annual rate / 12 for monthly payments)
        periods: Total number of payments (years * 12 for monthly payments)

    The rate and the period count must be on the same period. A zero rate is
    not supported: the formula divides by zero and CalculationError is raised.

    https://en.wikipedia.org/wiki/Mortgage_loan
    """
    with localcontext(decimal_context()):
        try:
            # a = p * r * (1+r)^n / ((1+r)^n - 1)
            factor = (1 + periodic_rate) ** periods
            payment = principal * periodic_rate * factor / (factor - 1)
        except DecimalException as e:
            raise CalculationError(
                f"could not compute payment for principal {principal}, "
                f"rate {periodic_rate}, {periods} periods"
            ) from e

    logger.debug("Payment over %d periods at %s per period: %s", periods, periodic_rate, payment)
    return payment
