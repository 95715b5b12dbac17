"""Scale a monthly payment to the other payment frequencies.

Plain bi-weekly and weekly spread the same annual total over 26 or 52
payments. Accelerated bi-weekly and weekly pay half or a quarter of the
monthly payment on that same schedule, which adds roughly one monthly payment
per year and shortens the effective amortization.

Pure functions. No I/O.
"""

from decimal import Decimal, DecimalException, localcontext

from canmortgage.engine.precision import decimal_context
from canmortgage.errors import CalculationError
from canmortgage.models.frequency import PaymentFrequency

# (multiplier, divisor) applied to the monthly payment, multiplier first
FREQUENCY_SCALING: dict[PaymentFrequency, tuple[int, int]] = {
    PaymentFrequency.MONTHLY: (1, 1),
    PaymentFrequency.SEMI_MONTHLY: (1, 2),
    PaymentFrequency.BI_WEEKLY: (12, 26),
    PaymentFrequency.ACCELERATED_BI_WEEKLY: (1, 2),
    PaymentFrequency.WEEKLY: (12, 52),
    PaymentFrequency.ACCELERATED_WEEKLY: (1, 4),
}


def scale_monthly_payment(monthly_payment: Decimal, frequency: PaymentFrequency) -> Decimal:
    """Payment per period for ``frequency`` given the monthly payment."""
    multiplier, divisor = FREQUENCY_SCALING[frequency]
    if multiplier == 1 and divisor == 1:
        return monthly_payment

    with localcontext(decimal_context()):
        try:
            return monthly_payment * multiplier / divisor
        except DecimalException as e:
            raise CalculationError(
                f"could not scale monthly payment {monthly_payment} to {frequency.value}"
            ) from e
