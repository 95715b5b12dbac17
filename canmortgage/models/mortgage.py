import logging
from dataclasses import dataclass
from decimal import Decimal, DecimalException, InvalidOperation, localcontext

from canmortgage.engine.amortization import mortgage_payment
from canmortgage.engine.compounding import ANNUAL, MONTHLY, SEMI_ANNUAL, convert_compounding_basis
from canmortgage.engine.frequency import scale_monthly_payment
from canmortgage.engine.precision import decimal_context
from canmortgage.errors import CalculationError, ValidationError
from canmortgage.models.frequency import PaymentFrequency

logger = logging.getLogger(__name__)

MIN_RATE_PCT = Decimal("0")
MAX_RATE_PCT = Decimal("100")


def _as_decimal(value, name: str) -> Decimal:
    """Coerce user input to Decimal; floats go through str like everywhere else."""
    if isinstance(value, bool):
        raise ValidationError(f"{name} must be a number, got {value!r}")
    try:
        result = value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, ValueError, TypeError) as e:
        raise ValidationError(f"{name} must be a number, got {value!r}") from e
    if not result.is_finite():
        raise ValidationError(f"{name} must be finite, got {value!r}")
    return result


@dataclass(frozen=True)
class CanadianMortgage:
    """A fixed-rate Canadian mortgage.

    Build with ``from_quoted_rate`` so the quoted rate is converted once.
    ``interest_rate`` holds the monthly-compounded equivalent annual rate as a
    fraction, never the quoted percentage.
    """
    principal: Decimal
    interest_rate: Decimal  # Annual, compounded monthly
    amortization_period: int  # Years
    payment_frequency: PaymentFrequency = PaymentFrequency.MONTHLY

    def __post_init__(self) -> None:
        if self.principal < 0:
            raise ValidationError(f"principal must not be negative, got {self.principal}")
        if self.interest_rate < 0:
            raise ValidationError(f"interest rate must not be negative, got {self.interest_rate}")
        if (
            isinstance(self.amortization_period, bool)
            or not isinstance(self.amortization_period, int)
            or self.amortization_period <= 0
        ):
            raise ValidationError(
                f"amortization period must be a positive number of years, got {self.amortization_period!r}"
            )
        if not isinstance(self.payment_frequency, PaymentFrequency):
            raise ValidationError(f"unknown payment frequency: {self.payment_frequency!r}")

    @classmethod
    def from_quoted_rate(
        cls,
        principal: Decimal,
        annual_rate_pct: Decimal,
        amortization_years: int,
        payment_frequency: PaymentFrequency = PaymentFrequency.MONTHLY,
    ) -> "CanadianMortgage":
        """Build a mortgage from the rate as quoted by a Canadian lender.

        Args:
            principal: Amount borrowed
            annual_rate_pct: Annual rate as a percentage, compounded
                semi-annually (e.g. 4.59 for 4.59%)
            amortization_years: Years over which the loan is repaid
            payment_frequency: How often payments are made
        """
        principal = _as_decimal(principal, "principal")
        annual_rate_pct = _as_decimal(annual_rate_pct, "interest rate")

        if annual_rate_pct < MIN_RATE_PCT or annual_rate_pct > MAX_RATE_PCT:
            raise ValidationError(
                f"interest rate is the annual interest rate and must be between 0% and 100%, "
                f"got {annual_rate_pct}%"
            )

        with localcontext(decimal_context()):
            rate = annual_rate_pct / 100

        # Quoted rates compound semi-annually by law; payments compound monthly
        monthly_rate = convert_compounding_basis(rate, SEMI_ANNUAL, MONTHLY)
        logger.debug("Quoted %s%% (semi-annual) is %s compounded monthly", annual_rate_pct, monthly_rate)

        return cls(
            principal=principal,
            interest_rate=monthly_rate,
            amortization_period=amortization_years,
            payment_frequency=payment_frequency,
        )

    def monthly_payment(self) -> Decimal:
        with localcontext(decimal_context()):
            try:
                periodic_rate = self.interest_rate / 12
            except DecimalException as e:
                raise CalculationError(f"could not derive monthly rate from {self.interest_rate}") from e
        return mortgage_payment(self.principal, periodic_rate, self.amortization_period * 12)

    def payment(self) -> Decimal:
        """Payment per period at this mortgage's payment frequency."""
        return scale_monthly_payment(self.monthly_payment(), self.payment_frequency)

    def annual_payment(self) -> Decimal:
        """Total paid per year. Accelerated frequencies pay more than 12 monthly payments."""
        payment = self.payment()
        with localcontext(decimal_context()):
            try:
                return payment * self.payment_frequency.payments_per_year
            except DecimalException as e:
                raise CalculationError(f"could not annualize payment {payment}") from e

    def effective_annual_rate(self) -> Decimal:
        """Stored rate restated with annual compounding."""
        return convert_compounding_basis(self.interest_rate, MONTHLY, ANNUAL)
