"""Compounding basis conversion.

Canadian mortgage rates are quoted compounded semi-annually but paid monthly,
so the quoted rate has to be restated on the payment basis first.

    r2 = ((1 + r1/n1) ** (n1/n2) - 1) * n2

where r1 compounds n1 times a year and r2 compounds n2 times a year.
See https://en.wikipedia.org/wiki/Compound_interest#Compounding_basis

Pure functions. No I/O.
"""

import logging
import math
from collections.abc import Callable
from decimal import Decimal, DecimalException, localcontext

from canmortgage.engine.precision import decimal_context
from canmortgage.errors import CalculationError, ConversionError

logger = logging.getLogger(__name__)

SEMI_ANNUAL = 2
MONTHLY = 12
ANNUAL = 1


def _to_float(value: Decimal) -> float:
    try:
        result = float(value)
    except (ValueError, OverflowError) as e:
        raise ConversionError(f"could not convert Decimal to float: {value}") from e
    if not math.isfinite(result):
        raise ConversionError(f"could not convert Decimal to float: {value}")
    return result


def _to_decimal(value: float) -> Decimal:
    if not math.isfinite(value):
        raise ConversionError(f"could not convert float to Decimal: {value}")
    # 16 significant digits; the 17th is float noise
    return Decimal(format(value, ".16g"))


def fractional_exponent(base: Decimal, exponent: Decimal) -> Decimal:
    """Raise base to a non-integer power.

    Decimal has no practical fractional power, so this one step runs in binary
    floating point and is converted back rounded to 16 significant digits,
    the precision a float actually carries.
    """
    b = _to_float(base)
    e = _to_float(exponent)
    try:
        result = math.pow(b, e)
    except (ValueError, OverflowError) as err:
        raise ConversionError(f"could not compute {base} ** {exponent} as float") from err
    return _to_decimal(result)


def _frequency(value: int) -> Decimal:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ConversionError(f"compounding frequency must be a positive integer: {value!r}")
    return Decimal(value)


def convert_compounding_basis(
    rate: Decimal,
    compounding_frequency_from: int,
    compounding_frequency_to: int,
    *,
    power: Callable[[Decimal, Decimal], Decimal] = fractional_exponent,
) -> Decimal:
    """Restate an annual rate on a different compounding frequency.

    Args:
        rate: Annual rate as a fraction (e.g. 0.06 for 6%)
        compounding_frequency_from: Compounding events per year of ``rate``
        compounding_frequency_to: Compounding events per year of the result
        power: Fractional power function, float-backed by default

    Both rates give the same effective annual yield.
    """
    n1 = _frequency(compounding_frequency_from)
    n2 = _frequency(compounding_frequency_to)

    with localcontext(decimal_context()):
        try:
            base = 1 + rate / n1
            exponent = n1 / n2
        except DecimalException as e:
            raise CalculationError(f"could not prepare compounding conversion for rate {rate}") from e

        grown = power(base, exponent)

        try:
            converted = (grown - 1) * n2
        except DecimalException as e:
            raise CalculationError(f"could not finish compounding conversion for rate {rate}") from e

    logger.debug(
        "Converted rate %s from %d/yr to %d/yr compounding: %s",
        rate, compounding_frequency_from, compounding_frequency_to, converted,
    )
    return converted
