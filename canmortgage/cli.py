"""CLI for Canadian mortgage payments.

Usage:
    canmortgage 430000 4.59 25
    canmortgage 430000 4.59 25 --frequency accelerated_weekly
    python -m canmortgage.cli 430000 4.59 25 --all
"""

import argparse
import logging
import sys
from decimal import Decimal, InvalidOperation

from canmortgage.config import settings
from canmortgage.errors import MortgageError
from canmortgage.models.frequency import PaymentFrequency
from canmortgage.models.mortgage import CanadianMortgage

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def print_summary(mortgage: CanadianMortgage, quoted_rate_pct: Decimal) -> None:
    print(f"\n{'=' * 60}")
    print("  Canadian Mortgage")
    print(f"{'=' * 60}")
    print(f"  Principal:            {mortgage.principal}")
    print(f"  Quoted rate:          {quoted_rate_pct}% (compounded semi-annually)")
    print(f"  Monthly-equivalent:   {mortgage.interest_rate}")
    print(f"  Amortization:         {mortgage.amortization_period} years")
    print()


def print_payments(mortgages: list[CanadianMortgage]) -> None:
    for m in mortgages:
        print(f"  {m.payment_frequency.value:>22}:  {m.payment()}")
    print()


def _decimal(value: str) -> Decimal:
    try:
        return Decimal(value)
    except InvalidOperation:
        raise argparse.ArgumentTypeError(f"not a number: {value!r}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Canadian mortgage payment calculator")
    parser.add_argument("principal", type=_decimal, help="Amount borrowed")
    parser.add_argument("rate", type=_decimal, help="Quoted annual rate in percent, e.g. 4.59")
    parser.add_argument("years", type=int, help="Amortization period in years")
    parser.add_argument(
        "--frequency",
        choices=[f.value for f in PaymentFrequency],
        default=PaymentFrequency.MONTHLY.value,
        help="Payment frequency (default: monthly)",
    )
    parser.add_argument("--all", action="store_true", help="Show the payment for every frequency")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=settings.log_level,
        help="Logging level (default: from settings)",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    frequencies = list(PaymentFrequency) if args.all else [PaymentFrequency(args.frequency)]

    try:
        mortgages = [
            CanadianMortgage.from_quoted_rate(args.principal, args.rate, args.years, f)
            for f in frequencies
        ]
        print_summary(mortgages[0], args.rate)
        print_payments(mortgages)
    except MortgageError as e:
        logger.debug("Mortgage calculation failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
