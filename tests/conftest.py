"""Canonical test fixtures used across engine and model tests.

Fixture: $430K mortgage quoted at 4.59% (semi-annual), 25yr amortization.
"""

import pytest
from decimal import Decimal

from canmortgage.models.frequency import PaymentFrequency
from canmortgage.models.mortgage import CanadianMortgage


@pytest.fixture
def canonical_mortgage() -> CanadianMortgage:
    """$430K at 4.59%, 25 years, monthly payments."""
    return CanadianMortgage.from_quoted_rate(
        Decimal("430000.0"), Decimal("4.59"), 25, PaymentFrequency.MONTHLY
    )


@pytest.fixture
def canonical_mortgages() -> dict[PaymentFrequency, CanadianMortgage]:
    """The canonical mortgage at every payment frequency."""
    return {
        f: CanadianMortgage.from_quoted_rate(Decimal("430000.0"), Decimal("4.59"), 25, f)
        for f in PaymentFrequency
    }
