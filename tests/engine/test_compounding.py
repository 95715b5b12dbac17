"""Tests for compounding basis conversion."""

from decimal import Decimal

import pytest

from canmortgage.engine.compounding import convert_compounding_basis, fractional_exponent
from canmortgage.errors import CalculationError, ConversionError


class TestConvertCompoundingBasis:
    def test_semi_annual_to_annual(self):
        """6% compounded semi-annually is 6.09% effective annual."""
        rate = convert_compounding_basis(Decimal("0.06"), 2, 1)
        # (1.03)^2 - 1 = 0.0609
        assert rate == Decimal("0.0609")

    def test_semi_annual_to_monthly(self):
        rate = convert_compounding_basis(Decimal("0.06"), 2, 12)
        assert rate == Decimal("0.059263464374364")

    def test_same_frequency_is_identity(self):
        rate = convert_compounding_basis(Decimal("0.0459"), 2, 2)
        assert rate == Decimal("0.0459")

    def test_more_frequent_compounding_lowers_nominal_rate(self):
        monthly = convert_compounding_basis(Decimal("0.05"), 2, 12)
        weekly = convert_compounding_basis(Decimal("0.05"), 2, 52)
        assert weekly < monthly < Decimal("0.05")

    def test_zero_rate(self):
        assert convert_compounding_basis(Decimal("0"), 2, 12) == 0

    @pytest.mark.parametrize("rate", ["0.0001", "0.0459", "0.06", "0.125", "1"])
    @pytest.mark.parametrize("n1,n2", [(2, 12), (2, 1), (12, 52), (1, 365), (4, 2)])
    def test_round_trip(self, rate, n1, n2):
        r1 = Decimal(rate)
        r2 = convert_compounding_basis(r1, n1, n2)
        assert abs(convert_compounding_basis(r2, n2, n1) - r1) < Decimal("1e-12")

    def test_same_effective_yield(self):
        """Both rates grow 1 to the same amount over a year."""
        r1 = Decimal("0.0459")
        r2 = convert_compounding_basis(r1, 2, 12)
        semi = (1 + r1 / 2) ** 2
        monthly = (1 + r2 / 12) ** 12
        assert abs(semi - monthly) < Decimal("1e-14")

    @pytest.mark.parametrize("bad", [0, -2, True, 2.0, "2"])
    def test_invalid_frequency(self, bad):
        with pytest.raises(ConversionError):
            convert_compounding_basis(Decimal("0.06"), bad, 12)
        with pytest.raises(ConversionError):
            convert_compounding_basis(Decimal("0.06"), 2, bad)

    def test_nan_rate(self):
        with pytest.raises((ConversionError, CalculationError)):
            convert_compounding_basis(Decimal("NaN"), 2, 12)

    def test_custom_power_function(self):
        """The fractional power step can be swapped out."""
        calls = []

        def exact_square(base: Decimal, exponent: Decimal) -> Decimal:
            calls.append((base, exponent))
            return base * base

        rate = convert_compounding_basis(Decimal("0.06"), 2, 1, power=exact_square)
        assert rate == Decimal("0.0609")
        assert calls == [(Decimal("1.03"), Decimal("2"))]


class TestFractionalExponent:
    def test_square_root(self):
        assert fractional_exponent(Decimal("4"), Decimal("0.5")) == Decimal("2")

    def test_result_is_decimal(self):
        result = fractional_exponent(Decimal("1.03"), Decimal("2") / Decimal("12"))
        assert isinstance(result, Decimal)
        assert result == Decimal("1.004938622031197")

    def test_result_keeps_sixteen_significant_digits(self):
        # 1.03 ** (1/6) is 1.0049386220311969... as a float
        result = fractional_exponent(Decimal("1.03"), Decimal("2") / Decimal("12"))
        assert len(result.as_tuple().digits) == 16
        assert result != Decimal("1.0049386220311969")

    def test_infinite_base(self):
        with pytest.raises(ConversionError):
            fractional_exponent(Decimal("Infinity"), Decimal("0.5"))

    def test_base_too_large_for_float(self):
        with pytest.raises(ConversionError):
            fractional_exponent(Decimal("1e400"), Decimal("0.5"))

    def test_result_overflows_float(self):
        with pytest.raises(ConversionError):
            fractional_exponent(Decimal("1e300"), Decimal("2"))

    def test_negative_base_fractional_exponent(self):
        with pytest.raises(ConversionError):
            fractional_exponent(Decimal("-0.5"), Decimal("0.5"))
