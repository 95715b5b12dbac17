from enum import Enum


class PaymentFrequency(Enum):
    MONTHLY = "monthly"
    SEMI_MONTHLY = "semi_monthly"
    BI_WEEKLY = "bi_weekly"
    ACCELERATED_BI_WEEKLY = "accelerated_bi_weekly"
    WEEKLY = "weekly"
    ACCELERATED_WEEKLY = "accelerated_weekly"

    @property
    def payments_per_year(self) -> int:
        return PAYMENTS_PER_YEAR[self]

    @property
    def is_accelerated(self) -> bool:
        return self in (PaymentFrequency.ACCELERATED_BI_WEEKLY, PaymentFrequency.ACCELERATED_WEEKLY)


PAYMENTS_PER_YEAR: dict[PaymentFrequency, int] = {
    PaymentFrequency.MONTHLY: 12,
    PaymentFrequency.SEMI_MONTHLY: 24,
    PaymentFrequency.BI_WEEKLY: 26,
    PaymentFrequency.ACCELERATED_BI_WEEKLY: 26,
    PaymentFrequency.WEEKLY: 52,
    PaymentFrequency.ACCELERATED_WEEKLY: 52,
}
