"""
Payment value objects.
"""
from enum import Enum


class PaymentMethod(str, Enum):
    """How the customer pays for an order."""
    CREDIT_CARD = 'credit_card'
    DEBIT_CARD = 'debit_card'
    PAYPAL = 'paypal'
    BANK_TRANSFER = 'bank_transfer'
    CASH_ON_DELIVERY = 'cash_on_delivery'

    @property
    def requires_online_payment(self) -> bool:
        return self is not PaymentMethod.CASH_ON_DELIVERY


class PaymentStatus(str, Enum):
    """Payment progress, tracked by an external gateway."""
    PENDING = 'pending'
    PAID = 'paid'
    FAILED = 'failed'
    CANCELLED = 'cancelled'
    REFUNDED = 'refunded'
