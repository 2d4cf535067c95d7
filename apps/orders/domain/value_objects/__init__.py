# Value objects
from .order_status import OrderStatus, ALLOWED_TRANSITIONS
from .payment import PaymentMethod, PaymentStatus
from .shipping_info import ShippingInfo
from .order_number import OrderNumber

__all__ = [
    'OrderStatus',
    'ALLOWED_TRANSITIONS',
    'PaymentMethod',
    'PaymentStatus',
    'ShippingInfo',
    'OrderNumber',
]
