"""
Order number value object.
"""
import random
import re
import string
from dataclasses import dataclass

from shared.domain import ValueObject, ValidationError, utc_now

ORDER_NUMBER_PATTERN = re.compile(r'^ORD-\d{8}-[A-Z0-9]{6}$')


@dataclass(frozen=True)
class OrderNumber(ValueObject):
    """Human readable order reference, e.g. ``ORD-20240131-7XK2QA``."""
    value: str

    def __post_init__(self):
        if not ORDER_NUMBER_PATTERN.match(self.value or ""):
            raise ValidationError(f"Invalid order number: '{self.value}'", field="order_number")

    @classmethod
    def generate(cls) -> 'OrderNumber':
        """Generate a new order number."""
        date_part = utc_now().strftime("%Y%m%d")
        random_part = ''.join(random.choices(string.ascii_uppercase + string.digits, k=6))
        return cls(value=f"ORD-{date_part}-{random_part}")

    def __str__(self) -> str:
        return self.value
