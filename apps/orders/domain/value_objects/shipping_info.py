"""
Shipping info value object.
"""
from dataclasses import dataclass

from shared.domain import ValidationError, ValueObject


@dataclass(frozen=True)
class ShippingInfo(ValueObject):
    """Delivery address snapshot stored with an order."""
    recipient_name: str
    phone_number: str
    address: str
    city: str = ""
    postal_code: str = ""
    country: str = ""
    email: str = ""

    def __post_init__(self):
        for name in ('recipient_name', 'phone_number', 'address'):
            if not (getattr(self, name) or "").strip():
                raise ValidationError(f"Shipping {name.replace('_', ' ')} is required", field=name)

    @property
    def full_address(self) -> str:
        """Single line address, skipping empty parts."""
        parts = [self.address, self.city, self.postal_code, self.country]
        return ", ".join(part for part in parts if part)
