"""
SKU value object.
"""
import re
from dataclasses import dataclass

from shared.domain import ValueObject
from ..exceptions import InvalidSKUError

SKU_PATTERN = re.compile(r'^[A-Z0-9][A-Z0-9\-]{2,49}$')


@dataclass(frozen=True)
class SKU(ValueObject):
    """Stock Keeping Unit, normalized to upper case."""
    value: str

    def __post_init__(self):
        normalized = (self.value or "").upper().strip()
        if not SKU_PATTERN.match(normalized):
            raise InvalidSKUError(self.value)
        object.__setattr__(self, 'value', normalized)

    def __str__(self) -> str:
        return self.value
