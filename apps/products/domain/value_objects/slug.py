"""
Slug value object.
"""
import re
from dataclasses import dataclass

from shared.domain import ValueObject
from ..exceptions import InvalidCategoryDataError

MAX_SLUG_LENGTH = 100
SLUG_PATTERN = re.compile(r'^[a-z0-9]+(?:-[a-z0-9]+)*$')


@dataclass(frozen=True)
class Slug(ValueObject):
    """URL-safe unique key of a category (lower case words joined by dashes)."""
    value: str

    def __post_init__(self):
        normalized = (self.value or "").strip().lower()
        if not normalized:
            raise InvalidCategoryDataError("Slug is required.", field="slug")
        if len(normalized) > MAX_SLUG_LENGTH:
            raise InvalidCategoryDataError(
                f"Slug cannot exceed {MAX_SLUG_LENGTH} characters.",
                field="slug",
                value=self.value,
            )
        if not SLUG_PATTERN.match(normalized):
            raise InvalidCategoryDataError(
                f"Invalid slug format: '{self.value}'",
                field="slug",
                value=self.value,
            )
        object.__setattr__(self, 'value', normalized)

    @classmethod
    def from_name(cls, name: str) -> 'Slug':
        """Derive a slug from a display name."""
        words = re.findall(r'[a-z0-9]+', name.lower())
        return cls(value='-'.join(words))

    def __str__(self) -> str:
        return self.value
