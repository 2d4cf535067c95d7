"""
User entity (Aggregate Root).
"""
from dataclasses import dataclass
from typing import Optional

from shared.domain import AggregateRoot
from ..value_objects.email import Email


@dataclass(eq=False)
class User(AggregateRoot):
    """User entity representing a registered customer."""
    email: Email
    username: str
    first_name: str = ""
    last_name: str = ""
    is_active: bool = True

    @classmethod
    def create(
        cls,
        email: str,
        username: str,
        first_name: str = "",
        last_name: str = "",
    ) -> 'User':
        """Factory method to create a new user."""
        return cls(
            email=Email(value=email),
            username=username,
            first_name=first_name or "",
            last_name=last_name or "",
        )

    def deactivate(self) -> None:
        """Deactivate the user account."""
        self.is_active = False
        self.touch()

    def activate(self) -> None:
        """Activate the user account."""
        self.is_active = True
        self.touch()

    def update_profile(
        self,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
    ) -> None:
        """Update user profile information."""
        if first_name is not None:
            self.first_name = first_name
        if last_name is not None:
            self.last_name = last_name
        self.touch()

    @property
    def full_name(self) -> str:
        """Get the user's full name."""
        return f"{self.first_name} {self.last_name}".strip()
