"""
User service.
"""
import logging
from dataclasses import dataclass

from ...domain.entities.user import User
from ...domain.exceptions import UserAlreadyExistsError, UserNotFoundError
from ...domain.repositories.user_repository import UserRepository
from ..dtos.user_dto import UserCreateDTO

logger = logging.getLogger(__name__)


@dataclass
class UserService:
    """Looks up customer accounts for the cart and order services."""

    user_repository: UserRepository

    def register_user(self, dto: UserCreateDTO) -> User:
        """Create a user; email and username must be unused."""
        logger.info("Register user: email=%s", dto.email)
        user = User.create(
            email=dto.email,
            username=dto.username,
            first_name=dto.first_name or "",
            last_name=dto.last_name or "",
        )
        if self.user_repository.exists_by_email(user.email.value):
            raise UserAlreadyExistsError("email", user.email.value)
        if self.user_repository.exists_by_username(dto.username):
            raise UserAlreadyExistsError("username", dto.username)
        return self.user_repository.save(user)

    def get_user(self, user_id: int) -> User:
        user = self.user_repository.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    def get_user_by_email(self, email: str) -> User:
        user = self.user_repository.find_by_email(email)
        if user is None:
            raise UserNotFoundError(email, field="email")
        return user

    def exists(self, user_id: int) -> bool:
        return self.user_repository.exists_by_id(user_id)
