# Repository implementations
from .django_user_repository import DjangoUserRepository

__all__ = ['DjangoUserRepository']
