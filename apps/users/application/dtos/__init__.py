# DTOs
from .user_dto import UserDTO, UserCreateDTO

__all__ = ['UserDTO', 'UserCreateDTO']
