# Shared application module
from .base_use_case import UseCaseResult

__all__ = ['UseCaseResult']
