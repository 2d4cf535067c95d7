"""
Base value object class for DDD.
"""
from abc import ABC
from dataclasses import astuple, dataclass
from typing import Any, Tuple


@dataclass(frozen=True)
class ValueObject(ABC):
    """
    Base value object class.
    Value objects are immutable and compared by their attributes.
    """

    def _components(self) -> Tuple[Any, ...]:
        return astuple(self)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, self.__class__):
            return False
        return self._components() == other._components()

    def __hash__(self) -> int:
        return hash((self.__class__.__name__,) + self._components())
