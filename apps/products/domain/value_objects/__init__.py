# Value objects
from .money import Money
from .sku import SKU
from .slug import Slug
from .stock import Stock

__all__ = ['Money', 'SKU', 'Slug', 'Stock']
