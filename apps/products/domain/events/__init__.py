# Domain events
from .category_deactivated import CategoryDeactivated
from .category_moved import CategoryMoved
from .stock_updated import StockUpdated

__all__ = ['CategoryDeactivated', 'CategoryMoved', 'StockUpdated']
