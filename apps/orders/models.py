# Model discovery for the Django app registry
from .infrastructure.models import CartItemModel, OrderItemModel, OrderModel  # noqa: F401
