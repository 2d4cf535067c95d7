# Model discovery for the Django app registry
from .infrastructure.models import CategoryModel, ProductModel  # noqa: F401
