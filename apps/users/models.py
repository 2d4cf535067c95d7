# Model discovery for the Django app registry
from .infrastructure.models import UserModel  # noqa: F401
