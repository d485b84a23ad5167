# Order header and line items live in separate modules;
# callers import both from apps.orders.models.
from .order import *  # noqa: F401,F403
from .item import *  # noqa: F401,F403
