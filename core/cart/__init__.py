"""Cart package: models, storage, and store facade."""
from .models import CartItem, Cart, CartSummary, TAX_RATE
from .service import CartStore, CheckoutResult, OrderSummary, get_cart_store
from .storage import CartStorage

__all__ = [
    "CartItem",
    "Cart",
    "CartSummary",
    "TAX_RATE",
    "CartStore",
    "CartStorage",
    "CheckoutResult",
    "OrderSummary",
    "get_cart_store",
]
