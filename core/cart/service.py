"""Cart store: the single owner of cart state."""
import os
from dataclasses import dataclass
from decimal import Decimal
from typing import Callable, Optional, Tuple

from core.catalog import Product, get_product
from core.errors import (
    MSG_ITEM_ADDED,
    MSG_ITEM_REMOVED,
    MSG_CART_ALREADY_EMPTY,
    MSG_CART_CLEARED,
    MSG_CART_EMPTY,
    MSG_ORDER_PLACED,
    MSG_CHECKOUT_CANCELLED,
    PROMPT_CLEAR_CART,
)
from core.logging import get_logger
from core.services.money import format_money
from core.services.notifications import Notifier, get_notifier
from .models import Cart, CartItem, CartSummary, TAX_RATE
from .storage import CartStorage

logger = get_logger(__name__)

CHECKOUT_REQUIRES_CONFIRMATION = os.environ.get("CHECKOUT_REQUIRES_CONFIRMATION", "").lower() in ("1", "true", "yes")


@dataclass(frozen=True)
class OrderSummary:
    """Totals shown to the user when an order is placed."""
    subtotal: Decimal
    tax: Decimal
    total: Decimal

    @property
    def message(self) -> str:
        return (
            "Thank you for your purchase!\n\n"
            "Order Summary:\n"
            f"Subtotal: {format_money(self.subtotal)}\n"
            f"Tax: {format_money(self.tax)}\n"
            f"Total: {format_money(self.total)}\n\n"
            "Your order has been placed successfully!"
        )

    def to_dict(self) -> dict:
        return {
            "subtotal": format_money(self.subtotal),
            "tax": format_money(self.tax),
            "total": format_money(self.total),
            "message": self.message,
        }


@dataclass(frozen=True)
class CheckoutResult:
    placed: bool
    order: Optional[OrderSummary] = None
    close_cart: bool = False


ConfirmFn = Callable[[str], bool]
AcknowledgeFn = Callable[[OrderSummary], Optional[bool]]


class CartStore:
    """
    Owns the cart and every operation on it.

    All mutations go through the methods below; each one persists the new
    state synchronously and reports user-facing messages through `notify`.
    Unknown product ids are ignored silently.

    Blocking prompts are supplied by the caller: `clear_cart` takes a
    `confirm(prompt) -> bool` and `checkout` takes an `acknowledge(order)`.
    With `checkout_requires_confirmation` the acknowledgement doubles as a
    confirmation and a falsy answer cancels the checkout.
    """

    def __init__(
        self,
        storage: Optional[CartStorage] = None,
        notify: Optional[Callable[[str], None]] = None,
        product_lookup: Callable[[int], Optional[Product]] = get_product,
        tax_rate: Decimal = TAX_RATE,
        checkout_requires_confirmation: bool = CHECKOUT_REQUIRES_CONFIRMATION,
    ):
        self.storage = storage if storage is not None else CartStorage()
        self.notify = notify if notify is not None else Notifier()
        self._lookup = product_lookup
        self.tax_rate = tax_rate
        self.checkout_requires_confirmation = checkout_requires_confirmation
        self._cart = self.storage.load()

    @property
    def items(self) -> Tuple[CartItem, ...]:
        """Snapshot of the line items; edits to it do not reach the cart."""
        return tuple(
            CartItem(item.product_id, item.name, item.price, item.icon, item.quantity)
            for item in self._cart.items
        )

    def _persist(self) -> None:
        if not self.storage.save(self._cart):
            logger.warning("Cart kept in memory only, storage write failed")

    def add_to_cart(self, product_id: int) -> CartSummary:
        """Add one unit of a catalog product."""
        product = self._lookup(product_id)
        if product is None:
            return self.get_summary()

        existing_item = self._cart.find(product_id)
        if existing_item:
            existing_item.quantity += 1
        else:
            self._cart.items.append(
                CartItem(
                    product_id=product.id,
                    name=product.name,
                    price=product.price,
                    icon=product.icon,
                    quantity=1,
                )
            )

        self._persist()
        self.notify(MSG_ITEM_ADDED.format(name=product.name))
        return self.get_summary()

    def remove_from_cart(self, product_id: int) -> CartSummary:
        """Drop the line for product_id (if any)."""
        self._cart.items = [item for item in self._cart.items if item.product_id != product_id]
        self._persist()
        self.notify(MSG_ITEM_REMOVED)
        return self.get_summary()

    def update_quantity(self, product_id: int, delta: int) -> CartSummary:
        """Shift a line's quantity by delta; at zero or below the line is removed."""
        item = self._cart.find(product_id)
        if item is None:
            return self.get_summary()

        item.quantity += delta
        if item.quantity <= 0:
            return self.remove_from_cart(product_id)

        self._persist()
        return self.get_summary()

    def clear_cart(self, confirm: ConfirmFn) -> bool:
        """Empty the cart after confirmation. Returns True if it was cleared."""
        if self._cart.is_empty:
            self.notify(MSG_CART_ALREADY_EMPTY)
            return False

        if not confirm(PROMPT_CLEAR_CART):
            return False

        self._cart.items = []
        self._persist()
        self.notify(MSG_CART_CLEARED)
        return True

    def checkout(self, acknowledge: AcknowledgeFn) -> CheckoutResult:
        """Show the order summary, then empty the cart."""
        if self._cart.is_empty:
            self.notify(MSG_CART_EMPTY)
            return CheckoutResult(placed=False)

        summary = self.get_summary()
        order = OrderSummary(subtotal=summary.subtotal, tax=summary.tax, total=summary.total)

        accepted = acknowledge(order)
        if self.checkout_requires_confirmation and not accepted:
            self.notify(MSG_CHECKOUT_CANCELLED)
            return CheckoutResult(placed=False, order=order)

        self._cart.items = []
        self._persist()
        logger.info(f"Order placed: total={format_money(order.total)} items={summary.item_count}")
        self.notify(MSG_ORDER_PLACED)
        return CheckoutResult(placed=True, order=order, close_cart=True)

    def get_summary(self) -> CartSummary:
        """Current subtotal, tax, total and item count."""
        return self._cart.summary(self.tax_rate)


# Singleton instance
_cart_store: Optional[CartStore] = None


def get_cart_store() -> CartStore:
    """Get CartStore singleton."""
    global _cart_store
    if _cart_store is None:
        _cart_store = CartStore(notify=get_notifier())
    return _cart_store
