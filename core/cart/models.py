"""Cart models with Decimal-based pricing."""
from dataclasses import dataclass, field
from decimal import Decimal
from typing import List

from core.services.money import to_decimal, round_money, format_money, to_float, add, multiply

# Fixed 10% sales tax
TAX_RATE = Decimal("0.10")


@dataclass
class CartItem:
    """Single line in the cart. Name, price and icon are copied from the product."""
    product_id: int
    name: str
    price: Decimal
    icon: str
    quantity: int = 1

    def __post_init__(self):
        self.price = to_decimal(self.price)

    @property
    def total_price(self) -> Decimal:
        """Total price for all units (unrounded)."""
        return multiply(self.price, self.quantity)

    def to_dict(self) -> dict:
        """Convert to the stored record shape."""
        return {
            "id": self.product_id,
            "name": self.name,
            "price": to_float(self.price),
            "icon": self.icon,
            "quantity": self.quantity,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "CartItem":
        """
        Create from a stored record.

        Raises:
            KeyError, TypeError, ValueError, InvalidOperation: record is malformed
        """
        quantity = data["quantity"]
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 1:
            raise ValueError(f"invalid quantity: {quantity!r}")
        product_id = data["id"]
        if isinstance(product_id, bool) or not isinstance(product_id, int):
            raise ValueError(f"invalid product id: {product_id!r}")
        name, icon = data["name"], data["icon"]
        if not isinstance(name, str) or not isinstance(icon, str):
            raise ValueError(f"invalid name or icon: {name!r}, {icon!r}")
        raw_price = data["price"]
        if isinstance(raw_price, bool) or not isinstance(raw_price, (int, float, str)):
            raise ValueError(f"invalid price: {raw_price!r}")
        # Unparseable text raises InvalidOperation
        price = Decimal(str(raw_price))
        if not price.is_finite() or price < 0:
            raise ValueError(f"invalid price: {raw_price!r}")
        return cls(
            product_id=product_id,
            name=name,
            price=price,
            icon=icon,
            quantity=quantity,
        )


@dataclass(frozen=True)
class CartSummary:
    """Derived cart totals. Values are exact; rounding happens on display."""
    subtotal: Decimal
    tax: Decimal
    total: Decimal
    item_count: int

    def to_dict(self) -> dict:
        return {
            "subtotal": to_float(round_money(self.subtotal)),
            "tax": to_float(round_money(self.tax)),
            "total": to_float(round_money(self.total)),
            "item_count": self.item_count,
            "subtotal_display": format_money(self.subtotal),
            "tax_display": format_money(self.tax),
            "total_display": format_money(self.total),
        }


@dataclass
class Cart:
    """Ordered line items; insertion order is display order."""
    items: List[CartItem] = field(default_factory=list)

    def find(self, product_id: int):
        """Line item for product_id, or None."""
        return next((item for item in self.items if item.product_id == product_id), None)

    @property
    def is_empty(self) -> bool:
        return not self.items

    @property
    def item_count(self) -> int:
        """Total number of units in cart."""
        return sum(item.quantity for item in self.items)

    @property
    def subtotal(self) -> Decimal:
        total = Decimal("0")
        for item in self.items:
            total = add(total, item.total_price)
        return total

    def summary(self, tax_rate: Decimal = TAX_RATE) -> CartSummary:
        subtotal = self.subtotal
        tax = multiply(subtotal, tax_rate)
        return CartSummary(
            subtotal=subtotal,
            tax=tax,
            total=add(subtotal, tax),
            item_count=self.item_count,
        )

    def to_list(self) -> list:
        """Serialize to the stored snapshot (list of records)."""
        return [item.to_dict() for item in self.items]

    @classmethod
    def from_list(cls, data) -> "Cart":
        """
        Create from a stored snapshot.

        Raises:
            KeyError, TypeError, ValueError: snapshot is malformed
        """
        if not isinstance(data, list):
            raise TypeError(f"cart snapshot must be a list, got {type(data).__name__}")
        items = [CartItem.from_dict(record) for record in data]
        ids = [item.product_id for item in items]
        if len(ids) != len(set(ids)):
            raise ValueError("duplicate product ids in cart snapshot")
        return cls(items=items)
