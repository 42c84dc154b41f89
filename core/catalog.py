"""Static product catalog."""
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from core.services.money import to_float, format_money


@dataclass(frozen=True)
class Product:
    """Purchasable product. Defined once at import time, never mutated."""
    id: int
    name: str
    price: Decimal
    description: str
    icon: str

    def to_dict(self) -> dict:
        """Convert to dictionary for API responses."""
        return {
            "id": self.id,
            "name": self.name,
            "price": to_float(self.price),
            "price_display": format_money(self.price),
            "description": self.description,
            "icon": self.icon,
        }


PRODUCTS: tuple[Product, ...] = (
    Product(1, "Wireless Headphones", Decimal("79.99"),
            "Premium noise-canceling headphones with 30-hour battery life", "🎧"),
    Product(2, "Smart Watch", Decimal("199.99"),
            "Fitness tracking, heart rate monitor, and notifications", "⌚"),
    Product(3, "Laptop Stand", Decimal("49.99"),
            "Ergonomic aluminum stand for better posture", "💻"),
    Product(4, "Wireless Mouse", Decimal("29.99"),
            "Ergonomic design with precision tracking", "🖱️"),
    Product(5, "USB-C Hub", Decimal("39.99"),
            "7-in-1 hub with HDMI, USB ports, and SD card reader", "🔌"),
    Product(6, "Portable Charger", Decimal("34.99"),
            "20,000mAh power bank with fast charging", "🔋"),
    Product(7, "Webcam HD", Decimal("89.99"),
            "1080p webcam with auto-focus and built-in microphone", "📷"),
    Product(8, "Bluetooth Speaker", Decimal("59.99"),
            "Waterproof speaker with 12-hour playtime", "🔊"),
    Product(9, "Mechanical Keyboard", Decimal("129.99"),
            "RGB backlit with cherry MX switches", "⌨️"),
)

_BY_ID = {product.id: product for product in PRODUCTS}


def list_products() -> tuple[Product, ...]:
    """All products in display order."""
    return PRODUCTS


def get_product(product_id: int) -> Optional[Product]:
    """Look up a product by id, None when unknown."""
    return _BY_ID.get(product_id)
