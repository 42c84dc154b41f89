"""
API Pydantic Models

Request and response bodies for the storefront endpoints.
"""
from typing import Optional
from pydantic import BaseModel


# ==================== PRODUCT MODELS ====================

class ProductResponse(BaseModel):
    id: int
    name: str
    price: float
    price_display: str
    description: str
    icon: str


# ==================== CART MODELS ====================

class AddToCartRequest(BaseModel):
    product_id: int


class UpdateCartItemRequest(BaseModel):
    product_id: int
    delta: int  # signed, usually +1 / -1


class ClearCartRequest(BaseModel):
    confirm: bool = False


class CheckoutRequest(BaseModel):
    # Only consulted when CHECKOUT_REQUIRES_CONFIRMATION is on
    acknowledged: bool = True


class CartItemResponse(BaseModel):
    id: int
    name: str
    price: float
    icon: str
    quantity: int


class CartSummaryResponse(BaseModel):
    subtotal: float
    tax: float
    total: float
    item_count: int
    subtotal_display: str
    tax_display: str
    total_display: str


class CartResponse(BaseModel):
    items: list[CartItemResponse]
    summary: CartSummaryResponse
    notifications: list[str] = []
    checkout_requires_confirmation: bool = False


class ClearCartResponse(CartResponse):
    cleared: bool
    confirmation_required: bool = False
    prompt: Optional[str] = None


class OrderSummaryResponse(BaseModel):
    subtotal: str
    tax: str
    total: str
    message: str


class CheckoutResponse(CartResponse):
    placed: bool
    close_cart: bool = False
    order: Optional[OrderSummaryResponse] = None
