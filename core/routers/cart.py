"""
Cart Router

Shopping cart endpoints. Every response carries the current line items,
the summary, and the notifications produced by the operation.

Dialogs are a request/response step: the client asks the user first and
sends the answer (`confirm` for clearing, `acknowledged` for checkout).

Handlers call the synchronous CartStore without awaiting, so each cart
operation runs to completion on the event loop. With CART_STORAGE=redis
every save blocks the loop for one Upstash REST round-trip.
"""
from fastapi import APIRouter, HTTPException, Depends

from core.cart import CartStore, get_cart_store
from core.errors import ERROR_CART_UNAVAILABLE
from core.logging import get_logger
from core.services.notifications import Notifier, get_notifier
from .models import (
    AddToCartRequest,
    UpdateCartItemRequest,
    ClearCartRequest,
    CheckoutRequest,
    CartResponse,
    ClearCartResponse,
    CheckoutResponse,
)

logger = get_logger(__name__)

router = APIRouter(prefix="/api", tags=["cart"])


def _format_cart_response(store: CartStore, notifier: Notifier) -> dict:
    """Build the shared part of every cart response."""
    return {
        "items": [item.to_dict() for item in store.items],
        "summary": store.get_summary().to_dict(),
        "notifications": notifier.drain(),
        "checkout_requires_confirmation": store.checkout_requires_confirmation,
    }


def _unavailable(action: str, e: Exception) -> HTTPException:
    logger.error(f"Failed to {action}: {e}", exc_info=True)
    return HTTPException(status_code=500, detail=ERROR_CART_UNAVAILABLE)


@router.get("/cart", response_model=CartResponse)
async def get_cart(
    store: CartStore = Depends(get_cart_store),
    notifier: Notifier = Depends(get_notifier),
):
    """Current cart with totals."""
    return _format_cart_response(store, notifier)


@router.post("/cart/add", response_model=CartResponse)
async def add_to_cart(
    request: AddToCartRequest,
    store: CartStore = Depends(get_cart_store),
    notifier: Notifier = Depends(get_notifier),
):
    """Add one unit of a product. Unknown ids are ignored."""
    try:
        store.add_to_cart(request.product_id)
    except Exception as e:
        raise _unavailable("add to cart", e)
    return _format_cart_response(store, notifier)


@router.patch("/cart/item", response_model=CartResponse)
async def update_cart_item(
    request: UpdateCartItemRequest,
    store: CartStore = Depends(get_cart_store),
    notifier: Notifier = Depends(get_notifier),
):
    """Change a line's quantity by delta (removes it at zero)."""
    try:
        store.update_quantity(request.product_id, request.delta)
    except Exception as e:
        raise _unavailable("update cart item", e)
    return _format_cart_response(store, notifier)


@router.delete("/cart/item/{product_id}", response_model=CartResponse)
async def remove_cart_item(
    product_id: int,
    store: CartStore = Depends(get_cart_store),
    notifier: Notifier = Depends(get_notifier),
):
    """Remove a line from the cart."""
    try:
        store.remove_from_cart(product_id)
    except Exception as e:
        raise _unavailable("remove cart item", e)
    return _format_cart_response(store, notifier)


@router.post("/cart/clear", response_model=ClearCartResponse)
async def clear_cart(
    request: ClearCartRequest,
    store: CartStore = Depends(get_cart_store),
    notifier: Notifier = Depends(get_notifier),
):
    """Empty the cart once the user has confirmed."""
    asked = []

    def confirm(prompt: str) -> bool:
        asked.append(prompt)
        return request.confirm

    try:
        cleared = store.clear_cart(confirm)
    except Exception as e:
        raise _unavailable("clear cart", e)

    response = _format_cart_response(store, notifier)
    response["cleared"] = cleared
    if asked and not cleared:
        response["confirmation_required"] = True
        response["prompt"] = asked[0]
    return response


@router.post("/cart/checkout", response_model=CheckoutResponse)
async def checkout(
    request: CheckoutRequest = CheckoutRequest(),
    store: CartStore = Depends(get_cart_store),
    notifier: Notifier = Depends(get_notifier),
):
    """Place the order and empty the cart."""
    try:
        result = store.checkout(lambda order: request.acknowledged)
    except Exception as e:
        raise _unavailable("checkout", e)

    response = _format_cart_response(store, notifier)
    response["placed"] = result.placed
    response["close_cart"] = result.close_cart
    response["order"] = result.order.to_dict() if result.order else None
    return response
