"""
Common Error and Notification Constants

Centralized user-facing strings to avoid duplication between the cart store,
the routers and the tests.
"""

# Cart notifications
MSG_ITEM_ADDED = "{name} added to cart!"
MSG_ITEM_REMOVED = "Item removed from cart"
MSG_CART_ALREADY_EMPTY = "Cart is already empty"
MSG_CART_CLEARED = "Cart cleared"
MSG_CART_EMPTY = "Your cart is empty"
MSG_ORDER_PLACED = "Order placed successfully!"
MSG_CHECKOUT_CANCELLED = "Checkout cancelled"

# Prompts
PROMPT_CLEAR_CART = "Are you sure you want to clear your cart?"

# Generic errors
ERROR_PRODUCT_NOT_FOUND = "Product not found"
ERROR_CART_UNAVAILABLE = "Cart service unavailable"
ERROR_STORAGE_NOT_CONFIGURED = "UPSTASH_REDIS_REST_URL and UPSTASH_REDIS_REST_TOKEN must be set"
