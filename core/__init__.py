"""
TechShop Core Module

This package contains the storefront components:
- catalog: static product list
- cart: cart models, store and key-value persistence
- db: key-value backends (Upstash Redis, in-memory)
- routers: FastAPI endpoints
- services: money helpers and toast notifications
"""
