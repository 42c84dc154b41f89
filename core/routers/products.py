"""
Products API Router

Public endpoints for the static catalog.
"""
from fastapi import APIRouter, HTTPException

from core.catalog import list_products, get_product
from core.errors import ERROR_PRODUCT_NOT_FOUND
from .models import ProductResponse

router = APIRouter(prefix="/api", tags=["products"])


@router.get("/products", response_model=list[ProductResponse])
async def get_products():
    """All products in display order."""
    return [product.to_dict() for product in list_products()]


@router.get("/products/{product_id}", response_model=ProductResponse)
async def get_product_by_id(product_id: int):
    """Single product."""
    product = get_product(product_id)
    if product is None:
        raise HTTPException(status_code=404, detail=ERROR_PRODUCT_NOT_FOUND)
    return product.to_dict()
