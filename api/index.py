"""
TechShop Storefront - Main FastAPI Application

Serves the application shell, static assets, the catalog and cart API,
and a health check.
"""
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles

from core.cart import get_cart_store
from core.logging import get_logger
from core.routers import cart_router, products_router

logger = get_logger(__name__)

PUBLIC_DIR = Path(__file__).resolve().parent.parent / "public"


# ==================== FASTAPI APP ====================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler"""
    # Startup: restore the saved cart before the first request
    store = get_cart_store()
    logger.info(f"TechShop ready, cart has {store.get_summary().item_count} item(s)")
    yield


app = FastAPI(
    title="TechShop",
    description="Storefront demo: catalog, cart and simulated checkout",
    version="1.0.0",
    lifespan=lifespan
)

app.include_router(products_router)
app.include_router(cart_router)


# ==================== HEALTH CHECK ====================

@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "ok", "message": "Server is running"}


# ==================== APPLICATION SHELL ====================

@app.get("/", include_in_schema=False)
async def index():
    return FileResponse(PUBLIC_DIR / "index.html")


# Everything else under public/ is served as-is. Must stay last.
app.mount("/", StaticFiles(directory=str(PUBLIC_DIR)), name="static")
