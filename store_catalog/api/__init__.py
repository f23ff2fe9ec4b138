from fastapi import APIRouter
from store_catalog.api.v1.endpoints.health import router as health_router
from store_catalog.api.v1.endpoints.store_products import router as store_products_router

api_router = APIRouter()
api_router.include_router(health_router, tags=["health"])
api_router.include_router(store_products_router, prefix="/store-products", tags=["store-products"])
