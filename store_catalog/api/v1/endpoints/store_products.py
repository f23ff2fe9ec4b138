from fastapi import APIRouter, Depends, Query, status
from motor.motor_asyncio import AsyncIOMotorDatabase

from store_catalog.db.mongo_client import get_database
from store_catalog.schemas.store_product import (
    MessageEnvelope,
    ProductSummaryFilter,
    ProductSummaryListEnvelope,
    StoreProductCreate,
    StoreProductEnvelope,
    StoreProductFilter,
    StoreProductListEnvelope,
    StoreProductMessageEnvelope,
    StoreProductUpdate,
)
from store_catalog.services.store_product_service import StoreProductService

router = APIRouter()

def get_store_product_service(db: AsyncIOMotorDatabase = Depends(get_database)) -> StoreProductService:
    return StoreProductService(db)

@router.post(
    "",
    response_model=StoreProductMessageEnvelope,
    status_code=status.HTTP_201_CREATED,
    summary="Add a product to a store",
)
async def create_store_product(
    body: StoreProductCreate,
    service: StoreProductService = Depends(get_store_product_service),
):
    store_product = await service.create(body)
    return StoreProductMessageEnvelope(message="Store Product created successfully.", store_product=store_product)

@router.get("", response_model=StoreProductListEnvelope, summary="List store products")
async def list_store_products(
    store_id: str | None = Query(None, alias="storeId"),
    category: str | None = None,
    recommended: str | None = None,
    discount: str | None = None,
    search: str | None = None,
    service: StoreProductService = Depends(get_store_product_service),
):
    filters = StoreProductFilter(
        store_id=store_id, category=category, recommended=recommended, discount=discount, search=search
    )
    return StoreProductListEnvelope(store_products=await service.list(filters))

# Fixed paths are declared before /{store_product_id} so they are not captured by it.
@router.get(
    "/search-summary",
    response_model=ProductSummaryListEnvelope,
    summary="One row per available product with its price range across stores",
)
async def product_search_summary(
    category: str | None = None,
    search: str | None = None,
    service: StoreProductService = Depends(get_store_product_service),
):
    summaries = await service.search_summary(ProductSummaryFilter(category=category, search=search))
    return ProductSummaryListEnvelope(product_summaries=summaries)

@router.get(
    "/options/{product_id}",
    response_model=StoreProductListEnvelope,
    summary="Stores carrying a product, with their price and stock",
)
async def store_options_for_product(
    product_id: str,
    service: StoreProductService = Depends(get_store_product_service),
):
    return StoreProductListEnvelope(store_products=await service.store_options(product_id))

@router.get("/{store_product_id}", response_model=StoreProductEnvelope, summary="Get a store product")
async def get_store_product(
    store_product_id: str,
    service: StoreProductService = Depends(get_store_product_service),
):
    return StoreProductEnvelope(store_product=await service.get(store_product_id))

@router.put("/{store_product_id}", response_model=StoreProductMessageEnvelope, summary="Partially update a store product")
async def update_store_product(
    store_product_id: str,
    body: StoreProductUpdate,
    service: StoreProductService = Depends(get_store_product_service),
):
    store_product = await service.update(store_product_id, body)
    return StoreProductMessageEnvelope(message="Store Product updated successfully.", store_product=store_product)

@router.delete("/{store_product_id}", response_model=MessageEnvelope, summary="Remove a product from a store")
async def delete_store_product(
    store_product_id: str,
    service: StoreProductService = Depends(get_store_product_service),
):
    await service.delete(store_product_id)
    return MessageEnvelope(message="Store Product deleted successfully.")
