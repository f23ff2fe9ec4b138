from contextlib import contextmanager
from datetime import datetime, timezone
from typing import List
from bson import ObjectId
from bson.errors import InvalidId
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import DuplicateKeyError
from loguru import logger

from store_catalog.core.exceptions import (
    ConflictError,
    InternalError,
    InvalidArgumentError,
    NotFoundError,
    StoreCatalogError,
)
from store_catalog.db.models import ProductSummary, StoreProductDoc
from store_catalog.db.pipelines import store_product_criteria
from store_catalog.db.repositories.product_repository import ProductRepository
from store_catalog.db.repositories.store_repository import StoreRepository
from store_catalog.db.repositories.store_product_repository import StoreProductRepository
from store_catalog.schemas.store_product import (
    ProductSummaryFilter,
    StoreProductCreate,
    StoreProductFilter,
    StoreProductUpdate,
)

INVALID_STORE_PRODUCT_ID = "Invalid Store Product ID format."
INVALID_REFERENCE_IDS = "Invalid format for Product ID or Store ID."
STORE_PRODUCT_NOT_FOUND = "Store Product not found."
DUPLICATE_PAIR = "This product already exists in this store."


def parse_object_id(value: str | None, message: str) -> ObjectId:
    if not value or not ObjectId.is_valid(value):
        raise InvalidArgumentError(message)
    return ObjectId(value)


def _is_pair_conflict(exc: DuplicateKeyError) -> bool:
    key_pattern = (exc.details or {}).get("keyPattern")
    if key_pattern is None:
        return True
    return "productId" in key_pattern and "storeId" in key_pattern


class StoreProductService:
    """Store products: the price, stock and promotions of a product in one store."""

    def __init__(self, db: AsyncIOMotorDatabase):
        self.repo = StoreProductRepository(db)
        self.products = ProductRepository(db)
        self.stores = StoreRepository(db)
        self.log = logger.bind(service="StoreProductService")

    @contextmanager
    def _translate_errors(self, action: str):
        """Map anything raised inside the block onto the catalog taxonomy."""
        try:
            yield
        except StoreCatalogError:
            raise
        except DuplicateKeyError as exc:
            if _is_pair_conflict(exc):
                self.log.info(f"duplicate store product while {action}")
                raise ConflictError(DUPLICATE_PAIR) from exc
            self.log.error(f"error {action}: {exc}")
            raise InternalError(str(exc) or f"An error occurred while {action}.") from exc
        except InvalidId as exc:
            raise InvalidArgumentError("Invalid ID format in request body.") from exc
        except Exception as exc:
            self.log.exception(f"error {action}")
            raise InternalError(str(exc) or f"An error occurred while {action}.") from exc

    async def create(self, data: StoreProductCreate) -> StoreProductDoc:
        if not data.product_id or not data.store_id:
            raise InvalidArgumentError("Missing required fields for StoreProduct.")
        product_id = parse_object_id(data.product_id, INVALID_REFERENCE_IDS)
        store_id = parse_object_id(data.store_id, INVALID_REFERENCE_IDS)

        with self._translate_errors("creating the store product"):
            # Advisory only: the unique index decides concurrent inserts.
            if not await self.products.exists(product_id):
                raise NotFoundError("Common Product not found.")
            if not await self.stores.exists(store_id):
                raise NotFoundError("Store not found.")

            now = datetime.now(timezone.utc)
            doc = data.model_dump(by_alias=True)
            doc.update(productId=product_id, storeId=store_id, createdAt=now, updatedAt=now)
            new_id = await self.repo.create(doc)
            self.log.info(f"store product {new_id} created for product {product_id} in store {store_id}")
            return await self._get_existing(new_id)

    async def list(self, filters: StoreProductFilter) -> List[StoreProductDoc]:
        store_id = None
        if filters.store_id:
            store_id = parse_object_id(filters.store_id, "Invalid Store ID format.")
        criteria = store_product_criteria(
            store_id=store_id,
            recommended=filters.recommended == "true",
            discount=filters.discount == "true",
        )
        self.log.debug(f"listing store products with {filters.model_dump(exclude_none=True)}")

        with self._translate_errors("fetching store products"):
            found = await self.repo.search(criteria, category=filters.category, search=filters.search)
        self.log.debug(f"found {len(found)} store products")
        return found

    async def get(self, store_product_id: str) -> StoreProductDoc:
        _id = parse_object_id(store_product_id, INVALID_STORE_PRODUCT_ID)
        with self._translate_errors("fetching the store product"):
            return await self._get_existing(_id)

    async def update(self, store_product_id: str, data: StoreProductUpdate) -> StoreProductDoc:
        _id = parse_object_id(store_product_id, INVALID_STORE_PRODUCT_ID)
        payload = data.model_dump(by_alias=True, exclude_unset=True, exclude_none=True)
        for field in ("productId", "storeId"):
            if field in payload:
                payload[field] = parse_object_id(payload[field], INVALID_REFERENCE_IDS)
        payload["updatedAt"] = datetime.now(timezone.utc)

        with self._translate_errors("updating the store product"):
            if await self.repo.update(_id, payload) is None:
                raise NotFoundError(STORE_PRODUCT_NOT_FOUND)
            self.log.info(f"store product {_id} updated: {sorted(payload)}")
            return await self._get_existing(_id)

    async def delete(self, store_product_id: str) -> None:
        _id = parse_object_id(store_product_id, INVALID_STORE_PRODUCT_ID)
        with self._translate_errors("deleting the store product"):
            if not await self.repo.delete(_id):
                raise NotFoundError(STORE_PRODUCT_NOT_FOUND)
        self.log.info(f"store product {_id} deleted")

    async def search_summary(self, filters: ProductSummaryFilter) -> List[ProductSummary]:
        with self._translate_errors("fetching product search summary"):
            return await self.repo.summarize(category=filters.category, search=filters.search)

    async def store_options(self, product_id: str) -> List[StoreProductDoc]:
        _id = parse_object_id(product_id, "Valid Product ID is required.")
        with self._translate_errors("fetching store options"):
            options = await self.repo.find_expanded({"productId": _id})
        if not options:
            self.log.info(f"no store products found for product {_id}")
            raise NotFoundError("No store options found for this product.")
        return options

    async def _get_existing(self, _id: ObjectId) -> StoreProductDoc:
        found = await self.repo.get_expanded(_id)
        if found is None:
            raise NotFoundError(STORE_PRODUCT_NOT_FOUND)
        return found
