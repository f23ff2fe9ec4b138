from typing import Any, Dict, List
from bson import ObjectId
from pymongo import ASCENDING
from store_catalog.db.repositories.base_repository import BaseRepository
from store_catalog.db.models import ProductSummary, StoreProductDoc, stringify_ids
from store_catalog.db import pipelines as p

class StoreProductRepository(BaseRepository):
    collection_name = "storeproducts"

    async def ensure_indexes(self) -> None:
        await self.collection.create_index(
            [("productId", ASCENDING), ("storeId", ASCENDING)],
            unique=True,
            name="productId_storeId_unique",
        )
        self.log.info("indexes ensured")

    @staticmethod
    def _to_docs(raw: List[Dict]) -> List[StoreProductDoc]:
        return [StoreProductDoc.model_validate(stringify_ids(d)) for d in raw]

    async def get_expanded(self, _id: ObjectId) -> StoreProductDoc | None:
        docs = await self.find_expanded({"_id": _id})
        return docs[0] if docs else None

    async def find_expanded(self, criteria: Dict[str, Any]) -> List[StoreProductDoc]:
        """Records matching ``criteria``, dangling references rendered as null."""
        pipeline = p.match(criteria) + p.expand_references(preserve_orphans=True)
        return self._to_docs(await self.aggregate(pipeline))

    async def search(
        self,
        criteria: Dict[str, Any],
        category: str | None = None,
        search: str | None = None,
    ) -> List[StoreProductDoc]:
        pipeline = (
            p.match(criteria)
            + p.expand_references()
            + p.filter_category(category)
            + p.filter_name(search)
        )
        self.log.debug(f"search pipeline: {pipeline}")
        return self._to_docs(await self.aggregate(pipeline))

    async def summarize(self, category: str | None = None, search: str | None = None) -> List[ProductSummary]:
        pipeline = (
            p.match({"isAvailable": True})
            + p.expand_product()
            + p.filter_category(category)
            + p.filter_name(search)
            + p.summarize_by_product()
        )
        rows = await self.aggregate(pipeline)
        return [ProductSummary.model_validate(stringify_ids(r)) for r in rows]
