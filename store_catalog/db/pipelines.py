"""Aggregation stages for store product queries.

Every helper returns a list of stages so a query reads as a concatenation
of steps: filter, join, filter on the joined documents, shape.
"""
import re
from typing import Any, Dict, List
from bson import ObjectId

Stage = Dict[str, Any]

PRODUCTS = "products"
STORES = "stores"


def match(criteria: Dict[str, Any] | None) -> List[Stage]:
    return [{"$match": criteria}] if criteria else []


def store_product_criteria(
    store_id: ObjectId | None = None,
    recommended: bool = False,
    discount: bool = False,
) -> Dict[str, Any]:
    """Filter on the store product itself; flags only ever narrow to ``True``."""
    criteria: Dict[str, Any] = {}
    if store_id is not None:
        criteria["storeId"] = store_id
    if recommended:
        criteria["recommended"] = True
    if discount:
        criteria["discount"] = True
    return criteria


def _lookup_one(collection: str, field: str, preserve_orphans: bool) -> List[Stage]:
    # The joined document replaces the reference in place.
    return [
        {"$lookup": {"from": collection, "localField": field, "foreignField": "_id", "as": field}},
        {"$unwind": {"path": f"${field}", "preserveNullAndEmptyArrays": preserve_orphans}},
    ]


def expand_product(preserve_orphans: bool = False) -> List[Stage]:
    return _lookup_one(PRODUCTS, "productId", preserve_orphans)


def expand_store(preserve_orphans: bool = False) -> List[Stage]:
    return _lookup_one(STORES, "storeId", preserve_orphans)


def expand_references(preserve_orphans: bool = False) -> List[Stage]:
    """Join product and store.

    With ``preserve_orphans`` off a record whose product or store is gone
    is dropped; with it on the dangling reference is removed instead.
    """
    return expand_product(preserve_orphans) + expand_store(preserve_orphans)


def filter_category(category: str | None) -> List[Stage]:
    return match({"productId.category": category}) if category else []


def filter_name(search: str | None) -> List[Stage]:
    if not search:
        return []
    # Literal substring match: regex metacharacters in user input are escaped.
    return match({"productId.name": {"$regex": re.escape(search), "$options": "i"}})


def summarize_by_product() -> List[Stage]:
    return [
        {
            "$group": {
                "_id": "$productId._id",
                "name": {"$first": "$productId.name"},
                "description": {"$first": "$productId.description"},
                "images": {"$first": "$productId.images"},
                "minPrice": {"$min": "$price"},
                "maxPrice": {"$max": "$price"},
                "sampleStoreProductId": {"$first": "$_id"},
            }
        },
        {
            "$project": {
                "_id": 1,
                "name": 1,
                "description": 1,
                "images": 1,
                "minPrice": 1,
                "maxPrice": 1,
                "sampleStoreProductId": 1,
            }
        },
    ]
