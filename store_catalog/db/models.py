from datetime import datetime
from typing import Annotated, Any
from bson import ObjectId
from pydantic import BaseModel, BeforeValidator, ConfigDict, Field
from pydantic.alias_generators import to_camel

# ObjectIds leave the database layer as 24-hex strings.
PyObjectId = Annotated[str, BeforeValidator(str)]


def stringify_ids(value: Any) -> Any:
    """Recursively replace ObjectIds in a raw document with their hex form."""
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, dict):
        return {k: stringify_ids(v) for k, v in value.items()}
    if isinstance(value, list):
        return [stringify_ids(v) for v in value]
    return value


class MongoModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ProductRef(MongoModel):
    """A product document owned by the catalog; unknown fields pass through."""
    model_config = ConfigDict(extra="allow")

    id: PyObjectId = Field(alias="_id")
    name: str | None = None
    description: str | None = None
    category: str | None = None
    images: list[Any] | None = None


class StoreRef(MongoModel):
    model_config = ConfigDict(extra="allow")

    id: PyObjectId = Field(alias="_id")
    name: str | None = None


class StoreProductDoc(MongoModel):
    """A store product with ``productId`` and ``storeId`` expanded.

    A reference that no longer resolves is rendered as ``None``.
    """
    id: PyObjectId = Field(alias="_id")
    product_id: ProductRef | None = None
    store_id: StoreRef | None = None
    # Written by other services too, so stored values are not trusted to be clean.
    price: float | None = None
    stock: int | float | None = None
    is_available: bool = True
    recommended: bool = False
    discount: bool = False
    store_specific_images: list[Any] | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ProductSummary(MongoModel):
    id: PyObjectId = Field(alias="_id")
    name: str | None = None
    description: str | None = None
    images: list[Any] | None = None
    min_price: float | None = None
    max_price: float | None = None
    sample_store_product_id: PyObjectId
