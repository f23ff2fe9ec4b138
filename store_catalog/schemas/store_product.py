from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from store_catalog.db.models import ProductSummary, StoreProductDoc

class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

class StoreProductCreate(CamelModel):
    product_id: str = Field(..., description="ID of the catalog product")
    store_id: str = Field(..., description="ID of the store carrying it")
    price: float = Field(..., ge=0)
    stock: int = Field(..., ge=0)
    is_available: bool = True
    recommended: bool = False
    discount: bool = False
    store_specific_images: List[str] = Field(default_factory=list)

class StoreProductUpdate(CamelModel):
    """Partial update; omitted or null fields keep their stored value."""
    product_id: Optional[str] = None
    store_id: Optional[str] = None
    price: Optional[float] = Field(None, ge=0)
    stock: Optional[int] = Field(None, ge=0)
    is_available: Optional[bool] = None
    recommended: Optional[bool] = None
    discount: Optional[bool] = None
    store_specific_images: Optional[List[str]] = None

class StoreProductFilter(BaseModel):
    store_id: Optional[str] = None
    category: Optional[str] = None
    # Only the literal "true" turns these filters on.
    recommended: Optional[str] = None
    discount: Optional[str] = None
    search: Optional[str] = None

class ProductSummaryFilter(BaseModel):
    category: Optional[str] = None
    search: Optional[str] = None

class MessageEnvelope(CamelModel):
    success: bool = True
    message: str

class StoreProductEnvelope(CamelModel):
    success: bool = True
    store_product: StoreProductDoc

class StoreProductMessageEnvelope(StoreProductEnvelope):
    message: str

class StoreProductListEnvelope(CamelModel):
    success: bool = True
    store_products: List[StoreProductDoc]

class ProductSummaryListEnvelope(CamelModel):
    success: bool = True
    product_summaries: List[ProductSummary]
