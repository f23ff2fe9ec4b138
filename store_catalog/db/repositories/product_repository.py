from store_catalog.db.repositories.base_repository import BaseRepository
from store_catalog.db.pipelines import PRODUCTS

class ProductRepository(BaseRepository):
    """Read-only access to the catalog's products."""
    collection_name = PRODUCTS
