from store_catalog.db.repositories.base_repository import BaseRepository
from store_catalog.db.pipelines import STORES

class StoreRepository(BaseRepository):
    collection_name = STORES
