from typing import Any, Dict, List
from motor.motor_asyncio import AsyncIOMotorDatabase, AsyncIOMotorCollection
from bson import ObjectId
from pymongo import ReturnDocument
from loguru import logger

class BaseRepository:
    collection_name: str

    def __init__(self, db: AsyncIOMotorDatabase):
        self.db = db
        self.collection: AsyncIOMotorCollection = db[self.collection_name]
        self.log = logger.bind(repo=self.collection_name)

    async def exists(self, _id: ObjectId) -> bool:
        return await self.collection.find_one({"_id": _id}, {"_id": 1}) is not None

    async def create(self, data: Dict) -> ObjectId:
        res = await self.collection.insert_one(data)
        return res.inserted_id

    async def update(self, _id: ObjectId, payload: Dict) -> Dict | None:
        return await self.collection.find_one_and_update(
            {"_id": _id}, {"$set": payload}, return_document=ReturnDocument.AFTER
        )

    async def delete(self, _id: ObjectId) -> bool:
        return await self.collection.find_one_and_delete({"_id": _id}) is not None

    async def aggregate(self, pipeline: List[Dict[str, Any]]) -> List[Dict]:
        return [doc async for doc in self.collection.aggregate(pipeline)]
