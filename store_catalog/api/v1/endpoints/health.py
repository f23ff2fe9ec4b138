from fastapi import APIRouter
from store_catalog.core.config import get_settings

router = APIRouter()

@router.get("/health", summary="Healthcheck")
async def health():
    settings = get_settings()
    return {"status": "ok", "service": settings.APP_NAME, "database": settings.MONGO_DB_NAME}
