import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger
from prometheus_fastapi_instrumentator import Instrumentator

from store_catalog.api import api_router
from store_catalog.core.config import get_settings
from store_catalog.core.exceptions import StoreCatalogError
from store_catalog.core.logging_config import setup_logging
from store_catalog.db.mongo_client import connect_to_mongo, close_mongo_connection, get_database
from store_catalog.db.repositories.store_product_repository import StoreProductRepository

setup_logging()

app = FastAPI(title=get_settings().APP_NAME)

@app.on_event("startup")
async def on_startup():
    await connect_to_mongo()
    await StoreProductRepository(get_database()).ensure_indexes()
    logger.info("API started")

@app.on_event("shutdown")
async def on_shutdown():
    await close_mongo_connection()
    logger.info("API stopped")

@app.exception_handler(StoreCatalogError)
async def store_catalog_error_handler(request: Request, exc: StoreCatalogError):
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"success": False, "message": exc.message})

def describe_validation_errors(errors) -> str:
    if any(e["type"] == "json_invalid" for e in errors):
        return "Request body is not valid JSON."
    missing = [str(e["loc"][-1]) for e in errors if e["type"] == "missing"]
    if missing:
        return f"Missing required fields: {', '.join(missing)}."
    first = errors[0]
    return f"Invalid value for {first['loc'][-1]}: {first['msg']}."

@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"success": False, "message": describe_validation_errors(exc.errors())},
    )

app.include_router(api_router, prefix=get_settings().API_PREFIX)
Instrumentator().instrument(app).expose(app)

if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run("store_catalog.main:app", host=settings.HOST, port=settings.PORT)
