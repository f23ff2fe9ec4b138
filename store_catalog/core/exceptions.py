"""Error taxonomy for the store catalog.

Every error carries the HTTP status it maps to and a message that is safe
to show to end users. The application renders them as
``{"success": false, "message": ...}``.
"""
from fastapi import status


class StoreCatalogError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "An unexpected error occurred."

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidArgumentError(StoreCatalogError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request."


class NotFoundError(StoreCatalogError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Resource not found."


class ConflictError(StoreCatalogError):
    status_code = status.HTTP_409_CONFLICT
    default_message = "Resource already exists."


class InternalError(StoreCatalogError):
    pass
