"""
Shared request dependencies.

The settings value and the storage engine are built once in `create_app`
and stored on `app.state`; handlers receive them through `Depends` so
each app instance (and each test) carries its own configuration.
"""

from typing import Any

from fastapi import Depends, HTTPException, Request
from starlette.requests import ClientDisconnect

from .core.config import Settings
from .core.errors import (
    DocsGatewayError,
    DocumentNotFoundError,
    FileConflictError,
    InvalidPathError,
    InvalidPayloadError,
    StorageError,
)
from .storage import DocumentStore
from .storage.json_io import parse_json

_STATUS_BY_ERROR = (
    (InvalidPathError, 400),
    (InvalidPayloadError, 400),
    (DocumentNotFoundError, 404),
    (FileConflictError, 409),
    (StorageError, 500),
)


def get_settings(request: Request) -> Settings:
    """Dependency injection for the process settings."""
    return request.app.state.settings


def get_store(request: Request) -> DocumentStore:
    """Dependency injection for the storage engine."""
    return request.app.state.store


def http_error(exc: DocsGatewayError) -> HTTPException:
    """Translate a storage-layer error into the HTTP status the API documents."""
    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return HTTPException(status_code=status_code, detail=exc.message)
    return HTTPException(status_code=500, detail="Internal server error")


async def read_json_body(request: Request, invalid_message: str) -> Any:
    """Read the full request body and decode it as strict JSON, or fail with 400."""
    try:
        body = await request.body()
    except ClientDisconnect:
        raise HTTPException(status_code=400, detail="Failed to read request body")
    try:
        return parse_json(body)
    except ValueError:
        raise HTTPException(status_code=400, detail=invalid_message)


def valid_doc_id(doc_id: str, store: DocumentStore = Depends(get_store)) -> str:
    """Path dependency: reject empty or traversing ids before any filesystem access."""
    try:
        return store.document_id(doc_id)
    except InvalidPathError as e:
        raise http_error(e) from e
