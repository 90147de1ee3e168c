"""File upload and rename endpoints.

Exposes:
- POST /api/files/upload: write base64 `file_data` to `file_path`
- POST /api/files/rename: move a document's `.json` file to a new path
"""

from fastapi import APIRouter, Depends, HTTPException, Request
from pydantic import ValidationError
from starlette.concurrency import run_in_threadpool

from ..core.errors import DocsGatewayError
from ..core.models_io import (
    RenameFileRequest,
    RenameFileResponse,
    UploadFileRequest,
    UploadFileResponse,
)
from ..deps import get_store, http_error, read_json_body
from ..storage import DocumentStore

router = APIRouter(prefix="/api/files", tags=["files"])

INVALID_JSON = "Invalid JSON format"


@router.post("/upload", response_model=UploadFileResponse)
async def upload_file(request: Request, store: DocumentStore = Depends(get_store)):
    payload = await read_json_body(request, INVALID_JSON)
    try:
        req = UploadFileRequest.model_validate(payload)
    except ValidationError:
        raise HTTPException(status_code=400, detail=INVALID_JSON)

    try:
        saved_path = await run_in_threadpool(store.upload_file, req.file_path, req.file_data)
    except DocsGatewayError as e:
        raise http_error(e) from e

    return UploadFileResponse(message="File uploaded successfully", file_path=saved_path)


@router.post("/rename", response_model=RenameFileResponse)
async def rename_file(request: Request, store: DocumentStore = Depends(get_store)):
    payload = await read_json_body(request, INVALID_JSON)
    try:
        req = RenameFileRequest.model_validate(payload)
    except ValidationError:
        raise HTTPException(status_code=400, detail=INVALID_JSON)

    try:
        old_path, new_path = await run_in_threadpool(store.rename_file, req.old_path, req.new_path)
    except DocsGatewayError as e:
        raise http_error(e) from e

    return RenameFileResponse(
        message="File renamed successfully",
        old_path=old_path,
        new_path=new_path,
    )
