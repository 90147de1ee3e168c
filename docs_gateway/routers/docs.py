"""Document endpoints.

Exposes:
- GET /api/docs/list : raw contents of index.json
- GET /api/docs/{id} : raw document JSON
- PUT /api/docs/{id} : save `{content}` (JSON text) pretty-printed as {id}.json
"""

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import Response
from pydantic import ValidationError
from starlette.concurrency import run_in_threadpool

from ..core.errors import DocsGatewayError
from ..core.models_io import SaveContentRequest, SaveDocumentResponse
from ..deps import get_store, http_error, read_json_body, valid_doc_id
from ..storage import DocumentStore
from ..storage.json_io import parse_json

router = APIRouter(prefix="/api/docs", tags=["docs"])

JSON_MEDIA_TYPE = "application/json"


# Registered for every method so PUT /api/docs/list is a 405 rather than a
# save of "list.json" through the catch-all document route below.
@router.api_route("/list", methods=["GET", "POST", "PUT", "PATCH", "DELETE"])
def list_documents(request: Request, store: DocumentStore = Depends(get_store)):
    if request.method != "GET":
        raise HTTPException(status_code=405, detail="Method not allowed", headers={"Allow": "GET"})
    try:
        data = store.read_index()
    except DocsGatewayError as e:
        raise http_error(e) from e
    return Response(content=data, media_type=JSON_MEDIA_TYPE)


@router.get("/{doc_id:path}")
def get_document(doc_id: str = Depends(valid_doc_id), store: DocumentStore = Depends(get_store)):
    try:
        data = store.read_document(doc_id)
    except DocsGatewayError as e:
        raise http_error(e) from e
    return Response(content=data, media_type=JSON_MEDIA_TYPE)


@router.put("/{doc_id:path}", response_model=SaveDocumentResponse)
async def save_document(
    request: Request,
    doc_id: str = Depends(valid_doc_id),
    store: DocumentStore = Depends(get_store),
):
    payload = await read_json_body(request, "Invalid JSON in request body")
    try:
        req = SaveContentRequest.model_validate(payload)
    except ValidationError:
        raise HTTPException(status_code=400, detail="Invalid JSON in request body")

    # The envelope carries JSON text; it must parse on its own
    try:
        content = parse_json(req.content)
    except ValueError:
        raise HTTPException(status_code=400, detail="Content must be valid JSON")

    try:
        await run_in_threadpool(store.save_document, doc_id, content)
    except DocsGatewayError as e:
        raise http_error(e) from e

    return SaveDocumentResponse(
        message=f"Document {doc_id} saved successfully",
        docId=doc_id,
    )
