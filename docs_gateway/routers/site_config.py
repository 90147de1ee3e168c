"""Global configuration endpoints.

Exposes:
- GET /api/config: raw configuration file
- PUT /api/config: any JSON body, pretty-printed to the configuration file
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import Response
from starlette.concurrency import run_in_threadpool

from ..core.errors import DocsGatewayError
from ..core.models_io import MutationResponse
from ..deps import get_store, http_error, read_json_body
from ..storage import DocumentStore

router = APIRouter(prefix="/api/config", tags=["config"])


@router.get("")
def get_config(store: DocumentStore = Depends(get_store)):
    try:
        data = store.read_config()
    except DocsGatewayError as e:
        raise http_error(e) from e
    return Response(content=data, media_type="application/json")


@router.put("", response_model=MutationResponse)
async def save_config(request: Request, store: DocumentStore = Depends(get_store)):
    # Unlike documents, the body is the configuration itself, not an envelope
    value = await read_json_body(request, "Invalid JSON format")
    try:
        await run_in_threadpool(store.save_config, value)
    except DocsGatewayError as e:
        raise http_error(e) from e
    return MutationResponse(message="Configuration saved successfully")
