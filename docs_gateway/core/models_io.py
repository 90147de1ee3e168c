"""Pydantic request/response schemas used by the API.

Field names match the JSON the editor frontend already sends and reads,
so payloads stay compatible with direct API calls as well.
"""

from pydantic import BaseModel, ConfigDict, Field


class _Envelope(BaseModel):
    # Unknown fields are ignored; missing ones fall back to "" and are
    # rejected by the handler with a field-specific message.
    model_config = ConfigDict(extra="ignore")


class SaveContentRequest(_Envelope):
    """
    Body of PUT /api/docs/{id}.

    `content` is itself JSON text; it is parsed and pretty-printed before
    being written.
    """
    content: str = ""


class UploadFileRequest(_Envelope):
    """Body of POST /api/files/upload."""
    file_path: str = Field("", description="Path relative to the documents root")
    file_data: str = Field("", description="Base64 encoded file data")


class RenameFileRequest(_Envelope):
    """Body of POST /api/files/rename."""
    old_path: str = Field("", description="Current file path (relative to the documents root)")
    new_path: str = Field("", description="New file path (relative to the documents root)")


class MutationResponse(BaseModel):
    """The `{success, message}` envelope returned by every mutating endpoint."""
    success: bool = True
    message: str


class SaveDocumentResponse(MutationResponse):
    docId: str


class UploadFileResponse(MutationResponse):
    file_path: str


class RenameFileResponse(MutationResponse):
    old_path: str
    new_path: str


class HealthPaths(BaseModel):
    docs_path: str
    config_path: str


class HealthResponse(BaseModel):
    status: str
    time: str
    config: HealthPaths
