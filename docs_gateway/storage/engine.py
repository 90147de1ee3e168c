"""Storage engine: document, configuration and file operations.

Every method maps one API operation onto direct filesystem calls beneath
the configured roots. There is no cache and no locking; concurrent writes
to the same path race at the filesystem level and the last write wins.
"""

import base64
import binascii
import logging
import os
from pathlib import Path
from typing import Any, Tuple

from ..core.config import INDEX_FILENAME, Settings
from ..core.errors import (
    DocumentNotFoundError,
    FileConflictError,
    InvalidPathError,
    InvalidPayloadError,
    StorageError,
)
from .json_io import format_json
from .paths import (
    clean_path,
    document_filename,
    reject_traversal,
    rename_filename,
    resolve_under,
)

logger = logging.getLogger(__name__)


def _read(path: Path, operation: str, message: str) -> bytes:
    try:
        return path.read_bytes()
    except OSError as e:
        logger.error("%s failed for %s: %s", operation, path, e)
        raise StorageError(message, operation, str(path), e) from e


def _ensure_parent(path: Path, operation: str) -> None:
    parent = path.parent
    try:
        parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        logger.error("%s: creating directory %s failed: %s", operation, parent, e)
        raise StorageError("Failed to create directory", operation, str(parent), e) from e


def _write(path: Path, data: bytes, operation: str, message: str) -> None:
    _ensure_parent(path, operation)
    try:
        path.write_bytes(data)
    except OSError as e:
        logger.error("%s failed for %s: %s", operation, path, e)
        raise StorageError(message, operation, str(path), e) from e


def _is_missing(path: Path) -> bool:
    # Only ENOENT counts; other stat failures surface when the rename runs
    try:
        os.stat(path)
    except FileNotFoundError:
        return True
    except OSError:
        return False
    return False


def _is_present(path: Path) -> bool:
    try:
        os.stat(path)
    except OSError:
        return False
    return True


class DocumentStore:
    """
    Filesystem operations scoped beneath the documents root.

    Args:
        settings: immutable process configuration; only `docs_path` and
            `config_path` are used here
    """

    def __init__(self, settings: Settings):
        self.settings = settings
        self.root = settings.docs_root
        self.config_file = settings.config_file

    # ------------------------------------------------------------------
    # Documents
    # ------------------------------------------------------------------

    def document_id(self, raw_id: str) -> str:
        """
        Validate and normalise a client-supplied document id.

        Args:
            raw_id: id as it appeared in the URL after `/api/docs/`

        Returns:
            Cleaned id, always ending in `.json`

        Raises:
            InvalidPathError: if the id is empty, contains `..`, or
                resolves outside the documents root
        """
        if raw_id == "":
            raise InvalidPathError("Document ID is required")
        reject_traversal(raw_id, "Invalid document ID")
        doc_id = document_filename(clean_path(raw_id))
        resolve_under(self.root, doc_id, "Invalid document ID")
        return doc_id

    def read_index(self) -> bytes:
        """Return the raw bytes of `index.json`; not re-validated."""
        return _read(self.root / INDEX_FILENAME, "read index", "Failed to read documentation list")

    def read_document(self, doc_id: str) -> bytes:
        """
        Read a document verbatim.

        Args:
            doc_id: id already normalised by `document_id`

        Raises:
            DocumentNotFoundError: if the file does not exist
            StorageError: on any other I/O failure
        """
        path = resolve_under(self.root, doc_id, "Invalid document ID")
        try:
            return path.read_bytes()
        except FileNotFoundError as e:
            raise DocumentNotFoundError("Document not found", e) from e
        except OSError as e:
            logger.error("Error reading document %s: %s", doc_id, e)
            raise StorageError("Failed to read document", "read document", str(path), e) from e

    def save_document(self, doc_id: str, value: Any) -> None:
        """Pretty-print `value` and write it to `{doc_id}`, creating directories."""
        path = resolve_under(self.root, doc_id, "Invalid document ID")
        _write(path, format_json(value), "save document", "Failed to save document")
        logger.info("Saved document %s", doc_id)

    # ------------------------------------------------------------------
    # Site configuration
    # ------------------------------------------------------------------

    def read_config(self) -> bytes:
        """Return the raw configuration file; a missing file is a 500 like any other failure."""
        return _read(self.config_file, "read config", "Failed to read configuration")

    def save_config(self, value: Any) -> None:
        _write(self.config_file, format_json(value), "save config", "Failed to save configuration")
        logger.info("Saved configuration to %s", self.config_file)

    # ------------------------------------------------------------------
    # Files
    # ------------------------------------------------------------------

    def upload_file(self, file_path: str, file_data: str) -> str:
        """
        Decode base64 data and write it beneath the documents root.

        Args:
            file_path: relative destination path
            file_data: standard (padded) base64 text; CR and LF are ignored

        Returns:
            The cleaned relative path that was written

        Raises:
            InvalidPayloadError: if a field is empty or the data is not base64
            InvalidPathError: if the path contains `..` or escapes the root
            StorageError: if the directory or file cannot be written
        """
        if file_path == "":
            raise InvalidPayloadError("file_path is required")
        if file_data == "":
            raise InvalidPayloadError("file_data is required")
        reject_traversal(file_path)

        cleaned = clean_path(file_path)
        try:
            # Line-wrapped base64 (CR/LF) is accepted; any other stray character is not
            payload = base64.b64decode(file_data.replace("\r", "").replace("\n", ""), validate=True)
        except (binascii.Error, ValueError) as e:
            raise InvalidPayloadError("Invalid base64 data", e) from e

        path = resolve_under(self.root, cleaned)
        _write(path, payload, "upload file", "Failed to save file")
        logger.info("Uploaded file %s (%d bytes)", cleaned, len(payload))
        return cleaned

    def rename_file(self, old_path: str, new_path: str) -> Tuple[str, str]:
        """
        Move the `.json` sibling of `old_path` to the `.json` sibling of `new_path`.

        Returns:
            Tuple of (old relative path, new relative path) as renamed

        Raises:
            InvalidPayloadError: if either path is empty
            InvalidPathError: if either path contains `..` or escapes the root
            DocumentNotFoundError: if the source does not exist
            FileConflictError: if the destination already exists
            StorageError: if the directory cannot be created or the rename fails
        """
        if old_path == "":
            raise InvalidPayloadError("old_path is required")
        if new_path == "":
            raise InvalidPayloadError("new_path is required")
        reject_traversal(old_path)
        reject_traversal(new_path)

        old_rel = rename_filename(clean_path(old_path))
        new_rel = rename_filename(clean_path(new_path))
        source = resolve_under(self.root, old_rel)
        target = resolve_under(self.root, new_rel)

        if _is_missing(source):
            raise DocumentNotFoundError(f"File not found: {old_rel}")
        if _is_present(target):
            raise FileConflictError(f"File already exists: {new_rel}")

        _ensure_parent(target, "rename file")
        try:
            os.rename(source, target)
        except OSError as e:
            logger.error("Error renaming file from %s to %s: %s", source, target, e)
            raise StorageError("Failed to rename file", "rename file", str(source), e) from e

        logger.info("Renamed file %s -> %s", old_rel, new_rel)
        return old_rel, new_rel
