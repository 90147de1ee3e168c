"""
Shared fixtures for the gateway tests.

Every test gets its own documents root under `tmp_path` and its own app
built from an explicit `Settings` value, so no configuration is shared
between tests and nothing depends on the process environment.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from docs_gateway.core.config import Settings
from docs_gateway.main import create_app

ORIGIN = "http://editor.test:5173"


@pytest.fixture
def docs_root(tmp_path: Path) -> Path:
    root = tmp_path / "public"
    root.mkdir()
    return root


@pytest.fixture
def config_file(docs_root: Path) -> Path:
    return docs_root / "gitdocai.config.json"


@pytest.fixture
def settings(docs_root: Path, config_file: Path) -> Settings:
    return Settings(
        docs_path=str(docs_root),
        config_path=str(config_file),
        allow_origin=ORIGIN,
    )


@pytest.fixture
def store(settings):
    from docs_gateway.storage import DocumentStore

    return DocumentStore(settings)


@pytest.fixture
def client(settings: Settings) -> TestClient:
    return TestClient(create_app(settings))


def write_json(path: Path, value) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(value, indent=2), encoding="utf-8")


def snapshot(root: Path) -> dict:
    """Map of relative path -> bytes for every file under root."""
    return {
        p.relative_to(root).as_posix(): p.read_bytes()
        for p in sorted(root.rglob("*"))
        if p.is_file()
    }
