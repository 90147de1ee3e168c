from fastapi.testclient import TestClient

from docs_gateway.core.config import Settings
from docs_gateway.main import create_app


def test_get_config_returns_file_verbatim(client, config_file):
    config_file.write_bytes(b'{"name":"Docs"}')
    resp = client.get("/api/config")
    assert resp.status_code == 200
    assert resp.headers["content-type"] == "application/json"
    assert resp.content == b'{"name":"Docs"}'


def test_get_missing_config_is_server_error(client):
    resp = client.get("/api/config")
    assert resp.status_code == 500
    assert resp.text == "Failed to read configuration"


def test_save_config_pretty_prints(client, config_file):
    resp = client.put("/api/config", content=b'{"name":"Docs","nav":[{"title":"Home"}]}')

    assert resp.status_code == 200
    assert resp.json() == {"success": True, "message": "Configuration saved successfully"}
    assert config_file.read_text(encoding="utf-8") == (
        '{\n  "name": "Docs",\n  "nav": [\n    {\n      "title": "Home"\n    }\n  ]\n}'
    )


def test_save_config_is_not_an_envelope(client, config_file):
    resp = client.put("/api/config", json={"content": '{"a": 1}'})
    assert resp.status_code == 200
    assert config_file.read_text() == '{\n  "content": "{\\"a\\": 1}"\n}'


def test_save_config_rejects_invalid_json(client, config_file):
    config_file.write_bytes(b'{"keep": true}')
    for body in (b"", b"{", b"[NaN]"):
        resp = client.put("/api/config", content=body)
        assert resp.status_code == 400
        assert resp.text == "Invalid JSON format"
    assert config_file.read_bytes() == b'{"keep": true}'


def test_save_config_creates_parent_directories(tmp_path, docs_root):
    target = tmp_path / "conf" / "nested" / "site.json"
    client = TestClient(create_app(Settings(docs_path=str(docs_root), config_path=str(target))))

    resp = client.put("/api/config", json={"theme": "dark"})

    assert resp.status_code == 200
    assert target.read_text() == '{\n  "theme": "dark"\n}'
    assert client.get("/api/config").json() == {"theme": "dark"}


def test_config_rejects_other_methods(client):
    resp = client.post("/api/config", json={})
    assert resp.status_code == 405
    assert resp.text == "Method not allowed"


def test_save_config_rejects_overflowing_number(client, config_file):
    resp = client.put("/api/config", content=b"[-1e999]")
    assert resp.status_code == 400
    assert resp.text == "Invalid JSON format"
    assert not config_file.exists()
