import os

import pytest
from pydantic import ValidationError

from docs_gateway.core.config import Settings, load_settings
from docs_gateway.core.errors import ConfigurationError
from docs_gateway.main import create_app

ENV_VARS = ("PORT", "DOCS_PATH", "CONFIG_PATH", "ALLOW_ORIGIN", "HOST", "LOG_LEVEL")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults_resolve_relative_to_cwd(tmp_path, monkeypatch):
    workdir = tmp_path / "backend"
    workdir.mkdir()
    (tmp_path / "react-testing" / "public").mkdir(parents=True)
    monkeypatch.chdir(workdir)

    settings = load_settings()

    assert settings.port == 8080
    assert settings.docs_path == str(tmp_path / "react-testing" / "public")
    assert settings.config_path == str(tmp_path / "react-testing" / "public" / "gitdocai.config.json")
    assert settings.allow_origin == "http://localhost:5173"


def test_environment_overrides(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "content").mkdir()
    monkeypatch.setenv("PORT", "9191")
    monkeypatch.setenv("DOCS_PATH", "content")
    monkeypatch.setenv("CONFIG_PATH", "settings/site.json")
    monkeypatch.setenv("ALLOW_ORIGIN", "https://docs.example.com")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = load_settings()

    assert settings.port == 9191
    assert settings.docs_path == str(tmp_path / "content")
    assert settings.config_path == str(tmp_path / "settings" / "site.json")
    assert settings.allow_origin == "https://docs.example.com"
    assert settings.log_level == "DEBUG"


def test_empty_variable_falls_back_to_default(tmp_path, monkeypatch):
    monkeypatch.setenv("PORT", "")
    monkeypatch.setenv("ALLOW_ORIGIN", "")
    monkeypatch.setenv("DOCS_PATH", str(tmp_path))

    settings = load_settings()

    assert settings.port == 8080
    assert settings.allow_origin == "http://localhost:5173"


def test_paths_are_normalised(tmp_path):
    settings = Settings(docs_path=str(tmp_path / "a" / ".." / "b"), config_path=tmp_path / "c.json")
    assert settings.docs_path == str(tmp_path / "b")
    assert settings.config_path == str(tmp_path / "c.json")
    assert os.path.isabs(settings.docs_path)


def test_missing_docs_root_is_fatal(tmp_path, monkeypatch):
    monkeypatch.setenv("DOCS_PATH", str(tmp_path / "nope"))
    with pytest.raises(ConfigurationError) as exc:
        load_settings()
    assert "docs path does not exist" in str(exc.value)


def test_missing_config_file_is_allowed(tmp_path):
    settings = load_settings(docs_path=str(tmp_path), config_path=str(tmp_path / "missing.json"))
    assert settings.config_path.endswith("missing.json")


def test_unparseable_port_is_fatal(tmp_path, monkeypatch):
    monkeypatch.setenv("DOCS_PATH", str(tmp_path))
    monkeypatch.setenv("PORT", "eighty")
    with pytest.raises(ConfigurationError):
        load_settings()


def test_unknown_log_level_is_fatal(tmp_path):
    with pytest.raises(ConfigurationError):
        load_settings(docs_path=str(tmp_path), log_level="chatty")


def test_none_overrides_are_ignored(tmp_path, monkeypatch):
    monkeypatch.setenv("DOCS_PATH", str(tmp_path))
    settings = load_settings(docs_path=None, port=None)
    assert settings.docs_path == str(tmp_path)
    assert settings.port == 8080


def test_settings_are_immutable(tmp_path):
    settings = Settings(docs_path=str(tmp_path))
    with pytest.raises(ValidationError):
        settings.port = 1


def test_create_app_without_settings_validates_environment(tmp_path, monkeypatch):
    monkeypatch.setenv("DOCS_PATH", str(tmp_path / "missing"))
    with pytest.raises(ConfigurationError):
        create_app()


def test_apps_keep_their_own_settings(tmp_path):
    first = tmp_path / "one"
    second = tmp_path / "two"
    first.mkdir()
    second.mkdir()

    app_one = create_app(Settings(docs_path=str(first)))
    app_two = create_app(Settings(docs_path=str(second)))

    assert app_one.state.settings.docs_path == str(first)
    assert app_two.state.store.root == second
