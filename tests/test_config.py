"""Tests configuration — lecture des variables d'environnement."""
from update_php.config import Settings, load_settings


def test_defaults(monkeypatch):
    for var in (
        "UPDATE_PHP_DEFAULT_MINIMUM_VERSION", "UPDATE_PHP_VERSION_PARAM",
        "UPDATE_PHP_DEFAULT_LANG", "UPDATE_PHP_AUTOESCAPE", "UPDATE_PHP_LOG_LEVEL",
    ):
        monkeypatch.delenv(var, raising=False)
    assert load_settings() == Settings()


def test_from_env(monkeypatch):
    monkeypatch.setenv("UPDATE_PHP_DEFAULT_MINIMUM_VERSION", "7.1")
    monkeypatch.setenv("UPDATE_PHP_VERSION_PARAM", "v")
    monkeypatch.setenv("UPDATE_PHP_DEFAULT_LANG", "fr")
    monkeypatch.setenv("UPDATE_PHP_AUTOESCAPE", "false")
    monkeypatch.setenv("UPDATE_PHP_LOG_LEVEL", "debug")
    s = load_settings()
    assert s.default_minimum_version == "7.1"
    assert s.version_param == "v"
    assert s.default_lang == "fr"
    assert s.autoescape is False
    assert s.log_level == "DEBUG"


def test_custom_version_param():
    from fastapi.testclient import TestClient
    from update_php.app import create_app

    app = create_app(Settings(version_param="v"))
    with TestClient(app) as c:
        assert "GREAT NEWS!" in c.get("/update-php/render", params={"v": "8.1"}).text
        assert c.get("/update-php/render", params={"php_version": "8.1"}).text == ""
