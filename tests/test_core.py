"""
Tests for configuration, logging and health endpoints.
"""

import json
import logging

import pytest

from app.core.config import Settings
from app.core.logging_config import APP_LAYERS, CustomJsonFormatter, layer_for, setup_logging


class TestSettings:

    def test_named_connection_wins(self, monkeypatch):
        monkeypatch.setenv("VestibularDB", "sqlite:///./vestibular.db")

        assert Settings().DATABASE_URL == "sqlite:///./vestibular.db"

    def test_url_composed_from_parts(self, monkeypatch):
        monkeypatch.delenv("VestibularDB", raising=False)
        monkeypatch.setenv("POSTGRES_SERVER", "db")
        monkeypatch.setenv("POSTGRES_DB", "vestibular")

        url = Settings(_env_file=None).DATABASE_URL

        assert url == "postgresql://user:password@db:5432/vestibular"

    def test_cors_origins_from_comma_list(self, monkeypatch):
        monkeypatch.setenv("BACKEND_CORS_ORIGINS", "http://a.com, http://b.com")

        assert Settings().BACKEND_CORS_ORIGINS == ["http://a.com", "http://b.com"]

    def test_strict_not_found_default(self):
        assert Settings(_env_file=None).STRICT_NOT_FOUND is True


class TestLogging:

    def test_json_formatter_fields(self):
        formatter = CustomJsonFormatter('%(timestamp)s %(level)s %(logger)s %(message)s', service="vestibular-test")
        record = logging.LogRecord(
            "app.crud.inscricao", logging.WARNING, __file__, 42, "Deleted enrollment 3", None, None
        )

        payload = json.loads(formatter.format(record))

        assert payload["message"] == "Deleted enrollment 3"
        assert payload["service"] == "vestibular-test"
        assert payload["layer"] == "repository"
        assert payload["level"] == "WARNING"
        assert payload["logger"] == "app.crud.inscricao"
        assert payload["line"] == 42

    @pytest.mark.parametrize("name,layer", [
        ("app.api.endpoints.inscricoes", "api"),
        ("app.crud", "repository"),
        ("main", "app"),
        ("application", "external"),
        ("sqlalchemy.engine.Engine", "external"),
    ])
    def test_layer_for_logger_names(self, name, layer):
        assert layer_for(name) == layer

    def test_setup_logging_installs_single_handler(self):
        root = logging.getLogger()
        saved = root.handlers[:], root.level
        try:
            setup_logging("DEBUG", json_logs=False)
            setup_logging("DEBUG", json_logs=False)

            assert len(root.handlers) == 1
            assert root.level == logging.DEBUG
            assert logging.getLogger("app.crud").level == logging.DEBUG
        finally:
            root.handlers[:] = saved[0]
            root.setLevel(saved[1])
            for prefix in APP_LAYERS:
                logging.getLogger(prefix).setLevel(logging.NOTSET)


class TestHealth:

    def test_root(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_health(self, client):
        assert client.get("/health").json()["status"] == "healthy"

    def test_detailed_health_checks_database(self, client):
        response = client.get("/health/detailed")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["checks"]["database"]["status"] == "healthy"
