import pytest
from fastapi.testclient import TestClient

from main import create_app
from settings import Settings, get_settings


_ENV_NAMES = (
    "LOG_LEVEL",
    "NOISY_LIB_LOG_LEVEL",
    "APP_TITLE",
    "CORS_ORIGINS",
    "HOST",
    "PORT",
)


@pytest.fixture
def clean_env(monkeypatch):
    for name in _ENV_NAMES:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()


@pytest.fixture
def settings() -> Settings:
    return Settings(
        log_level="INFO",
        noisy_lib_log_level="WARNING",
        noisy_library_loggers=("httpx", "httpcore", "uvicorn.access"),
        app_title="Message Backend",
        cors_origins=("http://localhost:3000",),
        host="127.0.0.1",
        port=8000,
    )


@pytest.fixture
def client(settings):
    with TestClient(create_app(settings)) as test_client:
        yield test_client
