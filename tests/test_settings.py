import pytest

from blog_api.main import create_app
from blog_api.settings import Settings


def test_defaults(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("PORT", raising=False)
    monkeypatch.delenv("CORS_ORIGINS", raising=False)
    monkeypatch.delenv("ALLOWED_ORIGINS", raising=False)
    settings = Settings(_env_file=None)
    assert settings.port == 8080
    assert settings.seed_data is True
    assert settings.cors_origins == ["*"]
    assert settings.base_url == "http://localhost:8080"


def test_port_from_env(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("PORT", "9090")
    assert Settings(_env_file=None).port == 9090


@pytest.mark.parametrize(
    "raw,expected",
    [
        ('["https://a.com", "http://localhost:3000"]', ["https://a.com", "http://localhost:3000"]),
        ("https://a.com, http://localhost:3000", ["https://a.com", "http://localhost:3000"]),
        ("", []),
    ],
)
def test_cors_origins_parsing(monkeypatch: pytest.MonkeyPatch, raw: str, expected: list[str]):
    monkeypatch.setenv("CORS_ORIGINS", raw)
    assert Settings(_env_file=None).cors_origins == expected


def test_seed_data_can_be_disabled():
    app = create_app(Settings(_env_file=None, seed_data=False))
    assert len(app.state.db.users) == 0
    assert len(app.state.db.posts) == 0
