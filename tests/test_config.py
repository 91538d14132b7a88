from tableview.config import DEFAULT_CORS_ORIGINS, load_settings


def test_defaults(monkeypatch):
    for name in ("TABLEVIEW_LOG_LEVEL", "TABLEVIEW_LOG_FILE", "TABLEVIEW_CORS_ORIGINS",
                 "TABLEVIEW_API_BASE", "TABLEVIEW_IMAGE_WIDTH"):
        monkeypatch.delenv(name, raising=False)
    settings = load_settings()
    assert settings.log_level == "INFO"
    assert settings.log_file is None
    assert settings.cors_origins == DEFAULT_CORS_ORIGINS
    assert settings.api_base == "http://127.0.0.1:8000/api"
    assert settings.image_width == 1200


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("TABLEVIEW_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("TABLEVIEW_CORS_ORIGINS", "http://a.example, http://b.example")
    monkeypatch.setenv("TABLEVIEW_IMAGE_WIDTH", "800")
    settings = load_settings()
    assert settings.log_level == "DEBUG"
    assert settings.cors_origins == ["http://a.example", "http://b.example"]
    assert settings.image_width == 800
