from elastic_builder.config import DEFAULT_TIMEOUT, Settings, get_settings, reset_settings


def test_defaults():
    settings = Settings()

    assert settings.url == "http://localhost:9200"
    assert settings.timeout == DEFAULT_TIMEOUT
    assert settings.debug is False
    assert settings.pretty is False


def test_values_from_environment(monkeypatch):
    monkeypatch.setenv("ELASTIC_URL", "https://es.example:9243/")
    monkeypatch.setenv("ELASTIC_TIMEOUT", "2.5")
    monkeypatch.setenv("ELASTIC_DEBUG", "yes")
    monkeypatch.setenv("ELASTIC_PRETTY", "1")

    settings = Settings()

    assert settings.url == "https://es.example:9243"
    assert settings.timeout == 2.5
    assert settings.debug is True
    assert settings.pretty is True


def test_invalid_timeout_falls_back(monkeypatch):
    monkeypatch.setenv("ELASTIC_TIMEOUT", "soon")
    assert Settings().timeout == DEFAULT_TIMEOUT

    monkeypatch.setenv("ELASTIC_TIMEOUT", "-1")
    assert Settings().timeout == DEFAULT_TIMEOUT


def test_get_settings_is_cached_until_reset(monkeypatch):
    first = get_settings()
    monkeypatch.setenv("ELASTIC_URL", "http://other:9200")

    assert get_settings() is first

    reset_settings()
    assert get_settings().url == "http://other:9200"
