import pytest

from md2html.config import Settings, load_settings
from md2html.exceptions import ConfigError


def test_defaults() -> None:
    settings = Settings()

    assert settings.render.sanitize is True
    assert settings.render.extract_metadata is True
    assert settings.document.theme == "light"
    assert settings.document.inline_styles is True
    assert settings.themes.custom_theme_path is None


def test_env_overrides_nested_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MD2HTML_DOCUMENT__THEME", "dark")
    monkeypatch.setenv("MD2HTML_RENDER__SANITIZE", "false")
    monkeypatch.setenv("MD2HTML_APP__LOG_LEVEL", "DEBUG")

    settings = load_settings()

    assert settings.document.theme == "dark"
    assert settings.render.sanitize is False
    assert settings.app.log_level == "DEBUG"


def test_invalid_env_value_raises_config_error(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MD2HTML_DOCUMENT__THEME", "neon")

    with pytest.raises(ConfigError):
        load_settings()


def test_app_section_only_carries_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MD2HTML_APP__LOG_LEVEL", "WARNING")

    assert load_settings().app.model_dump() == {"log_level": "WARNING"}
