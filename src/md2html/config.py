from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from md2html.exceptions import ConfigError


class AppConfig(BaseModel):
    """Process-level settings for the MCP server entrypoint."""

    log_level: str = "INFO"


class RenderConfig(BaseModel):
    """Defaults for the Markdown parse pipeline when driven by the MCP tools."""

    sanitize: bool = True
    extract_metadata: bool = True


class DocumentConfig(BaseModel):
    """Defaults for full HTML document generation."""

    title: str = "Markdown Document"
    theme: Literal["light", "dark", "custom"] = "light"
    inline_styles: bool = True
    stylesheet_href: str = "styles.css"


class ThemesConfig(BaseModel):
    """Theme configuration values."""

    # JSON file previously written with export_theme(), loaded as the session's custom theme
    custom_theme_path: Optional[str] = None


class Settings(BaseSettings):
    """Top-level settings loaded from environment variables and .env only."""

    model_config = SettingsConfigDict(
        env_prefix="MD2HTML_",
        env_nested_delimiter="__",
        env_file=".env",
        extra="ignore",
    )

    app: AppConfig = AppConfig()
    render: RenderConfig = RenderConfig()
    document: DocumentConfig = DocumentConfig()
    themes: ThemesConfig = ThemesConfig()


def load_settings() -> Settings:
    """Load settings from environment variables and .env only."""
    try:
        return Settings()  # type: ignore[call-arg]
    except ValidationError as exc:
        raise ConfigError(f"Invalid md2html settings: {exc}") from exc
