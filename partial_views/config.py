import logging
import string
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


BASE_DIR = Path.cwd()

DEFAULT_LOCATION_FORMATS = ["{controller}/{name}{ext}", "shared/{name}{ext}"]


class Settings(BaseSettings):
    """Settings for view lookup and rendering.

    Every field has a default so the library works without any environment.
    Values can be overridden with PARTIAL_VIEWS_* environment variables or
    a .env file in the working directory.
    """

    views_dir: Path = Field(default=BASE_DIR / "views", description="Root directory of view templates")
    view_extension: str = Field(default=".html", description="File extension of view templates")
    view_location_formats: list[str] = Field(
        default_factory=lambda: list(DEFAULT_LOCATION_FORMATS),
        description="Ordered location formats probed by find_view ({name}, {ext} and route value placeholders)",
    )
    autoescape: bool = Field(default=True, description="HTML-escape variables in templates")
    auto_reload: bool = Field(default=False, description="Recompile templates when the source changes")
    log_level: str = Field(default="INFO", description="Logging level")

    model_config = SettingsConfigDict(
        env_prefix="PARTIAL_VIEWS_",
        env_file=Path(BASE_DIR / ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_default=True,
    )

    @field_validator("view_extension", mode="after")
    @classmethod
    def validate_view_extension(cls, v: str) -> str:
        """Ensure the extension looks like '.html'."""
        v = v.strip()
        if not v.startswith(".") or len(v) < 2:
            raise ValueError("view_extension must start with '.' and name an extension")
        return v

    @field_validator("view_location_formats", mode="after")
    @classmethod
    def validate_view_location_formats(cls, v: list[str]) -> list[str]:
        """Ensure every format parses, uses only named fields and names the view."""
        if not v:
            raise ValueError("view_location_formats must contain at least one format")
        for fmt in v:
            try:
                fields = [field for _, field, _, _ in string.Formatter().parse(fmt) if field is not None]
            except ValueError as e:
                raise ValueError(f"view location format {fmt!r} is malformed: {e}") from e
            for field in fields:
                if not field or field.isdigit():
                    raise ValueError(f"view location format {fmt!r} must only use named fields")
                if "{" in field or "}" in field:
                    raise ValueError(f"view location format {fmt!r} has unbalanced braces")
            if "name" not in fields:
                raise ValueError(f"view location format {fmt!r} must contain '{{name}}'")
        return v

    @field_validator("log_level", mode="after")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log_level is a known logging level name."""
        v = v.strip().upper()
        if not isinstance(logging.getLevelName(v), int):
            raise ValueError(f"log_level must be a valid logging level, got {v!r}")
        return v


# Singleton settings instance (cached for performance)
_settings_instance: Settings | None = None


def get_settings() -> Settings:
    """Get singleton Settings instance.

    Avoids re-reading the .env file every time an engine is built.

    Returns:
        Cached Settings instance
    """
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance
