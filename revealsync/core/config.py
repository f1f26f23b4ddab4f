"""
Application settings and presentation configuration using Pydantic.

``Settings`` holds process-level knobs (server binding, export timing) and is
cached. ``Configuration`` is the reveal.js presentation configuration; it is
reloaded whenever the host reports a change to the ``revealjs`` section, so it
is never cached.
"""
from functools import lru_cache
from typing import Any, Optional

from pydantic import Field, field_validator
from pydantic.alias_generators import to_camel
from pydantic_settings import BaseSettings

EXTENSION_ID = "revealjs"


class Settings(BaseSettings):
    """Process configuration with validation."""

    # Application
    app_name: str = Field(default="revealsync", description="Application name")
    debug: bool = Field(default=False, description="Debug mode flag")
    log_level: str = Field(default="INFO", description="Root logging level")

    # Server
    host: str = Field(default="127.0.0.1", description="Preview server host")
    port: int = Field(default=0, ge=0, le=65535, description="Preview server port (0 picks a free port)")

    # Export
    quiet_period_ms: int = Field(
        default=800,
        ge=1,
        description="Milliseconds without export-status queries before an export is considered settled"
    )
    export_timeout_seconds: Optional[float] = Field(
        default=None,
        gt=0,
        description="Reject a pending export after this many seconds (unset waits forever)"
    )

    @property
    def quiet_period(self) -> float:
        """Quiet period in seconds."""
        return self.quiet_period_ms / 1000.0

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize the logging level name."""
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {v}")
        return level

    class Config:
        """Pydantic configuration."""
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        env_prefix = "REVEALSYNC_"
        extra = "ignore"


class Configuration(BaseSettings):
    """reveal.js presentation configuration.

    Field names are snake_case; document front matter may also use the
    camelCase spelling (``exportHtmlPath``, ``verticalSeparator``...).
    """

    title: str = Field(default="Reveal JS presentation", description="HTML page title")
    theme: str = Field(default="black", description="reveal.js theme name")
    highlight_theme: str = Field(default="monokai", description="highlight.js theme name")
    transition: str = Field(default="slide", description="Slide transition style")
    controls: bool = Field(default=True, description="Display navigation controls")
    progress: bool = Field(default=True, description="Display the progress bar")
    slide_number: bool = Field(default=False, description="Display the slide number")
    center: bool = Field(default=True, description="Vertically center slides")
    separator: str = Field(default=r"^\s*---\s*$", description="Horizontal slide separator regex")
    vertical_separator: str = Field(default=r"^\s*--\s*$", description="Vertical slide separator regex")
    notes_separator: str = Field(default="note:", description="Speaker notes separator")
    export_html_path: Optional[str] = Field(
        default=None,
        description="Export directory; defaults to <document dir>/export"
    )

    def reveal_options(self) -> dict[str, Any]:
        """Options handed to ``Reveal.initialize`` on the preview page."""
        return {
            "controls": self.controls,
            "progress": self.progress,
            "slideNumber": self.slide_number,
            "center": self.center,
            "transition": self.transition,
            "hash": True,
        }

    class Config:
        """Pydantic configuration."""
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        env_prefix = "REVEALJS_"
        extra = "ignore"


def option_name(key: str) -> Optional[str]:
    """Configuration field for a snake_case or camelCase option key, if any."""
    if key in Configuration.model_fields:
        return key
    for name in Configuration.model_fields:
        if to_camel(name) == key:
            return name
    return None


def merge_configuration(base: Configuration, overrides: dict[str, Any]) -> Configuration:
    """
    Overlay per-document options on the base configuration.

    Keys may use either the snake_case field name or its camelCase alias;
    unknown keys are ignored. Overrides win on collision.
    """
    data = base.model_dump()
    for key, value in overrides.items():
        name = option_name(key)
        if name is not None:
            data[name] = value
    return Configuration(**data)


def load_configuration() -> Configuration:
    """Build a fresh presentation configuration from the environment."""
    return Configuration()


def get_document_options(configuration: Configuration) -> dict[str, Any]:
    """Snapshot of the options a new document binding parses with."""
    return configuration.model_dump()


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached application settings.

    Using lru_cache ensures settings are loaded once and reused.
    """
    return Settings()
