"""Configuration models for controlmap."""

from __future__ import annotations

from pydantic import BaseModel, Field


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(
        default="INFO",
        pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
        description="Root log level",
    )
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Format string for text logs",
    )
    structured: bool = Field(default=False, description="Emit JSON lines instead of text")
    filename: str | None = Field(default=None, description="Log file (stdout when unset)")


class XMLOutputConfig(BaseModel):
    """How profile documents are written."""

    pretty: bool = Field(default=True, description="Indent nested elements")
    indent: str = Field(default=" ", description="Indentation unit when pretty printing")
    encoding: str = Field(default="UTF-8", description="Declared and written encoding")


class CreatorConfig(BaseModel):
    """Identity written to the ``Creator`` block of exported profiles."""

    name: str = Field(default="controlmap", description="Application name")
    version: str = Field(default="0.1.0", description="Application version")
    author: str = Field(default="", description="Profile author")


class AppConfig(BaseModel):
    """Application configuration."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    xml: XMLOutputConfig = Field(default_factory=XMLOutputConfig)
    creator: CreatorConfig = Field(default_factory=CreatorConfig)
