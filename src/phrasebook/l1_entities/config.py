"""Configuration Pydantic models — pure schema, no infrastructure defaults."""

from __future__ import annotations

from pydantic import BaseModel, Field


class StorageConfig(BaseModel):
    path: str


class LoggingConfig(BaseModel):
    level: str
    file: str


class UiConfig(BaseModel):
    confirm_delete: bool = True


class AppConfig(BaseModel):
    storage: StorageConfig
    logging: LoggingConfig
    ui: UiConfig = Field(default_factory=UiConfig)
