"""Counting configuration: pydantic model, loadable from a JSON file."""

from __future__ import annotations

import os
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from locc.exceptions import ConfigError

DEFAULT_MAX_FILE_SIZE = 8 * 1024 * 1024


class ReportFormat(str, Enum):
    CONSOLE = "console"
    TEXT = "text"
    JSON = "json"
    CSV = "csv"
    XML = "xml"
    YAML = "yaml"
    HTML = "html"


def _default_workers() -> int:
    return min(32, (os.cpu_count() or 1) + 4)


class LoccConfig(BaseModel):
    """Options recognized by the collector, the counter and the report layer."""

    model_config = ConfigDict(extra="forbid")

    include: list[str] = Field(default_factory=lambda: ["**/*"])
    exclude: list[str] = Field(default_factory=list)
    formats: list[ReportFormat] = Field(default_factory=lambda: [ReportFormat.CONSOLE])
    count_doc_strings: bool = True
    count_unrecognized: bool = True
    max_file_size: int = Field(default=DEFAULT_MAX_FILE_SIZE, gt=0)
    workers: int = Field(default_factory=_default_workers, ge=1)
    extensions: dict[str, str] = Field(default_factory=dict)

    @field_validator("include", "exclude", mode="before")
    @classmethod
    def _strip_globs(cls, v: list[str]) -> list[str]:
        if isinstance(v, str):
            v = [v]
        if not isinstance(v, list):
            return v
        stripped = [g.strip() if isinstance(g, str) else g for g in v]
        return [g for g in stripped if g != ""]

    @field_validator("formats", mode="before")
    @classmethod
    def _lower_formats(cls, v: list[str]) -> list[str]:
        if isinstance(v, str):
            v = [v]
        if not isinstance(v, list):
            return v
        return [f.lower() if isinstance(f, str) else f for f in v]

    @field_validator("formats")
    @classmethod
    def _dedupe_formats(cls, v: list[ReportFormat]) -> list[ReportFormat]:
        return list(dict.fromkeys(v))

    @field_validator("extensions")
    @classmethod
    def _normalize_extensions(cls, v: dict[str, str]) -> dict[str, str]:
        return {ext.lower().lstrip("."): lang for ext, lang in v.items()}

    @classmethod
    def load(cls, path: str | Path) -> LoccConfig:
        """Read a JSON config file. Raises ConfigError on IO or validation errors."""
        try:
            text = Path(path).read_text(encoding="utf-8")
        except OSError as exc:
            raise ConfigError(f"Cannot read config file {path}: {exc}") from exc
        try:
            return cls.model_validate_json(text)
        except ValidationError as exc:
            raise ConfigError(f"Invalid config file {path}: {exc}") from exc
