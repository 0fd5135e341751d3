"""열거기 설정 모델(KR). Enumerator configuration models (EN)."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Tuple

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from direnum import DirectorySpec, pattern_predicate

from .errors import ConfigError

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class EnumeratorSettings(BaseModel):
    """열거 설정 전체를 표현 · Represent complete enumerator settings."""

    model_config = ConfigDict(extra="ignore", validate_assignment=True)

    path: Path = Field(default_factory=lambda: Path("."))
    files_only: bool = False
    patterns: Tuple[str, ...] = ()
    log_file: Path = Field(default_factory=lambda: Path(".cache/direnum.log"))
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def _normalise_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"unknown log level: {value}")
        return level

    @classmethod
    def from_file(cls, config_file: Path) -> "EnumeratorSettings":
        """설정 파일에서 로드 · Load settings from config file."""

        source = str(config_file)
        try:
            data = (
                yaml.safe_load(config_file.read_text(encoding="utf-8"))
                if config_file.exists()
                else {}
            )
        except yaml.YAMLError as exc:
            raise ConfigError(f"invalid YAML: {exc}", source=source) from exc
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError("configuration file must contain a mapping", source=source)
        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            raise ConfigError(str(exc), source=source) from exc

    def to_dict(self) -> Dict[str, Any]:
        """사전을 반환 · Return dictionary representation."""

        return dict(self.model_dump())

    def to_spec(self) -> DirectorySpec:
        """디렉터리 명세를 생성 · Build the directory specification."""

        return DirectorySpec(
            path=str(self.path),
            files_only=self.files_only,
            name_predicate=pattern_predicate(self.patterns),
        )


__all__ = ["EnumeratorSettings", "LOG_LEVELS"]
