"""クライアント設定（pydantic BaseModel）と YAML 読み込み"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field, ValidationError

from .exceptions import MsigsClientError, MsigsClientErrorCodes
from .options import MsigsClientOptions


class LogSection(BaseModel):
    """ログ設定。"""

    level: str = "INFO"
    format: Literal["json", "text"] = "json"


class MsigsClientConfig(BaseModel):
    """msigs インデックスサービスへの接続設定。"""

    base_url: str
    api_key: str = ""
    timeout_seconds: float = Field(default=10.0, gt=0)
    max_proposal_limit: int | None = Field(default=None, ge=1)
    max_approval_limit: int | None = Field(default=None, ge=1)
    log: LogSection = Field(default_factory=LogSection)

    def client_options(self) -> MsigsClientOptions:
        """上限値の設定を MsigsClientOptions として返す。"""
        return MsigsClientOptions(
            max_proposal_limit=self.max_proposal_limit,
            max_approval_limit=self.max_approval_limit,
        )


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise MsigsClientError(
            code=MsigsClientErrorCodes.READ_FILE,
            message=f"Failed to read config file: {path}",
            cause=e,
        ) from e
    try:
        data: dict[str, Any] = yaml.safe_load(text) or {}
    except yaml.YAMLError as e:
        raise MsigsClientError(
            code=MsigsClientErrorCodes.PARSE_YAML,
            message=f"Failed to parse YAML: {path}",
            cause=e,
        ) from e
    return data


def load_config(path: Path) -> MsigsClientConfig:
    """YAML 設定ファイルを読み込んで MsigsClientConfig を返す。"""
    data = _read_yaml(path)
    try:
        return MsigsClientConfig.model_validate(data)
    except ValidationError as e:
        raise MsigsClientError(
            code=MsigsClientErrorCodes.VALIDATION,
            message=f"Config validation failed: {e}",
            cause=e,
        ) from e
