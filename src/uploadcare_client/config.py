"""クライアント設定（pydantic BaseModel）と YAML 読み込み"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field, ValidationError

from .exceptions import ConfigError, UploadcareErrorCodes


class ClientConfig(BaseModel):
    """API エンドポイントとトランスポートの設定。"""

    api_url: str = "https://api.uploadcare.com"
    upload_url: str = "https://upload.uploadcare.com"
    cdn_url: str = "https://ucarecdn.com"
    api_version: str = "0.2"
    timeout_seconds: float = Field(default=10.0, gt=0)
    log_level: str = "INFO"
    log_format: Literal["json", "text"] = "json"

    @property
    def accept_header(self) -> str:
        return f"application/vnd.uploadcare-v{self.api_version}+json"


SECTION_KEY = "uploadcare"


def _config_section(path: Path) -> Any:
    """YAML を読み、``uploadcare`` セクション (なければ文書全体) を返す。"""
    try:
        with path.open(encoding="utf-8") as stream:
            document = yaml.safe_load(stream)
    except OSError as e:
        raise ConfigError(
            code=UploadcareErrorCodes.READ_FILE,
            message=f"Cannot open Uploadcare config {path}",
            cause=e,
        ) from e
    except yaml.YAMLError as e:
        raise ConfigError(
            code=UploadcareErrorCodes.PARSE_YAML,
            message=f"Uploadcare config {path} is not valid YAML",
            cause=e,
        ) from e
    if document is None:
        return {}
    if isinstance(document, dict) and SECTION_KEY in document:
        return document[SECTION_KEY] or {}
    return document


def load_config(path: Path) -> ClientConfig:
    """YAML ファイルから ClientConfig を読み込む。

    ファイルのトップレベルに ``uploadcare`` セクションがあればその中身を使う。
    """
    section = _config_section(path)
    try:
        return ClientConfig.model_validate(section)
    except ValidationError as e:
        raise ConfigError(
            code=UploadcareErrorCodes.VALIDATION,
            message=f"Invalid Uploadcare config {path}: {e}",
            cause=e,
        ) from e
