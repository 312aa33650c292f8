"""uploadcare_client データモデル"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum
from typing import BinaryIO

from pydantic import BaseModel, ConfigDict, Field


class AuthScheme(StrEnum):
    """認証方式。クライアント生成時に決まり、以後変わらない。"""

    SIMPLE = "simple"
    SIGNED = "signed"


@dataclass(frozen=True)
class ClientIdentity:
    """クライアントの鍵ペアと認証方式。"""

    public_key: str
    private_key: str = field(repr=False)
    scheme: AuthScheme = AuthScheme.SIMPLE

    @property
    def is_simple_auth(self) -> bool:
        return self.scheme is AuthScheme.SIMPLE


@dataclass(frozen=True)
class RequestDescriptor:
    """1 回の API 呼び出しを表すリクエスト。"""

    method: str
    url: str
    content: bytes | None = None
    content_type: str = ""
    form: dict[str, str] = field(default_factory=dict)
    files: dict[str, tuple[str, BinaryIO]] = field(default_factory=dict)

    @property
    def is_multipart(self) -> bool:
        return bool(self.files)


class WireModel(BaseModel):
    """API ペイロードの基底モデル。未知のフィールドは無視する。"""

    model_config = ConfigDict(extra="ignore", frozen=True)


class FileData(WireModel):
    """ファイルリソース。"""

    file_id: str
    last_keep_claim: datetime | None = None
    made_public: bool = False
    mime_type: str = ""
    on_s3: bool = False
    original_file_url: str | None = None
    original_filename: str = ""
    removed: datetime | None = None
    size: int = 0
    upload_date: datetime | None = None
    url: str = ""


class CollaboratorData(WireModel):
    """プロジェクトのコラボレーター。"""

    email: str
    name: str = ""


class ProjectData(WireModel):
    """プロジェクト情報。"""

    name: str = ""
    pub_key: str
    collaborators: list[CollaboratorData] = Field(default_factory=list)


class FilePageData(WireModel):
    """ファイル一覧の 1 ページ分。"""

    page: int = 1
    pages: int = 1
    per_page: int = 0
    total: int = 0
    results: list[FileData] = Field(default_factory=list)


class UploadResult(WireModel):
    """アップロード API のレスポンス。"""

    file: str
