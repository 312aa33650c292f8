"""Uploadcare API / Upload API / CDN の URL 組み立て"""

from __future__ import annotations

from enum import StrEnum

from .config import ClientConfig


class Operation(StrEnum):
    """URL を生成できる操作。"""

    PROJECT = "project"
    FILES = "files"
    FILE = "file"
    FILE_STORAGE = "file_storage"
    UPLOAD_BASE = "upload_base"
    CDN_FILE = "cdn_file"


# (base, path template)
_TEMPLATES: dict[Operation, tuple[str, str]] = {
    Operation.PROJECT: ("api", "/project/"),
    Operation.FILES: ("api", "/files/"),
    Operation.FILE: ("api", "/files/{}/"),
    Operation.FILE_STORAGE: ("api", "/files/{}/storage/"),
    Operation.UPLOAD_BASE: ("upload", "/base/"),
    Operation.CDN_FILE: ("cdn", "/{}/"),
}


class UrlBuilder:
    """設定されたベース URL から各操作の URL を作る。"""

    def __init__(self, config: ClientConfig) -> None:
        self._bases = {
            "api": config.api_url.rstrip("/"),
            "upload": config.upload_url.rstrip("/"),
            "cdn": config.cdn_url.rstrip("/"),
        }

    def url_for(self, operation: Operation, *params: str) -> str:
        base, template = _TEMPLATES[operation]
        expected = template.count("{}")
        if len(params) != expected:
            raise ValueError(
                f"{operation.value} expects {expected} parameter(s), got {len(params)}"
            )
        return self._bases[base] + template.format(*params)

    def api_project(self) -> str:
        return self.url_for(Operation.PROJECT)

    def api_files(self) -> str:
        return self.url_for(Operation.FILES)

    def api_file(self, file_id: str) -> str:
        return self.url_for(Operation.FILE, file_id)

    def api_file_storage(self, file_id: str) -> str:
        return self.url_for(Operation.FILE_STORAGE, file_id)

    def upload_base(self) -> str:
        return self.url_for(Operation.UPLOAD_BASE)

    def cdn_file(self, file_id: str) -> str:
        return self.url_for(Operation.CDN_FILE, file_id)
