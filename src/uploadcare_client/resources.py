"""File / Project リソース"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from .models import CollaboratorData, FileData, ProjectData

if TYPE_CHECKING:
    from .client import Client


class File:
    """取得時点のファイル情報のスナップショット。

    client は後続の呼び出し（削除・保存）にのみ使い、スナップショット自体は
    変更しない。最新の状態が必要なら ``client.get_file()`` で取り直す。
    """

    def __init__(self, client: Client, data: FileData) -> None:
        self._client = client
        self._data = data

    @property
    def data(self) -> FileData:
        return self._data

    @property
    def file_id(self) -> str:
        return self._data.file_id

    @property
    def original_filename(self) -> str:
        return self._data.original_filename

    @property
    def mime_type(self) -> str:
        return self._data.mime_type

    @property
    def size(self) -> int:
        return self._data.size

    @property
    def upload_date(self) -> datetime | None:
        return self._data.upload_date

    @property
    def is_stored(self) -> bool:
        return self._data.last_keep_claim is not None

    @property
    def is_removed(self) -> bool:
        return self._data.removed is not None

    @property
    def is_image(self) -> bool:
        return self._data.mime_type.startswith("image/")

    @property
    def cdn_url(self) -> str:
        return self._client.urls.cdn_file(self.file_id)

    def delete(self) -> None:
        """ファイルを削除済みにする。"""
        self._client.delete_file(self.file_id)

    def save(self) -> None:
        """ファイルを保存済みにする。保存しないファイルはいずれ削除される。"""
        self._client.save_file(self.file_id)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, File):
            return NotImplemented
        return self._data == other._data

    def __hash__(self) -> int:
        return hash(self.file_id)

    def __repr__(self) -> str:
        return f"File(file_id={self.file_id!r}, original_filename={self.original_filename!r})"


class Project:
    """プロジェクト情報のスナップショット。"""

    def __init__(self, client: Client, data: ProjectData) -> None:
        self._client = client
        self._data = data

    @property
    def data(self) -> ProjectData:
        return self._data

    @property
    def name(self) -> str:
        return self._data.name

    @property
    def pub_key(self) -> str:
        return self._data.pub_key

    @property
    def collaborators(self) -> list[CollaboratorData]:
        return list(self._data.collaborators)

    @property
    def owner(self) -> CollaboratorData | None:
        # API は所有者を先頭に返す
        if not self._data.collaborators:
            return None
        return self._data.collaborators[0]

    def __repr__(self) -> str:
        return f"Project(name={self.name!r}, pub_key={self.pub_key!r})"
