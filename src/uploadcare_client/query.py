"""ファイル一覧クエリビルダー"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

import httpx

from .models import FilePageData
from .resources import File

if TYPE_CHECKING:
    from .client import Client


class FilesQueryBuilder:
    """ファイル一覧取得のパラメータを組み立てる。

    Example:
        files = client.get_files().stored(True).removed(False).as_list()
    """

    def __init__(self, client: Client) -> None:
        self._client = client
        self._params: dict[str, str] = {}

    def removed(self, removed: bool) -> FilesQueryBuilder:
        self._params["removed"] = "true" if removed else "false"
        return self

    def stored(self, stored: bool) -> FilesQueryBuilder:
        self._params["stored"] = "true" if stored else "false"
        return self

    @property
    def params(self) -> dict[str, str]:
        return dict(self._params)

    def build_url(self) -> str:
        url = httpx.URL(self._client.urls.api_files())
        return str(url.copy_merge_params(self._params))

    def as_iterable(self) -> Iterator[File]:
        """ページを必要に応じて取得しながらファイルを返す。"""
        executor = self._client.request_executor
        for data in executor.execute_paginated_query(self.build_url(), True, FilePageData):
            yield File(self._client, data)

    def as_list(self) -> list[File]:
        return list(self.as_iterable())
