"""Uploadcare API クライアント"""

from __future__ import annotations

from types import TracebackType
from typing import BinaryIO

from .config import ClientConfig
from .executor import DefaultRequestExecutorProvider, RequestExecutor, RequestExecutorProvider
from .models import AuthScheme, ClientIdentity, FileData, ProjectData, RequestDescriptor
from .query import FilesQueryBuilder
from .resources import File, Project
from .upload import StreamUploader
from .urls import UrlBuilder

DEMO_PUBLIC_KEY = "demopublickey"
DEMO_PRIVATE_KEY = "demoprivatekey"


class Client:
    """Uploadcare API クライアント。

    File / Project リソースへのアクセスを提供する。既定では HMAC 署名認証を
    使う。``simple_auth=True`` は秘密鍵をそのままリクエストに載せる互換モードで、
    本番環境での利用は想定していない。

    Args:
        public_key: 公開鍵
        private_key: 秘密鍵
        simple_auth: True なら Simple 認証、False なら署名認証
        executor_provider: RequestExecutor の供給元。None なら
            DefaultRequestExecutorProvider を使う（テストで差し替える）
        config: エンドポイントやタイムアウトの設定
    """

    def __init__(
        self,
        public_key: str,
        private_key: str,
        simple_auth: bool = False,
        executor_provider: RequestExecutorProvider | None = None,
        config: ClientConfig | None = None,
    ) -> None:
        self._identity = ClientIdentity(
            public_key=public_key,
            private_key=private_key,
            scheme=AuthScheme.SIMPLE if simple_auth else AuthScheme.SIGNED,
        )
        self._config = config or ClientConfig()
        self._urls = UrlBuilder(self._config)
        self._executor_provider = executor_provider or DefaultRequestExecutorProvider(
            self._config
        )

    @property
    def identity(self) -> ClientIdentity:
        return self._identity

    @property
    def public_key(self) -> str:
        return self._identity.public_key

    @property
    def is_simple_auth(self) -> bool:
        return self._identity.is_simple_auth

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def urls(self) -> UrlBuilder:
        return self._urls

    @property
    def request_executor(self) -> RequestExecutor:
        return self._executor_provider.get(self._identity)

    def get_project(self) -> Project:
        """プロジェクト情報を取得する。"""
        descriptor = RequestDescriptor(method="GET", url=self._urls.api_project())
        data = self.request_executor.execute_query(descriptor, True, ProjectData)
        return Project(self, data)

    def get_file(self, file_id: str) -> File:
        """ファイル情報を取得する。"""
        descriptor = RequestDescriptor(method="GET", url=self._urls.api_file(file_id))
        data = self.request_executor.execute_query(descriptor, True, FileData)
        return File(self, data)

    def get_files(self) -> FilesQueryBuilder:
        """アカウントのファイル一覧クエリを作り始める。"""
        return FilesQueryBuilder(self)

    def delete_file(self, file_id: str) -> None:
        """ファイルを削除済みにする。"""
        descriptor = RequestDescriptor(method="DELETE", url=self._urls.api_file(file_id))
        self.request_executor.execute_command(descriptor, True)

    def save_file(self, file_id: str) -> None:
        """ファイルを保存済みにする。

        保存したいファイルはすべてこの操作が必要。未保存のファイルはいずれ削除される。
        """
        descriptor = RequestDescriptor(
            method="POST", url=self._urls.api_file_storage(file_id)
        )
        self.request_executor.execute_command(descriptor, True)

    def upload(self, stream: BinaryIO, filename: str) -> File:
        """ストリームをアップロードして File を返す。"""
        return StreamUploader(self, stream, filename).upload()

    def close(self) -> None:
        self._executor_provider.close()

    def __enter__(self) -> Client:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


def demo_client(config: ClientConfig | None = None) -> Client:
    """デモ用の鍵ペアで Simple 認証のクライアントを作る。

    Warning:
        本番では使わないこと。デモアカウントのファイルはいずれすべて削除される。
    """
    return Client(DEMO_PUBLIC_KEY, DEMO_PRIVATE_KEY, simple_auth=True, config=config)
