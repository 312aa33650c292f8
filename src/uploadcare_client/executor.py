"""リクエスト実行コア

すべての API 呼び出しは RequestExecutor を経由する。認証ヘッダーの付与、
トランスポートへの送出、ステータスコードの解釈、ペイロードのデコードを
ここで行い、失敗は exceptions モジュールの型付きエラーとして送出する。
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import TypeVar

import httpx

from .auth import Authenticator
from .codec import PayloadCodec
from .config import ClientConfig
from .exceptions import HttpFailure, TransportFailure
from .logger import get_logger
from .models import ClientIdentity, FileData, FilePageData, RequestDescriptor, WireModel

T = TypeVar("T", bound=WireModel)

logger = get_logger(__name__)


class RequestExecutor:
    """1 つの identity に束縛されたリクエスト実行器。

    呼び出し間で状態を持たない。同一の記述子を 2 回実行しても、
    認証情報（日付と署名）はそれぞれ新しく作られる。
    """

    def __init__(
        self,
        identity: ClientIdentity,
        transport: httpx.Client,
        config: ClientConfig | None = None,
        authenticator: Authenticator | None = None,
        codec: PayloadCodec | None = None,
    ) -> None:
        self._identity = identity
        self._transport = transport
        self._config = config or ClientConfig()
        self._authenticator = authenticator or Authenticator()
        self._codec = codec or PayloadCodec()

    @property
    def identity(self) -> ClientIdentity:
        return self._identity

    def _build(self, descriptor: RequestDescriptor, requires_auth: bool) -> httpx.Request:
        headers: dict[str, str] = {}
        if descriptor.is_multipart:
            request = self._transport.build_request(
                descriptor.method,
                descriptor.url,
                data=descriptor.form or None,
                files=descriptor.files,
            )
        else:
            headers["Accept"] = self._config.accept_header
            if descriptor.content is not None and descriptor.content_type:
                headers["Content-Type"] = descriptor.content_type
            request = self._transport.build_request(
                descriptor.method,
                descriptor.url,
                content=descriptor.content,
                headers=headers,
            )
        if requires_auth:
            request.headers.update(self._authenticator.authenticate(request, self._identity))
        return request

    def _send(self, descriptor: RequestDescriptor, requires_auth: bool) -> httpx.Response:
        request = self._build(descriptor, requires_auth)
        logger.debug(
            "uploadcare request",
            method=request.method,
            url=str(request.url),
            auth=self._identity.scheme.value if requires_auth else "none",
            public_key=self._identity.public_key,
            headers=dict(request.headers),
        )
        try:
            response = self._transport.send(request)
        except httpx.RequestError as e:
            logger.warning(
                "uploadcare transport error",
                method=request.method,
                url=str(request.url),
                error=str(e),
            )
            raise TransportFailure(
                message=f"{request.method} {request.url} failed: {e}",
                cause=e,
            ) from e
        logger.debug(
            "uploadcare response",
            method=request.method,
            url=str(request.url),
            status=response.status_code,
        )
        if not response.is_success:
            logger.warning(
                "uploadcare http error",
                method=request.method,
                url=str(request.url),
                status=response.status_code,
            )
            raise HttpFailure(
                status=response.status_code,
                reason=response.reason_phrase,
                body=response.text,
            )
        return response

    def execute_command(self, descriptor: RequestDescriptor, requires_auth: bool) -> None:
        """レスポンスボディを使わない操作（削除・保存など）を実行する。

        Raises:
            HttpFailure: 2xx 以外のステータス
            TransportFailure: 接続・タイムアウトなどの送出失敗
        """
        self._send(descriptor, requires_auth)

    def execute_query(
        self,
        descriptor: RequestDescriptor,
        requires_auth: bool,
        shape: type[T],
    ) -> T:
        """リクエストを実行し、レスポンスボディを shape にデコードして返す。

        Raises:
            HttpFailure: 2xx 以外のステータス
            TransportFailure: 接続・タイムアウトなどの送出失敗
            DecodeFailure: ボディが shape に合わない
        """
        response = self._send(descriptor, requires_auth)
        return self._codec.decode(response.content, shape)

    def execute_paginated_query(
        self,
        url: str,
        requires_auth: bool,
        page_shape: type[FilePageData] = FilePageData,
    ) -> Iterator[FileData]:
        """ページ付き一覧を 1 ページ目から順に取得し、要素を 1 件ずつ返す。

        ページは必要になった時点で取得する。
        """
        page = 1
        while True:
            page_url = str(httpx.URL(url).copy_set_param("page", page))
            data = self.execute_query(
                RequestDescriptor(method="GET", url=page_url),
                requires_auth,
                page_shape,
            )
            yield from data.results
            if page >= data.pages:
                return
            page += 1


class RequestExecutorProvider(ABC):
    """identity に束縛された RequestExecutor を供給する。"""

    @abstractmethod
    def get(self, identity: ClientIdentity) -> RequestExecutor: ...

    def close(self) -> None:
        """保持しているリソースを解放する。"""


class DefaultRequestExecutorProvider(RequestExecutorProvider):
    """httpx.Client を 1 つ所有し、それを使う RequestExecutor を作る。"""

    def __init__(
        self,
        config: ClientConfig | None = None,
        transport: httpx.Client | None = None,
    ) -> None:
        self._config = config or ClientConfig()
        self._owns_transport = transport is None
        self._transport = transport or httpx.Client(timeout=self._config.timeout_seconds)
        self._authenticator = Authenticator()
        self._codec = PayloadCodec()

    def get(self, identity: ClientIdentity) -> RequestExecutor:
        return RequestExecutor(
            identity,
            self._transport,
            config=self._config,
            authenticator=self._authenticator,
            codec=self._codec,
        )

    def close(self) -> None:
        if self._owns_transport:
            self._transport.close()
