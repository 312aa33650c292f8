"""リクエスト認証ヘッダーの生成（Simple / HMAC 署名）"""

from __future__ import annotations

import hashlib
import hmac
import time
from collections.abc import Callable
from email.utils import formatdate

import httpx

from .models import AuthScheme, ClientIdentity

SIMPLE_AUTH_PREFIX = "Uploadcare.Simple"
SIGNED_AUTH_PREFIX = "Uploadcare"


def content_md5(body: bytes) -> str:
    """ボディの MD5 を 16 進で返す。ボディが空なら空文字列。

    MD5 はサーバー側の署名方式との互換のために使う。
    """
    if not body:
        return ""
    return hashlib.md5(body).hexdigest()


def http_date(timestamp: float) -> str:
    """RFC 1123 形式の HTTP 日付文字列 (GMT)。"""
    return formatdate(timestamp, usegmt=True)


def make_signature_input(
    method: str,
    content_hash: str,
    content_type: str,
    date: str,
    path_with_query: str,
) -> str:
    return "\n".join([method, content_hash, content_type, date, path_with_query])


def sign(private_key: str, signature_input: str) -> str:
    """HMAC-SHA1 署名を 16 進で返す。"""
    return hmac.new(
        private_key.encode("utf-8"),
        signature_input.encode("utf-8"),
        hashlib.sha1,
    ).hexdigest()


class Authenticator:
    """保留中のリクエストに付与する認証ヘッダーを計算する。

    identity は読み取りのみで変更しない。署名モードの日付と署名は
    呼び出しごとに新しく生成され、キャッシュされない。
    """

    def __init__(self, clock: Callable[[], float] = time.time) -> None:
        self._clock = clock

    def authenticate(self, request: httpx.Request, identity: ClientIdentity) -> dict[str, str]:
        if identity.scheme is AuthScheme.SIMPLE:
            return self._simple(identity)
        return self._signed(request, identity)

    def _simple(self, identity: ClientIdentity) -> dict[str, str]:
        # 秘密鍵を平文で送る。デモ・互換用途のみ。
        return {
            "Authorization": (
                f"{SIMPLE_AUTH_PREFIX} {identity.public_key}:{identity.private_key}"
            ),
        }

    def _signed(self, request: httpx.Request, identity: ClientIdentity) -> dict[str, str]:
        body = request.read()
        content_type = request.headers.get("Content-Type", "") if body else ""
        date = http_date(self._clock())
        signature_input = make_signature_input(
            request.method,
            content_md5(body),
            content_type,
            date,
            request.url.raw_path.decode("ascii"),
        )
        signature = sign(identity.private_key, signature_input)
        return {
            "Authorization": f"{SIGNED_AUTH_PREFIX} {identity.public_key}:{signature}",
            "Date": date,
        }
