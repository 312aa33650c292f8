"""Authenticator のユニットテスト"""

import hashlib
import hmac
from itertools import count

import httpx
from uploadcare_client.auth import (
    Authenticator,
    content_md5,
    http_date,
    make_signature_input,
    sign,
)
from uploadcare_client.models import AuthScheme, ClientIdentity

FIXED_TIME = 1_700_000_000.0

SIGNED = ClientIdentity(public_key="pub", private_key="secret", scheme=AuthScheme.SIGNED)
SIMPLE = ClientIdentity(public_key="pub", private_key="secret", scheme=AuthScheme.SIMPLE)


def make_request(method: str = "GET", url: str = "https://api.uploadcare.com/files/", **kwargs) -> httpx.Request:
    return httpx.Request(method, url, **kwargs)


def expected_signature(private_key: str, parts: list[str]) -> str:
    return hmac.new(private_key.encode(), "\n".join(parts).encode(), hashlib.sha1).hexdigest()


def test_simple_auth_sends_both_keys() -> None:
    """Simple 認証で公開鍵と秘密鍵がそのまま送られること。"""
    headers = Authenticator().authenticate(make_request(), SIMPLE)
    assert headers == {"Authorization": "Uploadcare.Simple pub:secret"}


def test_http_date_format() -> None:
    """RFC 1123 形式の GMT 日付になること。"""
    assert http_date(FIXED_TIME) == "Tue, 14 Nov 2023 22:13:20 GMT"


def test_signed_auth_headers() -> None:
    """署名認証で Authorization と Date ヘッダーが返ること。"""
    auth = Authenticator(clock=lambda: FIXED_TIME)
    headers = auth.authenticate(make_request(), SIGNED)
    date = "Tue, 14 Nov 2023 22:13:20 GMT"
    signature = expected_signature("secret", ["GET", "", "", date, "/files/"])
    assert headers["Date"] == date
    assert headers["Authorization"] == f"Uploadcare pub:{signature}"


def test_signed_auth_does_not_send_private_key() -> None:
    """署名認証のヘッダーに秘密鍵が含まれないこと。"""
    headers = Authenticator(clock=lambda: FIXED_TIME).authenticate(make_request(), SIGNED)
    assert all("secret" not in value for value in headers.values())


def test_signed_auth_uses_body_md5_and_content_type() -> None:
    """ボディの MD5 と Content-Type が署名入力に含まれること。"""
    body = b'{"hello":"world"}'
    request = make_request(
        "POST",
        "https://api.uploadcare.com/files/abc/storage/",
        content=body,
        headers={"Content-Type": "application/json"},
    )
    headers = Authenticator(clock=lambda: FIXED_TIME).authenticate(request, SIGNED)
    signature = expected_signature(
        "secret",
        [
            "POST",
            hashlib.md5(body).hexdigest(),
            "application/json",
            headers["Date"],
            "/files/abc/storage/",
        ],
    )
    assert headers["Authorization"] == f"Uploadcare pub:{signature}"


def test_signed_auth_includes_query_string() -> None:
    """署名対象のパスにクエリ文字列が含まれること。"""
    request = make_request(url="https://api.uploadcare.com/files/?page=2&stored=true")
    headers = Authenticator(clock=lambda: FIXED_TIME).authenticate(request, SIGNED)
    signature = expected_signature(
        "secret", ["GET", "", "", headers["Date"], "/files/?page=2&stored=true"]
    )
    assert headers["Authorization"] == f"Uploadcare pub:{signature}"


def test_signed_auth_fresh_per_call() -> None:
    """時刻が異なれば同一リクエストでも Date と署名が変わること。"""
    ticks = count(start=FIXED_TIME, step=1.0)
    auth = Authenticator(clock=lambda: next(ticks))
    body = b"same body"
    first = auth.authenticate(make_request("POST", content=body), SIGNED)
    second = auth.authenticate(make_request("POST", content=body), SIGNED)
    assert first["Date"] != second["Date"]
    assert first["Authorization"] != second["Authorization"]


def test_changing_one_body_byte_changes_signature() -> None:
    """ボディを 1 バイト変えると署名が変わること。"""
    auth = Authenticator(clock=lambda: FIXED_TIME)
    a = auth.authenticate(make_request("POST", content=b"payload-a"), SIGNED)
    b = auth.authenticate(make_request("POST", content=b"payload-b"), SIGNED)
    assert a["Date"] == b["Date"]
    assert a["Authorization"] != b["Authorization"]


def test_content_md5_empty_body() -> None:
    """空ボディのハッシュは空文字列であること。"""
    assert content_md5(b"") == ""
    assert content_md5(b"abc") == hashlib.md5(b"abc").hexdigest()


def test_signature_input_order() -> None:
    """署名入力が method, hash, type, date, path の順で改行区切りになること。"""
    value = make_signature_input("GET", "h", "t", "d", "/p?q=1")
    assert value == "GET\nh\nt\nd\n/p?q=1"


def test_reordering_or_omitting_fields_changes_signature() -> None:
    """フィールドの並べ替えや欠落で署名が変わること。"""
    reference = sign("secret", make_signature_input("GET", "h", "t", "d", "/p"))
    reordered = sign("secret", make_signature_input("GET", "t", "h", "d", "/p"))
    omitted = sign("secret", "\n".join(["GET", "h", "d", "/p"]))
    assert reference != reordered
    assert reference != omitted


def test_authenticate_does_not_mutate_identity() -> None:
    """認証で identity が変更されないこと。"""
    identity = ClientIdentity(public_key="pub", private_key="secret", scheme=AuthScheme.SIGNED)
    Authenticator(clock=lambda: FIXED_TIME).authenticate(make_request(), identity)
    assert identity == SIGNED


def test_identity_repr_hides_private_key() -> None:
    """ClientIdentity の repr に秘密鍵が出ないこと。"""
    assert "secret" not in repr(SIGNED)
    assert "pub" in repr(SIGNED)
