"""uploadcare_client ライブラリの例外型定義"""

from __future__ import annotations


class UploadcareError(Exception):
    """uploadcare_client ライブラリのエラー基底クラス。"""

    def __init__(
        self,
        code: str,
        message: str,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return f"{self.code}: {super().__str__()}"


class UploadcareErrorCodes:
    """UploadcareError のエラーコード定数。"""

    TRANSPORT_ERROR: str = "TRANSPORT_ERROR"
    HTTP_ERROR: str = "HTTP_ERROR"
    DECODE_ERROR: str = "DECODE_ERROR"
    UPLOAD_FAILED: str = "UPLOAD_FAILED"
    READ_FILE: str = "READ_FILE_ERROR"
    PARSE_YAML: str = "PARSE_YAML_ERROR"
    VALIDATION: str = "VALIDATION_ERROR"


class TransportFailure(UploadcareError):
    """接続拒否・タイムアウト・DNS 解決失敗などのトランスポート層エラー。"""

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        super().__init__(UploadcareErrorCodes.TRANSPORT_ERROR, message, cause)


class HttpFailure(UploadcareError):
    """2xx 以外の HTTP レスポンス。ステータスコードはそのまま保持する。"""

    def __init__(self, status: int, reason: str, body: str = "") -> None:
        super().__init__(UploadcareErrorCodes.HTTP_ERROR, f"HTTP {status} {reason}".rstrip())
        self.status = status
        self.reason = reason
        self.body = body


class DecodeFailure(UploadcareError):
    """レスポンスボディを期待する型にデコードできなかった。2xx でも発生しうる。"""

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        super().__init__(UploadcareErrorCodes.DECODE_ERROR, message, cause)


class UploadFailureError(UploadcareError):
    """アップロード送信ステップの失敗（後続のファイル取得は含まない）。"""

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        super().__init__(UploadcareErrorCodes.UPLOAD_FAILED, message, cause)


class ConfigError(UploadcareError):
    """設定ファイルの読み込み・検証エラー。"""
