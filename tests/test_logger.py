"""ロガー設定のユニットテスト"""

import httpx
import pytest
import respx
import structlog
from uploadcare_client import Client, ClientConfig
from uploadcare_client.logger import configure_logging, get_logger, redact_credentials


@pytest.fixture(autouse=True)
def reset_structlog():
    yield
    structlog.reset_defaults()


def test_configure_logging_json_format() -> None:
    """ClientConfig の JSON フォーマットで構成できること。"""
    configure_logging(ClientConfig(log_level="INFO", log_format="json"))
    assert get_logger(__name__) is not None


def test_configure_logging_text_format() -> None:
    """ClientConfig のテキストフォーマットで構成できること。"""
    configure_logging(ClientConfig(log_level="DEBUG", log_format="text"))
    assert get_logger(__name__) is not None


def test_configure_logging_defaults() -> None:
    """引数なしでもデフォルト設定で構成できること。"""
    configure_logging()
    assert get_logger(__name__) is not None


def test_get_logger_bind() -> None:
    """get_logger のロガーが bind できること。"""
    logger = get_logger("uploadcare_client.test")
    bound = logger.bind(file_id="abc")
    assert bound is not None


def test_redact_simple_authorization_header() -> None:
    """Simple 認証ヘッダーの秘密鍵部分がマスクされること。"""
    event = {
        "event": "uploadcare request",
        "headers": {"Authorization": "Uploadcare.Simple pub:secret", "Accept": "application/json"},
    }
    result = redact_credentials(None, "debug", event)
    assert result["headers"]["Authorization"] == "Uploadcare.Simple pub:***"
    assert result["headers"]["Accept"] == "application/json"


def test_redact_top_level_keys() -> None:
    """トップレベルの private_key と authorization がマスクされること。"""
    event = {"event": "x", "private_key": "secret", "authorization": "Uploadcare pub:abcdef"}
    result = redact_credentials(None, "info", event)
    assert result["private_key"] == "***"
    assert result["authorization"] == "Uploadcare pub:***"
    assert result["event"] == "x"


@respx.mock
def test_request_log_never_contains_private_key() -> None:
    """リクエストのログイベントに秘密鍵が現れないこと。"""
    respx.post("https://api.uploadcare.com/files/abc/storage/").mock(
        return_value=httpx.Response(200)
    )
    capture = structlog.testing.LogCapture()
    structlog.configure(processors=[redact_credentials, capture])

    with Client("pub", "secret", simple_auth=True) as client:
        client.save_file("abc")

    logs = capture.entries
    requests = [entry for entry in logs if entry["event"] == "uploadcare request"]
    assert len(requests) == 1
    assert requests[0]["headers"]["authorization"] == "Uploadcare.Simple pub:***"
    assert "secret" not in repr(logs)
