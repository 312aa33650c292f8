"""structlog ベースのロガー設定"""

from __future__ import annotations

import logging
import sys
from collections.abc import Mapping
from typing import Any

import structlog

from .config import ClientConfig

MASK = "***"
SENSITIVE_KEYS = frozenset({"authorization", "private_key"})


def _mask(value: Any) -> str:
    # "Uploadcare.Simple pub:priv" / "Uploadcare pub:sig" は公開鍵までを残す
    text = str(value)
    scheme, _, credentials = text.partition(" ")
    public_key, sep, _ = credentials.partition(":")
    if sep:
        return f"{scheme} {public_key}:{MASK}"
    return MASK


def redact_credentials(
    logger: Any, method_name: str, event_dict: structlog.types.EventDict
) -> structlog.types.EventDict:
    """イベント中の Authorization ヘッダーと秘密鍵をマスクする processor。

    トップレベルのキーと、``headers`` のようなマッピング値の 1 段下を対象にする。
    """
    for key, value in list(event_dict.items()):
        if key.lower() in SENSITIVE_KEYS:
            event_dict[key] = _mask(value)
        elif isinstance(value, Mapping):
            event_dict[key] = {
                k: _mask(v) if str(k).lower() in SENSITIVE_KEYS else v for k, v in value.items()
            }
    return event_dict


def configure_logging(config: ClientConfig | None = None) -> None:
    """ClientConfig の log_level / log_format で structlog を構成する。

    ライブラリ自身は呼ばない。アプリケーションの起動時に 1 度呼ぶ。
    """
    config = config or ClientConfig()
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, config.log_level.upper(), logging.INFO),
    )

    renderer: structlog.types.Processor
    if config.log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.processors.add_log_level,
            redact_credentials,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """モジュール名を束縛したロガーを返す。"""
    logger: structlog.stdlib.BoundLogger = structlog.stdlib.get_logger(name)
    return logger
