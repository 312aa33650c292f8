"""ワイヤーペイロードのエンコード/デコード"""

from __future__ import annotations

from typing import TypeVar

from pydantic import BaseModel, ValidationError

from .exceptions import DecodeFailure

T = TypeVar("T", bound=BaseModel)


class PayloadCodec:
    """JSON ペイロードと pydantic モデルの相互変換。

    フィールド名はワイヤー上の snake_case 名と一致させ、未知のフィールドは
    モデル側の設定 (``extra="ignore"``) で読み捨てる。
    """

    def decode(self, content: bytes, shape: type[T]) -> T:
        try:
            return shape.model_validate_json(content)
        except ValidationError as e:
            raise DecodeFailure(
                message=f"Failed to decode {shape.__name__}: {e.error_count()} error(s)",
                cause=e,
            ) from e

    def encode(self, payload: BaseModel) -> bytes:
        return payload.model_dump_json(exclude_none=True).encode("utf-8")
