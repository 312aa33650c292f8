"""ファイルアップロード"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING, BinaryIO

from .exceptions import UploadcareError, UploadFailureError
from .logger import get_logger
from .models import RequestDescriptor, UploadResult
from .resources import File

if TYPE_CHECKING:
    from .client import Client

PUBLIC_KEY_FIELD = "UPLOADCARE_PUB_KEY"
FILE_FIELD = "file"

logger = get_logger(__name__)


class Uploader(ABC):
    """アップローダー抽象基底クラス。"""

    @abstractmethod
    def upload(self) -> File:
        """アップロードして File リソースを返す。

        Raises:
            UploadFailureError: アップロード送信に失敗した場合
        """
        ...


class StreamUploader(Uploader):
    """バイナリストリームを公開鍵のみでアップロードする。

    ストリームは 1 度だけ読まれ、巻き戻しもリトライもしない。
    再送が必要な場合は新しいストリームで作り直すこと。
    """

    def __init__(self, client: Client, stream: BinaryIO, filename: str) -> None:
        self._client = client
        self._stream = stream
        self._filename = filename

    def _descriptor(self) -> RequestDescriptor:
        return RequestDescriptor(
            method="POST",
            url=self._client.urls.upload_base(),
            form={PUBLIC_KEY_FIELD: self._client.public_key},
            files={FILE_FIELD: (self._filename, self._stream)},
        )

    def upload(self) -> File:
        executor = self._client.request_executor
        try:
            result = executor.execute_query(self._descriptor(), False, UploadResult)
        except UploadcareError as e:
            logger.warning("upload failed", filename=self._filename, error=str(e))
            raise UploadFailureError(
                message=f"Upload of {self._filename!r} failed: {e}",
                cause=e,
            ) from e
        except Exception as e:
            # ストリームの読み出し失敗など
            logger.warning("upload failed", filename=self._filename, error=repr(e))
            raise UploadFailureError(
                message=f"Upload of {self._filename!r} failed: {e}",
                cause=e,
            ) from e
        logger.info("uploaded", filename=self._filename, file_id=result.file)
        return self._client.get_file(result.file)


class FileUploader(Uploader):
    """ローカルファイルをアップロードする。ファイル名はパスの末尾を使う。"""

    def __init__(self, client: Client, path: Path | str) -> None:
        self._client = client
        self._path = Path(path)

    def upload(self) -> File:
        try:
            stream = self._path.open("rb")
        except OSError as e:
            raise UploadFailureError(
                message=f"Failed to open {self._path}",
                cause=e,
            ) from e
        with stream:
            return StreamUploader(self._client, stream, self._path.name).upload()
