"""Uploadcare REST API client library."""

from .auth import Authenticator
from .client import Client, demo_client
from .codec import PayloadCodec
from .config import ClientConfig, load_config
from .exceptions import (
    ConfigError,
    DecodeFailure,
    HttpFailure,
    TransportFailure,
    UploadcareError,
    UploadcareErrorCodes,
    UploadFailureError,
)
from .executor import DefaultRequestExecutorProvider, RequestExecutor, RequestExecutorProvider
from .logger import configure_logging, get_logger
from .models import (
    AuthScheme,
    ClientIdentity,
    CollaboratorData,
    FileData,
    FilePageData,
    ProjectData,
    RequestDescriptor,
    UploadResult,
)
from .query import FilesQueryBuilder
from .resources import File, Project
from .upload import FileUploader, StreamUploader, Uploader
from .urls import Operation, UrlBuilder

__all__ = [
    "Client",
    "demo_client",
    "ClientConfig",
    "load_config",
    "Authenticator",
    "PayloadCodec",
    "RequestExecutor",
    "RequestExecutorProvider",
    "DefaultRequestExecutorProvider",
    "AuthScheme",
    "ClientIdentity",
    "RequestDescriptor",
    "FileData",
    "FilePageData",
    "ProjectData",
    "CollaboratorData",
    "UploadResult",
    "File",
    "Project",
    "FilesQueryBuilder",
    "Uploader",
    "StreamUploader",
    "FileUploader",
    "UrlBuilder",
    "Operation",
    "configure_logging",
    "get_logger",
    "UploadcareError",
    "UploadcareErrorCodes",
    "TransportFailure",
    "HttpFailure",
    "DecodeFailure",
    "UploadFailureError",
    "ConfigError",
]
