from pathlib import Path
from typing import BinaryIO, Protocol
import io
import logging
import os

import requests

logger = logging.getLogger(__name__)

SWAGGER_UI_VERSION = "5.17.14"
DEFAULT_CDN_URL = f"https://unpkg.com/swagger-ui-dist@{SWAGGER_UI_VERSION}"


class AssetOpenError(Exception):
    def __init__(self, detail):
        super().__init__(detail)
        self.detail = detail

    def __str__(self):
        return str(self.detail)


class FileSystem(Protocol):
    def open_file(self, name: str) -> BinaryIO: ...


class DirectoryFileSystem:
    """Serves Swagger UI assets from a directory on disk."""

    def __init__(self, root):
        self.root = Path(root).resolve()

    def open_file(self, name: str) -> BinaryIO:
        full_path = (self.root / name).resolve()
        if self.root not in full_path.parents:
            logger.warning(f"Refusing asset outside of {self.root}: {name}")
            raise AssetOpenError(f"Invalid asset path: {name}")
        try:
            return open(full_path, "rb")
        except OSError as e:
            logger.error(f"Failed to open asset {full_path}: {e}")
            raise AssetOpenError(f"Cannot open {name}") from e


class RemoteFileSystem:
    """
    Fetches Swagger UI assets from the swagger-ui-dist CDN.
    Each open downloads the whole file and hands back an in-memory stream.
    """

    def __init__(self, base_url: str = DEFAULT_CDN_URL, timeout: float = 10):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = requests.Session()

    def open_file(self, name: str) -> BinaryIO:
        url = f"{self.base_url}/{name}"
        try:
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            logger.error(f"Failed to fetch asset {url}: {e}")
            raise AssetOpenError(f"Cannot fetch {name}") from e
        return io.BytesIO(response.content)


class FileHandler:
    """
    Wraps a file system with a path prefix. Names passed to open_file may
    carry the prefix the docs are mounted under; it is stripped first.
    """

    def __init__(self, file_system: FileSystem, prefix: str = ""):
        self.file_system = file_system
        self.prefix = prefix

    def strip_prefix(self, name: str) -> str:
        if self.prefix and name.startswith(self.prefix):
            rest = name[len(self.prefix):]
            # Only strip whole path segments; "/oauth" is not a prefix of "/oauth2-redirect.html"
            if self.prefix.endswith("/") or not rest or rest.startswith("/"):
                name = rest
        return name.lstrip("/")

    def open_file(self, name: str) -> BinaryIO:
        return self.file_system.open_file(self.strip_prefix(name))


def default_handler() -> FileHandler:
    """Use SWAGGER_UI_DIR when set, the CDN otherwise."""
    assets_dir = os.getenv("SWAGGER_UI_DIR")
    if assets_dir:
        logger.info(f"Serving Swagger UI assets from {assets_dir}")
        return FileHandler(DirectoryFileSystem(assets_dir))
    cdn_url = os.getenv("SWAGGER_UI_CDN", DEFAULT_CDN_URL)
    logger.info(f"Serving Swagger UI assets from {cdn_url}")
    return FileHandler(RemoteFileSystem(cdn_url))
