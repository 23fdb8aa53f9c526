from .config import Config, default_config
from .files import DirectoryFileSystem, FileHandler, RemoteFileSystem
from .handler import SwaggerHandler, mount, new
from . import registry

__all__ = [
    "Config",
    "default_config",
    "DirectoryFileSystem",
    "FileHandler",
    "RemoteFileSystem",
    "SwaggerHandler",
    "mount",
    "new",
    "registry",
]
