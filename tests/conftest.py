"""
Shared test configuration and fixtures
"""
import pytest
import io
import os
from fastapi import FastAPI
from fastapi.testclient import TestClient

# Set test environment before importing app
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ.pop("SWAGGER_UI_DIR", None)

from apidocs import Config, FileHandler, mount, registry
from apidocs.files import AssetOpenError


class FakeFileSystem:
    """In-memory file system recording every name it is asked for"""

    def __init__(self, files=None):
        self.files = files or {}
        self.opened = []

    def open_file(self, name):
        self.opened.append(name)
        if name not in self.files:
            raise AssetOpenError(f"Cannot open {name}")
        return io.BytesIO(self.files[name])


@pytest.fixture(autouse=True)
def clean_registry():
    """Each test starts with an empty document registry"""
    saved = {name: registry.get(name) for name in registry.names()}
    registry.clear()
    yield
    registry.clear()
    for name, document in saved.items():
        registry.register(name, document)


@pytest.fixture
def file_system():
    return FakeFileSystem(
        {
            "swagger-ui.css": b".swagger-ui { color: #3b4151; }",
            "swagger-ui-bundle.js": b"window.SwaggerUIBundle = function () {};",
            "favicon-32x32.png": b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR",
            "swagger-ui.css.map": b'{"version": 3}',
            "oauth2-redirect.html": b"<html><body>redirect</body></html>",
        }
    )


@pytest.fixture
def swagger_config(file_system):
    return Config(
        title="Demo",
        url="doc.json",
        deep_linking=True,
        default_models_expand_depth=1,
        handler=FileHandler(file_system),
    )


@pytest.fixture
def docs_app(swagger_config):
    """A bare app with the docs mounted at /swagger"""
    app = FastAPI(docs_url=None, redoc_url=None)
    app.state.swagger_handler = mount(app.router, "/swagger", swagger_config)
    return app


@pytest.fixture
def docs_client(docs_app):
    with TestClient(docs_app) as test_client:
        yield test_client
