"""
Process-wide registry of OpenAPI documents, keyed by instance name.

The handler serves doc.json by looking up the document registered for its
configured instance name. Documents are registered once at startup.
"""
from typing import Callable, Dict, Protocol
import json
import logging
import threading

logger = logging.getLogger(__name__)

DEFAULT_NAME = "swagger"


class RegistryError(Exception):
    def __init__(self, detail):
        super().__init__(detail)
        self.detail = detail

    def __str__(self):
        return str(self.detail)


class DocumentNotFoundError(RegistryError):
    pass


class Document(Protocol):
    def read_doc(self) -> str: ...


class StaticDocument:
    """A document that is already serialized."""

    def __init__(self, text: str):
        self.text = text

    def read_doc(self) -> str:
        return self.text


class OpenAPIDocument:
    """
    Serializes a schema produced by a callable, normally FastAPI's
    app.openapi. The schema is generated on first read.
    """

    def __init__(self, schema_factory: Callable[[], dict]):
        self.schema_factory = schema_factory

    def read_doc(self) -> str:
        return json.dumps(self.schema_factory())


_documents: Dict[str, Document] = {}
_lock = threading.Lock()


def register(name: str, document: Document):
    if document is None:
        raise RegistryError("Register document is None")
    with _lock:
        if name in _documents:
            raise RegistryError(f"Register called twice for document: {name}")
        _documents[name] = document
    logger.info(f"Registered OpenAPI document '{name}'")


def unregister(name: str):
    with _lock:
        _documents.pop(name, None)


def clear():
    with _lock:
        _documents.clear()


def get(name: str = DEFAULT_NAME) -> Document:
    with _lock:
        document = _documents.get(name)
    if document is None:
        raise DocumentNotFoundError(f"No document registered for '{name}'")
    return document


def read_doc(name: str = DEFAULT_NAME) -> str:
    return get(name).read_doc()


def names() -> list[str]:
    with _lock:
        return sorted(_documents)
