# api/docs.py
from fastapi import FastAPI
from apidocs import registry
import logging

logger = logging.getLogger(__name__)


def register_openapi(app: FastAPI, name: str = registry.DEFAULT_NAME):
    """
    Publish the application's generated OpenAPI schema under `name` so the
    Swagger UI handler can serve it as doc.json.
    """
    if name in registry.names():
        logger.info(f"OpenAPI document '{name}' already registered, skipping")
        return
    registry.register(name, registry.OpenAPIDocument(app.openapi))
