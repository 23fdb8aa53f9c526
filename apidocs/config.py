from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from typing import Any
import os

from .files import FileHandler, default_handler
from .registry import DEFAULT_NAME

DEFAULT_URL = "doc.json"
DEFAULT_DOC_EXPANSION = "list"
DEFAULT_TITLE = "Swagger UI"
DEFAULT_MODELS_EXPAND_DEPTH = 1

DOC_EXPANSIONS = ("list", "full", "none")

_TRUTHY = ("1", "true", "yes", "on")


class Config(BaseModel):
    """
    Swagger UI settings. Empty or zero values fall back to the defaults,
    the same way an unset environment variable would.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    # The url pointing to the API definition (normally swagger.json or swagger.yaml).
    url: str = DEFAULT_URL
    doc_expansion: str = DEFAULT_DOC_EXPANSION
    instance_name: str = DEFAULT_NAME
    title: str = DEFAULT_TITLE
    default_models_expand_depth: int = Field(default=DEFAULT_MODELS_EXPAND_DEPTH, ge=0)
    deep_linking: bool = False
    persist_authorization: bool = False
    oauth2_default_client_id: str = ""
    handler: FileHandler = Field(default_factory=default_handler, exclude=True)

    @model_validator(mode="before")
    @classmethod
    def fill_defaults(cls, data: Any):
        if not isinstance(data, dict):
            return data
        defaults = {
            "url": DEFAULT_URL,
            "doc_expansion": DEFAULT_DOC_EXPANSION,
            "instance_name": DEFAULT_NAME,
            "title": DEFAULT_TITLE,
            "default_models_expand_depth": DEFAULT_MODELS_EXPAND_DEPTH,
        }
        data = dict(data)
        for key, default in defaults.items():
            if data.get(key) in ("", 0, "0", None):
                data[key] = default
        if data.get("handler") is None:
            data.pop("handler", None)
        if data.get("oauth2_default_client_id") is None:
            data["oauth2_default_client_id"] = ""
        return data

    @field_validator("doc_expansion")
    @classmethod
    def check_doc_expansion(cls, doc_expansion):
        if doc_expansion not in DOC_EXPANSIONS:
            raise ValueError(f"doc_expansion must be one of {', '.join(DOC_EXPANSIONS)}")
        return doc_expansion

    def to_template_context(self, oauth2_redirect_url: str) -> dict:
        return {
            "url": self.url,
            "doc_expansion": self.doc_expansion,
            "title": self.title,
            "oauth2_redirect_url": oauth2_redirect_url,
            "default_models_expand_depth": self.default_models_expand_depth,
            "deep_linking": self.deep_linking,
            "persist_authorization": self.persist_authorization,
            "oauth2_default_client_id": self.oauth2_default_client_id,
        }

    @classmethod
    def from_env(cls) -> "Config":
        """Build a config from SWAGGER_* environment variables."""
        return cls(
            url=os.getenv("SWAGGER_URL", DEFAULT_URL),
            doc_expansion=os.getenv("SWAGGER_DOC_EXPANSION", DEFAULT_DOC_EXPANSION),
            instance_name=os.getenv("SWAGGER_INSTANCE_NAME", DEFAULT_NAME),
            title=os.getenv("SWAGGER_TITLE", DEFAULT_TITLE),
            default_models_expand_depth=os.getenv(
                "SWAGGER_MODELS_EXPAND_DEPTH", str(DEFAULT_MODELS_EXPAND_DEPTH)
            ),
            deep_linking=os.getenv("SWAGGER_DEEP_LINKING", "true").lower() in _TRUTHY,
            persist_authorization=os.getenv("SWAGGER_PERSIST_AUTHORIZATION", "false").lower()
            in _TRUTHY,
            oauth2_default_client_id=os.getenv("SWAGGER_OAUTH2_CLIENT_ID", ""),
        )


def default_config() -> Config:
    return Config(deep_linking=True)
