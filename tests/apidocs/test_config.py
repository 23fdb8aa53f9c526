"""
Tests for Swagger UI configuration
"""
import pytest
from pydantic import ValidationError

from apidocs import Config, FileHandler, default_config
from apidocs.files import DirectoryFileSystem, RemoteFileSystem


class TestDefaults:
    def test_default_config(self):
        config = default_config()
        assert config.url == "doc.json"
        assert config.doc_expansion == "list"
        assert config.instance_name == "swagger"
        assert config.title == "Swagger UI"
        assert config.default_models_expand_depth == 1
        assert config.deep_linking is True
        assert config.persist_authorization is False
        assert config.oauth2_default_client_id == ""

    def test_zero_values_get_defaults(self):
        config = Config(url="", doc_expansion="", instance_name="", title="", default_models_expand_depth=0)
        assert config.url == "doc.json"
        assert config.doc_expansion == "list"
        assert config.instance_name == "swagger"
        assert config.title == "Swagger UI"
        assert config.default_models_expand_depth == 1

    def test_explicit_config_keeps_deep_linking_off(self):
        assert Config(title="Demo").deep_linking is False

    def test_handler_defaults_to_cdn(self, monkeypatch):
        monkeypatch.delenv("SWAGGER_UI_DIR", raising=False)
        config = Config(handler=None)
        assert isinstance(config.handler, FileHandler)
        assert isinstance(config.handler.file_system, RemoteFileSystem)

    def test_handler_uses_assets_dir(self, monkeypatch, tmp_path):
        monkeypatch.setenv("SWAGGER_UI_DIR", str(tmp_path))
        config = Config()
        assert isinstance(config.handler.file_system, DirectoryFileSystem)
        assert config.handler.file_system.root == tmp_path.resolve()


class TestValidation:
    def test_negative_depth_rejected(self):
        with pytest.raises(ValidationError):
            Config(default_models_expand_depth=-1)

    def test_unknown_doc_expansion_rejected(self):
        with pytest.raises(ValidationError):
            Config(doc_expansion="everything")

    def test_config_is_frozen(self):
        config = default_config()
        with pytest.raises(ValidationError):
            config.title = "Changed"


class TestFromEnv:
    def test_reads_environment(self, monkeypatch, tmp_path):
        monkeypatch.setenv("SWAGGER_TITLE", "Demo")
        monkeypatch.setenv("SWAGGER_URL", "/openapi.json")
        monkeypatch.setenv("SWAGGER_DOC_EXPANSION", "none")
        monkeypatch.setenv("SWAGGER_MODELS_EXPAND_DEPTH", "3")
        monkeypatch.setenv("SWAGGER_DEEP_LINKING", "false")
        monkeypatch.setenv("SWAGGER_PERSIST_AUTHORIZATION", "true")
        monkeypatch.setenv("SWAGGER_OAUTH2_CLIENT_ID", "client")
        monkeypatch.setenv("SWAGGER_UI_DIR", str(tmp_path))

        config = Config.from_env()

        assert config.title == "Demo"
        assert config.url == "/openapi.json"
        assert config.doc_expansion == "none"
        assert config.default_models_expand_depth == 3
        assert config.deep_linking is False
        assert config.persist_authorization is True
        assert config.oauth2_default_client_id == "client"
        assert isinstance(config.handler.file_system, DirectoryFileSystem)

    def test_non_numeric_depth_is_validation_error(self, monkeypatch):
        monkeypatch.setenv("SWAGGER_MODELS_EXPAND_DEPTH", "abc")
        with pytest.raises(ValidationError):
            Config.from_env()

    def test_zero_depth_from_environment_gets_default(self, monkeypatch):
        monkeypatch.setenv("SWAGGER_MODELS_EXPAND_DEPTH", "0")
        assert Config.from_env().default_models_expand_depth == 1

    def test_defaults_without_environment(self, monkeypatch):
        for key in ("SWAGGER_TITLE", "SWAGGER_DEEP_LINKING", "SWAGGER_MODELS_EXPAND_DEPTH"):
            monkeypatch.delenv(key, raising=False)

        config = Config.from_env()

        assert config.title == "Swagger UI"
        assert config.deep_linking is True
        assert config.default_models_expand_depth == 1


class TestTemplateContext:
    def test_context_carries_redirect_url(self):
        context = default_config().to_template_context("http://localhost/swagger/oauth2-redirect.html")
        assert context["oauth2_redirect_url"] == "http://localhost/swagger/oauth2-redirect.html"
        assert context["deep_linking"] is True
        assert "handler" not in context
