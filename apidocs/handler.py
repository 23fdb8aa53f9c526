"""
Swagger UI request handler.

One handler serves everything under the docs mount point: the UI shell
(index.html), the registered OpenAPI document (doc.json) and the static
Swagger UI assets read through the configured FileHandler.
"""
from fastapi import APIRouter, Request, Response, status
from fastapi.responses import PlainTextResponse
from fastapi.templating import Jinja2Templates
from pathlib import Path
from typing import Callable, Optional
import logging
import posixpath
import re
import threading

from . import registry
from .config import Config, default_config
from .files import AssetOpenError

logger = logging.getLogger(__name__)

templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))

INDEX_TEMPLATE = "swagger_index.html"

MATCHER = re.compile(
    r"(.*)(index\.html|doc\.json|favicon-16x16\.png|favicon-32x32\.png|/oauth2-redirect\.html"
    r"|swagger-ui\.css\.map|swagger-ui\.css|swagger-ui\.js\.map|swagger-ui\.js"
    r"|swagger-ui-bundle\.js\.map|swagger-ui-bundle\.js"
    r"|swagger-ui-standalone-preset\.js\.map|swagger-ui-standalone-preset\.js)[?|.]*"
)

CONTENT_TYPES = {
    ".html": "text/html; charset=utf-8",
    ".css": "text/css; charset=utf-8",
    ".js": "application/javascript",
    ".png": "image/png",
    ".json": "application/json; charset=utf-8",
}

ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


class Once:
    """Runs a function exactly once, no matter how many threads call do()."""

    def __init__(self):
        self._done = False
        self._lock = threading.Lock()

    @property
    def done(self) -> bool:
        return self._done

    def do(self, func: Callable[[], None]):
        if self._done:
            return
        with self._lock:
            if not self._done:
                try:
                    func()
                finally:
                    self._done = True


def content_type_for(name: str) -> Optional[str]:
    return CONTENT_TYPES.get(posixpath.splitext(name)[1])


def request_uri(request: Request) -> str:
    uri = request.url.path
    if request.url.query:
        uri += "?" + request.url.query
    return uri


class SwaggerHandler:
    def __init__(self, config: Optional[Config] = None):
        self.config = config or default_config()
        self.once = Once()
        # Loaded up front so a broken template fails at startup, not per request
        self.index = templates.get_template(INDEX_TEMPLATE)

    def set_prefix(self, prefix: str):
        logger.info(f"Swagger UI assets prefix set to '{prefix}'")
        self.config.handler.prefix = prefix

    def oauth2_redirect_url(self, request: Request, root: bool) -> str:
        path = request.url.path
        directory = path.rstrip("/") if root else path.rsplit("/", 1)[0]
        return f"{request.url.scheme}://{request.url.netloc}{directory}/oauth2-redirect.html"

    def __call__(self, request: Request) -> Response:
        if request.method != "GET":
            return Response(status_code=status.HTTP_405_METHOD_NOT_ALLOWED)

        uri = request_uri(request)
        wildcard = request.path_params.get("any", "")
        match = MATCHER.search(uri)
        if match is None and wildcard:
            logger.warning(f"Unknown Swagger UI asset requested: {uri}")
            return PlainTextResponse("Not Found", status_code=status.HTTP_404_NOT_FOUND)

        path = match.group(2) if wildcard else "index.html"
        prefix = match.group(1) if match else uri

        self.once.do(lambda: self.set_prefix(prefix))

        headers = {}
        content_type = content_type_for(path)
        if content_type:
            headers["Content-Type"] = content_type

        if path == "index.html":
            context = self.config.to_template_context(
                self.oauth2_redirect_url(request, root=not wildcard)
            )
            return Response(content=self.index.render(context), headers=headers)

        if path == "doc.json":
            try:
                doc = registry.read_doc(self.config.instance_name)
            except registry.DocumentNotFoundError as e:
                logger.error(f"OpenAPI document unavailable: {e}")
                return Response(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
            return Response(content=doc.encode("utf-8"), headers=headers)

        try:
            stream = self.config.handler.open_file(path)
        except AssetOpenError as e:
            logger.error(f"Failed to open Swagger UI asset {path}: {e}")
            return Response(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
        try:
            with stream:
                body = stream.read()
        except OSError as e:
            logger.error(f"Failed to read Swagger UI asset {path}: {e}")
            return Response(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
        return Response(content=body, headers=headers)


def new(config: Optional[Config] = None) -> SwaggerHandler:
    return SwaggerHandler(config)


def mount(router: APIRouter, path: str, config: Optional[Config] = None) -> SwaggerHandler:
    """
    Serve Swagger UI under `path`, e.g. mount(app.router, "/swagger").
    Every method is routed to the handler so it can answer 405 itself.
    """
    handler = new(config)
    path = path.rstrip("/")

    def swagger_endpoint(request: Request):
        return handler(request)

    router.add_api_route(path, swagger_endpoint, methods=ALL_METHODS, include_in_schema=False)
    router.add_api_route(
        path + "/{any:path}", swagger_endpoint, methods=ALL_METHODS, include_in_schema=False
    )
    return handler
