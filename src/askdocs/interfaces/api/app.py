"""Falcon ASGI application."""

import logging

import falcon.asgi
from falcon.asgi import App

from askdocs.interfaces.api.resources.ask import AskResource
from askdocs.interfaces.api.resources.health import HealthResource
from askdocs.interfaces.api.resources.slack import SlackAskResource, SlackCommandForwardResource
from askdocs.interfaces.api.resources.upload import UploadResource

logger = logging.getLogger(__name__)


async def _handle_unexpected_error(
    req: falcon.asgi.Request, resp: falcon.asgi.Response, ex: Exception, params: dict
) -> None:
    logger.error("Unhandled error on %s %s", req.method, req.path, exc_info=ex)
    resp.status = falcon.HTTP_500
    resp.media = {"error": "Internal server error"}


def create_app(
    upload_resource: UploadResource,
    ask_resource: AskResource,
    slack_resource: SlackAskResource,
    health_resource: HealthResource,
    middleware: list | None = None,
) -> App:
    """Create Falcon ASGI app with routes."""
    app = falcon.asgi.App(middleware=middleware or [])
    app.add_error_handler(Exception, _handle_unexpected_error)
    app.add_route("/api/health", health_resource)
    app.add_route("/api/health/ready", health_resource, suffix="ready")
    app.add_route("/api/upload", upload_resource)
    app.add_route("/api/ask", ask_resource)
    app.add_route("/api/slack/ask", slack_resource)
    app.add_route("/", SlackCommandForwardResource(slack_resource))
    return app
