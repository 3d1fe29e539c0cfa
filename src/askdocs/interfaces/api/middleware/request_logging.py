"""Request logging middleware."""

import logging
import time

import falcon.asgi

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware:
    """Logs every request and its outcome with timing."""

    async def process_request(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response
    ) -> None:
        req.context.started_at = time.perf_counter()
        logger.info("%s %s", req.method, req.path)

    async def process_response(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, resource, req_succeeded
    ) -> None:
        started_at = getattr(req.context, "started_at", None)
        elapsed_ms = (time.perf_counter() - started_at) * 1000 if started_at else 0.0
        if resource is None:
            logger.info("No route matched: %s %s", req.method, req.path)
        logger.info("%s %s - %s (%.1f ms)", req.method, req.path, resp.status, elapsed_ms)
