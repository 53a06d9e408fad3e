"""
Process logging setup and the per-route invocation log.
"""

from __future__ import annotations

import logging

from fastapi import Request

from . import settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

logger = logging.getLogger("api.routes")


def configure_logging() -> None:
    logging.basicConfig(level=settings.log_level(), format=LOG_FORMAT)


async def log_route(request: Request) -> None:
    # path template, not the concrete URL
    route = request.scope.get("route")
    path = getattr(route, "path", request.url.path)
    logger.info("route=%s %s", request.method, path)
