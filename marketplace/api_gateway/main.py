"""
API Gateway - single HTTP entry point forwarding to the backend services
"""
from contextlib import asynccontextmanager
from datetime import datetime
from typing import Dict, Optional
import logging

import httpx
from fastapi import FastAPI, Request, Response, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ..common.config import Settings, settings as default_settings
from ..common.logging_config import configure_logging

logger = logging.getLogger(__name__)

FORWARDED_REQUEST_HEADERS = ("authorization", "content-type", "accept")
FORWARDED_RESPONSE_HEADERS = ("content-type",)
PROXY_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE"]


async def forward(client: httpx.AsyncClient, request: Request, path: str) -> Response:
    """
    Relay a request to an upstream service and its answer back.

    Only the headers the services understand are forwarded.
    """
    headers = {
        name: value
        for name, value in request.headers.items()
        if name.lower() in FORWARDED_REQUEST_HEADERS
    }
    body = await request.body()

    try:
        upstream = await client.request(
            request.method,
            path,
            params=request.query_params.multi_items(),
            content=body,
            headers=headers,
        )
    except httpx.TimeoutException as e:
        logger.error(f"Upstream timeout: {request.method} {client.base_url}{path}: {e}")
        return JSONResponse(
            status_code=status.HTTP_504_GATEWAY_TIMEOUT,
            content={"detail": "Upstream service timed out"},
        )
    except httpx.TransportError as e:
        logger.error(f"Upstream unavailable: {request.method} {client.base_url}{path}: {e}")
        return JSONResponse(
            status_code=status.HTTP_502_BAD_GATEWAY,
            content={"detail": "Upstream service unavailable"},
        )

    logger.info(f"{request.method} {path} -> {client.base_url} {upstream.status_code}")
    response_headers = {
        name: value
        for name, value in upstream.headers.items()
        if name.lower() in FORWARDED_RESPONSE_HEADERS
    }
    return Response(
        content=upstream.content,
        status_code=upstream.status_code,
        headers=response_headers,
    )


def create_app(
    settings: Optional[Settings] = None,
    transports: Optional[Dict[str, httpx.AsyncBaseTransport]] = None,
) -> FastAPI:
    """
    Build the gateway.

    Args:
        settings: Service configuration (upstream URLs, timeout, CORS)
        transports: Optional transport per upstream ("auth", "vendor"),
                    used to route to in-process applications
    """
    settings = settings or default_settings
    transports = transports or {}
    configure_logging(settings)

    upstream_urls = {
        "auth": settings.AUTH_SERVICE_URL,
        "vendor": settings.VENDOR_SERVICE_URL,
    }

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Open one pooled client per upstream for the process lifetime"""
        app.state.upstreams = {
            name: httpx.AsyncClient(
                base_url=url,
                timeout=settings.GATEWAY_TIMEOUT_SECONDS,
                transport=transports.get(name),
            )
            for name, url in upstream_urls.items()
        }
        logger.info(f"API Gateway started: upstreams={upstream_urls}")
        try:
            yield
        finally:
            for client in app.state.upstreams.values():
                await client.aclose()

    app = FastAPI(title="API Gateway", version="1.0.0", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "HEAD", "PUT", "PATCH", "POST", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Authorization"],
    )

    @app.get("/health")
    async def health_check():
        return {
            "status": "healthy",
            "service": app.title,
            "timestamp": datetime.utcnow().isoformat()
        }

    @app.api_route("/auth/{path:path}", methods=PROXY_METHODS)
    async def proxy_auth(path: str, request: Request):
        return await forward(request.app.state.upstreams["auth"], request, f"/auth/{path}")

    @app.api_route("/vendor/{path:path}", methods=PROXY_METHODS)
    async def proxy_vendor(path: str, request: Request):
        return await forward(request.app.state.upstreams["vendor"], request, f"/vendor/{path}")

    return app


app = create_app()
