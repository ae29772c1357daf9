"""Application entry point defining the HTTP API."""
from __future__ import annotations

from typing import Callable, TypeVar

from fastapi import APIRouter, FastAPI, HTTPException, Response, status
from fastapi.middleware.cors import CORSMiddleware

from status_api.application.resolve_icon import (
    IconDecodeError,
    IconResolution,
    ResolveServerIconUseCase,
)
from status_api.application.resolve_status import (
    ResolveBedrockStatusUseCase,
    ResolveJavaStatusUseCase,
    StatusResolution,
)
from status_api.config.logging_config import configure_logging
from status_api.config.settings import Settings, get_settings
from status_api.domain.repositories.address_policy import AddressPolicy
from status_api.domain.repositories.cache_store import CacheStore, CacheStoreError
from status_api.domain.repositories.status_query_client import StatusQueryClient
from status_api.domain.services.server_address import (
    BEDROCK_DEFAULT_PORT,
    JAVA_DEFAULT_PORT,
    ServerAddress,
    parse_server_address,
)
from status_api.infrastructure.cache.memory_cache_store import MemoryCacheStore
from status_api.infrastructure.clients.mcstatus_query_client import McstatusQueryClient
from status_api.infrastructure.repositories.blocked_servers_file_policy import (
    AllowAllAddressPolicy,
    BlockedServersFilePolicy,
)
from status_api.infrastructure.resources.default_icon import load_default_icon

CACHE_HIT_HEADER = "X-Cache-Hit"
CACHE_TIME_REMAINING_HEADER = "X-Cache-Time-Remaining"


def create_app(
    cache_store: CacheStore | None = None,
    query_client: StatusQueryClient | None = None,
    address_policy: AddressPolicy | None = None,
    default_icon: bytes | None = None,
    settings: Settings | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application instance."""

    settings = settings or get_settings()
    configure_logging(settings.log_level)

    cache = (
        cache_store
        if cache_store is not None
        else MemoryCacheStore(max_entries=settings.cache_max_entries)
    )
    client = (
        query_client
        if query_client is not None
        else McstatusQueryClient(timeout=settings.query_timeout_seconds)
    )
    policy = address_policy if address_policy is not None else _build_address_policy(settings)
    icon_placeholder = default_icon if default_icon is not None else load_default_icon()

    java_resolver = ResolveJavaStatusUseCase(cache, client, policy, settings.java_cache_ttl)
    bedrock_resolver = ResolveBedrockStatusUseCase(
        cache, client, policy, settings.bedrock_cache_ttl
    )
    icon_resolver = ResolveServerIconUseCase(
        cache, client, icon_placeholder, settings.icon_cache_ttl
    )

    app = FastAPI(title="Server Status API", version=settings.app_version)

    @app.get("/", status_code=status.HTTP_200_OK)
    async def get_root() -> dict[str, str]:
        """Return a simple heartbeat response for uptime monitoring."""

        return {"message": "RUNNING SERVER STATUS API"}

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.allowed_origins),
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    api_router = APIRouter(prefix=settings.api_prefix)

    @api_router.get("/status", status_code=status.HTTP_200_OK)
    async def get_status() -> dict:
        """Return the operational status and version of the service."""

        return {"status": "ok", "version": settings.app_version}

    @api_router.get("/status/java/{address}", status_code=status.HTTP_200_OK)
    def get_java_status(address: str) -> Response:
        """Return the status of the Java Edition server at ``address``."""

        server = _parse_address(address, JAVA_DEFAULT_PORT)
        resolution = _execute_resolver(java_resolver.execute, server)
        return _status_response(resolution)

    @api_router.get("/status/bedrock/{address}", status_code=status.HTTP_200_OK)
    def get_bedrock_status(address: str) -> Response:
        """Return the status of the Bedrock Edition server at ``address``."""

        server = _parse_address(address, BEDROCK_DEFAULT_PORT)
        resolution = _execute_resolver(bedrock_resolver.execute, server)
        return _status_response(resolution)

    @api_router.get("/icon/{address}", status_code=status.HTTP_200_OK)
    def get_icon(address: str) -> Response:
        """Return the PNG icon of the Java Edition server at ``address``."""

        server = _parse_address(address, JAVA_DEFAULT_PORT)
        try:
            resolution = _execute_resolver(icon_resolver.execute, server)
        except IconDecodeError as error:
            raise HTTPException(
                status_code=status.HTTP_502_BAD_GATEWAY,
                detail="The server returned an invalid icon.",
            ) from error
        return _icon_response(resolution)

    app.include_router(api_router)
    return app


def _build_address_policy(settings: Settings) -> AddressPolicy:
    """Return the block list policy configured in ``settings``."""

    if settings.blocked_servers_path is None:
        return AllowAllAddressPolicy()
    return BlockedServersFilePolicy(settings.blocked_servers_path)


def _parse_address(address: str, default_port: int) -> ServerAddress:
    """Parse ``address`` converting validation errors into HTTP ``400`` responses."""

    try:
        return parse_server_address(address, default_port)
    except ValueError as error:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(error),
        ) from error


_ResolutionT = TypeVar("_ResolutionT", StatusResolution, IconResolution)


def _execute_resolver(
    resolver: Callable[[str, int], _ResolutionT], server: ServerAddress
) -> _ResolutionT:
    """Run ``resolver`` converting cache store failures into HTTP ``500`` errors."""

    try:
        return resolver(server.host, server.port)
    except CacheStoreError as error:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="The status cache is unavailable.",
        ) from error


def _cache_headers(ttl_seconds: float | None) -> dict[str, str]:
    """Return the headers telling clients whether the cache answered."""

    if ttl_seconds is None:
        return {CACHE_HIT_HEADER: "false"}
    return {
        CACHE_HIT_HEADER: "true",
        CACHE_TIME_REMAINING_HEADER: str(int(ttl_seconds)),
    }


def _status_response(resolution: StatusResolution) -> Response:
    ttl_seconds = resolution.ttl.total_seconds() if resolution.ttl is not None else None
    return Response(
        content=resolution.payload,
        media_type="application/json",
        headers=_cache_headers(ttl_seconds),
    )


def _icon_response(resolution: IconResolution) -> Response:
    ttl_seconds = resolution.ttl.total_seconds() if resolution.ttl is not None else None
    return Response(
        content=resolution.data,
        media_type="image/png",
        headers=_cache_headers(ttl_seconds),
    )


app = create_app()
