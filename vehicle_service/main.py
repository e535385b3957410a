from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
import time
import uuid
from typing import Callable, Optional

from vehicle_service.adapters.implementations.mm_api.client import MMApiClient
from vehicle_service.adapters.interfaces.vendor_client import VehicleVendorClient
from vehicle_service.api.error_handlers import register_exception_handlers
from vehicle_service.core.config import get_settings, load_env_file
from vehicle_service.core.logging import configure_logging, get_logger, log_data, set_request_id
from vehicle_service.services.vehicle_service import VehicleService

REQUEST_ID_HEADER = "X-Request-Id"

# Load environment variables and configure logging early
load_env_file()
configure_logging()
logger = get_logger(__name__)


def create_application(vendor_client: Optional[VehicleVendorClient] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        vendor_client: Vendor client to serve requests with. When omitted an
            ``MMApiClient`` is built from settings on startup
            and closed on shutdown.

    Returns:
        FastAPI: Configured FastAPI application instance
    """
    settings = get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Starting up {settings.PROJECT_NAME}")
        if vendor_client is None:
            attach_vendor_client(
                app, MMApiClient(settings.VENDOR_BASE_URL, timeout=settings.VENDOR_TIMEOUT)
            )
        yield
        logger.info(f"Shutting down {settings.PROJECT_NAME}")
        await app.state.vendor_client.close()

    app = FastAPI(
        title=settings.PROJECT_NAME,
        description="Uniform REST API over the MM vehicle API.",
        docs_url=settings.DOCS_URL,
        debug=settings.DEBUG,
        lifespan=lifespan
    )

    # The default client is built on startup, inside the running event loop
    if vendor_client is not None:
        attach_vendor_client(app, vendor_client)

    # Register middleware
    configure_middleware(app)

    # Register exception handlers
    register_exception_handlers(app)

    # Register routers
    register_routers(app)

    return app


def attach_vendor_client(app: FastAPI, vendor_client: VehicleVendorClient) -> None:
    """Expose the vendor client and the facade built on it through app state."""
    app.state.vendor_client = vendor_client
    app.state.vehicle_service = VehicleService(vendor_client)


def configure_middleware(app: FastAPI) -> None:
    """
    Configure middleware components for the FastAPI application.

    Args:
        app: FastAPI application instance
    """
    settings = get_settings()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.BACKEND_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=[REQUEST_ID_HEADER],
    )

    # Request tracking middleware
    @app.middleware("http")
    async def add_request_id(request: Request, call_next: Callable):
        request_id = set_request_id(str(uuid.uuid4()))
        request.state.request_id = request_id

        start_time = time.time()
        logger.info(
            "Incoming request",
            extra=log_data(
                method=request.method,
                request_path=request.url.path,
                query=str(request.url.query)
            )
        )

        try:
            response = await call_next(request)

            response.headers[REQUEST_ID_HEADER] = request_id

            process_time = time.time() - start_time
            logger.info(
                "Request completed",
                extra=log_data(
                    method=request.method,
                    request_path=request.url.path,
                    status_code=response.status_code,
                    process_time_ms=round(process_time * 1000, 2)
                )
            )

            return response
        except Exception as e:
            # Log and re-raise; the catch-all handler renders the response
            process_time = time.time() - start_time
            logger.error(
                f"Request failed: {str(e)}",
                extra=log_data(
                    method=request.method,
                    request_path=request.url.path,
                    process_time_ms=round(process_time * 1000, 2)
                )
            )
            raise


def register_routers(app: FastAPI) -> None:
    """
    Register API routers with the FastAPI application.

    Args:
        app: FastAPI application instance
    """
    # Import routers here to avoid circular imports
    from vehicle_service.api.routes.health import health_router
    from vehicle_service.api.routes.vehicles import router as vehicles_router

    app.include_router(health_router, prefix="/health", tags=["Health"])
    app.include_router(vehicles_router)


def run() -> None:
    """Serve the application with uvicorn on the configured host and port."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "vehicle_service.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_config=None
    )


app = create_application()


if __name__ == "__main__":
    run()
