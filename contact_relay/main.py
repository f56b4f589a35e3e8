#run it with contact-relay, or uvicorn contact_relay.main:app --reload
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Dict, List, Optional
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from dotenv import load_dotenv
import logging
import uvicorn

# Load environment variables from .env file
load_dotenv()

from contact_relay.api.api_router import api_router
from contact_relay.core.config import Settings, get_settings

# Set up logging
logging.basicConfig(
    level=get_settings().log_level.upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

ROUTE_NOT_FOUND_MESSAGE = "Route not found"
INTERNAL_ERROR_MESSAGE = "Internal server error"


def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with milliseconds and a Z suffix"""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def cors_headers(origin: Optional[str], allowed_origins: List[str]) -> Dict[str, str]:
    """CORS response headers for `origin`, empty when the origin is not allowed"""
    if not origin or origin not in allowed_origins:
        return {}
    return {
        "Access-Control-Allow-Origin": origin,
        "Access-Control-Allow-Credentials": "true",
        "Vary": "Origin",
    }


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the contact relay application.

    Args:
        settings: Configuration to run with. When given it replaces
            get_settings for every route, otherwise the environment is used.

    Returns:
        FastAPI: Configured application instance
    """
    explicit_settings = settings is not None
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"🚀 Contact relay starting in {settings.app_env} mode")
        if not settings.resend_api_key:
            logger.warning("⚠️ RESEND_API_KEY is not set, emails will be rejected by Resend")
        if not settings.recipient_email:
            logger.warning("⚠️ RECIPIENT_EMAIL is not set, emails have nowhere to go")
        yield
        logger.info("Contact relay shut down")

    app = FastAPI(title="Contact Relay", version="1.0.0", lifespan=lifespan)

    if explicit_settings:
        app.dependency_overrides[get_settings] = lambda: settings

    # CORS setup
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router)

    @app.get("/api/health")
    async def health_check():
        """Health check endpoint, answers regardless of Resend or config state."""
        return {
            "status": "OK",
            "message": "Server is running!",
            "timestamp": utc_timestamp(),
        }

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        # Unknown paths and known paths with the wrong method look the same to clients
        if exc.status_code in (404, 405):
            return JSONResponse(
                status_code=404,
                content={"success": False, "message": ROUTE_NOT_FOUND_MESSAGE}
            )
        return JSONResponse(
            status_code=exc.status_code,
            content={"success": False, "message": str(exc.detail)},
            headers=getattr(exc, "headers", None)
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled error on {request.method} {request.url.path}: {str(exc)}", exc_info=exc)
        # Runs outside CORSMiddleware, so allowed origins get their headers here
        return JSONResponse(
            status_code=500,
            content={"success": False, "message": INTERNAL_ERROR_MESSAGE},
            headers=cors_headers(request.headers.get("origin"), settings.cors_origins)
        )

    return app


app = create_app()


def run():
    settings = get_settings()
    logger.info(f"Server is running on port {settings.port}")
    logger.info(f"Health check: http://localhost:{settings.port}/api/health")
    uvicorn.run("contact_relay.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
