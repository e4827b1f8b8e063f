"""
requisites Main module - command line and HTTP entry points
"""

import logging
import os
from typing import Any, List, Optional
import time

import typer
import uvicorn
from fastapi import FastAPI, HTTPException, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.routing import APIRouter
from pydantic import BaseModel, Field

from requisites.features import Feature, FeatureRegistry, OperationResult, handle_list_checks
from requisites.version import get_version

# Module-level logger
logger = logging.getLogger("requisites.main")

HOST_ENV = "REQUISITES_HOST"
PORT_ENV = "REQUISITES_PORT"
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8000


# Create CLI app with Typer
app = typer.Typer(
    name="requisites",
    help="requisites - argument checks and placeholder formatting",
    add_completion=False,
)

# Create FastAPI app for API server
api_app = FastAPI(
    title="requisites API",
    description="API for placeholder formatting and argument checks",
    version=get_version(),
)

# Add CORS middleware
api_app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# API router for versioned endpoints
api_router = APIRouter(prefix="/api/v1")


# Request models
class FormatRequest(BaseModel):
    template: Optional[str] = None
    args: List[Any] = Field(default_factory=list)


class CheckRequest(BaseModel):
    check: str
    value: Optional[str] = None


# ----------------- Helper Functions -----------------


class ElapsedMsFormatter(logging.Formatter):
    """Formatter that shows milliseconds since program start, right-aligned for up to 9999 seconds."""
    def __init__(self, fmt=None, datefmt=None, *args, **kwargs):
        super().__init__(fmt, datefmt, *args, **kwargs)
        self.start_time = time.monotonic()
        self.width = 8

    def format(self, record):
        elapsed_ms = int((time.monotonic() - self.start_time) * 1000)
        if elapsed_ms < 10**7:
            elapsed = f"[{elapsed_ms:>{self.width}}ms]"
        else:
            elapsed = f"[{elapsed_ms}ms]"
        record.elapsed = elapsed
        return super().format(record)


VERBOSE_LEVEL = 15  # Between INFO (20) and DEBUG (10)
logging.addLevelName(VERBOSE_LEVEL, "VERBOSE")


def setup_logging(debug: bool = False, verbose: bool = False) -> None:
    """Set up logging configuration"""
    if debug:
        log_level = logging.DEBUG
    elif verbose:
        log_level = VERBOSE_LEVEL
    else:
        log_level = logging.INFO
    formatter = ElapsedMsFormatter('%(elapsed)s %(message)s')
    handler = logging.StreamHandler()
    handler.setFormatter(formatter)
    root = logging.getLogger()
    root.handlers = []  # Remove any existing handlers
    root.addHandler(handler)
    root.setLevel(log_level)

    # uvicorn installs its own handlers; keep its access log quiet unless debugging
    logging.getLogger("uvicorn.access").setLevel(logging.DEBUG if debug else logging.WARNING)


def _feature_or_exit(feature_name: str) -> Feature:
    feature = FeatureRegistry.get_feature(feature_name)
    if not feature:
        logger.error("Unknown feature: %s", feature_name)
        raise typer.Exit(code=1)
    return feature


def _handle_cli_result(feature_name: str, result: OperationResult) -> Any:
    """Log a failed result and exit, or hand back the result data"""
    if not result.success:
        logger.error("Operation failed: %s", result.error or "Unknown error")
        raise typer.Exit(code=1)
    logger.debug("Feature %s completed", feature_name)
    return result.data


def _serve_host(host: Optional[str]) -> str:
    return host or os.environ.get(HOST_ENV, "").strip() or DEFAULT_HOST


def _serve_port(port: Optional[int]) -> int:
    if port is not None:
        return port
    configured = os.environ.get(PORT_ENV, "").strip()
    if not configured:
        return DEFAULT_PORT
    try:
        return int(configured)
    except ValueError:
        logger.warning("Ignoring invalid %s=%r", PORT_ENV, configured)
        return DEFAULT_PORT


# ----------------- CLI Commands -----------------


@app.command()
def version() -> None:
    """Show the requisites version"""
    setup_logging(False)
    feature = _feature_or_exit("version")
    data = _handle_cli_result("version", feature.handler())
    logger.info("requisites version: %s", data.get("version", "unknown"))


@app.command("format")
def format_command(
    template: str = typer.Argument(..., help="Template containing {} or %s placeholders"),
    args: Optional[List[str]] = typer.Argument(None, help="Values substituted in order"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug mode"),
    verbose: bool = typer.Option(False, "--verbose", help="Enable verbose logging (between info and debug)"),
) -> None:
    """Substitute positional arguments into a template"""
    setup_logging(debug, verbose)
    feature = _feature_or_exit("format")
    data = _handle_cli_result("format", feature.handler(template=template, args=args or []))
    if data["unconsumed"]:
        logger.log(VERBOSE_LEVEL, "%d placeholder(s) left unfilled", data["unconsumed"])
    typer.echo(data["result"])


@app.command("check")
def check_command(
    check: str = typer.Argument(..., help="Name of the check (see list-checks)"),
    value: str = typer.Argument(..., help="Value to check"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug mode"),
) -> None:
    """Apply a named check to a value; exits with code 1 if it does not pass"""
    setup_logging(debug)
    feature = _feature_or_exit("check")
    data = _handle_cli_result("check", feature.handler(check=check, value=value))
    typer.echo("valid" if data["valid"] else "invalid")
    if not data["valid"]:
        raise typer.Exit(code=1)


@app.command("list-checks")
def list_checks() -> None:
    """List available named checks"""
    setup_logging(False)

    result = handle_list_checks()
    if not result.success:
        logger.error(f"Error: {result.error}")
        raise typer.Exit(code=1)

    checks = result.data.get("checks", {})
    print("Available checks:")
    if not checks:
        print("  No checks found.")
    else:
        for name, description in sorted(checks.items()):
            print(f"  {name:<20} {description}")


@app.command()
def serve(
    host: Optional[str] = typer.Option(None, help=f"Host to bind the API server (env: {HOST_ENV})"),
    port: Optional[int] = typer.Option(None, help=f"Port to bind the API server (env: {PORT_ENV})"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug mode"),
):
    """Start the requisites API server"""
    setup_logging(debug)
    host = _serve_host(host)
    port = _serve_port(port)

    logger.info(
        f"Starting requisites API server version {get_version()} on {host}:{port}"
    )
    logger.info(f"API documentation available at http://{host}:{port}/docs")

    uvicorn.run(api_app, host=host, port=port)


# ----------------- API Endpoints -----------------


def _run_feature(feature_name: str, **kwargs: Any) -> Any:
    try:
        feature = FeatureRegistry.get_feature(feature_name)
        if not feature:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"{feature_name.capitalize()} feature not found",
            )
        result = feature.handler(**kwargs)
        if hasattr(result, "success"):
            if not result.success:
                raise HTTPException(
                    status_code=status.HTTP_400_BAD_REQUEST,
                    detail=result.error or "An error occurred",
                )
            return result.data
        return result
    except HTTPException:
        raise
    except Exception as e:
        logger.error("Error in %s endpoint: %s", feature_name, str(e), exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error",
        ) from e


@api_router.get("/version")
async def get_version_endpoint():
    """Get requisites version"""
    return _run_feature("version")


@api_router.post("/format")
async def format_endpoint(request: FormatRequest):
    """Substitute positional arguments into a template"""
    return _run_feature("format", **request.model_dump())


@api_router.post("/check")
async def check_endpoint(request: CheckRequest):
    """Apply a named check to a value"""
    return _run_feature("check", **request.model_dump())


@api_router.get("/checks")
async def list_checks_endpoint():
    """List available named checks"""
    return _run_feature("list_checks")


# Include the router in the FastAPI app
api_app.include_router(api_router)


if __name__ == "__main__":
    app()
