# petitbac/main.py
# Start the backend using: uvicorn petitbac.main:app --reload --host 0.0.0.0
import logging
import logging.config
import logging.handlers
import json
import pathlib
from contextlib import asynccontextmanager
import time
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.routing import APIRoute, APIWebSocketRoute

from petitbac.core.config import settings
from petitbac.api import live as live_router
from petitbac.api import validation as validation_router
from petitbac.api.deps import get_validation_service
from petitbac.db.base import Base
from petitbac.db.session import engine
from petitbac.services.validators.web_dictionary import WebDictionaryValidator

_queue_handler_instance: Optional[logging.handlers.QueueHandler] = None # Module-level variable
_api_stats = {"total_requests": 0, "errors_5xx": 0}

async def metrics_middleware(request: Request, call_next):
    _api_stats["total_requests"] += 1
    start_time = time.perf_counter()
    try:
        response = await call_next(request)
    except Exception as e:
        _api_stats["errors_5xx"] += 1
        logger.critical(f"Unhandled exception while serving {request.url.path}: {e}", exc_info=True)
        raise
    if response.status_code >= 500:
        _api_stats["errors_5xx"] += 1
    logger.debug(f"{request.method} {request.url.path} -> {response.status_code} in {(time.perf_counter() - start_time) * 1000:.1f} ms")
    return response

def configure_logging_from_file():
    """Loads logging configuration from the JSON file and identifies the QueueHandler."""
    global _queue_handler_instance
    config_file = pathlib.Path(__file__).parent / "logging_config.json"
    try:
        with open(config_file) as f_in:
            config = json.load(f_in)

        pathlib.Path("logs").mkdir(exist_ok=True)
        logging.config.dictConfig(config)

        # The QueueHandler's listener is started and stopped by the lifespan
        for handler in logging.getLogger().handlers:
            if isinstance(handler, logging.handlers.QueueHandler):
                _queue_handler_instance = handler
                break

        if not _queue_handler_instance:
            logging.getLogger("petitbac.main.logging_setup_check").error(
                "QueueHandler not found in root logger. Off-thread logging will not work as intended."
            )
    except FileNotFoundError:
        print(f"ERROR: Logging configuration file not found at {config_file}. Falling back to basic stdout logging.")
        logging.basicConfig(level=logging.INFO, format='%(levelname)-8s [%(name)s] %(message)s')
        logging.getLogger("petitbac.main.logging_setup_fallback").error("Logging configuration file missing.", exc_info=True)
    except json.JSONDecodeError as e:
        print(f"ERROR: Failed to parse logging configuration file {config_file}: {e}. Falling back to basic stdout logging.")
        logging.basicConfig(level=logging.INFO, format='%(levelname)-8s [%(name)s] %(message)s')
        logging.getLogger("petitbac.main.logging_setup_fallback").error("Logging configuration JSON error.", exc_info=True)
    except (ValueError, OSError) as e:
        # dictConfig rejects the configuration or the log file cannot be opened
        print(f"ERROR: Failed to configure logging from file: {e}. Falling back to basic stdout logging.")
        logging.basicConfig(level=logging.INFO, format='%(levelname)-8s [%(name)s] %(message)s')
        logging.getLogger("petitbac.main.logging_setup_fallback").error("General logging configuration failed.", exc_info=True)


configure_logging_from_file()
logger = logging.getLogger("petitbac.main") # Logger for this module

def create_tables():
    # Only the validated_words cache table is owned by this service
    Base.metadata.create_all(bind=engine)
create_tables()


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Application startup sequence initiated...")
    if _queue_handler_instance and getattr(_queue_handler_instance, "listener", None):
        _queue_handler_instance.listener.start()
        logger.info("Logging QueueListener started successfully via lifespan.")
    else:
        logger.warning("QueueHandler or its listener not found during startup; off-thread logging might not be active.")

    service = get_validation_service()
    logger.info(f"Validation pipeline ready: {service.engine.available_validators()}")
    yield

    logger.info("Application shutdown sequence initiated...")
    for validator in service.engine.validators:
        if isinstance(validator, WebDictionaryValidator):
            validator.close()

    if _queue_handler_instance and getattr(_queue_handler_instance, "listener", None):
        logger.info("Attempting to stop Logging QueueListener...")
        _queue_handler_instance.listener.stop()

app = FastAPI(
    title=settings.PROJECT_NAME,
    openapi_url=f"{settings.API_V1_STR}/openapi.json",
    lifespan=lifespan,
)
app.middleware("http")(metrics_middleware)

app.include_router(validation_router.router, prefix=settings.API_V1_STR + "/validation", tags=["Validation"])
app.include_router(live_router.router, tags=["Live Validation"]) # WebSockets don't use the API prefix

logger.info("--- FastAPI Registered Routes ---")
for route in app.routes:
    if isinstance(route, APIRoute):
        logger.info(f"Path: {route.path}, Methods: {route.methods}, Name: {route.name}")
    elif isinstance(route, APIWebSocketRoute):
        logger.info(f"WebSocket Path: {route.path}, Name: {route.name}")
logger.info("--- End Registered Routes ---")


@app.get(settings.API_V1_STR + "/health", tags=["Health Check"])
async def health_check():
    return {"status": "healthy", "project": settings.PROJECT_NAME, "requests": dict(_api_stats)}
