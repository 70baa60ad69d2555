from contextlib import asynccontextmanager
from fastapi import FastAPI

from src.adapters.primary.api.routes.workflow import router
from src.adapters.primary.api.routes.templates import router as templates_router
from src.adapters.primary.api.routes.health import router as health_router
from src.adapters.primary.api.routes.metrics import router as metrics_router
from src.shared.config import settings
from src.shared.database import create_tables, engine
from src.shared.redis_client import redis_client
from src.shared.logger import configure_logging, get_logger

# Configure logging early
configure_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.DB_CREATE_TABLES:
        await create_tables()
        logger.info("database_tables_ready")

    logger.info("application_started", version=settings.APP_VERSION)
    yield

    logger.info("application_shutting_down")
    await redis_client.aclose()
    await engine.dispose()
    logger.info("application_shutdown_complete")


app = FastAPI(
    title=settings.APP_NAME,
    description="Workflow builder backend for WhatsApp automations: graph validation, storage and run requests.",
    version=settings.APP_VERSION,
    lifespan=lifespan,
)

# Exceptions
from src.domain.workflow.exceptions import WorkflowException
from src.adapters.primary.api.error_handlers import workflow_exception_handler, general_exception_handler

app.add_exception_handler(WorkflowException, workflow_exception_handler)
app.add_exception_handler(Exception, general_exception_handler)

# Routes
app.include_router(router)
app.include_router(templates_router)
app.include_router(health_router)
app.include_router(metrics_router)
