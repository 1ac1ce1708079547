from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from loguru import logger
from framework.config import RepoBackend, Settings, settings
from framework.database.manager import DatabaseManager
from framework.database.migrations import apply_migrations
from framework.response import ResponseModel
from framework.middleware.logging_md import LoggingMiddleware
from framework.logging.logger import LogConfig
from framework.exceptions.handler import BusinessException, global_exception_handler
from apps.commands.api.router import router as commands_router
from apps.commands.memory_repository import CommandStore


@asynccontextmanager
async def lifespan(app: FastAPI):
    app_settings: Settings = app.state.settings
    logger.info(f"Starting {app_settings.APP_NAME} with '{app_settings.COMMANDER_REPO.value}' repository")

    if app_settings.COMMANDER_REPO != RepoBackend.SQL:
        yield
        return

    manager = DatabaseManager.get_instance(app_settings)
    try:
        await manager.sql.connect()
        # Schema must be at head before the first request is served
        if app_settings.MIGRATE_ON_STARTUP:
            await apply_migrations(manager.sql.engine)
        yield
    finally:
        await DatabaseManager.shutdown()


def create_app(app_settings: Settings = settings) -> FastAPI:
    """Build the application; the repository backend is fixed here for the process lifetime."""
    # Initialize logging configuration
    LogConfig.setup_logging(level="DEBUG" if app_settings.DEBUG else "INFO")

    app = FastAPI(
        title=app_settings.APP_NAME,
        description=app_settings.APP_DESCRIPTION,
        version=app_settings.APP_VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.settings = app_settings
    app.state.repo_backend = app_settings.COMMANDER_REPO
    app.state.command_store = CommandStore()

    # Register global exception handlers
    app.add_exception_handler(BusinessException, global_exception_handler)
    app.add_exception_handler(RequestValidationError, global_exception_handler)
    app.add_exception_handler(Exception, global_exception_handler)

    app.add_middleware(LoggingMiddleware)

    app.include_router(
        commands_router,
        prefix=app_settings.API_COMMANDS_PREFIX,
        tags=["Commands"]
    )

    @app.get("/health", tags=["Health"])
    async def health(request: Request):
        return ResponseModel.success(data={
            "app": app_settings.APP_NAME,
            "version": app_settings.APP_VERSION,
            "repository": request.app.state.repo_backend.value,
        })

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
