from fastapi import FastAPI

from src.setup.api_config import ApiSettings, get_api_settings
from src.tracker.presentation.errors import register_exception_handlers
from src.tracker.presentation.statistics_routes import router as statistics_router
from src.tracker.presentation.task_routes import router as task_router


def create_app(settings: ApiSettings | None = None) -> FastAPI:
    if settings is None:
        settings = get_api_settings()
    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="Task tracking API with aggregate statistics",
    )
    register_exception_handlers(app)
    app.include_router(task_router)
    app.include_router(statistics_router)
    return app
