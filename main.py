from contextlib import asynccontextmanager
from fastapi import FastAPI
from framework.config import settings
from framework.database.manager import DatabaseManager
from framework.exceptions.handler import register_exception_handlers
from framework.logging.logger import LogConfig, get_logger
from framework.middleware.logging_md import LoggingMiddleware
from framework.response import ResponseModel
from apps.departments.api.router import router as department_router

LogConfig.setup_logging()
logger = get_logger("main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    manager = DatabaseManager.get_instance()
    await manager.startup()
    logger.info(f"{settings.APP_NAME} started ({settings.APP_ENV})")
    yield
    await manager.shutdown()
    logger.info(f"{settings.APP_NAME} stopped")


app = FastAPI(
    title=settings.APP_NAME,
    description=settings.APP_DESCRIPTION,
    version=settings.APP_VERSION,
    lifespan=lifespan,
)

register_exception_handlers(app)
app.add_middleware(LoggingMiddleware)

app.include_router(
    department_router,
    prefix=settings.API_V1_DEPARTMENTS_PREFIX,
    tags=["Departments"]
)


@app.get("/health")
async def health():
    return ResponseModel.success(data={"status": "ok"})


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
