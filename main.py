import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from starlette.middleware.cors import CORSMiddleware

from core.config_loader import settings
from core.database import SessionLocal, init_db
from core.logging_config import setup_logging
from employee.repository import EmployeeRepository
from employee.router import employee_router
from employee.service import seed_sample_employee
import models_bootstrap

setup_logging(settings.LOG_LEVEL, settings.JSON_LOGS)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting %s", settings.PROJECT_NAME)
    if settings.CREATE_TABLES_ON_STARTUP:
        init_db()
    if settings.SEED_SAMPLE_EMPLOYEE:
        with SessionLocal() as db:
            seed_sample_employee(EmployeeRepository(db))
    yield
    logger.info("Shutting down %s", settings.PROJECT_NAME)


openapi_tags = [
    {
        "name": "Employees",
        "description": "Employee CRUD and salary calculation",
    },
    {
        "name": "Health Checks",
        "description": "Application health checks",
    }
]

app = FastAPI(title=settings.PROJECT_NAME, openapi_tags=openapi_tags, lifespan=lifespan)

if settings.BACKEND_CORS_ORIGINS:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[
            str(origin).strip("/") for origin in settings.BACKEND_CORS_ORIGINS
        ],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

app.include_router(employee_router, prefix=settings.API_PREFIX)


@app.get("/health", tags=['Health Checks'])
def read_root():
    return {"health": "true"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host="0.0.0.0", port=8000, log_level=settings.LOG_LEVEL.lower())
