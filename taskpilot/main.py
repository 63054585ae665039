from fastapi import FastAPI
from taskpilot.core.config import settings
from taskpilot.core.database import engine, Base
from taskpilot.core.logging_setup import setup_logging
from taskpilot.models import user, task  # noqa: F401 (enregistre les tables)
from taskpilot.routers import health, auth, tasks, intake

setup_logging(settings.LOG_LEVEL)

# Init DB
Base.metadata.create_all(bind=engine)

app = FastAPI(
    title="TaskPilot API",
    version="0.1.0"
)

# Routes
app.include_router(health.router, prefix="/health")
app.include_router(auth.router)
app.include_router(tasks.router)
app.include_router(intake.router)
