import logging
import time
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import settings
from app.core.errors import register_exception_handlers
from app.core.logging_config import setup_logging
from app.db.session import Base, engine
from app.db.models import kanban  # noqa: F401  registers the tables on Base

from app.api.boards.routes import router as boards_router
from app.api.tasks.routes import router as tasks_router
from app.api.columns.routes import router as columns_router

setup_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

STARTED_AT = time.monotonic()


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.AUTO_CREATE_TABLES:
        Base.metadata.create_all(bind=engine)
    logger.info("Kanban API started (env=%s, prefix=%s)", settings.ENV, settings.API_PREFIX)
    yield


app = FastAPI(title="Kanban Board API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Routers
app.include_router(boards_router, prefix=f"{settings.API_PREFIX}/boards", tags=["Boards"])
app.include_router(tasks_router, prefix=f"{settings.API_PREFIX}/tasks", tags=["Tasks"])
app.include_router(columns_router, prefix=f"{settings.API_PREFIX}/columns", tags=["Columns"])


@app.get("/health")
def health():
    return {
        "status": "OK",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "uptime": round(time.monotonic() - STARTED_AT, 3),
    }


@app.get("/ping")
def ping():
    return {"message": "pong"}
