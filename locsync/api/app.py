"""FastAPI app, CORS, and route registration."""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from locsync.config import LOG_FORMAT, LOG_LEVEL, WEB_ORIGINS, ensure_data_dir

logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)

from locsync.api.state import AppState, get_state

# Import routes after state to avoid circular imports
from locsync.api.routes import collapse, dataset, records

__all__ = ["app", "AppState", "get_state"]

_state = get_state()


@asynccontextmanager
async def lifespan(app: FastAPI):
    ensure_data_dir()
    if _state.restore():
        logging.getLogger(__name__).info("Resumed editing session from stored snapshot")
    yield


app = FastAPI(
    title="Localized Content Sync API",
    description="Keeps per-locale copies of the content records in step for the browser editor",
    lifespan=lifespan,
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=WEB_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(dataset.router, prefix="/api/dataset", tags=["dataset"])
app.include_router(records.router, prefix="/api/records", tags=["records"])
app.include_router(collapse.router, prefix="/api/collapse", tags=["collapse"])
