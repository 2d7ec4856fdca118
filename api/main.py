from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.concurrency import run_in_threadpool

from api.api.router import api_router
from api.core.config import get_settings
from api.core.dependencies import get_note_store
from api.core.logger import setup_logging

settings = get_settings()
setup_logging(settings.log_level)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler for startup and shutdown.

    Hydrates instructor notes before the first request is served and stops
    pending "saved" timers on shutdown.
    """
    store = app.dependency_overrides.get(get_note_store, get_note_store)()
    # Startup - local cache first, then the remote store when configured
    await run_in_threadpool(store.hydrate)
    yield
    # Shutdown
    store.acknowledgements.shutdown()


app = FastAPI(
    title=settings.app_name,
    description="Instructor guide to active learning strategies with a grounded assistant",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

# CORS configuration for the Streamlit client
app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:8501",  # Local Streamlit development
        "http://127.0.0.1:8501",
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health", tags=["health"])
def health_check():
    """Health check endpoint."""
    return {"status": "ok"}


# Include API routes
app.include_router(api_router, prefix="/api")
