from fastapi import APIRouter
from api.api.routes import strategies, notes, assistant

api_router = APIRouter()

# Include all route modules
api_router.include_router(strategies.router, prefix="/strategies", tags=["strategies"])
api_router.include_router(notes.router, prefix="/notes", tags=["notes"])
api_router.include_router(assistant.router, prefix="/assistant", tags=["assistant"])
