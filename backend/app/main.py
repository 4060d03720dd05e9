import logging
from datetime import datetime, timezone

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from app.api.users import router as users_router
from app.api.entries import router as entries_router
from app.api.goals import router as goals_router
from app.api.progress import router as progress_router
from app.db import Base, engine
from app.models.user import User  # noqa: F401  (import ensures table is registered)
from app.models.weight_entry import WeightEntry  # noqa: F401
from app.models.weight_goal import WeightGoal  # noqa: F401
from app.core.config import settings

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(title="Weight Tracker")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Create DB tables (users, entries, goals) on startup
Base.metadata.create_all(bind=engine)
logger.info("Database ready at %s", engine.url.render_as_string(hide_password=True))

app.include_router(users_router)
app.include_router(entries_router)
app.include_router(goals_router)
app.include_router(progress_router)


@app.get("/")
def root():
    return {"message": "Weight tracker backend is running"}


@app.get("/health")
def health():
    return {"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat()}
