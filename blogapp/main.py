"""Blog Demo - FastAPI app entry point."""
import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI
from fastapi.staticfiles import StaticFiles

from blogapp.core.auth import authenticate_from_session
from blogapp.core.config import BASE_DIR, get_settings
from blogapp.db.base import Base
from blogapp.db.session import engine
from blogapp.routers import blogs, comments, posts, sessions, users

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    Base.metadata.create_all(bind=engine)
    logger.info("Database ready at %s", engine.url.render_as_string(hide_password=True))
    yield


app = FastAPI(
    title=settings.app_name,
    description="Users own blogs, blogs hold posts, posts collect comments",
    lifespan=lifespan,
    # Resolve the session cookie on every request before any route runs
    dependencies=[Depends(authenticate_from_session)],
)

app.mount("/static", StaticFiles(directory=str(BASE_DIR / "static")), name="static")

app.include_router(sessions.router)
app.include_router(users.router)
app.include_router(blogs.router)
app.include_router(posts.router)
app.include_router(comments.router)


@app.get("/health")
def health():
    return {"status": "ok"}
