import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from talent.config import settings
from talent.database import close_db, engine, init_db, session_scope
from talent.handlers import register_exception_handlers
from talent.health import health_report
from talent.routers import jobs, recruiters
from talent.services.seed import seed_database

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger("talent")


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Starting {settings.app_name}")
    await init_db()
    if settings.seed_on_startup:
        async with session_scope() as session:
            await seed_database(session)
    yield
    logger.info(f"Shutting down {settings.app_name}")
    await close_db()


app = FastAPI(
    title=settings.app_name,
    description="Companies, recruiters and jobs with hypermedia links",
    version="0.1.0",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.frontend_cors_origin],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(jobs.router)
app.include_router(recruiters.router)


@app.get("/")
async def root():
    return {"message": "Talent API - Ready"}


@app.get("/health")
async def health_check():
    """Database and random user API reachability."""
    return await health_report(engine, settings.random_user_api_url)


if __name__ == "__main__":
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=settings.debug)
