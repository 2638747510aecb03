"""Attendance portal - FastAPI entrypoint."""
import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from pymongo.errors import ServerSelectionTimeoutError

from attendance_portal import db
from attendance_portal.api import attendance, classes, students, teachers
from attendance_portal.api.deps import Context
from attendance_portal.config import Settings, get_settings
from attendance_portal.errors import register_error_handlers

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        ctx = db.connect(settings)
        try:
            await db.init_store(ctx)
        except ServerSelectionTimeoutError as e:
            logger.error("MongoDB is not reachable at the configured MONGO_URI")
            db.close(ctx)
            raise RuntimeError("MongoDB connection failed. Check MONGO_URI and that MongoDB is running.") from e
        app.state.context = ctx
        logger.info("Connected to MongoDB database %r", settings.mongo_db_name)
        yield
        db.close(ctx)

    app = FastAPI(
        title=settings.app_name,
        description="Students, teachers, classes and attendance marks backed by MongoDB",
        version="0.1.0",
        debug=settings.debug,
        lifespan=lifespan,
    )

    register_error_handlers(app)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # API routes
    app.include_router(students.router, prefix="/students", tags=["Students"])
    app.include_router(teachers.router, prefix="/teacher", tags=["Teachers"])
    app.include_router(classes.router, prefix="/classes", tags=["Classes"])
    app.include_router(attendance.router, prefix="/attendance", tags=["Attendance"])

    @app.get("/", response_class=PlainTextResponse)
    async def root():
        return "Attendance portal backend is running"

    @app.get("/health")
    async def health(ctx: Context):
        await db.ping(ctx)
        return {"status": "ok", "app": settings.app_name}

    return app


app = create_app()


def run() -> None:
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
