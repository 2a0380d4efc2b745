from __future__ import annotations

import logging
import sqlite3
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from config.settings import get_settings
from database import create_database
from routers.student import router as student_router
from store import StudentStore


PORT = 8080

settings = get_settings()

logging.basicConfig(level=settings.log_level, format="[%(asctime)s] %(levelname)s - %(message)s")
logger = logging.getLogger("students")


def create_app(db_path: Optional[str] = None) -> FastAPI:
    db_path = db_path or settings.database_path

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        try:
            app.state.db = create_database(db_path)
        except sqlite3.Error:
            logger.exception("Could not open student database at %s", db_path)
            raise
        try:
            yield
        finally:
            app.state.db.close()

    app = FastAPI(title="Student Service", version="1.0.0", lifespan=lifespan)
    app.state.store = StudentStore()

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        # A malformed id is reported before a malformed body
        if any(err.get("loc", ())[:1] == ("path",) for err in exc.errors()):
            message = "Invalid ID"
        else:
            message = "Invalid request body"
        return PlainTextResponse(message, status_code=status.HTTP_400_BAD_REQUEST)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return PlainTextResponse(str(exc.detail), status_code=exc.status_code, headers=exc.headers)

    app.include_router(student_router)
    return app


app = create_app()


if __name__ == "__main__":
    logger.info("Server starting on :%d", PORT)
    uvicorn.run(app, host="0.0.0.0", port=PORT)
