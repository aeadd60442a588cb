from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from loguru import logger
from sqlalchemy.exc import SQLAlchemyError


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(SQLAlchemyError)
    async def _database_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
        logger.opt(exception=exc).error("Database error on {} {}", request.method, request.url.path)
        return JSONResponse(
            status_code=503,
            content={"detail": "Database unavailable, try again later."},
        )
