from contextlib import asynccontextmanager
import logging

from fastapi.responses import JSONResponse
import uvicorn
from fastapi import FastAPI, Request
from sqlmodel import Session
from api.api_v1.api import api_router
from starlette.middleware.cors import CORSMiddleware

from core.config import settings
from core.db import create_db_and_tables, engine, init_db
from core.exceptions import PartnerLimitError
from log import setup_logging_to_console, setup_logging_to_file, setup_logging_to_seq

logger = logging.getLogger(__name__)


def setup_logging():
    level = logging.getLevelName(settings.LOG_LEVEL)
    logging.getLogger().setLevel(level)
    if settings.SEQ_SERVER_URL:
        setup_logging_to_seq(
            settings.SEQ_SERVER_URL, settings.SEQ_SERVER_API_KEY, level=level
        )
    else:
        setup_logging_to_console(level)
    if settings.LOG_TO_FILE:
        setup_logging_to_file("promocode_factory", level)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    create_db_and_tables()
    if settings.SEED_DATA:
        with Session(engine) as session:
            init_db(session)
    logger.info("%s started (%s)", settings.PROJECT_NAME, settings.ENVIRONMENT_NAME)
    yield


app = FastAPI(
    title=settings.PROJECT_NAME,
    openapi_url=f"{settings.API_V1_STR}/openapi.json",
    lifespan=lifespan,
)

# Set all CORS enabled origins
if settings.BACKEND_CORS_ORIGINS:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.BACKEND_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


@app.exception_handler(PartnerLimitError)
async def partner_limit_exception_handler(request: Request, exc: PartnerLimitError):
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error": exc.error,
            "detail": exc.detail,
        },
    )


@app.exception_handler(Exception)
async def exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content={"error": str(exc)},
    )


app.include_router(api_router, prefix=settings.API_V1_STR)


if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8001)
