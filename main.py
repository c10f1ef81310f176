import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from core.health_check import health_check
from core.log import logger
from core.store import RecordStore, StorageError
from models import engine
from routes.city import router as city_router

from settings import CORS_ALLOW_ORIGINS, LOG_LEVEL

logger.setLevel(getattr(logging, LOG_LEVEL.upper(), logging.INFO))


@asynccontextmanager
async def lifespan(app: FastAPI):
    store = RecordStore(engine)
    try:
        health_check(store)
    except StorageError as e:
        logger.error(f"Database Error: {e}")
        store.close()
        raise SystemExit(1)

    app.state.store = store
    yield
    logger.info("closing database")
    store.close()


app = FastAPI(title="City API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(city_router)


@app.exception_handler(ValidationError)
async def pydantic_validation_exception_handler(request: Request, exc: ValidationError):
    error_details = []
    for error in exc.errors():
        field = error["loc"][0] if error["loc"] else "general"
        message = error["msg"]
        error_details.append({"field": field, "message": message})

    return JSONResponse(
        status_code=422,
        content={
            "message": "Validation error on request parameters.",
            "errors": error_details,
        },
    )


@app.get("/health")
def health():
    return {"status": "ok"}
