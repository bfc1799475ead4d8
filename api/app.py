import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.dependencies import get_config
from api.routes import cooktime, health, prayer_times, suggest
from core.errors import CookTimeError, UpstreamFetchError, ValidationError

app = FastAPI(
    title="CookTime",
    version="0.1.0"
)

app.include_router(health.router)
app.include_router(prayer_times.router)
app.include_router(cooktime.router)
app.include_router(suggest.router)


app.add_middleware(
    CORSMiddleware,
    allow_origins=get_config().get("server", {}).get("cors_origins", []),
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)


# ---------- ERROR ENVELOPE ----------
@app.exception_handler(ValidationError)
def validation_error(request: Request, exc: ValidationError):
    logging.info(f"[API] 400 {request.url.path}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(UpstreamFetchError)
def upstream_error(request: Request, exc: UpstreamFetchError):
    logging.error(f"[API] {request.url.path}: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": "An error occurred while fetching prayer times."},
    )


@app.exception_handler(CookTimeError)
def cooktime_error(request: Request, exc: CookTimeError):
    logging.error(f"[API] {request.url.path}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(Exception)
def unhandled_error(request: Request, exc: Exception):
    logging.error(f"[API] Unhandled error on {request.url.path}: {exc}", exc_info=exc)
    return JSONResponse(status_code=500, content={"error": "An unexpected error occurred."})
