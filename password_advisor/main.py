import logging
from contextlib import asynccontextmanager
from urllib.parse import unquote_to_bytes

import uvicorn
from fastapi import FastAPI, Request, Response

from password_advisor import __version__
from password_advisor.core.config import settings
from password_advisor.core.logging_config import setup_logging
from password_advisor.schemas.analysis import AnalysisResponse
from password_advisor.services.analyzer import (
    EMPTY_PASSWORD_SUGGESTION,
    NOT_AVAILABLE,
    analyze_password,
)

setup_logging()
logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Server running on {settings.LISTEN_URL}")
    yield
    logger.info("Server shutting down")

app = FastAPI(
    title="Password Strength Advisor",
    description="Rates a candidate password and suggests how to make it stronger",
    version=__version__,
    lifespan=lifespan
)


@app.middleware("http")
async def add_cors_headers(request: Request, call_next):
    response = await call_next(request)
    for name, value in CORS_HEADERS.items():
        response.headers[name] = value
    return response


@app.options("/analyze")
async def analyze_preflight():
    return Response(status_code=200)


def form_password(body: bytes) -> bytes:
    """
    Pull the first ``password`` value out of an urlencoded body.

    Percent-escapes are decoded straight to bytes, so the analyzer sees
    exactly the octets the client sent, valid UTF-8 or not.
    """
    for pair in body.split(b"&"):
        name, _, value = pair.partition(b"=")
        if unquote_to_bytes(name.replace(b"+", b" ")) == b"password":
            return unquote_to_bytes(value.replace(b"+", b" "))
    return b""


@app.post("/analyze", response_model=AnalysisResponse)
async def analyze(request: Request):
    content_type = request.headers.get("content-type", "")
    if content_type.startswith("multipart/form-data"):
        form = await request.form()
        value = form.get("password")
        password = value if isinstance(value, str) else ""
    else:
        password = form_password(await request.body())

    if not password:
        return AnalysisResponse(strength=NOT_AVAILABLE, suggestion=EMPTY_PASSWORD_SUGGESTION)

    result = analyze_password(password)
    logger.debug(f"Analyzed password: strength={result.strength} score={result.score}")
    return AnalysisResponse.from_result(result)


@app.get("/health")
async def health_check():
    return {
        "status": "healthy",
        "service": "password-advisor",
        "version": __version__
    }


def run():
    # lifespan emits the startup line
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level="warning")


if __name__ == "__main__":
    run()
