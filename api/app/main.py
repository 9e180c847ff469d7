import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.config import settings
from app.models.llm_cloud import load_llm_cloud
from app.routers import health, roast

logger = logging.getLogger("roastme")


@asynccontextmanager
async def lifespan(app: FastAPI):
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    logger.info("RoastMe AI starting up on port %d", settings.api_port)

    app.state.roast_llm = load_llm_cloud()

    yield

    await app.state.roast_llm.client.close()
    logger.info("RoastMe AI shutting down")


API_DESCRIPTION = """
# RoastMe AI

Submit a name, a profession and an optional bio, get roasted by an LLM.

## Levels

| Level | Tone |
|-------|------|
| `soft` | playful teasing |
| `medium` | bold, sarcastic |
| `brutal` | no mercy |

Input written in Hindi or Marathi (Devanagari or Romanized) gets a roast in
the same language and script.
"""

app = FastAPI(
    title="RoastMe AI",
    description=API_DESCRIPTION,
    version="0.1.0",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_tags=[
        {"name": "health", "description": "Server status"},
        {"name": "roast", "description": "Roast generation"},
    ],
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.cors_origins),
    allow_credentials=True,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

# Prometheus metrics
if settings.prometheus_enabled:
    from app.middleware.metrics import setup_metrics

    setup_metrics(app)


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    error = "Endpoint not found" if exc.status_code == 404 else str(exc.detail)
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "error": error},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    logger.info("Rejected malformed request to %s: %s", request.url.path, exc.errors())
    return JSONResponse(
        status_code=400,
        content={"success": False, "error": "Invalid request body"},
    )


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("Server error on %s", request.url.path)
    return JSONResponse(
        status_code=500,
        content={"success": False, "error": "Internal server error"},
    )


# Routers
app.include_router(health.router, tags=["health"])
app.include_router(roast.router, prefix="/api", tags=["roast"])
