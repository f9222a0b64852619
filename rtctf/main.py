import asyncio
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from rtctf.core.config import settings
from rtctf.core.security import apply_security_headers
from rtctf.pipeline import enhancement_metrics_tracker

logging.getLogger("rtctf").setLevel(settings.log_level.upper())

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.enhancement_configured:
        logger.info("AI enhancement enabled (model=%s)", settings.enhancement_model)
    else:
        logger.info("AI enhancement disabled: no credential for %s", settings.enhancement_model)

    # Start rate-limit sweep
    sweep_task = None
    if settings.rate_limit_sweep_interval_seconds > 0:
        from rtctf.scheduling.cleanup import start_rate_limit_sweeper
        from rtctf.services.rate_limiter import rate_limiter

        sweep_task = asyncio.create_task(
            start_rate_limit_sweeper(rate_limiter, settings.rate_limit_sweep_interval_seconds)
        )

    yield

    # Shutdown
    if sweep_task is not None:
        sweep_task.cancel()


app = FastAPI(
    title="RTCTF Transformer",
    description="Turns free-form text into structured RTCTF prompts for LLMs",
    version="2.1.0",
    lifespan=lifespan,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=False,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)


@app.middleware("http")
async def security_headers(request: Request, call_next):
    response = await call_next(request)
    return apply_security_headers(response)


# Exception handlers
from rtctf.core.exceptions import register_exception_handlers  # noqa: E402

register_exception_handlers(app)

# Routers
from rtctf.api.v1.rtctf import router as rtctf_router  # noqa: E402

app.include_router(rtctf_router)


@app.get("/api/health")
async def health():
    return {"status": "ok", "enhancement": enhancement_metrics_tracker.snapshot()}
