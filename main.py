import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError

from scriptgen.api.routes import error_response, router
from scriptgen.config import get_settings

logger = logging.getLogger("scriptgen")


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Application starting up (model: %s)", settings.openai_model)

    # Credentials are read again per request; this only reports what is missing
    for name, present in settings.configured_credentials().items():
        if present:
            logger.info("%s found in environment", name)
        else:
            logger.warning("%s NOT found in environment; calls needing it will fail", name)

    yield


app = FastAPI(
    title="Outreach Script API",
    description="Generate personalized outreach video scripts from a company URL and a LinkedIn profile.",
    version="0.1.0",
    lifespan=lifespan,
)
app.include_router(router)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    return error_response(400, "Invalid request body")


@app.get("/health")
async def health():
    return {"status": "ok"}
