import logging
from collections.abc import AsyncIterator, Iterator

import requests
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from openai import AsyncOpenAI

from scriptgen.config import Settings, get_settings
from scriptgen.errors import ConfigurationError, ValidationError
from scriptgen.schemas.generate import ErrorResponse, GenerateScriptRequest, GenerateScriptResponse
from scriptgen.services.ai import AIService, build_openai_client
from scriptgen.services.company import CompanyContentFetcher
from scriptgen.services.generate import GenerateScriptService
from scriptgen.services.profile import ProfileEnricher

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["api"])

GENERATION_FAILED = "Failed to generate script"


def get_http_session() -> Iterator[requests.Session]:
    session = requests.Session()
    try:
        yield session
    finally:
        session.close()


async def get_openai_client(settings: Settings = Depends(get_settings)) -> AsyncIterator[AsyncOpenAI | None]:
    client = build_openai_client(settings)
    try:
        yield client
    finally:
        if client is not None:
            await client.close()


def get_generate_service(
    settings: Settings = Depends(get_settings),
    session: requests.Session = Depends(get_http_session),
    openai_client: AsyncOpenAI | None = Depends(get_openai_client),
) -> GenerateScriptService:
    return GenerateScriptService(
        company_fetcher=CompanyContentFetcher(settings, session),
        profile_enricher=ProfileEnricher(settings, session),
        ai=AIService(settings, openai_client),
    )


def error_response(status_code: int, error: str, details: str | None = None) -> JSONResponse:
    body = ErrorResponse(error=error, details=details)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


@router.post(
    "/generate-script",
    response_model=GenerateScriptResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def generate_script(
    body: GenerateScriptRequest,
    service: GenerateScriptService = Depends(get_generate_service),
):
    """Generate a personalized outreach video script for a LinkedIn lead."""
    try:
        return await service.run(body)
    except ValidationError as e:
        return error_response(400, str(e))
    except ConfigurationError as e:
        logger.error("Configuration error: %s", e)
        return error_response(500, GENERATION_FAILED, "Service is not configured")
    except Exception as e:
        logger.exception("API error")
        return error_response(500, GENERATION_FAILED, str(e) or "Unknown error")
