"""
AI service: outreach script generation with token tracking and error handling.
"""
import logging

from openai import AsyncOpenAI
from openai import APIError as OpenAIAPIError

from scriptgen.config import Settings
from scriptgen.errors import ConfigurationError, GenerationError
from scriptgen.prompts import SCRIPT_SYSTEM_PROMPT, build_script_prompt
from scriptgen.schemas.profile import ProfileRecord
from scriptgen.services.insights import extract_key_insights, generate_personalization_points

logger = logging.getLogger(__name__)


# Approximate cost per 1K tokens (USD) for gpt-4o
INPUT_COST_PER_1K = 0.0025
OUTPUT_COST_PER_1K = 0.01

EMPTY_SCRIPT_SENTINEL = "Failed to generate script"


def _estimate_cost(input_tokens: int, output_tokens: int) -> float:
    return (input_tokens / 1000.0) * INPUT_COST_PER_1K + (output_tokens / 1000.0) * OUTPUT_COST_PER_1K


def build_openai_client(settings: Settings) -> AsyncOpenAI | None:
    """Client for the completion service, or None when no key is configured."""
    if not settings.openai_api_key:
        return None
    # One attempt per request: the SDK's built-in retries are switched off
    return AsyncOpenAI(
        api_key=settings.openai_api_key,
        timeout=settings.request_timeout_seconds,
        max_retries=0,
    )


async def _chat(
    client: AsyncOpenAI,
    system: str,
    user: str,
    model: str,
    max_tokens: int,
    temperature: float,
) -> tuple[str | None, int, int]:
    """Call OpenAI chat, return the first message content, input_tokens, output_tokens."""
    resp = await client.chat.completions.create(
        model=model,
        messages=[
            {"role": "system", "content": system},
            {"role": "user", "content": user},
        ],
        max_tokens=max_tokens,
        temperature=temperature,
    )
    content = resp.choices[0].message.content if resp.choices else None
    usage = getattr(resp, "usage", None)
    input_tokens = (usage.prompt_tokens or 0) if usage else 0
    output_tokens = (usage.completion_tokens or 0) if usage else 0
    return content, input_tokens, output_tokens


class AIService:
    def __init__(self, settings: Settings, client: AsyncOpenAI | None = None) -> None:
        self.settings = settings
        self._client = client

    def _get_client(self) -> AsyncOpenAI:
        if self._client is None:
            if not self.settings.openai_api_key:
                raise ConfigurationError("OPENAI_API_KEY is not configured")
            self._client = build_openai_client(self.settings)
        return self._client

    async def generate_script(self, company_info: str, profile: ProfileRecord) -> str:
        """Return the model's script verbatim; raises GenerationError if the call fails."""
        insights = extract_key_insights(profile)
        points = generate_personalization_points(profile, company_info)
        prompt = build_script_prompt(company_info, insights, points)

        client = self._get_client()
        try:
            content, inp, out = await _chat(
                client,
                SCRIPT_SYSTEM_PROMPT,
                prompt,
                model=self.settings.openai_model,
                max_tokens=self.settings.openai_max_tokens,
                temperature=self.settings.openai_temperature,
            )
        except OpenAIAPIError as e:
            logger.exception("OpenAI API error during script generation: %s", e)
            raise GenerationError("Failed to generate script with AI") from e

        logger.info(
            "Script generated with %s (input_tokens=%d, output_tokens=%d, est_cost_usd=%.5f)",
            self.settings.openai_model,
            inp,
            out,
            _estimate_cost(inp, out),
        )
        return content or EMPTY_SCRIPT_SENTINEL
