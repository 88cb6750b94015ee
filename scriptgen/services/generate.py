"""
Orchestrates: validation -> company scrape -> profile enrichment -> script generation -> response.
"""
import logging
from datetime import datetime, timezone
from enum import Enum

from fastapi.concurrency import run_in_threadpool

from scriptgen.schemas.generate import GenerateScriptRequest, GenerateScriptResponse
from scriptgen.services.ai import AIService
from scriptgen.services.company import CompanyContentFetcher
from scriptgen.services.insights import extract_key_insights, generate_personalization_points
from scriptgen.services.profile import ProfileEnricher
from scriptgen.services.validation import validate_request

logger = logging.getLogger(__name__)


class PipelineStage(str, Enum):
    VALIDATING = "validating"
    FETCHING_COMPANY = "fetching_company"
    ENRICHING_PROFILE = "enriching_profile"
    SYNTHESIZING = "synthesizing"
    RESPONDING = "responding"
    FAILED = "failed"


class GenerateScriptService:
    def __init__(
        self,
        company_fetcher: CompanyContentFetcher,
        profile_enricher: ProfileEnricher,
        ai: AIService,
    ) -> None:
        self.company_fetcher = company_fetcher
        self.profile_enricher = profile_enricher
        self.ai = ai
        self.stage = PipelineStage.VALIDATING

    def _enter(self, stage: PipelineStage) -> None:
        logger.info("Pipeline stage %s -> %s", self.stage.value, stage.value)
        self.stage = stage

    async def run(self, body: GenerateScriptRequest) -> GenerateScriptResponse:
        try:
            return await self._run(body)
        except Exception:
            logger.info("Pipeline failed during %s", self.stage.value)
            self._enter(PipelineStage.FAILED)
            raise

    async def _run(self, body: GenerateScriptRequest) -> GenerateScriptResponse:
        # 1) Validate input
        company_url, linkedin_url = validate_request(body.company_url, body.linkedin_url)
        logger.info("Generating script for LinkedIn: %s", linkedin_url)

        # 2) Scrape company website (falls back to canned text)
        self._enter(PipelineStage.FETCHING_COMPANY)
        company = await run_in_threadpool(self.company_fetcher.fetch, company_url)

        # 3) Enrich LinkedIn profile (falls back to a placeholder profile)
        self._enter(PipelineStage.ENRICHING_PROFILE)
        enriched = await run_in_threadpool(self.profile_enricher.enrich, linkedin_url)
        profile = enriched.profile

        insights = extract_key_insights(profile)
        logger.info("Generating script for %s (%s)", insights.name, insights.current_role)

        # 4) Generate script (AI)
        self._enter(PipelineStage.SYNTHESIZING)
        script = await self.ai.generate_script(company.text, profile)

        # 5) Build response
        self._enter(PipelineStage.RESPONDING)
        return GenerateScriptResponse(
            script=script,
            lead_insights=insights,
            personalization_points=generate_personalization_points(profile, company.text),
            company_data_origin=company.origin,
            profile_data_origin=enriched.origin,
            generated_at=datetime.now(timezone.utc),
        )
