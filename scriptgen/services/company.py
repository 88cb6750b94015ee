"""
Company content: Jina Reader scrape of the company website, with canned fallback text.
"""
import logging
from dataclasses import dataclass
from urllib.parse import quote

import requests

from scriptgen.config import Settings
from scriptgen.errors import ConfigurationError, UpstreamFetchFailure
from scriptgen.schemas.generate import DataOrigin

logger = logging.getLogger(__name__)


DOMU_FALLBACK = """Company: Domu
Industry: AI/Technology
Description: Domu is an AI-powered personalization platform that helps businesses create personalized videos and audio content for lead generation and customer engagement.
Recent Updates: Recently launched new AI-powered features for enhanced personalization and better conversion rates.
Products: AI video generation, personalized audio content, lead conversion tools"""

GENERIC_FALLBACK = """Company: Target Company
Industry: Technology
Description: Innovative technology company focused on digital transformation and customer engagement solutions.
Recent Updates: Expanding their digital presence and implementing new technologies.
Focus: Digital innovation, customer experience, technology solutions"""


@dataclass(frozen=True)
class CompanyContent:
    text: str
    origin: DataOrigin


def fallback_company_info(company_url: str) -> str:
    if "domu.ai" in company_url:
        return DOMU_FALLBACK
    return GENERIC_FALLBACK


class CompanyContentFetcher:
    def __init__(self, settings: Settings, session: requests.Session | None = None) -> None:
        self.settings = settings
        self.session = session or requests.Session()

    def _scrape(self, company_url: str, api_key: str) -> str:
        url = f"{self.settings.jina_base_url.rstrip('/')}/{quote(company_url, safe='')}"
        try:
            resp = self.session.get(
                url,
                headers={"Authorization": f"Bearer {api_key}"},
                timeout=self.settings.request_timeout_seconds,
            )
            resp.raise_for_status()
        except requests.HTTPError as e:
            raise UpstreamFetchFailure(
                f"Failed to scrape website: {e.response.status_code} {e.response.reason}"
            ) from e
        except requests.RequestException as e:
            raise UpstreamFetchFailure(f"Failed to scrape website: {e}") from e
        return resp.text

    def fetch(self, company_url: str) -> CompanyContent:
        """Return the raw scraped text, or fallback text if the scrape fails."""
        api_key = self.settings.jina_api_key
        if not api_key:
            raise ConfigurationError("JINA_API_KEY is not configured")

        logger.info("Scraping website content: %s", company_url)
        try:
            text = self._scrape(company_url, api_key)
        except UpstreamFetchFailure as e:
            logger.warning("%s; falling back to canned company data for %s", e, company_url)
            return CompanyContent(text=fallback_company_info(company_url), origin="fallback")

        logger.info("Successfully scraped website content (%d chars)", len(text))
        return CompanyContent(text=text, origin="live")
