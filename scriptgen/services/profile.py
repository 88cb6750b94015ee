"""
Profile enrichment via Crustdata, with a deterministic placeholder profile on failure.
"""
import logging
import re
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

import pydantic
import requests

from scriptgen.config import Settings
from scriptgen.errors import ConfigurationError, UpstreamFetchFailure
from scriptgen.schemas.generate import DataOrigin
from scriptgen.schemas.profile import EmploymentRecord, ProfileRecord

logger = logging.getLogger(__name__)


ENRICH_FIELDS = (
    "business_email",
    "headline",
    "summary",
    "skills",
    "current_employers",
    "past_employers",
    "all_schools",
    "all_degrees",
    "all_titles",
    "num_of_connections",
    "languages",
    "profile_picture_url",
    "twitter_handle",
)

_SLUG_RE = re.compile(r"linkedin\.com/in/([^/]+)")
_WORD_START_RE = re.compile(r"\b\w")


@dataclass(frozen=True)
class EnrichedProfile:
    profile: ProfileRecord
    origin: DataOrigin


def name_from_profile_url(linkedin_url: str) -> str:
    """'https://linkedin.com/in/jane-doe' -> 'Jane Doe'."""
    m = _SLUG_RE.search(linkedin_url)
    slug = m.group(1) if m else "professional"
    return _WORD_START_RE.sub(lambda w: w.group(0).upper(), slug.replace("-", " "))


def build_fallback_profile(linkedin_url: str, last_updated: datetime | None = None) -> ProfileRecord:
    last_updated = last_updated or datetime.now(timezone.utc)
    return ProfileRecord(
        linkedin_profile_url=linkedin_url,
        linkedin_flagship_url=linkedin_url,
        name=name_from_profile_url(linkedin_url),
        email="contact@example.com",
        title="Technology Professional",
        last_updated=last_updated.isoformat(),
        headline="Technology Professional | Innovation Leader | Digital Transformation Expert",
        summary=(
            "Experienced technology professional with a track record of driving digital "
            "innovation and leading successful technical projects."
        ),
        num_of_connections=1250,
        skills="Software Development, Project Management, Digital Strategy, Technology Leadership, Innovation",
        profile_picture_url="https://example.com/profile.jpg",
        twitter_handle="",
        languages=["English"],
        all_employers=["Current Company", "Previous Corp"],
        past_employers=[
            EmploymentRecord(
                employer_name="Previous Corp",
                employer_linkedin_id="previous-corp",
                employer_company_id=12345,
                employee_title="Senior Developer",
                employee_description="Led development projects and mentored junior developers",
                employee_location="San Francisco, CA",
                start_date="2020-01-01T00:00:00.000Z",
                end_date="2023-06-01T00:00:00.000Z",
            )
        ],
        current_employers=[
            EmploymentRecord(
                employer_name="Current Company",
                employer_linkedin_id="current-company",
                employer_company_id=67890,
                employee_title="Technology Professional",
                employee_description="Leading technology initiatives and driving digital transformation projects.",
                employee_location="San Francisco, CA",
                start_date="2023-07-01T00:00:00.000Z",
            )
        ],
        all_employers_company_id=[12345, 67890],
        all_titles=["Developer", "Senior Developer", "Technology Professional"],
        all_schools=["State University", "Technical Institute"],
        all_degrees=["Bachelor of Computer Science", "Software Engineering Certificate"],
    )


def _profile_from_payload(payload: Any) -> ProfileRecord:
    # The enrich endpoint answers with a list of matches; take the first one
    if isinstance(payload, list):
        if not payload:
            raise UpstreamFetchFailure("Crustdata returned no matching profile")
        payload = payload[0]
    if not isinstance(payload, dict):
        raise UpstreamFetchFailure(f"Unexpected Crustdata payload type: {type(payload).__name__}")
    try:
        return ProfileRecord.model_validate(payload)
    except pydantic.ValidationError as e:
        # Drop only the fields that cannot be read; the rest of the live profile is kept
        unreadable = {err["loc"][0] for err in e.errors() if err["loc"]}
        logger.warning("Ignoring unreadable Crustdata fields: %s", ", ".join(sorted(map(str, unreadable))))
        return ProfileRecord.model_validate({k: v for k, v in payload.items() if k not in unreadable})


class ProfileEnricher:
    def __init__(self, settings: Settings, session: requests.Session | None = None) -> None:
        self.settings = settings
        self.session = session or requests.Session()

    def _enrich(self, linkedin_url: str, api_key: str) -> ProfileRecord:
        url = f"{self.settings.crustdata_base_url.rstrip('/')}/screener/person/enrich"
        try:
            resp = self.session.get(
                url,
                params={"linkedin_profile_url": linkedin_url, "fields": ",".join(ENRICH_FIELDS)},
                headers={
                    "Authorization": f"Token {api_key}",
                    "Content-Type": "application/json",
                },
                timeout=self.settings.request_timeout_seconds,
            )
            resp.raise_for_status()
            payload = resp.json()
        except requests.HTTPError as e:
            raise UpstreamFetchFailure(
                f"Failed to enrich LinkedIn profile: {e.response.status_code} {e.response.reason}"
            ) from e
        except (requests.RequestException, ValueError) as e:
            raise UpstreamFetchFailure(f"Failed to enrich LinkedIn profile: {e}") from e
        return _profile_from_payload(payload)

    def enrich(self, linkedin_url: str) -> EnrichedProfile:
        """Return the Crustdata profile, or a placeholder built from the URL if enrichment fails."""
        api_key = self.settings.crustdata_api_key
        if not api_key:
            raise ConfigurationError("CRUSTDATA_API_KEY is not configured")

        logger.info("Enriching LinkedIn profile: %s", linkedin_url)
        try:
            profile = self._enrich(linkedin_url, api_key)
        except UpstreamFetchFailure as e:
            logger.warning("%s; falling back to placeholder profile for %s", e, linkedin_url)
            return EnrichedProfile(profile=build_fallback_profile(linkedin_url), origin="fallback")

        logger.info("Successfully enriched LinkedIn profile")
        return EnrichedProfile(profile=profile, origin="live")
