from scriptgen.errors import ValidationError

LINKEDIN_PROFILE_MARKER = "linkedin.com/in/"


def validate_request(company_url: str | None, linkedin_url: str | None) -> tuple[str, str]:
    """Check both URLs are present and the profile URL points at a LinkedIn profile.

    Only empty or missing values count as absent; the URLs are returned unchanged.
    """
    if not company_url or not linkedin_url:
        raise ValidationError("Both companyUrl and linkedinUrl are required")
    if LINKEDIN_PROFILE_MARKER not in linkedin_url:
        raise ValidationError("Invalid LinkedIn profile URL format")
    return company_url, linkedin_url
