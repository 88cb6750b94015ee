"""
Pure derivations from an enriched profile: lead insights and personalization talking points.
"""
from scriptgen.schemas.generate import LeadInsights
from scriptgen.schemas.profile import ProfileRecord

NETWORK_SIZE_THRESHOLD = 500


def split_skills(skills: str | None) -> list[str]:
    # Positions are kept: "A,,B" splits to ["A", "", "B"] so slices match the source order
    if skills is None:
        return []
    return [s.strip() for s in skills.split(",")]


def extract_key_insights(profile: ProfileRecord) -> LeadInsights:
    current = profile.current_employers or []
    recent = current[0] if current else None
    return LeadInsights(
        name=profile.name,
        current_role=profile.title,
        current_company=(recent.employer_name if recent else None) or "Unknown",
        headline=profile.headline,
        summary=profile.summary,
        skills=split_skills(profile.skills)[:5],
        education=(profile.all_schools or [])[:2],
        experience_level=len(profile.all_titles or []),
        connection_count=profile.num_of_connections,
        recent_experience=recent,
        languages=profile.languages or [],
    )


def generate_personalization_points(profile: ProfileRecord, company_info: str) -> list[str]:
    # company_info is part of the call signature but does not feed any point yet
    points = []
    titles = profile.all_titles or []
    if len(titles) > 1:
        points.append(f"Career growth from {titles[0]} to {profile.title}")

    current = profile.current_employers or []
    if current:
        points.append(f"Current role at {current[0].employer_name}")

    if profile.skills:
        points.append(f"Expertise in {', '.join(split_skills(profile.skills)[:3])}")

    if profile.all_schools:
        points.append(f"Educational background from {profile.all_schools[0]}")

    connections = profile.num_of_connections or 0
    if connections > NETWORK_SIZE_THRESHOLD:
        points.append(f"Well-connected professional with {connections}+ connections")

    return points
