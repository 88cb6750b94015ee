"""
Render lead insights and talking points into the script-generation prompt.
Missing values render as empty strings so the prompt layout stays stable.
"""
from scriptgen.prompts.templates import SCRIPT_GENERATION_PROMPT
from scriptgen.schemas.generate import LeadInsights


def _text(value) -> str:
    return "" if value is None else str(value)


def build_script_prompt(company_info: str, insights: LeadInsights, personalization_points: list[str]) -> str:
    return SCRIPT_GENERATION_PROMPT.format(
        company_info=company_info,
        name=_text(insights.name),
        current_role=_text(insights.current_role),
        current_company=insights.current_company,
        headline=_text(insights.headline),
        summary=_text(insights.summary),
        skills=", ".join(insights.skills),
        education=", ".join(_text(v) for v in insights.education),
        experience_level=insights.experience_level,
        connection_count=_text(insights.connection_count),
        languages=", ".join(_text(v) for v in insights.languages),
        personalization_points="\n".join(f"- {point}" for point in personalization_points),
    )
