from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from scriptgen.schemas.profile import EmploymentRecord

DataOrigin = Literal["live", "fallback"]


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class GenerateScriptRequest(CamelModel):
    # Presence is checked by the request validator so both fields share one 400 message
    company_url: str | None = None
    linkedin_url: str | None = None


class LeadInsights(CamelModel):
    name: str | None = None
    current_role: str | None = None
    current_company: str = "Unknown"
    headline: str | None = None
    summary: str | None = None
    skills: list[str] = Field(default_factory=list)
    education: list[str | None] = Field(default_factory=list)
    experience_level: int = 0
    connection_count: int | None = None
    recent_experience: EmploymentRecord | None = None
    languages: list[str | None] = Field(default_factory=list)


class GenerateScriptResponse(CamelModel):
    success: bool = True
    script: str
    lead_insights: LeadInsights
    personalization_points: list[str]
    company_source: Literal["jina"] = "jina"
    profile_source: Literal["crustdata"] = "crustdata"
    company_data_origin: DataOrigin
    profile_data_origin: DataOrigin
    generated_at: datetime


class ErrorResponse(BaseModel):
    error: str
    details: str | None = None
