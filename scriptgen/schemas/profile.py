from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator


class EmploymentRecord(BaseModel):
    """One employment span as returned by Crustdata; no end_date means current."""

    model_config = ConfigDict(extra="allow")

    employer_name: str | None = None
    employer_linkedin_id: str | None = None
    employer_company_id: int | list[int] | None = None
    employee_title: str | None = None
    employee_description: str | None = None
    employee_location: str | None = None
    start_date: str | None = None
    end_date: str | None = None


class ProfileRecord(BaseModel):
    model_config = ConfigDict(extra="allow")

    linkedin_profile_url: str | None = None
    linkedin_flagship_url: str | None = None
    name: str | None = None
    email: str | None = None
    title: str | None = None
    last_updated: str | None = None
    headline: str | None = None
    summary: str | None = None
    num_of_connections: int | None = None
    skills: str | None = None
    profile_picture_url: str | None = None
    twitter_handle: str | None = None
    languages: list[str | None] | None = None
    all_employers: list[str | None] | None = None
    past_employers: list[EmploymentRecord] | None = None
    current_employers: list[EmploymentRecord] | None = None
    all_employers_company_id: list[Any] | None = None
    all_titles: list[str | None] | None = None
    all_schools: list[str | None] | None = None
    all_degrees: list[str | None] | None = None

    @field_validator("skills", mode="before")
    @classmethod
    def join_skill_list(cls, v):
        # Some enrichment responses carry skills as a list instead of a delimited string
        if isinstance(v, list):
            return ", ".join(str(s) for s in v)
        return v
