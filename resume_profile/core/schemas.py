from pydantic import BaseModel, ConfigDict, Field
from typing import List


class RawDocument(BaseModel):
    """Extracted text plus its trimmed, non-empty lines."""
    model_config = ConfigDict(frozen=True)

    text: str = ""
    lines: List[str] = Field(default_factory=list)


class ProfileLinks(BaseModel):
    linkedin: str = ""
    github: str = ""
    portfolio: str = ""


class ContactInfo(BaseModel):
    name: str = ""
    email: str = Field(default="", description="Pattern-validated only, not checked for deliverability")
    phone: str = ""
    links: ProfileLinks = Field(default_factory=ProfileLinks)


class ExperienceEntry(BaseModel):
    """Work history entry in candidate profile."""
    model_config = ConfigDict(populate_by_name=True)

    title: str = ""
    company: str = ""
    period: str = ""  # MM/YYYY - Present, MM/YYYY - MM/YYYY
    bullets: List[str] = Field(default_factory=list, alias="desc")


class EducationEntry(BaseModel):
    """Education entry in candidate profile."""
    degree: str = ""  # B.Tech, Bachelor of Science, M.S., etc.
    school: str = ""  # University, College, Institute name
    year: str = ""  # YYYY
    location: str = ""  # City, State


class ProjectEntry(BaseModel):
    """Project entry in candidate profile."""
    model_config = ConfigDict(populate_by_name=True)

    name: str
    tech_stack: str = Field(default="", alias="techStack")
    bullets: List[str] = Field(default_factory=list, alias="description")


class ResumeProfile(BaseModel):
    info: ContactInfo = Field(default_factory=ContactInfo)
    skills: List[str] = Field(default_factory=list)
    experience: List[ExperienceEntry] = Field(default_factory=list)
    education: List[EducationEntry] = Field(default_factory=list)
    projects: List[ProjectEntry] = Field(default_factory=list)
    summary: str = ""

    def to_json_dict(self) -> dict:
        """Plain dict using the public key names (desc, description, techStack)."""
        return self.model_dump(by_alias=True)


class ParseTextRequest(BaseModel):
    text: str = Field(..., description="Plain text already extracted from the resume document")
    summary: str = Field(default="", description="Existing summary to carry over when re-parsing")
