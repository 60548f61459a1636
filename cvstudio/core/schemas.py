from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional
import uuid


def make_id() -> str:
    """Collision-resistant identifier for a profile entry. Never reused."""
    return uuid.uuid4().hex


class ContactInfo(BaseModel):
    full_name: str = ""
    role: str = ""  # Target role shown under the name
    email: str = ""
    phone: str = ""
    location: str = ""
    linkedin: str = ""
    website: str = ""


class ExperienceEntry(BaseModel):
    id: str = Field(default_factory=make_id)
    role: str = ""
    company: str = ""
    location: str = ""
    start: str = ""  # Free-form date token, validated only by date_parser
    end: str = ""
    bullets: List[str] = Field(default_factory=lambda: [""])


class EducationEntry(BaseModel):
    id: str = Field(default_factory=make_id)
    school: str = ""
    degree: str = ""
    location: str = ""
    start: str = ""
    end: str = ""
    details: List[str] = Field(default_factory=lambda: [""])


class ProjectEntry(BaseModel):
    id: str = Field(default_factory=make_id)
    name: str = ""
    link: str = ""
    description: str = ""
    bullets: List[str] = Field(default_factory=lambda: [""])


class CertificationEntry(BaseModel):
    id: str = Field(default_factory=make_id)
    name: str = ""
    issuer: str = ""
    year: str = ""


class LanguageEntry(BaseModel):
    id: str = Field(default_factory=make_id)
    name: str = ""
    level: str = ""


class CustomSection(BaseModel):
    id: str = Field(default_factory=make_id)
    title: str = "Custom Section"
    items: List[str] = Field(default_factory=lambda: [""])


class Profile(BaseModel):
    """
    The editable resume record.

    A fresh Profile() carries one blank entry per collection so a form can
    render it straight away. Order in every list is display order.
    """
    contact: ContactInfo = Field(default_factory=ContactInfo)
    summary: str = ""
    skills: List[str] = Field(default_factory=lambda: [""])
    experiences: List[ExperienceEntry] = Field(default_factory=lambda: [ExperienceEntry()])
    education: List[EducationEntry] = Field(default_factory=lambda: [EducationEntry()])
    projects: List[ProjectEntry] = Field(default_factory=lambda: [ProjectEntry()])
    certifications: List[CertificationEntry] = Field(default_factory=lambda: [CertificationEntry()])
    languages: List[LanguageEntry] = Field(default_factory=lambda: [LanguageEntry()])
    custom_sections: List[CustomSection] = Field(default_factory=list)
    image_data_url: str = Field(default="", description="Opaque encoded image reference")


class SectionGuidance(BaseModel):
    model_config = ConfigDict(frozen=True)

    must: tuple[str, ...] = Field(..., description="Sections a recruiter in this field expects")
    good: tuple[str, ...] = Field(default=(), description="Sections that strengthen the CV")


class TemplateOption(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: str
    layout: str = "two-left"


class UploadRecord(BaseModel):
    name: str
    content_type: Optional[str] = None


class SessionState(BaseModel):
    id: str = Field(default_factory=make_id)
    profile: Profile = Field(default_factory=Profile)
    template_id: str = "classic"
    job_field: str = "General"
    source_text: str = Field(default="", description="Accumulated raw text of every parsed upload")
    cv: Optional[UploadRecord] = None
    supporting: List[UploadRecord] = Field(default_factory=list)
    status: str = ""


class ParseResponse(BaseModel):
    profile: Profile
    red_flags: List[str] = Field(default_factory=list)
    status: str = ""
    warnings: List[str] = Field(default_factory=list)


class RedFlagRequest(BaseModel):
    profile: Profile
    job_field: Optional[str] = None


class RedFlagResponse(BaseModel):
    job_field: str
    red_flags: List[str] = Field(default_factory=list)


class SummaryUpdate(BaseModel):
    summary: str


class JobFieldUpdate(BaseModel):
    job_field: str


class TemplateUpdate(BaseModel):
    template_id: str


class ImageUpdate(BaseModel):
    image_data_url: str = ""


class ItemValue(BaseModel):
    value: str = ""
