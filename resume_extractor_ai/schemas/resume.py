"""Target resume record shape the extraction prompt asks the model to fill."""

from typing import Any, List, Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator


class _LenientModel(BaseModel):
    """Model output may use null for anything and numbers for years or phones."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    @field_validator("*", mode="before")
    @classmethod
    def _none_to_default(cls, value: Any, info: ValidationInfo) -> Any:
        if value is not None:
            return value
        return cls.model_fields[info.field_name].get_default(call_default_factory=True)


class PersonalInfo(_LenientModel):
    """Contact block of the resume."""

    name: str = Field(default="", description="Full name")
    email: str = Field(default="", description="Email address")
    phone: str = Field(default="", description="Phone number")


class WorkExperience(_LenientModel):
    """One position, in the order it appears in the document."""

    title: str = Field(default="", description="Job title")
    company: str = Field(default="", description="Company or employer name")
    duration: str = Field(default="", description="Date range or length, as written")
    description: str = Field(default="", description="Responsibilities and achievements")


class Education(_LenientModel):
    """One degree or course of study."""

    degree: str = Field(default="", description="Degree or qualification")
    institution: str = Field(default="", description="School or university")
    year: str = Field(default="", description="Graduation year or date range")


class ResumeRecord(_LenientModel):
    """Normalized resume record; every textual field is in the target language."""

    personal_info: PersonalInfo = Field(default_factory=PersonalInfo)
    summary: str = Field(default="", description="Professional summary")
    work_experience: List[WorkExperience] = Field(default_factory=list)
    education: List[Education] = Field(default_factory=list)
    technical_skills: List[str] = Field(default_factory=list)
    certifications: List[str] = Field(default_factory=list)

    @classmethod
    def from_structured_data(cls, data: Mapping[str, Any]) -> "ResumeRecord":
        """Validate decoded model output; unknown keys are ignored, missing ones default to empty."""
        return cls.model_validate(dict(data))


# Field names and nesting rendered into the extraction prompt
RESUME_RECORD_SHAPE: dict = {
    "personal_info": {"name": "...", "email": "...", "phone": "..."},
    "summary": "...",
    "work_experience": [
        {"title": "...", "company": "...", "duration": "...", "description": "..."}
    ],
    "education": [
        {"degree": "...", "institution": "...", "year": "..."}
    ],
    "technical_skills": ["skill1", "skill2"],
    "certifications": ["cert1", "cert2"],
}
