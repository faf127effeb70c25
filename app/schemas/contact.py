"""
Contact form submission sent from the public website.
Accepts the camelCase keys the site posts (fatherName, recaptchaToken) as well as snake_case.
"""
from pydantic import AliasChoices, BaseModel, ConfigDict, EmailStr, Field, field_validator
from typing import Optional


class ContactRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str
    father_name: str = Field(validation_alias=AliasChoices("father_name", "fatherName"))
    nic: Optional[str] = None
    category: str
    email: Optional[EmailStr] = None
    phone: str
    service: str
    message: Optional[str] = None
    recaptcha_token: str = Field(validation_alias=AliasChoices("recaptcha_token", "recaptchaToken"))

    @field_validator("email", "nic", "message", mode="before")
    @classmethod
    def blank_optional(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("name", "father_name", "category", "phone", "service", "recaptcha_token")
    @classmethod
    def required_text(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name, father name, category, phone, service and reCAPTCHA token are required")
        return v
