"""Contact Form Schemas — inquiry submission and creation result.

Invariants:
    - email is checked for syntax only and forwarded exactly as submitted
    - Display-name forms ("Name <addr>") are rejected
"""

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, Field, field_validator

EMAIL_MAX_LENGTH = 200


class ContactFormCreate(BaseModel):
    """Body of POST /external/contact-form. idVehicle must be a JSON integer."""
    idVehicle: int = Field(gt=0, strict=True)
    name: str = Field(min_length=1, max_length=200)
    email: str = Field(min_length=1, max_length=EMAIL_MAX_LENGTH)
    phone: str = Field(min_length=1, max_length=50)
    message: str = Field(min_length=1, max_length=1000)

    @field_validator("email")
    @classmethod
    def check_email_syntax(cls, v: str) -> str:
        if "<" in v or ">" in v:
            raise ValueError("value is not a valid email address")
        try:
            validate_email(v, check_deliverability=False)
        except EmailNotValidError as e:
            raise ValueError(f"value is not a valid email address: {e}") from e
        return v


class ContactFormCreated(BaseModel):
    idContactForm: int
