# app/schemas/common.py
# Constrained field types shared by the request schemas
import re
from typing import Annotated, List, Optional

from pydantic import AfterValidator, BaseModel, EmailStr, StringConstraints

HEX_COLOR_RE = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")

# Length limits mirror the column sizes in app/models
EMAIL_MAX_LENGTH = 100


def _hex_color(value: str) -> str:
    if not HEX_COLOR_RE.match(value):
        raise ValueError("Color must be a hex color like #3498db")
    return value if value.startswith("#") else f"#{value}"


def _normalize_email(value: str) -> str:
    # Emails compare case-insensitively, so they are stored lowercased
    value = value.lower()
    if len(value) > EMAIL_MAX_LENGTH:
        raise ValueError(f"Email must be at most {EMAIL_MAX_LENGTH} characters")
    return value


def _trimmed(min_length: int, max_length: int) -> StringConstraints:
    return StringConstraints(strip_whitespace=True, min_length=min_length, max_length=max_length)


Username = Annotated[str, _trimmed(3, 50)]
Email = Annotated[EmailStr, AfterValidator(_normalize_email)]
TeamName = Annotated[str, _trimmed(2, 50)]
ProjectName = Annotated[str, _trimmed(3, 255)]
TaskTitle = Annotated[str, _trimmed(3, 255)]
TagName = Annotated[str, _trimmed(1, 100)]
StatusName = Annotated[str, _trimmed(1, 255)]
EventTitle = Annotated[str, _trimmed(1, 255)]
HexColor = Annotated[str, StringConstraints(strip_whitespace=True), AfterValidator(_hex_color)]
Password = Annotated[str, StringConstraints(min_length=6)]


class CreatedId(BaseModel):
    id: int


class MessageOut(BaseModel):
    message: str


class ValidationIssue(BaseModel):
    field: str
    msg: str
    type: Optional[str] = None


class ValidationErrorOut(BaseModel):
    message: str = "Validation failed"
    errors: List[ValidationIssue]
