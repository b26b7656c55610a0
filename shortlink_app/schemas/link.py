from pydantic import BaseModel, HttpUrl, Field, ConfigDict, TypeAdapter, ValidationError, field_validator
from datetime import datetime
from typing import Optional

_http_url = TypeAdapter(HttpUrl)


class LinkCreate(BaseModel):
    code: str = Field(..., min_length=3, description="Short code to register")
    url: str = Field(..., description="Destination URL (http or https)")

    @field_validator("url")
    @classmethod
    def url_must_be_http(cls, value: str) -> str:
        """Validate as an HTTP URL but keep the string exactly as submitted"""
        try:
            _http_url.validate_python(value)
        except ValidationError:
            raise ValueError("url must be a valid http(s) URL")
        return value


class LinkCreated(BaseModel):
    short_link_id: int = Field(..., alias="shortLinkId")

    model_config = ConfigDict(populate_by_name=True)


class LinkResponse(BaseModel):
    """Serializes a ShortLink row straight from the ORM object"""
    id: int
    code: str
    original_url: str
    created_at: Optional[datetime] = None

    # Pydantic V2 style configuration
    model_config = ConfigDict(from_attributes=True)
