import uuid
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class PostCreate(BaseModel):
    """Field limits enforced by the post store. reply_to_id is an opaque id here."""

    poster_name: str = Field(min_length=1, max_length=100)
    content: str = Field(min_length=1, max_length=25000)
    reply_to_id: Optional[str] = None

    @field_validator('reply_to_id', mode='before')
    @classmethod
    def blank_reply_to_is_none(cls, value):
        # An empty hidden form field means "not a reply".
        if isinstance(value, str) and value.strip() == '':
            return None
        return value


class PostCreateRequest(PostCreate):
    """What the web forms and the JSON API accept: reply_to_id must also be a UUID."""

    reply_to_id: Optional[uuid.UUID] = None
