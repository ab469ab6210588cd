from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, ConfigDict, StringConstraints, field_validator
from pydantic.alias_generators import to_camel

from app.slug import slugify


class CamelModel(BaseModel):
    """Accepts and emits camelCase keys; snake_case is accepted on input too."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# Whitespace is stripped before the length limits apply.
CategoryName = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=255)]


# --- Content ---

class ContentBase(CamelModel):
    category_name: CategoryName
    summarize_content: str | None = None
    content: str = ""

    @field_validator("category_name")
    @classmethod
    def _category_name_has_slug(cls, value: str) -> str:
        if not slugify(value):
            raise ValueError("categoryName must contain at least one letter or digit")
        return value


class ContentCreate(ContentBase):
    pass


class ContentUpdate(ContentBase):
    pass


class ContentResponse(CamelModel):
    id: int
    category_name: str
    summarize_content: str | None
    content: str
    slug: str
    created_at: datetime
    updated_at: datetime
    model_config = ConfigDict(from_attributes=True)
