from datetime import datetime

from pydantic import BaseModel, Field


class TestimonialCreate(BaseModel):
    quote: str = Field(min_length=1)
    author_name: str = Field(min_length=1)
    author_location: str | None = None
    image: str | None = None
    gallery_images: list[str] | None = None
    sort_order: int = 0


class TestimonialUpdate(BaseModel):
    """Partial update: only fields present in the body are written."""
    quote: str | None = None
    author_name: str | None = None
    author_location: str | None = None
    image: str | None = None
    gallery_images: list[str] | None = None
    sort_order: int | None = None


class TestimonialOut(BaseModel):
    id: int
    quote: str
    author_name: str
    author_location: str | None
    image: str | None
    gallery_images: list[str]
    sort_order: int
    created_at: datetime | None
    updated_at: datetime | None
