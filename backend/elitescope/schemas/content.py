"""Schemas for ungated content: posts, events and publications."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict

from elitescope.core.shared_models import EventStatus


class Post(BaseModel):
    """Schema for a news or blog Post."""

    id: int
    title: str
    slug: str
    excerpt: Optional[str] = None
    content: Optional[str] = None
    category: Optional[str] = None
    author: Optional[str] = None
    publish_date: datetime
    image_url: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class Event(BaseModel):
    """Schema for a calendar Event."""

    id: int
    title: str
    description: Optional[str] = None
    event_type: Optional[str] = None
    start_date: datetime
    end_date: Optional[datetime] = None
    location: Optional[str] = None
    registration_url: Optional[str] = None
    recording_url: Optional[str] = None
    status: EventStatus = EventStatus.UPCOMING

    model_config = ConfigDict(from_attributes=True)


class Publication(BaseModel):
    """Schema for a Publication."""

    id: int
    title: str
    authors: Optional[str] = None
    publication_type: Optional[str] = None
    publication_date: Optional[datetime] = None
    journal: Optional[str] = None
    abstract: Optional[str] = None
    url: Optional[str] = None
    pdf_url: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)
